"""
Centralized LLM prompts for all AI-powered features.
"""

# ============================================================================
# INSTITUTION ANALYTICS SUMMARY PROMPT
# ============================================================================

ANALYTICS_SUMMARY_PROMPT = """You are an analytics assistant for a scholarship provider. Summarize how the institution's scholarships performed over the last {timeframe}.

OVERVIEW:
- Scholarships: {total_scholarships} ({active_scholarships} active)
- Applications: {total_applications} ({accepted_applications} accepted, {pending_applications} pending)
- Success rate: {success_rate:.1f}%
- Scholarship page views: {total_views} from {unique_viewers} unique visitors
- Application trend: {application_trend}
- Expected applications next week: {next_week_applications}

INSIGHTS:
{insights}

Write a 2-3 sentence summary for the institution's staff. Mention the most important insight and, if any insight is actionable, the single most useful next step.
Return ONLY the summary text, no JSON."""
