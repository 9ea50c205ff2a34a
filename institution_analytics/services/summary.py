"""
Narrative summary of an analytics result using Gemini AI, with a rule-based fallback.
"""
import logging
from google.genai import types

from ..config import GEMINI_MODEL
from ..dependencies import gemini_client
from ..models.schemas import AggregationResult
from ..prompts import ANALYTICS_SUMMARY_PROMPT

logger = logging.getLogger(__name__)

TIMEFRAME_LABELS = {
    "7d": "7 days",
    "30d": "30 days",
    "90d": "90 days",
    "1y": "year",
}


def fallback_summary(result: AggregationResult) -> str:
    """Deterministic summary assembled from the overview and insight titles."""
    overview = result.overview
    summary = (
        f"{overview.total_applications} application{'s' if overview.total_applications != 1 else ''} "
        f"across {overview.total_scholarships} scholarship{'s' if overview.total_scholarships != 1 else ''}, "
        f"with a {overview.success_rate:.1f}% success rate."
    )
    if result.insights:
        titles = ", ".join(i.title.lower() for i in result.insights)
        summary += f" Highlights: {titles}."
        actionable = next((i for i in result.insights if i.actionable), None)
        if actionable:
            summary += f" Next step: {actionable.suggestion}."
    return summary


def build_summary_prompt(result: AggregationResult, timeframe: str) -> str:
    overview = result.overview
    trend = result.trends.application_trend
    insights_text = "\n".join(
        f"- [{'actionable' if i.actionable else 'info'}] {i.title}: {i.description}. {i.suggestion}"
        for i in result.insights
    ) or "- None"

    return ANALYTICS_SUMMARY_PROMPT.format(
        timeframe=TIMEFRAME_LABELS.get(timeframe, timeframe),
        total_scholarships=overview.total_scholarships,
        active_scholarships=overview.active_scholarships,
        total_applications=overview.total_applications,
        accepted_applications=overview.accepted_applications,
        pending_applications=overview.pending_applications,
        success_rate=overview.success_rate,
        total_views=result.engagement.total_views,
        unique_viewers=result.engagement.unique_viewers,
        application_trend=f"{trend.direction} ({trend.value:+.1f}%)",
        next_week_applications=result.predictions.next_week_applications,
        insights=insights_text,
    )


def summarize_analytics(result: AggregationResult, timeframe: str) -> tuple[str, str]:
    """Return (summary, generated_by) where generated_by is "gemini" or "rules"."""
    if not gemini_client:
        logger.warning("Gemini client not initialized, using rule-based summary")
        return fallback_summary(result), "rules"

    try:
        logger.debug(f"Requesting analytics summary from {GEMINI_MODEL}...")
        response = gemini_client.models.generate_content(
            model=GEMINI_MODEL,
            contents=build_summary_prompt(result, timeframe),
            config=types.GenerateContentConfig(max_output_tokens=300, temperature=0.3)
        )
        summary = (response.text or "").strip()
        if summary:
            return summary, "gemini"
        logger.warning("Empty Gemini summary, using rule-based summary")
    except Exception as e:
        logger.error(f"Gemini summary failed: {type(e).__name__}: {e}")

    return fallback_summary(result), "rules"
