"""
Rule-based insights over aggregated institution metrics.

Each rule looks at the metrics on its own and yields at most one insight,
so the output order is the rule order below.
"""
import logging
from dataclasses import dataclass
from datetime import datetime

from ..models.schemas import (
    Application,
    EngagementMetrics,
    Insight,
    Scholarship,
    ScholarshipPerformance,
)
from .timeframe import to_utc

logger = logging.getLogger(__name__)

LOW_ACCEPTANCE_RATE = 10
LOW_ACCEPTANCE_MIN_APPLICATIONS = 20
DIVERSITY_MIN_COUNTRIES = 10
HIGH_CONVERSION_RATE = 15
LOW_CONVERSION_RATE = 5
LOW_CONVERSION_MIN_VIEWS = 50


@dataclass
class InsightContext:
    """Inputs shared by every insight rule."""
    scholarships: list[Scholarship]
    applications: list[Application]
    performance: list[ScholarshipPerformance]
    success_rate: float
    engagement: EngagementMetrics
    now: datetime


def top_performer_insight(ctx: InsightContext) -> Insight | None:
    if not ctx.performance or ctx.performance[0].applications_count < 1:
        return None
    top = ctx.performance[0]
    return Insight(
        type="top_performer",
        title="Most popular scholarship",
        description=f'"{top.title}" received {top.applications_count} applications',
        actionable=True,
        suggestion="Consider creating similar scholarships",
    )


def low_acceptance_insight(ctx: InsightContext) -> Insight | None:
    if ctx.success_rate < LOW_ACCEPTANCE_RATE and len(ctx.applications) > LOW_ACCEPTANCE_MIN_APPLICATIONS:
        return Insight(
            type="low_acceptance",
            title="Low acceptance rate",
            description=f"Only {ctx.success_rate:.1f}% of applications are accepted",
            actionable=True,
            suggestion="Review your criteria or increase the number of awards",
        )
    return None


def geographic_diversity_insight(ctx: InsightContext) -> Insight | None:
    nationalities = {
        a.profile.nationality for a in ctx.applications
        if a.profile is not None and a.profile.nationality
    }
    if len(nationalities) > DIVERSITY_MIN_COUNTRIES:
        return Insight(
            type="geographic_diversity",
            title="Excellent geographic diversity",
            description=f"Applicants from {len(nationalities)} different countries",
            actionable=False,
            suggestion="Keep promoting your scholarships internationally",
        )
    return None


def expired_scholarships_insight(ctx: InsightContext) -> Insight | None:
    now = to_utc(ctx.now)
    expired = [
        s for s in ctx.scholarships
        if s.is_active and s.application_deadline is not None
        and to_utc(s.application_deadline) < now
    ]
    if expired:
        return Insight(
            type="expired_scholarships",
            title="Expired scholarships",
            description=f"{len(expired)} active scholarships are past their deadline",
            actionable=True,
            suggestion="Archive these scholarships or extend their deadlines",
        )
    return None


def conversion_insight(ctx: InsightContext) -> Insight | None:
    rate = ctx.engagement.conversion_rate
    if rate > HIGH_CONVERSION_RATE:
        return Insight(
            type="high_conversion",
            title="Excellent conversion rate",
            description=f"{rate:.1f}% of visitors apply",
            actionable=False,
            suggestion="Your scholarships are very attractive",
        )
    if rate < LOW_CONVERSION_RATE and ctx.engagement.total_views > LOW_CONVERSION_MIN_VIEWS:
        return Insight(
            type="low_conversion",
            title="Low conversion rate",
            description=f"Only {rate:.1f}% of visitors apply",
            actionable=True,
            suggestion="Improve the description or simplify the application process",
        )
    return None


INSIGHT_RULES = [
    top_performer_insight,
    low_acceptance_insight,
    geographic_diversity_insight,
    expired_scholarships_insight,
    conversion_insight,
]


def generate_insights(ctx: InsightContext) -> list[Insight]:
    insights = []
    for rule in INSIGHT_RULES:
        insight = rule(ctx)
        if insight is not None:
            insights.append(insight)
    logger.debug(f"Insights generated: {[i.type for i in insights]}")
    return insights
