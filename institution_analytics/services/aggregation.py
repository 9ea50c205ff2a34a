"""
Institution analytics aggregation engine.

A pure function of the institution's scholarships, applications and
analytics events: nothing is read from or written to the record store here,
and the reference instant `now` is passed in so repeated calls with the same
inputs produce the same result.
"""
import logging
from datetime import datetime, timezone

from ..models.schemas import (
    AggregationResult,
    AnalyticsEvent,
    Application,
    Geographic,
    Overview,
    Scholarship,
    TimeSeries,
)
from .engagement import calculate_engagement_metrics
from .insights import InsightContext, generate_insights
from .performance import (
    SCHOLARSHIP_VIEW,
    calculate_applications_by_country,
    calculate_scholarship_performance,
    is_pending,
)
from .timeframe import resolve_midpoint, timeframe_days, to_utc
from .timeseries import generate_time_series
from .trends import calculate_trends, generate_predictions, percentage

logger = logging.getLogger(__name__)


def calculate_overview(scholarships: list[Scholarship], applications: list[Application]) -> Overview:
    total_scholarships = len(scholarships)
    total_applications = len(applications)
    accepted = sum(1 for a in applications if a.status == "accepted")

    return Overview(
        total_scholarships=total_scholarships,
        active_scholarships=sum(1 for s in scholarships if s.is_active),
        total_applications=total_applications,
        accepted_applications=accepted,
        rejected_applications=sum(1 for a in applications if a.status == "rejected"),
        pending_applications=sum(1 for a in applications if is_pending(a)),
        success_rate=percentage(accepted, total_applications),
        total_funding=sum(s.amount for s in scholarships),
        avg_applications_per_scholarship=(
            total_applications / total_scholarships if total_scholarships > 0 else 0
        ),
    )


def calculate_institution_analytics(
    scholarships: list[Scholarship],
    applications: list[Application],
    events: list[AnalyticsEvent],
    timeframe: str,
    now: datetime | None = None,
) -> AggregationResult:
    """Aggregate the three record sets over the given timeframe.

    Raises ValueError for an unknown timeframe code.
    """
    now = to_utc(now or datetime.now(timezone.utc))
    days = timeframe_days(timeframe)

    logger.debug(
        f"Aggregating {len(scholarships)} scholarships, {len(applications)} applications, "
        f"{len(events)} events over {timeframe} ({days} days)"
    )

    overview = calculate_overview(scholarships, applications)
    view_events = [e for e in events if e.event_type == SCHOLARSHIP_VIEW]

    applications_by_day = generate_time_series(applications, days, now)
    views_by_day = generate_time_series(view_events, days, now)

    performance = calculate_scholarship_performance(scholarships, applications, events)
    engagement = calculate_engagement_metrics(events, applications)

    insights = generate_insights(InsightContext(
        scholarships=scholarships,
        applications=applications,
        performance=performance,
        success_rate=overview.success_rate,
        engagement=engagement,
        now=now,
    ))

    return AggregationResult(
        overview=overview,
        time_series=TimeSeries(
            applications_by_day=applications_by_day,
            views_by_day=views_by_day,
        ),
        geographic=Geographic(
            applications_by_country=calculate_applications_by_country(applications),
        ),
        scholarship_performance=performance,
        trends=calculate_trends(applications, resolve_midpoint(timeframe, now)),
        predictions=generate_predictions(applications_by_day),
        engagement=engagement,
        insights=insights,
    )
