"""
View-to-application engagement metrics.
"""
from collections import defaultdict

from ..models.schemas import AnalyticsEvent, Application, EngagementMetrics
from .performance import SCHOLARSHIP_VIEW
from .timeframe import to_utc
from .trends import percentage

SECONDS_PER_DAY = 60 * 60 * 24


def calculate_average_time_to_apply(
    views: list[AnalyticsEvent],
    applications: list[Application],
) -> float:
    """Mean days between an application and the applicant's latest earlier view of it.

    Applications with no earlier view by the same user on the same scholarship
    are left out of the average.
    """
    view_times = defaultdict(list)
    for event in views:
        if event.user_id is not None and event.scholarship_id is not None:
            view_times[(event.user_id, event.scholarship_id)].append(to_utc(event.created_at))

    differences = []
    for application in applications:
        applied_at = to_utc(application.created_at)
        earlier = [
            viewed_at
            for viewed_at in view_times.get((application.student_id, application.scholarship_id), [])
            if viewed_at < applied_at
        ]
        if earlier:
            differences.append((applied_at - max(earlier)).total_seconds() / SECONDS_PER_DAY)

    return sum(differences) / len(differences) if differences else 0


def calculate_engagement_metrics(
    events: list[AnalyticsEvent],
    applications: list[Application],
) -> EngagementMetrics:
    views = [e for e in events if e.event_type == SCHOLARSHIP_VIEW]
    total_views = len(views)
    unique_viewers = len({e.user_id for e in views})
    total_applications = len(applications)

    return EngagementMetrics(
        total_views=total_views,
        unique_viewers=unique_viewers,
        conversion_rate=percentage(total_applications, total_views),
        engagement_rate=percentage(total_applications, unique_viewers),
        avg_time_to_apply=calculate_average_time_to_apply(views, applications),
        bounce_rate=percentage(total_views - unique_viewers, total_views),
    )
