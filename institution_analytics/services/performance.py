"""
Per-scholarship performance and applicant geography.
"""
from collections import Counter, defaultdict

from ..models.schemas import (
    AnalyticsEvent,
    Application,
    CountryCount,
    Scholarship,
    ScholarshipPerformance,
)
from .trends import percentage

SCHOLARSHIP_VIEW = "scholarship_view"
PENDING_STATUSES = {"pending", "under_review"}
UNSPECIFIED_COUNTRY = "Unspecified"
TOP_COUNTRIES = 10


def is_pending(application: Application) -> bool:
    return application.status in PENDING_STATUSES


def calculate_scholarship_performance(
    scholarships: list[Scholarship],
    applications: list[Application],
    events: list[AnalyticsEvent],
) -> list[ScholarshipPerformance]:
    """Counters and rates per scholarship, most applied-to first."""
    apps_by_scholarship = defaultdict(list)
    for application in applications:
        apps_by_scholarship[application.scholarship_id].append(application)

    views_by_scholarship = Counter(
        e.scholarship_id for e in events
        if e.event_type == SCHOLARSHIP_VIEW and e.scholarship_id is not None
    )

    performance = []
    for scholarship in scholarships:
        apps = apps_by_scholarship.get(scholarship.id, [])
        accepted = sum(1 for a in apps if a.status == "accepted")
        views = views_by_scholarship.get(scholarship.id, 0)

        performance.append(ScholarshipPerformance(
            scholarship_id=scholarship.id,
            title=scholarship.title,
            amount=scholarship.amount,
            applications_count=len(apps),
            accepted_count=accepted,
            rejected_count=sum(1 for a in apps if a.status == "rejected"),
            pending_count=sum(1 for a in apps if is_pending(a)),
            views_count=views,
            conversion_rate=percentage(len(apps), views),
            success_rate=percentage(accepted, len(apps)),
        ))

    # sorted() is stable, ties keep the store's order
    return sorted(performance, key=lambda p: p.applications_count, reverse=True)


def applicant_country(application: Application) -> str:
    profile = application.profile
    if profile is None:
        return UNSPECIFIED_COUNTRY
    return profile.nationality or profile.country or UNSPECIFIED_COUNTRY


def calculate_applications_by_country(
    applications: list[Application],
    limit: int = TOP_COUNTRIES,
) -> list[CountryCount]:
    """Top countries by application count; ties keep first-seen order."""
    counts = Counter(applicant_country(a) for a in applications)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CountryCount(name=name, value=count) for name, count in ranked[:limit]]
