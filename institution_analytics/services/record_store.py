"""
Record store intake: reads an institution's records through the Supabase client.
"""
import logging
from dataclasses import dataclass
from datetime import datetime

from ..models.schemas import AnalyticsEvent, Application, Scholarship

logger = logging.getLogger(__name__)

APPLICATION_COLUMNS = "*, profiles(nationality, country)"


@dataclass
class InstitutionRecords:
    scholarships: list[Scholarship]
    applications: list[Application]
    events: list[AnalyticsEvent]


def fetch_scholarships(supabase, institution_id: str) -> list[Scholarship]:
    result = supabase.table("scholarships").select("*").eq("institution_id", institution_id).execute()
    return [Scholarship.model_validate(row) for row in result.data or []]


def fetch_applications(supabase, scholarship_ids: list[str], start: datetime) -> list[Application]:
    if not scholarship_ids:
        return []
    result = (
        supabase.table("applications")
        .select(APPLICATION_COLUMNS)
        .in_("scholarship_id", scholarship_ids)
        .gte("created_at", start.isoformat())
        .execute()
    )
    return [Application.model_validate(row) for row in result.data or []]


def fetch_events(supabase, scholarship_ids: list[str], start: datetime) -> list[AnalyticsEvent]:
    if not scholarship_ids:
        return []
    result = (
        supabase.table("analytics_events")
        .select("*")
        .in_("scholarship_id", scholarship_ids)
        .gte("created_at", start.isoformat())
        .execute()
    )
    return [AnalyticsEvent.model_validate(row) for row in result.data or []]


def fetch_institution_records(supabase, institution_id: str, start: datetime) -> InstitutionRecords:
    """Run the three reads in sequence; any store error propagates unchanged."""
    logger.debug(f"Fetching records for institution {institution_id} since {start.isoformat()}")

    scholarships = fetch_scholarships(supabase, institution_id)
    scholarship_ids = [s.id for s in scholarships]
    logger.debug(f"Scholarships found: {len(scholarships)}")

    applications = fetch_applications(supabase, scholarship_ids, start)
    logger.debug(f"Applications found: {len(applications)}")

    events = fetch_events(supabase, scholarship_ids, start)
    logger.debug(f"Analytics events found: {len(events)}")

    return InstitutionRecords(scholarships=scholarships, applications=applications, events=events)
