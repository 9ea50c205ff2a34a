"""
Institution data export to CSV or JSON.
"""
import csv
import io
import json
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

EXPORT_TYPES = {"scholarships", "applications", "analytics"}
ANALYTICS_EXPORT_LIMIT = 1000

SCHOLARSHIP_HEADERS = [
    "ID", "Title", "Description", "Amount", "Currency", "Type",
    "Study level", "Fields", "Deadline", "Status", "Created at",
]
APPLICATION_HEADERS = [
    "ID", "Applicant", "Email", "Phone", "Scholarship", "Amount",
    "Status", "Applied at", "Reviewed at", "Notes",
]
ANALYTICS_HEADERS = [
    "ID", "Event type", "Date", "Scholarship ID", "Session ID", "Data",
]


def _cell(value) -> str:
    return "" if value is None else str(value)


def _date_only(value: str | None) -> str:
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def to_csv(headers: list[str], rows: list[list]) -> str:
    """Render rows as CSV with every cell quoted."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(value) for value in row])
    return output.getvalue()


def scholarship_rows(scholarships: list[dict]) -> list[list]:
    return [
        [
            s.get("id"),
            s.get("title"),
            s.get("description"),
            s.get("amount"),
            s.get("currency"),
            s.get("scholarship_type"),
            s.get("study_level"),
            "; ".join(s.get("study_fields") or []),
            s.get("application_deadline"),
            "Active" if s.get("is_active") else "Inactive",
            _date_only(s.get("created_at")),
        ]
        for s in scholarships
    ]


def application_rows(applications: list[dict]) -> list[list]:
    rows = []
    for a in applications:
        profile = a.get("profiles") or {}
        scholarship = a.get("scholarships") or {}
        rows.append([
            a.get("id"),
            profile.get("full_name"),
            profile.get("email"),
            profile.get("phone"),
            scholarship.get("title"),
            scholarship.get("amount"),
            a.get("status"),
            _date_only(a.get("created_at")),
            _date_only(a.get("reviewed_at")),
            a.get("notes"),
        ])
    return rows


def event_rows(events: list[dict]) -> list[list]:
    return [
        [
            e.get("id"),
            e.get("event_type"),
            e.get("created_at"),
            e.get("scholarship_id"),
            e.get("session_id"),
            json.dumps(e.get("event_data") or {}),
        ]
        for e in events
    ]


def _institution_scholarship_ids(supabase, institution_id: str) -> list[str]:
    result = supabase.table("scholarships").select("id").eq("institution_id", institution_id).execute()
    return [row["id"] for row in result.data or []]


def fetch_export_rows(supabase, institution_id: str, data_type: str) -> list[dict]:
    """Raw rows for one export type."""
    if data_type == "scholarships":
        result = supabase.table("scholarships").select("*").eq("institution_id", institution_id).execute()
        return result.data or []

    scholarship_ids = _institution_scholarship_ids(supabase, institution_id)
    if not scholarship_ids:
        return []

    if data_type == "applications":
        result = (
            supabase.table("applications")
            .select("*, scholarships(title, amount), profiles(full_name, email, phone)")
            .in_("scholarship_id", scholarship_ids)
            .execute()
        )
        return result.data or []

    result = (
        supabase.table("analytics_events")
        .select("*")
        .in_("scholarship_id", scholarship_ids)
        .order("created_at", desc=True)
        .limit(ANALYTICS_EXPORT_LIMIT)
        .execute()
    )
    return result.data or []


ROW_BUILDERS = {
    "scholarships": (SCHOLARSHIP_HEADERS, scholarship_rows),
    "applications": (APPLICATION_HEADERS, application_rows),
    "analytics": (ANALYTICS_HEADERS, event_rows),
}


def render_export(data_type: str, rows: list[dict], export_format: str) -> str:
    if export_format == "csv":
        headers, build_rows = ROW_BUILDERS[data_type]
        return to_csv(headers, build_rows(rows))
    return json.dumps(rows, indent=2, default=str)


def export_institution_data(supabase, institution_id: str, data_type: str, export_format: str = "csv") -> str:
    """Export one data set of an institution.

    Raises ValueError for an unsupported data type.
    """
    if data_type not in EXPORT_TYPES:
        raise ValueError(f"Unsupported data type: {data_type}")

    rows = fetch_export_rows(supabase, institution_id, data_type)
    logger.info(f"Exporting {len(rows)} {data_type} rows as {export_format} for institution {institution_id}")
    return render_export(data_type, rows, export_format)


def export_filename(data_type: str, export_format: str, today) -> str:
    return f"{data_type}-{today.isoformat()}.{export_format}"
