"""
Tests for institution data export.
"""
import json
from datetime import date

import pytest

from institution_analytics.services.export import (
    ANALYTICS_EXPORT_LIMIT,
    export_filename,
    export_institution_data,
    to_csv,
)

from conftest import FakeSupabase


class TestToCsv:
    """Tests for CSV rendering."""

    def test_every_cell_quoted(self):
        assert to_csv(["A", "B"], [[1, None]]) == '"A","B"\n"1",""\n'

    def test_embedded_quotes_doubled(self):
        output = to_csv(["Title"], [['The "Best" Grant']])

        assert output.splitlines()[1] == '"The ""Best"" Grant"'


class TestExportInstitutionData:
    """Tests for each export type."""

    def test_scholarships_csv(self):
        supabase = FakeSupabase({"scholarships": [{
            "id": "s1", "title": "Merit", "description": "For top students", "amount": 5000,
            "currency": "EUR", "scholarship_type": "merit", "study_level": "masters",
            "study_fields": ["Physics", "Maths"], "application_deadline": "2026-12-01",
            "is_active": True, "created_at": "2026-01-15T10:00:00Z",
        }]})

        output = export_institution_data(supabase, "inst-1", "scholarships", "csv")
        header, row = output.splitlines()

        assert header.startswith('"ID","Title"')
        assert '"Physics; Maths"' in row
        assert '"Active"' in row
        assert '"2026-01-15"' in row

    def test_applications_csv(self):
        supabase = FakeSupabase({
            "scholarships": [{"id": "s1"}],
            "applications": [{
                "id": "a1", "status": "accepted", "created_at": "2026-10-01T10:00:00+00:00",
                "reviewed_at": None, "notes": None,
                "profiles": {"full_name": "Ada L.", "email": "ada@example.com", "phone": None},
                "scholarships": {"title": "Merit", "amount": 5000},
            }],
        })

        output = export_institution_data(supabase, "inst-1", "applications", "csv")
        row = output.splitlines()[1]

        assert row == '"a1","Ada L.","ada@example.com","","Merit","5000","accepted","2026-10-01","",""'
        applications_query, = supabase.queries_on("applications")
        assert applications_query.operation("in_") == (("scholarship_id", ["s1"]), {})

    def test_applications_without_scholarships(self):
        supabase = FakeSupabase({"applications": [{"id": "a1"}]})

        output = export_institution_data(supabase, "inst-1", "applications", "json")

        assert json.loads(output) == []
        assert supabase.queries_on("applications") == []

    def test_analytics_is_capped_and_ordered(self):
        supabase = FakeSupabase({
            "scholarships": [{"id": "s1"}],
            "analytics_events": [{"id": "e1", "event_type": "scholarship_view",
                                  "created_at": "2026-10-01T10:00:00Z", "event_data": {"source": "search"}}],
        })

        output = export_institution_data(supabase, "inst-1", "analytics", "csv")

        events_query, = supabase.queries_on("analytics_events")
        assert events_query.operation("limit") == ((ANALYTICS_EXPORT_LIMIT,), {})
        assert events_query.operation("order") == (("created_at",), {"desc": True})
        assert '"{""source"": ""search""}"' in output.splitlines()[1]

    def test_json(self):
        rows = [{"id": "s1", "title": "Merit"}]
        supabase = FakeSupabase({"scholarships": rows})

        assert json.loads(export_institution_data(supabase, "inst-1", "scholarships", "json")) == rows

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            export_institution_data(FakeSupabase(), "inst-1", "profiles", "csv")


def test_export_filename():
    assert export_filename("applications", "csv", date(2026, 10, 19)) == "applications-2026-10-19.csv"
