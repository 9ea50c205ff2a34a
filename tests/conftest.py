"""
Shared fixtures: record factories and an in-memory Supabase stand-in.
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from institution_analytics.models.schemas import AnalyticsEvent, Application, Scholarship

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float, now: datetime = NOW) -> datetime:
    return now - timedelta(days=days)


def make_scholarship(id="sch-1", title="Merit Award", amount=5000, is_active=True,
                     deadline=None, institution_id="inst-1") -> Scholarship:
    return Scholarship(
        id=id,
        institution_id=institution_id,
        title=title,
        amount=amount,
        is_active=is_active,
        application_deadline=deadline,
    )


def make_application(id="app-1", scholarship_id="sch-1", student_id="stu-1", status="pending",
                     created_at=None, nationality=None, country=None) -> Application:
    profile = None
    if nationality is not None or country is not None:
        profile = {"nationality": nationality, "country": country}
    return Application(
        id=id,
        scholarship_id=scholarship_id,
        student_id=student_id,
        status=status,
        created_at=created_at or days_ago(1),
        profile=profile,
    )


def make_view(user_id="stu-1", scholarship_id="sch-1", created_at=None, id=None) -> AnalyticsEvent:
    return AnalyticsEvent(
        id=id,
        event_type="scholarship_view",
        user_id=user_id,
        scholarship_id=scholarship_id,
        created_at=created_at or days_ago(2),
    )


class FakeQuery:
    """Chainable query recording the PostgREST calls made on one table."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.operations = []

    def _record(self, name, *args, **kwargs):
        self.operations.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def in_(self, *args, **kwargs):
        return self._record("in_", *args, **kwargs)

    def gte(self, *args, **kwargs):
        return self._record("gte", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def update(self, *args, **kwargs):
        return self._record("update", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._record("insert", *args, **kwargs)

    def execute(self):
        self.client.executed.append(self)
        if self.table in self.client.fail_on:
            raise RuntimeError(f"connection to {self.table} refused")
        return SimpleNamespace(data=list(self.client.tables.get(self.table, [])))

    def operation(self, name):
        """Arguments of the first call named `name`, or None."""
        for op_name, args, kwargs in self.operations:
            if op_name == name:
                return args, kwargs
        return None


class FakeSupabase:
    """Stand-in for the Supabase client returning canned rows per table."""

    def __init__(self, tables=None, fail_on=()):
        self.tables = tables or {}
        self.fail_on = set(fail_on)
        self.executed = []

    def table(self, name):
        return FakeQuery(self, name)

    def queries_on(self, table):
        return [q for q in self.executed if q.table == table]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fake_supabase():
    return FakeSupabase()
