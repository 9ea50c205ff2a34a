"""
Daily time-series bucketing.
"""
from collections import Counter
from datetime import datetime, timedelta
from typing import Iterable

from ..models.schemas import TimeBucket
from .timeframe import to_utc


def bucket_label(day) -> str:
    """Short day/month label, e.g. 'Oct 19'."""
    return f"{day.strftime('%b')} {day.day}"


def generate_time_series(
    records: Iterable,
    days: int,
    now: datetime,
    date_field: str = "created_at",
) -> list[TimeBucket]:
    """Count records per UTC calendar day over the `days` days ending today.

    Always returns `days` buckets, oldest first, with empty days zero-filled.
    Records without a value in `date_field` are ignored.
    """
    counts = Counter()
    for record in records:
        moment = getattr(record, date_field, None)
        if moment is not None:
            counts[to_utc(moment).date()] += 1

    today = to_utc(now).date()
    buckets = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        buckets.append(TimeBucket(
            date=day.isoformat(),
            label=bucket_label(day),
            value=counts.get(day, 0),
        ))
    return buckets
