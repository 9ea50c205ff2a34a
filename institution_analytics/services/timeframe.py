"""
Timeframe codes and the date windows they resolve to.
"""
from datetime import datetime, timedelta, timezone

DEFAULT_TIMEFRAME = "30d"

# Number of daily buckets per timeframe code
TIMEFRAME_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "1y": 365,
}


def validate_timeframe(timeframe: str) -> str:
    """Return the code unchanged, or raise ValueError for an unknown one."""
    if timeframe not in TIMEFRAME_DAYS:
        supported = ", ".join(TIMEFRAME_DAYS)
        raise ValueError(f"Unsupported timeframe '{timeframe}' (expected one of: {supported})")
    return timeframe


def timeframe_days(timeframe: str) -> int:
    return TIMEFRAME_DAYS[validate_timeframe(timeframe)]


def _one_year_before(moment: datetime) -> datetime:
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        # Feb 29 has no counterpart in the previous year
        return moment.replace(year=moment.year - 1, day=28)


def resolve_start_date(timeframe: str, now: datetime) -> datetime:
    """Start of the lookback window ending at `now`."""
    validate_timeframe(timeframe)
    if timeframe == "1y":
        return _one_year_before(now)
    return now - timedelta(days=TIMEFRAME_DAYS[timeframe])


def resolve_midpoint(timeframe: str, now: datetime) -> datetime:
    """Temporal midpoint of the window, separating the older half from the recent one."""
    start = resolve_start_date(timeframe, now)
    return now - (now - start) / 2


def to_utc(moment: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
