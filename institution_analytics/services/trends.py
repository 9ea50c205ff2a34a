"""
Half-window trend deltas and the naive weekly/monthly application forecast.
"""
import math
from datetime import datetime

from ..models.schemas import Application, Predictions, TimeBucket, Trend, Trends
from .timeframe import to_utc

# Popularity only changes direction beyond this many percent
POPULARITY_DEAD_BAND = 5.0

PREDICTION_WINDOW = 7


def percentage(part: float, whole: float) -> float:
    """part / whole as a percentage, 0 when whole is 0."""
    return (part / whole) * 100 if whole > 0 else 0


def direction_for(value: float, dead_band: float = 0.0) -> str:
    if value > dead_band:
        return "up"
    if value < -dead_band:
        return "down"
    return "stable"


def make_trend(value: float, dead_band: float = 0.0) -> Trend:
    return Trend(value=value, direction=direction_for(value, dead_band), percentage=abs(value))


def split_by_midpoint(applications: list[Application], midpoint: datetime):
    """Return (recent, older): created strictly after the midpoint vs at or before it."""
    midpoint = to_utc(midpoint)
    recent, older = [], []
    for application in applications:
        if to_utc(application.created_at) > midpoint:
            recent.append(application)
        else:
            older.append(application)
    return recent, older


def volume_change(recent_count: int, older_count: int) -> float:
    """Relative change in percent, 0 when the older half is empty."""
    if older_count > 0:
        return ((recent_count - older_count) / older_count) * 100
    return 0


def acceptance_rate_change(recent: list[Application], older: list[Application]) -> float:
    """Percentage-point change of the acceptance rate between the two halves."""
    recent_rate = percentage(sum(1 for a in recent if a.status == "accepted"), len(recent))
    older_rate = percentage(sum(1 for a in older if a.status == "accepted"), len(older))
    return recent_rate - older_rate if older_rate > 0 else 0


def calculate_trends(applications: list[Application], midpoint: datetime) -> Trends:
    recent, older = split_by_midpoint(applications, midpoint)
    volume = volume_change(len(recent), len(older))

    return Trends(
        application_trend=make_trend(volume),
        acceptance_rate_trend=make_trend(acceptance_rate_change(recent, older)),
        popularity_trend=make_trend(volume, dead_band=POPULARITY_DEAD_BAND),
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_predictions(series: list[TimeBucket]) -> Predictions:
    """Extrapolate the last week of daily application counts.

    The average of the last seven days is scaled by 1.1 when the last three
    days beat the first three, by 0.9 when they trail them, and left as is
    otherwise. Confidence stays "low" unless the week saw any application.
    """
    if len(series) < PREDICTION_WINDOW:
        return Predictions(next_week_applications=0, next_month_applications=0, confidence="low")

    values = [bucket.value for bucket in series[-PREDICTION_WINDOW:]]
    avg_daily = sum(values) / len(values)

    first_half = sum(values[:3]) / 3
    second_half = sum(values[-3:]) / 3
    if second_half > first_half:
        factor = 1.1
    elif second_half < first_half:
        factor = 0.9
    else:
        factor = 1.0

    return Predictions(
        next_week_applications=round_half_up(avg_daily * 7 * factor),
        next_month_applications=round_half_up(avg_daily * 30 * factor),
        confidence="medium" if any(v > 0 for v in values) else "low",
    )
