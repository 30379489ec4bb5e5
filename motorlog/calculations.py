"""Helper functions shared by the analytics modules."""

import math
from datetime import date, datetime
from typing import Iterable, Optional, Union

from .category import TrendDirection

# |change| below this percentage is reported as flat
FLAT_THRESHOLD_PERCENT = 1.0


def to_date(value: Union[date, datetime, str]) -> date:
    """
    Normalize a record date.

    Accepts date objects, datetimes (time is dropped) and ISO strings
    ("2024-03-01" or "2024-03-01T10:15:00").
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"Expected a date or ISO date string, got {value!r}")


def month_key(day: date) -> str:
    """Calendar-month bucket key (YYYY-MM)."""
    return f"{day.year:04d}-{day.month:02d}"


def as_number(value) -> float:
    """Numeric value of a field, 0 for missing/non-numeric/non-finite input."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return float(value)


def safe_divide(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0 when the denominator is not positive."""
    if denominator is None or denominator <= 0:
        return 0.0
    return numerator / denominator


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def percent_change(previous: float, current: float) -> float:
    """Change from previous to current in percent (0 when previous is 0)."""
    if not previous:
        return 0.0
    return (current - previous) / previous * 100


def classify_trend(
    change_percent: Optional[float], threshold: float = FLAT_THRESHOLD_PERCENT
) -> TrendDirection:
    """Map a percent change onto rising/falling/flat."""
    if change_percent is None or abs(change_percent) < threshold:
        return TrendDirection.FLAT
    if change_percent > 0:
        return TrendDirection.RISING
    return TrendDirection.FALLING
