"""Totals and averages over logged trips."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from .calculations import as_number, safe_divide
from .date_range import DateRange
from .trip import Trip


@dataclass
class TripStats:
    total_trips: int = 0
    total_distance: float = 0.0
    total_cost: float = 0.0
    average_distance: float = 0.0
    average_cost: float = 0.0
    earliest_date: Optional[date] = None
    latest_date: Optional[date] = None
    insufficient_data: bool = True


def compute_trip_stats(
    trips: Iterable[Trip], date_range: Optional[DateRange] = None
) -> TripStats:
    """
    Sum distance and cost across trips.

    A trip whose distance or cost is not a number contributes 0 for that
    field instead of failing the whole report.
    """
    if date_range is not None:
        trips = [t for t in trips if t.date in date_range]
    trips = list(trips)
    if not trips:
        return TripStats()

    total_distance = sum(as_number(t.distance) for t in trips)
    total_cost = sum(as_number(t.total_cost) for t in trips)
    dates = [t.date for t in trips]

    return TripStats(
        total_trips=len(trips),
        total_distance=total_distance,
        total_cost=total_cost,
        average_distance=safe_divide(total_distance, len(trips)),
        average_cost=safe_divide(total_cost, len(trips)),
        earliest_date=min(dates),
        latest_date=max(dates),
        insufficient_data=False,
    )
