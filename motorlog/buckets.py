"""Calendar-month time series for charting."""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .calculations import as_number, classify_trend, mean, month_key, percent_change
from .category import ExpenseCategory, TrendDirection
from .date_range import DateRange
from .expense import Expense
from .trip import Trip

# Recent-vs-previous spending change needed to call a direction
SPENDING_THRESHOLD_PERCENT = 5.0
SPENDING_WINDOW_MONTHS = 3


@dataclass
class MonthlyBucket:
    """Expense amounts per category for one calendar month."""

    month_key: str
    fuel: float = 0.0
    service: float = 0.0
    other: float = 0.0
    count: int = 0

    @property
    def total(self) -> float:
        return self.fuel + self.service + self.other

    def add(self, expense: Expense) -> None:
        if expense.category is ExpenseCategory.FUEL:
            self.fuel += expense.amount
        elif expense.category is ExpenseCategory.SERVICE:
            self.service += expense.amount
        else:
            self.other += expense.amount
        self.count += 1


@dataclass
class TripBucket:
    month_key: str
    trips: int = 0
    distance: float = 0.0
    cost: float = 0.0


@dataclass
class MonthlyGrowth:
    month_key: str
    growth_percent: float


@dataclass
class SpendingTrend:
    direction: TrendDirection = TrendDirection.FLAT
    change_percent: float = 0.0


def bucket_by_month(
    expenses: Iterable[Expense], date_range: DateRange
) -> List[MonthlyBucket]:
    """
    One bucket per calendar month in the range, oldest first.

    Months without expenses are present with zero amounts so chart axes
    stay contiguous.
    """
    buckets: Dict[str, MonthlyBucket] = {
        key: MonthlyBucket(key) for key in date_range.month_keys()
    }
    for expense in expenses:
        if expense.date in date_range:
            buckets[month_key(expense.date)].add(expense)
    return list(buckets.values())


def bucket_trips_by_month(trips: Iterable[Trip], date_range: DateRange) -> List[TripBucket]:
    """Trip count, distance and cost per calendar month, gap-filled."""
    buckets: Dict[str, TripBucket] = {
        key: TripBucket(key) for key in date_range.month_keys()
    }
    for trip in trips:
        if trip.date not in date_range:
            continue
        bucket = buckets[month_key(trip.date)]
        bucket.trips += 1
        bucket.distance += as_number(trip.distance)
        bucket.cost += as_number(trip.total_cost)
    return list(buckets.values())


def monthly_growth(buckets: List[MonthlyBucket]) -> List[MonthlyGrowth]:
    """Month-over-month change of bucket totals, from the second month on."""
    return [
        MonthlyGrowth(current.month_key, percent_change(previous.total, current.total))
        for previous, current in zip(buckets, buckets[1:])
    ]


def spending_trend(buckets: List[MonthlyBucket]) -> SpendingTrend:
    """
    Compare the mean total of the last three months with the three before.

    Flat when there are fewer than two months or nothing was spent in the
    earlier window.
    """
    if len(buckets) < 2:
        return SpendingTrend()
    window = SPENDING_WINDOW_MONTHS
    recent = buckets[-window:]
    previous = buckets[-2 * window:-window]
    previous_mean = mean(b.total for b in previous)
    if previous_mean <= 0:
        return SpendingTrend()
    change = percent_change(previous_mean, mean(b.total for b in recent))
    return SpendingTrend(classify_trend(change, SPENDING_THRESHOLD_PERCENT), change)
