"""
Fuel price per litre over time.

The trend heuristic compares the mean price of the first third of the
date-ordered series with the mean of the last third; with fewer than three
points each "third" is a single point. It is a coarse, explainable signal,
not a regression.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from .calculations import classify_trend, mean, month_key, percent_change
from .category import ExpenseCategory, TrendDirection
from .date_range import DateRange
from .expense import Expense


@dataclass
class PricePoint:
    date: date
    vehicle_id: str
    price_per_liter: float
    total_cost: float
    fuel_added: float


@dataclass
class MonthlyPrice:
    month_key: str
    avg_price: float = 0.0
    min_price: float = 0.0
    max_price: float = 0.0
    data_points: int = 0


@dataclass
class PriceTrend:
    direction: TrendDirection = TrendDirection.FLAT
    change_percent: float = 0.0
    insufficient_data: bool = True


@dataclass
class FuelPriceReport:
    points: List[PricePoint] = field(default_factory=list)
    monthly_trends: List[MonthlyPrice] = field(default_factory=list)
    trend: PriceTrend = field(default_factory=PriceTrend)
    average_price: float = 0.0
    min_price: float = 0.0
    max_price: float = 0.0


def price_points(
    expenses: Iterable[Expense], date_range: Optional[DateRange] = None
) -> List[PricePoint]:
    """Price per litre of each fuel fill, oldest first. Zero-fuel fills are left out."""
    points = []
    for expense in expenses:
        if expense.category is not ExpenseCategory.FUEL:
            continue
        if date_range is not None and expense.date not in date_range:
            continue
        price = expense.price_per_liter
        if price is None:
            continue
        points.append(
            PricePoint(
                date=expense.date,
                vehicle_id=expense.vehicle_id,
                price_per_liter=price,
                total_cost=expense.total_cost,
                fuel_added=expense.fuel_added,
            )
        )
    return sorted(points, key=lambda p: p.date)


def price_trend(prices: List[float]) -> PriceTrend:
    """First-third vs last-third trend of an ordered price series."""
    if len(prices) < 2:
        return PriceTrend()
    k = max(1, len(prices) // 3)
    change = percent_change(mean(prices[:k]), mean(prices[-k:]))
    return PriceTrend(classify_trend(change), change, insufficient_data=False)


def analyze_fuel_prices(
    expenses: Iterable[Expense],
    date_range: DateRange,
    vehicle_id: Optional[str] = None,
) -> FuelPriceReport:
    """Monthly price statistics and overall trend for fuel fills in range."""
    if vehicle_id is not None:
        expenses = [e for e in expenses if e.vehicle_id == vehicle_id]
    points = price_points(expenses, date_range)
    prices = [p.price_per_liter for p in points]

    by_month: Dict[str, List[float]] = {key: [] for key in date_range.month_keys()}
    for point in points:
        by_month[month_key(point.date)].append(point.price_per_liter)

    monthly = [
        MonthlyPrice(key, mean(values), min(values), max(values), len(values))
        if values
        else MonthlyPrice(key)
        for key, values in by_month.items()
    ]

    return FuelPriceReport(
        points=points,
        monthly_trends=monthly,
        trend=price_trend(prices),
        average_price=mean(prices),
        min_price=min(prices, default=0.0),
        max_price=max(prices, default=0.0),
    )
