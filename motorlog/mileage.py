"""
Fill-to-fill fuel efficiency.

The fuel added at a fill is taken as the fuel consumed since the previous
fill, which assumes the tank is brought to the same level every time:

    km/l = (current.odometer - prior.odometer) / current.fuel_added

Partial fills against a known tank capacity are not accounted for.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .calculations import mean, month_key, safe_divide
from .category import ExpenseCategory
from .date_range import DateRange
from .expense import Expense
from .odometer import FillPair, OdometerSeries


class IntervalStatus(Enum):
    """Outcome of a fill-to-fill interval."""

    VALID = 1
    ANOMALY = 2  # Odometer did not advance
    NO_FUEL = 3  # No fuel recorded at the closing fill, skipped


@dataclass
class MileageRecord:
    """Efficiency over one fill-to-fill interval."""

    from_date: date
    to_date: date
    distance_km: float
    fuel_consumed_liters: float
    km_per_liter: float
    status: IntervalStatus = IntervalStatus.VALID

    @property
    def is_valid(self) -> bool:
        return self.status is IntervalStatus.VALID

    @property
    def is_anomaly(self) -> bool:
        return self.status is IntervalStatus.ANOMALY


@dataclass
class MileageSummary:
    """Aggregate efficiency figures for one vehicle over a range."""

    average_mileage: float = 0.0
    best_mileage: float = 0.0
    worst_mileage: float = 0.0
    total_distance: float = 0.0
    total_fuel: float = 0.0
    overall_efficiency: float = 0.0
    fuel_cost: float = 0.0
    cost_per_km: float = 0.0
    data_points: int = 0
    anomaly_count: int = 0
    skipped_count: int = 0
    hinted_mileage: float = 0.0  # Mean km/l from next-fill odometer hints
    hinted_count: int = 0
    insufficient_data: bool = True
    records: List[MileageRecord] = field(default_factory=list)


@dataclass
class MonthlyMileage:
    month_key: str
    average_mileage: float
    total_distance: float
    data_points: int


def _record_for(pair: FillPair) -> MileageRecord:
    prior, current = pair.prior, pair.current
    if pair.is_anomaly:
        return MileageRecord(
            prior.date, current.date, 0, 0, 0, status=IntervalStatus.ANOMALY
        )
    fuel = current.fuel_added or 0
    if fuel <= 0:
        return MileageRecord(
            prior.date, current.date, pair.distance_km, 0, 0,
            status=IntervalStatus.NO_FUEL,
        )
    distance = pair.distance_km
    return MileageRecord(prior.date, current.date, distance, fuel, distance / fuel)


def compute_mileage(pairs: Iterable[FillPair]) -> List[MileageRecord]:
    """
    One MileageRecord per fill pair.

    Anomalous pairs are kept as zero-length ANOMALY records and pairs whose
    closing fill has no fuel as NO_FUEL records, so callers can report them.
    """
    return [_record_for(pair) for pair in pairs]


def summarize_mileage(
    records: Iterable[MileageRecord], fuel_cost: float = 0.0
) -> MileageSummary:
    """
    Aggregate mileage records.

    Only VALID records count towards the averages and the distance.
    cost_per_km is fuel_cost spread over the valid distance.
    """
    records = list(records)
    valid = [r for r in records if r.is_valid]
    mileages = [r.km_per_liter for r in valid]
    total_distance = sum(r.distance_km for r in valid)
    total_fuel = sum(r.fuel_consumed_liters for r in valid)

    return MileageSummary(
        average_mileage=mean(mileages),
        best_mileage=max(mileages, default=0.0),
        worst_mileage=min(mileages, default=0.0),
        total_distance=total_distance,
        total_fuel=total_fuel,
        overall_efficiency=safe_divide(total_distance, total_fuel),
        fuel_cost=fuel_cost,
        cost_per_km=safe_divide(fuel_cost, total_distance),
        data_points=len(valid),
        anomaly_count=sum(1 for r in records if r.is_anomaly),
        skipped_count=sum(1 for r in records if r.status is IntervalStatus.NO_FUEL),
        insufficient_data=not valid,
        records=records,
    )


def analyze_mileage(
    expenses: Iterable[Expense], date_range: Optional[DateRange] = None
) -> MileageSummary:
    """
    Series -> records -> summary for one vehicle's expenses.

    Fills that recorded the odometer at the next fill also give a hinted
    mileage, reported separately from the fill-to-fill figures.
    """
    fills = [
        e
        for e in expenses
        if e.category is ExpenseCategory.FUEL
        and (date_range is None or e.date in date_range)
    ]
    records = compute_mileage(OdometerSeries(fills).pairs())
    fuel_cost = sum(e.total_cost for e in fills)
    summary = summarize_mileage(records, fuel_cost)

    hints = [e.hinted_km_per_liter for e in fills]
    hints = [h for h in hints if h is not None]
    summary.hinted_mileage = mean(hints)
    summary.hinted_count = len(hints)
    return summary


def monthly_mileage(records: Iterable[MileageRecord]) -> List[MonthlyMileage]:
    """Average efficiency per month in which a valid interval closed."""
    months: Dict[str, List[MileageRecord]] = {}
    for record in records:
        if record.is_valid:
            months.setdefault(month_key(record.to_date), []).append(record)

    return [
        MonthlyMileage(
            month_key=key,
            average_mileage=mean(r.km_per_liter for r in months[key]),
            total_distance=sum(r.distance_km for r in months[key]),
            data_points=len(months[key]),
        )
        for key in sorted(months)
    ]
