"""Cross-vehicle comparison and rankings."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .category import ExpenseCategory
from .expense_summary import ExpenseSummary
from .mileage import MileageSummary
from .vehicle import Vehicle


@dataclass
class VehicleStanding:
    """One row of the comparison table."""

    vehicle_id: str
    name: str
    total_expense: float = 0.0
    transaction_count: int = 0
    fuel_cost: float = 0.0
    average_mileage: float = 0.0
    best_mileage: float = 0.0
    cost_per_km: float = 0.0
    total_distance: float = 0.0
    has_mileage: bool = False


@dataclass
class VehicleRanking:
    most_expensive: Optional[VehicleStanding] = None
    least_expensive: Optional[VehicleStanding] = None
    best_mileage: Optional[VehicleStanding] = None
    most_used: Optional[VehicleStanding] = None
    table: List[VehicleStanding] = field(default_factory=list)
    by_expense: List[VehicleStanding] = field(default_factory=list)
    by_mileage: List[VehicleStanding] = field(default_factory=list)
    by_distance: List[VehicleStanding] = field(default_factory=list)


def _ranked(
    rows: Iterable[VehicleStanding], metric: Callable[[VehicleStanding], float]
) -> List[VehicleStanding]:
    """Highest metric first; equal metrics go to the smaller vehicle id."""
    return sorted(rows, key=lambda r: (-metric(r), r.vehicle_id))


def _first(ranked: List[VehicleStanding]) -> Optional[VehicleStanding]:
    return ranked[0] if ranked else None


def rank_vehicles(
    vehicles: Iterable[Vehicle],
    expense_summary: ExpenseSummary,
    mileage: Dict[str, MileageSummary],
) -> VehicleRanking:
    """
    Rank vehicles by spend, mileage and distance.

    Every vehicle gets a table row, with zeros where it has no expenses or
    mileage in range. Only vehicles with at least one valid mileage interval
    compete for best mileage, which compares average_mileage (the mean of
    the interval readings) rather than total distance over total fuel.
    A leader slot is empty only when no vehicle qualifies for it.
    """
    table = []
    for vehicle in sorted(vehicles, key=lambda v: v.id):
        spent = expense_summary.for_vehicle(vehicle.id)
        efficiency = mileage.get(vehicle.id) or MileageSummary()
        table.append(
            VehicleStanding(
                vehicle_id=vehicle.id,
                name=vehicle.name,
                total_expense=spent.total,
                transaction_count=spent.count,
                fuel_cost=spent.by_category[ExpenseCategory.FUEL].total,
                average_mileage=efficiency.average_mileage,
                best_mileage=efficiency.best_mileage,
                cost_per_km=efficiency.cost_per_km,
                total_distance=efficiency.total_distance,
                has_mileage=not efficiency.insufficient_data,
            )
        )

    by_expense = _ranked(table, lambda r: r.total_expense)
    by_mileage = _ranked(
        [r for r in table if r.has_mileage], lambda r: r.average_mileage
    )
    by_distance = _ranked(table, lambda r: r.total_distance)

    # Least expensive: lowest spend, ties again to the smaller id
    cheapest = sorted(table, key=lambda r: (r.total_expense, r.vehicle_id))

    return VehicleRanking(
        most_expensive=_first(by_expense),
        least_expensive=_first(cheapest),
        best_mileage=_first(by_mileage),
        most_used=_first(by_distance),
        table=table,
        by_expense=by_expense,
        by_mileage=by_mileage,
        by_distance=by_distance,
    )
