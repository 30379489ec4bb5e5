"""Garage class - the aggregate snapshot of a user's vehicles, expenses and trips."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .buckets import (
    MonthlyBucket,
    SpendingTrend,
    TripBucket,
    bucket_by_month,
    bucket_trips_by_month,
    spending_trend,
)
from .date_range import DateRange
from .expense import Expense
from .expense_summary import ExpenseSummary, summarize_expenses
from .mileage import MileageSummary, MonthlyMileage, analyze_mileage, monthly_mileage
from .price_trend import FuelPriceReport, analyze_fuel_prices
from .ranking import VehicleRanking, rank_vehicles
from .trip import Trip
from .trip_stats import TripStats, compute_trip_stats
from .vehicle import Vehicle


@dataclass
class VehicleReport:
    """Everything the per-vehicle analytics view shows."""

    vehicle: Vehicle
    date_range: DateRange
    expenses: ExpenseSummary
    monthly: List[MonthlyBucket]
    mileage: MileageSummary
    monthly_mileage: List[MonthlyMileage]
    fuel_prices: FuelPriceReport
    trips: TripStats
    trip_months: List[TripBucket]
    spending_trend: SpendingTrend = field(default_factory=SpendingTrend)


class Garage:
    """
    An immutable snapshot of records to compute analytics over.

    Inputs are copied into tuples on construction; every report is computed
    from that snapshot and never reads the caller's lists again.
    """

    def __init__(
        self,
        vehicles: Iterable[Vehicle],
        expenses: Optional[Iterable[Expense]] = None,
        trips: Optional[Iterable[Trip]] = None,
    ):
        self.vehicles: Tuple[Vehicle, ...] = tuple(vehicles)
        self.expenses: Tuple[Expense, ...] = tuple(expenses or ())
        self.trips: Tuple[Trip, ...] = tuple(trips or ())

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        """Find a vehicle by id. Raises KeyError when unknown."""
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise KeyError(vehicle_id)

    def expenses_for(self, vehicle_id: str) -> List[Expense]:
        return [e for e in self.expenses if e.vehicle_id == vehicle_id]

    def trips_for(self, vehicle_id: str) -> List[Trip]:
        return [t for t in self.trips if t.vehicle_id == vehicle_id]

    def expense_summary(self, date_range: DateRange) -> ExpenseSummary:
        return summarize_expenses(self.expenses, date_range)

    def monthly_expenses(self, date_range: DateRange) -> List[MonthlyBucket]:
        return bucket_by_month(self.expenses, date_range)

    def mileage_for(
        self, vehicle_id: str, date_range: Optional[DateRange] = None
    ) -> MileageSummary:
        self.get_vehicle(vehicle_id)
        return analyze_mileage(self.expenses_for(vehicle_id), date_range)

    def comparative_ranking(self, date_range: DateRange) -> VehicleRanking:
        mileage: Dict[str, MileageSummary] = {
            v.id: analyze_mileage(self.expenses_for(v.id), date_range)
            for v in self.vehicles
        }
        return rank_vehicles(self.vehicles, self.expense_summary(date_range), mileage)

    def fuel_prices(
        self, date_range: DateRange, vehicle_id: Optional[str] = None
    ) -> FuelPriceReport:
        return analyze_fuel_prices(self.expenses, date_range, vehicle_id)

    def trip_stats(
        self,
        vehicle_id: Optional[str] = None,
        date_range: Optional[DateRange] = None,
    ) -> TripStats:
        trips = self.trips_for(vehicle_id) if vehicle_id is not None else self.trips
        return compute_trip_stats(trips, date_range)

    def vehicle_report(self, vehicle_id: str, date_range: DateRange) -> VehicleReport:
        """Per-vehicle analytics. Raises KeyError for an unknown vehicle."""
        vehicle = self.get_vehicle(vehicle_id)
        expenses = self.expenses_for(vehicle_id)
        trips = self.trips_for(vehicle_id)
        monthly = bucket_by_month(expenses, date_range)
        mileage = analyze_mileage(expenses, date_range)

        return VehicleReport(
            vehicle=vehicle,
            date_range=date_range,
            expenses=summarize_expenses(expenses, date_range),
            monthly=monthly,
            mileage=mileage,
            monthly_mileage=monthly_mileage(mileage.records),
            fuel_prices=analyze_fuel_prices(expenses, date_range),
            trips=compute_trip_stats(trips, date_range),
            trip_months=bucket_trips_by_month(trips, date_range),
            spending_trend=spending_trend(monthly),
        )
