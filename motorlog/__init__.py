"""
Vehicle expense analytics.

This package turns raw vehicle records into derived statistics:
- Vehicle, Expense (Fuel/Service/Other), Trip: input records
- OdometerSeries: date-ordered fuel fills and fill pairs
- Mileage: fill-to-fill efficiency records and aggregates
- ExpenseSummary: totals by category and by vehicle
- Buckets: calendar-month time series
- Ranking: cross-vehicle comparison
- PriceTrend: fuel price per litre over time
- TripStats: trip totals and averages
- Garage: snapshot aggregate combining all records
"""

from .category import ExpenseCategory, FuelType, ServiceType, TrendDirection
from .errors import InvalidRecordError
from .date_range import DateRange
from .vehicle import Vehicle
from .expense import Expense, FuelExpense, ServiceExpense, OtherExpense, parse_expense
from .trip import Trip, parse_trip
from .odometer import FillPair, OdometerSeries
from .mileage import (
    IntervalStatus,
    MileageRecord,
    MileageSummary,
    MonthlyMileage,
    analyze_mileage,
    compute_mileage,
    monthly_mileage,
    summarize_mileage,
)
from .expense_summary import (
    CategoryTotal,
    ExpenseSummary,
    VehicleExpenses,
    summarize_expenses,
)
from .buckets import (
    MonthlyBucket,
    MonthlyGrowth,
    SpendingTrend,
    TripBucket,
    bucket_by_month,
    bucket_trips_by_month,
    monthly_growth,
    spending_trend,
)
from .ranking import VehicleRanking, VehicleStanding, rank_vehicles
from .price_trend import (
    FuelPriceReport,
    MonthlyPrice,
    PricePoint,
    PriceTrend,
    analyze_fuel_prices,
    price_points,
    price_trend,
)
from .trip_stats import TripStats, compute_trip_stats
from .garage import Garage, VehicleReport
from .loader import load_garage, read_document

__all__ = [
    "ExpenseCategory",
    "FuelType",
    "ServiceType",
    "TrendDirection",
    "InvalidRecordError",
    "DateRange",
    "Vehicle",
    "Expense",
    "FuelExpense",
    "ServiceExpense",
    "OtherExpense",
    "parse_expense",
    "Trip",
    "parse_trip",
    "FillPair",
    "OdometerSeries",
    "IntervalStatus",
    "MileageRecord",
    "MileageSummary",
    "MonthlyMileage",
    "analyze_mileage",
    "compute_mileage",
    "monthly_mileage",
    "summarize_mileage",
    "CategoryTotal",
    "ExpenseSummary",
    "VehicleExpenses",
    "summarize_expenses",
    "MonthlyBucket",
    "MonthlyGrowth",
    "SpendingTrend",
    "TripBucket",
    "bucket_by_month",
    "bucket_trips_by_month",
    "monthly_growth",
    "spending_trend",
    "VehicleRanking",
    "VehicleStanding",
    "rank_vehicles",
    "FuelPriceReport",
    "MonthlyPrice",
    "PricePoint",
    "PriceTrend",
    "analyze_fuel_prices",
    "price_points",
    "price_trend",
    "TripStats",
    "compute_trip_stats",
    "Garage",
    "VehicleReport",
    "load_garage",
    "read_document",
]
