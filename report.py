#!/usr/bin/env python3
"""
Command-line reports over a garage file.

Commands:
  vehicles  - List vehicles in the garage
  summary   - Expense totals by category and by vehicle
  monthly   - Month-by-month expenses per category
  mileage   - Fill-to-fill fuel efficiency for one vehicle
  compare   - Rank vehicles by spend, mileage and distance
  prices    - Fuel price per litre trend
  trips     - Trip totals and averages
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from jsonschema import ValidationError

from motorlog import (
    DateRange,
    ExpenseCategory,
    Garage,
    InvalidRecordError,
    MileageRecord,
    MonthlyBucket,
    VehicleStanding,
    bucket_by_month,
    load_garage,
    monthly_growth,
    spending_trend,
)
from validate_yaml import load_schema

# =============================================================================
# Formatting helpers
# =============================================================================


def format_money(amount: Optional[float]) -> str:
    """Format a monetary amount with two decimals."""
    return f"{amount:,.2f}" if amount is not None else "-"


def format_km(km: Optional[float]) -> str:
    """Format a distance in kilometers for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_ratio(value: Optional[float]) -> str:
    """Format km/l, price per litre and similar ratios."""
    if not value:
        return "-"
    return f"{value:,.2f}"


def format_percent(value: float) -> str:
    return f"{value:+.1f}%"


def format_date(day: Optional[date]) -> str:
    return day.isoformat() if day is not None else "-"


def resolve_range(args) -> DateRange:
    """Date range from --start/--end, defaulting to the trailing 12 months."""
    end = args.end or args.as_of or date.today().isoformat()
    if args.start:
        return DateRange(args.start, end)
    return DateRange.trailing(end)


def print_header(garage: Garage, date_range: DateRange) -> None:
    print(f"Vehicles: {len(garage.vehicles)}")
    print(f"Range: {date_range.start.isoformat()} to {date_range.end.isoformat()}")
    print()


def find_vehicle_id(garage: Garage, wanted: str) -> Optional[str]:
    """Match a vehicle by id or name (case-insensitive)."""
    wanted = wanted.lower()
    for vehicle in garage.vehicles:
        if vehicle.id.lower() == wanted or vehicle.name.lower() == wanted:
            return vehicle.id
    return None


def print_unknown_vehicle(garage: Garage, wanted: str) -> int:
    print(f"Error: Unknown vehicle '{wanted}'")
    print("\nAvailable vehicles:")
    for vehicle in sorted(garage.vehicles, key=lambda v: v.id):
        print(f"  {vehicle.id}  {vehicle.display_name}")
    return 1


# =============================================================================
# Table builders
# =============================================================================


def make_monthly_table(buckets: List[MonthlyBucket]) -> List[List[str]]:
    """Convert monthly buckets to table rows."""
    growth = {g.month_key: g.growth_percent for g in monthly_growth(buckets)}
    rows = []
    for bucket in buckets:
        change = growth.get(bucket.month_key)
        rows.append(
            [
                bucket.month_key,
                format_money(bucket.fuel),
                format_money(bucket.service),
                format_money(bucket.other),
                format_money(bucket.total),
                format_percent(change) if change is not None else "-",
            ]
        )
    return rows


def make_mileage_table(records: List[MileageRecord]) -> List[List[str]]:
    """Convert mileage records to table rows."""
    rows = []
    for record in records:
        rows.append(
            [
                format_date(record.from_date),
                format_date(record.to_date),
                format_km(record.distance_km),
                format_ratio(record.fuel_consumed_liters),
                format_ratio(record.km_per_liter),
                record.status.name.lower(),
            ]
        )
    return rows


def make_comparison_table(rows: List[VehicleStanding]) -> List[List[str]]:
    """Convert comparison standings to table rows."""
    return [
        [
            row.name,
            format_money(row.total_expense),
            row.transaction_count,
            format_money(row.fuel_cost),
            format_ratio(row.average_mileage),
            format_ratio(row.cost_per_km),
            format_km(row.total_distance),
        ]
        for row in rows
    ]


# =============================================================================
# Commands
# =============================================================================


def cmd_vehicles(garage: Garage, args) -> int:
    """List vehicles in the garage."""
    rows = [
        [
            v.id,
            v.display_name,
            v.fuel_type.value,
            format_km(v.odometer),
            len(garage.expenses_for(v.id)),
            len(garage.trips_for(v.id)),
        ]
        for v in sorted(garage.vehicles, key=lambda v: v.id)
    ]
    headers = ["Id", "Vehicle", "Fuel", "Odometer (km)", "Expenses", "Trips"]
    print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
    return 0


def cmd_summary(garage: Garage, args) -> int:
    """Expense totals by category and by vehicle."""
    date_range = resolve_range(args)
    summary = garage.expense_summary(date_range)
    print_header(garage, date_range)

    print(f"Total expenses: {format_money(summary.total_expenses)}")
    print(f"Transactions: {summary.transaction_count}")
    print(f"Average per month: {format_money(summary.average_monthly_expense)}")
    print()

    rows = [
        [
            category.value,
            format_money(summary.by_category[category].total),
            summary.by_category[category].count,
            f"{summary.category_share(category):.1f}%",
        ]
        for category in ExpenseCategory
    ]
    headers = ["Category", "Total", "Count", "Share"]
    print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
    print()

    if not summary.per_vehicle:
        print("No expenses found.")
        return 0

    names = {v.id: v.name for v in garage.vehicles}
    rows = [
        [
            names.get(entry.vehicle_id, entry.vehicle_id),
            format_money(entry.total),
            entry.count,
            format_money(entry.by_category[ExpenseCategory.FUEL].total),
            format_money(entry.by_category[ExpenseCategory.SERVICE].total),
            format_money(entry.by_category[ExpenseCategory.OTHER].total),
        ]
        for entry in summary.per_vehicle
    ]
    headers = ["Vehicle", "Total", "Count", "Fuel", "Service", "Other"]
    print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
    return 0


def cmd_monthly(garage: Garage, args) -> int:
    """Month-by-month expenses per category."""
    date_range = resolve_range(args)
    expenses = garage.expenses
    if args.vehicle:
        vehicle_id = find_vehicle_id(garage, args.vehicle)
        if vehicle_id is None:
            return print_unknown_vehicle(garage, args.vehicle)
        expenses = garage.expenses_for(vehicle_id)

    buckets = bucket_by_month(expenses, date_range)
    print_header(garage, date_range)

    trend = spending_trend(buckets)
    print(
        f"Spending trend: {trend.direction.value} ({format_percent(trend.change_percent)})"
    )
    print()
    headers = ["Month", "Fuel", "Service", "Other", "Total", "Change"]
    print(
        tabulate(
            make_monthly_table(buckets),
            headers=headers,
            tablefmt="simple",
            disable_numparse=True,
        )
    )
    return 0


def cmd_mileage(garage: Garage, args) -> int:
    """Fill-to-fill fuel efficiency for one vehicle."""
    vehicle_id = find_vehicle_id(garage, args.vehicle)
    if vehicle_id is None:
        return print_unknown_vehicle(garage, args.vehicle)

    date_range = resolve_range(args)
    vehicle = garage.get_vehicle(vehicle_id)
    summary = garage.mileage_for(vehicle_id, date_range)

    print(f"Vehicle: {vehicle.display_name}")
    print(f"Range: {date_range.start.isoformat()} to {date_range.end.isoformat()}")
    print()

    if summary.insufficient_data:
        print("Not enough fuel fills to calculate mileage.")
    else:
        print(f"Average mileage: {format_ratio(summary.average_mileage)} km/l")
        print(f"Best mileage:    {format_ratio(summary.best_mileage)} km/l")
        print(f"Worst mileage:   {format_ratio(summary.worst_mileage)} km/l")
        print(f"Total distance:  {format_km(summary.total_distance)} km")
        print(f"Cost per km:     {format_ratio(summary.cost_per_km)}")
    if summary.hinted_count:
        print(
            f"Next-fill hints: {format_ratio(summary.hinted_mileage)} km/l "
            f"over {summary.hinted_count} fill(s)"
        )
    if summary.anomaly_count:
        print(
            f"{summary.anomaly_count} fuel expense(s) had inconsistent odometer readings"
        )
    print()

    if summary.records:
        headers = ["From", "To", "Distance (km)", "Fuel (l)", "km/l", "Status"]
        print(
            tabulate(
                make_mileage_table(summary.records),
                headers=headers,
                tablefmt="simple",
                disable_numparse=True,
            )
        )
    return 0


def cmd_compare(garage: Garage, args) -> int:
    """Rank vehicles by spend, mileage and distance."""
    date_range = resolve_range(args)
    ranking = garage.comparative_ranking(date_range)
    print_header(garage, date_range)

    if ranking.most_expensive:
        print(f"Most expensive: {ranking.most_expensive.name}")
    if ranking.best_mileage:
        print(f"Best mileage:   {ranking.best_mileage.name}")
    if ranking.most_used:
        print(f"Most used:      {ranking.most_used.name}")
    print()

    headers = ["Vehicle", "Total", "Count", "Fuel", "km/l", "Cost/km", "Distance (km)"]
    print(
        tabulate(
            make_comparison_table(ranking.by_expense),
            headers=headers,
            tablefmt="simple",
            disable_numparse=True,
        )
    )
    return 0


def cmd_prices(garage: Garage, args) -> int:
    """Fuel price per litre trend."""
    date_range = resolve_range(args)
    vehicle_id = None
    if args.vehicle:
        vehicle_id = find_vehicle_id(garage, args.vehicle)
        if vehicle_id is None:
            return print_unknown_vehicle(garage, args.vehicle)

    report = garage.fuel_prices(date_range, vehicle_id)
    print_header(garage, date_range)

    if report.trend.insufficient_data:
        print("Not enough fuel fills to show a price trend.")
    else:
        print(
            f"Trend: {report.trend.direction.value} "
            f"({format_percent(report.trend.change_percent)})"
        )
        print(
            f"Average: {format_ratio(report.average_price)}  "
            f"Min: {format_ratio(report.min_price)}  "
            f"Max: {format_ratio(report.max_price)}"
        )
    print()

    rows = [
        [
            m.month_key,
            format_ratio(m.avg_price),
            format_ratio(m.min_price),
            format_ratio(m.max_price),
            m.data_points,
        ]
        for m in report.monthly_trends
    ]
    headers = ["Month", "Avg", "Min", "Max", "Fills"]
    print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
    return 0


def cmd_trips(garage: Garage, args) -> int:
    """Trip totals and averages."""
    date_range = resolve_range(args)
    vehicle_id = None
    if args.vehicle:
        vehicle_id = find_vehicle_id(garage, args.vehicle)
        if vehicle_id is None:
            return print_unknown_vehicle(garage, args.vehicle)

    stats = garage.trip_stats(vehicle_id, date_range)
    print_header(garage, date_range)

    if stats.insufficient_data:
        print("No trips found.")
        return 0

    rows = [
        ["Trips", stats.total_trips],
        ["Total distance (km)", format_km(stats.total_distance)],
        ["Total cost", format_money(stats.total_cost)],
        ["Average distance (km)", format_ratio(stats.average_distance)],
        ["Average cost", format_money(stats.average_cost)],
        ["First trip", format_date(stats.earliest_date)],
        ["Last trip", format_date(stats.latest_date)],
    ]
    print(tabulate(rows, tablefmt="simple", disable_numparse=True))
    return 0


COMMANDS = {
    "vehicles": cmd_vehicles,
    "summary": cmd_summary,
    "monthly": cmd_monthly,
    "mileage": cmd_mileage,
    "compare": cmd_compare,
    "prices": cmd_prices,
    "trips": cmd_trips,
}


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle expense reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s garages/example.yaml summary
  %(prog)s garages/example.yaml --start 2024-01-01 --end 2024-12-31 monthly
  %(prog)s garages/example.yaml mileage swift
  %(prog)s garages/example.yaml compare
  %(prog)s garages/example.yaml prices --vehicle swift
  %(prog)s garages/example.yaml trips
""",
    )
    parser.add_argument("garage_file", type=Path, help="Path to garage YAML file")
    parser.add_argument("--start", type=str, help="Range start (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, help="Range end (YYYY-MM-DD)")
    parser.add_argument(
        "--as-of",
        type=str,
        help="Reference date for the default 12-month range (default: today)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("vehicles", help="List vehicles in the garage")
    subparsers.add_parser("summary", help="Expense totals by category and vehicle")

    monthly_parser = subparsers.add_parser("monthly", help="Monthly expenses per category")
    monthly_parser.add_argument("--vehicle", type=str, help="Limit to one vehicle")

    mileage_parser = subparsers.add_parser("mileage", help="Fuel efficiency for a vehicle")
    mileage_parser.add_argument("vehicle", type=str, help="Vehicle id or name")

    subparsers.add_parser("compare", help="Rank vehicles")

    prices_parser = subparsers.add_parser("prices", help="Fuel price trend")
    prices_parser.add_argument("--vehicle", type=str, help="Limit to one vehicle")

    trips_parser = subparsers.add_parser("trips", help="Trip totals and averages")
    trips_parser.add_argument("--vehicle", type=str, help="Limit to one vehicle")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not args.garage_file.exists():
        print(f"Error: File not found: {args.garage_file}")
        return 1

    try:
        garage = load_garage(args.garage_file, load_schema())
    except ValidationError as e:
        print(f"Error: {args.garage_file} failed schema validation: {e.message}")
        return 1
    except InvalidRecordError as e:
        print(f"Error: {e}")
        return 1

    try:
        return COMMANDS[args.command](garage, args)
    except ValueError as e:
        # Bad --start/--end values
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
