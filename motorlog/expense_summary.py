"""Expense totals by category and by vehicle."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .calculations import safe_divide
from .category import ExpenseCategory
from .date_range import DateRange
from .expense import Expense


@dataclass
class CategoryTotal:
    total: float = 0.0
    count: int = 0

    def add(self, amount: float) -> None:
        self.total += amount
        self.count += 1


def _empty_categories() -> Dict[ExpenseCategory, CategoryTotal]:
    # Every category is always present so charts get a stable schema
    return {category: CategoryTotal() for category in ExpenseCategory}


@dataclass
class VehicleExpenses:
    vehicle_id: str
    total: float = 0.0
    count: int = 0
    by_category: Dict[ExpenseCategory, CategoryTotal] = field(
        default_factory=_empty_categories
    )


@dataclass
class ExpenseSummary:
    """Totals for all expenses inside a date range."""

    date_range: DateRange
    total_expenses: float = 0.0
    transaction_count: int = 0
    by_category: Dict[ExpenseCategory, CategoryTotal] = field(
        default_factory=_empty_categories
    )
    per_vehicle: List[VehicleExpenses] = field(default_factory=list)

    @property
    def average_monthly_expense(self) -> float:
        """Total spread over every month the range spans."""
        return safe_divide(self.total_expenses, len(self.date_range.months()))

    @property
    def highest_vehicle(self) -> Optional[VehicleExpenses]:
        return self.per_vehicle[0] if self.per_vehicle else None

    @property
    def lowest_vehicle(self) -> Optional[VehicleExpenses]:
        return self.per_vehicle[-1] if self.per_vehicle else None

    def category_share(self, category: ExpenseCategory) -> float:
        """Percentage of the total spent in a category."""
        return safe_divide(self.by_category[category].total, self.total_expenses) * 100

    def for_vehicle(self, vehicle_id: str) -> VehicleExpenses:
        """Totals for one vehicle, zeros if it had no expenses in range."""
        for entry in self.per_vehicle:
            if entry.vehicle_id == vehicle_id:
                return entry
        return VehicleExpenses(vehicle_id)


def summarize_expenses(
    expenses: Iterable[Expense], date_range: DateRange
) -> ExpenseSummary:
    """
    Sum and count expenses by category and by vehicle.

    Expenses dated outside the inclusive range are ignored. per_vehicle is
    ordered by descending total, ties by ascending vehicle id.
    """
    summary = ExpenseSummary(date_range)
    vehicles: Dict[str, VehicleExpenses] = {}

    for expense in expenses:
        if expense.date not in date_range:
            continue
        amount = expense.amount
        summary.total_expenses += amount
        summary.transaction_count += 1
        summary.by_category[expense.category].add(amount)

        entry = vehicles.get(expense.vehicle_id)
        if entry is None:
            entry = vehicles[expense.vehicle_id] = VehicleExpenses(expense.vehicle_id)
        entry.total += amount
        entry.count += 1
        entry.by_category[expense.category].add(amount)

    summary.per_vehicle = sorted(
        vehicles.values(), key=lambda v: (-v.total, v.vehicle_id)
    )
    return summary
