"""
Expense records.

An expense is a tagged union discriminated by `category`: FuelExpense,
ServiceExpense and OtherExpense share the common fields of Expense and add
their category-specific ones. parse_expense() builds the right variant from
a raw garage-file mapping and is the only place record shape is checked.
"""

from datetime import date
from typing import Any, Dict, Optional, Union

from .calculations import to_date
from .category import ExpenseCategory, ServiceType
from .errors import InvalidRecordError, require, require_date


class Expense:
    """Fields common to every expense category."""

    category: ExpenseCategory

    def __init__(
        self,
        vehicle_id: str,
        date: Union[date, str],
        amount: float,
        odometer: float = 0,
        description: Optional[str] = None,
        expense_id: Optional[str] = None,
    ):
        self.id = expense_id
        self.vehicle_id = vehicle_id
        self.date = to_date(date)
        self.amount = amount
        self.odometer = odometer
        self.description = description

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.vehicle_id!r}, {self.date.isoformat()}, "
            f"{self.amount!r})"
        )


class FuelExpense(Expense):
    """A fuel fill-up."""

    category = ExpenseCategory.FUEL

    def __init__(
        self,
        vehicle_id: str,
        date: Union[date, str],
        amount: float,
        odometer: float = 0,
        fuel_added: Optional[float] = None,
        tank_capacity: Optional[float] = None,
        next_fill_odometer: Optional[float] = None,
        description: Optional[str] = None,
        expense_id: Optional[str] = None,
    ):
        super().__init__(vehicle_id, date, amount, odometer, description, expense_id)
        self.fuel_added = fuel_added
        self.tank_capacity = tank_capacity
        self.next_fill_odometer = next_fill_odometer

    @property
    def total_cost(self) -> float:
        return self.amount

    @property
    def price_per_liter(self) -> Optional[float]:
        """Cost per litre of this fill, None when no fuel was recorded."""
        if not self.fuel_added or self.fuel_added <= 0:
            return None
        return self.amount / self.fuel_added

    @property
    def hinted_km_per_liter(self) -> Optional[float]:
        """Mileage from the next-fill odometer hint, if one was recorded."""
        if self.next_fill_odometer is None or not self.fuel_added or self.fuel_added <= 0:
            return None
        distance = self.next_fill_odometer - self.odometer
        if distance <= 0:
            return None
        return distance / self.fuel_added


class ServiceExpense(Expense):
    """A service or repair visit."""

    category = ExpenseCategory.SERVICE

    def __init__(
        self,
        vehicle_id: str,
        date: Union[date, str],
        amount: float,
        odometer: float = 0,
        service_type: Union[ServiceType, str] = ServiceType.OTHER,
        description: Optional[str] = None,
        expense_id: Optional[str] = None,
    ):
        super().__init__(vehicle_id, date, amount, odometer, description, expense_id)
        self.service_type = ServiceType(service_type)


class OtherExpense(Expense):
    """Anything else: parking, tolls, insurance, fines."""

    category = ExpenseCategory.OTHER

    def __init__(
        self,
        vehicle_id: str,
        date: Union[date, str],
        amount: float,
        odometer: float = 0,
        other_type: Optional[str] = None,
        description: Optional[str] = None,
        expense_id: Optional[str] = None,
    ):
        super().__init__(vehicle_id, date, amount, odometer, description, expense_id)
        self.other_type = other_type


def parse_expense(dct: Dict[str, Any]) -> Expense:
    """Build the expense variant named by the mapping's `type` field."""
    raw_type = require(dct, "type", "Expense")
    try:
        category = ExpenseCategory(raw_type)
    except ValueError:
        raise InvalidRecordError(
            f"Unknown expense type '{raw_type}' (expected Fuel, Service or Other)"
        ) from None

    common = dict(
        vehicle_id=require(dct, "vehicle", "Expense"),
        date=require_date(dct, "date", "Expense"),
        amount=require(dct, "amount", "Expense"),
        odometer=dct.get("odometer") or 0,
        description=dct.get("description"),
        expense_id=dct.get("id"),
    )

    if category is ExpenseCategory.FUEL:
        return FuelExpense(
            fuel_added=dct.get("fuelAdded"),
            tank_capacity=dct.get("tankCapacity"),
            next_fill_odometer=dct.get("nextFillOdometer"),
            **common,
        )
    elif category is ExpenseCategory.SERVICE:
        service_type = require(dct, "serviceType", "Service expense")
        try:
            service_type = ServiceType(service_type)
        except ValueError:
            raise InvalidRecordError(f"Unknown service type '{service_type}'") from None
        return ServiceExpense(service_type=service_type, **common)
    else:
        return OtherExpense(other_type=dct.get("otherType"), **common)
