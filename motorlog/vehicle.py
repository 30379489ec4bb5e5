"""Vehicle class for vehicle identification."""

from datetime import date
from typing import Optional, Union

from .calculations import to_date
from .category import FuelType


class Vehicle:
    """A registered vehicle."""

    def __init__(
        self,
        vehicle_id: str,
        name: str,
        make: str,
        model: str,
        fuel_type: Union[FuelType, str] = FuelType.PETROL,
        odometer: int = 0,
        created_at: Optional[Union[date, str]] = None,
    ):
        self.id = vehicle_id
        self.name = name
        self.make = make
        self.model = model
        self.fuel_type = FuelType(fuel_type)
        self.odometer = odometer
        self.created_at = to_date(created_at) if created_at is not None else None

    @property
    def display_name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.name} ({self.make} {self.model})"
