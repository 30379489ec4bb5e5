"""Trip class for logged journeys."""

from datetime import date
from typing import Any, Dict, Optional, Union

from .calculations import as_number, to_date
from .errors import require, require_date


class Trip:
    """A journey taken with one vehicle."""

    def __init__(
        self,
        vehicle_id: str,
        start_location: str,
        end_location: str,
        date: Union[date, str],
        distance: Optional[float] = None,
        total_cost: float = 0,
        start_odometer: Optional[float] = None,
        end_odometer: Optional[float] = None,
        purpose: str = "Personal",
    ):
        self.vehicle_id = vehicle_id
        self.start_location = start_location
        self.end_location = end_location
        self.date = to_date(date)
        self.total_cost = total_cost
        self.start_odometer = start_odometer
        self.end_odometer = end_odometer
        self.purpose = purpose
        # Derive distance from the odometers when it was not entered
        if not distance and as_number(end_odometer) > as_number(start_odometer) > 0:
            distance = end_odometer - start_odometer
        self.distance = distance

    @property
    def label(self) -> str:
        return f"{self.start_location} -> {self.end_location}"


def parse_trip(dct: Dict[str, Any]) -> Trip:
    """Build a Trip from a raw garage-file mapping."""
    return Trip(
        vehicle_id=require(dct, "vehicle", "Trip"),
        start_location=require(dct, "from", "Trip"),
        end_location=require(dct, "to", "Trip"),
        date=require_date(dct, "date", "Trip"),
        distance=dct.get("distance"),
        total_cost=dct.get("cost") or 0,
        start_odometer=dct.get("startOdometer"),
        end_odometer=dct.get("endOdometer"),
        purpose=dct.get("purpose") or "Personal",
    )
