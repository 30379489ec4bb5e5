"""YAML loading utilities for garage files."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from jsonschema import FormatChecker, validate

from .errors import InvalidRecordError, parse_date_field, require
from .expense import Expense, parse_expense
from .garage import Garage
from .trip import Trip, parse_trip
from .vehicle import Vehicle


def _created_at(dct: Dict[str, Any]):
    value = dct.get("createdAt")
    if value is None:
        return None
    return parse_date_field(value, "createdAt", "Vehicle")


def _parse_object(dct: Dict[str, Any]) -> Union[Garage, Vehicle, Expense, Trip, dict]:
    """Parse dictionary into appropriate object type."""
    # Top-level garage object
    if "vehicles" in dct:
        return Garage(dct["vehicles"] or [], dct.get("expenses"), dct.get("trips"))
    # Expense (any category)
    elif "type" in dct:
        return parse_expense(dct)
    # Trip
    elif "from" in dct and "to" in dct:
        return parse_trip(dct)
    # Vehicle
    elif "make" in dct and "model" in dct:
        return Vehicle(
            require(dct, "id", "Vehicle"),
            require(dct, "name", "Vehicle"),
            dct["make"],
            dct["model"],
            dct.get("fuelType") or "Petrol",
            dct.get("odometer") or 0,
            _created_at(dct),
        )
    else:
        return dct


def read_document(filename: Union[str, Path]) -> Any:
    """
    Read a garage file as plain JSON-compatible data.

    YAML dates are turned into ISO strings so the document can be checked
    against the JSON schema. An unquoted date that is not on the calendar
    (2024-02-30) raises InvalidRecordError.
    """
    with open(filename, "rb") as fp:
        try:
            data = yaml.load(fp, Loader=yaml.SafeLoader)
        except ValueError as e:
            raise InvalidRecordError(f"{filename}: {e}") from None
    return json.loads(json.dumps(data, default=str))


def load_garage(filename: Union[str, Path], schema: Optional[dict] = None) -> Garage:
    """
    Load a garage snapshot from a YAML file.

    When a schema is given the document is validated against it first and
    jsonschema.ValidationError propagates to the caller.
    """
    data = read_document(filename)

    if schema is not None:
        validate(instance=data, schema=schema, format_checker=FormatChecker())

    json_data = json.dumps(data, indent=4)
    garage = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(garage, Garage):
        raise InvalidRecordError(f"{filename}: expected a top-level 'vehicles' list")
    return garage
