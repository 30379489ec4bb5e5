"""Exceptions raised for malformed input records."""

from datetime import date

from .calculations import to_date


class InvalidRecordError(ValueError):
    """A record is missing a required field or has the wrong shape."""


def require(mapping: dict, key: str, kind: str):
    """Fetch a required field from a raw record mapping."""
    if key not in mapping or mapping[key] is None:
        raise InvalidRecordError(f"{kind} record is missing required field '{key}'")
    return mapping[key]


def require_date(mapping: dict, key: str, kind: str) -> date:
    """Fetch a required date field, rejecting values that are not calendar dates."""
    return parse_date_field(require(mapping, key, kind), key, kind)


def parse_date_field(value, key: str, kind: str) -> date:
    """Normalize a raw date value, raising InvalidRecordError when it is not a date."""
    try:
        return to_date(value)
    except (TypeError, ValueError) as e:
        raise InvalidRecordError(
            f"{kind} record has invalid date in '{key}': {e}"
        ) from None
