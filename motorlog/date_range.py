"""DateRange class for inclusive reporting windows."""

from datetime import date
from typing import List, Union

from dateutil.relativedelta import relativedelta

from .calculations import month_key, to_date

TRAILING_MONTHS = 12


class DateRange:
    """An inclusive [start, end] window of calendar days."""

    def __init__(self, start: Union[date, str], end: Union[date, str]):
        self.start = to_date(start)
        self.end = to_date(end)
        if self.start > self.end:
            raise ValueError(
                f"Range start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    @classmethod
    def trailing(cls, end: Union[date, str], months: int = TRAILING_MONTHS) -> "DateRange":
        """
        Window ending at `end` and starting on the first day of the month
        `months` months earlier (e.g. 2025-03-15 -> 2024-03-01..2025-03-15).
        """
        end = to_date(end)
        start = end.replace(day=1) - relativedelta(months=months)
        return cls(start, end)

    def __contains__(self, day) -> bool:
        return self.start <= to_date(day) <= self.end

    def __eq__(self, other) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"

    def months(self) -> List[date]:
        """First day of every calendar month touched by the range, in order."""
        result = []
        current = self.start.replace(day=1)
        while current <= self.end:
            result.append(current)
            current += relativedelta(months=1)
        return result

    def month_keys(self) -> List[str]:
        return [month_key(m) for m in self.months()]
