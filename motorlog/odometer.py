"""OdometerSeries - date-ordered fuel fills and consecutive fill pairs."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .category import ExpenseCategory
from .expense import Expense, FuelExpense


@dataclass(frozen=True)
class FillPair:
    """Two consecutive fuel fills of one vehicle."""

    prior: FuelExpense
    current: FuelExpense

    @property
    def distance_km(self) -> float:
        return self.current.odometer - self.prior.odometer

    @property
    def is_anomaly(self) -> bool:
        """Odometer did not advance between the fills."""
        return self.current.odometer <= self.prior.odometer


class OdometerSeries:
    """
    A vehicle's fuel fills ordered by date.

    Only Fuel expenses are kept; Service and Other expenses never take part
    in mileage derivation. Ordering is stable, so fills on the same day keep
    the order they were recorded in.
    """

    def __init__(self, expenses: Iterable[Expense]):
        self._fills = tuple(
            e for e in expenses if e.category is ExpenseCategory.FUEL
        )

    def __len__(self) -> int:
        return len(self._fills)

    def ordered(self) -> List[FuelExpense]:
        return sorted(self._fills, key=lambda e: e.date)

    def pairs(self) -> Iterator[FillPair]:
        """
        Consecutive (prior, current) fill pairs.

        Each call sorts the fills again, so the sequence can be iterated any
        number of times. Fewer than two fills yields nothing.
        """
        fills = self.ordered()
        for prior, current in zip(fills, fills[1:]):
            yield FillPair(prior, current)

    __iter__ = pairs

    def anomalies(self) -> List[FillPair]:
        return [p for p in self.pairs() if p.is_anomaly]
