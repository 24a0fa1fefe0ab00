"""Range values and the result of locating a point among stored ranges."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class Range:
    """Half-open integer range ``[low, high)``.

    Bounds are mutable so a stored range can be widened in place.
    """

    low: int
    high: int

    @staticmethod
    def is_valid(low: int, high: int) -> bool:
        return low < high

    def contains(self, point: int) -> bool:
        return self.low <= point < self.high

    def as_tuple(self) -> tuple[int, int]:
        return (self.low, self.high)

    def __str__(self) -> str:
        return "[%d,%d)" % (self.low, self.high)


# Four ways a point relates to the stored ranges.

@dataclass(frozen=True)
class ExceedsLowest:
    """Point lies before every stored range."""


@dataclass(frozen=True)
class ExceedsHighest:
    """Point lies at or after the end of every stored range, or none are stored."""


@dataclass(frozen=True)
class Within:
    """Point lies inside the stored range at ``index``."""

    index: int


@dataclass(frozen=True)
class Between:
    """Point lies in the gap between consecutive ranges ``lower`` and ``upper``."""

    lower: int
    upper: int


LocateResult = Union[ExceedsLowest, ExceedsHighest, Within, Between]
