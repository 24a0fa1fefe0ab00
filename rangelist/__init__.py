"""Sorted, coalesced lists of half-open integer ranges."""
from .errors import InvariantViolation
from .range_list import RangeList
from .ranges import Range

__all__ = ["InvariantViolation", "Range", "RangeList"]
