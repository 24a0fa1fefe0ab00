from __future__ import annotations

import logging
from operator import attrgetter
from typing import Iterator, List, Optional, Tuple

from . import engine, observability
from .config import load_settings
from .errors import InvariantViolation
from .ranges import Range, Within
from .sorted_list import SortedList

logger = logging.getLogger(__name__)


class RangeList:
    """Set of integers stored as sorted, disjoint, non-touching ``[low, high)`` ranges.

    Not thread safe: callers sharing an instance must serialize access.
    """

    def __init__(self, validate: Optional[bool] = None) -> None:
        self._store: SortedList = SortedList(key=attrgetter("low"))
        self._validate = load_settings().validate if validate is None else validate

    def add(self, low: int, high: int) -> None:
        """Add ``[low, high)``; empty or inverted ranges are ignored."""
        if not Range.is_valid(low, high):
            self._ignore("add", low, high)
            return
        self._apply(engine.add_range, Range(low, high))
        observability.inc_add()

    def remove(self, low: int, high: int) -> None:
        """Remove ``[low, high)``; empty or inverted ranges are ignored."""
        if not Range.is_valid(low, high):
            self._ignore("remove", low, high)
            return
        self._apply(engine.remove_range, Range(low, high))
        observability.inc_remove()

    def clear(self) -> None:
        self._store.delete_range(0, self._store.size())

    def ranges(self) -> List[Tuple[int, int]]:
        return [r.as_tuple() for r in self._store]

    def to_display_string(self) -> str:
        parts: List[str] = []
        self._store.for_each(lambda r: parts.append(f"{r} "))
        return "".join(parts)

    def _ignore(self, operation: str, low: int, high: int) -> None:
        observability.inc_ignored()
        logger.debug(
            "Ignoring empty range",
            extra={"operation": operation, "low": low, "high": high},
        )

    def _apply(self, operation, value: Range) -> None:
        try:
            operation(value, self._store)
            if self._validate:
                engine.check_invariants(self._store)
        except InvariantViolation:
            observability.inc_invariant_violation()
            logger.error(
                "Range list invariant violated",
                extra={"operation": operation.__name__, "range": str(value)},
                exc_info=True,
            )
            raise

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, int):
            return False
        return isinstance(engine.locate(point, self._store), Within)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.ranges())

    def __len__(self) -> int:
        return self._store.size()

    def __bool__(self) -> bool:
        return self._store.size() > 0

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RangeList({self.ranges()!r})"
