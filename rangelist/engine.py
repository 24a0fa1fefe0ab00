"""Merge and split logic keeping a :class:`SortedList` of ranges coalesced.

Every function here works on a store whose ranges are sorted by ``low``,
pairwise disjoint and never touching (``a.high < b.low`` for neighbours).
Callers validate ``low < high`` before handing a range over.
"""
from __future__ import annotations

import logging
from typing import Tuple

from .errors import InvariantViolation
from .ranges import Between, ExceedsHighest, ExceedsLowest, LocateResult, Range, Within
from .sorted_list import SortedList

logger = logging.getLogger(__name__)


def _required(store: SortedList, index: int) -> Range:
    item = store.at(index)
    if item is None:
        raise InvariantViolation(
            f"no stored range at index {index} (size {store.size()})"
        )
    return item


def _unexpected(loc: object) -> InvariantViolation:
    return InvariantViolation(f"unexpected locate result {loc!r}")


def locate(point: int, store: SortedList) -> LocateResult:
    """Binary search ``store`` for the position of ``point``."""
    begin = 0
    end = store.size() - 1

    while end - begin > 1:
        mid = (begin + end) // 2
        current = _required(store, mid)
        if current.contains(point):
            return Within(mid)
        if current.low > point:
            end = mid
        else:
            begin = mid

    if end < 0:
        return ExceedsHighest()

    lower = _required(store, begin)
    upper = _required(store, end)
    if lower.contains(point):
        return Within(begin)
    if upper.contains(point):
        return Within(end)
    if lower.low > point:
        return ExceedsLowest()
    if upper.high <= point:
        return ExceedsHighest()
    return Between(begin, end)


def _merge_start(loc: LocateResult, new: Range, store: SortedList) -> Tuple[int, int]:
    """Return the first index to merge and the low bound of the merged range."""
    if isinstance(loc, ExceedsLowest):
        return 0, new.low
    if isinstance(loc, Within):
        return loc.index, _required(store, loc.index).low
    if isinstance(loc, Between):
        lower = _required(store, loc.lower)
        # new range fills the gap right after ``lower``
        if lower.high == new.low:
            return loc.lower, lower.low
        _required(store, loc.upper)
        return loc.upper, new.low
    raise _unexpected(loc)


def _merge_stop(loc: LocateResult, new: Range, store: SortedList) -> Tuple[int, int]:
    """Return the last index to merge and the high bound of the merged range."""
    if isinstance(loc, ExceedsHighest):
        last = store.size() - 1
        _required(store, last)
        return last, new.high
    if isinstance(loc, Within):
        return loc.index, _required(store, loc.index).high
    if isinstance(loc, Between):
        upper = _required(store, loc.upper)
        # new range fills the gap right before ``upper``
        if upper.low == new.high:
            return loc.upper, upper.high
        _required(store, loc.lower)
        return loc.lower, new.high
    raise _unexpected(loc)


def add_range(new: Range, store: SortedList) -> None:
    """Insert the integers of ``new`` into ``store``, merging neighbours."""
    low_loc = locate(new.low, store)
    high_loc = locate(new.high - 1, store)

    if isinstance(low_loc, ExceedsHighest):
        last = store.at(store.size() - 1)
        if last is not None and last.high == new.low:
            last.high = new.high
            logger.debug("Extended last range to %s", last)
            return
        store.add(new)
        logger.debug("Appended %s", new)
        return

    if isinstance(high_loc, ExceedsLowest):
        first = store.at(0)
        if first is not None and first.low == new.high:
            first.low = new.low
            logger.debug("Extended first range to %s", first)
            return
        store.add(new)
        logger.debug("Prepended %s", new)
        return

    start, floor = _merge_start(low_loc, new, store)
    stop, ceiling = _merge_stop(high_loc, new, store)
    # stop == start - 1 when new sits alone inside a gap
    store.delete_range(start, stop - start + 1)
    merged = Range(floor, ceiling)
    store.add(merged)
    logger.debug("Merged indices %d..%d into %s", start, stop, merged)


def _remove_start(loc: LocateResult) -> int:
    if isinstance(loc, ExceedsLowest):
        return 0
    if isinstance(loc, Within):
        return loc.index
    if isinstance(loc, Between):
        return loc.upper
    raise _unexpected(loc)


def _remove_stop(loc: LocateResult, store: SortedList) -> int:
    if isinstance(loc, ExceedsHighest):
        return store.size() - 1
    if isinstance(loc, Within):
        return loc.index
    if isinstance(loc, Between):
        return loc.lower
    raise _unexpected(loc)


def remove_range(old: Range, store: SortedList) -> None:
    """Remove the integers of ``old`` from ``store``, splitting ranges."""
    if store.size() == 0:
        return

    low_loc = locate(old.low, store)
    high_loc = locate(old.high - 1, store)
    if isinstance(low_loc, ExceedsHighest) or isinstance(high_loc, ExceedsLowest):
        return

    start = _remove_start(low_loc)
    stop = _remove_stop(high_loc, store)
    start_range = _required(store, start)
    stop_range = _required(store, stop)

    store.delete_range(start, stop - start + 1)
    if old.low > start_range.low:
        store.add(Range(start_range.low, old.low))
    if stop_range.low < old.high < stop_range.high:
        store.add(Range(old.high, stop_range.high))
    logger.debug("Removed %s from indices %d..%d", old, start, stop)


def check_invariants(store: SortedList) -> None:
    """Raise :class:`InvariantViolation` unless ``store`` is sorted and coalesced."""
    previous = None
    for index, current in enumerate(store):
        if not Range.is_valid(current.low, current.high):
            raise InvariantViolation(f"empty or inverted range {current} at index {index}")
        if previous is not None:
            if current.low < previous.low:
                raise InvariantViolation(f"{current} at index {index} is out of order")
            if current.low < previous.high:
                raise InvariantViolation(f"{previous} and {current} overlap")
            if current.low == previous.high:
                raise InvariantViolation(f"{previous} and {current} touch")
        previous = current
