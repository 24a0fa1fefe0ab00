"""A simple sorted list implementation using Python's built-in tools.

Items are kept ordered by a sort key (the item itself by default).  Besides
ordered insertion the list offers the positional operations the range list
engine needs: bounded lookup with :meth:`SortedList.at` and contiguous
deletion with :meth:`SortedList.delete_range`.
"""
from __future__ import annotations

from bisect import bisect_left, insort
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


class SortedList:
    """Maintain a list ordered by ``key`` without relying on third-party packages."""

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        key: Callable[[T], Any] | None = None,
    ) -> None:
        self._key = key or _identity
        self._items: List[T] = (
            sorted(iterable, key=self._key) if iterable is not None else []
        )

    def add(self, value: T) -> None:
        """Insert ``value`` keeping the list ordered.

        Items with an equal key are placed after the existing ones.
        """
        insort(self._items, value, key=self._key)

    def remove(self, value: T) -> None:
        """Remove first occurrence of ``value`` or raise ``ValueError``."""
        idx = bisect_left(self._items, self._key(value), key=self._key)
        while idx < len(self._items) and self._key(self._items[idx]) == self._key(value):
            if self._items[idx] is value or self._items[idx] == value:
                self._items.pop(idx)
                return
            idx += 1
        raise ValueError(f"{value!r} not in list")

    def delete_range(self, start: int, count: int) -> None:
        """Delete ``count`` items starting at ``start``.

        Nothing happens when ``start`` is out of bounds.
        """
        if 0 <= start < len(self._items):
            del self._items[start:start + count]

    def at(self, index: int) -> Optional[T]:
        """Return the item at ``index`` or ``None`` when out of bounds."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def size(self) -> int:
        return len(self._items)

    def for_each(self, visitor: Callable[[T], None]) -> None:
        for item in self._items:
            visitor(item)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._items)

    def __getitem__(self, index: int) -> T:  # pragma: no cover - trivial
        return self._items[index]

    def __iter__(self) -> Iterator[T]:  # pragma: no cover - trivial
        return iter(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedList({self._items!r})"
