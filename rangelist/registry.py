"""In-memory registry of named range lists, one lock per list."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from .errors import RegistryFullError
from .range_list import RangeList


class RangeListRegistry:
    def __init__(self, max_lists: int = 1024) -> None:
        self.max_lists = max_lists
        self._lists: Dict[str, RangeList] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def names(self) -> List[str]:
        with self._guard:
            return sorted(self._lists)

    def __contains__(self, name: str) -> bool:
        with self._guard:
            return name in self._lists

    def _get_or_create(self, name: str) -> tuple[RangeList, threading.Lock]:
        with self._guard:
            if name not in self._lists:
                if len(self._lists) >= self.max_lists:
                    raise RegistryFullError(f"limit of {self.max_lists} range lists reached")
                self._lists[name] = RangeList()
                self._locks[name] = threading.Lock()
            return self._lists[name], self._locks[name]

    @contextmanager
    def locked(self, name: str, create: bool = False) -> Iterator[RangeList]:
        """Hold the lock of ``name`` for the duration of the block.

        Raises ``KeyError`` for unknown names unless ``create`` is set.
        """
        if create:
            range_list, lock = self._get_or_create(name)
        else:
            with self._guard:
                range_list, lock = self._lists[name], self._locks[name]
        with lock:
            yield range_list

    def delete(self, name: str) -> None:
        with self._guard:
            del self._lists[name]
            del self._locks[name]
