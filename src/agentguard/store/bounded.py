"""Capacity-bounded FIFO sequence."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedLog(Generic[T]):
    """Append-only sequence that evicts its oldest entries beyond ``capacity``."""

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity}")
        self.capacity = capacity
        self._items: deque[T] = deque(maxlen=capacity)
        self.evicted = 0
        self.extend(items)

    def append(self, item: T) -> T | None:
        """Append ``item`` and return the entry evicted to make room, if any."""
        evicted: T | None = None
        if len(self._items) == self.capacity:
            evicted = self._items[0]
            self.evicted += 1
        self._items.append(item)
        return evicted

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def to_list(self) -> list[T]:
        """Return entries in insertion order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
