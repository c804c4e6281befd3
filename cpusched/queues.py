"""Bounded FIFO and priority queues."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable
from itertools import count
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be positive")


class FifoQueue(Generic[T]):
    """First-in first-out queue holding at most ``capacity`` items.

    Enqueueing onto a full queue drops the item; dequeueing or peeking an
    empty queue gives None.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T) -> bool:
        """Add ``item`` at the back; return False if the queue was full."""
        if self.is_full():
            return False
        self._items.append(item)
        return True

    def dequeue(self) -> T | None:
        """Remove and return the front item, or None when empty."""
        return self._items.popleft() if self._items else None

    def peek(self) -> T | None:
        """Return the front item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def clear(self) -> int:
        """Remove every item and return how many were removed."""
        removed = len(self._items)
        self._items.clear()
        return removed


class PriorityQueue(Generic[T]):
    """Queue that gives back the item with the smallest key first.

    Holds at most ``capacity`` items; enqueueing onto a full queue drops
    the item, and dequeueing or peeking an empty queue gives None.
    """

    def __init__(self, capacity: int, key: Callable[[T], Any]) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._key = key
        self._heap: list[tuple[Any, int, T]] = []
        self._order = count()

    def __len__(self) -> int:
        return len(self._heap)

    def enqueue(self, item: T) -> bool:
        """Add ``item``; return False if the queue was full."""
        if self.is_full():
            return False
        heapq.heappush(self._heap, (self._key(item), next(self._order), item))
        return True

    def dequeue(self) -> T | None:
        """Remove and return the item with the smallest key, or None."""
        return heapq.heappop(self._heap)[2] if self._heap else None

    def peek(self) -> T | None:
        """Return the item with the smallest key without removing it."""
        return self._heap[0][2] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) == self.capacity