"""A first-in, first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when adding to a queue that is at capacity."""


class QueueEmptyError(Exception):
    """Raised when reading from a queue that holds nothing."""


class ArrayQueue(Generic[T]):
    """A queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f" {item} <-- " for item in self._items)

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]