"""A bounded, thread-safe, non-blocking FIFO queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class QueueEmpty(Exception):
    """Raised by dequeue when no item is available."""


class FIFOQueue(Generic[T]):
    """Bounded first-in first-out queue whose operations never block.

    ``enqueue`` reports whether the item was accepted; it is refused when
    the queue is full or closed. A closed queue still yields the items it
    holds.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once the queue has been closed."""
        return self._closed

    def __len__(self) -> int:
        return self.size()

    def enqueue(self, item: T) -> bool:
        """Append ``item``; return False if the queue is full or closed."""
        with self._lock:
            if self._closed or len(self._items) >= self.capacity:
                return False
            self._items.append(item)
            return True

    def dequeue(self) -> T:
        """Remove and return the oldest item; raise QueueEmpty if none."""
        with self._lock:
            if not self._items:
                raise QueueEmpty("queue is empty")
            return self._items.popleft()

    def size(self) -> int:
        """Return the number of items currently queued."""
        with self._lock:
            return len(self._items)

    def close(self) -> None:
        """Refuse further items; safe to call more than once."""
        with self._lock:
            self._closed = True

    def clear(self) -> None:
        """Drop all queued items, unless the queue is closed."""
        with self._lock:
            if not self._closed:
                self._items.clear()