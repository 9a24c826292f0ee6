"""A bounded multi-producer multi-consumer queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class MpmcQueue(Generic[T]):
    """Thread-safe bounded FIFO that any number of threads may push to and pop from.

    ``push`` and ``pop`` never block: a full queue rejects a push and an empty
    queue yields None.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def push(self, value: T) -> bool:
        """Append ``value``; return False if the queue is full."""
        with self._lock:
            if len(self._items) >= self._capacity:
                return False
            self._items.append(value)
            return True

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def is_empty(self) -> bool:
        """True when no items are queued."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def capacity(self) -> int:
        """Maximum number of items held at once."""
        return self._capacity