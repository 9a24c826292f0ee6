"""A bounded single-producer single-consumer ring buffer."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class SpscQueue(Generic[T]):
    """Fixed-size FIFO ring for exactly one producer and one consumer thread.

    The ring has ``size`` slots, one of which is kept empty to tell a full
    queue from an empty one, so at most ``size - 1`` items are held. Only the
    producer moves the tail and only the consumer moves the head.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._slots: List[Optional[T]] = [None] * size
        self._head = 0
        self._tail = 0

    def push(self, value: T) -> bool:
        """Append ``value``; return False if the queue is full."""
        tail = self._tail
        following = (tail + 1) % self._size
        if following == self._head:
            return False
        self._slots[tail] = value
        self._tail = following
        return True

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the queue is empty."""
        head = self._head
        if head == self._tail:
            return None
        value = self._slots[head]
        self._slots[head] = None
        self._head = (head + 1) % self._size
        return value

    def is_empty(self) -> bool:
        """True when no items are queued."""
        return self._head == self._tail

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size

    def capacity(self) -> int:
        """Maximum number of items held at once."""
        return self._size - 1