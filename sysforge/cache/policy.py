"""Eviction strategies that decide which cache key goes next."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class EvictionPolicy(ABC, Generic[K]):
    """Tracks keys and names the next one to evict."""

    @abstractmethod
    def touch(self, key: K) -> None:
        """Record that ``key`` was accessed or inserted."""

    @abstractmethod
    def evict(self) -> Optional[K]:
        """Remove and return the next key to evict, or None if none are tracked."""

    @abstractmethod
    def remove(self, key: K) -> None:
        """Stop tracking ``key``."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every tracked key."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of tracked keys."""

    def is_empty(self) -> bool:
        """True when no keys are tracked."""
        return len(self) == 0


class LruPolicy(EvictionPolicy[K]):
    """Least-recently-used: the key touched longest ago is evicted first."""

    def __init__(self) -> None:
        self._order: "OrderedDict[K, None]" = OrderedDict()

    def touch(self, key: K) -> None:
        self._order[key] = None
        self._order.move_to_end(key)

    def evict(self) -> Optional[K]:
        if not self._order:
            return None
        key, _ = self._order.popitem(last=False)
        return key

    def remove(self, key: K) -> None:
        self._order.pop(key, None)

    def clear(self) -> None:
        self._order.clear()

    def __len__(self) -> int:
        return len(self._order)