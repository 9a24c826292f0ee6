"""A least-recently-used cache with optional per-entry expiry."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

from sysforge.cache.config import CacheConfig
from sysforge.cache.policy import LruPolicy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: Optional[float]

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class LruCache(Generic[K, V]):
    """Bounded cache that evicts the least recently used entry when full.

    Entries may carry a time-to-live in seconds; expiry is checked lazily on
    access, or eagerly with ``evict_expired``.
    """

    def __init__(
        self,
        config: CacheConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._clock = clock
        self._entries: Dict[K, _Entry[V]] = {}
        self._policy: LruPolicy[K] = LruPolicy()

    def _drop(self, key: K) -> Optional[_Entry[V]]:
        self._policy.remove(key)
        return self._entries.pop(key, None)

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None if missing or expired.

        A hit makes the entry the most recently used.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._drop(key)
            return None
        self._policy.touch(key)
        return entry.value

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite ``key`` using the configured default TTL."""
        self.set_with_ttl(key, value, self._config.default_ttl)

    def set_with_ttl(self, key: K, value: V, ttl: Optional[float]) -> None:
        """Insert or overwrite ``key`` expiring after ``ttl`` seconds (None: never)."""
        if ttl is not None and ttl < 0:
            raise ValueError("ttl must be non-negative")
        if self._config.capacity == 0:
            return
        expires_at = None if ttl is None else self._clock() + ttl
        if key not in self._entries:
            while len(self._entries) >= self._config.capacity:
                victim = self._policy.evict()
                if victim is None:
                    break
                self._entries.pop(victim, None)
        self._entries[key] = _Entry(value, expires_at)
        self._policy.touch(key)

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or None if absent or expired."""
        entry = self._drop(key)
        if entry is None or entry.is_expired(self._clock()):
            return None
        return entry.value

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """True when the cache holds no entries."""
        return not self._entries

    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._config.capacity

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
        self._policy.clear()

    def evict_expired(self) -> None:
        """Remove every entry whose TTL has passed."""
        now = self._clock()
        stale = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in stale:
            self._drop(key)