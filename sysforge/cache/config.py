"""Cache capacity and default time-to-live settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CacheConfig:
    """Maximum entry count and a default TTL in seconds (None: never expire)."""

    capacity: int
    default_ttl: Optional[float] = None

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")
        if self.default_ttl is not None and self.default_ttl < 0:
            raise ValueError("default_ttl must be non-negative")

    @classmethod
    def with_ttl(cls, capacity: int, ttl: float) -> "CacheConfig":
        """Build a config whose entries expire after ``ttl`` seconds by default."""
        return cls(capacity, ttl)