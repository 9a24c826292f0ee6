"""Allocation counters with peak-usage tracking."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AllocStats:
    """Counts allocations and frees and tracks current and peak usage."""

    total_allocations: int = 0
    total_deallocations: int = 0
    bytes_allocated: int = 0
    bytes_freed: int = 0
    peak_usage: int = 0
    current_usage: int = 0

    def record_alloc(self, size: int) -> None:
        """Record an allocation of ``size`` bytes."""
        if size < 0:
            raise ValueError("size must be non-negative")
        self.total_allocations += 1
        self.bytes_allocated += size
        self.current_usage += size
        self.peak_usage = max(self.peak_usage, self.current_usage)

    def record_free(self, size: int) -> None:
        """Record a free of ``size`` bytes; current usage never drops below zero."""
        if size < 0:
            raise ValueError("size must be non-negative")
        self.total_deallocations += 1
        self.bytes_freed += size
        self.current_usage = max(0, self.current_usage - size)

    def is_balanced(self) -> bool:
        """True when no bytes are currently in use."""
        return self.current_usage == 0