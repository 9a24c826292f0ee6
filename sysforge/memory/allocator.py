"""The interface shared by the allocators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Allocator(ABC):
    """Common contract for allocators that hand out addresses in a buffer."""

    @abstractmethod
    def alloc(self, size: int, align: int) -> Optional[int]:
        """Allocate ``size`` bytes aligned to ``align``; None when exhausted."""

    @abstractmethod
    def reset(self) -> None:
        """Release every allocation at once."""

    @abstractmethod
    def capacity(self) -> int:
        """Total bytes the allocator manages."""

    @abstractmethod
    def used(self) -> int:
        """Bytes currently consumed."""

    def remaining(self) -> int:
        """Bytes still available."""
        return self.capacity() - self.used()

    def is_full(self) -> bool:
        """True when no bytes remain."""
        return self.remaining() == 0