"""A bump allocator over a fixed byte buffer."""

from __future__ import annotations

from typing import Optional

from sysforge.memory.allocator import Allocator


def _check_align(align: int) -> None:
    if align <= 0 or align & (align - 1):
        raise ValueError(f"alignment must be a positive power of two, got {align}")


class Arena(Allocator):
    """Bump allocator: constant-time allocation, all memory freed by ``reset``.

    Addresses are offsets into the arena's backing buffer, which starts at 0
    and is therefore aligned to every power of two.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._buffer = bytearray(capacity)
        self._cursor = 0

    def alloc(self, size: int, align: int = 1) -> Optional[int]:
        """Reserve ``size`` bytes aligned to ``align``; None if they do not fit."""
        if size < 0:
            raise ValueError("size must be non-negative")
        _check_align(align)
        start = (self._cursor + align - 1) & ~(align - 1)
        end = start + size
        if end > len(self._buffer):
            return None
        self._cursor = end
        return start

    def reset(self) -> None:
        """Rewind the cursor; earlier addresses must no longer be used."""
        self._cursor = 0

    def used(self) -> int:
        """Bytes consumed so far, alignment padding included."""
        return self._cursor

    def capacity(self) -> int:
        """Size of the backing buffer in bytes."""
        return len(self._buffer)

    def remaining(self) -> int:
        """Bytes still free."""
        return len(self._buffer) - self._cursor

    def view(self, address: int, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes at an allocated ``address``."""
        if address < 0 or size < 0 or address + size > self._cursor:
            raise ValueError(
                f"range {address}..{address + size} is outside the allocated region"
            )
        return memoryview(self._buffer)[address:address + size]