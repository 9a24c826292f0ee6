"""A fixed-size block allocator with a free list."""

from __future__ import annotations

import struct
from typing import List, Optional, Set

_POINTER_SIZE = struct.calcsize("P")


class PoolAllocator:
    """Hands out equally sized blocks from one buffer in constant time.

    Blocks are identified by their byte offset in the backing buffer.
    """

    def __init__(self, block_size: int, num_blocks: int) -> None:
        if block_size < 0 or num_blocks < 0:
            raise ValueError("block_size and num_blocks must be non-negative")
        self._block_size = max(block_size, _POINTER_SIZE)
        self._num_blocks = num_blocks
        self._buffer = bytearray(self._block_size * num_blocks)
        # Stack of free offsets; the lowest block sits on top.
        self._free: List[int] = [
            index * self._block_size for index in reversed(range(num_blocks))
        ]
        self._in_use: Set[int] = set()

    def alloc(self) -> Optional[int]:
        """Take a free block, or return None when the pool is exhausted."""
        if not self._free:
            return None
        block = self._free.pop()
        self._in_use.add(block)
        return block

    def free(self, block: int) -> None:
        """Return ``block`` to the pool.

        Raises ValueError if it is not a block currently handed out by this pool.
        """
        if not 0 <= block < len(self._buffer) or block % self._block_size:
            raise ValueError(f"address {block} is not a block of this pool")
        if block not in self._in_use:
            raise ValueError(f"block {block} is not allocated")
        self._in_use.remove(block)
        self._free.append(block)

    def allocated(self) -> int:
        """Number of blocks currently in use."""
        return len(self._in_use)

    def available(self) -> int:
        """Number of blocks free for allocation."""
        return len(self._free)

    def capacity(self) -> int:
        """Total number of blocks."""
        return self._num_blocks

    def block_size(self) -> int:
        """Effective block size, never smaller than a pointer."""
        return self._block_size