"""Fixed-size block pool with a LIFO free list."""

from __future__ import annotations

from typing import List


class PoolExhaustedError(Exception):
    """Raised when no free block is left in the pool."""


class MemoryPool:
    """Hands out equally sized writable blocks carved from one buffer."""

    def __init__(self, block_size: int, num_blocks: int) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        if num_blocks < 0:
            raise ValueError("num_blocks must not be negative")
        self.block_size = block_size
        self.num_blocks = num_blocks
        self._storage = bytearray(block_size * num_blocks)
        view = memoryview(self._storage)
        self._blocks: List[memoryview] = [
            view[i * block_size:(i + 1) * block_size] for i in range(num_blocks)
        ]
        # The last block pushed is the first one handed out.
        self._free: List[int] = list(range(num_blocks))

    def _index_of(self, block: memoryview) -> int:
        for index, candidate in enumerate(self._blocks):
            if candidate is block:
                return index
        raise ValueError("block does not belong to this pool")

    def alloc(self) -> memoryview:
        """Take a block from the free list."""
        if not self._free:
            raise PoolExhaustedError("pool exhausted")
        return self._blocks[self._free.pop()]

    def free(self, block: memoryview) -> None:
        """Return a block to the free list; it is the next one handed out."""
        index = self._index_of(block)
        if index in self._free:
            raise ValueError("block is already free")
        self._free.append(index)

    def free_count(self) -> int:
        return len(self._free)