"""Allocator of contiguous unit ranges tagged with an owner id."""

from __future__ import annotations

from typing import List


class Allocator:
    """Memory of ``capacity`` units; 0 marks a free unit, else the owner id."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._units: List[int] = [0] * capacity

    def allocate(self, size: int, mid: int) -> int:
        """Claim the leftmost free run of ``size`` units for ``mid``; return its start.

        Raises MemoryError if no run of that length is free.
        """
        if size <= 0:
            raise ValueError("size must be positive")
        if mid <= 0:
            raise ValueError("id must be positive")
        run = 0
        for index, owner in enumerate(self._units):
            run = run + 1 if owner == 0 else 0
            if run == size:
                start = index - size + 1
                self._units[start:index + 1] = [mid] * size
                return start
        raise MemoryError(f"no free block of {size} units")

    def free_memory(self, mid: int) -> int:
        """Release every unit owned by ``mid`` and return how many there were."""
        freed = self._units.count(mid) if mid != 0 else 0
        if freed:
            self._units = [0 if owner == mid else owner for owner in self._units]
        return freed

    def __str__(self) -> str:
        return "[" + ",".join(str(owner) for owner in self._units) + "]"