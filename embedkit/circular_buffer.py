"""Fixed-size byte ring buffer that overwrites the oldest data when full."""

from __future__ import annotations


class BufferEmptyError(Exception):
    """Raised when reading from an empty buffer."""


class CircularBuffer:
    """A ring of bytes; writing to a full buffer drops the oldest byte."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data = bytearray(capacity)
        self._head = 0
        self._tail = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def write(self, value: int) -> None:
        """Store one byte, overwriting the oldest byte if the buffer is full."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        size = len(self._data)
        self._data[self._head] = value
        self._head = (self._head + 1) % size
        if self._count < size:
            self._count += 1
        else:
            self._tail = (self._tail + 1) % size

    def read(self) -> int:
        """Remove and return the oldest byte."""
        if self.is_empty():
            raise BufferEmptyError("buffer is empty")
        value = self._data[self._tail]
        self._tail = (self._tail + 1) % len(self._data)
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._data)

    def __len__(self) -> int:
        return self._count