"""Static pool of packet buffers handed out round-robin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from embedkit.block_pool import PoolExhaustedError


@dataclass(eq=False)
class PacketBuffer:
    """One packet-sized buffer and the number of bytes it currently holds."""

    data: bytearray
    length: int = 0
    in_use: bool = False

    @property
    def payload(self) -> bytes:
        return bytes(self.data[:self.length])

    def write(self, data: Union[bytes, bytearray, str]) -> int:
        """Copy ``data`` to the start of the buffer and return its length."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if len(data) > len(self.data):
            raise ValueError(
                f"payload of {len(data)} bytes exceeds buffer of {len(self.data)}"
            )
        self.data[:len(data)] = data
        self.length = len(data)
        return self.length


class PacketPool:
    """Fixed set of buffers; the search for a free one starts after the last taken."""

    def __init__(self, pool_size: int = 1024, packet_size: int = 1500) -> None:
        if pool_size <= 0:
            raise ValueError("pool_size must be positive")
        if packet_size <= 0:
            raise ValueError("packet_size must be positive")
        self.pool_size = pool_size
        self.packet_size = packet_size
        self._buffers: List[PacketBuffer] = [
            PacketBuffer(bytearray(packet_size)) for _ in range(pool_size)
        ]
        self._next = 0

    def get_buffer(self) -> PacketBuffer:
        """Mark the next free buffer in use and return it."""
        for offset in range(self.pool_size):
            index = (self._next + offset) % self.pool_size
            buffer = self._buffers[index]
            if not buffer.in_use:
                buffer.in_use = True
                self._next = (index + 1) % self.pool_size
                return buffer
        raise PoolExhaustedError("packet pool exhausted")

    def release_buffer(self, buffer: PacketBuffer) -> None:
        if not any(candidate is buffer for candidate in self._buffers):
            raise ValueError("buffer does not belong to this pool")
        buffer.in_use = False

    def count_free(self) -> int:
        return sum(1 for buffer in self._buffers if not buffer.in_use)