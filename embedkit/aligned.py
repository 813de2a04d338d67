"""Aligned allocation on top of a plain allocator, over a simulated address space.

The aligned block is carved out of a larger raw allocation. The raw address
is stored in the pointer-sized slot just before the aligned block, so that
``free_aligned`` can find and release the original allocation.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SIMD_ALIGN_16 = 16
SIMD_ALIGN_32 = 32


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class SimulatedHeap:
    """A byte-addressed heap handing out blocks from increasing addresses."""

    def __init__(self, base: int = 0x10000, pointer_size: int = 8) -> None:
        if pointer_size not in (4, 8):
            raise ValueError("pointer_size must be 4 or 8")
        if base < 0 or base >= 1 << (8 * pointer_size):
            raise ValueError("base does not fit in the address space")
        self.pointer_size = pointer_size
        self._granule = 2 * pointer_size
        self._next = base
        self._blocks: Dict[int, bytearray] = {}

    def malloc(self, size: int) -> int:
        """Reserve ``size`` zeroed bytes and return the start address."""
        if size <= 0:
            raise ValueError("size must be positive")
        address = self._next
        end = address + size
        if end > 1 << (8 * self.pointer_size):
            raise MemoryError("address space exhausted")
        self._blocks[address] = bytearray(size)
        self._next = (end + self._granule - 1) // self._granule * self._granule
        return address

    def free(self, address: int) -> None:
        """Release the block that starts at ``address``."""
        if address not in self._blocks:
            raise ValueError(f"address {address:#x} is not the start of a live block")
        del self._blocks[address]

    def _locate(self, address: int, length: int) -> Tuple[bytearray, int]:
        for start, block in self._blocks.items():
            if start <= address and address + length <= start + len(block):
                return block, address - start
        raise ValueError(
            f"range {address:#x}..{address + length:#x} is not inside a live block"
        )

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes starting at ``address``."""
        if length < 0:
            raise ValueError("length must not be negative")
        block, offset = self._locate(address, length)
        return bytes(block[offset:offset + length])

    def write(self, address: int, data: bytes) -> None:
        """Copy ``data`` into memory starting at ``address``."""
        block, offset = self._locate(address, len(data))
        block[offset:offset + len(data)] = data

    def read_pointer(self, address: int) -> int:
        return int.from_bytes(self.read(address, self.pointer_size), "little")

    def write_pointer(self, address: int, value: int) -> None:
        self.write(address, value.to_bytes(self.pointer_size, "little"))


@dataclass(frozen=True)
class MemoryLayout:
    """Addresses that make up one aligned allocation."""

    raw_address: int
    aligned_address: int
    alignment: int
    pointer_size: int

    @property
    def slot_address(self) -> int:
        """Where the raw address is stored."""
        return self.aligned_address - self.pointer_size

    @property
    def padding(self) -> int:
        """Unused bytes between the raw start and the pointer slot."""
        return self.slot_address - self.raw_address

    @property
    def remainder(self) -> int:
        """Aligned address modulo the alignment; zero when correctly aligned."""
        return self.aligned_address % self.alignment


class AlignedAllocator:
    """Hands out blocks whose start is a multiple of a power-of-two alignment."""

    def __init__(self, heap: Optional[SimulatedHeap] = None) -> None:
        self.heap = heap if heap is not None else SimulatedHeap()

    def malloc_aligned(self, size: int, alignment: int) -> int:
        """Allocate ``size`` bytes aligned to ``alignment`` and return the address."""
        if size <= 0 or alignment <= 0:
            raise ValueError("size and alignment must be positive")
        if not _is_power_of_two(alignment):
            raise ValueError(f"alignment {alignment} is not a power of two")
        pointer_size = self.heap.pointer_size
        total = size + alignment - 1 + pointer_size
        raw = self.heap.malloc(total)
        base = raw + pointer_size
        aligned = (base + alignment - 1) & ~(alignment - 1)
        self.heap.write_pointer(aligned - pointer_size, raw)
        logger.debug(
            "malloc_aligned(size=%d, alignment=%d): total=%d raw=%#x aligned=%#x",
            size, alignment, total, raw, aligned,
        )
        return aligned

    def free_aligned(self, address: Optional[int]) -> None:
        """Release a block from ``malloc_aligned``; ``None`` is ignored."""
        if address is None:
            return
        raw = self.heap.read_pointer(address - self.heap.pointer_size)
        logger.debug("free_aligned(%#x): raw=%#x", address, raw)
        self.heap.free(raw)

    def layout(self, address: int, alignment: int) -> MemoryLayout:
        """Describe the allocation whose aligned start is ``address``."""
        raw = self.heap.read_pointer(address - self.heap.pointer_size)
        return MemoryLayout(raw, address, alignment, self.heap.pointer_size)


def _hex(address: int, pointer_size: int) -> str:
    return f"0x{address:0{pointer_size * 2}x}"


def format_layout(layout: MemoryLayout) -> str:
    """Render a memory layout as a boxed text diagram with an analysis."""
    width = layout.pointer_size
    rule = "+" + "-" * 61 + "+"

    def row(text: str) -> str:
        return f"| {text:<60}|"

    lines = [
        "Memory Layout:",
        rule,
        row("Raw Memory Block (from malloc)"),
        rule,
        row(f"Raw Start: {_hex(layout.raw_address, width)}"),
        rule,
        row("[Potential Padding]"),
        rule,
        row(f"Original Ptr Storage: {_hex(layout.slot_address, width)}"),
        row(f"Contains: {_hex(layout.raw_address, width)}"),
        rule,
        row(f"Aligned Memory Start: {_hex(layout.aligned_address, width)} (USER DATA)"),
        row(f"Alignment: {layout.alignment} bytes"),
        rule,
        "",
        "Address Analysis:",
        f"- Padding bytes: {layout.padding}",
        f"- Pointer storage size: {layout.pointer_size} bytes",
        f"- Alignment check: {_hex(layout.aligned_address, width)} % "
        f"{layout.alignment} = {layout.remainder} (should be 0)",
    ]
    return "\n".join(lines)


def _banner(title: str) -> None:
    print()
    print("=" * 60)
    print(title)
    print("=" * 60)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate aligned allocation.")
    parser.add_argument("--pointer-size", type=int, choices=(4, 8), default=8)
    parser.add_argument("--base", type=lambda text: int(text, 0), default=0x10000)
    args = parser.parse_args(argv)

    allocator = AlignedAllocator(SimulatedHeap(args.base, args.pointer_size))
    heap = allocator.heap
    print("=== ALIGNED MEMORY ALLOCATION TEST ===")
    print(f"sizeof(void*) = {heap.pointer_size} bytes")

    _banner("TEST CASE 1: 100 bytes with 16-byte alignment")
    ptr1 = allocator.malloc_aligned(100, SIMD_ALIGN_16)
    print(format_layout(allocator.layout(ptr1, SIMD_ALIGN_16)))
    print("\nTesting memory write/read:")
    message = b"Hello, aligned memory!"
    heap.write(ptr1, message)
    print(f"Written and read back: '{heap.read(ptr1, len(message)).decode()}'")
    allocator.free_aligned(ptr1)

    _banner("TEST CASE 2: 256 bytes with 32-byte alignment")
    ptr2 = allocator.malloc_aligned(256, SIMD_ALIGN_32)
    print(format_layout(allocator.layout(ptr2, SIMD_ALIGN_32)))
    print("\nTesting pattern fill:")
    heap.write(ptr2, b"".join((i * 2).to_bytes(4, "little") for i in range(64)))
    raw = heap.read(ptr2, 40)
    values = [int.from_bytes(raw[i:i + 4], "little") for i in range(0, 40, 4)]
    print("Pattern verification (first 10 values): " + " ".join(map(str, values)))
    allocator.free_aligned(ptr2)

    _banner("TEST CASE 3: 50 bytes with 8-byte alignment")
    ptr3 = allocator.malloc_aligned(50, 8)
    print(format_layout(allocator.layout(ptr3, 8)))
    allocator.free_aligned(ptr3)

    _banner("TEST CASE 4: Error handling")
    for label, size, alignment in (
        ("invalid alignment (non-power-of-2)", 100, 15),
        ("negative size", -10, 16),
    ):
        print(f"Testing {label}:")
        try:
            allocator.malloc_aligned(size, alignment)
        except ValueError as exc:
            print(f"Result: rejected ({exc})")
        else:
            print("Result: unexpectedly allocated")
    print("\nTesting free with None:")
    allocator.free_aligned(None)

    print("\n=== ALL TESTS COMPLETED ===")
    return 0