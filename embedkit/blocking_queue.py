"""Bounded blocking queues and a producer/consumer demonstration."""

from __future__ import annotations

import argparse
import collections
import threading
import time
from typing import Any, Callable, Deque, List, Optional, Sequence


class BlockingQueue:
    """FIFO queue of fixed capacity; ``put`` waits when full, ``get`` when empty."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: Deque[Any] = collections.deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def put(self, item: Any, timeout: Optional[float] = None) -> None:
        """Append ``item``, waiting for room; raise TimeoutError if none appears."""
        with self._not_full:
            if not self._not_full.wait_for(
                lambda: len(self._items) < self.capacity, timeout
            ):
                raise TimeoutError("queue is full")
            self._items.append(item)
            self._not_empty.notify()

    def get(self, timeout: Optional[float] = None) -> Any:
        """Remove and return the oldest item, waiting for one if necessary."""
        with self._not_empty:
            if not self._not_empty.wait_for(lambda: self._items, timeout):
                raise TimeoutError("queue is empty")
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class SemaphoreQueue:
    """Bounded FIFO queue coordinated by a pair of counting semaphores."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: Deque[Any] = collections.deque()
        self._lock = threading.Lock()
        self._empty_slots = threading.Semaphore(capacity)
        self._filled_slots = threading.Semaphore(0)

    def produce(self, item: Any, timeout: Optional[float] = None) -> None:
        """Add ``item`` once a slot is free; raise TimeoutError otherwise."""
        if not self._empty_slots.acquire(timeout=timeout):
            raise TimeoutError("no empty slot")
        with self._lock:
            self._items.append(item)
        self._filled_slots.release()

    def consume(self, timeout: Optional[float] = None) -> Any:
        """Remove and return the oldest item once one is available."""
        if not self._filled_slots.acquire(timeout=timeout):
            raise TimeoutError("no item available")
        with self._lock:
            item = self._items.popleft()
        self._empty_slots.release()
        return item


def producer(
    queue: BlockingQueue,
    count: int,
    delay: float = 0.1,
    log: Callable[[str], None] = print,
) -> List[int]:
    """Put the numbers 1..count into ``queue``, pausing before each."""
    produced = []
    for value in range(1, count + 1):
        if delay:
            time.sleep(delay)
        queue.put(value)
        produced.append(value)
        log(f"Produced: {value}")
    return produced


def consumer(
    queue: BlockingQueue,
    count: int,
    delay: float = 0.15,
    log: Callable[[str], None] = print,
) -> List[Any]:
    """Take ``count`` items from ``queue``, pausing after each."""
    consumed = []
    for _ in range(count):
        item = queue.get()
        consumed.append(item)
        log(f"Consumed: {item}")
        if delay:
            time.sleep(delay)
    return consumed


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a producer and a consumer thread.")
    parser.add_argument("--count", type=int, default=10, help="items to pass through")
    parser.add_argument("--capacity", type=int, default=5, help="queue capacity")
    parser.add_argument("--producer-delay", type=float, default=0.1)
    parser.add_argument("--consumer-delay", type=float, default=0.15)
    args = parser.parse_args(argv)

    queue = BlockingQueue(args.capacity)
    threads = [
        threading.Thread(target=producer, args=(queue, args.count, args.producer_delay)),
        threading.Thread(target=consumer, args=(queue, args.count, args.consumer_delay)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("All items produced and consumed.")
    return 0