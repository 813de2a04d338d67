"""Thread-safe singly linked list of values."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list guarded by a lock for use across threads."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._lock = threading.RLock()
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        with self._lock:
            self._head = _Node(value, self._head)

    def append(self, value: Any) -> None:
        node = _Node(value)
        with self._lock:
            if self._head is None:
                self._head = node
                return
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        with self._lock:
            prev: Optional[_Node] = None
            current = self._head
            while current is not None and current.value != value:
                prev, current = current, current.next
            if current is None:
                return False
            if prev is None:
                self._head = current.next
            else:
                prev.next = current.next
            return True

    def clear(self) -> None:
        with self._lock:
            self._head = None

    def _snapshot(self) -> list:
        with self._lock:
            values = []
            current = self._head
            while current is not None:
                values.append(current.value)
                current = current.next
            return values

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._snapshot())

    def __str__(self) -> str:
        return "".join(f"{v} -> " for v in self._snapshot()) + "NULL"