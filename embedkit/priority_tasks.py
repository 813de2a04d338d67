"""Priority-ordered task queue shared by producer and consumer threads."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional


@dataclass(frozen=True)
class Task:
    priority: int
    name: str


class TaskQueue:
    """Queue that hands out the highest-priority task first, FIFO among equals."""

    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._cond = threading.Condition()

    def push(self, name: str, priority: int) -> Task:
        task = Task(priority, name)
        with self._cond:
            index = next(
                (i for i, t in enumerate(self._tasks) if t.priority < priority),
                len(self._tasks),
            )
            self._tasks.insert(index, task)
            self._cond.notify()
        return task

    def pop(self, timeout: Optional[float] = None) -> Task:
        """Remove and return the front task, waiting for one if necessary."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._tasks, timeout):
                raise TimeoutError("no task available")
            return self._tasks.pop(0)

    def __len__(self) -> int:
        with self._cond:
            return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        with self._cond:
            return iter(list(self._tasks))


def run_producer(
    queue: TaskQueue,
    producer_id: int,
    task_count: int,
    rng: Optional[random.Random] = None,
    delay: float = 0.05,
    log: Callable[[str], None] = print,
) -> List[Task]:
    """Push ``task_count`` tasks with random priorities in 0..99."""
    rng = rng or random.Random()
    pushed = []
    for i in range(task_count):
        priority = rng.randrange(100)
        name = f"P{producer_id}_T{i}"
        pushed.append(queue.push(name, priority))
        log(f"[Producer {producer_id}] pushed {name} (priority={priority})")
        if delay:
            time.sleep(delay)
    return pushed


def run_consumer(
    queue: TaskQueue,
    consumer_id: int,
    count: int,
    delay: float = 0.08,
    log: Callable[[str], None] = print,
) -> List[Task]:
    """Pop ``count`` tasks, blocking until each is available."""
    consumed = []
    for _ in range(count):
        task = queue.pop()
        consumed.append(task)
        log(f"  [Consumer {consumer_id}] got {task.name} (priority={task.priority})")
        if delay:
            time.sleep(delay)
    return consumed