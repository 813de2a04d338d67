"""Simulated hardware timer that runs callbacks at scheduled times."""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


class TimerEventSystem:
    """Schedules callbacks at future ticks of a simulated clock.

    ``hardware_register`` holds the time the simulated timer is programmed
    to fire at: the earliest scheduled event.
    """

    def __init__(self) -> None:
        self._events: Dict[int, List[Tuple[int, TimerCallback]]] = {}
        self._handle_time: Dict[int, int] = {}
        self._handles = itertools.count(1)
        self.current_time = 0
        self.hardware_register: Optional[int] = None

    def _program_register(self, timestamp: int) -> None:
        self.hardware_register = timestamp
        logger.debug("setting HW timer register to: %d", timestamp)

    def add_event(self, time: int, callback: TimerCallback) -> int:
        """Schedule ``callback`` at ``time`` and return its handle."""
        if callback is None or not callable(callback):
            raise ValueError("callback must be callable")
        if time <= self.current_time:
            raise ValueError("cannot schedule event in the past")
        handle = next(self._handles)
        self._events.setdefault(time, []).append((handle, callback))
        self._handle_time[handle] = time
        self._program_register(min(self._events))
        logger.debug("timer event registered: handle=%d, time=%d", handle, time)
        return handle

    def remove_event(self, handle: int) -> None:
        """Cancel the event with ``handle``; raise KeyError if it is unknown."""
        try:
            time = self._handle_time.pop(handle)
        except KeyError:
            raise KeyError(f"invalid timer handle {handle}") from None
        remaining = [entry for entry in self._events[time] if entry[0] != handle]
        if remaining:
            self._events[time] = remaining
        else:
            del self._events[time]
        logger.debug("timer event removed: handle=%d", handle)

    def interrupt(self) -> List[int]:
        """Run every event due at the current time; return their handles in order."""
        logger.debug("timer interrupt at time %d", self.current_time)
        due = self._events.pop(self.current_time, [])
        fired = []
        for handle, callback in due:
            logger.debug("executing callback for handle %d", handle)
            callback()
            self._handle_time.pop(handle, None)
            fired.append(handle)
        if self._events:
            self._program_register(min(self._events))
        else:
            logger.debug("no more timer events scheduled")
        return fired

    def advance_time(self, new_time: int) -> List[int]:
        """Step the clock to ``new_time``, firing due events; return fired handles."""
        fired: List[int] = []
        while self.current_time < new_time:
            self.current_time += 1
            if self.current_time in self._events:
                fired.extend(self.interrupt())
        return fired

    def scheduled(self) -> List[Tuple[int, List[int]]]:
        """Pending events as ``(time, handles)`` pairs in time order."""
        return [
            (time, [handle for handle, _ in self._events[time]])
            for time in sorted(self._events)
        ]

    def format_state(self) -> str:
        """Render the clock and pending events as a text report."""
        lines = [
            "--- Timer System State ---",
            f"Current time: {self.current_time}",
            "Scheduled events:",
        ]
        for time, handles in self.scheduled():
            lines.append(f"  Time {time}: {len(handles)} event(s)")
            lines.extend(f"    Handle: {handle}" for handle in handles)
        lines.append("-------------------------")
        return "\n".join(lines)