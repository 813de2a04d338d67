"""Event dispatcher that keeps a list of listeners for each event type."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

EVENT_CLICK = 0
EVENT_KEYPRESS = 1
EVENT_TIMER = 2

Listener = Callable[[Any], None]


@dataclass(frozen=True)
class _Registration:
    id: int
    callback: Listener


class EventSystem:
    """Maps event types to listeners; the newest listener is called first."""

    def __init__(self, max_event_types: int = 10) -> None:
        if max_event_types <= 0:
            raise ValueError("max_event_types must be positive")
        self.max_event_types = max_event_types
        self._listeners: Dict[int, List[_Registration]] = {}
        self._ids = itertools.count(1)
        logger.debug("event system initialized")

    def _check_type(self, event_type: int) -> None:
        if not 0 <= event_type < self.max_event_types:
            raise ValueError(
                f"event type {event_type} outside 0..{self.max_event_types - 1}"
            )

    def add_listener(self, event_type: int, callback: Listener) -> int:
        """Register ``callback`` for ``event_type`` and return its listener id."""
        self._check_type(event_type)
        if callback is None or not callable(callback):
            raise ValueError("callback must be callable")
        registration = _Registration(next(self._ids), callback)
        self._listeners.setdefault(event_type, []).insert(0, registration)
        logger.debug(
            "added listener (ID: %d) for event type %d", registration.id, event_type
        )
        return registration.id

    def remove_listener(self, event_type: int, callback_id: int) -> bool:
        """Remove the listener with ``callback_id``; return whether it was found."""
        self._check_type(event_type)
        listeners = self._listeners.get(event_type, [])
        for position, registration in enumerate(listeners):
            if registration.id == callback_id:
                del listeners[position]
                logger.debug(
                    "removed listener (ID: %d) for event type %d",
                    callback_id, event_type,
                )
                return True
        logger.debug(
            "listener (ID: %d) not found for event type %d", callback_id, event_type
        )
        return False

    def trigger(self, event_type: int, data: Any = None) -> int:
        """Call every listener of ``event_type`` with ``data``; return how many ran."""
        self._check_type(event_type)
        listeners = list(self._listeners.get(event_type, []))
        for registration in listeners:
            registration.callback(data)
        logger.debug(
            "triggered event type %d - called %d callbacks", event_type, len(listeners)
        )
        return len(listeners)

    def clear(self) -> None:
        """Drop every listener of every event type."""
        self._listeners.clear()
        logger.debug("event system cleaned up")