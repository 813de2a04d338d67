"""Three-state LED controller driven by button and timer events."""

from __future__ import annotations

import enum


class State(enum.Enum):
    OFF = 0
    ON = 1
    BLINK = 2


class Event(enum.Enum):
    BUTTON_PRESS = 0
    TIMER_EXPIRE = 1


def process_event(state: State, event: Event) -> State:
    """Return the state that follows ``state`` when ``event`` occurs."""
    if event is Event.BUTTON_PRESS:
        return {
            State.OFF: State.ON,
            State.ON: State.BLINK,
            State.BLINK: State.OFF,
        }[state]
    return state


class Led:
    """A simulated LED that reports each change on standard output."""

    def __init__(self) -> None:
        self.is_on = False

    def _report(self) -> bool:
        print(f"LED is {'ON' if self.is_on else 'OFF'}")
        return self.is_on

    def on(self) -> bool:
        self.is_on = True
        return self._report()

    def off(self) -> bool:
        self.is_on = False
        return self._report()

    def toggle(self) -> bool:
        self.is_on = not self.is_on
        return self._report()

    def handle_state(self, state: State) -> bool:
        """Perform the action for ``state`` and return whether the LED is lit."""
        actions = {State.OFF: self.off, State.ON: self.on, State.BLINK: self.toggle}
        return actions[state]()