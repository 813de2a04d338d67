import pytest

from embedkit.event_system import (
    EVENT_CLICK,
    EVENT_KEYPRESS,
    EVENT_TIMER,
    EventSystem,
)


@pytest.fixture
def system():
    return EventSystem()


def test_ids_start_at_one_and_increase(system):
    first = system.add_listener(EVENT_CLICK, lambda d: None)
    second = system.add_listener(EVENT_KEYPRESS, lambda d: None)
    assert first == 1
    assert second == first + 1


def test_trigger_calls_newest_listener_first(system):
    calls = []
    system.add_listener(EVENT_CLICK, lambda d: calls.append(("h1", d)))
    system.add_listener(EVENT_CLICK, lambda d: calls.append(("h2", d)))
    count = system.trigger(EVENT_CLICK, (100, 200))
    assert count == 2
    assert calls == [("h2", (100, 200)), ("h1", (100, 200))]


def test_trigger_only_reaches_listeners_of_that_type(system):
    calls = []
    system.add_listener(EVENT_CLICK, lambda d: calls.append("click"))
    system.add_listener(EVENT_TIMER, lambda d: calls.append("timer"))
    assert system.trigger(EVENT_TIMER, None) == 1
    assert calls == ["timer"]


def test_trigger_with_no_listeners_returns_zero(system):
    assert system.trigger(5) == 0


def test_remove_listener(system):
    calls = []
    first = system.add_listener(EVENT_CLICK, lambda d: calls.append("h1"))
    system.add_listener(EVENT_CLICK, lambda d: calls.append("h2"))
    assert system.remove_listener(EVENT_CLICK, first) is True
    assert system.trigger(EVENT_CLICK, None) == 1
    assert calls == ["h2"]


def test_remove_unknown_listener_returns_false(system):
    system.add_listener(EVENT_CLICK, lambda d: None)
    assert system.remove_listener(EVENT_CLICK, 999) is False


def test_remove_from_wrong_type_returns_false(system):
    listener_id = system.add_listener(EVENT_CLICK, lambda d: None)
    assert system.remove_listener(EVENT_TIMER, listener_id) is False
    assert system.trigger(EVENT_CLICK) == 1


@pytest.mark.parametrize("event_type", [10, 11, -1])
def test_out_of_range_event_type_rejected(system, event_type):
    with pytest.raises(ValueError):
        system.add_listener(event_type, lambda d: None)
    with pytest.raises(ValueError):
        system.trigger(event_type)
    with pytest.raises(ValueError):
        system.remove_listener(event_type, 1)


def test_none_callback_rejected(system):
    with pytest.raises(ValueError):
        system.add_listener(EVENT_CLICK, None)


def test_custom_type_count(system):
    small = EventSystem(max_event_types=3)
    assert small.add_listener(2, lambda d: None) == 1
    with pytest.raises(ValueError):
        small.add_listener(3, lambda d: None)


def test_clear_removes_everything(system):
    system.add_listener(EVENT_CLICK, lambda d: None)
    system.add_listener(EVENT_TIMER, lambda d: None)
    system.clear()
    assert system.trigger(EVENT_CLICK) == 0
    assert system.trigger(EVENT_TIMER) == 0


def test_ids_keep_increasing_after_removal(system):
    first = system.add_listener(EVENT_CLICK, lambda d: None)
    system.remove_listener(EVENT_CLICK, first)
    second = system.add_listener(EVENT_CLICK, lambda d: None)
    assert second > first