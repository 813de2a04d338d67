import pytest

from embedkit.timer_events import TimerEventSystem


def _demo_system(calls):
    system = TimerEventSystem()
    handles = [
        system.add_event(5, lambda: calls.append("cb1")),
        system.add_event(3, lambda: calls.append("cb2")),
        system.add_event(7, lambda: calls.append("cb3")),
        system.add_event(5, lambda: calls.append("cb1")),
    ]
    return system, handles


def test_handles_start_at_one():
    system, handles = _demo_system([])
    assert handles == [1, 2, 3, 4]


def test_register_tracks_earliest_event():
    system, _ = _demo_system([])
    assert system.hardware_register == 3


def test_initial_state_matches_documented_output():
    system, _ = _demo_system([])
    expected = "\n".join([
        "--- Timer System State ---",
        "Current time: 0",
        "Scheduled events:",
        "  Time 3: 1 event(s)",
        "    Handle: 2",
        "  Time 5: 2 event(s)",
        "    Handle: 1",
        "    Handle: 4",
        "  Time 7: 1 event(s)",
        "    Handle: 3",
        "-------------------------",
    ])
    assert system.format_state() == expected


def test_advance_fires_in_time_then_registration_order():
    calls = []
    system, _ = _demo_system(calls)
    fired = system.advance_time(10)
    assert fired == [2, 1, 4, 3]
    assert calls == ["cb2", "cb1", "cb1", "cb3"]
    assert system.current_time == 10
    assert system.scheduled() == []


def test_state_after_advance_matches_documented_output():
    system, _ = _demo_system([])
    system.advance_time(10)
    expected = "\n".join([
        "--- Timer System State ---",
        "Current time: 10",
        "Scheduled events:",
        "-------------------------",
    ])
    assert system.format_state() == expected


def test_partial_advance_leaves_later_events():
    calls = []
    system, _ = _demo_system(calls)
    system.advance_time(5)
    assert calls == ["cb2", "cb1", "cb1"]
    assert system.scheduled() == [(7, [3])]
    assert system.hardware_register == 7


def test_remove_event():
    calls = []
    system = TimerEventSystem()
    handle = system.add_event(15, lambda: calls.append("x"))
    assert system.scheduled() == [(15, [handle])]
    system.remove_event(handle)
    assert system.scheduled() == []
    system.advance_time(20)
    assert calls == []


def test_remove_one_of_two_at_same_time():
    system = TimerEventSystem()
    first = system.add_event(4, lambda: None)
    second = system.add_event(4, lambda: None)
    system.remove_event(first)
    assert system.scheduled() == [(4, [second])]


def test_remove_unknown_handle_raises():
    system = TimerEventSystem()
    with pytest.raises(KeyError):
        system.remove_event(42)


def test_removed_handle_cannot_be_removed_twice():
    system = TimerEventSystem()
    handle = system.add_event(2, lambda: None)
    system.remove_event(handle)
    with pytest.raises(KeyError):
        system.remove_event(handle)


def test_fired_handle_is_no_longer_removable():
    system = TimerEventSystem()
    handle = system.add_event(2, lambda: None)
    system.advance_time(2)
    with pytest.raises(KeyError):
        system.remove_event(handle)


@pytest.mark.parametrize("time", [0, -1])
def test_past_time_rejected(time):
    system = TimerEventSystem()
    with pytest.raises(ValueError):
        system.add_event(time, lambda: None)


def test_time_equal_to_current_rejected_after_advance():
    system = TimerEventSystem()
    system.advance_time(5)
    with pytest.raises(ValueError):
        system.add_event(5, lambda: None)


def test_none_callback_rejected():
    system = TimerEventSystem()
    with pytest.raises(ValueError):
        system.add_event(3, None)


def test_interrupt_with_nothing_due_returns_empty():
    system = TimerEventSystem()
    system.add_event(3, lambda: None)
    assert system.interrupt() == []
    assert system.scheduled() == [(3, [1])]
    assert system.hardware_register == 3


def test_handles_are_unique_after_removal():
    system = TimerEventSystem()
    first = system.add_event(3, lambda: None)
    system.remove_event(first)
    second = system.add_event(3, lambda: None)
    assert second > first