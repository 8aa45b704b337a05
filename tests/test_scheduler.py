"""Tests for deferred actions and the debouncer."""

from __future__ import annotations

from neontris.scheduler import Debouncer, Scheduler


def test_call_later_fires_when_due():
    scheduler = Scheduler()
    fired: list[str] = []
    action = scheduler.call_later(100, lambda: fired.append("a"))

    assert scheduler.advance_to(99) == 0
    assert fired == []
    assert action.pending

    assert scheduler.advance_to(100) == 1
    assert fired == ["a"]
    assert action.fired and not action.pending

    assert scheduler.advance_to(500) == 0
    assert fired == ["a"]


def test_actions_fire_in_due_order_then_insertion_order():
    scheduler = Scheduler()
    fired: list[str] = []
    scheduler.call_later(50, lambda: fired.append("late"))
    scheduler.call_later(10, lambda: fired.append("early"))
    scheduler.call_later(10, lambda: fired.append("early-2"))

    scheduler.advance_to(60)
    assert fired == ["early", "early-2", "late"]


def test_cancelled_action_never_fires():
    scheduler = Scheduler()
    fired: list[str] = []
    action = scheduler.call_later(10, lambda: fired.append("x"))
    action.cancel()
    assert scheduler.pending_count() == 0
    assert scheduler.advance_to(100) == 0
    assert fired == []


def test_delay_is_relative_to_current_time():
    scheduler = Scheduler()
    scheduler.advance_to(1000)
    action = scheduler.call_later(80, lambda: None)
    assert action.due == 1080


def test_clock_never_moves_backward():
    scheduler = Scheduler()
    scheduler.advance_to(200)
    scheduler.advance_to(100)
    assert scheduler.now == 200


def test_callback_may_schedule_immediate_follow_up():
    scheduler = Scheduler()
    fired: list[str] = []

    def first() -> None:
        fired.append("first")
        scheduler.call_later(0, lambda: fired.append("second"))

    scheduler.call_later(5, first)
    assert scheduler.advance_to(5) == 2
    assert fired == ["first", "second"]


def test_debouncer_keeps_only_last_trigger():
    scheduler = Scheduler()
    debounce = Debouncer(scheduler, 80)
    values: list[int] = []

    debounce.trigger(lambda: values.append(1))
    scheduler.advance_to(40)
    debounce.trigger(lambda: values.append(2))
    scheduler.advance_to(100)
    assert values == []

    scheduler.advance_to(120)
    assert values == [2]
    assert scheduler.pending_count() == 0


def test_debouncer_cancel():
    scheduler = Scheduler()
    debounce = Debouncer(scheduler, 80)
    values: list[int] = []
    debounce.trigger(lambda: values.append(1))
    debounce.cancel()
    scheduler.advance_to(1000)
    assert values == []
