"""Tests for TimerSlot lifecycle."""

import pytest
from tick_stopwatch.slot import TimerSlot
from tick_stopwatch.types import ClockValue


class RecordingTicker:
    def __init__(self, clock=None) -> None:
        self.clock = clock
        self.cancel_calls = 0

    def cancel(self) -> None:
        self.cancel_calls += 1


def test_new_slot_is_zeroed_and_idle():
    slot = TimerSlot()
    assert slot.read() == ClockValue()
    assert slot.label is None
    assert not slot.ticking
    assert not slot.destroyed


def test_new_slot_with_label():
    slot = TimerSlot("tea")
    assert slot.label == "tea"


def test_set_label_does_not_touch_clock():
    slot = TimerSlot()
    slot.clock.advance()
    slot.set_label("pasta")
    assert slot.label == "pasta"
    assert slot.read().seconds == 1
    slot.set_label(None)
    assert slot.label is None


def test_attach_marks_slot_ticking():
    slot = TimerSlot()
    slot.attach(RecordingTicker(slot.clock))
    assert slot.ticking


def test_attach_twice_raises():
    slot = TimerSlot()
    slot.attach(RecordingTicker())
    with pytest.raises(RuntimeError):
        slot.attach(RecordingTicker())


def test_destroy_cancels_ticker():
    slot = TimerSlot()
    ticker = RecordingTicker()
    slot.attach(ticker)
    slot.destroy()
    assert ticker.cancel_calls == 1
    assert not slot.ticking
    assert slot.destroyed


def test_destroy_is_idempotent():
    slot = TimerSlot()
    ticker = RecordingTicker()
    slot.attach(ticker)
    slot.destroy()
    slot.destroy()
    assert ticker.cancel_calls == 1


def test_destroy_without_ticker():
    slot = TimerSlot()
    slot.destroy()
    assert slot.destroyed


def test_attach_after_destroy_raises():
    slot = TimerSlot()
    slot.destroy()
    with pytest.raises(RuntimeError):
        slot.attach(RecordingTicker())
