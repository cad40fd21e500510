"""Tests for the stopwatch command queue."""

import threading

import pytest
from tick_stopwatch import (
    AddTimer,
    CommandQueue,
    RemoveSelected,
    SelectNext,
    SelectPrevious,
    SetLabel,
    StopwatchConfig,
    TimerRegistry,
)


class _NullTicker:
    def cancel(self) -> None:
        pass


def make_queue(capacity: int = 8):
    registry = TimerRegistry(
        StopwatchConfig(capacity=capacity),
        ticker_factory=lambda clock: _NullTicker(),
    )
    return registry, CommandQueue(registry)


def test_enqueue_does_not_apply():
    registry, queue = make_queue()
    queue.enqueue(AddTimer())
    assert queue.pending() == 1
    assert registry.timer_count == 1


def test_drain_applies_in_fifo_order():
    registry, queue = make_queue()
    queue.enqueue(AddTimer("b"))
    queue.enqueue(AddTimer("c"))
    queue.enqueue(SelectNext())
    queue.enqueue(SetLabel("a"))
    results = queue.drain()
    assert [accepted for _, accepted in results] == [True, True, True, True]
    assert registry.labels == ("a", "b", "c")
    assert queue.pending() == 0


def test_drain_reports_rejections():
    registry, queue = make_queue(capacity=2)
    queue.enqueue(AddTimer())
    queue.enqueue(AddTimer())
    queue.enqueue(RemoveSelected())
    queue.enqueue(RemoveSelected())
    results = queue.drain()
    assert [accepted for _, accepted in results] == [True, False, True, False]
    assert registry.timer_count == 1


def test_select_previous_command():
    registry, queue = make_queue()
    queue.enqueue(AddTimer())
    queue.enqueue(SelectPrevious())
    queue.drain()
    assert registry.selected_index == 0


def test_set_label_none_clears():
    registry, queue = make_queue()
    queue.enqueue(SetLabel("x"))
    queue.enqueue(SetLabel(None))
    queue.drain()
    assert registry.label(0) is None


def test_commands_after_shutdown_not_accepted():
    registry, queue = make_queue()
    registry.shutdown()
    queue.enqueue(AddTimer())
    queue.enqueue(SelectNext())
    results = queue.drain()
    assert [accepted for _, accepted in results] == [False, False]


def test_unknown_command_raises():
    _, queue = make_queue()
    queue.enqueue("add")
    with pytest.raises(TypeError, match="No handler registered"):
        queue.drain()


def test_commands_are_frozen():
    cmd = SetLabel("x")
    with pytest.raises(AttributeError):
        cmd.text = "y"


def test_enqueue_from_many_threads():
    registry, queue = make_queue()

    def producer():
        for _ in range(100):
            queue.enqueue(SelectNext())

    threads = [threading.Thread(target=producer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert queue.pending() == 400
    assert len(queue.drain()) == 400
