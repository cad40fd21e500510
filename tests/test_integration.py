"""End-to-end tests: registry, real tickers, and snapshots together."""

import time

from tick_stopwatch import (
    AddTimer,
    CommandQueue,
    RemoveSelected,
    SnapshotReader,
    StopwatchConfig,
    TimerRegistry,
)
from tick_stopwatch.ticker import Ticker
from tick_stopwatch.types import ClockValue


class ManualTicker:
    def __init__(self, clock) -> None:
        self.clock = clock

    def step(self, n: int = 1) -> None:
        for _ in range(n):
            self.clock.advance()

    def cancel(self) -> None:
        pass


def test_independent_clocks_scenario():
    """65 seconds on one timer, then a second timer joins for 5 more."""
    tickers = []

    def factory(clock):
        ticker = ManualTicker(clock)
        tickers.append(ticker)
        return ticker

    registry = TimerRegistry(ticker_factory=factory)
    reader = SnapshotReader(registry)

    tickers[0].step(65)
    assert reader.read() == (ClockValue(seconds=5, minutes=1),)

    registry.add_timer()
    for _ in range(5):
        for ticker in tickers:
            ticker.step()

    assert reader.read() == (
        ClockValue(seconds=10, minutes=1),
        ClockValue(seconds=5, minutes=0),
    )


def test_concurrent_tickers_stay_on_schedule():
    """N real tickers for T periods each land within a small error of T."""
    period = 0.01
    registry = TimerRegistry(
        StopwatchConfig(capacity=6),
        ticker_factory=lambda clock: Ticker(clock, period=period).start(),
    )
    for _ in range(5):
        registry.add_timer()
    time.sleep(1.5)
    registry.shutdown()

    expected = 1.5 / period
    for value in registry.snapshot_all():
        assert abs(value.total_seconds - expected) <= 15


def test_removing_a_running_timer_keeps_the_others_going():
    period = 0.01
    registry = TimerRegistry(
        ticker_factory=lambda clock: Ticker(clock, period=period).start(),
    )
    queue = CommandQueue(registry)
    queue.enqueue(AddTimer("b"))
    queue.enqueue(AddTimer("c"))
    queue.drain()
    time.sleep(0.2)

    registry.select_previous()  # "b"
    queue.enqueue(RemoveSelected())
    assert queue.drain()[0][1] is True
    before = registry.snapshot_all()
    time.sleep(0.2)
    after = registry.snapshot_all()
    registry.shutdown()

    assert registry.labels == (None, "c")
    for old, new in zip(before, after):
        assert new.total_seconds > old.total_seconds
