"""tick-stopwatch - A concurrent multi-timer stopwatch engine."""

from tick_stopwatch.clock import Clock, GuardedClock
from tick_stopwatch.commands import (
    AddTimer,
    CommandQueue,
    RemoveSelected,
    SelectNext,
    SelectPrevious,
    SetLabel,
)
from tick_stopwatch.config import DEFAULT_CAPACITY, StopwatchConfig
from tick_stopwatch.logging_config import setup_logging
from tick_stopwatch.registry import TimerRegistry
from tick_stopwatch.slot import TimerSlot
from tick_stopwatch.snapshot import SnapshotReader, snapshot_all
from tick_stopwatch.ticker import TICK_PERIOD, Ticker, start_ticker
from tick_stopwatch.types import ClockValue

__all__ = [
    "Clock",
    "GuardedClock",
    "ClockValue",
    "Ticker",
    "TICK_PERIOD",
    "start_ticker",
    "TimerSlot",
    "TimerRegistry",
    "SnapshotReader",
    "snapshot_all",
    "StopwatchConfig",
    "DEFAULT_CAPACITY",
    "CommandQueue",
    "AddTimer",
    "RemoveSelected",
    "SelectNext",
    "SelectPrevious",
    "SetLabel",
    "setup_logging",
]
