"""Clock counter and its lock-guarded handle."""

from __future__ import annotations

import threading

from tick_stopwatch.types import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    ClockValue,
)


class Clock:
    def __init__(self) -> None:
        self._seconds = 0
        self._minutes = 0
        self._hours = 0
        self._days = 0

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def days(self) -> int:
        return self._days

    def advance(self) -> None:
        self._seconds += 1
        if self._seconds < SECONDS_PER_MINUTE:
            return
        self._seconds = 0
        self._minutes += 1
        if self._minutes < MINUTES_PER_HOUR:
            return
        self._minutes = 0
        self._hours += 1
        if self._hours < HOURS_PER_DAY:
            return
        self._hours = 0
        self._days += 1

    def read(self) -> ClockValue:
        return ClockValue(
            seconds=self._seconds,
            minutes=self._minutes,
            hours=self._hours,
            days=self._days,
        )


class GuardedClock:
    """A Clock behind its own lock.

    Both the ticker and snapshot readers go through this handle, so a reader
    never observes a half-carried value. The wrapped Clock is never handed out.
    """

    def __init__(self) -> None:
        self._clock = Clock()
        self._lock = threading.Lock()

    def advance(self) -> None:
        with self._lock:
            self._clock.advance()

    def read(self) -> ClockValue:
        with self._lock:
            return self._clock.read()
