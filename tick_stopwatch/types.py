"""Shared value types and protocols for tick-stopwatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


@dataclass(frozen=True, slots=True)
class ClockValue:
    """Point-in-time copy of a clock's four counters."""

    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    days: int = 0

    @property
    def total_seconds(self) -> int:
        return (
            self.seconds
            + SECONDS_PER_MINUTE * self.minutes
            + SECONDS_PER_MINUTE * MINUTES_PER_HOUR * self.hours
            + SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY * self.days
        )


class Cancellable(Protocol):
    """Anything a TimerSlot can hold as its ticker handle."""

    def cancel(self) -> None: ...
