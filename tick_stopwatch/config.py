"""Engine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CAPACITY = 8


@dataclass(frozen=True)
class StopwatchConfig:
    """Immutable configuration for a TimerRegistry.

    Attributes:
        capacity: Maximum number of timers alive at once.
    """

    capacity: int = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
