"""Snapshot read path for rendering consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tick_stopwatch.types import ClockValue

if TYPE_CHECKING:
    from tick_stopwatch.registry import TimerRegistry
    from tick_stopwatch.slot import TimerSlot


def snapshot_all(slots: Iterable[TimerSlot]) -> tuple[ClockValue, ...]:
    """Copy every slot's clock, in order.

    Each clock's lock is taken and released on its own, so at most one ticker
    is ever waiting on the reader. The batch is consistent per clock, not
    across clocks.
    """
    return tuple(slot.read() for slot in slots)


class SnapshotReader:
    """Reads batches from a registry at whatever cadence the consumer runs."""

    def __init__(self, registry: TimerRegistry) -> None:
        self._registry = registry

    def read(self) -> tuple[ClockValue, ...]:
        return self._registry.snapshot_all()
