"""TimerRegistry - bounded, ordered collection of running timers."""
from __future__ import annotations

import logging
from typing import Callable

from tick_stopwatch.clock import GuardedClock
from tick_stopwatch.config import StopwatchConfig
from tick_stopwatch.slot import TimerSlot
from tick_stopwatch.snapshot import snapshot_all
from tick_stopwatch.ticker import start_ticker
from tick_stopwatch.types import Cancellable, ClockValue

logger = logging.getLogger(__name__)

TickerFactory = Callable[[GuardedClock], Cancellable]


class TimerRegistry:
    """Owns every structural change to the set of timers.

    Holds between 1 and ``capacity`` slots plus a selection cursor. A timer's
    identity is its position: removing a slot compacts the list and shifts
    every later timer down by one.

    All methods are meant to be called from a single command context. Tickers
    only touch their own clock, never the registry.
    """

    def __init__(
        self,
        config: StopwatchConfig | None = None,
        initial_label: str | None = None,
        ticker_factory: TickerFactory | None = None,
    ) -> None:
        self.config: StopwatchConfig = (
            config if config is not None else StopwatchConfig()
        )
        self._ticker_factory: TickerFactory = (
            ticker_factory if ticker_factory is not None else start_ticker
        )
        self._slots: list[TimerSlot] = []
        self._selected = 0
        self._closed = False

        # Observable callbacks
        self._on_add: list[Callable[[int, str | None], None]] = []
        self._on_remove: list[Callable[[int], None]] = []
        self._on_reject: list[Callable[[str, str], None]] = []

        self._insert(TimerSlot(initial_label or None))

    # --- Accessors ---

    @property
    def capacity(self) -> int:
        return self.config.capacity

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def timer_count(self) -> int:
        return len(self._slots)

    @property
    def is_full(self) -> bool:
        return len(self._slots) >= self.config.capacity

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def labels(self) -> tuple[str | None, ...]:
        return tuple(slot.label for slot in self._slots)

    def label(self, index: int) -> str | None:
        """Label of the timer at *index*; raises IndexError when out of range."""
        if not 0 <= index < len(self._slots):
            raise IndexError(
                f"timer index {index} out of range for {len(self._slots)} timer(s)"
            )
        return self._slots[index].label

    # --- Callback registration ---

    def on_add(self, cb: Callable[[int, str | None], None]) -> None:
        """Register callback fired after a timer is added.

        Signature: (index, label) -> None.
        """
        self._on_add.append(cb)

    def on_remove(self, cb: Callable[[int], None]) -> None:
        """Register callback fired after a timer is removed.

        Signature: (index) -> None, where index is the removed position.
        """
        self._on_remove.append(cb)

    def on_reject(self, cb: Callable[[str, str], None]) -> None:
        """Register callback fired when a command is ignored.

        Signature: (command_name, reason) -> None.
        """
        self._on_reject.append(cb)

    # --- Commands ---

    def add_timer(self, label: str | None = None) -> bool:
        """Append a running timer and select it.

        Returns False without changing anything when the registry is full.
        """
        if self._closed:
            return False
        if self.is_full:
            self._reject("add_timer", "capacity")
            return False
        label = label or None
        index = self._insert(TimerSlot(label))
        self._selected = index
        logger.info("Added timer %d (%d/%d)", index + 1, len(self._slots), self.capacity)
        for cb in self._on_add:
            cb(index, label)
        return True

    def remove_selected(self) -> bool:
        """Stop and remove the selected timer.

        The last remaining timer cannot be removed; that call returns False.
        """
        if self._closed:
            return False
        if len(self._slots) <= 1:
            self._reject("remove_selected", "last_timer")
            return False
        index = self._selected
        slot = self._slots[index]
        slot.destroy()
        del self._slots[index]
        self._selected = min(index, len(self._slots) - 1)
        logger.info("Removed timer %d (%d/%d)", index + 1, len(self._slots), self.capacity)
        for cb in self._on_remove:
            cb(index)
        return True

    def select_next(self) -> None:
        if self._closed or not self._slots:
            return
        self._selected = (self._selected + 1) % len(self._slots)

    def select_previous(self) -> None:
        if self._closed or not self._slots:
            return
        self._selected = (self._selected - 1) % len(self._slots)

    def set_label_on_selected(self, text: str | None) -> None:
        """Set the selected timer's label. An empty string clears it."""
        if self._closed:
            return
        self._slots[self._selected].set_label(text or None)

    def snapshot_all(self) -> tuple[ClockValue, ...]:
        return snapshot_all(self._slots)

    def shutdown(self) -> None:
        """Cancel every live ticker. Later commands become no-ops."""
        if self._closed:
            return
        self._closed = True
        for slot in self._slots:
            slot.destroy()
        logger.info("Registry shut down, %d timer(s) stopped", len(self._slots))

    # --- Internals ---

    def _insert(self, slot: TimerSlot) -> int:
        self._slots.append(slot)
        try:
            slot.attach(self._ticker_factory(slot.clock))
        except BaseException:
            self._slots.pop()
            raise
        return len(self._slots) - 1

    def _reject(self, command: str, reason: str) -> None:
        logger.debug("Ignored %s: %s", command, reason)
        for cb in self._on_reject:
            cb(command, reason)
