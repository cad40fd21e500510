"""TimerSlot - a guarded clock, its label and its ticker handle."""

from __future__ import annotations

from tick_stopwatch.clock import GuardedClock
from tick_stopwatch.types import Cancellable, ClockValue


class TimerSlot:
    """One managed timer.

    The registry creates the slot, inserts it, and only then attaches the
    ticker, so no ticker ever runs against a slot that is not yet visible.
    ``destroy()`` must run before the slot is dropped: it cancels the ticker
    (waiting for it to stop) before the clock is released.
    """

    def __init__(self, label: str | None = None) -> None:
        self._clock = GuardedClock()
        self._label = label
        self._ticker: Cancellable | None = None
        self._destroyed = False

    @property
    def clock(self) -> GuardedClock:
        return self._clock

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def ticking(self) -> bool:
        return self._ticker is not None

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def attach(self, ticker: Cancellable) -> None:
        if self._destroyed:
            raise RuntimeError("cannot attach a ticker to a destroyed slot")
        if self._ticker is not None:
            raise RuntimeError("slot already has a ticker attached")
        self._ticker = ticker

    def set_label(self, text: str | None) -> None:
        self._label = text

    def read(self) -> ClockValue:
        return self._clock.read()

    def destroy(self) -> None:
        ticker = self._ticker
        self._ticker = None
        if ticker is not None:
            ticker.cancel()
        self._destroyed = True
