"""Ticker - drift-compensated background advance of one clock."""

from __future__ import annotations

import itertools
import logging
import threading
import time

from tick_stopwatch.clock import GuardedClock

logger = logging.getLogger(__name__)

TICK_PERIOD = 1.0

_ticker_ids = itertools.count(1)


class Ticker:
    """Advances one GuardedClock once per elapsed period on a daemon thread.

    Deadlines are computed as ``anchor + n * period`` from the monotonic time
    at ``start()``, so time spent inside a tick shortens the next wait instead
    of pushing the whole schedule back. A ticker that falls behind fires the
    missed advances back to back until it has caught up.

    ``cancel()`` signals the thread and joins it; once it returns the clock is
    never advanced again.
    """

    def __init__(self, clock: GuardedClock, period: float = TICK_PERIOD) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._clock = clock
        self._period = period
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def period(self) -> float:
        return self._period

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def start(self) -> Ticker:
        if self._thread is not None:
            raise RuntimeError("ticker already started")
        anchor = time.monotonic()
        thread = threading.Thread(
            target=self._run,
            args=(anchor,),
            name=f"StopwatchTicker-{next(_ticker_ids)}",
            daemon=True,
        )
        thread.start()
        self._thread = thread
        logger.debug("%s started (period=%.3fs)", thread.name, self._period)
        return self

    def cancel(self) -> None:
        self._stop.set()
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join()
        logger.debug("%s stopped", thread.name)

    def _run(self, anchor: float) -> None:
        n = 0
        while True:
            n += 1
            delay = anchor + n * self._period - time.monotonic()
            if delay > 0:
                if self._stop.wait(delay):
                    return
            elif self._stop.is_set():
                return
            self._clock.advance()


def start_ticker(clock: GuardedClock) -> Ticker:
    """Start a one-second ticker on *clock* and return its handle."""
    return Ticker(clock).start()
