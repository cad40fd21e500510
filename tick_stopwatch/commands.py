"""Typed stopwatch commands and the queue that applies them."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from tick_stopwatch.registry import TimerRegistry


@dataclass(frozen=True)
class AddTimer:
    label: str | None = None


@dataclass(frozen=True)
class RemoveSelected:
    pass


@dataclass(frozen=True)
class SelectNext:
    pass


@dataclass(frozen=True)
class SelectPrevious:
    pass


@dataclass(frozen=True)
class SetLabel:
    text: str | None


class CommandQueue:
    """Funnels user commands into the context that owns the registry.

    ``enqueue`` may be called from any thread (input readers, signal
    handlers). ``drain`` applies everything pending, in FIFO order, on the
    calling thread, which must be the registry's command loop.
    """

    def __init__(self, registry: TimerRegistry) -> None:
        self._registry = registry
        self._pending: deque[Any] = deque()
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {
            AddTimer: self._add,
            RemoveSelected: self._remove,
            SelectNext: self._next,
            SelectPrevious: self._previous,
            SetLabel: self._label,
        }

    def enqueue(self, cmd: Any) -> None:
        """Add a command to the queue."""
        self._pending.append(cmd)

    def pending(self) -> int:
        """Return the number of commands waiting to be processed."""
        return len(self._pending)

    def drain(self) -> list[tuple[Any, bool]]:
        """Process all pending commands.  Returns ``[(cmd, accepted), ...]``.

        Raises ``TypeError`` if a command's type is not a stopwatch command.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(
                    f"No handler registered for {type(cmd).__qualname__}"
                )
            results.append((cmd, handler(cmd)))
        return results

    def _add(self, cmd: AddTimer) -> bool:
        return self._registry.add_timer(cmd.label)

    def _remove(self, cmd: RemoveSelected) -> bool:
        return self._registry.remove_selected()

    def _next(self, cmd: SelectNext) -> bool:
        self._registry.select_next()
        return not self._registry.closed

    def _previous(self, cmd: SelectPrevious) -> bool:
        self._registry.select_previous()
        return not self._registry.closed

    def _label(self, cmd: SetLabel) -> bool:
        self._registry.set_label_on_selected(cmd.text)
        return not self._registry.closed
