"""Stopwatch Board - several independent stopwatches on one screen.

Exercises tick-stopwatch: each box is a TimerRegistry slot with its own
ticker thread; the frame loop drains the command queue and paints a fresh
snapshot at its own refresh rate.

Usage:
  python main.py [LABEL]

Controls:
  Ctrl+Q      Quit (asks for confirmation)
  Ctrl+A      Add timer
  Ctrl+D      Delete selected timer
  Tab         Next timer
  Shift+Tab   Previous timer
  L           Label selected timer (Enter to set, Esc to cancel)
  H           Toggle help
  Up/Down     Faster / slower screen refresh
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_stopwatch import (
    AddTimer,
    CommandQueue,
    RemoveSelected,
    SelectNext,
    SelectPrevious,
    SetLabel,
    StopwatchConfig,
    TimerRegistry,
    setup_logging,
)
from ui.boxes import draw_timer_box
from ui.constants import (
    BG_COLOR,
    DEFAULT_REFRESH_MS,
    MAX_REFRESH_MS,
    MIN_REFRESH_MS,
    REFRESH_STEP_MS,
    SCREEN_H,
    SCREEN_W,
)
from ui.layout import timer_areas
from ui.overlays import draw_confirmation, draw_help


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stopwatch Board - tick-stopwatch demo")
    p.add_argument("label", nargs="?", default=None, help="Label for the first timer")
    p.add_argument("--refresh-ms", type=int, default=DEFAULT_REFRESH_MS,
                   help=f"Screen refresh period in ms (default: {DEFAULT_REFRESH_MS})")
    p.add_argument("--verbose", action="store_true", help="Log debug messages")
    p.add_argument("--log-file", type=str, default=None, metavar="FILE",
                   help="Also write log messages to FILE")
    args = p.parse_args()
    args.refresh_ms = max(MIN_REFRESH_MS, min(MAX_REFRESH_MS, args.refresh_ms))
    return args


class BoardState:
    """UI-side state: everything the engine does not own."""

    def __init__(self, registry: TimerRegistry, refresh_ms: int) -> None:
        self.registry = registry
        self.queue = CommandQueue(registry)
        self.refresh_ms = refresh_ms
        self.show_help = True
        self.confirm_quit = False
        self.input_buffer: str | None = None

    def handle_key(self, event: pygame.event.Event) -> bool:
        """Translate a key press into commands. Returns False to quit."""
        ctrl = event.mod & pygame.KMOD_CTRL

        if self.confirm_quit:
            if event.key == pygame.K_y:
                return False
            if event.key == pygame.K_n:
                self.confirm_quit = False
            return True

        if self.input_buffer is not None:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.queue.enqueue(SetLabel(self.input_buffer))
                self.input_buffer = None
            elif event.key == pygame.K_ESCAPE:
                self.input_buffer = None
            elif event.key == pygame.K_BACKSPACE:
                self.input_buffer = self.input_buffer[:-1]
            elif event.unicode and event.unicode.isprintable():
                self.input_buffer += event.unicode
            return True

        if ctrl and event.key == pygame.K_q:
            self.confirm_quit = True
        elif ctrl and event.key == pygame.K_a:
            self.queue.enqueue(AddTimer())
        elif ctrl and event.key == pygame.K_d:
            self.queue.enqueue(RemoveSelected())
        elif event.key == pygame.K_TAB:
            if event.mod & pygame.KMOD_SHIFT:
                self.queue.enqueue(SelectPrevious())
            else:
                self.queue.enqueue(SelectNext())
        elif event.key == pygame.K_h:
            self.show_help = not self.show_help
        elif event.key == pygame.K_l:
            self.input_buffer = ""
        elif event.key == pygame.K_UP:
            self.refresh_ms = max(MIN_REFRESH_MS, self.refresh_ms - REFRESH_STEP_MS)
        elif event.key == pygame.K_DOWN:
            self.refresh_ms = min(MAX_REFRESH_MS, self.refresh_ms + REFRESH_STEP_MS)
        return True


def draw(screen: pygame.Surface, font: pygame.font.Font, state: BoardState) -> None:
    registry = state.registry
    snapshot = registry.snapshot_all()
    labels = registry.labels
    selected = registry.selected_index

    screen.fill(BG_COLOR)
    areas = timer_areas(screen.get_rect(), len(snapshot))
    for i, (rect, value) in enumerate(zip(areas, snapshot)):
        typing = state.input_buffer if i == selected else None
        draw_timer_box(screen, rect, i, value, labels[i], i == selected, font, typing)

    if state.show_help:
        draw_help(screen, font, state.refresh_ms)
    if state.confirm_quit:
        draw_confirmation(screen, font)
    pygame.display.flip()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    registry = TimerRegistry(StopwatchConfig(), initial_label=args.label)
    state = BoardState(registry, args.refresh_ms)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Stopwatch Board - tick-stopwatch demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18)

    running = True
    try:
        while running:
            clock.tick(1000 / state.refresh_ms)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = state.handle_key(event) and running

            state.queue.drain()
            draw(screen, font, state)
    finally:
        registry.shutdown()
        pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
