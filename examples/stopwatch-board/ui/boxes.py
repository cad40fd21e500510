"""Timer box rendering."""
from __future__ import annotations

import pygame

from tick_stopwatch import ClockValue

from ui.constants import (
    BORDER_IDLE,
    BORDER_SELECTED,
    BORDER_W,
    BOX_PAD,
    TEXT_COLOR,
    TEXT_DIM,
)


def format_clock(value: ClockValue) -> str:
    return f"{value.days}d:{value.hours}h:{value.minutes}m:{value.seconds}s"


def draw_timer_box(
    surface: pygame.Surface,
    rect: pygame.Rect,
    index: int,
    value: ClockValue,
    label: str | None,
    selected: bool,
    font: pygame.font.Font,
    input_text: str | None = None,
) -> None:
    """Draw one timer. *input_text* replaces the time while a label is typed."""
    box = rect.inflate(-BOX_PAD, -BOX_PAD)
    color = BORDER_SELECTED if selected else BORDER_IDLE
    pygame.draw.rect(surface, color, box, BORDER_W)

    title = font.render(f" Timer {index + 1} ", True, color)
    surface.blit(title, (box.x + 8, box.y - title.get_height() // 2))

    if input_text is not None:
        lines = [f"Label: {input_text}_"]
    else:
        lines = [format_clock(value)]
        if label is not None:
            lines.append(label)

    line_h = font.get_linesize()
    y = box.centery - line_h * len(lines) // 2
    for i, line in enumerate(lines):
        img = font.render(line, True, TEXT_COLOR if i == 0 else TEXT_DIM)
        surface.blit(img, (box.centerx - img.get_width() // 2, y))
        y += line_h
