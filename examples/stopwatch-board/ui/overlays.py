"""Help panel and quit confirmation prompt."""
from __future__ import annotations

import pygame

from ui.constants import (
    HELP_BORDER,
    HELP_H,
    HELP_MARGIN,
    HELP_W,
    NO_COLOR,
    PROMPT_BG,
    TEXT_COLOR,
    TEXT_DIM,
    YES_COLOR,
)

HELP_LINES = [
    "Shortcuts:",
    "  ctrl + q   - Quit",
    "  ctrl + a   - Add timer",
    "  ctrl + d   - Delete selected timer",
    "  tab        - Next timer",
    "  shift+tab  - Previous timer",
    "  l          - Set label for timer",
    "  h          - Toggle help",
    "  up/down    - Increase/Decrease UI FPS",
    "  esc        - Cancel input",
]


def draw_help(surface: pygame.Surface, font: pygame.font.Font, refresh_ms: int) -> None:
    sw, sh = surface.get_size()
    rect = pygame.Rect(sw - HELP_W - HELP_MARGIN, sh - HELP_H - HELP_MARGIN, HELP_W, HELP_H)
    pygame.draw.rect(surface, PROMPT_BG, rect)
    pygame.draw.rect(surface, HELP_BORDER, rect, 1)

    header = font.render("Help", True, TEXT_DIM)
    fps = font.render(f"FPS: {1000 // refresh_ms}", True, TEXT_DIM)
    surface.blit(header, (rect.x + 8, rect.y + 4))
    surface.blit(fps, (rect.right - fps.get_width() - 8, rect.y + 4))

    y = rect.y + 8 + font.get_linesize()
    for line in HELP_LINES:
        surface.blit(font.render(line, True, TEXT_DIM), (rect.x + 8, y))
        y += font.get_linesize()


def draw_confirmation(surface: pygame.Surface, font: pygame.font.Font) -> None:
    sw, sh = surface.get_size()
    w, h = sw // 2, sh // 4
    rect = pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)
    pygame.draw.rect(surface, PROMPT_BG, rect)
    pygame.draw.rect(surface, TEXT_DIM, rect, 1)

    title = font.render(" Confirmation ", True, TEXT_DIM)
    surface.blit(title, (rect.x + 8, rect.y - title.get_height() // 2))

    parts = [
        font.render("Are you sure? ", True, TEXT_COLOR),
        font.render("Y", True, YES_COLOR),
        font.render("/", True, TEXT_DIM),
        font.render("N", True, NO_COLOR),
    ]
    total = sum(p.get_width() for p in parts)
    x = rect.centerx - total // 2
    y = rect.centery - parts[0].get_height() // 2
    for part in parts:
        surface.blit(part, (x, y))
        x += part.get_width()
