"""Grid placement for one to eight timer boxes."""
from __future__ import annotations

import pygame


def _split(rect: pygame.Rect, parts: list[int]) -> list[pygame.Rect]:
    """Split *rect* horizontally by percentage *parts*."""
    out = []
    x = rect.x
    for i, pct in enumerate(parts):
        w = rect.w * pct // 100 if i < len(parts) - 1 else rect.right - x
        out.append(pygame.Rect(x, rect.y, w, rect.h))
        x += w
    return out


def _rows(area: pygame.Rect) -> tuple[pygame.Rect, pygame.Rect]:
    half = area.h // 2
    top = pygame.Rect(area.x, area.y, area.w, half)
    bottom = pygame.Rect(area.x, area.y + half, area.w, area.h - half)
    return top, bottom


def timer_areas(area: pygame.Rect, count: int) -> list[pygame.Rect]:
    """Return one rect per timer, in registry order.

    Up to two timers share a single row; three and four use a 2x2 grid
    filled clockwise; five to eight use two rows of thirds or quarters.
    """
    if count <= 1:
        return [area]
    if count == 2:
        return _split(area, [50, 50])

    top, bottom = _rows(area)
    if count == 3:
        t = _split(top, [50, 50])
        b = _split(bottom, [50, 50])
        return [t[0], t[1], b[1]]
    if count == 4:
        t = _split(top, [50, 50])
        b = _split(bottom, [50, 50])
        return [t[0], t[1], b[1], b[0]]
    if count == 5:
        return _split(top, [33, 33, 34]) + _split(bottom, [50, 50])
    if count == 6:
        return _split(top, [33, 33, 34]) + _split(bottom, [33, 33, 34])
    if count == 7:
        return _split(top, [25, 25, 25, 25]) + _split(bottom, [33, 33, 34])
    if count == 8:
        return _split(top, [25, 25, 25, 25]) + _split(bottom, [25, 25, 25, 25])
    return [area]
