"""Bottom status line: last message on the left, hovered cell on the right."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from furrow_grid import Grid

from ui.constants import COLOR_DIM, COLOR_STATUS_BG, COLOR_TEXT, STATUS_H

_font: pygame.font.Font | None = None


@dataclass(frozen=True)
class StatusMessage:
    text: str = ""
    color: tuple[int, int, int] = COLOR_TEXT


def _get_font() -> pygame.font.Font:
    global _font
    if _font is None:
        _font = pygame.font.SysFont("monospace", 14)
    return _font


def draw_status(
    surface: pygame.Surface,
    message: StatusMessage,
    grid: Grid,
    tile: int,
    mouse_pos: tuple[int, int],
) -> None:
    font = _get_font()
    width = surface.get_width()
    top = surface.get_height() - STATUS_H
    pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, top, width, STATUS_H))

    if message.text:
        surface.blit(font.render(message.text, True, message.color), (8, top + 8))

    row, col = mouse_pos[1] // tile, mouse_pos[0] // tile
    cell = grid.get_cell(row, col)
    if cell is not None:
        label = font.render(f"({row},{col}) {cell.type.name.lower()}", True, COLOR_DIM)
        surface.blit(label, (width - label.get_width() - 8, top + 8))
