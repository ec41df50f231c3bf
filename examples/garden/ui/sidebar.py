"""Sidebar with tools, algorithm choice, and run stats."""
from __future__ import annotations

import pygame

from furrow_search import Algorithm, SearchSession

from ui.constants import COLOR_DIM, COLOR_HIGHLIGHT, COLOR_SIDEBAR_BG, COLOR_TEXT, SIDEBAR_W, TOOLS

_font: pygame.font.Font | None = None


def _get_font() -> pygame.font.Font:
    global _font
    if _font is None:
        _font = pygame.font.SysFont("monospace", 14)
    return _font


def draw_sidebar(
    surface: pygame.Surface,
    x0: int,
    tool: str,
    algorithm: Algorithm,
    session: SearchSession | None,
    grid_size: tuple[int, int],
) -> None:
    font = _get_font()
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG,
                     pygame.Rect(x0, 0, SIDEBAR_W, surface.get_height()))
    x0 += 8
    y = 8

    surface.blit(font.render("Tools", True, (255, 255, 255)), (x0, y))
    y += 24
    for i, name in enumerate(TOOLS):
        if name == tool:
            pygame.draw.rect(surface, COLOR_HIGHLIGHT, pygame.Rect(x0 - 4, y - 2, SIDEBAR_W - 16, 20))
        surface.blit(font.render(f"[{i + 1}] {name}", True, COLOR_TEXT), (x0, y))
        y += 22

    y += 12
    surface.blit(font.render("Algorithm", True, (255, 255, 255)), (x0, y))
    y += 24
    for key, algo in (("D", Algorithm.DIJKSTRA), ("A", Algorithm.ASTAR)):
        if algo is algorithm:
            pygame.draw.rect(surface, COLOR_HIGHLIGHT, pygame.Rect(x0 - 4, y - 2, SIDEBAR_W - 16, 20))
        surface.blit(font.render(f"[{key}] {algo.label}", True, COLOR_TEXT), (x0, y))
        y += 22

    y += 12
    rows, cols = grid_size
    lines = [f"Grid: {rows}x{cols}"]
    if session is not None:
        lines.append(f"Visited: {session.visited_count}")
        lines.append(f"Status: {session.status.value}")
        if session.path is not None:
            lines.append(f"Path: {len(session.path)} cells")
    for line in lines:
        surface.blit(font.render(line, True, COLOR_TEXT), (x0, y))
        y += 18

    y += 18
    controls = [
        "Space: Find path",
        "S: Stop",
        "R: Reset",
        "+/-: Resize",
        "Esc: Quit",
    ]
    for line in controls:
        surface.blit(font.render(line, True, COLOR_DIM), (x0, y))
        y += 18
