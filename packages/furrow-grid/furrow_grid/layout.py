"""ASCII layouts for building and inspecting grids.

One character per cell, one line per row:

    .  empty        #  obstacle
    S  start        E  end
    *  path         o  visited

Blank lines and surrounding whitespace are ignored.
"""
from __future__ import annotations

from furrow_grid.grid import Grid
from furrow_grid.types import CellType, GridConfig

__all__ = ["parse_layout", "render_layout"]

LAYOUT_CHARS: dict[str, CellType] = {
    ".": CellType.EMPTY,
    "#": CellType.OBSTACLE,
    "S": CellType.START,
    "E": CellType.END,
    "*": CellType.PATH,
    "o": CellType.VISITED,
}

_TYPE_CHARS: dict[CellType, str] = {t: ch for ch, t in LAYOUT_CHARS.items()}
_TYPE_CHARS[CellType.TILLED_DIRT] = "*"
_TYPE_CHARS[CellType.PLANT] = "."


def parse_layout(text: str, config: GridConfig | None = None) -> Grid:
    """Build a Grid from an ASCII layout.

    Without a config any rectangular size is accepted. Raises ValueError
    for ragged rows, an empty layout, or an unknown character.
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ValueError("Layout is empty")
    rows, cols = len(lines), len(lines[0])
    for r, line in enumerate(lines):
        if len(line) != cols:
            raise ValueError(
                f"Row {r} has {len(line)} cells, expected {cols}"
            )

    if config is None:
        config = GridConfig(
            min_size=1,
            max_size=max(rows, cols),
            default_rows=rows,
            default_cols=cols,
        )
    grid = Grid(rows, cols, config=config)

    marks: list[tuple[int, int, CellType]] = []
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            cell_type = LAYOUT_CHARS.get(ch)
            if cell_type is None:
                raise ValueError(f"Unknown layout character {ch!r} at ({r}, {c})")
            if cell_type is not CellType.EMPTY:
                marks.append((r, c, cell_type))

    # Endpoints first: placing them resets path markings.
    marks.sort(key=lambda m: m[2] not in (CellType.START, CellType.END))
    for r, c, cell_type in marks:
        grid.set_cell_type(r, c, cell_type)
    return grid


def render_layout(grid: Grid) -> str:
    """Render a Grid back to the layout format, one line per row."""
    lines = []
    for r in range(grid.rows):
        lines.append("".join(
            _TYPE_CHARS[grid.get_cell(r, c).type] for c in range(grid.cols)
        ))
    return "\n".join(lines)
