"""Tests for Cell and GridConfig."""
from __future__ import annotations

import math

import pytest

from furrow_grid.types import Cell, CellType, GridConfig


class TestCell:
    def test_defaults(self) -> None:
        cell = Cell(row=2, col=3)
        assert cell.type is CellType.EMPTY
        assert cell.coord == (2, 3)
        assert (cell.f, cell.g, cell.h) == (0, 0, 0)
        assert cell.parent is None

    def test_passable(self) -> None:
        assert Cell(0, 0).passable
        assert Cell(0, 0, type=CellType.VISITED).passable
        assert not Cell(0, 0, type=CellType.OBSTACLE).passable

    def test_reached(self) -> None:
        cell = Cell(0, 0)
        assert cell.reached
        cell.g = math.inf
        assert not cell.reached

    def test_reset_costs(self) -> None:
        cell = Cell(1, 1, g=4, h=3, f=7, parent=(1, 0))
        cell.reset_costs()
        assert (cell.f, cell.g, cell.h, cell.parent) == (0, 0, 0, None)

    def test_identity_equality(self) -> None:
        assert Cell(0, 0) != Cell(0, 0)


class TestGridConfig:
    def test_defaults(self) -> None:
        config = GridConfig()
        assert config.min_size == 5
        assert config.max_size == 50
        assert (config.default_rows, config.default_cols) == (10, 10)

    def test_frozen(self) -> None:
        config = GridConfig()
        with pytest.raises(AttributeError):
            config.max_size = 10  # type: ignore[misc]

    def test_min_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="min_size"):
            GridConfig(min_size=0)

    def test_max_below_min_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_size"):
            GridConfig(min_size=10, max_size=5, default_rows=10, default_cols=10)

    def test_default_outside_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="default_rows"):
            GridConfig(default_rows=60)

    def test_allows(self) -> None:
        config = GridConfig()
        assert config.allows(5, 50)
        assert not config.allows(4, 10)
        assert not config.allows(10, 51)

    def test_clamp(self) -> None:
        config = GridConfig()
        assert config.clamp(1, 100) == (5, 50)
        assert config.clamp(12, 7) == (12, 7)
