"""Events yielded by a running search, one per step."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from furrow_search.types import FailReason

if TYPE_CHECKING:
    from furrow_grid import Cell


@dataclass(frozen=True, slots=True)
class Visited:
    """A non-terminal cell was expanded and marked VISITED."""

    cell: Cell


@dataclass(frozen=True, slots=True)
class Revealed:
    """A cell of the found path was marked PATH."""

    cell: Cell


@dataclass(frozen=True, slots=True)
class Done:
    """The search reached End. ``path`` runs Start to End inclusive."""

    path: list[Cell]


@dataclass(frozen=True, slots=True)
class Failed:
    """The search ended without a path."""

    reason: FailReason


Event = Union[Visited, Revealed, Done, Failed]
