"""Shared type aliases for the stepping engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class StepContext:
    step_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[[StepContext], None]