"""furrow - A fixed-timestep stepping engine for paced, cancellable work."""

from furrow.clock import Clock
from furrow.engine import Engine
from furrow.types import StepContext, System

__all__ = [
    "Engine",
    "Clock",
    "StepContext",
    "System",
]
