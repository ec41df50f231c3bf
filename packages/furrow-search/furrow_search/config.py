"""Search configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for paced search runs.

    Attributes:
        delay_ms: Pause inserted after each search step, in milliseconds.
    """

    delay_ms: float = 20

    def __post_init__(self) -> None:
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")
