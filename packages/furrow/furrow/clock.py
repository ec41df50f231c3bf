"""Clock and StepContext for the fixed-timestep engine."""

from typing import Callable

from furrow.types import StepContext


class Clock:
    def __init__(self, delay_ms: float) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self._delay_ms = delay_ms
        self._dt = delay_ms / 1000.0
        self._step_number = 0

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def step_number(self) -> int:
        return self._step_number

    def advance(self) -> int:
        self._step_number += 1
        return self._step_number

    def context(self, stop_fn: Callable[[], None]) -> StepContext:
        return StepContext(
            step_number=self._step_number,
            dt=self._dt,
            elapsed=self._step_number * self._dt,
            request_stop=stop_fn,
        )
