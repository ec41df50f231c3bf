"""Engine - paced step loop for cancellable, one-event-at-a-time work."""

import logging
import time

from furrow.clock import Clock
from furrow.types import System

logger = logging.getLogger(__name__)


class Engine:
    """Calls its systems once per step, pausing ``delay_ms`` between steps.

    A system ends the run by calling ``ctx.request_stop()``; systems after it
    in the same step are skipped.
    """

    def __init__(self, delay_ms: float = 20) -> None:
        self._clock = Clock(delay_ms)
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> bool:
        """Run one unpaced step. Returns True if a system requested a stop."""
        self._stop_requested = False
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break
        return self._stop_requested

    def run(self) -> int:
        """Step until a system requests a stop; return the steps taken.

        Sleeps ``dt`` minus the step's own work time between steps, and not
        at all after the final one.
        """
        dt = self._clock.dt
        first = self._clock.step_number
        while True:
            started = time.monotonic()
            if self.step():
                break
            remaining = dt - (time.monotonic() - started)
            if remaining > 0:
                time.sleep(remaining)

        steps = self._clock.step_number - first
        logger.debug("engine stopped after %d steps", steps)
        return steps
