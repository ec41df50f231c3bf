"""System factories for driving searches on a furrow Engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from furrow import StepContext
    from furrow_search.session import SearchSession


def make_search_system(session: SearchSession) -> Callable:
    """Return a system that advances ``session`` one event per engine step
    and asks the engine to stop once the session has finished."""

    def search_system(ctx: StepContext) -> None:
        session.step()
        if session.finished:
            ctx.request_stop()

    return search_system
