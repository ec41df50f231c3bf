"""Tests for clock advancement and StepContext generation."""

import pytest
from furrow.clock import Clock
from furrow.types import StepContext


def test_clock_initialization():
    """Clock starts at step 0 with dt derived from the delay."""
    clock = Clock(delay_ms=20)
    assert clock.delay_ms == 20
    assert clock.step_number == 0
    assert abs(clock.dt - 0.02) < 1e-9


def test_zero_delay_is_allowed():
    clock = Clock(delay_ms=0)
    assert clock.dt == 0.0


def test_negative_delay_raises():
    with pytest.raises(ValueError):
        Clock(delay_ms=-1)


def test_advance_returns_new_step_number():
    clock = Clock(delay_ms=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.step_number == 2


def test_context_fields():
    clock = Clock(delay_ms=50)
    clock.advance()
    clock.advance()
    stops = []
    ctx = clock.context(lambda: stops.append(True))

    assert isinstance(ctx, StepContext)
    assert ctx.step_number == 2
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.1) < 1e-9

    ctx.request_stop()
    assert stops == [True]


def test_context_is_frozen():
    clock = Clock(delay_ms=20)
    ctx = clock.context(lambda: None)
    with pytest.raises(AttributeError):
        ctx.step_number = 5

