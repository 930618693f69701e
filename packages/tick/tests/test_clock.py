"""Tests for clock advancement and TickContext generation."""

import pytest
from tick.clock import Clock
from tick.types import TickContext, TickFlavor


def test_clock_initialization():
    """Test clock initializes with correct TPS and dt."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.05) < 1e-9


def test_clock_initialization_custom_tps():
    clock = Clock(tps=60)
    assert clock.tps == 60
    assert abs(clock.dt - (1.0 / 60)) < 1e-9


def test_clock_rejects_non_positive_tps():
    with pytest.raises(ValueError, match="tps must be positive"):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_clock_default_flavor_is_driven():
    """Fixed-step clocks produce driven ticks unless told otherwise."""
    assert Clock(tps=20).flavor is TickFlavor.DRIVEN
    assert Clock(tps=60, flavor=TickFlavor.DRIVING).flavor is TickFlavor.DRIVING


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_returns_correct_values():
    """Test context() returns TickContext with correct values."""
    clock = Clock(tps=20, flavor=TickFlavor.DRIVING)
    clock.advance()

    stop_called = []

    def stop_fn():
        stop_called.append(True)

    ctx = clock.context(stop_fn)

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.05) < 1e-9
    assert ctx.flavor is TickFlavor.DRIVING

    ctx.request_stop()
    assert stop_called == [True]


def test_context_elapsed_calculation():
    """Test elapsed is calculated as tick_number * dt."""
    clock = Clock(tps=20)
    for i in range(1, 11):
        clock.advance()
        ctx = clock.context(lambda: None)
        assert abs(ctx.elapsed - i * 0.05) < 1e-9


def test_context_before_first_advance():
    clock = Clock(tps=20)
    ctx = clock.context(lambda: None)

    assert ctx.tick_number == 0
    assert ctx.dt == 0.05
    assert ctx.elapsed == 0.0


def test_context_is_frozen():
    """TickContext is a frozen dataclass."""
    clock = Clock(tps=20)
    ctx = clock.context(lambda: None)

    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]
