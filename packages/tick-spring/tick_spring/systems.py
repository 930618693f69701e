"""System factory bridging the tick engine to a frame clock."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick import TickFlavor

if TYPE_CHECKING:
    from tick import TickContext

    from tick_spring.clock import FrameClock


def make_clock_system(clock: FrameClock) -> Callable[[TickContext], None]:
    """Return a system that fires the clock signal matching each tick's flavor."""

    def clock_system(ctx: TickContext) -> None:
        if ctx.flavor is TickFlavor.DRIVING:
            clock.render_stepped.fire(ctx.dt)
        else:
            clock.heartbeat.fire(ctx.dt)

    return clock_system
