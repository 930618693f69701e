"""Frame clock - the per-tick signals springs subscribe to."""
from __future__ import annotations

from tick import TickFlavor
from tick_signal import Signal


class FrameClock:
    """Pair of per-tick signals, one per tick flavor, each fired with ``dt``.

    Springs connect to (and wait on) :attr:`stepped`, the signal matching the
    clock's own flavor. A host drives the clock either by firing the signals
    directly, by calling :meth:`tick`, or through
    :func:`tick_spring.make_clock_system` inside an engine.
    """

    def __init__(self, flavor: TickFlavor = TickFlavor.DRIVEN) -> None:
        self.render_stepped = Signal()
        self.heartbeat = Signal()
        self._flavor = flavor

    @property
    def flavor(self) -> TickFlavor:
        return self._flavor

    @property
    def is_driving(self) -> bool:
        return self._flavor is TickFlavor.DRIVING

    @property
    def stepped(self) -> Signal:
        if self._flavor is TickFlavor.DRIVING:
            return self.render_stepped
        return self.heartbeat

    def tick(self, dt: float) -> None:
        self.stepped.fire(dt)


_default_clock: FrameClock | None = None


def default_clock() -> FrameClock:
    """Process-wide clock used by springs constructed without one."""
    global _default_clock
    if _default_clock is None:
        _default_clock = FrameClock()
    return _default_clock


def set_default_clock(clock: FrameClock | None) -> None:
    global _default_clock
    _default_clock = clock
