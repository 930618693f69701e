"""tick - A minimal fixed-step tick engine in Python."""

from tick.clock import Clock
from tick.engine import Engine
from tick.types import System, TickContext, TickFlavor

__all__ = [
    "Engine",
    "Clock",
    "System",
    "TickContext",
    "TickFlavor",
]
