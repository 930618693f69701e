"""tick-spring - Damped spring animation of scalars and vectors for the tick engine."""
from __future__ import annotations

from tick_spring import kinds
from tick_spring.clock import FrameClock, default_clock, set_default_clock
from tick_spring.kinds import SCALAR, VECTOR2, VECTOR3, Kind, kind_of
from tick_spring.spring import Spring
from tick_spring.systems import make_clock_system
from tick_spring.types import KindMismatchError, SpringError, UnsupportedKindError

__all__ = [
    "FrameClock",
    "Kind",
    "KindMismatchError",
    "SCALAR",
    "Spring",
    "SpringError",
    "UnsupportedKindError",
    "VECTOR2",
    "VECTOR3",
    "default_clock",
    "kind_of",
    "kinds",
    "make_clock_system",
    "set_default_clock",
]
