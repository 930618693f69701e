"""Shared type aliases for the tick engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable


class TickFlavor(enum.Enum):
    """Which kind of tick a clock produces.

    DRIVING ticks are presentation frames (variable rate, ahead of rendering).
    DRIVEN ticks are fixed-step simulation ticks.
    """

    DRIVING = "driving"
    DRIVEN = "driven"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    flavor: TickFlavor
    request_stop: Callable[[], None]


System = Callable[[TickContext], None]
