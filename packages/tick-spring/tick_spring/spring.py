"""Damped-harmonic-oscillator animation of scalars and vectors."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from tick_signal import Connection, Signal, spawn
from tick_spring.clock import default_clock
from tick_spring.kinds import Kind, Value, kind_of
from tick_spring.types import KindMismatchError

if TYPE_CHECKING:
    from tick_signal.tasks import TaskBody
    from tick_spring.clock import FrameClock

logger = logging.getLogger(__name__)

VELOCITY_THRESHOLD = 0.001
POSITION_THRESHOLD = 0.001
# below this, sin(theta)/c is replaced by its Taylor expansion
EPSILON = 0.0001

DEFAULT_FREQUENCY = 1.0
DEFAULT_DAMPING = 1.0


def _validate_tuning(frequency: float, damping: float) -> None:
    if not math.isfinite(frequency) or frequency <= 0:
        raise ValueError(f"frequency must be > 0, got {frequency}")
    if not math.isfinite(damping) or damping < 0:
        raise ValueError(f"damping must be >= 0, got {damping}")


def advance(
    kind: Kind,
    displacement: Any,
    velocity: Any,
    frequency: float,
    damping: float,
    dt: float,
) -> tuple[Any, Any]:
    """Solve ``x'' + 2*damping*w*x' + w**2*x = 0`` over ``dt`` in closed form.

    ``displacement`` is value minus target and ``w = 2*pi*frequency``.
    Returns the new ``(displacement, velocity)``. Critically damped,
    underdamped and overdamped motion each have their own solution; the
    underdamped one is the only one that may be evaluated with
    ``sqrt(1 - damping**2)`` real.
    """
    add, sub, scale = kind.add, kind.sub, kind.scale
    omega = 2.0 * math.pi * frequency
    x = displacement
    v = velocity

    if damping == 1.0:
        decay = math.exp(-omega * dt)
        coupled = add(v, scale(x, omega))
        new_x = scale(add(x, scale(coupled, dt)), decay)
        new_v = scale(sub(v, scale(coupled, omega * dt)), decay)
    elif damping < 1.0:
        decay = math.exp(-damping * omega * dt)
        c = math.sqrt(1.0 - damping * damping)
        theta = omega * c * dt
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        # sin(w*c*dt) / c, which is 0/0 as damping approaches 1
        if c > EPSILON:
            sinc = sin_t / c
        else:
            s = omega * dt
            c2 = c * c
            sinc = s + ((s * s * c2 * c2) / 20.0 - c2) * (s * s * s) / 6.0

        new_x = scale(
            add(scale(x, cos_t + damping * sinc), scale(v, sinc / omega)),
            decay,
        )
        new_v = scale(
            sub(scale(v, cos_t - damping * sinc), scale(x, sinc * omega)),
            decay,
        )
    else:
        c = math.sqrt(damping * damping - 1.0)
        r1 = -omega * (damping - c)
        r2 = -omega * (damping + c)
        e1 = math.exp(r1 * dt)
        e2 = math.exp(r2 * dt)
        a = scale(sub(v, scale(x, r2)), 1.0 / (r1 - r2))
        b = sub(x, a)
        new_x = add(scale(a, e1), scale(b, e2))
        new_v = add(scale(a, r1 * e1), scale(b, r2 * e2))

    return new_x, new_v


class Spring:
    """Animates ``value`` toward ``target`` with a damped spring.

    The spring's kind (scalar, 2-vector or 3-vector) is fixed by the initial
    value. While active, the spring is connected to its clock's stepped
    signal; every tick it advances, fires ``on_step(value)`` and, once it has
    settled on the target, fires ``on_complete()`` and disconnects.

    Args:
        initial: Starting value. Also the starting target.
        frequency: Undamped oscillation frequency in cycles per unit time.
        damping: Damping ratio. 1 is critical, below 1 overshoots.
        initial_goal: If given, the spring retargets to it after the clock's
            next tick.
        clock: Clock to drive the spring. Defaults to :func:`default_clock`.
    """

    def __init__(
        self,
        initial: Value,
        frequency: float = DEFAULT_FREQUENCY,
        damping: float = DEFAULT_DAMPING,
        initial_goal: Value | None = None,
        *,
        clock: FrameClock | None = None,
    ) -> None:
        _validate_tuning(frequency, damping)
        self._kind = kind_of(initial)
        if initial_goal is not None:
            self._check_kind(initial_goal)

        self.value: Value = initial
        self.velocity: Value = self._kind.zero()
        self.target: Value = initial
        self.frequency = frequency
        self.damping = damping
        self._active = False

        self.on_step = Signal()
        self.on_complete = Signal()

        self._clock = clock if clock is not None else default_clock()
        self._connection: Connection | None = None

        if initial_goal is not None:
            spawn(self._start_after_tick, initial_goal)

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def active(self) -> bool:
        return self._active

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def is_settled(self) -> bool:
        zero = self._kind.zero()
        return self.value == self.target and self.velocity == zero

    def _check_kind(self, value: Value) -> None:
        kind = kind_of(value)
        if kind is not self._kind:
            raise KindMismatchError(self._kind.name, kind.name)

    def _start_after_tick(self, goal: Value) -> TaskBody:
        yield self._clock.stepped.wait()
        self.set_target(goal)

    def step(self, dt: float) -> Spring:
        """Advance one tick. Does nothing while the spring is inactive."""
        if not self._active:
            return self

        kind = self._kind
        displacement = kind.sub(self.value, self.target)
        new_x, new_v = advance(
            kind, displacement, self.velocity, self.frequency, self.damping, dt
        )

        if (
            kind.magnitude(new_v) < VELOCITY_THRESHOLD
            and kind.magnitude(new_x) < POSITION_THRESHOLD
        ):
            self.value = self.target
            self.velocity = kind.zero()
            if self._active:
                # cleared first so a completion handler can retarget
                self._active = False
                logger.debug("spring settled at %r", self.target)
                self.on_complete.fire()
            return self

        self.value = kind.add(self.target, new_x)
        self.velocity = new_v
        return self

    def set_target(
        self,
        target: Value,
        frequency: float | None = None,
        damping: float | None = None,
    ) -> Spring:
        """Start animating toward ``target``, optionally retuning the spring.

        Raises:
            KindMismatchError: ``target`` is not of the spring's kind.
            UnsupportedKindError: ``target`` is not a spring value at all.
            ValueError: ``frequency`` is not positive or ``damping`` is negative.
        """
        self._check_kind(target)
        _validate_tuning(
            self.frequency if frequency is None else frequency,
            self.damping if damping is None else damping,
        )

        self.target = target
        if frequency is not None:
            self.frequency = frequency
        if damping is not None:
            self.damping = damping

        if self._connection is not None:
            logger.debug("spring retargeted while connected, superseding")
            self._release(self._connection)

        self._active = True
        connection: Connection

        def on_tick(dt: float) -> None:
            if not self._active:
                self._release(connection)
                return
            self.step(dt)
            self.on_step.fire(self.value)
            if not self._active:
                self._release(connection)

        connection = self._clock.stepped.connect(on_tick)
        self._connection = connection
        logger.debug(
            "spring activated toward %r (frequency=%s, damping=%s)",
            target,
            self.frequency,
            self.damping,
        )
        return self

    def stop(self) -> None:
        """Deactivate without completing. ``value`` and ``velocity`` are kept."""
        if self._active:
            logger.debug("spring stopped at %r", self.value)
        self._active = False
        if self._connection is not None:
            self._release(self._connection)

    def _release(self, connection: Connection) -> None:
        connection.disconnect()
        if self._connection is connection:
            self._connection = None

    def __repr__(self) -> str:
        state = "active" if self._active else "idle"
        return (
            f"<Spring {self._kind.name} value={self.value!r} "
            f"target={self.target!r} {state}>"
        )
