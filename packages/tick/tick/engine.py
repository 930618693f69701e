"""Engine - core loop, pacing, and lifecycle hooks."""

import time
from typing import Callable

from tick.clock import Clock
from tick.types import System, TickContext, TickFlavor

Hook = Callable[[TickContext], None]


class Engine:
    def __init__(self, tps: int = 20, flavor: TickFlavor = TickFlavor.DRIVEN) -> None:
        self._clock = Clock(tps, flavor)
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _run_hooks(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        """Tick until a system calls ``ctx.request_stop()``, sleeping off spare time."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
