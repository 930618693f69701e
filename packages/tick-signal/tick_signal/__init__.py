"""tick-signal - Synchronous signals and cooperative waits for the tick engine."""
from __future__ import annotations

from tick_signal.signal import Connection, Signal
from tick_signal.tasks import Task, WaitRequest, spawn

__all__ = ["Connection", "Signal", "Task", "WaitRequest", "spawn"]
