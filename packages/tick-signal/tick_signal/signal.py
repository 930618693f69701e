"""Synchronous pub/sub channel with snapshot dispatch and single-shot waits."""
from __future__ import annotations

from typing import Any, Callable

from tick_signal.tasks import WaitRequest

_Handler = Callable[..., None]
_Resume = Callable[[tuple[Any, ...]], None]


class Connection:
    """Handle returned by :meth:`Signal.connect`."""

    __slots__ = ("_signal", "_handler", "_connected")

    def __init__(self, signal: Signal, handler: _Handler) -> None:
        self._signal = signal
        self._handler = handler
        self._connected = True

    @property
    def signal(self) -> Signal:
        return self._signal

    @property
    def connected(self) -> bool:
        return self._connected

    def disconnect(self) -> None:
        if not self._connected:
            return
        self._connected = False
        self._signal._remove(self)

    def __repr__(self) -> str:
        state = "connected" if self._connected else "disconnected"
        return f"<Connection {self._handler!r} {state}>"


class Signal:
    """Event channel.

    ``fire`` dispatches to the connections and waiters present when it began.
    A connection disconnected mid-dispatch is skipped if its turn has not come
    yet; connections made mid-dispatch wait for the next fire. Waiters are
    resumed after every handler has returned, and each waiter is consumed by
    the first fire that begins after it registered.
    """

    def __init__(self) -> None:
        self._connections: list[Connection] = []
        self._waiters: list[_Resume] = []

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    @property
    def waiter_count(self) -> int:
        return len(self._waiters)

    def connect(self, handler: _Handler) -> Connection:
        connection = Connection(self, handler)
        self._connections.append(connection)
        return connection

    def _remove(self, connection: Connection) -> None:
        try:
            self._connections.remove(connection)
        except ValueError:
            pass

    def disconnect_all(self) -> None:
        for connection in list(self._connections):
            connection.disconnect()

    def fire(self, *args: Any) -> None:
        connections = list(self._connections)
        waiters = self._waiters
        self._waiters = []

        resumed = 0
        try:
            for connection in connections:
                if connection._connected:
                    connection._handler(*args)

            for resume in waiters:
                resumed += 1
                resume(args)
        finally:
            # on error, waiters not yet resumed stay pending ahead of newer ones
            if resumed < len(waiters):
                self._waiters[:0] = waiters[resumed:]

    def wait(self) -> WaitRequest:
        """Return a request that suspends the yielding task until the next fire.

        Inside a task spawned with :func:`tick_signal.spawn`::

            (dt,) = yield clock.stepped.wait()
        """
        return WaitRequest(self)

    def _add_waiter(self, resume: _Resume) -> None:
        self._waiters.append(resume)
