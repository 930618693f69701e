"""Generator-based cooperative tasks that suspend on signal waits."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generator

if TYPE_CHECKING:
    from tick_signal.signal import Signal

logger = logging.getLogger(__name__)

TaskBody = Generator["WaitRequest", tuple[Any, ...], Any]


class WaitRequest:
    """Yielded by a task to park it on a signal until that signal next fires."""

    __slots__ = ("signal",)

    def __init__(self, signal: Signal) -> None:
        self.signal = signal

    def register(self, resume: Callable[[tuple[Any, ...]], None]) -> None:
        self.signal._add_waiter(resume)


class Task:
    """A running generator.

    The generator yields :class:`WaitRequest` objects; each ``yield``
    evaluates to the argument tuple of the fire that resumed it. Resumption
    happens synchronously inside ``Signal.fire``.
    """

    def __init__(self, body: TaskBody) -> None:
        self._body = body
        self.done: bool = False
        self.result: Any = None

    def _resume(self, args: tuple[Any, ...] | None) -> None:
        try:
            request = self._body.send(args)
        except StopIteration as stop:
            self.done = True
            self.result = stop.value
            logger.debug("task %r finished", self._body)
            return
        except Exception:
            self.done = True
            raise

        if not isinstance(request, WaitRequest):
            self._body.close()
            self.done = True
            raise TypeError(
                f"Task yielded {type(request).__name__}, expected a WaitRequest"
            )
        request.register(self._resume)

    def __repr__(self) -> str:
        state = "done" if self.done else "suspended"
        return f"<Task {self._body!r} {state}>"


def spawn(fn: Callable[..., TaskBody], *args: Any) -> Task:
    """Start ``fn(*args)`` as a task, running it up to its first wait."""
    task = Task(fn(*args))
    task._resume(None)
    return task
