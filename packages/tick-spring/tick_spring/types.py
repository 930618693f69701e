"""Error types for spring animation."""
from __future__ import annotations

from typing import Any


class SpringError(Exception):
    """Base class for errors raised by tick-spring."""


class UnsupportedKindError(SpringError, TypeError):
    """Raised when a value is not a scalar, 2-vector or 3-vector."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Unsupported kind {type(value).__name__}: {value!r} "
            "(expected a number or a tuple of 2 or 3 numbers)"
        )


class KindMismatchError(SpringError, TypeError):
    """Raised when a spring is retargeted with a value of a different kind."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid target kind. This spring accepts {expected}, not {actual}"
        )
