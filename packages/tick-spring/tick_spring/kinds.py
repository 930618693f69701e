"""Value kinds a spring can animate: scalars and 2-/3-vectors.

Vectors are plain ``tuple[float, ...]`` like the physics helpers use. A
spring resolves its :class:`Kind` once at construction and routes all of its
arithmetic through it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Union

from tick_spring.types import UnsupportedKindError

Vec = tuple[float, ...]
Value = Union[float, Vec]


def _vec_add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def _vec_sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def _vec_scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def _vec_magnitude(v: Vec) -> float:
    return math.sqrt(sum(vi * vi for vi in v))


@dataclass(frozen=True)
class Kind:
    name: str
    dimensions: int
    add: Callable[[Any, Any], Any]
    sub: Callable[[Any, Any], Any]
    scale: Callable[[Any, float], Any]
    magnitude: Callable[[Any], float]

    def zero(self) -> Value:
        if self.dimensions == 1:
            return 0.0
        return tuple(0.0 for _ in range(self.dimensions))

    def __repr__(self) -> str:
        return f"Kind({self.name})"


SCALAR = Kind(
    name="scalar",
    dimensions=1,
    add=lambda a, b: a + b,
    sub=lambda a, b: a - b,
    scale=lambda v, s: v * s,
    magnitude=abs,
)

VECTOR2 = Kind(
    name="vector2",
    dimensions=2,
    add=_vec_add,
    sub=_vec_sub,
    scale=_vec_scale,
    magnitude=_vec_magnitude,
)

VECTOR3 = Kind(
    name="vector3",
    dimensions=3,
    add=_vec_add,
    sub=_vec_sub,
    scale=_vec_scale,
    magnitude=_vec_magnitude,
)

_VECTOR_KINDS = {2: VECTOR2, 3: VECTOR3}


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful spring value
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def kind_of(value: Any) -> Kind:
    """Classify ``value``, raising :class:`UnsupportedKindError` if it fits no kind."""
    if _is_number(value):
        return SCALAR
    if isinstance(value, tuple) and all(_is_number(c) for c in value):
        kind = _VECTOR_KINDS.get(len(value))
        if kind is not None:
            return kind
    raise UnsupportedKindError(value)
