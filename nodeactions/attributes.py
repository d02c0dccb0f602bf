"""
Generic "animate one attribute" actions.

An ``Attribute`` is a strategy object pairing ``get(target)`` with
``set(target, value)``. ``ChangeAttributeTo`` and ``ChangeAttributeBy`` hold
the only copy of the interval math; the concrete leaf actions in
``interval.py`` just bind one of the attributes defined here.

Values are either scalars or 2D vectors (tuples). Arithmetic between a vector
and a scalar broadcasts the scalar to every component.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from numbers import Number
from typing import Any

from .base import IntervalAction

Value = Any


def as_value(value: Value) -> Value:
    """Normalize a value read from a target: numbers stay numbers, vectors become tuples."""
    if isinstance(value, Number):
        return value
    return tuple(value)


def _combine(a: Value, b: Value, op: Callable[[Any, Any], Any]) -> Value:
    a_scalar = isinstance(a, Number)
    b_scalar = isinstance(b, Number)
    if a_scalar and b_scalar:
        return op(a, b)
    if a_scalar:
        return tuple(op(a, y) for y in b)
    if b_scalar:
        return tuple(op(x, b) for x in a)
    if len(a) != len(b):
        raise ValueError(f"cannot combine vectors of different sizes: {a!r} and {b!r}")
    return tuple(op(x, y) for x, y in zip(a, b))


def add(a: Value, b: Value) -> Value:
    return _combine(a, b, lambda x, y: x + y)


def subtract(a: Value, b: Value) -> Value:
    return _combine(a, b, lambda x, y: x - y)


def multiply(a: Value, b: Value) -> Value:
    return _combine(a, b, lambda x, y: x * y)


def negate(value: Value) -> Value:
    return multiply(value, -1)


def reciprocal(value: Value) -> Value:
    """Per-component reciprocal where 1/0 is defined as 0."""
    if isinstance(value, Number):
        return 0 if value == 0 else 1 / value
    return tuple(0 if x == 0 else 1 / x for x in value)


def interpolate(start: Value, delta: Value, t: float) -> Value:
    """Return ``start + delta * t``."""
    return add(start, multiply(delta, t))


@dataclass(frozen=True)
class Attribute:
    """Get/set strategy for one attribute of a target."""

    name: str
    get: Callable[[Any], Value]
    set: Callable[[Any, Value], None]

    @classmethod
    def named(cls, name: str) -> Attribute:
        """Build an attribute accessed with plain getattr/setattr."""
        return cls(
            name=name,
            get=lambda target: as_value(getattr(target, name)),
            set=lambda target, value: setattr(target, name, value),
        )

    def __repr__(self) -> str:
        return f"Attribute({self.name!r})"


POSITION = Attribute.named("position")
ROTATION = Attribute.named("rotation")
SCALE = Attribute.named("scale")
OPACITY = Attribute.named("opacity")
VISIBILITY = Attribute(
    name="visible",
    get=lambda target: bool(target.visible),
    set=lambda target, value: setattr(target, "visible", value),
)


class ChangeAttributeTo(IntervalAction):
    """Animate an attribute from its value at start() toward ``end_value``.

    The delta is computed when the action starts, so the same template adapts
    to whatever value the target has at that moment. When a run completes,
    stop() snaps the attribute to ``end_value`` exactly; an aborted run keeps
    the last interpolated value.
    """

    def __init__(self, attribute: Attribute, end_value: Value, duration: float):
        super().__init__(duration)
        self.attribute = attribute
        self.end_value = as_value(end_value)
        self.start_value: Value = None
        self.delta_value: Value = None

    def apply_effect(self) -> None:
        self.start_value = self.attribute.get(self.target)
        self.delta_value = subtract(self.end_value, self.start_value)

    def interval(self, t: float) -> None:
        self.attribute.set(self.target, interpolate(self.start_value, self.delta_value, t))

    def remove_effect(self) -> None:
        if self.done:
            self.attribute.set(self.target, self.end_value)

    def clone(self) -> ChangeAttributeTo:
        return ChangeAttributeTo(self.attribute, self.end_value, self.duration)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attribute.name}={self.end_value!r}, duration={self.duration})"


class ChangeAttributeBy(IntervalAction):
    """Animate an attribute by ``delta_value`` relative to its value at start().

    stop() always writes ``start + delta`` so that the final value carries no
    floating-point drift from the per-frame interpolation.
    """

    def __init__(self, attribute: Attribute, delta_value: Value, duration: float):
        super().__init__(duration)
        self.attribute = attribute
        self.delta_value = as_value(delta_value)
        self.start_value: Value = None
        # Effective delta for the current run; ScaleBy rewrites it at start().
        self.run_delta: Value = None

    def apply_effect(self) -> None:
        self.start_value = self.attribute.get(self.target)
        self.run_delta = self.delta_value

    def interval(self, t: float) -> None:
        self.attribute.set(self.target, interpolate(self.start_value, self.run_delta, t))

    def remove_effect(self) -> None:
        self.attribute.set(self.target, add(self.start_value, self.run_delta))

    @property
    def end_value(self) -> Value:
        """Final value of the current run, or None before start()."""
        if self.start_value is None:
            return None
        return add(self.start_value, self.run_delta)

    def clone(self) -> ChangeAttributeBy:
        return ChangeAttributeBy(self.attribute, self.delta_value, self.duration)

    def reverse(self) -> ChangeAttributeBy:
        return ChangeAttributeBy(self.attribute, negate(self.delta_value), self.duration)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attribute.name}+={self.delta_value!r}, duration={self.duration})"
