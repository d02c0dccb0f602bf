"""
Interval actions that happen over time.
"""

from __future__ import annotations

import random

from .attributes import (
    OPACITY,
    POSITION,
    ROTATION,
    SCALE,
    VISIBILITY,
    ChangeAttributeBy,
    ChangeAttributeTo,
    multiply,
    negate,
    reciprocal,
    subtract,
)
from .base import IntervalAction
from .errors import InvalidArgument


class MoveBy(ChangeAttributeBy):
    """Move the node by a relative amount over time."""

    def __init__(self, delta: tuple[float, float] = None, duration: float = None):
        if delta is None:
            raise InvalidArgument("Must specify delta")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(POSITION, delta, duration)

    def clone(self) -> MoveBy:
        return MoveBy(self.delta_value, self.duration)

    def reverse(self) -> MoveBy:
        return MoveBy(negate(self.delta_value), self.duration)

    def __repr__(self) -> str:
        return f"MoveBy(delta={self.delta_value}, duration={self.duration})"


class MoveTo(ChangeAttributeTo):
    """Move the node to a specific position over time.

    Not reversible: the position to return to is only known once the action
    has run on a particular node.
    """

    def __init__(self, position: tuple[float, float] = None, duration: float = None):
        if position is None:
            raise InvalidArgument("Must specify position")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(POSITION, position, duration)

    def clone(self) -> MoveTo:
        return MoveTo(self.end_value, self.duration)

    def __repr__(self) -> str:
        return f"MoveTo(position={self.end_value}, duration={self.duration})"


class RotateBy(ChangeAttributeBy):
    """Rotate the node by a relative angle in degrees over time."""

    def __init__(self, angle: float = None, duration: float = None):
        if angle is None:
            raise InvalidArgument("Must specify angle")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(ROTATION, angle, duration)

    def clone(self) -> RotateBy:
        return RotateBy(self.delta_value, self.duration)

    def reverse(self) -> RotateBy:
        return RotateBy(-self.delta_value, self.duration)

    def __repr__(self) -> str:
        return f"RotateBy(angle={self.delta_value}, duration={self.duration})"


class RotateTo(ChangeAttributeTo):
    """Rotate the node to a specific angle in degrees over time.

    Angles beyond one full turn are wrapped with ``% 360`` so the node does
    not spin through extra revolutions.
    """

    def __init__(self, angle: float = None, duration: float = None):
        if angle is None:
            raise InvalidArgument("Must specify angle")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        if abs(angle) > 360:
            angle = angle % 360
        super().__init__(ROTATION, angle, duration)

    def clone(self) -> RotateTo:
        return RotateTo(self.end_value, self.duration)

    def reverse(self) -> RotateTo:
        return RotateTo(self.end_value - 360, self.duration)

    def __repr__(self) -> str:
        return f"RotateTo(angle={self.end_value}, duration={self.duration})"


class ScaleBy(ChangeAttributeBy):
    """Scale the node by a multiplicative factor over time.

    ``ScaleBy(2, d)`` doubles the scale; a tuple factor scales each axis
    independently.
    """

    def __init__(self, factor: float | tuple[float, float] = None, duration: float = None):
        if factor is None:
            raise InvalidArgument("Must specify factor")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(SCALE, factor, duration)

    @property
    def factor(self) -> float | tuple[float, float]:
        return self.delta_value

    def apply_effect(self) -> None:
        super().apply_effect()
        self.run_delta = subtract(multiply(self.start_value, self.delta_value), self.start_value)

    def clone(self) -> ScaleBy:
        return ScaleBy(self.delta_value, self.duration)

    def reverse(self) -> ScaleBy:
        return ScaleBy(reciprocal(self.delta_value), self.duration)

    def __repr__(self) -> str:
        return f"ScaleBy(factor={self.delta_value}, duration={self.duration})"


class ScaleTo(ChangeAttributeTo):
    """Scale the node to a specific size over time."""

    def __init__(self, scale: float | tuple[float, float] = None, duration: float = None):
        if scale is None:
            raise InvalidArgument("Must specify scale")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(SCALE, scale, duration)

    def clone(self) -> ScaleTo:
        return ScaleTo(self.end_value, self.duration)

    def __repr__(self) -> str:
        return f"ScaleTo(scale={self.end_value}, duration={self.duration})"


class FadeTo(ChangeAttributeTo):
    """Fade the node to a specific opacity in ``[0, 1]`` over time."""

    def __init__(self, opacity: float = None, duration: float = None):
        if opacity is None:
            raise InvalidArgument("Must specify opacity")
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(OPACITY, min(1.0, max(0.0, opacity)), duration)

    def clone(self) -> FadeTo:
        return FadeTo(self.end_value, self.duration)

    def __repr__(self) -> str:
        return f"FadeTo(opacity={self.end_value}, duration={self.duration})"


class FadeIn(FadeTo):
    """Fade the node in to full opacity over time."""

    def __init__(self, duration: float = None):
        super().__init__(1.0, duration)

    def clone(self) -> FadeIn:
        return FadeIn(self.duration)

    def reverse(self) -> FadeOut:
        return FadeOut(self.duration)

    def __repr__(self) -> str:
        return f"FadeIn(duration={self.duration})"


class FadeOut(FadeTo):
    """Fade the node out to full transparency over time."""

    def __init__(self, duration: float = None):
        super().__init__(0.0, duration)

    def clone(self) -> FadeOut:
        return FadeOut(self.duration)

    def reverse(self) -> FadeIn:
        return FadeIn(self.duration)

    def __repr__(self) -> str:
        return f"FadeOut(duration={self.duration})"


class Blink(IntervalAction):
    """Blink the node by toggling visibility ``times`` times over the duration.

    stop() restores the visibility recorded at start(), whether the run
    finished or was cancelled part way.
    """

    def __init__(self, times: int = None, duration: float = None):
        if times is None:
            raise InvalidArgument("Must specify times")
        if times <= 0:
            raise InvalidArgument(f"times must be positive, got {times}")
        if duration is None:
            raise InvalidArgument("Must specify duration")

        super().__init__(duration)
        self.times = times
        self.blink_interval = 1 / times
        self.blinks = 0
        self.original_visible: bool | None = None

    def apply_effect(self) -> None:
        self.original_visible = VISIBILITY.get(self.target)
        self.blinks = 0

    def interval(self, t: float) -> None:
        # One toggle per boundary crossed, even when a large step crosses several.
        while self.blinks < self.times and t > self.blink_interval * self.blinks:
            VISIBILITY.set(self.target, not VISIBILITY.get(self.target))
            self.blinks += 1

    def remove_effect(self) -> None:
        VISIBILITY.set(self.target, self.original_visible)

    def clone(self) -> Blink:
        return Blink(self.times, self.duration)

    def reverse(self) -> Blink:
        return self.clone()

    def __repr__(self) -> str:
        return f"Blink(times={self.times}, duration={self.duration})"


class Delay(IntervalAction):
    """Delay execution for a specified duration.

    This action does nothing but wait for the specified duration.
    Useful in sequences to create pauses between actions.
    """

    _requires_target = False

    def __init__(self, duration: float = None):
        if duration is None:
            raise InvalidArgument("Must specify duration")
        super().__init__(duration)

    def clone(self) -> Delay:
        return Delay(self.duration)

    def reverse(self) -> Delay:
        return self.clone()

    def __repr__(self) -> str:
        return f"Delay(duration={self.duration})"


class RandomDelay(Delay):
    """Delay execution for a random duration between min and max values.

    The duration is sampled once at construction. clone() samples again, so
    every run of a template gets its own duration.
    """

    def __init__(self, min_duration: float = None, max_duration: float = None):
        if min_duration is None or max_duration is None:
            raise InvalidArgument("Must specify both min and max duration")
        if min_duration < 0:
            raise InvalidArgument(f"min duration must be non-negative, got {min_duration}")
        if min_duration > max_duration:
            raise InvalidArgument("Min duration must not exceed max duration")

        super().__init__(random.uniform(min_duration, max_duration))
        self.min_duration = min_duration
        self.max_duration = max_duration

    def clone(self) -> RandomDelay:
        return RandomDelay(self.min_duration, self.max_duration)

    def reverse(self) -> RandomDelay:
        return self.clone()

    def __repr__(self) -> str:
        return f"RandomDelay(min={self.min_duration}, max={self.max_duration})"
