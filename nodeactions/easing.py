"""
Re-timing wrappers for interval actions.

Each wrapper owns a clone of one ``IntervalAction`` and reuses only its
``interval(t)`` mapping: the wrapper's own timeline decides ``t``.

- ``Speed`` rescales the timeline length.
- ``Accelerate``, ``AccelDeccel`` and ``Ease`` keep the wrapped duration and
  reshape the progress curve instead.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from arcade import easing

from .base import IntervalAction, _debug_log_action
from .errors import InvalidArgument


def _require_interval(owner: str, action: IntervalAction) -> None:
    if not isinstance(action, IntervalAction):
        raise InvalidArgument(f"{owner} wraps an IntervalAction, got {action!r}")


class _IntervalWrapper(IntervalAction):
    """Base class for actions that drive another interval action's interval()."""

    _requires_target = False

    def __init__(self, action: IntervalAction, duration: float):
        super().__init__(duration)
        self.wrapped_action = action.clone()

    def apply_effect(self) -> None:
        self.wrapped_action.target = self.target
        self.wrapped_action.start()

    def remove_effect(self) -> None:
        if self.done:
            # The wrapped action never sees step(); mark its run complete so it finalizes.
            self.wrapped_action.elapsed_time = self.wrapped_action.duration
        self.wrapped_action.stop()

    def interval(self, t: float) -> None:
        self.wrapped_action.interval(self.map_progress(t))

    def map_progress(self, t: float) -> float:
        return t


class Speed(_IntervalWrapper):
    """Run an interval action faster or slower.

    The effective duration is ``action.duration / speed``; ``Speed(a, 2)``
    finishes in half the time.
    """

    def __init__(self, action: IntervalAction, speed: float):
        if speed is None or speed <= 0:
            raise InvalidArgument(f"speed must be positive, got {speed!r}")
        _require_interval("Speed", action)
        super().__init__(action, action.duration / speed)
        self.speed = speed

    def clone(self) -> Speed:
        return Speed(self.wrapped_action, self.speed)

    def reverse(self) -> Speed:
        return Speed(self.wrapped_action.reverse(), self.speed)

    def __repr__(self) -> str:
        return f"Speed(speed={self.speed}, wrapped={self.wrapped_action!r})"


class Accelerate(_IntervalWrapper):
    """Change the progress curve of an action to ``t ** rate``.

    ``rate > 1`` starts slow and speeds up; ``rate < 1`` starts fast and slows
    down. The duration is the wrapped action's duration.
    """

    def __init__(self, action: IntervalAction, rate: float = 2.0):
        if rate is None or rate <= 0:
            raise InvalidArgument(f"rate must be positive, got {rate!r}")
        _require_interval(type(self).__name__, action)
        super().__init__(action, action.duration)
        self.rate = rate

    def map_progress(self, t: float) -> float:
        return t**self.rate

    def clone(self) -> Accelerate:
        return Accelerate(self.wrapped_action, self.rate)

    def reverse(self) -> Accelerate:
        return Accelerate(self.wrapped_action.reverse(), 1 / self.rate)

    def __repr__(self) -> str:
        return f"Accelerate(rate={self.rate}, wrapped={self.wrapped_action!r})"


class AccelDeccel(Accelerate):
    """Ease in and out with a logistic curve centred on the middle of the run."""

    STEEPNESS = 12

    def __init__(self, action: IntervalAction, rate: float = 1.0):
        super().__init__(action, rate)

    def map_progress(self, t: float) -> float:
        if t == 1.0:
            return t
        return 1.0 / (1.0 + math.exp(-(t - 0.5) * self.STEEPNESS))

    def clone(self) -> AccelDeccel:
        return AccelDeccel(self.wrapped_action, self.rate)

    def reverse(self) -> AccelDeccel:
        return AccelDeccel(self.wrapped_action.reverse(), self.rate)

    def __repr__(self) -> str:
        return f"AccelDeccel(rate={self.rate}, wrapped={self.wrapped_action!r})"


class Ease(_IntervalWrapper):
    """
    Wraps an IntervalAction and remaps its progress with an easing function.

    Any ``float -> float`` function works; the curves in ``arcade.easing`` are
    the usual choice.

    Example:
        >>> from arcade import easing
        >>> from nodeactions.interval import MoveBy
        >>> eased = Ease(MoveBy((100, 0), 2.0), ease_function=easing.ease_out)
        >>> eased.duration
        2.0
    """

    def __init__(
        self,
        action: IntervalAction,
        ease_function: Callable[[float], float] = easing.ease_in_out,
    ):
        if not callable(ease_function):
            raise InvalidArgument(f"ease_function must be callable, got {ease_function!r}")
        _require_interval("Ease", action)
        super().__init__(action, action.duration)
        self.ease_function = ease_function

    def map_progress(self, t: float) -> float:
        eased = self.ease_function(t)
        _debug_log_action(self, 3, f"t={t:.4f} eased={eased:.4f}")
        return eased

    def clone(self) -> Ease:
        return Ease(self.wrapped_action, self.ease_function)

    def reverse(self) -> Ease:
        return Ease(self.wrapped_action.reverse(), self.ease_function)

    def __repr__(self) -> str:
        ease_name = getattr(self.ease_function, "__name__", repr(self.ease_function))
        return f"Ease(ease_function={ease_name}, wrapped={self.wrapped_action!r})"
