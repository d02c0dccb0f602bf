"""
Instant actions that happen immediately.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .attributes import POSITION, VISIBILITY, as_value
from .base import InstantAction
from .errors import InvalidArgument, UnsupportedOperation


class Place(InstantAction):
    """Place the node at a specific position.

    Placing is not invertible on its own. Pass ``previous_position`` to make
    reverse() return a Place back to it.
    """

    def __init__(self, position: tuple[float, float] = None, previous_position: tuple[float, float] | None = None):
        if position is None:
            raise InvalidArgument("Must specify position")

        super().__init__()
        self.position = as_value(position)
        self.previous_position = as_value(previous_position) if previous_position is not None else None

    def apply_effect(self) -> None:
        POSITION.set(self.target, self.position)

    def clone(self) -> Place:
        return Place(self.position, self.previous_position)

    def reverse(self) -> Place:
        if self.previous_position is None:
            raise UnsupportedOperation("Place cannot be reversed without previous_position")
        return Place(self.previous_position, self.position)

    def __repr__(self) -> str:
        return f"Place(position={self.position})"


class Hide(InstantAction):
    """Hide the node."""

    def apply_effect(self) -> None:
        VISIBILITY.set(self.target, False)

    def clone(self) -> Hide:
        return Hide()

    def reverse(self) -> Show:
        return Show()

    def __repr__(self) -> str:
        return "Hide()"


class Show(InstantAction):
    """Show the node."""

    def apply_effect(self) -> None:
        VISIBILITY.set(self.target, True)

    def clone(self) -> Show:
        return Show()

    def reverse(self) -> Hide:
        return Hide()

    def __repr__(self) -> str:
        return "Show()"


class ToggleVisibility(InstantAction):
    """Toggle the node's visibility."""

    def apply_effect(self) -> None:
        VISIBILITY.set(self.target, not VISIBILITY.get(self.target))

    def clone(self) -> ToggleVisibility:
        return ToggleVisibility()

    def reverse(self) -> ToggleVisibility:
        return ToggleVisibility()

    def __repr__(self) -> str:
        return "ToggleVisibility()"


class CallFunction(InstantAction):
    """Call a function when the action starts.

    The function is called synchronously inside start(); any exception it
    raises propagates to the caller.
    """

    _requires_target = False

    def __init__(self, func: Callable[..., Any] = None, *args: Any, **kwargs: Any):
        if func is None or not callable(func):
            raise InvalidArgument(f"Must specify a callable, got {func!r}")

        super().__init__()
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def apply_effect(self) -> None:
        self.func(*self.args, **self.kwargs)

    def clone(self) -> CallFunction:
        return type(self)(self.func, *self.args, **self.kwargs)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"{type(self).__name__}(func={name})"


class CallFunctionWithTarget(CallFunction):
    """Call a function with the target node as the first argument."""

    _requires_target = True

    def apply_effect(self) -> None:
        self.func(self.target, *self.args, **self.kwargs)
