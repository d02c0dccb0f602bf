"""
Base classes for the nodeactions system.

Actions animate attributes of a target node over time. An action is a
reusable template until it is cloned and bound to a target; the clone is then
driven by an external scheduler:

    running = action.clone()
    running.target = node
    running.start()
    while not running.done:
        running.step(dt)
    running.stop()

``attach()`` performs the first three steps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .errors import InvalidArgument, PreconditionViolation, UnsupportedOperation

if TYPE_CHECKING:
    from .protocols import Node


def _debug_log_action(action: Any, level: int, message: str) -> None:
    """Centralized debug logger with level and per-Action filtering."""
    action_name = action if isinstance(action, str) else type(action).__name__

    if Action.debug_level < level:
        return

    if not Action.debug_all:
        include = Action.debug_include_classes
        if not include or action_name not in include:
            return

    print(f"[NA L{level} {action_name}] {message}")


def describe_target(target: Any) -> str:
    """Return a short debug string for a target."""
    if target is None:
        return "None"
    return f"{type(target).__name__}@{id(target):#x}"


class Action(ABC):
    """
    Base class for all actions.

    An action is a self-contained unit of behavior applied to a single target
    node. Subclasses customise the ``apply_effect``, ``update_effect`` and
    ``remove_effect`` hooks; the public ``start``/``step``/``stop`` methods
    enforce the lifecycle around them.

    Operator Overloading:
        - ``a + b`` creates a ``Sequence`` of the two actions.
        - ``a | b`` creates a ``Spawn`` running both actions at once.
        - ``+`` binds tighter than ``|``; use parentheses when mixing them,
          e.g. ``a + (b | c)``.
    """

    debug_level: int = 0
    debug_include_classes: set[str] | None = None
    debug_all: bool = False
    strict_lifecycle: bool = True

    # Leaf actions that read or write node attributes need a bound target.
    _requires_target: bool = True

    def __init__(self):
        self.target: Node | None = None
        self._started = False
        self._stopped = False

    # Note on local imports in operator overloads:
    # composite.py imports Action from this module, so importing the builders
    # at module level would create a circular import.

    def __add__(self, other: Action) -> Action:
        """Create a sequence of actions using the '+' operator."""
        from .composite import sequence

        return sequence(self, other)

    def __or__(self, other: Action) -> Action:
        """Create a parallel composition of actions using the '|' operator."""
        from .composite import spawn

        return spawn(self, other)

    @property
    def done(self) -> bool:
        return False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def stopped(self) -> bool:
        return self._stopped

    def start(self) -> None:
        """Initialize run-state against the bound target and begin the action."""
        _debug_log_action(self, 2, f"start() target={describe_target(self.target)}")
        if self._already_running():
            return
        if self._requires_target and self.target is None:
            self._violation("start() called without a bound target")
            return
        self._started = True
        self._stopped = False
        self.apply_effect()

    def step(self, dt: float) -> None:
        """Advance the action by ``dt`` time units."""
        if dt is None or dt < 0:
            raise InvalidArgument(f"dt must be non-negative, got {dt!r}")
        if not self._started:
            self._violation("step() called before start()")
            return
        if self._stopped:
            self._violation("step() called after stop()")
            return
        if self.done:
            _debug_log_action(self, 3, "step() ignored, action already done")
            return
        self.update_effect(dt)

    def stop(self) -> None:
        """Finalize the action. May also be called mid-run to abort it."""
        if not self._started:
            self._violation("stop() called before start()")
            return
        if self._stopped:
            _debug_log_action(self, 3, "stop() ignored, action already stopped")
            return
        self._stopped = True
        self.remove_effect()
        _debug_log_action(self, 2, f"stop() completed done={self.done}")

    def apply_effect(self) -> None:
        """Capture the baseline needed by the action. Called from start()."""
        pass

    def update_effect(self, dt: float) -> None:
        """Apply one frame of the action. Called from step()."""
        pass

    def remove_effect(self) -> None:
        """Finalize the effect on the target. Called from stop()."""
        pass

    @abstractmethod
    def clone(self) -> Action:
        """Return an unbound copy of this action with fresh run-state."""
        raise NotImplementedError

    def reverse(self) -> Action:
        """Return a new action that undoes or mirrors this one."""
        raise UnsupportedOperation(f"{type(self).__name__} cannot be reversed")

    def _already_running(self) -> bool:
        # A running action must be stopped before it can start again.
        if self._started and not self._stopped:
            self._violation("start() called while already running")
            return True
        return False

    def _violation(self, message: str) -> None:
        if Action.strict_lifecycle:
            raise PreconditionViolation(f"{type(self).__name__}: {message}")
        _debug_log_action(self, 1, f"{message}; ignored")


class InstantAction(Action):
    """An action that completes synchronously inside start()."""

    @property
    def done(self) -> bool:
        return True


class IntervalAction(Action):
    """
    An action whose effect is spread over a fixed duration.

    Elapsed time is converted into normalized progress ``t`` in ``[0, 1]`` and
    handed to ``interval(t)``, which subclasses override. A zero-duration
    action applies ``interval(1.0)`` during start() and is done immediately.
    """

    def __init__(self, duration: float):
        if duration is None or duration < 0:
            raise InvalidArgument(f"duration must be non-negative, got {duration!r}")
        super().__init__()
        self.duration = duration
        self.elapsed_time = 0.0

    @property
    def done(self) -> bool:
        return self.elapsed_time >= self.duration

    @property
    def progress(self) -> float:
        if self.duration == 0:
            return 1.0 if self._started else 0.0
        return self.elapsed_time / self.duration

    def start(self) -> None:
        if self._already_running():
            return
        self.elapsed_time = 0.0
        super().start()
        if self._started and not self._stopped and self.duration == 0:
            self.interval(1.0)

    def update_effect(self, dt: float) -> None:
        self.elapsed_time = min(self.elapsed_time + dt, self.duration)
        _debug_log_action(self, 3, f"elapsed={self.elapsed_time:.4f}/{self.duration}")
        self.interval(self.progress)

    def interval(self, t: float) -> None:
        """Apply the effect for normalized progress ``t``."""
        pass


def attach(action: Action, target: Node | None) -> Action:
    """Clone ``action``, bind the clone to ``target``, start it and return it.

    The template passed in is never modified, so the same action can be
    attached to any number of nodes.
    """
    running = action.clone()
    running.target = target
    running.start()
    return running
