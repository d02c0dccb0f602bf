"""
Composite actions that combine other actions.

Children are cloned when the composite is built and cloned again each time a
run needs them, so the templates in ``actions``/``action`` are never touched
by a run and a composite can be cloned or attached at any time.
"""

from __future__ import annotations

from collections.abc import Iterable

from .base import Action, _debug_log_action
from .errors import InvalidArgument


def _collect_actions(owner: str, actions: tuple) -> list[Action]:
    # Accept both Sequence(a, b) and Sequence([a, b]).
    if len(actions) == 1 and not isinstance(actions[0], Action) and isinstance(actions[0], Iterable):
        actions = tuple(actions[0])
    if not actions:
        raise InvalidArgument(f"{owner} requires at least one action")
    for action in actions:
        if not isinstance(action, Action):
            raise InvalidArgument(f"{owner} children must be actions, got {action!r}")
    return [action.clone() for action in actions]


class CompositeAction(Action):
    """Base class for composite actions that manage sub-actions."""

    _requires_target = False

    def _start_child(self, template: Action) -> Action:
        child = template.clone()
        child.target = self.target
        child.start()
        _debug_log_action(self, 2, f"started child {child!r} done={child.done}")
        return child

    @staticmethod
    def _finished(child: Action) -> bool:
        # A child that could not start (relaxed lifecycle) counts as finished.
        return child.done or not child.started


class Sequence(CompositeAction):
    """Run a sequence of actions one after another.

    Only the active child receives time in a frame. Children that are done as
    soon as they start (instant actions) are stopped and skipped within the
    same call, so an all-instant sequence completes inside start().
    """

    def __init__(self, *actions: Action):
        super().__init__()
        self.actions = _collect_actions("Sequence", actions)
        self.current_index: int | None = None
        self.current_action: Action | None = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def apply_effect(self) -> None:
        self.current_index = None
        self.current_action = None
        self._done = False
        self._next_action()

    def update_effect(self, dt: float) -> None:
        self.current_action.step(dt)
        if self._finished(self.current_action):
            self._next_action()

    def remove_effect(self) -> None:
        # Abort: finalize the child that is still running.
        if self.current_action is not None:
            self.current_action.stop()
            self.current_action = None

    def _next_action(self) -> None:
        while True:
            if self.current_action is not None:
                self.current_action.stop()
                self.current_action = None

            self.current_index = 0 if self.current_index is None else self.current_index + 1
            if self.current_index >= len(self.actions):
                self._done = True
                _debug_log_action(self, 2, "all children finished")
                return

            self.current_action = self._start_child(self.actions[self.current_index])
            if not self._finished(self.current_action):
                return

    def clone(self) -> Sequence:
        return Sequence(*self.actions)

    def reverse(self) -> Sequence:
        return Sequence(*(action.reverse() for action in reversed(self.actions)))

    def __repr__(self) -> str:
        actions_repr = ", ".join(repr(a) for a in self.actions)
        return f"Sequence(actions=[{actions_repr}])"


class Spawn(CompositeAction):
    """Run multiple actions simultaneously.

    All children start together; each is stopped and dropped as soon as it is
    done. The spawn is done once no child is left running.

    Two children that write the same attribute race within a frame: the later
    child in ``actions`` wins. This is not guarded.
    """

    def __init__(self, *actions: Action):
        super().__init__()
        self.actions = _collect_actions("Spawn", actions)
        self.running: list[Action] | None = None

    @property
    def done(self) -> bool:
        return self.running is not None and not self.running

    def apply_effect(self) -> None:
        self.running = [self._start_child(action) for action in self.actions]
        self._remove_done()

    def update_effect(self, dt: float) -> None:
        for action in self.running:
            action.step(dt)
        self._remove_done()

    def remove_effect(self) -> None:
        for action in self.running:
            action.stop()
        self.running = []

    def _remove_done(self) -> None:
        still_running = []
        for action in self.running:
            if self._finished(action):
                action.stop()
            else:
                still_running.append(action)
        self.running = still_running

    def clone(self) -> Spawn:
        return Spawn(*self.actions)

    def reverse(self) -> Spawn:
        return Spawn(*(action.reverse() for action in self.actions))

    def __repr__(self) -> str:
        actions_repr = ", ".join(repr(a) for a in self.actions)
        return f"Spawn(actions=[{actions_repr}])"


class Repeat(CompositeAction):
    """Run ``times`` independent clones of an action back to back.

    Each repetition runs on a fresh clone, so interval run-state such as
    ``elapsed_time`` starts from zero every cycle.
    """

    def __init__(self, action: Action, times: int):
        if not isinstance(action, Action):
            raise InvalidArgument(f"Repeat requires an action, got {action!r}")
        if times is None or times < 0:
            raise InvalidArgument(f"times must be non-negative, got {times!r}")

        super().__init__()
        self.action = action.clone()
        self.times = times
        self.repetitions = 0
        self.current_action: Action | None = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def apply_effect(self) -> None:
        self.repetitions = 0
        self.current_action = None
        self._done = False
        self._next_action()

    def update_effect(self, dt: float) -> None:
        self.current_action.step(dt)
        if self._finished(self.current_action):
            self._next_action()

    def remove_effect(self) -> None:
        if self.current_action is not None:
            self.current_action.stop()
            self.current_action = None

    def _next_action(self) -> None:
        while True:
            if self.current_action is not None:
                self.current_action.stop()
                self.current_action = None

            if self.repetitions >= self.times:
                self._done = True
                _debug_log_action(self, 2, f"finished {self.repetitions} repetitions")
                return

            self.repetitions += 1
            self.current_action = self._start_child(self.action)
            if not self._finished(self.current_action):
                return

    def clone(self) -> Repeat:
        return Repeat(self.action, self.times)

    def reverse(self) -> Repeat:
        return Repeat(self.action.reverse(), self.times)

    def __repr__(self) -> str:
        return f"Repeat(action={self.action!r}, times={self.times})"


class Loop(CompositeAction):
    """Repeat an action indefinitely until the scheduler stops it.

    A loop is never done. If a fresh cycle is done as soon as it starts (for
    example a loop around a single ``CallFunction``), the loop runs one such
    cycle per start()/step() call rather than spinning within the frame.
    """

    def __init__(self, action: Action):
        if not isinstance(action, Action):
            raise InvalidArgument(f"Loop requires an action, got {action!r}")

        super().__init__()
        self.action = action.clone()
        self.cycles = 0
        self.current_action: Action | None = None

    def apply_effect(self) -> None:
        self.cycles = 0
        self.current_action = None
        self._next_action()

    def update_effect(self, dt: float) -> None:
        if self.current_action is None:
            self._next_action()
            return
        self.current_action.step(dt)
        if self._finished(self.current_action):
            self._next_action()

    def remove_effect(self) -> None:
        if self.current_action is not None:
            self.current_action.stop()
            self.current_action = None

    def _next_action(self) -> None:
        if self.current_action is not None:
            self.current_action.stop()
            self.current_action = None

        self.cycles += 1
        action = self._start_child(self.action)
        if self._finished(action):
            action.stop()
        else:
            self.current_action = action

    def clone(self) -> Loop:
        return Loop(self.action)

    def reverse(self) -> Loop:
        return Loop(self.action.reverse())

    def __repr__(self) -> str:
        return f"Loop(action={self.action!r})"


def sequence(*actions: Action) -> Sequence:
    """Create a sequence that runs actions one after another.

    Args:
        *actions: Actions to run in sequence

    Returns:
        Sequence action that runs each action in order

    Example:
        seq = sequence(
            MoveBy((100, 0), 2.0),
            RotateBy(90, 1.0),
            FadeOut(1.5),
        )
        running = attach(seq, node)
    """
    return Sequence(*actions)


def spawn(*actions: Action) -> Spawn:
    """Create a parallel composition that runs actions simultaneously.

    Example:
        spawn(MoveBy((50, 25), 3.0), FadeOut(2.0), RotateBy(180, 3.0))
    """
    return Spawn(*actions)


parallel = spawn


def repeat(action: Action, times: int) -> Repeat:
    """Create a composition that runs ``action`` ``times`` times in a row."""
    return Repeat(action, times)


def loop(action: Action) -> Loop:
    """Create a composition that runs ``action`` over and over until stopped."""
    return Loop(action)
