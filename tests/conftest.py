"""Shared test fixtures and utilities for the nodeactions test suite."""

from dataclasses import dataclass

import pytest

from nodeactions import Action, attach
from nodeactions.config import set_debug_options, set_strict_lifecycle


@dataclass
class Node:
    """Minimal scene-graph node exposing the attributes actions animate."""

    position: tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    scale: tuple[float, float] = (1.0, 1.0)
    opacity: float = 1.0
    visible: bool = True


class MockAction(Action):
    """Mock action recording lifecycle calls, done after ``duration`` time units."""

    _requires_target = False

    def __init__(self, duration=0.1, name="mock", log=None):
        super().__init__()
        self.duration = duration
        self.name = name
        self.log = log if log is not None else []
        self.time_elapsed = 0.0
        self.started_count = 0
        self.stopped_count = 0
        self.step_calls: list[float] = []

    @property
    def done(self) -> bool:
        return self.time_elapsed >= self.duration

    def apply_effect(self):
        self.started_count += 1
        self.log.append(("start", self.name))

    def update_effect(self, dt):
        self.step_calls.append(dt)
        self.time_elapsed += dt

    def remove_effect(self):
        self.stopped_count += 1
        self.log.append(("stop", self.name))

    def clone(self) -> "MockAction":
        return MockAction(self.duration, self.name, self.log)

    def reverse(self) -> "MockAction":
        return MockAction(self.duration, f"{self.name}-reversed", self.log)


def run(action: Action, target, dt: float = 0.1, max_steps: int = 10_000) -> Action:
    """Attach ``action`` to ``target`` and step it until done, then stop it.

    Returns the running clone so tests can inspect its final state.
    """
    running = attach(action, target)
    steps = 0
    while not running.done:
        running.step(dt)
        steps += 1
        assert steps < max_steps, f"{running!r} did not finish"
    running.stop()
    return running


@pytest.fixture
def node() -> Node:
    """Create a node at the origin with unit scale, full opacity, visible."""
    return Node()


@pytest.fixture(autouse=True)
def reset_config():
    """Reset debug and lifecycle configuration after each test."""
    yield
    set_debug_options(level=0, include_all=False, include=None)
    set_strict_lifecycle(True)


class ActionTestBase:
    """Base class for action tests with common teardown."""

    def teardown_method(self):
        """Clean up after each test."""
        set_debug_options(level=0, include_all=False, include=None)
        set_strict_lifecycle(True)
