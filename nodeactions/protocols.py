"""Typed capability protocols for nodeactions.

The engine never inspects its targets at runtime; these protocols only
document the attributes actions read and write so static type checkers can
verify callers. Any object with matching attributes satisfies them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "Node",
    "Vector2",
]

Vector2 = tuple[float, float]


@runtime_checkable
class Node(Protocol):
    """The scene-graph node contract consumed by leaf actions."""

    position: Vector2
    rotation: float
    scale: Vector2
    opacity: float
    visible: bool
