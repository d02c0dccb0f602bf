"""
Runtime configuration for debug output and lifecycle checking.

Usage:
    from nodeactions.config import set_debug_options, observe_actions

    set_debug_options(level=2)          # lifecycle messages
    observe_actions(MoveBy, "Blink")    # only for these classes

    # Or from the environment:
    # NODEACTIONS_DEBUG=2 NODEACTIONS_DEBUG_INCLUDE=MoveBy,Blink python game.py
    configure_from_environment()
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any

from .base import Action
from .errors import InvalidArgument

__all__ = [
    "set_debug_options",
    "get_debug_options",
    "observe_actions",
    "clear_observed_actions",
    "set_strict_lifecycle",
    "configure_from_environment",
]

ENV_DEBUG_LEVEL = "NODEACTIONS_DEBUG"
ENV_DEBUG_ALL = "NODEACTIONS_DEBUG_ALL"
ENV_DEBUG_INCLUDE = "NODEACTIONS_DEBUG_INCLUDE"
ENV_STRICT = "NODEACTIONS_STRICT"


def _class_name(item: type | str) -> str:
    if isinstance(item, str):
        return item
    return item.__name__


def set_debug_options(
    level: int | None = None,
    include_all: bool | None = None,
    include: Iterable[type | str] | None = None,
) -> None:
    """Configure debug logging.

    Args:
        level: 0 disables output, 1 reports ignored calls, 2 adds lifecycle
            messages, 3 adds per-step detail.
        include_all: Log every action class regardless of the include filter.
        include: Action classes (or class names) to log. ``None`` clears the
            filter.
    """
    if level is not None:
        if level < 0:
            raise InvalidArgument(f"debug level must be >= 0, got {level}")
        Action.debug_level = level
    if include_all is not None:
        Action.debug_all = include_all
    Action.debug_include_classes = {_class_name(item) for item in include} if include is not None else None


def get_debug_options() -> dict[str, Any]:
    """Return the current debug configuration."""
    include = Action.debug_include_classes
    return {
        "level": Action.debug_level,
        "include_all": Action.debug_all,
        "include": set(include) if include is not None else None,
        "strict": Action.strict_lifecycle,
    }


def observe_actions(*classes: type | str) -> None:
    """Add action classes to the debug include filter."""
    names = {_class_name(item) for item in classes}
    if Action.debug_include_classes is None:
        Action.debug_include_classes = names
    else:
        Action.debug_include_classes |= names


def clear_observed_actions() -> None:
    Action.debug_include_classes = None


def set_strict_lifecycle(strict: bool) -> None:
    """Raise on out-of-order lifecycle calls (True) or ignore them (False).

    When ignored, a composite child that refused to start (for example a
    ``MoveBy`` with no target) is treated as finished and skipped.
    """
    Action.strict_lifecycle = strict


def configure_from_environment(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Apply NODEACTIONS_* environment variables and return the resulting options."""
    env = os.environ if environ is None else environ

    raw_level = env.get(ENV_DEBUG_LEVEL)
    if raw_level:
        try:
            level = int(raw_level)
        except ValueError:
            raise InvalidArgument(f"{ENV_DEBUG_LEVEL} must be an integer, got {raw_level!r}") from None
        if level < 0:
            raise InvalidArgument(f"{ENV_DEBUG_LEVEL} must be >= 0, got {level}")
        Action.debug_level = level

    if env.get(ENV_DEBUG_ALL) == "1":
        Action.debug_all = True

    raw_include = env.get(ENV_DEBUG_INCLUDE)
    if raw_include:
        observe_actions(*(name.strip() for name in raw_include.split(",") if name.strip()))

    raw_strict = env.get(ENV_STRICT)
    if raw_strict is not None:
        if raw_strict not in ("0", "1"):
            raise InvalidArgument(f"{ENV_STRICT} must be '0' or '1', got {raw_strict!r}")
        Action.strict_lifecycle = raw_strict == "1"

    return get_debug_options()
