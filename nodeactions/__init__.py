"""
nodeactions - composable, frame-stepped actions for scene-graph nodes.

Actions available:
- Instant: Place, CallFunction, CallFunctionWithTarget, Hide, Show, ToggleVisibility
- Interval: MoveBy, MoveTo, RotateBy, RotateTo, ScaleBy, ScaleTo, FadeTo,
  FadeIn, FadeOut, Blink, Delay, RandomDelay
- Generic: ChangeAttributeTo, ChangeAttributeBy with an Attribute strategy
- Re-timing: Speed, Accelerate, AccelDeccel, Ease
- Composition: Sequence, Spawn, Repeat, Loop and the sequence(), spawn(),
  parallel(), repeat(), loop() builders (or the + and | operators)
"""

# Core classes
from .base import Action, InstantAction, IntervalAction, attach

# Generic attribute actions
from .attributes import (
    OPACITY,
    POSITION,
    ROTATION,
    SCALE,
    VISIBILITY,
    Attribute,
    ChangeAttributeBy,
    ChangeAttributeTo,
)

# Composition
from .composite import Loop, Repeat, Sequence, Spawn, loop, parallel, repeat, sequence, spawn

# Configuration
from .config import (
    clear_observed_actions,
    configure_from_environment,
    get_debug_options,
    observe_actions,
    set_debug_options,
    set_strict_lifecycle,
)

# Re-timing wrappers
from .easing import AccelDeccel, Accelerate, Ease, Speed

# Errors
from .errors import ActionError, InvalidArgument, PreconditionViolation, UnsupportedOperation

# Instant actions
from .instant import CallFunction, CallFunctionWithTarget, Hide, Place, Show, ToggleVisibility

# Interval actions
from .interval import (
    Blink,
    Delay,
    FadeIn,
    FadeOut,
    FadeTo,
    MoveBy,
    MoveTo,
    RandomDelay,
    RotateBy,
    RotateTo,
    ScaleBy,
    ScaleTo,
)
from .protocols import Node
from .targets import SpriteNode

__all__ = [
    # Core classes
    "Action",
    "InstantAction",
    "IntervalAction",
    "attach",
    "Node",
    "SpriteNode",
    # Attributes
    "Attribute",
    "POSITION",
    "ROTATION",
    "SCALE",
    "OPACITY",
    "VISIBILITY",
    "ChangeAttributeTo",
    "ChangeAttributeBy",
    # Instant actions
    "Place",
    "CallFunction",
    "CallFunctionWithTarget",
    "Hide",
    "Show",
    "ToggleVisibility",
    # Interval actions
    "MoveBy",
    "MoveTo",
    "RotateBy",
    "RotateTo",
    "ScaleBy",
    "ScaleTo",
    "FadeTo",
    "FadeIn",
    "FadeOut",
    "Blink",
    "Delay",
    "RandomDelay",
    # Re-timing
    "Speed",
    "Accelerate",
    "AccelDeccel",
    "Ease",
    # Composition
    "Sequence",
    "Spawn",
    "Repeat",
    "Loop",
    "sequence",
    "spawn",
    "parallel",
    "repeat",
    "loop",
    # Configuration
    "set_debug_options",
    "get_debug_options",
    "observe_actions",
    "clear_observed_actions",
    "set_strict_lifecycle",
    "configure_from_environment",
    # Errors
    "ActionError",
    "InvalidArgument",
    "UnsupportedOperation",
    "PreconditionViolation",
]
