"""
Adapters that present third-party objects as action targets.

``SpriteNode`` lets actions drive an ``arcade.Sprite`` directly:

    sprite = arcade.Sprite(":resources:images/items/star.png")
    running = attach(FadeOut(1.0) | RotateBy(90, 1.0), SpriteNode(sprite))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import arcade

    SpriteTarget = arcade.Sprite
else:
    SpriteTarget = Any

__all__ = ["SpriteNode"]

MAX_ALPHA = 255


class SpriteNode:
    """Expose an arcade sprite through the ``Node`` attribute contract.

    ``rotation`` maps to ``sprite.angle`` (degrees) and ``opacity`` in
    ``[0, 1]`` maps to ``sprite.alpha`` in ``[0, 255]``. Scale is always read
    back as an ``(x, y)`` tuple.
    """

    def __init__(self, sprite: SpriteTarget):
        self.sprite = sprite

    @property
    def position(self) -> tuple[float, float]:
        x, y = self.sprite.position
        return (x, y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.sprite.position = (value[0], value[1])

    @property
    def rotation(self) -> float:
        return self.sprite.angle

    @rotation.setter
    def rotation(self, value: float) -> None:
        self.sprite.angle = value

    @property
    def scale(self) -> tuple[float, float]:
        scale = self.sprite.scale
        try:
            x, y = scale
        except TypeError:
            # Older arcade releases report a single uniform float.
            x = y = scale
        return (x, y)

    @scale.setter
    def scale(self, value: float | tuple[float, float]) -> None:
        self.sprite.scale = value

    @property
    def opacity(self) -> float:
        return self.sprite.alpha / MAX_ALPHA

    @opacity.setter
    def opacity(self, value: float) -> None:
        self.sprite.alpha = int(round(min(1.0, max(0.0, value)) * MAX_ALPHA))

    @property
    def visible(self) -> bool:
        return bool(self.sprite.visible)

    @visible.setter
    def visible(self, value: bool) -> None:
        self.sprite.visible = value

    def __repr__(self) -> str:
        return f"SpriteNode({type(self.sprite).__name__})"
