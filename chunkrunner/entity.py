"""A textured object with a position and a fixed size in the world."""

from __future__ import annotations

from typing import Any

from chunkrunner.geometry import Rect, Vector2f


class Entity:
    """Something placed in the world: a top-left position, a size and a texture."""

    def __init__(self, pos: Vector2f, texture: Any, width: float, height: float) -> None:
        self.x = float(pos.x)
        self.y = float(pos.y)
        self.texture = texture
        self.width = width
        self.height = height

    @property
    def pos(self) -> Vector2f:
        return Vector2f(self.x, self.y)

    @pos.setter
    def pos(self, value: Vector2f) -> None:
        self.x = float(value.x)
        self.y = float(value.y)

    @property
    def frame(self) -> Rect:
        """The region of the texture that is drawn."""
        return Rect(0.0, 0.0, self.width, self.height)

    def bounds(self) -> Rect:
        """The entity's bounding box in world coordinates."""
        return Rect(self.x, self.y, self.width, self.height)

    def change_x(self, amount: float) -> None:
        self.x += amount

    def change_y(self, amount: float) -> None:
        self.y += amount

    @staticmethod
    def _steer(
        velocity: float,
        desired: float,
        max_speed: float,
        acceleration: float,
        friction: float,
        time_step: float,
    ) -> float:
        """Move a horizontal velocity toward ``desired`` and clamp it to ``max_speed``."""
        difference = desired - velocity
        if difference > 0:
            velocity += acceleration * time_step
            if velocity < 0:
                velocity += friction * time_step
        elif difference < 0:
            velocity -= acceleration * time_step
            if velocity > 0:
                velocity -= friction * time_step
        elif velocity > 0:
            velocity = max(velocity - friction * time_step, 0.0)
        elif velocity < 0:
            velocity = min(velocity + friction * time_step, 0.0)
        return max(-max_speed, min(max_speed, velocity))