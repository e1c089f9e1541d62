"""An enemy that chases the player."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chunkrunner.controls import Key, KeyStates
from chunkrunner.entity import Entity
from chunkrunner.geometry import CollisionSide, Terrain, Vector2f, check_collision

if TYPE_CHECKING:
    from chunkrunner.player import Player

SPAWN = Vector2f(100.0, 200.0)
CARRY_MARGIN = 5.0


class Enemy(Entity):
    """A character that runs toward the player and jumps when the player is above."""

    SPEED = 150.0
    FRICTION = 500.0
    ACCELERATION = 700.0
    JUMP_FORCE = 400.0
    GRAVITY = 980.0
    MAX_FALL_SPEED = 500.0

    def __init__(self, pos: Vector2f, texture: Any, width: float, height: float) -> None:
        super().__init__(pos, texture, width, height)
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = True

    @property
    def velocity(self) -> Vector2f:
        return Vector2f(self.vx, self.vy)

    def update(
        self,
        time_step: float,
        keys: KeyStates,
        world: Terrain,
        player: Player,
    ) -> None:
        """Advance the enemy by one fixed physics step.

        Terrain is not consulted; the enemy only collides with the player.
        """
        self.vy += self.GRAVITY * time_step

        desired = 0.0
        if player.x > self.x:
            desired = self.SPEED
        elif player.x < self.x:
            desired = -self.SPEED
        if player.y < self.y and self.on_ground:
            self.vy = -self.JUMP_FORCE
            self.on_ground = False

        if keys.is_pressed(Key.R):
            self.pos = SPAWN
            self.vx = 0.0
            self.vy = 0.0

        self.vx = self._steer(
            self.vx, desired, self.SPEED, self.ACCELERATION, self.FRICTION, time_step
        )
        self.vy = min(self.vy, self.MAX_FALL_SPEED)

        self.on_ground = False
        self.x += self.vx * time_step
        self.y += self.vy * time_step

        player_box = player.bounds()
        side = check_collision(self.bounds(), player_box)
        if side == CollisionSide.NONE:
            return

        if player.y + player.height <= self.y + CARRY_MARGIN:
            player.change_x(-self.vx * time_step)
            player.on_ground = True
        elif side == CollisionSide.BOTTOM:
            self.y = player_box.y - self.height
            self.vy = 0.0
            self.on_ground = True
        elif side == CollisionSide.TOP:
            self.y = player_box.bottom
            self.vy = 0.0
        elif side == CollisionSide.LEFT:
            self.x = player_box.x - self.width
            self.vx = 0.0
        elif side == CollisionSide.RIGHT:
            self.x = player_box.right
            self.vx = 0.0