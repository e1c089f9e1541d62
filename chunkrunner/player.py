"""The player-controlled character."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from chunkrunner.chunk import TILE_SIZE
from chunkrunner.controls import Key, KeyStates
from chunkrunner.entity import Entity
from chunkrunner.geometry import CollisionSide, Terrain, Vector2f, check_collision

if TYPE_CHECKING:
    from chunkrunner.enemy import Enemy

logger = logging.getLogger(__name__)

SPAWN = Vector2f(50.0, 50.0)


class Player(Entity):
    """A character that runs, jumps, collides with terrain and stands on enemies."""

    SPEED = 200.0
    FRICTION = 500.0
    ACCELERATION = 1000.0
    JUMP_FORCE = 500.0
    GRAVITY = 980.0
    MAX_FALL_SPEED = 500.0

    def __init__(self, pos: Vector2f, texture: Any, width: float, height: float) -> None:
        super().__init__(pos, texture, width, height)
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = True
        self.score = 0

    @property
    def velocity(self) -> Vector2f:
        return Vector2f(self.vx, self.vy)

    def update(
        self,
        time_step: float,
        keys: KeyStates,
        world: Terrain,
        enemies: Iterable[Enemy],
    ) -> None:
        """Advance the player by one fixed physics step."""
        self.vy += self.GRAVITY * time_step

        desired = 0.0
        if keys.is_pressed(Key.D):
            desired = self.SPEED
        if keys.is_pressed(Key.A):
            desired = -self.SPEED

        if keys.is_pressed(Key.R):
            self.pos = SPAWN
            self.vx = 0.0
            self.vy = 0.0
            self.score = 0
            logger.info("Player position reset to: x=%g, y=%g", self.x, self.y)

        self.vx = self._steer(
            self.vx, desired, self.SPEED, self.ACCELERATION, self.FRICTION, time_step
        )
        self.vy = min(self.vy, self.MAX_FALL_SPEED)

        if keys.is_pressed(Key.SPACE) and self.on_ground:
            self.vy = -self.JUMP_FORCE
            self.on_ground = False

        self.y += self.vy * time_step
        self.x += self.vx * time_step

        self.on_ground = False
        sides = world.colliding_with_terrain(self.bounds())

        if sides & CollisionSide.BOTTOM:
            self.y = math.floor((self.y + self.height) / TILE_SIZE) * TILE_SIZE - self.height
            self.vy = 0.0
            self.on_ground = True
        elif sides & CollisionSide.TOP:
            self.y = math.ceil(self.y / TILE_SIZE) * TILE_SIZE
            self.vy = 0.0
        if sides & CollisionSide.LEFT:
            self.x = math.floor((self.x + self.width) / TILE_SIZE) * TILE_SIZE - self.width
            self.vx = 0.0
        elif sides & CollisionSide.RIGHT:
            self.x = math.ceil(self.x / TILE_SIZE) * TILE_SIZE
            self.vx = 0.0

        for enemy in enemies:
            other = enemy.bounds()
            side = check_collision(self.bounds(), other)
            if side == CollisionSide.BOTTOM:
                self.y = other.y - self.height
                self.vy = 0.0
                self.on_ground = True
            elif side == CollisionSide.TOP:
                self.y = other.bottom
                self.vy = 0.0
            elif side == CollisionSide.LEFT:
                self.x = other.x - self.width
                self.vx = 0.0
            elif side == CollisionSide.RIGHT:
                self.x = other.right
                self.vx = 0.0

        self.score += 1