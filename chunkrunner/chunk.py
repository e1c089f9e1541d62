"""A square block of tiles whose terrain is generated from noise."""

from __future__ import annotations

import math

import pygame

from chunkrunner.geometry import Vector2f
from chunkrunner.noise import PerlinNoise

TILE_SIZE = 32
CHUNK_TILES = 16
CHUNK_PIXELS = CHUNK_TILES * TILE_SIZE

EMPTY = 0
SOLID = 1

SPAWN_POINT = Vector2f(50.0, 50.0)
SPAWN_CLEAR_RADIUS = 512.0


class Chunk:
    """A grid of tiles anchored at ``coords`` in world pixels."""

    def __init__(
        self,
        coords: Vector2f = Vector2f(),
        width: int = CHUNK_PIXELS,
        height: int = CHUNK_PIXELS,
    ) -> None:
        self.coords = coords
        self.width = width
        self.height = height
        self.tile_data: list[list[int]] = [
            [EMPTY] * (width // TILE_SIZE) for _ in range(height // TILE_SIZE)
        ]

    def _tile_origin(self, tile_x: int, tile_y: int) -> tuple[float, float]:
        return (self.coords.x + tile_x * TILE_SIZE, self.coords.y + tile_y * TILE_SIZE)

    def generate_terrain(self, noise: PerlinNoise, scale: float, threshold: float) -> None:
        """Fill the tiles: solid where noise exceeds ``threshold``, empty near spawn."""
        for tile_y, row in enumerate(self.tile_data):
            for tile_x in range(len(row)):
                world_x, world_y = self._tile_origin(tile_x, tile_y)
                distance = math.hypot(world_x + SPAWN_POINT.x, world_y + SPAWN_POINT.y)
                if distance < SPAWN_CLEAR_RADIUS:
                    row[tile_x] = EMPTY
                else:
                    value = noise.perlin(world_x * scale, world_y * scale)
                    row[tile_x] = SOLID if value > threshold else EMPTY

    def render(self, surface: pygame.Surface, camera, texture: pygame.Surface) -> None:
        """Draw every solid tile onto ``surface`` relative to the camera.

        ``camera`` provides ``position`` (a Vector2f) and ``zoom``.
        """
        size = round(TILE_SIZE * camera.zoom)
        if size <= 0:
            return
        scaled = pygame.transform.scale(texture, (size, size))
        origin = camera.position
        for tile_y, row in enumerate(self.tile_data):
            for tile_x, tile in enumerate(row):
                if tile != SOLID:
                    continue
                world_x, world_y = self._tile_origin(tile_x, tile_y)
                screen_x = (world_x - origin.x) * camera.zoom
                screen_y = (world_y - origin.y) * camera.zoom
                surface.blit(scaled, (math.floor(screen_x), math.floor(screen_y)))