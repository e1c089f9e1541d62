"""The world: a map of chunks, terrain collision and background generation."""

from __future__ import annotations

import logging
import math
import threading
from collections import deque

from chunkrunner.chunk import CHUNK_PIXELS, SOLID, TILE_SIZE, Chunk
from chunkrunner.geometry import CollisionSide, Rect, Vector2f, check_collision
from chunkrunner.noise import PerlinNoise

logger = logging.getLogger(__name__)


class World:
    """Chunks keyed by their world origin, generated on demand or in a worker thread."""

    def __init__(self) -> None:
        self._chunks: dict[Vector2f, Chunk] = {}
        self._queue: deque[tuple[Vector2f, PerlinNoise, float, float]] = deque()
        self._condition = threading.Condition()
        self._stopping = False
        self._thread: threading.Thread | None = None

    def __enter__(self) -> World:
        self.start_generation()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop_generation()

    @property
    def chunks(self) -> dict[Vector2f, Chunk]:
        """A snapshot of the loaded chunks, ordered by coordinates."""
        with self._condition:
            return dict(sorted(self._chunks.items()))

    def _store(self, coords: Vector2f, noise: PerlinNoise, scale: float, threshold: float) -> None:
        with self._condition:
            if coords in self._chunks:
                return
        chunk = Chunk(coords)
        chunk.generate_terrain(noise, scale, threshold)
        with self._condition:
            self._chunks.setdefault(coords, chunk)

    def load_chunk(
        self, coords: Vector2f, noise: PerlinNoise, scale: float, threshold: float
    ) -> None:
        """Generate and store the chunk at ``coords`` unless it is already loaded."""
        self._store(coords, noise, scale, threshold)

    def enqueue_chunk(
        self, coords: Vector2f, noise: PerlinNoise, scale: float, threshold: float
    ) -> None:
        """Queue a chunk for the background worker to generate."""
        with self._condition:
            self._queue.append((coords, noise, scale, threshold))
            self._condition.notify()

    def get_chunk(self, coords: Vector2f) -> Chunk | None:
        with self._condition:
            return self._chunks.get(coords)

    def colliding_with_terrain(self, rect: Rect) -> CollisionSide:
        """Return the combined collision sides of ``rect`` against solid tiles.

        Only the chunk containing the rectangle's top-left corner is examined.
        """
        origin = Vector2f(
            math.floor(rect.x / CHUNK_PIXELS) * CHUNK_PIXELS,
            math.floor(rect.y / CHUNK_PIXELS) * CHUNK_PIXELS,
        )
        chunk = self.get_chunk(origin)
        if chunk is None:
            return CollisionSide.NONE

        result = CollisionSide.NONE
        for tile_y, row in enumerate(chunk.tile_data):
            for tile_x, tile in enumerate(row):
                if tile != SOLID:
                    continue
                tile_rect = Rect(
                    origin.x + tile_x * TILE_SIZE,
                    origin.y + tile_y * TILE_SIZE,
                    TILE_SIZE,
                    TILE_SIZE,
                )
                if rect.intersects(tile_rect):
                    logger.debug("Collision with tile at (%d, %d)", tile_x, tile_y)
                    result |= check_collision(rect, tile_rect)
        return result

    def print_loaded_chunks(self) -> None:
        print("Loaded chunks:")
        for coords in self.chunks:
            print(f"Chunk at x={coords.x:g}, y={coords.y:g}")

    def _worker(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._queue or self._stopping)
                if self._stopping and not self._queue:
                    return
                request = self._queue.popleft()
            self._store(*request)

    def start_generation(self) -> None:
        """Start the background chunk generation thread."""
        with self._condition:
            self._stopping = False
        self._thread = threading.Thread(target=self._worker, name="chunk-generation", daemon=True)
        self._thread.start()

    def stop_generation(self) -> None:
        """Finish the queued work and stop the background thread."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        if self._thread is not None:
            self._thread.join()
            self._thread = None