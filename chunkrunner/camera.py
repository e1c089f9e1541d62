"""A camera that smoothly follows a target and can be zoomed."""

from __future__ import annotations

from chunkrunner.controls import Key, KeyStates
from chunkrunner.geometry import Vector2f

DEFAULT_ZOOM = 2.0
ZOOM_STEP = 0.01
LERP_FACTOR = 0.08
WORLD_WIDTH = 100000
WORLD_HEIGHT = 100000


class Camera:
    """The view into the world: a top-left position and a zoom factor."""

    def __init__(self, position: Vector2f = Vector2f()) -> None:
        self.position = position
        self.zoom = DEFAULT_ZOOM
        self.free_view = False
        self.free_position = Vector2f()

    def update(
        self,
        target_x: float,
        target_y: float,
        window_height: int,
        window_width: int,
        keys: KeyStates,
    ) -> None:
        """Ease toward the target, keep inside the world and apply zoom keys."""
        horizontal_offset = int(window_width / 8)
        vertical_offset = window_height / 2.8

        goal_x = target_x - window_width / 2.0 + horizontal_offset
        goal_y = target_y - window_height / 2.0 + vertical_offset

        limit_x = WORLD_WIDTH - window_width
        limit_y = WORLD_HEIGHT - window_height

        if self.free_view:
            free_x = self.free_position.x + (goal_x - self.free_position.x) * LERP_FACTOR
            free_y = self.free_position.y + (goal_y - self.free_position.y) * LERP_FACTOR
            free_x = max(free_x, 0.0)
            free_y = max(free_y, 0.0)
            cam_x, cam_y = self.position.x, self.position.y
            # Past the world's edge the fixed view, not the free one, is pinned.
            if free_x > limit_x:
                cam_x = limit_x
            if free_y > limit_y:
                cam_y = limit_y
            self.position = Vector2f(cam_x, cam_y)
        else:
            cam_x = self.position.x + (goal_x - self.position.x) * LERP_FACTOR
            cam_y = self.position.y + (goal_y - self.position.y) * LERP_FACTOR
            cam_x = max(cam_x, 0.0)
            cam_y = max(cam_y, 0.0)
            if cam_x > limit_x:
                cam_x = limit_x
            if cam_y > limit_y:
                cam_y = limit_y
            self.position = Vector2f(cam_x, cam_y)

        if keys.is_pressed(Key.SLASH):
            self.zoom -= ZOOM_STEP
        if keys.is_pressed(Key.RIGHT_BRACKET):
            self.zoom += ZOOM_STEP

        self.free_position = Vector2f(target_x, target_y)