"""The game window: textures, fonts, entity and text drawing."""

from __future__ import annotations

import logging
import math
from typing import Any

import pygame

from chunkrunner.entity import Entity

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)


class RenderError(RuntimeError):
    """Raised when a window resource cannot be created or drawn."""


class RenderWindow:
    """A resizable window that draws entities and text through a camera."""

    def __init__(self, title: str, width: int, height: int) -> None:
        pygame.display.init()
        try:
            pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            raise RenderError(f"Window failed to init: {exc}") from exc
        pygame.display.set_caption(title)

    @property
    def is_open(self) -> bool:
        return pygame.display.get_init() and pygame.display.get_surface() is not None

    @property
    def surface(self) -> pygame.Surface:
        """The surface everything is drawn on."""
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is None:
            raise RenderError("The window is closed")
        return surface

    @property
    def window_width(self) -> int:
        return self.surface.get_width() if self.is_open else 0

    @property
    def window_height(self) -> int:
        return self.surface.get_height() if self.is_open else 0

    def load_texture(self, path) -> pygame.Surface:
        """Load an image file as a texture with an alpha channel."""
        try:
            return pygame.image.load(path).convert_alpha()
        except (pygame.error, FileNotFoundError, OSError) as exc:
            raise RenderError(f"Failed to load texture {path}: {exc}") from exc

    def refresh_rate(self) -> int:
        """The refresh rate of the display the window is on, or 0 if unknown."""
        if not self.is_open:
            logger.error("No open window to query the refresh rate of")
            return 0
        query = getattr(pygame.display, "get_current_refresh_rate", None)
        rate = 0
        if query is not None:
            try:
                rate = int(query())
            except pygame.error as exc:
                logger.error("Error getting display mode: %s", exc)
                return 0
        if rate <= 0:
            logger.warning("Could not retrieve a valid refresh rate (received %d)", rate)
            return 0
        return rate

    def clean_up(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def render(self, entity: Entity, camera: Any) -> None:
        """Draw the entity's texture, placed and scaled by the camera."""
        texture = entity.texture
        if texture is None:
            return
        frame = entity.frame
        source_rect = pygame.Rect(0, 0, int(frame.w), int(frame.h)).clip(texture.get_rect())
        if source_rect.width <= 0 or source_rect.height <= 0:
            return
        size = (round(frame.w * camera.zoom), round(frame.h * camera.zoom))
        if size[0] <= 0 or size[1] <= 0:
            return
        image = pygame.transform.scale(texture.subsurface(source_rect), size)
        screen_x = (entity.x - camera.position.x) * camera.zoom
        screen_y = (entity.y - camera.position.y) * camera.zoom
        self.surface.blit(image, (math.floor(screen_x), math.floor(screen_y)))

    def render_text(
        self, texture: pygame.Surface | None, x: float, y: float, w: float, h: float
    ) -> None:
        """Draw the top-left ``w`` by ``h`` region of a text texture at (x, y)."""
        if texture is None or not self.is_open:
            raise RenderError("Renderer or texture is missing for text rendering")
        area = pygame.Rect(0, 0, int(w), int(h))
        self.surface.blit(texture, (math.floor(x), math.floor(y)), area)

    def display(self) -> None:
        pygame.display.flip()

    def load_font(self, path, size: int) -> pygame.font.Font:
        """Open a font file; ``None`` gives the default font."""
        pygame.font.init()
        try:
            return pygame.font.Font(path, size)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            raise RenderError(f"Failed to load font {path}: {exc}") from exc

    def create_text_texture(
        self, font: pygame.font.Font | None, text: str | None, color
    ) -> pygame.Surface:
        """Render ``text`` without anti-aliasing into a new texture."""
        if font is None or text is None or not self.is_open:
            raise RenderError("Invalid parameters for text texture creation")
        try:
            return font.render(text, False, color)
        except pygame.error as exc:
            raise RenderError(f"Failed to create text texture: {exc}") from exc