"""The game loop: input, fixed-step physics, chunk streaming and drawing."""

from __future__ import annotations

import argparse
import logging
import math
from collections.abc import Iterator
from pathlib import Path

import pygame

from chunkrunner.camera import Camera
from chunkrunner.chunk import CHUNK_PIXELS
from chunkrunner.controls import Key, KeyStates
from chunkrunner.enemy import Enemy
from chunkrunner.geometry import Vector2f, count_digit
from chunkrunner.noise import PerlinNoise
from chunkrunner.player import Player
from chunkrunner.render_window import RenderError, RenderWindow
from chunkrunner.world import World

logger = logging.getLogger(__name__)

TITLE = "Game v1.0"
WINDOW_SIZE = (1280, 720)
TIME_STEP = 0.01
FREE_CAMERA_SPEED = 1000.0
NOISE_SEED = 12345678910
NOISE_SCALE = 0.001
NOISE_THRESHOLD = 0.01
LOAD_RADIUS = 10
CHUNK_LOAD_COOLDOWN = 1
TEXT_COLOR = (255, 255, 255, 255)
TEXT_POSITION = (10.0, 10.0)
FONT_SIZE = 30
PLAYER_START = Vector2f(50.0, 50.0)
ENEMY_START = Vector2f(100.0, 200.0)
CHARACTER_SIZE = (30, 46)

FONT_PATH = Path("fonts/Orbitron/Orbitron-VariableFont_wght.ttf")
GRASS_PATH = Path("textures/Graphics/ground_grass_1.png")
CHARACTER_PATH = Path("textures/Graphics/hulking_knight - Kopie.png")

_KEYMAP = {
    pygame.K_a: Key.A,
    pygame.K_c: Key.C,
    pygame.K_d: Key.D,
    pygame.K_r: Key.R,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SLASH: Key.SLASH,
    pygame.K_RIGHTBRACKET: Key.RIGHT_BRACKET,
    pygame.K_F11: Key.F11,
}


def chunk_origin(x: float, y: float) -> Vector2f:
    """The origin of the chunk that contains the world point (x, y)."""
    return Vector2f(
        math.floor(x / CHUNK_PIXELS) * CHUNK_PIXELS,
        math.floor(y / CHUNK_PIXELS) * CHUNK_PIXELS,
    )


def chunks_around(center: Vector2f, radius: int) -> Iterator[Vector2f]:
    """Chunk origins in a square of ``radius`` chunks around ``center``, row by row."""
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            yield Vector2f(center.x + dx * CHUNK_PIXELS, center.y + dy * CHUNK_PIXELS)


def _score_text(score: int) -> str:
    return f"Score: {score}"[: count_digit(score) + 7]


def _load_optional(loader, *args):
    try:
        return loader(*args)
    except RenderError as exc:
        logger.error("%s", exc)
        return None


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="chunkrunner", description="A chunked platformer.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="assets directory")
    parser.add_argument(
        "--max-frames", type=int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def _seconds() -> float:
    return pygame.time.get_ticks() * 0.001


def main(argv=None) -> int:
    """Run the game until the window is closed."""
    args = _parse_args(argv)

    window = RenderWindow(TITLE, *WINDOW_SIZE)
    pygame.font.init()
    fullscreen = False

    world = World()
    world.start_generation()
    try:
        font = _load_optional(window.load_font, str(args.assets / FONT_PATH), FONT_SIZE)
        score_texture = None
        last_score = -1

        grass = _load_optional(window.load_texture, str(args.assets / GRASS_PATH))
        character = _load_optional(window.load_texture, str(args.assets / CHARACTER_PATH))

        player = Player(PLAYER_START, character, *CHARACTER_SIZE)
        keys = KeyStates()
        enemies = [Enemy(ENEMY_START, character, *CHARACTER_SIZE)]
        camera = Camera(player.pos)

        accumulator = 0.0
        current_time = _seconds()

        noise = PerlinNoise(seed=NOISE_SEED)
        last_chunk = chunk_origin(PLAYER_START.x, PLAYER_START.y)
        world.load_chunk(last_chunk, noise, NOISE_SCALE, NOISE_THRESHOLD)
        cooldown = 0

        frames = 0
        running = True
        while running:
            player_chunk = chunk_origin(player.x, player.y)
            if cooldown <= 0:
                if player_chunk != last_chunk:
                    for coords in chunks_around(player_chunk, LOAD_RADIUS):
                        world.enqueue_chunk(coords, noise, NOISE_SCALE, NOISE_THRESHOLD)
                    last_chunk = player_chunk
                cooldown = CHUNK_LOAD_COOLDOWN
            else:
                cooldown -= 1

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    fullscreen = not fullscreen
                    try:
                        pygame.display.toggle_fullscreen()
                    except pygame.error as exc:
                        logger.error("Could not toggle fullscreen: %s", exc)

                key = _KEYMAP.get(getattr(event, "key", None))
                if event.type == pygame.KEYUP and key is not None:
                    keys.release(key)
                if event.type == pygame.KEYDOWN and key is not None:
                    keys.press(key)
                if event.type == pygame.KEYDOWN and key is Key.C:
                    camera.free_view = not camera.free_view
                    if camera.free_view:
                        camera.free_position = camera.position

            start_ticks = pygame.time.get_ticks()
            new_time = _seconds()
            accumulator += new_time - current_time
            current_time = new_time

            while accumulator >= TIME_STEP:
                if camera.free_view:
                    step = FREE_CAMERA_SPEED * TIME_STEP
                    cam_x, cam_y = camera.position.x, camera.position.y
                    if keys.is_pressed(Key.UP):
                        cam_y -= step
                    if keys.is_pressed(Key.DOWN):
                        cam_y += step
                    if keys.is_pressed(Key.RIGHT):
                        cam_x += step
                    if keys.is_pressed(Key.LEFT):
                        cam_x -= step
                    camera.position = Vector2f(cam_x, cam_y)

                target = camera.free_position if camera.free_view else player.pos
                # Width and height go in this order on purpose: it fixes the framing.
                camera.update(
                    target.x, target.y, window.window_width, window.window_height, keys
                )

                for enemy in enemies:
                    enemy.update(TIME_STEP, keys, world, player)
                player.update(TIME_STEP, keys, world, enemies)
                accumulator -= TIME_STEP

            if player.score != last_score:
                score_texture = None
                if font is not None:
                    try:
                        score_texture = window.create_text_texture(
                            font, _score_text(player.score), TEXT_COLOR
                        )
                    except RenderError:
                        logger.warning("Failed to re-create score text texture")
            last_score = player.score

            window.clear()
            left = camera.position.x
            right = camera.position.x + window.window_width
            top = camera.position.y
            bottom = camera.position.y + window.window_height
            reach = CHUNK_PIXELS * 16
            for coords, chunk in world.chunks.items():
                if (
                    coords.x + reach < left
                    or coords.x > right
                    or coords.y + reach < top
                    or coords.y > bottom
                ):
                    continue
                if grass is not None:
                    chunk.render(window.surface, camera, grass)

            window.render(player, camera)
            for enemy in enemies:
                window.render(enemy, camera)

            if score_texture is not None:
                width, height = score_texture.get_size()
                window.render_text(score_texture, *TEXT_POSITION, width, height)

            window.display()

            frames += 1
            if args.max_frames is not None and frames >= args.max_frames:
                running = False

            frame_ticks = pygame.time.get_ticks() - start_ticks
            rate = window.refresh_rate()
            if rate > 0:
                target_ticks = 1000 // rate
                if frame_ticks < target_ticks:
                    pygame.time.delay(target_ticks - frame_ticks)
    finally:
        world.stop_generation()
        window.clean_up()
        pygame.font.quit()
        pygame.quit()
    return 0