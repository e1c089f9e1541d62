# chunkrunner

A small side-scrolling platformer. The world is made of chunks of 16×16 tiles,
each tile 32 pixels square. The terrain comes from seeded Perlin noise, and the
area around the spawn point is always left clear. A background thread generates
the chunks around the player as the player moves from one chunk to another.
A knight runs and jumps while an enemy chases it. The score goes up by one with
every physics step.

## Installing

```
pip install .
```

The game uses `pygame` for the window, input and drawing.

## Playing

```
chunkrunner
chunkrunner --assets path/to/assets
chunkrunner --max-frames 600
```

- `--assets DIR`: the directory that holds the game's files. The default is
  `assets` in the working directory. The game loads
  `fonts/Orbitron/Orbitron-VariableFont_wght.ttf`,
  `textures/Graphics/ground_grass_1.png` and
  `textures/Graphics/hulking_knight - Kopie.png` from it. A file that is missing
  is logged as an error and the game runs without it. Without the grass texture
  no terrain is drawn. Without the character texture the player and the enemy
  are not drawn. Without the font there is no score text.
- `--max-frames N`: stop after `N` frames. Without it the game runs until the
  window is closed.

| Key            | Action                                          |
|----------------|-------------------------------------------------|
| `A` / `D`      | run left / right                                |
| `Space`        | jump (only while standing on something)         |
| `R`            | put player and enemy back at their start, reset the score |
| `C`            | toggle the free camera                          |
| Arrow keys     | move the free camera                            |
| `/` and `]`    | zoom out / zoom in                              |
| `F11`          | toggle fullscreen                               |

Physics runs at a fixed step of 0.01 seconds. Frames are paced to the display's
refresh rate when pygame can report it.

## Using the pieces

The simulation modules work without opening a window:

```python
from chunkrunner.geometry import Rect, CollisionSide
from chunkrunner.noise import PerlinNoise
from chunkrunner.world import World
from chunkrunner.game import chunk_origin, chunks_around

noise = PerlinNoise(seed=12345678910)
world = World()
origin = chunk_origin(600, 600)
world.load_chunk(origin, noise, 0.001, 0.01)

side = world.colliding_with_terrain(Rect(600, 600, 30, 46))
if side & CollisionSide.BOTTOM:
    print("standing on ground")

# Generate the surrounding chunks in the background.
with world:
    for coords in chunks_around(origin, 1):
        world.enqueue_chunk(coords, noise, 0.001, 0.01)
world.print_loaded_chunks()
```

- `chunkrunner.geometry`: `Vector2f`, `Rect` (with `intersects`), the
  `CollisionSide` flags, `check_collision`, `count_digit` and `move_and_collide`.
- `chunkrunner.noise`: `PerlinNoise`, a seeded gradient-noise sampler with
  `perlin(x, y)`.
- `chunkrunner.chunk`: `Chunk`, one block of tiles, with `generate_terrain` and
  `render`.
- `chunkrunner.world`: `World`, the chunk map. It has `load_chunk` for loading at
  once, and `enqueue_chunk` with `start_generation` / `stop_generation` for a
  background thread. `World` is also a context manager that starts and stops the
  thread. It also has `get_chunk`, `colliding_with_terrain`, the `chunks`
  snapshot and `print_loaded_chunks`.
- `chunkrunner.entity`: `Entity`, a position, size and texture, with `bounds`,
  `change_x` and `change_y`.
- `chunkrunner.player`, `chunkrunner.enemy`: `Player` and `Enemy` and their
  per-step `update`.
- `chunkrunner.camera`: `Camera`, which eases toward its target, stays inside the
  world and has a zoom.
- `chunkrunner.controls`: `Key` and `KeyStates`, the set of keys held down.
- `chunkrunner.render_window`: `RenderWindow`, the pygame window, and
  `RenderError`, raised when a texture, a font or text cannot be created or drawn.
- `chunkrunner.game`: `main`, `chunk_origin` and `chunks_around`.

## What it does not do

- Terrain collision looks only at the chunk that holds the top-left corner of a
  box. A box that crosses into the next chunk does not collide with that chunk's
  tiles.
- The enemy does not collide with terrain. It collides only with the player.
- There is no sound, no saving of progress and no menu. Chunks are kept in
  memory only.

## Tests

```
pip install ".[test]"
pytest
```