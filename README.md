# quadsim

Headless models for small 2D games. Nothing in this package draws to a
screen. Each model keeps its state in plain Python objects and moves it
forward one step at a time, so you can drive it from any renderer or from
tests.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `quadsim.geometry`: the immutable `Vec2`, which supports `+`, `-`, scalar
  `*` and `/`, negation, `length()`, `normalize()` and `rotated(angle)`. It
  also has `Rect`, with `overlaps()` and `contains()`, and
  `round_half_away(value)`.
- `quadsim.keys`: the `Key` enum and `InputState`, which tracks held keys
  through `press`, `release` and `is_down`. `ArrowBall` is a point moved by
  the arrow keys.
- `quadsim.platformer`: a pixel-precise platformer physics `World`. It has
  static tile layers made of `Tile` values (`EMPTY`, `SOLID`, `JUMP_THROUGH`,
  `COLLIDER`), `Actor`s that move with `move_h` and `move_v`, and `Solid`
  platforms that carry riders and push actors, marking them `squished` when
  they are blocked. Jump-through tiles let an actor pass upwards, and after
  `descent()` they let it fall through too.
- `quadsim.particle_config`: configuration types for a particle emitter.
  These are `EmitterConfig`, `Curve` and `BatchedCurve` for size over a
  particle's life, `Color` and `ColorCurve`, the emission shapes
  (`EmissionPoint`, `EmissionRect`, `EmissionSphere`) and the particle meshes
  (`RectangleShape`, `CircleShape`, `CustomMeshShape`). It also has
  `BlendMode` with its `BlendState`, `AtlasConfig` for sprite-sheet frames,
  `ParticleMaterial` and `PostProcessing`.
- `quadsim.presets`: the ready-made configurations `explosion()`, `smoke()`,
  `fire()` and `fountain()`.
- Game logic:
  - `snake.SnakeGame`: a grid snake driven by wall-clock time.
  - `arkanoid.Arkanoid`: a paddle, a ball and a wall of blocks in a 20x20
    world.
  - `asteroids.AsteroidsGame`: a ship, bullets and splitting asteroids on a
    wrapping screen.
  - `rustaceanmark.Rustaceanmark`: many sprites bouncing off the screen edges.
- View helpers:
  - `angles.short_angle_dist`, `angles.angle_lerp` and
    `angles.CameraControls`, which handles pan, zoom and smoothed rotation,
    with status lines from `describe()`.
  - `letterbox.letterbox_scale`, `letterbox_origin` and `virtual_mouse`, for
    fitting a fixed virtual screen into a window.
- UI state:
  - `inventory.Fitting`: inventory items and equipment slots, with `Fit`,
    `Unfit` and `Refit` commands raised by drag-and-drop.
  - `shadertoy.ShaderEditor`: shader sources and typed uniforms, with
    `color_picker_image` and `pick_color` for choosing colours.
  - `exit_dialog.ExitDialog`: a confirm-before-quit dialog, placed with
    `dialog_position`.

## Example: platformer world

```python
from quadsim.geometry import Vec2
from quadsim.platformer import Tile, World

world = World()
# A layer 4 tiles wide and 3 tiles high, with 8x8 tiles and tag 1.
# The bottom row is solid ground.
world.add_static_tiled_layer(
    [Tile.EMPTY] * 8 + [Tile.SOLID] * 4, 8.0, 8.0, 4, 1
)
player = world.add_actor(Vec2(0.0, 0.0), 8, 8)

print(world.move_v(player, 20.0))   # False: it landed on the ground
print(world.actor_pos(player))      # Vec2(x=0.0, y=8.0)
```

## Example: particle configuration

```python
from quadsim.presets import smoke

config = smoke()
print(config.amount, config.lifetime)   # 20 0.8
print(config.atlas.frame_uv(5))         # (0.25, 0.25, 0.25, 0.25)
```

## Example: input-driven models

Models that react to keys take an `InputState`:

```python
from quadsim.keys import ArrowBall, InputState, Key

keys = InputState()
keys.press(Key.RIGHT)
ball = ArrowBall(x=100.0, y=100.0)
ball.step(keys)
print(ball.x)   # 101.0
```

## What it does not do

- It renders nothing and reads no real keyboard, mouse or window. You have to
  feed it input as `InputState` values and plain numbers, and draw its state
  yourself.
- The particle types describe emitters, but nothing in the package spawns or
  moves particles.
- There is no Game of Life model and no first-person 3D camera.
- No commands are installed. The package is a library only.