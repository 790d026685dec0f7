# celroll

Game logic for a 3D rolling-ball platformer, kept free of any windowing or
graphics library. Matrices are `numpy` arrays indexed `[row, column]`;
vectors are four-element arrays `(x, y, z, w)` where `w` is 0 for directions
and 1 for points.

## Modules

- `celroll.matrix` – 4×4 helpers: `matrix` (16 values, row by row),
  `identity_matrix`, `translate_matrix`, `scale_matrix`, `rotate_x_matrix`,
  `rotate_y_matrix`, `rotate_z_matrix`, `transpose_homogeneous` (transposes
  only the upper-left 3×3 block), `orthographic_matrix` and
  `perspective_matrix` (for a camera looking down −z, with negative near and
  far planes).
- `celroll.vector` – `norm`, `normalize`, `cross_product` (result has
  `w = 0`) and `dot_product`, which raises `ValueError` when either argument
  is a point.
- `celroll.debug` – `format_matrix`, `format_vec`, `print_matrix` and
  `print_vec` for plain-text dumps, to standard output or any text file.
- `celroll.rotation` – the `Quaternion` dataclass (`identity`,
  `from_angle_axis`, multiplication, `normalized`, `rotate`, `to_matrix`),
  `slerp`, and `InterpolatedTransform`, which blends a transform's previous
  and current position and rotation and builds the model matrix from them.
- `celroll.input` – `Action`, `Key`, `KeyAction`, `MouseButton`,
  `InputObserver` and `InputHandler`. The handler keeps W/A/S/D held state and
  reports it on `process_input`, sends Space/P/E presses as `JUMP`, `PAUSE`
  and `EAGLE_VIEW`, and forwards cursor movement while the left button is
  held. Only observers with `input_enabled` set receive events.
- `celroll.components` – `ComponentType`, `ObjectType`, `Component` and the
  abstract `GameObject`, which holds one component per type, saves the
  transform state and steps gravity, rigid-body and animation components on
  `update_physics`.
- `celroll.renderer` – the `Renderer` component: interpolates the transform,
  sets the `model` matrix and custom float / vec3 properties on
  `material.shader`, then calls `mesh.draw(material)`.
- `celroll.gamestate` – `GameState`, the pause / eagle-view toggle that
  switches input between the player, the player camera and the free camera.
- `celroll.game` – `Game`, a loop that runs physics in fixed steps of
  `PHYSICS_TIME_STEP` (1/60 s) and renders with the leftover time as the
  interpolation factor. The scene is any object matching `SceneLike`; the
  clock can be replaced for tests.
- `celroll.camera` – `Camera`, a free-flying camera steered by yaw and pitch
  (pitch clamped to ±89°) that orbits a target after `set_target`, with
  `view_matrix` for rendering.
- `celroll.platform` – `Platform`, `IcePlatform` and `JumpPlatform` with their
  friction, bounciness and `PlatformType`.
- `celroll.player` – `Player`, the ball steered relative to the camera, which
  jumps off the surface it stands on, bounces and slides on platforms, rolls
  visibly, and respawns at `PLAYER_SPAWN_POINT` after touching a death box or
  a star.

## Installation

```
pip install .
```

## Example

```python
import math

from celroll.matrix import perspective_matrix, translate_matrix
from celroll.rotation import Quaternion
from celroll.vector import cross_product, normalize

projection = perspective_matrix(math.radians(80.0), 4 / 3, -0.1, -1000.0)
model = translate_matrix(1.0, 2.0, 3.0) @ Quaternion.from_angle_axis(
    math.radians(90.0), (0.0, 1.0, 0.0)
).to_matrix()

right = normalize(cross_product((0.0, 0.0, -1.0, 0.0), (0.0, 1.0, 0.0, 0.0)))
```

## What it does not do

celroll opens no window, draws nothing and loads no files. Meshes, materials
and shaders are objects you pass in: a `Renderer` only calls
`material.shader.set_mat4` / `set_float` / `set_vec3` and `mesh.draw`.
There is no ready-made scene, no collision detection, and no rigid-body,
gravity or animation component: `Game` drives a scene you supply, and
`Player` expects the transform, rigid body, gravity and optional respawn
animation to be given to it.

## Running the tests

```
pip install .[test]
pytest
```