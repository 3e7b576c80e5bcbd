# voxelplanet

The simulation side of a voxel planet game: a 256³ world holding a
cube-rounded planet with caves, a first-person camera that re-orients
itself as the player walks around the planet, survival and free-flight
("god") movement with collision against the terrain, and the tools the
player uses to place and dig voxels.

## Modules

- `voxelplanet.vecmath` – 3-vector helpers on plain tuples:
  `dot`, `cross`, `length`, `normalize_or_zero`, `slerp`, `rotate_vector`.
- `voxelplanet.camera` – `Camera`, holding `pos`, `local_forward`, `up`
  and `pitch`, with `mouse_move(dx, dy, is_god_mode)`, `reorient(new_up)`,
  `front()` and `right()`. Pitch is clamped to ±1.55 radians.
- `voxelplanet.modes` – the `GameMode` (`GOD`, `NORMAL`), `Weapon`
  (`CREATOR`, `PLASMA`, `BAZOOKA`) and `Key` enumerations.
- `voxelplanet.terrain` – `noise_3d(x, y, z)` value noise and
  `is_voxel_solid(x, y, z)`, the procedural definition of the planet
  centred at (128, 128, 128).
- `voxelplanet.physics` – `update_god_mode(player, dt)`,
  `update_survival(player, dt)`, `is_colliding(player, test_pos)` and
  `handle_shooting(player)`.
- `voxelplanet.player` – `Player`, which takes input through
  `handle_keyboard(key, pressed)`, `handle_mouse_click(pressed)` and
  `handle_mouse_move(dx, dy)`, advances with `update(dt)`, and reports the
  current action code with `shader_action()`.
- `voxelplanet.gpu_layout` – the `Uniforms` and `Projectile` dataclasses,
  whose `pack()` returns their little-endian byte layout, and
  `empty_projectiles(count=64)`.
- `voxelplanet.engine` – `State`, the per-frame driver. `update()` caps
  the frame time at 0.05 s, eases the time of day towards day (0) or night
  (π), refreshes `title` with frame rate, CPU load (via psutil), mode and
  equipment every half second, advances the player and returns the
  `Uniforms` for the frame. The clock is injectable for testing.

## Controls

`Player.handle_keyboard` understands these keys on press:

| Key | Effect |
| --- | --- |
| `Key.G` | toggle god mode |
| `Key.F` | toggle flashlight |
| `Key.N` | toggle day/night |
| `Key.DIGIT1`–`Key.DIGIT4` | creator with material 1, 2, 3 or 5 |
| `Key.DIGIT5` | plasma (digs) |
| `Key.DIGIT6` | bazooka |

`W`/`A`/`S`/`D` move while held; `E`/`Q` rise and sink in god mode;
`SPACE` jumps when standing on ground.

## Example

```python
from voxelplanet.terrain import is_voxel_solid
from voxelplanet.player import Player

# The planet's core is solid rock; the world's corner is empty.
assert is_voxel_solid(128, 128, 128)
assert not is_voxel_solid(0, 0, 0)

player = Player((128.0, 220.0, 128.0))
player.handle_mouse_move(40.0, 0.0)   # turn the camera
player.handle_mouse_click(True)       # hold the trigger
for _ in range(60):
    player.update(1 / 60)             # falls towards the planet

print(player.camera.pos, player.camera.front())
print(player.shader_action())         # material id while the creator is held
```

Edits made by the player are kept in `player.world_edits`, a mapping from
integer voxel coordinates to a material id (0 is air). They take
precedence over the generated terrain when collisions are tested; air and
water (2) do not block movement.

## What this package does not do

It has no renderer, window, event loop or GPU code, and no command to run.
It produces the state a renderer would need each frame — camera position
and orientation, time of day, action code and byte layouts for the uniform
block and projectile table — but drawing the world, simulating fluids and
projectiles on the GPU, and reading real keyboard and mouse input are left
to the caller.

## Tests

The test suite uses pytest and is installed with the `test` extra.