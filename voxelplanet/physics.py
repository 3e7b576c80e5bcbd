"""Player movement, collision against the planet and the CPU mirror of the weapons."""

from __future__ import annotations

import math
from itertools import product
from typing import TYPE_CHECKING, Sequence

from .modes import Key, Weapon
from .terrain import PLANET_CENTER, is_voxel_solid
from .vecmath import Vec3, cross, dot, length, normalize_or_zero, slerp

if TYPE_CHECKING:
    from .player import Player

GOD_SPEED = 80.0
WALK_SPEED = 15.0
GRAVITY = 25.0
JUMP_SPEED = 10.0
GRAVITY_RANGE = 40.0 * 5.0
AXIS_BIAS = 2.0
VISUAL_UP_POWER = 2.5
VISUAL_UP_RATE = 8.0
STEP_HEIGHT = 0.1
BODY_RADIUS = 0.25
HEAD_OFFSET = 0.2
FEET_OFFSET = 1.4

AIR = 0
WATER = 2

CREATOR_DISTANCE = 10.0
CREATOR_RADIUS = 3
CREATOR_COOLDOWN = 0.15
PLASMA_FIRST_STEP = 2
PLASMA_LAST_STEP = 40
PLASMA_COOLDOWN = 0.05

_WORLD_UP: Vec3 = (0.0, 1.0, 0.0)


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _signum(x: float) -> float:
    return math.copysign(1.0, x)


def _add(a: Sequence[float], b: Sequence[float], scale: float = 1.0) -> Vec3:
    return (a[0] + b[0] * scale, a[1] + b[1] * scale, a[2] + b[2] * scale)


def _direction(keys: set, axes: Sequence[tuple]) -> Vec3:
    """Sum the axes whose keys are held; each entry is (positive key, negative key, axis)."""
    total: Vec3 = (0.0, 0.0, 0.0)
    for plus, minus, axis in axes:
        if plus in keys:
            total = _add(total, axis)
        if minus in keys:
            total = _add(total, axis, -1.0)
    return total


def update_god_mode(player: "Player", dt: float) -> None:
    """Fly freely along the view frame, ignoring gravity and collisions."""
    speed = GOD_SPEED * dt
    front = player.camera.front()
    right = player.camera.right()
    up = normalize_or_zero(cross(right, front))

    direction = _direction(
        player.keys,
        [(Key.W, Key.S, front), (Key.D, Key.A, right), (Key.E, Key.Q, up)],
    )
    player.camera.pos = _add(player.camera.pos, normalize_or_zero(direction), speed)

    handle_shooting(player)


def _gravity_axis(rel_pos: Vec3, current_up: Vec3) -> Vec3:
    """Pick the dominant axis of ``rel_pos``, favouring the current one."""
    biased = [
        abs(r) + (AXIS_BIAS if abs(u) > 0.5 else 0.0) for r, u in zip(rel_pos, current_up)
    ]
    ax, ay, az = biased
    if ax >= ay and ax >= az:
        return (_signum(rel_pos[0]), 0.0, 0.0)
    if ay >= ax and ay >= az:
        return (0.0, _signum(rel_pos[1]), 0.0)
    return (0.0, 0.0, _signum(rel_pos[2]))


def _smooth_up(rel_pos: Vec3) -> Vec3:
    n = normalize_or_zero(rel_pos)
    return normalize_or_zero(
        tuple(abs(c) ** VISUAL_UP_POWER * _signum(c) if c != 0.0 else 0.0 for c in n)
    )


def update_survival(player: "Player", dt: float) -> None:
    """Walk on the planet surface with cube-face gravity, sliding collisions and jumping."""
    rel_pos: Vec3 = tuple(c - PLANET_CENTER for c in player.camera.pos)  # type: ignore[assignment]
    under_gravity = length(rel_pos) < GRAVITY_RANGE

    if under_gravity:
        player.physics_up = _gravity_axis(rel_pos, player.physics_up)

    target_up = _smooth_up(rel_pos) if under_gravity else _WORLD_UP
    player.visual_up = normalize_or_zero(
        slerp(player.visual_up, target_up, dt * VISUAL_UP_RATE)
    )
    player.camera.reorient(player.visual_up)

    speed = WALK_SPEED * dt
    direction = _direction(
        player.keys,
        [
            (Key.W, Key.S, player.camera.local_forward),
            (Key.D, Key.A, player.camera.right()),
        ],
    )
    move = tuple(c * speed for c in normalize_or_zero(direction))
    along_up = dot(move, player.physics_up)
    move = _add(move, player.physics_up, -along_up)

    step_up = tuple(c * STEP_HEIGHT for c in player.physics_up)
    next_pos = list(player.camera.pos)
    for axis, delta in enumerate(move):
        next_pos[axis] += delta
        if is_colliding(player, _add(next_pos, step_up)):
            next_pos[axis] -= delta
    player.camera.pos = tuple(next_pos)  # type: ignore[assignment]

    if under_gravity:
        player.vertical_speed -= GRAVITY * dt
    else:
        player.vertical_speed *= 0.9

    fallen = _add(player.camera.pos, player.physics_up, player.vertical_speed * dt)
    if is_colliding(player, fallen):
        player.vertical_speed = 0.0
        player.on_ground = True
    else:
        player.camera.pos = fallen
        player.on_ground = False

    if Key.SPACE in player.keys and player.on_ground:
        player.vertical_speed = JUMP_SPEED
        player.on_ground = False

    handle_shooting(player)


def is_colliding(player: "Player", test_pos: Sequence[float]) -> bool:
    """Whether the player's body at ``test_pos`` overlaps a solid voxel."""
    up = player.visual_up
    probes = (
        _add(test_pos, up, HEAD_OFFSET),
        tuple(test_pos),
        _add(test_pos, up, -FEET_OFFSET),
    )
    for p in probes:
        ranges = [
            range(math.floor(c - BODY_RADIUS), math.ceil(c + BODY_RADIUS) + 1) for c in p
        ]
        for voxel in product(*ranges):
            edited = player.world_edits.get(voxel)
            if edited is not None:
                if edited not in (AIR, WATER):
                    return True
                continue
            if is_voxel_solid(*voxel):
                return True
    return False


def _rounded(p: Sequence[float], offset: Sequence[int]) -> tuple:
    return tuple(_round_half_away(c + o) for c, o in zip(p, offset))


def handle_shooting(player: "Player") -> None:
    """Apply the held weapon's effect to the player's record of world edits."""
    if not player.is_shooting or player.cooldown > 0.0:
        return
    origin = player.camera.pos
    ray = player.camera.front()

    if player.active_weapon is Weapon.CREATOR:
        center = _add(origin, ray, CREATOR_DISTANCE)
        span = range(-CREATOR_RADIUS, CREATOR_RADIUS + 1)
        for offset in product(span, span, span):
            if math.sqrt(sum(o * o for o in offset)) < CREATOR_RADIUS:
                player.world_edits[_rounded(center, offset)] = player.selected_material
        player.cooldown = CREATOR_COOLDOWN
    elif player.active_weapon is Weapon.PLASMA:
        cube = range(-1, 2)
        for step in range(PLASMA_FIRST_STEP, PLASMA_LAST_STEP):
            point = _add(origin, ray, float(step))
            for offset in product(cube, cube, cube):
                player.world_edits[_rounded(point, offset)] = AIR
        player.cooldown = PLASMA_COOLDOWN