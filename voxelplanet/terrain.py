"""Procedural planet: value noise and the voxel solidity test."""

from __future__ import annotations

import math

from .vecmath import normalize_or_zero

WORLD_SIZE = 256
PLANET_CENTER = 128.0
PLANET_RADIUS = 40.0


def _fract(x: float) -> float:
    return x - math.floor(x)


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _hash(x: float, y: float, z: float) -> float:
    px = _fract(x * 0.1031)
    py = _fract(y * 0.1031)
    pz = _fract(z * 0.1031)
    d = px * (py + 33.33) + py * (pz + 33.33) + pz * (px + 33.33)
    px += d
    py += d
    pz += d
    return _fract((px + py) * pz) * 2.0 - 1.0


def _mix(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def noise_3d(x: float, y: float, z: float) -> float:
    """Smooth 3D value noise in the range [-1, 1]."""
    px, py, pz = math.floor(x), math.floor(y), math.floor(z)
    fx, fy, fz = _fract(x), _fract(y), _fract(z)
    ux = fx * fx * (3.0 - 2.0 * fx)
    uy = fy * fy * (3.0 - 2.0 * fy)
    uz = fz * fz * (3.0 - 2.0 * fz)
    n000 = _hash(px, py, pz)
    n100 = _hash(px + 1, py, pz)
    n010 = _hash(px, py + 1, pz)
    n110 = _hash(px + 1, py + 1, pz)
    n001 = _hash(px, py, pz + 1)
    n101 = _hash(px + 1, py, pz + 1)
    n011 = _hash(px, py + 1, pz + 1)
    n111 = _hash(px + 1, py + 1, pz + 1)
    return _mix(
        _mix(_mix(n000, n100, ux), _mix(n010, n110, ux), uy),
        _mix(_mix(n001, n101, ux), _mix(n011, n111, ux), uy),
        uz,
    )


def is_voxel_solid(x: int, y: int, z: int) -> bool:
    """Whether the voxel at integer coordinates is rock in the untouched planet."""
    if not all(0 <= c < WORLD_SIZE for c in (x, y, z)):
        return False
    px = x - PLANET_CENTER
    py = y - PLANET_CENTER
    pz = z - PLANET_CENTER
    dist_base = math.sqrt(math.sqrt(px**4 + py**4 + pz**4))

    if dist_base > PLANET_RADIUS + 40.0:
        return False

    dx, dy, dz = normalize_or_zero((px, py, pz))
    continents = noise_3d(dx * 1.2, dy * 1.2, dz * 1.2)
    hills = max(noise_3d(dx * 3.0, dy * 3.0, dz * 3.0), 0.0)
    details = max(noise_3d(dx * 6.0, dy * 6.0, dz * 6.0), 0.0)

    height = PLANET_RADIUS + continents * 10.0
    if continents > -0.1:
        height += hills * 12.0 + details * 4.0
    surface = _round_half_away(height / 2.0) * 2.0

    if dist_base > surface:
        return False

    cave = abs(noise_3d(px * 0.08, py * 0.08, pz * 0.08))
    if cave < 0.05 and dist_base > PLANET_RADIUS - 15.0:
        return False

    return True