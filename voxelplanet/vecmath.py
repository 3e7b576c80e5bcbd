"""Small 3-vector helpers working on tuples of floats."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]

_ZERO: Vec3 = (0.0, 0.0, 0.0)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product ``a x b``."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Sequence[float]) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(dot(v, v))


def normalize_or_zero(v: Sequence[float]) -> Vec3:
    """Unit vector along ``v``, or the zero vector when ``v`` is (almost) zero."""
    size = length(v)
    if size < 0.00001:
        return _ZERO
    return (v[0] / size, v[1] / size, v[2] / size)


def slerp(a: Sequence[float], b: Sequence[float], t: float) -> Vec3:
    """Spherical interpolation between unit vectors ``a`` and ``b``."""
    d = max(-1.0, min(1.0, dot(a, b)))
    if d > 0.9995:
        return normalize_or_zero(tuple(x + (y - x) * t for x, y in zip(a, b)))
    theta = math.acos(d) * t
    relative = normalize_or_zero(tuple(y - x * d for x, y in zip(a, b)))
    c, s = math.cos(theta), math.sin(theta)
    return tuple(x * c + r * s for x, r in zip(a, relative))  # type: ignore[return-value]


def rotate_vector(v: Sequence[float], k: Sequence[float], angle: float) -> Vec3:
    """Rotate ``v`` around the unit axis ``k`` by ``angle`` radians (Rodrigues)."""
    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    kv_cross = cross(k, v)
    kv_dot = dot(k, v)
    return tuple(  # type: ignore[return-value]
        vi * cos_t + ci * sin_t + ki * kv_dot * (1.0 - cos_t)
        for vi, ci, ki in zip(v, kv_cross, k)
    )