"""Byte layouts of the data blocks shared with the shaders."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, List, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

PROJECTILE_COUNT = 64


@dataclass
class Uniforms:
    """Per-frame constants: resolution, time of day, action and camera frame."""

    resolution: Vec2 = (1.0, 1.0)
    time: float = 0.0
    action: int = 0
    camera_pos: Vec3 = (0.0, 0.0, 0.0)
    flashlight_on: int = 0
    camera_front: Vec3 = (0.0, 0.0, -1.0)
    pad1: float = 0.0
    camera_up: Vec3 = (0.0, 1.0, 0.0)
    pad2: float = 0.0

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<2ffI3fI3ff3ff")

    def pack(self) -> bytes:
        """Little-endian bytes in the order and alignment the shaders expect."""
        return self.LAYOUT.pack(
            *self.resolution,
            self.time,
            self.action,
            *self.camera_pos,
            self.flashlight_on,
            *self.camera_front,
            self.pad1,
            *self.camera_up,
            self.pad2,
        )


@dataclass
class Projectile:
    """One slot of the projectile table: a missile (1) or a fragment (2)."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    is_active: int = 0
    vel: Vec3 = (0.0, 0.0, 0.0)
    p_type: int = 0
    mat_id: int = 0
    pad1: int = 0
    pad2: int = 0
    pad3: int = 0

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<3fI3fIIIII")

    def pack(self) -> bytes:
        """Little-endian bytes of this slot."""
        return self.LAYOUT.pack(
            *self.pos,
            self.is_active,
            *self.vel,
            self.p_type,
            self.mat_id,
            self.pad1,
            self.pad2,
            self.pad3,
        )


def empty_projectiles(count: int = PROJECTILE_COUNT) -> List[Projectile]:
    """A table of ``count`` inactive, zeroed projectile slots."""
    if count < 0:
        raise ValueError("projectile count cannot be negative")
    return [Projectile() for _ in range(count)]