"""First-person camera with a body frame and a head pitch."""

from __future__ import annotations

from typing import Sequence

from .vecmath import Vec3, cross, dot, normalize_or_zero, rotate_vector

import math

SENSITIVITY = 0.003
PITCH_LIMIT = 1.55


class Camera:
    """Camera whose ``local_forward`` always lies in the plane normal to ``up``."""

    def __init__(self, start_pos: Sequence[float]) -> None:
        self.pos: Vec3 = tuple(float(c) for c in start_pos)  # type: ignore[assignment]
        self.local_forward: Vec3 = (0.0, 0.0, -1.0)
        self.up: Vec3 = (0.0, 1.0, 0.0)
        self.pitch: float = 0.0

    def _reproject_forward(self) -> None:
        right = normalize_or_zero(cross(self.local_forward, self.up))
        self.local_forward = normalize_or_zero(cross(self.up, right))

    def mouse_move(self, dx: float, dy: float, is_god_mode: bool = False) -> None:
        """Turn the body around ``up`` by ``dx`` and tilt the head by ``dy``."""
        self.local_forward = normalize_or_zero(
            rotate_vector(self.local_forward, self.up, dx * SENSITIVITY)
        )
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + dy * SENSITIVITY))
        self._reproject_forward()

    def reorient(self, new_up: Sequence[float]) -> None:
        """Rotate the body frame so that ``up`` becomes ``new_up``."""
        new_up = normalize_or_zero(new_up)
        d = max(-1.0, min(1.0, dot(self.up, new_up)))
        if d < 0.99999:
            axis = normalize_or_zero(cross(self.up, new_up))
            self.local_forward = normalize_or_zero(
                rotate_vector(self.local_forward, axis, math.acos(d))
            )
        self.up = new_up
        self._reproject_forward()

    def front(self) -> Vec3:
        """Viewing direction, including the head pitch."""
        return normalize_or_zero(rotate_vector(self.local_forward, self.right(), self.pitch))

    def right(self) -> Vec3:
        """Unit vector pointing to the camera's right."""
        return normalize_or_zero(cross(self.up, self.local_forward))