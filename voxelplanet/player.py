"""The player: input state, equipment and the per-frame update."""

from __future__ import annotations

from typing import Dict, Sequence, Set, Tuple

from . import physics
from .camera import Camera
from .modes import GameMode, Key, Weapon
from .vecmath import Vec3

BAZOOKA_COOLDOWN = 0.3
PLASMA_ACTION = 8
BAZOOKA_ACTION = 9

_CREATOR_KEYS = {
    Key.DIGIT1: 1,
    Key.DIGIT2: 2,
    Key.DIGIT3: 3,
    Key.DIGIT4: 5,
}


class Player:
    """A player with a camera, an equipped tool and its own view of world edits."""

    def __init__(self, start_pos: Sequence[float]) -> None:
        self.camera = Camera(start_pos)
        self.mode = GameMode.NORMAL
        self.active_weapon = Weapon.CREATOR
        self.selected_material = 1
        self.flashlight = False
        self.is_day = True
        self.is_shooting = False
        self.cooldown = 0.0
        self.vertical_speed = 0.0
        self.on_ground = False
        self.physics_up: Vec3 = (0.0, 1.0, 0.0)
        self.visual_up: Vec3 = (0.0, 1.0, 0.0)
        self.keys: Set[Key] = set()
        self.world_edits: Dict[Tuple[int, int, int], int] = {}

    def handle_keyboard(self, key: Key, pressed: bool) -> None:
        """Track held keys and react to toggles and equipment selection on press."""
        if pressed:
            self.keys.add(key)
        else:
            self.keys.discard(key)
            return

        if key is Key.G:
            self.mode = GameMode.NORMAL if self.mode is GameMode.GOD else GameMode.GOD
        elif key is Key.F:
            self.flashlight = not self.flashlight
        elif key is Key.N:
            self.is_day = not self.is_day
        elif key in _CREATOR_KEYS:
            self.active_weapon = Weapon.CREATOR
            self.selected_material = _CREATOR_KEYS[key]
        elif key is Key.DIGIT5:
            self.active_weapon = Weapon.PLASMA
        elif key is Key.DIGIT6:
            self.active_weapon = Weapon.BAZOOKA

    def handle_mouse_click(self, pressed: bool) -> None:
        """Start or stop firing."""
        self.is_shooting = pressed

    def handle_mouse_move(self, dx: float, dy: float) -> None:
        """Turn the camera by a mouse delta."""
        self.camera.mouse_move(dx, dy, self.mode is GameMode.GOD)

    def update(self, dt: float) -> None:
        """Advance cooldown and movement by ``dt`` seconds."""
        if self.cooldown > 0.0:
            self.cooldown -= dt
        if self.mode is GameMode.GOD:
            physics.update_god_mode(self, dt)
        else:
            physics.update_survival(self, dt)

    def shader_action(self) -> int:
        """Action code for the GPU this frame; firing the bazooka starts its cooldown."""
        if not self.is_shooting:
            return 0
        if self.active_weapon is Weapon.CREATOR:
            return self.selected_material
        if self.active_weapon is Weapon.PLASMA:
            return PLASMA_ACTION
        if self.cooldown <= 0.0:
            self.cooldown = BAZOOKA_COOLDOWN
            return BAZOOKA_ACTION
        return 0