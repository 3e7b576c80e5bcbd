"""Frame driver: timing, day/night cycle, status line and shader uniforms."""

from __future__ import annotations

import math
import time
from typing import Callable

import psutil

from .gpu_layout import Uniforms
from .modes import GameMode, Weapon
from .player import Player

START_POSITION = (128.0, 220.0, 128.0)
MAX_FRAME_TIME = 0.05
DAY_TRANSITION_RATE = 4.0
STATUS_INTERVAL = 0.5

_MATERIAL_NAMES = {1: "Areia", 2: "Água", 3: "Gás", 5: "Terra"}


class State:
    """Everything advanced once per frame, independent of any graphics backend."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.clock = clock
        self.width = max(int(width), 1)
        self.height = max(int(height), 1)
        self.player = Player(START_POSITION)
        self.time_of_day = 0.0
        self.frame_count = 0
        self.last_frame_time = clock()
        self.last_fps_time = clock()
        self.title = ""
        self.current_uniforms = Uniforms(
            resolution=(float(self.width), float(self.height)),
            time=0.0,
            action=0,
            camera_pos=self.player.camera.pos,
            flashlight_on=0,
            camera_front=self.player.camera.front(),
            camera_up=self.player.visual_up,
        )

    def resize(self, width: int, height: int) -> None:
        """Adopt a new surface size; zero-sized surfaces are ignored."""
        if width > 0 and height > 0:
            self.width = width
            self.height = height

    def update(self) -> Uniforms:
        """Advance one frame and return the uniforms for it."""
        now = self.clock()
        dt = min(now - self.last_frame_time, MAX_FRAME_TIME)
        self.last_frame_time = now
        self.frame_count += 1

        target = 0.0 if self.player.is_day else math.pi
        self.time_of_day += (target - self.time_of_day) * dt * DAY_TRANSITION_RATE

        elapsed = now - self.last_fps_time
        if elapsed >= STATUS_INTERVAL:
            fps = self.frame_count / elapsed
            cpu = psutil.cpu_percent(interval=None)
            self.title = self.status_title(fps, cpu)
            self.frame_count = 0
            self.last_fps_time = now

        self.player.update(dt)
        self.current_uniforms = self.uniforms()
        return self.current_uniforms

    def status_title(self, fps: float, cpu: float) -> str:
        """Window title showing frame rate, CPU load, mode and equipment."""
        mode = "GOD" if self.player.mode is GameMode.GOD else "NORMAL"
        weapon = self.player.active_weapon
        if weapon is Weapon.CREATOR:
            equip = _MATERIAL_NAMES.get(self.player.selected_material, "")
        elif weapon is Weapon.PLASMA:
            equip = "Plasma (Cavar)"
        else:
            equip = "Bazuca (Detritos Nativos)"
        return f"FPS: {fps:.0f} | CPU: {cpu:.1f}% | {mode} | Equipado: {equip} (Teclas 1 a 6)"

    def uniforms(self) -> Uniforms:
        """Uniforms for the current state; reading the action may start a weapon cooldown."""
        return Uniforms(
            resolution=(float(self.width), float(self.height)),
            time=self.time_of_day,
            action=self.player.shader_action(),
            camera_pos=self.player.camera.pos,
            flashlight_on=1 if self.player.flashlight else 0,
            camera_front=self.player.camera.front(),
            camera_up=self.player.visual_up,
        )