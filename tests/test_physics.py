import pytest

from voxelplanet.modes import GameMode, Key, Weapon
from voxelplanet.physics import (
    CREATOR_COOLDOWN,
    JUMP_SPEED,
    PLASMA_COOLDOWN,
    handle_shooting,
    is_colliding,
    update_god_mode,
    update_survival,
)
from voxelplanet.player import Player
from voxelplanet.vecmath import cross, normalize_or_zero

SKY = (128.0, 250.0, 128.0)
CORE = (128.0, 128.0, 128.0)


def test_empty_sky_does_not_collide():
    player = Player(SKY)
    assert is_colliding(player, SKY) is False


def test_outside_world_does_not_collide():
    player = Player(SKY)
    assert is_colliding(player, (-100.0, -100.0, -100.0)) is False


def test_planet_core_collides():
    player = Player(CORE)
    assert is_colliding(player, CORE) is True


def test_solid_edit_collides():
    player = Player(SKY)
    player.world_edits[(128, 250, 128)] = 1
    assert is_colliding(player, SKY) is True


def test_water_edit_does_not_collide():
    player = Player(SKY)
    player.world_edits[(128, 250, 128)] = 2
    assert is_colliding(player, SKY) is False


def test_creator_places_sphere_of_material():
    player = Player(SKY)
    player.is_shooting = True
    player.selected_material = 5
    handle_shooting(player)
    assert player.world_edits[(128, 250, 118)] == 5
    assert (130, 250, 118) in player.world_edits
    assert (131, 250, 118) not in player.world_edits
    assert set(player.world_edits.values()) == {5}
    assert player.cooldown == pytest.approx(CREATOR_COOLDOWN)


def test_plasma_digs_tunnel_of_air():
    player = Player(SKY)
    player.is_shooting = True
    player.active_weapon = Weapon.PLASMA
    handle_shooting(player)
    assert set(player.world_edits.values()) == {0}
    assert (128, 250, 125) in player.world_edits
    assert (128, 250, 88) in player.world_edits
    assert (128, 250, 87) not in player.world_edits
    assert player.cooldown == pytest.approx(PLASMA_COOLDOWN)


def test_cooldown_blocks_shooting():
    player = Player(SKY)
    player.is_shooting = True
    player.cooldown = 1.0
    handle_shooting(player)
    assert player.world_edits == {}


def test_not_shooting_leaves_world_untouched():
    player = Player(SKY)
    handle_shooting(player)
    assert player.world_edits == {}
    assert player.cooldown == 0.0


def test_bazooka_leaves_no_cpu_edits():
    player = Player(SKY)
    player.is_shooting = True
    player.active_weapon = Weapon.BAZOOKA
    handle_shooting(player)
    assert player.world_edits == {}


def test_god_mode_flies_forward():
    player = Player(SKY)
    player.mode = GameMode.GOD
    player.keys.add(Key.W)
    update_god_mode(player, 0.5)
    assert player.camera.pos == pytest.approx((128.0, 250.0, 88.0))


def test_god_mode_opposite_keys_cancel():
    player = Player(SKY)
    player.keys.update({Key.W, Key.S, Key.E, Key.Q})
    update_god_mode(player, 0.5)
    assert player.camera.pos == pytest.approx(SKY)


def test_god_mode_vertical_follows_view_frame():
    player = Player(SKY)
    player.keys.add(Key.E)
    up = normalize_or_zero(cross(player.camera.right(), player.camera.front()))
    update_god_mode(player, 0.25)
    moved = tuple(a - b for a, b in zip(player.camera.pos, SKY))
    assert moved == pytest.approx(tuple(c * 20.0 for c in up))


def test_survival_falls_toward_planet():
    player = Player(SKY)
    update_survival(player, 0.02)
    assert player.vertical_speed < 0.0
    assert player.camera.pos[1] < SKY[1]
    assert player.on_ground is False
    assert player.physics_up == (0.0, 1.0, 0.0)


def test_survival_gravity_axis_follows_dominant_face():
    player = Player((128.0, 128.0, 250.0))
    update_survival(player, 0.02)
    assert player.physics_up == (0.0, 0.0, 1.0)


def test_survival_outside_gravity_damps_speed():
    start = (128.0, 600.0, 128.0)
    player = Player(start)
    player.vertical_speed = 10.0
    update_survival(player, 0.1)
    assert player.vertical_speed == pytest.approx(9.0)
    assert player.camera.pos[1] == pytest.approx(600.9)


def test_survival_lands_on_solid_ground():
    player = Player(CORE)
    player.vertical_speed = -5.0
    update_survival(player, 0.02)
    assert player.on_ground is True
    assert player.vertical_speed == 0.0
    assert player.camera.pos == pytest.approx(CORE)


def test_survival_jump_from_ground():
    player = Player(CORE)
    player.keys.add(Key.SPACE)
    update_survival(player, 0.02)
    assert player.vertical_speed == JUMP_SPEED
    assert player.on_ground is False