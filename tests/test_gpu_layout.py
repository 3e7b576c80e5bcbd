import struct

import pytest

from voxelplanet.gpu_layout import (
    PROJECTILE_COUNT,
    Projectile,
    Uniforms,
    empty_projectiles,
)


def test_uniforms_size_is_four_vec4():
    assert len(Uniforms().pack()) == 64


def test_uniforms_round_trip():
    u = Uniforms(
        resolution=(1280.0, 720.0),
        time=0.5,
        action=9,
        camera_pos=(128.0, 220.0, 128.0),
        flashlight_on=1,
        camera_front=(0.0, 0.0, -1.0),
        camera_up=(0.0, 1.0, 0.0),
    )
    values = struct.unpack("<2ffI3fI3ff3ff", u.pack())
    assert values[:2] == (1280.0, 720.0)
    assert values[2] == 0.5
    assert values[3] == 9
    assert values[4:7] == (128.0, 220.0, 128.0)
    assert values[7] == 1
    assert values[8:11] == (0.0, 0.0, -1.0)
    assert values[12:15] == (0.0, 1.0, 0.0)


def test_uniforms_field_offsets():
    u = Uniforms(camera_pos=(1.0, 2.0, 3.0), camera_up=(4.0, 5.0, 6.0), action=7)
    data = u.pack()
    assert struct.unpack_from("<3f", data, 16) == (1.0, 2.0, 3.0)
    assert struct.unpack_from("<3f", data, 48) == (4.0, 5.0, 6.0)
    assert struct.unpack_from("<I", data, 12) == (7,)


def test_uniforms_rejects_negative_action():
    with pytest.raises(struct.error):
        Uniforms(action=-1).pack()


def test_projectile_size():
    assert len(Projectile().pack()) == 48


def test_projectile_round_trip():
    p = Projectile(pos=(1.0, 2.0, 3.0), is_active=1, vel=(0.5, -0.5, 0.25), p_type=2, mat_id=5)
    values = struct.unpack("<3fI3fIIIII", p.pack())
    assert values[:3] == (1.0, 2.0, 3.0)
    assert values[3] == 1
    assert values[4:7] == (0.5, -0.5, 0.25)
    assert values[7:9] == (2, 5)
    assert values[9:] == (0, 0, 0)


def test_empty_projectiles_default_count():
    table = empty_projectiles()
    assert len(table) == PROJECTILE_COUNT == 64
    assert all(p.is_active == 0 for p in table)


def test_empty_projectiles_pack_to_zero_bytes():
    table = empty_projectiles(3)
    data = b"".join(p.pack() for p in table)
    assert data == bytes(len(data))
    assert len(data) == 3 * len(Projectile().pack())


def test_empty_projectiles_slots_are_independent():
    table = empty_projectiles(2)
    table[0].is_active = 1
    assert table[1].is_active == 0


def test_empty_projectiles_negative_count():
    with pytest.raises(ValueError):
        empty_projectiles(-1)