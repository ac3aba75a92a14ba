import math

import pytest

from softraster.transform import ModelTransform, rotate_point
from softraster.vectors import Float3


def _length(v):
    return math.sqrt(v.dot(v))


def _approx_vec(v):
    return pytest.approx((v.x, v.y, v.z), abs=1e-9)


def test_rotate_point_zero_angles_is_identity():
    p = Float3(1.0, -2.0, 3.5)
    r = rotate_point(p, 0.0, 0.0, 0.0)
    assert (r.x, r.y, r.z) == _approx_vec(p)


@pytest.mark.parametrize("angles", [(0.3, 0.0, 0.0), (0.0, 1.1, 0.0), (0.0, 0.0, -2.0), (0.4, 0.7, 1.9)])
def test_rotate_point_preserves_length(angles):
    p = Float3(1.0, 2.0, 3.0)
    r = rotate_point(p, *angles)
    assert _length(r) == pytest.approx(_length(p))


def test_rotate_point_z_angle_turns_y_into_z():
    r = rotate_point(Float3(0.0, 1.0, 0.0), 0.0, 0.0, math.pi / 2)
    assert (r.x, r.y, r.z) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)


def test_rotate_point_full_turn_returns_point():
    p = Float3(0.5, -1.5, 2.0)
    r = rotate_point(p, 2 * math.pi, 2 * math.pi, 2 * math.pi)
    assert (r.x, r.y, r.z) == _approx_vec(p)


def test_default_transform_is_identity():
    t = ModelTransform()
    p = Float3(3.0, 4.0, 5.0)
    w = t.to_world_point(p)
    assert (w.x, w.y, w.z) == _approx_vec(p)


def test_to_world_point_translates_and_scales():
    position = Float3(10.0, -5.0, 2.0)
    t = ModelTransform(position=position, scale=2.0)
    p = Float3(1.0, 1.0, 1.0)
    w = t.to_world_point(p)
    expected = p.scale(2.0) + position
    assert (w.x, w.y, w.z) == _approx_vec(expected)


def test_to_world_point_matches_rotate_point():
    t = ModelTransform(pitch=0.2, yaw=0.9, roll=1.3, position=Float3(1.0, 2.0, 3.0), scale=0.5)
    p = Float3(-2.0, 4.0, 6.0)
    expected = rotate_point(p.scale(0.5), 1.3, 0.2, 0.9) + Float3(1.0, 2.0, 3.0)
    w = t.to_world_point(p)
    assert (w.x, w.y, w.z) == _approx_vec(expected)


def test_to_world_point_distance_from_position_is_scaled():
    t = ModelTransform(pitch=0.5, yaw=-1.0, roll=2.0, position=Float3(4.0, 4.0, 4.0), scale=3.0)
    p = Float3(1.0, 2.0, -2.0)
    w = t.to_world_point(p)
    assert _length(w - t.position) == pytest.approx(3.0 * _length(p))


def test_local_to_world_dir_identity():
    d = Float3(0.0, 0.0, 1.0)
    w = ModelTransform().local_to_world_dir(d)
    assert (w.x, w.y, w.z) == _approx_vec(d)


def test_local_to_world_dir_ignores_position_and_scale():
    d = Float3(1.0, 2.0, 3.0)
    plain = ModelTransform(pitch=0.3, yaw=0.4, roll=0.5)
    moved = ModelTransform(pitch=0.3, yaw=0.4, roll=0.5, position=Float3(9.0, 9.0, 9.0), scale=7.0)
    a = plain.local_to_world_dir(d)
    b = moved.local_to_world_dir(d)
    assert (a.x, a.y, a.z) == _approx_vec(b)


def test_local_to_world_dir_preserves_length():
    t = ModelTransform(pitch=1.2, yaw=-0.7, roll=0.3)
    d = Float3(-1.0, 0.5, 2.0)
    assert _length(t.local_to_world_dir(d)) == pytest.approx(_length(d))


def test_local_to_world_dir_yaw_keeps_y():
    t = ModelTransform(yaw=0.8)
    d = Float3(1.0, 5.0, 1.0)
    assert t.local_to_world_dir(d).y == pytest.approx(5.0)