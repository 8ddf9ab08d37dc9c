import math

import numpy as np
import pytest

from cometa.camera import Camera, Key
from cometa.transforms import look_at, perspective


def _explicit_camera():
    proj = perspective(math.radians(45.0), 1.0, 0.1, 100.0)
    view = look_at((0.0, 0.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    return Camera(proj, view), proj, view


def test_default_camera_starting_state():
    cam = Camera()
    assert np.allclose(cam.position, [0.0, 0.0, 0.0])
    assert np.allclose(cam.direction, [0.0, 0.0, 1.0])
    assert cam.yaw == -90.0
    assert cam.fov == 45.0
    assert cam.movement_speed == 5.0
    assert cam.sensitivity == 0.1
    assert (cam.near, cam.far) == (0.05, 1000.0)


def test_default_camera_right_is_orthogonal():
    cam = Camera()
    assert float(np.dot(cam.right, cam.direction)) == pytest.approx(0.0)
    assert float(np.dot(cam.right, cam.up)) == pytest.approx(0.0)


def test_explicit_camera_keeps_given_matrices():
    cam, proj, view = _explicit_camera()
    assert np.allclose(cam.projection, proj)
    assert np.allclose(cam.view, view)
    assert np.allclose(cam.position, [0.0, 0.0, 3.0])
    assert cam.movement_speed == 20.0
    assert cam.sensitivity == 0.2


def test_explicit_camera_looks_down_negative_z():
    cam, _, _ = _explicit_camera()
    assert np.allclose(cam.direction, [0.0, 0.0, -1.0], atol=1e-9)


def test_giving_only_one_matrix_raises():
    with pytest.raises(TypeError):
        Camera(np.identity(4))


def test_view_projection_is_product():
    cam, proj, view = _explicit_camera()
    assert np.allclose(cam.view_projection(), proj @ view)


def test_update_without_keys_keeps_position_and_yaw():
    cam, _, _ = _explicit_camera()
    cam.update(0.5, set(), (30.0, 40.0))
    assert np.allclose(cam.position, [0.0, 0.0, 3.0])
    assert cam.yaw == -90.0
    assert cam.pitch == 0.0


def test_update_movement_requires_alt():
    cam, _, _ = _explicit_camera()
    cam.update(1.0, {Key.W})
    assert np.allclose(cam.position, [0.0, 0.0, 3.0])


def test_alt_w_moves_forward_by_speed_times_delta():
    cam, _, _ = _explicit_camera()
    start = cam.position.copy()
    forward = cam.direction.copy()
    cam.update(0.25, {Key.LEFT_ALT, Key.W})
    displacement = cam.position - start
    assert np.linalg.norm(displacement) == pytest.approx(cam.movement_speed * 0.25)
    assert float(np.dot(displacement, forward)) > 0.0


def test_alt_w_then_s_returns_to_start():
    cam, _, _ = _explicit_camera()
    start = cam.position.copy()
    cam.update(0.1, {Key.LEFT_ALT, Key.W})
    cam.update(0.1, {Key.LEFT_ALT, Key.S})
    assert np.allclose(cam.position, start)


def test_alt_a_and_d_move_sideways_in_opposite_directions():
    left, _, _ = _explicit_camera()
    right, _, _ = _explicit_camera()
    left.update(0.1, {Key.LEFT_ALT, Key.A})
    right.update(0.1, {Key.LEFT_ALT, Key.D})
    assert np.allclose(left.position - 3.0 * np.array([0, 0, 1]),
                       -(right.position - 3.0 * np.array([0, 0, 1])))
    assert float(np.dot(left.position - right.position, left.direction)) == pytest.approx(0.0)


def test_mouse_turns_camera_with_alt():
    cam, _, _ = _explicit_camera()
    cam.update(0.0, {Key.LEFT_ALT}, (10.0, -5.0))
    assert cam.yaw == pytest.approx(-90.0 + 10.0 * cam.sensitivity)
    assert cam.pitch == pytest.approx(5.0 * cam.sensitivity)


def test_pitch_is_clamped():
    cam, _, _ = _explicit_camera()
    cam.update(0.0, {Key.LEFT_ALT}, (0.0, 100000.0))
    assert cam.pitch == -89.0
    cam.update(0.0, {Key.LEFT_ALT}, (0.0, -1000000.0))
    assert cam.pitch == 89.0


def test_update_keeps_direction_unit_and_view_centered_on_position():
    cam, _, _ = _explicit_camera()
    cam.update(0.3, {Key.LEFT_ALT, Key.W}, (12.0, 7.0), (800, 600))
    assert np.linalg.norm(cam.direction) == pytest.approx(1.0)
    eye = cam.view @ np.array([*cam.position, 1.0])
    assert np.allclose(eye[:3], 0.0)


def test_update_uses_resolution_for_projection():
    cam = Camera()
    cam.update(0.0, resolution=(1600, 800))
    expected = perspective(math.radians(cam.fov), 1600 / 800, cam.near, cam.far)
    assert np.allclose(cam.projection, expected)


def test_update_with_zero_height_raises():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.update(0.1, resolution=(800, 0))