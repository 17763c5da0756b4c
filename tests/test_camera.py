import pytest

from glpyramid.camera import Camera
from glpyramid.quaternion import Quaternion


def test_new_camera_is_at_origin():
    cam = Camera()
    assert (cam.x, cam.z, cam.pitch, cam.heading) == (0.0, 0.0, 0.0, 0.0)


def test_set_center_stores_point():
    cam = Camera()
    cam.set_center(400, 300)
    assert (cam.cx, cam.cy) == (400, 300)


def test_pointer_at_center_changes_nothing():
    cam = Camera()
    cam.set_center(400, 300)
    assert cam.check_mouse(400, 300) is False
    assert cam.heading == 0.0
    assert cam.pitch == 0.0


def test_pointer_right_of_center_turns_heading_up():
    cam = Camera()
    cam.set_center(400, 300)
    assert cam.check_mouse(410, 300) is True
    assert cam.heading > 0.0
    assert cam.pitch == 0.0


def test_pointer_below_center_turns_pitch_up():
    cam = Camera()
    cam.set_center(400, 300)
    assert cam.check_mouse(400, 320) is True
    assert cam.pitch > 0.0
    assert cam.heading == 0.0


def test_opposite_offsets_cancel():
    cam = Camera()
    cam.set_center(100, 100)
    cam.check_mouse(130, 80)
    cam.check_mouse(70, 120)
    assert cam.heading == pytest.approx(0.0)
    assert cam.pitch == pytest.approx(0.0)


def test_orientation_at_rest_is_identity():
    cam = Camera()
    m = cam.orientation_matrix()
    assert m == pytest.approx(Quaternion().matrix())
    assert (cam.dirx, cam.dirz) == pytest.approx((0.0, 1.0))
    assert (cam.dirLx, cam.dirLz) == pytest.approx((-1.0, 0.0))


def test_orientation_matches_pitch_then_heading():
    cam = Camera(pitch=15.0, heading=40.0)
    expected = (
        Quaternion.from_axis_angle(1.0, 0.0, 0.0, 15.0)
        * Quaternion.from_axis_angle(0.0, 1.0, 0.0, 40.0)
    ).matrix()
    assert cam.orientation_matrix() == pytest.approx(expected)


def test_strafe_direction_is_perpendicular():
    cam = Camera(pitch=10.0, heading=73.0)
    cam.orientation_matrix()
    assert cam.dirx * cam.dirLx + cam.dirz * cam.dirLz == pytest.approx(0.0)


def test_forward_then_backward_returns_to_start():
    cam = Camera(heading=30.0)
    cam.orientation_matrix()
    cam.move_forward()
    assert (cam.x, cam.z) != pytest.approx((0.0, 0.0))
    cam.move_backward()
    assert (cam.x, cam.z) == pytest.approx((0.0, 0.0))


def test_left_then_right_returns_to_start():
    cam = Camera(heading=-50.0)
    cam.orientation_matrix()
    cam.strafe_left()
    cam.strafe_right()
    assert (cam.x, cam.z) == pytest.approx((0.0, 0.0))


def test_forward_at_rest_moves_along_z():
    cam = Camera()
    cam.orientation_matrix()
    cam.move_forward()
    assert cam.x == pytest.approx(0.0)
    assert cam.z == pytest.approx(cam.dirz)