# tests/test_math.py

import numpy as np
from numpy.testing import assert_allclose

from aurora_camera.utils.math import (
    OPENGL_TO_WGPU_MATRIX, column_major, look_at_rh, normalize, perspective,
    quaternion_from_axis_angle, quaternion_rotate_vector, vec3,
)


def hamilton(q1, q2):
    """Reference quaternion product, [x, y, z, w] layout."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return np.array([
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
    ])


def test_depth_correction_columns():
    cols = column_major(OPENGL_TO_WGPU_MATRIX)
    assert_allclose(cols[0], [1.0, 0.0, 0.0, 0.0])
    assert_allclose(cols[1], [0.0, 1.0, 0.0, 0.0])
    assert_allclose(cols[2], [0.0, 0.0, 0.5, 0.0])
    assert_allclose(cols[3], [0.0, 0.0, 0.5, 1.0])


def test_depth_correction_is_read_only():
    assert not OPENGL_TO_WGPU_MATRIX.flags.writeable


def test_vec3_accepts_scalars_and_sequences():
    assert_allclose(vec3(1, 2, 3), [1.0, 2.0, 3.0])
    assert_allclose(vec3([4, 5, 6]), [4.0, 5.0, 6.0])
    assert vec3(1, 2, 3).dtype == np.float32


def test_normalize():
    assert_allclose(normalize(vec3(3, 0, 4)), [0.6, 0.0, 0.8], rtol=1e-6)


def test_normalize_zero_vector_is_nan():
    assert np.isnan(normalize(vec3(0, 0, 0))).all()


def test_look_at_from_origin_down_negative_z_is_identity():
    view = look_at_rh(vec3(0, 0, 0), vec3(0, 0, -1), vec3(0, 1, 0))
    assert_allclose(view, np.eye(4), atol=1e-7)


def test_look_at_moves_eye_to_origin():
    eye = vec3(1, 2, 3)
    view = look_at_rh(eye, vec3(0, 0, 0), vec3(0, 1, 0))
    assert_allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0], atol=1e-6)


def test_look_at_target_lies_on_negative_z():
    eye, target = vec3(1, 2, 3), vec3(-2, 0, 1)
    view = look_at_rh(eye, target, vec3(0, 1, 0))
    p = view @ np.append(target, 1.0)
    distance = np.linalg.norm(target - eye)
    assert_allclose(p[:3], [0.0, 0.0, -distance], atol=1e-5)


def test_perspective_entries():
    proj = perspective(90.0, 2.0, 1.0, 3.0)
    assert_allclose(proj[0, 0], 0.5, rtol=1e-6)
    assert_allclose(proj[1, 1], 1.0, rtol=1e-6)
    assert_allclose(proj[2, 2], -2.0, rtol=1e-6)
    assert_allclose(proj[2, 3], -3.0, rtol=1e-6)
    assert proj[3, 2] == -1.0
    assert proj[3, 3] == 0.0


def test_quaternion_rotates_x_to_negative_z_about_y():
    q = quaternion_from_axis_angle(vec3(0, 1, 0), 90.0)
    assert_allclose(quaternion_rotate_vector(q, vec3(1, 0, 0)), [0.0, 0.0, -1.0], atol=1e-6)


def test_quaternion_rotation_matches_sandwich_product():
    q = quaternion_from_axis_angle(normalize(vec3(1, 2, 3)), 37.0)
    v = vec3(0.5, -1.0, 2.0)
    conjugate = np.array([-q[0], -q[1], -q[2], q[3]])
    sandwich = hamilton(hamilton(q, np.append(v, 0.0)), conjugate)
    assert_allclose(quaternion_rotate_vector(q, v), sandwich[:3], atol=1e-5)


def test_zero_angle_rotation_is_identity():
    q = quaternion_from_axis_angle(vec3(0, 0, 1), 0.0)
    assert_allclose(quaternion_rotate_vector(q, vec3(1, 2, 3)), [1.0, 2.0, 3.0])


def test_column_major_rows_are_columns():
    m = np.arange(16, dtype=np.float32).reshape(4, 4)
    cols = column_major(m)
    assert cols.flags.c_contiguous
    assert_allclose(cols[3], m[:, 3])
