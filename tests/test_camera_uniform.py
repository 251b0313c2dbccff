# tests/test_camera_uniform.py

import struct

import numpy as np
from numpy.testing import assert_allclose

from aurora_camera.camera.camera_uniform import CameraUniform


def test_new_uniform_is_identity():
    uniform = CameraUniform()
    assert np.array_equal(uniform.view_proj, np.eye(4, dtype=np.float32))
    assert uniform.view_proj.dtype == np.float32


def test_update_writes_current_matrix(camera):
    uniform = CameraUniform()
    uniform.update_view_proj(camera)
    assert_allclose(uniform.as_matrix(), camera.build_view_projection_matrix())


def test_bytes_are_64_packed_column_major_floats(camera):
    uniform = CameraUniform()
    uniform.update_view_proj(camera)
    data = uniform.tobytes()

    assert len(data) == CameraUniform.nbytes == 64
    values = struct.unpack('<16f', data)
    expected = camera.build_view_projection_matrix()
    for col in range(4):
        for row in range(4):
            assert values[col * 4 + row] == expected[row, col]


def test_translation_occupies_last_column():
    uniform = CameraUniform()
    uniform.view_proj[3, :3] = [7.0, 8.0, 9.0]
    values = struct.unpack('<16f', bytes(uniform))
    assert values[12:15] == (7.0, 8.0, 9.0)
    assert_allclose(uniform.as_matrix()[:3, 3], [7.0, 8.0, 9.0])


def test_updates_follow_camera_changes(camera):
    uniform = CameraUniform()
    uniform.update_view_proj(camera)
    before = uniform.tobytes()
    camera.eye = camera.eye + np.float32(1.0)
    uniform.update_view_proj(camera)
    assert uniform.tobytes() != before
