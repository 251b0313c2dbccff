# aurora_camera/camera/camera_uniform.py

import numpy as np
from aurora_camera.camera.camera import Camera
from aurora_camera.utils.math import column_major


class CameraUniform:
    """
    GPU-side camera data.
    view_proj holds 16 packed float32 values in column-major order
    (row i of the array is column i of the matrix), 64 bytes, no padding.
    """

    nbytes = 64

    def __init__(self):
        self.view_proj = np.eye(4, dtype=np.float32)

    def update_view_proj(self, camera: Camera):
        self.view_proj = column_major(camera.build_view_projection_matrix())

    def as_matrix(self) -> np.ndarray:
        """The matrix in mathematical orientation (M @ p)."""
        return self.view_proj.T.copy()

    def tobytes(self) -> bytes:
        return self.view_proj.astype('<f4').tobytes()

    def __bytes__(self):
        return self.tobytes()
