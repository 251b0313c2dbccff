# aurora_camera/camera/camera.py

import numpy as np
from aurora_camera.utils.math import (
    OPENGL_TO_WGPU_MATRIX, look_at_rh, perspective, vec3,
)


class Camera:
    """
    Look-at camera.
    Pose is eye/target/up; projection is a symmetric perspective frustum.

    eye must differ from target and up must not be parallel to the view
    direction. Neither is checked: a degenerate pose produces NaN matrices.
    """

    def __init__(self, eye, target, up, aspect: float, fovy: float = 45.0,
                 znear: float = 0.1, zfar: float = 100.0):
        self.eye = vec3(eye)
        self.target = vec3(target)
        self.up = vec3(up)

        # Projection
        self.aspect = float(aspect)
        self.fovy = float(fovy)  # degrees
        self.znear = float(znear)
        self.zfar = float(zfar)

    def forward(self) -> np.ndarray:
        """Unnormalized eye -> target vector."""
        return self.target - self.eye

    def get_view_matrix(self) -> np.ndarray:
        return look_at_rh(self.eye, self.target, self.up)

    def get_projection_matrix(self) -> np.ndarray:
        return perspective(self.fovy, self.aspect, self.znear, self.zfar)

    def build_view_projection_matrix(self) -> np.ndarray:
        """Depth-corrected projection * view, ready for the camera uniform."""
        view = self.get_view_matrix()
        proj = self.get_projection_matrix()
        return OPENGL_TO_WGPU_MATRIX @ proj @ view

    @classmethod
    def from_config(cls, config) -> 'Camera':
        """Build a camera from the 'camera' and 'rendering' config sections."""
        width = config.get('rendering.width', 800)
        height = config.get('rendering.height', 600)
        fovy = config.get('camera.fovy', 45.0)
        znear = config.get('camera.znear', 0.1)
        zfar = config.get('camera.zfar', 100.0)

        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewport size: {width}x{height}")
        if not 0.0 < fovy < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fovy}")
        if not 0.0 < znear < zfar:
            raise ValueError(f"Clip planes must satisfy 0 < znear < zfar, got {znear}, {zfar}")

        return cls(
            eye=config.get('camera.eye', [0.0, 1.0, 2.0]),
            target=config.get('camera.target', [0.0, 0.0, 0.0]),
            up=config.get('camera.up', [0.0, 1.0, 0.0]),
            aspect=width / height,
            fovy=fovy,
            znear=znear,
            zfar=zfar,
        )

    def __repr__(self):
        return (f"Camera(eye={self.eye.tolist()}, target={self.target.tolist()}, "
                f"up={self.up.tolist()}, fovy={self.fovy})")
