# aurora_camera/camera/camera_controller.py

from typing import Dict, Optional, Union

import numpy as np
from aurora_camera.camera.camera import Camera
from aurora_camera.input.action_map import ActionMap, CameraAction
from aurora_camera.input.key_codes import KeyCode
from aurora_camera.utils.math import (
    normalize, quaternion_from_axis_angle, quaternion_rotate_vector,
)
from aurora_camera.core.logging import get_logger

logger = get_logger()

# Damping applied to every translation; rotations use speed directly as degrees.
SPEED_LIMIT = 0.05


class CameraController:
    """
    Keyboard fly-camera controller.

    Key events toggle held intents; update_camera() applies every held
    intent once per frame. `speed` scales translations (times SPEED_LIMIT)
    and is the rotation step in degrees.
    """

    def __init__(self, speed: float, action_map: Optional[ActionMap] = None):
        if speed <= 0:
            raise ValueError(f"Controller speed must be positive, got {speed}")

        self.speed = float(speed)
        self.action_map = action_map or ActionMap()
        self.enabled = True

        self.held: Dict[CameraAction, bool] = {action: False for action in CameraAction}
        logger.info(f"CameraController initialized (speed={self.speed})")

    def handle_key(self, key: Union[KeyCode, str], is_pressed: bool) -> bool:
        """
        Record a key press/release.
        Returns False for keys with no camera action so the caller can pass them on.
        """
        action = self.action_map.lookup(key)
        if action is None:
            return False
        self.held[action] = is_pressed
        return True

    def is_active(self, action: CameraAction) -> bool:
        return self.held[action]

    def reset(self):
        """Release every held intent (e.g. on focus loss)."""
        for action in self.held:
            self.held[action] = False

    def update_camera(self, camera: Camera):
        """Apply one frame of movement and rotation to the camera."""
        if not self.enabled:
            return

        held = self.held
        step = self.speed * SPEED_LIMIT

        forward = camera.target - camera.eye
        forward_norm = normalize(forward)
        forward_mag = np.linalg.norm(forward)

        # Forward stops short of the target; backward is unbounded.
        if held[CameraAction.FORWARD] and forward_mag > self.speed:
            camera.eye = camera.eye + forward_norm * step
            camera.target = camera.target + forward_norm * step
        if held[CameraAction.BACKWARD]:
            camera.eye = camera.eye - forward_norm * step
            camera.target = camera.target - forward_norm * step

        right = np.cross(forward_norm, camera.up)

        if held[CameraAction.STRAFE_LEFT]:
            camera.eye = camera.eye - right * step
            camera.target = camera.target - right * step
        if held[CameraAction.STRAFE_RIGHT]:
            camera.eye = camera.eye + right * step
            camera.target = camera.target + right * step

        # Rotations pivot on eye and all start from this frame's original forward,
        # so a later rotation overrides an earlier one instead of compounding.
        if held[CameraAction.YAW_LEFT]:
            self._rotate_target(camera, forward, camera.up, self.speed)
        if held[CameraAction.YAW_RIGHT]:
            self._rotate_target(camera, forward, camera.up, -self.speed)

        right = np.cross(forward_norm, camera.up)

        if held[CameraAction.PITCH_UP]:
            self._rotate_target(camera, forward, right, self.speed)
        if held[CameraAction.PITCH_DOWN]:
            self._rotate_target(camera, forward, right, -self.speed)

        if held[CameraAction.MOVE_UP]:
            camera.eye = camera.eye + camera.up * step
            camera.target = camera.target + camera.up * step
        if held[CameraAction.MOVE_DOWN]:
            camera.eye = camera.eye - camera.up * step
            camera.target = camera.target - camera.up * step

    @staticmethod
    def _rotate_target(camera: Camera, forward: np.ndarray, axis: np.ndarray, degrees: float):
        rotation = quaternion_from_axis_angle(axis, degrees)
        camera.target = camera.eye + quaternion_rotate_vector(rotation, forward)

    @classmethod
    def from_config(cls, config) -> 'CameraController':
        """Build a controller from the 'controller' and 'input' config sections."""
        action_map = ActionMap.from_config(config.get('input.bindings', {}) or {})
        return cls(config.get('controller.speed', 0.2), action_map)
