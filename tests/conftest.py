# tests/conftest.py

import numpy as np
import pytest

from aurora_camera.camera.camera import Camera
from aurora_camera.camera.camera_controller import CameraController


@pytest.fixture
def camera():
    """Looks down -Z from (0, 0, 5) with up perpendicular to the view direction."""
    return Camera(eye=(0.0, 0.0, 5.0), target=(0.0, 0.0, 0.0), up=(0.0, 1.0, 0.0),
                  aspect=800 / 600, fovy=45.0, znear=0.1, zfar=100.0)


@pytest.fixture
def tilted_camera():
    """Default pose: up is not perpendicular to the view direction."""
    return Camera(eye=(0.0, 1.0, 2.0), target=(0.0, 0.0, 0.0), up=(0.0, 1.0, 0.0),
                  aspect=800 / 600, fovy=45.0, znear=0.1, zfar=100.0)


@pytest.fixture
def controller():
    return CameraController(speed=0.2)


def rodrigues(v, axis, degrees):
    """Reference axis-angle rotation for a unit axis."""
    k = np.asarray(axis, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    theta = np.radians(degrees)
    return (v * np.cos(theta) + np.cross(k, v) * np.sin(theta)
            + k * np.dot(k, v) * (1.0 - np.cos(theta)))
