# aurora_camera/utils/math.py

import numpy as np


# Maps OpenGL clip space (z in [-1, 1]) to WebGPU/Vulkan depth (z in [0, 1]).
OPENGL_TO_WGPU_MATRIX = np.array([
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 0.5, 0.5],
    [0.0, 0.0, 0.0, 1.0],
], dtype=np.float32)
OPENGL_TO_WGPU_MATRIX.setflags(write=False)


def vec3(x, y=None, z=None) -> np.ndarray:
    """Build a float32 3-vector from three scalars or any 3-element sequence."""
    if y is None and z is None:
        return np.array(x, dtype=np.float32).reshape(3)
    return np.array([x, y, z], dtype=np.float32)


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Normalize a vector.
    A zero-length input yields NaN components, like any unchecked division.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return (v / np.linalg.norm(v)).astype(np.float32)


def look_at_rh(eye: np.ndarray, target: np.ndarray, up: np.ndarray) -> np.ndarray:
    """
    Create a right-handed look-at view matrix.
    The camera looks down -Z in view space.
    """
    f = normalize(target - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)

    mat = np.eye(4, dtype=np.float32)
    mat[0, :3] = s
    mat[1, :3] = u
    mat[2, :3] = -f
    mat[:3, 3] = [-np.dot(s, eye), -np.dot(u, eye), np.dot(f, eye)]

    return mat


def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """
    Symmetric-frustum perspective projection (OpenGL clip space).
    fovy is in degrees.
    """
    f = 1.0 / np.tan(np.radians(fovy) / 2.0)

    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (zfar + znear) / (znear - zfar)
    proj[2, 3] = (2.0 * zfar * znear) / (znear - zfar)
    proj[3, 2] = -1.0

    return proj


def quaternion_from_axis_angle(axis: np.ndarray, degrees: float) -> np.ndarray:
    """
    Quaternion [x, y, z, w] rotating by `degrees` around `axis`.
    The axis is used as given; pass a unit vector for a pure rotation.
    """
    half = np.radians(degrees) * 0.5
    s = np.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, np.cos(half)], dtype=np.float32)


def quaternion_rotate_vector(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate a 3-vector by quaternion [x, y, z, w]."""
    qv = q[:3]
    tmp = np.cross(qv, v) + v * q[3]
    return (np.cross(qv, tmp) * 2.0 + v).astype(np.float32)


def column_major(mat: np.ndarray) -> np.ndarray:
    """Return a contiguous float32 copy whose rows are the columns of `mat`."""
    return np.ascontiguousarray(np.asarray(mat, dtype=np.float32).T)
