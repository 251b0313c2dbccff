# aurora_camera/rendering/shader.py

from pathlib import Path
from typing import Dict, Any

import numpy as np
from aurora_camera.camera.camera_uniform import CameraUniform
from aurora_camera.core.logging import get_logger

logger = get_logger()

SHADER_DIR = Path(__file__).parent / "shaders"


class Shader:
    """
    Shader program abstraction.
    Holds uniform values and pushes them onto a Panda3D NodePath when bound.
    """

    def __init__(self, name: str = "camera",
                 vertex_path: str = str(SHADER_DIR / "camera.vert"),
                 fragment_path: str = str(SHADER_DIR / "camera.frag")):
        self.name = name
        self.vertex_path = vertex_path
        self.fragment_path = fragment_path

        # Shader parameters
        self.uniforms: Dict[str, Any] = {}

        # Backend handle (Panda3D shader object)
        self._backend_shader = None

    def compile(self):
        """Compile shader from source files."""
        from panda3d.core import Shader as PandaShader

        self._backend_shader = PandaShader.load(
            PandaShader.SL_GLSL,
            vertex=self.vertex_path,
            fragment=self.fragment_path
        )
        if self._backend_shader is None:
            raise RuntimeError(f"Failed to compile shader '{self.name}'")
        logger.info(f"Compiled shader '{self.name}'")

    def set_uniform(self, name: str, value: Any):
        """Set shader uniform value."""
        self.uniforms[name] = value

    def set_camera_uniform(self, uniform: CameraUniform):
        """Store the camera's packed column-major matrix as the view_proj input."""
        self.set_uniform('view_proj', uniform.view_proj.copy())

    def bind(self, node_path):
        """Activate this shader on a NodePath and apply its uniforms."""
        if self._backend_shader is None:
            return

        node_path.setShader(self._backend_shader)
        for name, value in self.uniforms.items():
            node_path.setShaderInput(name, to_panda_value(value))


def to_panda_value(value: Any):
    """
    Convert numpy values to Panda3D shader inputs.
    4x4 arrays must already be column-major (row i = column i); Panda3D stores
    matrices row-major for row vectors, so the same 16 floats mean the same transform.
    """
    if isinstance(value, np.ndarray) and value.shape == (4, 4):
        from panda3d.core import LMatrix4f
        return LMatrix4f(*value.astype(np.float32).ravel().tolist())
    if isinstance(value, np.ndarray):
        return tuple(value.astype(np.float32).tolist())
    return value
