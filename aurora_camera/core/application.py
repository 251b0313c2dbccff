# aurora_camera/core/application.py

from typing import Optional, Union

from aurora_camera.core.config import Config
from aurora_camera.core.logging import get_logger
from aurora_camera.core.time import TimeManager
from aurora_camera.camera.camera import Camera
from aurora_camera.camera.camera_controller import CameraController
from aurora_camera.camera.camera_uniform import CameraUniform
from aurora_camera.input.input_recorder import InputRecorder
from aurora_camera.input.key_codes import KeyCode
from aurora_camera.rendering.shader import Shader


class CameraApplication:
    """
    Per-frame driver.
    Key events go to the controller; each frame moves the camera, rebuilds
    the uniform and hands it to the shader.

    step() runs a frame headless. run() opens a Panda3D window and drives
    step() from its task manager.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config(None)

        self.logger = get_logger()
        self.logger.set_level(self.config.get('engine.log_level', 'INFO'))
        self.logger.info("Initializing Aurora Camera")

        self.time = TimeManager()
        self.camera = Camera.from_config(self.config)
        self.controller = CameraController.from_config(self.config)
        self.uniform = CameraUniform()
        self.uniform.update_view_proj(self.camera)
        self.shader = Shader()
        self.recorder = InputRecorder()

        self.base = None
        self.running = False

    def key_event(self, key: Union[KeyCode, str], pressed: bool) -> bool:
        """Forward a key event to the controller. Returns True if it was consumed."""
        self.recorder.record_event(key, pressed)
        return self.controller.handle_key(key, pressed)

    def focus_lost(self):
        """Release held keys; their key-up events will never arrive."""
        self.controller.reset()

    def step(self) -> CameraUniform:
        """Run one frame: move the camera and refresh the uniform."""
        self.time.tick()
        self.controller.update_camera(self.camera)
        self.uniform.update_view_proj(self.camera)
        self.shader.set_camera_uniform(self.uniform)
        self.recorder.next_frame()
        return self.uniform

    def run(self, model: str = "models/environment"):
        """Open a Panda3D window and render until it is closed."""
        from panda3d.core import load_prc_file_data
        from direct.showbase.ShowBase import ShowBase
        from aurora_camera.input.panda_keys import bind_panda_keys

        width = self.config.get('rendering.width', 800)
        height = self.config.get('rendering.height', 600)
        title = self.config.get('rendering.title', 'Aurora Camera')
        load_prc_file_data("", f"""
            win-size {width} {height}
            window-title {title}
        """)

        self.logger.info("Starting application loop")
        self.base = ShowBase()
        self.base.disableMouse()

        scene = self.base.loader.loadModel(model)
        scene.reparentTo(self.base.render)

        try:
            self.shader.compile()
        except Exception as e:
            self.logger.critical(f"Initialization failed: {e}", exc_info=True)
            raise

        bind_panda_keys(self.base, self.key_event)
        self.base.accept('escape', self.quit)
        self.base.accept('window-event', self._on_window_event)
        self.base.taskMgr.add(self._frame_task, 'camera-frame')

        self.running = True
        self.base.run()

    def _on_window_event(self, window):
        if window is not None and not window.getProperties().getForeground():
            self.focus_lost()

    def _frame_task(self, task):
        try:
            self.step()
            self.shader.bind(self.base.render)
        except Exception as e:
            self.logger.error(f"Frame update failed: {e}", exc_info=True)

        if self.time.frame_count % 600 == 0:
            self.logger.debug(f"Frame {self.time.frame_count}: {self.time.fps:.1f} fps")
        return task.cont

    def quit(self):
        """Request application exit."""
        self.logger.info("Application quit requested")
        self.running = False
        if self.base is not None:
            self.base.userExit()
