# tests/test_panda_keys.py

import pytest

from aurora_camera.camera.camera_controller import CameraController
from aurora_camera.input.action_map import CameraAction
from aurora_camera.input.key_codes import KeyCode
from aurora_camera.input.panda_keys import PANDA_KEY_NAMES, bind_panda_keys, translate_event


@pytest.mark.parametrize("event,expected", [
    ("w", (KeyCode.KeyW, True)),
    ("w-up", (KeyCode.KeyW, False)),
    ("arrow_left", (KeyCode.ArrowLeft, True)),
    ("arrow_down-up", (KeyCode.ArrowDown, False)),
    ("lshift", (KeyCode.ShiftLeft, True)),
    ("w-repeat", None),
    ("mouse1", None),
    ("f5", None),
])
def test_translate_event(event, expected):
    assert translate_event(event) == expected


class FakeAcceptor:
    """Stands in for ShowBase's accept()/messenger."""

    def __init__(self):
        self.hooks = {}

    def accept(self, event, method, extra_args=()):
        self.hooks[event] = (method, list(extra_args))

    def send(self, event):
        method, args = self.hooks[event]
        return method(*args)


def test_bind_registers_press_and_release():
    acceptor = FakeAcceptor()
    controller = CameraController(speed=0.2)
    bind_panda_keys(acceptor, controller.handle_key)

    assert len(acceptor.hooks) == 3 * len(PANDA_KEY_NAMES)
    assert acceptor.send("e") is True
    assert controller.is_active(CameraAction.MOVE_UP)
    assert acceptor.send("e-up") is True
    assert not controller.is_active(CameraAction.MOVE_UP)
    assert acceptor.send("space") is False


def test_repeat_events_do_not_reach_the_handler():
    acceptor = FakeAcceptor()
    received = []

    def on_key(key, pressed):
        received.append((key, pressed))
        return True

    bind_panda_keys(acceptor, on_key)
    acceptor.send("w")
    assert acceptor.send("w-repeat") is False
    acceptor.send("w-up")
    assert received == [(KeyCode.KeyW, True), (KeyCode.KeyW, False)]
