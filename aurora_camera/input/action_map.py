# aurora_camera/input/action_map.py

from enum import Enum
from typing import Dict, Mapping, Optional, Union

from aurora_camera.input.key_codes import KeyCode, parse_key
from aurora_camera.core.logging import get_logger

logger = get_logger()


class CameraAction(Enum):
    """The movement/rotation intents a camera controller understands."""
    FORWARD = "forward"
    BACKWARD = "backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    YAW_LEFT = "yaw_left"
    YAW_RIGHT = "yaw_right"
    PITCH_UP = "pitch_up"
    PITCH_DOWN = "pitch_down"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"


DEFAULT_BINDINGS: Dict[KeyCode, CameraAction] = {
    KeyCode.KeyW: CameraAction.FORWARD,
    KeyCode.KeyS: CameraAction.BACKWARD,
    KeyCode.KeyA: CameraAction.STRAFE_LEFT,
    KeyCode.KeyD: CameraAction.STRAFE_RIGHT,
    KeyCode.ArrowLeft: CameraAction.YAW_LEFT,
    KeyCode.ArrowRight: CameraAction.YAW_RIGHT,
    KeyCode.ArrowUp: CameraAction.PITCH_UP,
    KeyCode.ArrowDown: CameraAction.PITCH_DOWN,
    KeyCode.KeyE: CameraAction.MOVE_UP,
    KeyCode.KeyQ: CameraAction.MOVE_DOWN,
}


class ActionMap:
    """
    Maps physical keys to camera actions.
    One key per action; rebinding an action moves it to the new key.
    """

    def __init__(self, bindings: Optional[Mapping[KeyCode, CameraAction]] = None):
        self.bindings: Dict[KeyCode, CameraAction] = dict(
            DEFAULT_BINDINGS if bindings is None else bindings
        )

    def lookup(self, key: Union[KeyCode, str]) -> Optional[CameraAction]:
        """Action bound to a key, or None."""
        code = parse_key(key)
        if code is None:
            return None
        return self.bindings.get(code)

    def key_for(self, action: CameraAction) -> Optional[KeyCode]:
        """Key currently bound to an action, or None."""
        for key, bound in self.bindings.items():
            if bound is action:
                return key
        return None

    def bind(self, key: Union[KeyCode, str], action: Union[CameraAction, str]):
        """Bind a key to an action, replacing the action's previous key."""
        code = parse_key(key)
        if code is None:
            raise ValueError(f"Unknown key: {key!r}")
        try:
            action = CameraAction(action)
        except ValueError:
            raise ValueError(f"Unknown camera action: {action!r}") from None

        previous = self.key_for(action)
        if previous is not None:
            del self.bindings[previous]
        self.bindings[code] = action
        logger.debug(f"Bound {code.value} -> {action.value}")

    def unbind(self, key: Union[KeyCode, str]) -> bool:
        """Remove a key binding. Returns True if one existed."""
        code = parse_key(key)
        return self.bindings.pop(code, None) is not None

    @classmethod
    def from_config(cls, overrides: Mapping[str, str]) -> 'ActionMap':
        """
        Default bindings with overrides applied.
        Example: {"KeyZ": "forward"} moves FORWARD from W to Z.
        """
        action_map = cls()
        for key, action in overrides.items():
            action_map.bind(key, action)
        if overrides:
            logger.info(f"Loaded {len(overrides)} key binding override(s)")
        return action_map
