# aurora_camera/input/key_codes.py

from enum import Enum
from typing import Optional, Union


class KeyCode(Enum):
    """
    Physical key identifiers.
    Named after the key's position on a US layout, not the character it produces.
    """
    KeyA = "KeyA"
    KeyB = "KeyB"
    KeyC = "KeyC"
    KeyD = "KeyD"
    KeyE = "KeyE"
    KeyF = "KeyF"
    KeyG = "KeyG"
    KeyH = "KeyH"
    KeyI = "KeyI"
    KeyJ = "KeyJ"
    KeyK = "KeyK"
    KeyL = "KeyL"
    KeyM = "KeyM"
    KeyN = "KeyN"
    KeyO = "KeyO"
    KeyP = "KeyP"
    KeyQ = "KeyQ"
    KeyR = "KeyR"
    KeyS = "KeyS"
    KeyT = "KeyT"
    KeyU = "KeyU"
    KeyV = "KeyV"
    KeyW = "KeyW"
    KeyX = "KeyX"
    KeyY = "KeyY"
    KeyZ = "KeyZ"

    ArrowUp = "ArrowUp"
    ArrowDown = "ArrowDown"
    ArrowLeft = "ArrowLeft"
    ArrowRight = "ArrowRight"

    Space = "Space"
    Escape = "Escape"
    Enter = "Enter"
    Tab = "Tab"
    ShiftLeft = "ShiftLeft"
    ShiftRight = "ShiftRight"
    ControlLeft = "ControlLeft"
    ControlRight = "ControlRight"


def parse_key(key: Union[KeyCode, str]) -> Optional[KeyCode]:
    """Resolve a KeyCode or its name. Unknown names give None."""
    if isinstance(key, KeyCode):
        return key
    try:
        return KeyCode(key)
    except ValueError:
        return None
