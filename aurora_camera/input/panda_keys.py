# aurora_camera/input/panda_keys.py

from typing import Callable, Dict, Optional, Tuple

from aurora_camera.input.key_codes import KeyCode

# Panda3D button names for the keys we know about
PANDA_KEY_NAMES: Dict[str, KeyCode] = {
    **{chr(c): KeyCode(f"Key{chr(c).upper()}") for c in range(ord('a'), ord('z') + 1)},
    'arrow_up': KeyCode.ArrowUp,
    'arrow_down': KeyCode.ArrowDown,
    'arrow_left': KeyCode.ArrowLeft,
    'arrow_right': KeyCode.ArrowRight,
    'space': KeyCode.Space,
    'escape': KeyCode.Escape,
    'enter': KeyCode.Enter,
    'tab': KeyCode.Tab,
    'lshift': KeyCode.ShiftLeft,
    'rshift': KeyCode.ShiftRight,
    'lcontrol': KeyCode.ControlLeft,
    'rcontrol': KeyCode.ControlRight,
}


def translate_event(event_name: str) -> Optional[Tuple[KeyCode, bool]]:
    """
    Turn a Panda3D keyboard event name into (key, pressed).
    'w' -> (KeyW, True), 'w-up' -> (KeyW, False), 'w-repeat' and unknown names -> None.
    """
    pressed = True
    name = event_name
    if name.endswith('-up'):
        name = name[:-3]
        pressed = False
    elif name.endswith('-repeat'):
        return None

    key = PANDA_KEY_NAMES.get(name)
    if key is None:
        return None
    return key, pressed


def bind_panda_keys(acceptor, on_key: Callable[[KeyCode, bool], bool]):
    """
    Register press, release and repeat handlers for every known key on a
    Panda3D DirectObject/ShowBase-like acceptor. Each event is routed through
    translate_event(); repeats are swallowed since a held key stays held.
    """
    def dispatch(event_name: str) -> bool:
        translated = translate_event(event_name)
        if translated is None:
            return False
        return on_key(*translated)

    for name in PANDA_KEY_NAMES:
        for event_name in (name, f"{name}-up", f"{name}-repeat"):
            acceptor.accept(event_name, dispatch, [event_name])
