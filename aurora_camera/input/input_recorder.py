# aurora_camera/input/input_recorder.py

import struct
from typing import List, Union

from aurora_camera.input.key_codes import KeyCode
from aurora_camera.core.logging import get_logger

logger = get_logger()

_HEADER = struct.Struct('<I')
_EVENT = struct.Struct('<IBH')


class RecordingError(Exception):
    """Raised when a recording file is truncated or malformed."""


class KeyEvent:
    """A key press/release tagged with the frame it arrived in."""

    __slots__ = ('frame', 'key', 'pressed')

    def __init__(self, frame: int, key: str, pressed: bool):
        self.frame = frame
        self.key = key
        self.pressed = pressed

    def __eq__(self, other):
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return (self.frame, self.key, self.pressed) == (other.frame, other.key, other.pressed)

    def __repr__(self):
        return f"KeyEvent(frame={self.frame}, key={self.key!r}, pressed={self.pressed})"


class InputRecorder:
    """
    Records and plays back key events frame by frame.
    Useful for:
    - Reproducing camera motion bugs
    - Demo fly-throughs
    - Regression tests
    """

    def __init__(self):
        self.recording = False
        self.events: List[KeyEvent] = []
        self.frame_count = 0

    def start_recording(self):
        """Start recording input."""
        self.recording = True
        self.events.clear()
        self.frame_count = 0
        logger.info("Started input recording")

    def stop_recording(self):
        """Stop recording input."""
        self.recording = False
        # Close a frame that received events but was never ended
        if self.events and self.events[-1].frame >= self.frame_count:
            self.frame_count += 1
        logger.info(f"Stopped input recording. Recorded {len(self.events)} events "
                    f"over {self.frame_count} frames.")

    def record_event(self, key: Union[KeyCode, str], pressed: bool):
        """Record a key event in the current frame."""
        if not self.recording:
            return
        name = key.value if isinstance(key, KeyCode) else str(key)
        self.events.append(KeyEvent(self.frame_count, name, bool(pressed)))

    def next_frame(self):
        """Mark the end of a frame."""
        if self.recording:
            self.frame_count += 1

    def replay(self, controller, camera) -> int:
        """
        Feed recorded events into a controller, updating the camera once per frame.
        Returns the number of frames replayed.
        """
        index = 0
        for frame in range(self.frame_count):
            while index < len(self.events) and self.events[index].frame == frame:
                event = self.events[index]
                controller.handle_key(event.key, event.pressed)
                index += 1
            controller.update_camera(camera)
        return self.frame_count

    def save_to_file(self, filepath: str):
        """Save recorded events to file."""
        with open(filepath, 'wb') as f:
            f.write(_HEADER.pack(self.frame_count))
            f.write(_HEADER.pack(len(self.events)))
            for event in self.events:
                name = event.key.encode('utf-8')
                f.write(_EVENT.pack(event.frame, int(event.pressed), len(name)))
                f.write(name)
        logger.info(f"Saved input recording to {filepath}")

    def load_from_file(self, filepath: str):
        """Load recorded events from file."""
        with open(filepath, 'rb') as f:
            data = f.read()

        try:
            frame_count, = _HEADER.unpack_from(data, 0)
            num_events, = _HEADER.unpack_from(data, _HEADER.size)
            offset = _HEADER.size * 2

            events = []
            for _ in range(num_events):
                frame, pressed, name_len = _EVENT.unpack_from(data, offset)
                offset += _EVENT.size
                name_bytes = data[offset:offset + name_len]
                if len(name_bytes) != name_len:
                    raise RecordingError(f"Truncated key name at byte {offset}")
                offset += name_len
                events.append(KeyEvent(frame, name_bytes.decode('utf-8'), bool(pressed)))
        except (struct.error, UnicodeDecodeError) as e:
            raise RecordingError(f"Corrupt input recording {filepath}: {e}") from e

        if any(event.frame >= frame_count for event in events):
            raise RecordingError(f"Event frame out of range in {filepath}")
        # replay() walks events in a single pass
        if any(a.frame > b.frame for a, b in zip(events, events[1:])):
            raise RecordingError(f"Events are not in frame order in {filepath}")

        self.events = events
        self.frame_count = frame_count
        self.recording = False
        logger.info(f"Loaded input recording from {filepath} ({len(self.events)} events)")
