# aurora_camera/core/time.py

import time


class TimeManager:
    """
    Frame timing.
    Tracks delta time, frame count and a rolling fps average.
    """

    def __init__(self, fps_sample_count: int = 60):
        self.delta_time = 0.0
        self.frame_count = 0

        self._last_frame_time = time.perf_counter()

        # FPS tracking
        self._fps_samples = []
        self._fps_sample_count = fps_sample_count
        self.fps = 0.0

    def tick(self) -> float:
        """
        Call once per frame.
        Returns frame delta time.
        """
        current_time = time.perf_counter()
        self.delta_time = current_time - self._last_frame_time
        self._last_frame_time = current_time

        self._fps_samples.append(self.delta_time)
        if len(self._fps_samples) > self._fps_sample_count:
            self._fps_samples.pop(0)

        avg_delta = sum(self._fps_samples) / len(self._fps_samples)
        self.fps = 1.0 / avg_delta if avg_delta > 0 else 0.0

        self.frame_count += 1
        return self.delta_time
