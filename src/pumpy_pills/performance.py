"""
performance.py: FPS and frame-time jitter measurement for the debug overlay.
"""

import math
import statistics

from .constants import FPS_UPDATE_INTERVAL_MS, FRAME_HISTORY, HISTORY_RESET_MS
from .errors import ConfigError


class PerformanceMonitor:
    """Timestamps are milliseconds from any monotonic clock."""

    def __init__(self, update_interval: float = FPS_UPDATE_INTERVAL_MS,
                 history_size: int = FRAME_HISTORY,
                 reset_interval: float = HISTORY_RESET_MS):
        if history_size < 1:
            raise ConfigError(f"history_size must be at least 1, got {history_size}")
        self.update_interval = update_interval
        self.reset_interval = reset_interval
        self.enabled = True
        self.history = [0.0] * history_size
        self.reset()

    def reset(self):
        self.last_time = 0.0
        self.last_fps_update = 0.0
        self.last_reset_time = 0.0
        self._frame_time = 0.0
        self._fps = 0
        self._variance = 0.0
        self.frames = 0
        self.history_index = 0
        self.history = [0.0] * len(self.history)

    def start(self, timestamp: float):
        if not self.enabled:
            return
        self.last_time = timestamp
        self.last_fps_update = timestamp
        self.last_reset_time = timestamp

    def update(self, timestamp: float):
        if not self.enabled:
            return
        self._frame_time = timestamp - self.last_time

        if timestamp - self.last_reset_time >= self.reset_interval:
            self.history = [0.0] * len(self.history)
            self.history_index = 0
            self.last_reset_time = timestamp

        self.history[self.history_index] = self._frame_time
        self.history_index = (self.history_index + 1) % len(self.history)

        if all(math.isfinite(v) for v in self.history):
            self._variance = statistics.pstdev(self.history)
        else:
            self._variance = 0.0

        self.last_time = timestamp
        self.frames += 1

        elapsed = timestamp - self.last_fps_update
        if elapsed > 0 and elapsed >= self.update_interval:
            self._fps = round(self.frames * 1000 / elapsed)
            self.frames = 0
            self.last_fps_update = timestamp

    @property
    def fps(self) -> int:
        return self._fps if self.enabled else 0

    @property
    def frame_time(self) -> float:
        return self._frame_time if self.enabled else 0.0

    @property
    def frame_time_variance(self) -> float:
        return self._variance if self.enabled else 0.0

    def toggle(self, enabled: bool):
        self.enabled = enabled
