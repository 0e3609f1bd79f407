"""
difficulty.py: Level progression and the difficulty curve.

Speed, gap and spacing are pure functions of the level; the level advances
once enough obstacles have been passed.
"""

import logging

from .constants import (
    BASE_SPEED, SPEED_SLOPE, SPEED_CAP, BASE_GAP, GAP_SLOPE, MIN_GAP,
    BASE_SPACING, SPACING_SLOPE, MIN_SPACING,
    START_OBSTACLES_NEEDED, MAX_OBSTACLES_NEEDED, OBSTACLES_NEEDED_GROWTH
)
from .errors import ConfigError

logger = logging.getLogger(__name__)


class DifficultyManager:
    """Owns the level counter and derives the current tuning from it."""

    def __init__(self,
                 base_speed: float = BASE_SPEED,
                 speed_slope: float = SPEED_SLOPE,
                 speed_cap: float = SPEED_CAP,
                 base_gap: float = BASE_GAP,
                 gap_slope: float = GAP_SLOPE,
                 min_gap: float = MIN_GAP,
                 base_spacing: float = BASE_SPACING,
                 spacing_slope: float = SPACING_SLOPE,
                 min_spacing: float = MIN_SPACING):
        self.base_speed = base_speed
        self.speed_slope = speed_slope
        self.speed_cap = speed_cap
        self.base_gap = base_gap
        self.gap_slope = gap_slope
        self.min_gap = min_gap
        self.base_spacing = base_spacing
        self.spacing_slope = spacing_slope
        self.min_spacing = min_spacing
        self._validate()

        self.level = 1
        self.obstacles_in_level = 0
        self.obstacles_needed = START_OBSTACLES_NEEDED
        self.speed = base_speed
        self.pipe_gap = base_gap
        self.pipe_spacing = base_spacing
        self.reset()

    def _validate(self):
        if self.min_gap <= 0:
            raise ConfigError(f"min_gap must be positive, got {self.min_gap}")
        if self.min_spacing <= 0:
            raise ConfigError(f"min_spacing must be positive, got {self.min_spacing}")
        if self.speed_cap < self.base_speed:
            raise ConfigError(
                f"speed_cap ({self.speed_cap}) is below base_speed ({self.base_speed})")
        if min(self.speed_slope, self.gap_slope, self.spacing_slope) < 0:
            raise ConfigError("difficulty slopes must be non-negative")

    def reset(self):
        """Back to level 1."""
        self.level = 1
        self.obstacles_in_level = 0
        self.obstacles_needed = START_OBSTACLES_NEEDED
        self.update_difficulty()

    def update_difficulty(self):
        """Recompute speed, gap and spacing from the current level."""
        self.speed = min(self.speed_cap, self.base_speed + self.level * self.speed_slope)
        self.pipe_gap = max(self.min_gap, self.base_gap - self.level * self.gap_slope)
        self.pipe_spacing = max(self.min_spacing,
                                self.base_spacing - self.level * self.spacing_slope)

    def level_up(self) -> bool:
        """
        Count one passed obstacle. Returns True when this completed the level.
        """
        self.obstacles_in_level += 1
        if self.obstacles_in_level < self.obstacles_needed:
            return False

        self.level += 1
        self.obstacles_in_level = 0
        self.obstacles_needed = min(
            MAX_OBSTACLES_NEEDED,
            START_OBSTACLES_NEEDED + int(self.level * OBSTACLES_NEEDED_GROWTH))
        self.update_difficulty()
        logger.info("Level %d: speed=%.2f gap=%.0f spacing=%.0f (next in %d)",
                    self.level, self.speed, self.pipe_gap, self.pipe_spacing,
                    self.obstacles_needed)
        return True
