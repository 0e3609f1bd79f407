"""
patterns.py: Obstacle pattern tags and their per-pattern parameters.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    STAIRCASE_STEP, WAVE_AMPLITUDE, WAVE_PERIOD, ZIGZAG_OFFSET, RHYTHM_OFFSET,
    NARROW_JITTER, STANDARD_JITTER, SURPRISE_CHANCE, SURPRISE_JITTER,
    NARROW_GAP_FACTOR
)


class Pattern(Enum):
    """Named rules governing how successive gap centers are computed."""
    STANDARD = "standard"    # Random walk with occasional surprises
    STAIRCASE = "staircase"  # Steady climb or descent
    WAVE = "wave"            # Smooth sine wave
    ZIGZAG = "zigzag"        # Sharp alternation around the center
    NARROW = "narrow"        # Random walk with a tighter gap
    RHYTHM = "rhythm"        # Center, high, low, repeat

    @property
    def params(self) -> "PatternParams":
        return PATTERN_PARAMS[self]

    @property
    def is_hard(self) -> bool:
        return PATTERN_PARAMS[self].hard

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class PatternParams:
    """Tuning for a single pattern. Unused fields stay at zero."""
    hard: bool = False
    step: float = 0.0            # staircase stride
    amplitude: float = 0.0       # wave height
    period: float = 1.0          # wave length, in obstacles
    offset: float = 0.0          # zigzag / rhythm distance from the center
    jitter: float = 0.0          # half-width of the random walk
    surprise_chance: float = 0.0
    surprise_jitter: float = 0.0
    gap_scale: float = 1.0       # multiplier on the difficulty gap


PATTERN_PARAMS = {
    Pattern.STANDARD: PatternParams(
        jitter=STANDARD_JITTER,
        surprise_chance=SURPRISE_CHANCE,
        surprise_jitter=SURPRISE_JITTER),
    Pattern.STAIRCASE: PatternParams(step=STAIRCASE_STEP),
    Pattern.WAVE: PatternParams(amplitude=WAVE_AMPLITUDE, period=WAVE_PERIOD),
    Pattern.ZIGZAG: PatternParams(hard=True, offset=ZIGZAG_OFFSET),
    Pattern.NARROW: PatternParams(
        hard=True, jitter=NARROW_JITTER, gap_scale=NARROW_GAP_FACTOR),
    Pattern.RHYTHM: PatternParams(offset=RHYTHM_OFFSET),
}

ALL_PATTERNS = tuple(Pattern)
HARD_PATTERNS = tuple(p for p in Pattern if p.is_hard)
FALLBACK_PATTERNS = (Pattern.STANDARD, Pattern.WAVE)
