"""
data_models.py: Data structures shared by the simulation core and its collaborators.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .patterns import Pattern


@dataclass
class Obstacle:
    """A paired top/bottom barrier with a navigable gap between top and bottom."""
    x: float
    top: float
    bottom: float
    type: Pattern = Pattern.STANDARD
    scored: bool = False

    # Decorative only, never part of the collision box
    top_jitter: int = 0
    bottom_jitter: int = 0

    @property
    def gap(self) -> float:
        return self.bottom - self.top

    @property
    def gap_center(self) -> float:
        return (self.top + self.bottom) / 2


@dataclass
class Candle:
    """One candle of the chart trail. Screen coordinates, so "high" is the smaller y."""
    x: float
    open: float
    close: float
    high: float
    low: float

    @property
    def bullish(self) -> bool:
        # Moving up the screen means the price went up
        return self.close < self.open


@dataclass
class Character:
    """A selectable player skin."""
    name: str
    color: Tuple[int, int, int]
    image_path: Optional[str] = None
    image: Any = field(default=None, repr=False)  # pygame.Surface once loaded

    @property
    def loaded(self) -> bool:
        return self.image is not None


@dataclass(frozen=True)
class HudSnapshot:
    """Read-only values the UI needs for one frame of HUD text."""
    score: int
    portfolio_value: float
    level: int
    obstacles_in_level: int
    obstacles_needed: int
    speed: float
    pipe_gap: float
    current_pattern: Pattern
