"""
obstacles.py: Procedural obstacle generation, scrolling, pruning and collision.

Gap centers follow a pattern state machine. Every obstacle leaves the
generator with 0 <= top < bottom <= canvas_height and a gap of at least
min_gap; anything else is a logic error.
"""

import logging
import math
import random
from collections import deque
from typing import Deque, List, Optional

from .constants import (
    SCREEN_HEIGHT, OBSTACLE_WIDTH, MIN_GAP, EDGE_MARGIN, PRUNE_MARGIN,
    RUG_ADJUSTMENT, JITTER_MAX, PATTERN_SWITCH_MIN, PATTERN_SWITCH_MAX,
    MAX_SWITCH_ATTEMPTS, EDGE_BOUNDARY, NARROW_SAFETY_BUFFER, PATTERN_HISTORY,
    BREATHER_CHANCE, BREATHER_FACTOR, PLAYER_RADIUS, COLLISION_FORGIVENESS
)
from .data_models import Obstacle
from .errors import ConfigError, ObstacleInvariantError
from .patterns import Pattern, ALL_PATTERNS, FALLBACK_PATTERNS
from .physics_core import Player, check_collision

logger = logging.getLogger(__name__)


def validate_canvas(canvas_height: float, min_gap: float = MIN_GAP,
                    edge_margin: float = EDGE_MARGIN,
                    canvas_width: Optional[float] = None):
    """Fail fast on a canvas that cannot hold a legal gap."""
    if canvas_width is not None and canvas_width <= 0:
        raise ConfigError(f"canvas_width must be positive, got {canvas_width}")
    if min_gap <= 0:
        raise ConfigError(f"min_gap must be positive, got {min_gap}")
    if min_gap > canvas_height:
        raise ConfigError(
            f"min_gap ({min_gap}) does not fit in canvas_height ({canvas_height})")
    if 2 * edge_margin > canvas_height:
        raise ConfigError(
            f"edge_margin ({edge_margin}) leaves no room in canvas_height ({canvas_height})")


class ObstacleGenerator:
    """
    Maintains the ordered obstacle sequence (oldest first) and the pattern session.
    """

    def __init__(self, pipe_gap: float, pipe_spacing: float,
                 canvas_height: float = SCREEN_HEIGHT,
                 rng: Optional[random.Random] = None,
                 min_gap: float = MIN_GAP,
                 obstacle_width: float = OBSTACLE_WIDTH,
                 edge_margin: float = EDGE_MARGIN):
        validate_canvas(canvas_height, min_gap, edge_margin)
        self.rng = rng or random.Random()
        self.min_gap = min_gap
        self.obstacle_width = obstacle_width
        self.edge_margin = edge_margin

        self.obstacles: List[Obstacle] = []
        self.canvas_height = canvas_height
        self.pipe_gap = pipe_gap
        self.pipe_spacing = pipe_spacing
        self.last_gap_center = canvas_height / 2

        self.current_pattern = Pattern.STANDARD
        self.pattern_step = 0
        self.pattern_direction = 1  # +1 moves down the screen, -1 up
        self.obstacle_count = 0
        self.next_switch_at = 0
        self.pattern_history: Deque[Pattern] = deque(maxlen=PATTERN_HISTORY)

    def reset(self, canvas_height: float, pipe_gap: float, pipe_spacing: float):
        """Empty the sequence and restart the pattern session."""
        validate_canvas(canvas_height, self.min_gap, self.edge_margin)
        self.obstacles = []
        self.canvas_height = canvas_height
        self.pipe_gap = pipe_gap
        self.pipe_spacing = pipe_spacing
        self.last_gap_center = canvas_height / 2
        self.current_pattern = Pattern.STANDARD
        self.pattern_step = 0
        self.pattern_direction = self.rng.choice((1, -1))
        self.obstacle_count = 0
        self.next_switch_at = 0
        self.pattern_history.clear()

    def update_difficulty(self, pipe_gap: float, pipe_spacing: float):
        """Take new tuning from the difficulty manager; affects future spawns only."""
        self.pipe_gap = pipe_gap
        self.pipe_spacing = pipe_spacing

    # ---------- Pattern state machine ----------

    def switch_pattern(self) -> Pattern:
        """
        Pick a different pattern. Never two hard patterns in a row, and the
        retry loop is bounded with a guaranteed-safe fallback.
        """
        candidates = list(ALL_PATTERNS)
        if self.current_pattern.is_hard:
            candidates = [p for p in candidates if not p.is_hard]

        for _ in range(MAX_SWITCH_ATTEMPTS):
            new_pattern = self.rng.choice(candidates)
            if new_pattern is not self.current_pattern:
                break
        else:
            fallback = [p for p in FALLBACK_PATTERNS if p is not self.current_pattern]
            new_pattern = self.rng.choice(fallback)

        logger.debug("Switching pattern %s -> %s after %d obstacles",
                     self.current_pattern.value, new_pattern.value, self.obstacle_count)
        self.current_pattern = new_pattern
        self.pattern_history.append(new_pattern)
        self.pattern_step = 0
        self.pattern_direction = self.rng.choice((1, -1))
        self.next_switch_at = self.obstacle_count + self.rng.randint(
            PATTERN_SWITCH_MIN, PATTERN_SWITCH_MAX)
        return new_pattern

    def calculate_gap_center(self) -> float:
        """Unclamped gap center for the next obstacle under the current pattern."""
        params = self.current_pattern.params
        middle = self.canvas_height / 2

        if self.current_pattern is Pattern.STAIRCASE:
            center = self.last_gap_center + self.pattern_direction * params.step
            boundary = self.edge_boundary
            if center < boundary or center > self.canvas_height - boundary:
                self.pattern_direction *= -1
            return center

        if self.current_pattern is Pattern.WAVE:
            return middle + params.amplitude * math.sin(
                self.pattern_step * math.pi / params.period)

        if self.current_pattern is Pattern.ZIGZAG:
            if self.pattern_step % 2 == 0:
                return middle - params.offset
            return middle + params.offset

        if self.current_pattern is Pattern.RHYTHM:
            phase = self.pattern_step % 3
            if phase == 0:
                return middle
            if phase == 1:
                return middle - params.offset
            return middle + params.offset

        # STANDARD and NARROW: random walk from the previous gap
        center = self.last_gap_center + self.rng.uniform(-params.jitter, params.jitter)
        if params.surprise_chance and self.rng.random() < params.surprise_chance:
            center += self.rng.uniform(-params.surprise_jitter, params.surprise_jitter)
        return center

    def calculate_gap_size(self) -> float:
        """Final gap size, never below min_gap and never taller than the canvas."""
        params = self.current_pattern.params
        gap = self.pipe_gap
        if params.gap_scale < 1.0:
            gap = max(gap * params.gap_scale, self.min_gap + NARROW_SAFETY_BUFFER)
        elif self.rng.random() < BREATHER_CHANCE:
            gap = gap * BREATHER_FACTOR

        gap = max(gap - RUG_ADJUSTMENT, self.min_gap)
        # Whole pixels keep top + gap exact
        gap = float(math.ceil(gap))
        return min(gap, float(self.canvas_height))

    @property
    def edge_boundary(self) -> float:
        """Staircase turning distance, shrunk on short canvases so it leaves a band to walk."""
        return min(EDGE_BOUNDARY, self.canvas_height / 4)

    def clamp_gap_center(self, center: float, gap: float) -> float:
        """Keep the whole gap, and at least edge_margin, inside the canvas."""
        half = max(gap / 2, self.edge_margin)
        return max(half, min(self.canvas_height - half, center))

    def generate_obstacle(self, x: float) -> Obstacle:
        if self.obstacle_count >= self.next_switch_at:
            self.switch_pattern()

        raw_center = self.calculate_gap_center()
        gap = self.calculate_gap_size()
        center = self.clamp_gap_center(raw_center, gap)

        top = float(math.floor(center - gap / 2))
        top = max(0.0, min(top, self.canvas_height - gap))
        bottom = top + gap
        self._check_invariants(top, bottom)

        obstacle = Obstacle(
            x=float(x),
            top=top,
            bottom=bottom,
            type=self.current_pattern,
            top_jitter=self.rng.randrange(JITTER_MAX),
            bottom_jitter=self.rng.randrange(JITTER_MAX),
        )

        self.last_gap_center = center
        self.obstacle_count += 1
        self.pattern_step += 1
        logger.debug("Spawned %s obstacle #%d: top=%.0f bottom=%.0f",
                     obstacle.type.value, self.obstacle_count, top, bottom)
        return obstacle

    def _check_invariants(self, top: float, bottom: float):
        if not (0 <= top < bottom <= self.canvas_height):
            raise ObstacleInvariantError(
                f"gap [{top}, {bottom}] outside canvas 0..{self.canvas_height}")
        if bottom - top < self.min_gap:
            raise ObstacleInvariantError(
                f"gap {bottom - top} smaller than min_gap {self.min_gap}")

    # ---------- Per-tick update ----------

    def update(self, speed: float, canvas_width: float):
        """Scroll, spawn at the right edge when spacing allows, prune from the left."""
        for obstacle in self.obstacles:
            obstacle.x -= speed

        if not self.obstacles or self.obstacles[-1].x <= canvas_width - self.pipe_spacing:
            self.obstacles.append(self.generate_obstacle(canvas_width))

        while self.obstacles and self.obstacles[0].x + self.obstacle_width < -PRUNE_MARGIN:
            self.obstacles.pop(0)

    def check_collision(self, player: Player,
                        radius: float = PLAYER_RADIUS) -> bool:
        """True when the player's forgiving bounding box hits any barrier."""
        hit = check_collision(player.x, player.y, radius * COLLISION_FORGIVENESS,
                              self.obstacles, self.obstacle_width)
        return hit is not None
