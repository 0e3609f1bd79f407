"""
engine.py: The authoritative single-player simulation.

Owns every piece of core state and advances it one tick at a time. The host
calls request_jump() for input and tick() once per simulation step.
"""

import logging
import random
from typing import Optional

from .chart import ChartTrail
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_X, PLAYER_RADIUS,
    GRAVITY, MAX_FALL, JUMP_STRENGTH, PORTFOLIO_GAIN,
    COLOR_MINT, COLOR_GREEN, COLOR_DANGER, COLOR_WHITE
)
from .data_models import HudSnapshot
from .difficulty import DifficultyManager
from .game_state import GameState, GameStatus
from .obstacles import ObstacleGenerator, validate_canvas
from .particles import Particles
from .physics_core import Player, out_of_bounds

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Lifecycle: construct, reset() per game, tick() per step, dispose() at shutdown.
    """

    def __init__(self, seed: Optional[int] = None,
                 screen_width: float = SCREEN_WIDTH,
                 screen_height: float = SCREEN_HEIGHT,
                 difficulty: Optional[DifficultyManager] = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.difficulty = difficulty or DifficultyManager()
        validate_canvas(screen_height, self.difficulty.min_gap, canvas_width=screen_width)
        self.obstacles = ObstacleGenerator(
            self.difficulty.pipe_gap, self.difficulty.pipe_spacing,
            canvas_height=screen_height, rng=self.rng,
            min_gap=self.difficulty.min_gap)
        self.player = Player(x=PLAYER_X, y=screen_height / 2)
        self.chart = ChartTrail(canvas_height=screen_height)
        self.particles = Particles(rng=self.rng)
        self.state = GameState()
        self.state.set_difficulty(self.difficulty)

        self.tick_count = 0
        self.jump_requested = False
        self.disposed = False
        logger.debug("Engine created with seed %d", self.seed)

    # ---------- Lifecycle ----------

    def reset(self):
        """Fresh game: level 1, empty sky, player at the spawn point."""
        self.difficulty.reset()
        self.obstacles.reset(self.screen_height,
                             self.difficulty.pipe_gap, self.difficulty.pipe_spacing)
        self.player.reset(PLAYER_X, self.screen_height / 2)
        self.chart.reset()
        self.particles.reset()
        self.state.reset()
        self.tick_count = 0
        self.jump_requested = False

    def finish_loading(self):
        """Assets are ready; show the start screen."""
        if self.state.is_loading:
            self.state.set_start()

    def dispose(self):
        self.obstacles.obstacles = []
        self.chart.reset()
        self.particles.reset()
        self.disposed = True
        logger.debug("Engine disposed after %d ticks", self.tick_count)

    # ---------- Input ----------

    def request_jump(self):
        """Jump, start or restart depending on the current status. Consumed by the next tick."""
        self.jump_requested = True

    def start_game(self):
        self.reset()
        self.state.start_game()
        self._jump()
        logger.info("Game started (seed %d)", self.seed)

    def _jump(self):
        self.player.jump(JUMP_STRENGTH)
        self.particles.burst(self.player.x, self.player.y + PLAYER_RADIUS, COLOR_WHITE, count=2)

    # ---------- Simulation ----------

    def tick(self) -> GameStatus:
        """Advance one step and return the resulting status."""
        if self.disposed:
            raise RuntimeError("tick() called on a disposed engine")

        jump = self.jump_requested
        self.jump_requested = False

        if self.state.status in (GameStatus.START, GameStatus.GAME_OVER):
            if jump:
                self.start_game()
        elif self.state.is_playing:
            self._step_playing(jump)

        self.particles.update()
        return self.state.status

    def _step_playing(self, jump: bool):
        self.tick_count += 1
        speed = self.difficulty.speed

        # 1. Player
        if jump:
            self._jump()
        self.player.update(GRAVITY, MAX_FALL)

        # 2. World
        self.obstacles.update(speed, self.screen_width)
        world_x = self.state.update_world_x(speed)
        self.state.update_scroll(speed)
        self.chart.update(world_x, self.player.y)

        # 3. Collisions
        if (self.obstacles.check_collision(self.player) or
                out_of_bounds(self.player.y, PLAYER_RADIUS, self.screen_height)):
            self._game_over()
            return

        # 4. Score obstacles the player has fully cleared
        for obstacle in self.obstacles.obstacles:
            if obstacle.scored:
                continue
            if obstacle.x + self.obstacles.obstacle_width < self.player.x - PLAYER_RADIUS:
                obstacle.scored = True
                self._score_obstacle()

    def _score_obstacle(self):
        self.state.increment_score()
        self.state.update_portfolio(PORTFOLIO_GAIN * self.difficulty.level)
        self.particles.burst(self.player.x, self.player.y, COLOR_GREEN)

        if self.difficulty.level_up():
            self.obstacles.update_difficulty(self.difficulty.pipe_gap,
                                             self.difficulty.pipe_spacing)
            self.particles.burst(self.player.x, self.player.y, COLOR_MINT, count=6)

    def _game_over(self):
        self.state.end_game()
        self.particles.burst(self.player.x, self.player.y, COLOR_DANGER, count=8)
        logger.info("Position liquidated: score=%d level=%d portfolio=%.0f",
                    self.state.score, self.difficulty.level, self.state.portfolio_value)

    # ---------- Read-only views ----------

    def hud_snapshot(self) -> HudSnapshot:
        return HudSnapshot(
            score=self.state.score,
            portfolio_value=self.state.portfolio_value,
            level=self.difficulty.level,
            obstacles_in_level=self.difficulty.obstacles_in_level,
            obstacles_needed=self.difficulty.obstacles_needed,
            speed=self.difficulty.speed,
            pipe_gap=self.difficulty.pipe_gap,
            current_pattern=self.obstacles.current_pattern,
        )
