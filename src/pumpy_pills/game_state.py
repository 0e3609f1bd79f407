"""
game_state.py: The game's status, score and portfolio.
"""

import logging
import math
from enum import Enum, auto
from typing import Optional

from .constants import INITIAL_PORTFOLIO, PORTFOLIO_CAP, SCORE_LEVEL_FACTOR
from .difficulty import DifficultyManager

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    LOADING = auto()
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class GameState:
    """
    Mutable record of one session. The difficulty reference is read-only here:
    it only supplies the level multiplier for score increments.
    """

    def __init__(self):
        self.status = GameStatus.LOADING
        self.difficulty: Optional[DifficultyManager] = None
        self.selected_character_id: Optional[str] = None
        self.score = 0
        self.portfolio_value = INITIAL_PORTFOLIO
        self.world_x = 0.0
        self.scroll = 0.0
        self.reset()

    def reset(self):
        """New game numbers. The selected character survives between games."""
        self.score = 0
        self.portfolio_value = INITIAL_PORTFOLIO
        self.world_x = 0.0
        self.scroll = 0.0

    # State transitions
    def _transition(self, status: GameStatus):
        if status is not self.status:
            logger.debug("Game state %s -> %s", self.status.name, status.name)
        self.status = status

    def set_loading(self):
        self._transition(GameStatus.LOADING)

    def set_start(self):
        self._transition(GameStatus.START)

    def start_game(self):
        self._transition(GameStatus.PLAYING)

    def end_game(self):
        self._transition(GameStatus.GAME_OVER)

    @property
    def is_loading(self) -> bool:
        return self.status is GameStatus.LOADING

    @property
    def is_start_screen(self) -> bool:
        return self.status is GameStatus.START

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    @property
    def is_game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    # Score and portfolio
    def increment_score(self, amount: int = 1) -> int:
        """Adds amount scaled by the level multiplier, rounded up."""
        multiplier = 1.0
        if self.difficulty is not None:
            multiplier = 1 + self.difficulty.level * SCORE_LEVEL_FACTOR
        self.score += math.ceil(amount * multiplier)
        return self.score

    def update_portfolio(self, amount: float) -> float:
        self.portfolio_value = min(PORTFOLIO_CAP, self.portfolio_value + amount)
        return self.portfolio_value

    @property
    def portfolio_gain_percent(self) -> float:
        return (self.portfolio_value - INITIAL_PORTFOLIO) / INITIAL_PORTFOLIO * 100

    def update_world_x(self, amount: float) -> float:
        self.world_x += amount
        return self.world_x

    def update_scroll(self, amount: float) -> float:
        self.scroll += amount
        return self.scroll

    def set_selected_character(self, character_id: Optional[str]):
        self.selected_character_id = character_id

    def set_difficulty(self, difficulty: DifficultyManager):
        self.difficulty = difficulty
