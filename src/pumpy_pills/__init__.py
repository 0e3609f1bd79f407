"""
PUMPY PILLS: a trading-themed side-scroller.
"""

from .difficulty import DifficultyManager
from .engine import GameEngine
from .game_state import GameState, GameStatus
from .obstacles import ObstacleGenerator
from .patterns import Pattern
from .physics_core import Player

__version__ = "1.7.0"

__all__ = [
    "DifficultyManager",
    "GameEngine",
    "GameState",
    "GameStatus",
    "ObstacleGenerator",
    "Pattern",
    "Player",
]
