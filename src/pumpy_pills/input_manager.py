"""
input_manager.py: Turns pygame keyboard, mouse and touch events into a single
debounced jump signal.
"""

import time
from typing import Callable, Optional

import pygame

from .characters import CharacterManager
from .constants import DEBOUNCE_MS, SCREEN_WIDTH, SCREEN_HEIGHT
from .game_state import GameState


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class InputManager:
    def __init__(self, game_state: GameState,
                 handle_jump: Callable[[], None],
                 character_manager: Optional[CharacterManager] = None,
                 debounce_ms: float = DEBOUNCE_MS,
                 clock: Callable[[], float] = _monotonic_ms,
                 screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        self.game_state = game_state
        self.handle_jump = handle_jump
        self.character_manager = character_manager
        self.debounce_ms = debounce_ms
        self.clock = clock
        self.screen_size = screen_size
        self.last_input_time: Optional[float] = None

    def handle_event(self, event) -> bool:
        """Returns True if the event produced a jump."""
        if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            return self.process_input()
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.process_input_with_position(*event.pos)
        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalised to 0..1
            width, height = self.screen_size
            return self.process_input_with_position(event.x * width, event.y * height)
        return False

    def process_input_with_position(self, x: float, y: float) -> bool:
        on_select_screen = self.game_state.is_start_screen or self.game_state.is_game_over
        if on_select_screen and self.character_manager is not None:
            if self.character_manager.handle_selection(x, y):
                return False
        return self.process_input()

    def process_input(self) -> bool:
        now = self.clock()
        if self.last_input_time is not None and now - self.last_input_time < self.debounce_ms:
            return False
        self.last_input_time = now
        self.handle_jump()
        return True
