"""
characters.py: Character roster and the selection tiles on the start/game-over screens.
"""

import logging
import os
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CHARACTER_TILE, CHARACTER_STRIDE,
    CHARACTER_OFFSET_START, CHARACTER_OFFSET_GAMEOVER
)
from .data_models import Character
from .game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_CHARACTERS = (
    Character("Bull", (76, 175, 80)),
    Character("Bear", (229, 115, 115)),
    Character("Whale", (66, 165, 245)),
    Character("Ape", (255, 193, 7)),
)


def roster_from_dir(assets_dir: str) -> List[Character]:
    """Default roster with sprites looked up as <assets_dir>/<name>.png."""
    return [
        replace(c, image_path=os.path.join(assets_dir, f"{c.name.lower()}.png"))
        for c in DEFAULT_CHARACTERS
    ]


class CharacterManager:
    def __init__(self, characters: Sequence[Character] = DEFAULT_CHARACTERS,
                 game_state: Optional[GameState] = None,
                 screen_width: float = SCREEN_WIDTH,
                 screen_height: float = SCREEN_HEIGHT):
        self.characters: List[Character] = [replace(c) for c in characters]
        self.game_state = game_state
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._selected: Optional[Character] = None

        if self.characters:
            self._select(self.characters[0])
        else:
            logger.error("CharacterManager: no characters provided")

    def _select(self, character: Character):
        self._selected = character
        if self.game_state is not None:
            self.game_state.set_selected_character(character.name)

    @property
    def selected(self) -> Optional[Character]:
        if self._selected is None and self.characters:
            self._select(self.characters[0])
        return self._selected

    def load_images(self, size: int = 36, on_progress: Optional[Callable[[int, int], None]] = None):
        """Load sprites; any character whose image fails keeps its coloured square."""
        total = len(self.characters)
        for done, character in enumerate(self.characters, start=1):
            if character.image_path:
                try:
                    image = pygame.image.load(character.image_path)
                    character.image = pygame.transform.smoothscale(image, (size, size))
                except (pygame.error, FileNotFoundError) as e:
                    logger.warning("Using fallback square for %s: %s", character.name, e)
            if on_progress is not None:
                on_progress(done, total)

    def tiles_top(self) -> float:
        game_over = self.game_state is not None and self.game_state.is_game_over
        offset = CHARACTER_OFFSET_GAMEOVER if game_over else CHARACTER_OFFSET_START
        return self.screen_height / 2 + offset

    def tile_rects(self) -> List[pygame.Rect]:
        top = self.tiles_top()
        start_x = self.screen_width / 2 - (len(self.characters) * CHARACTER_STRIDE) / 2
        return [
            pygame.Rect(int(start_x + i * CHARACTER_STRIDE), int(top),
                        CHARACTER_TILE, CHARACTER_TILE)
            for i in range(len(self.characters))
        ]

    def handle_selection(self, x: float, y: float) -> bool:
        """Returns True only when a click changed the selection."""
        for character, rect in zip(self.characters, self.tile_rects()):
            if rect.left <= x <= rect.right and rect.top <= y <= rect.bottom:
                if character is self._selected:
                    return False
                self._select(character)
                logger.info("Selected character: %s", character.name)
                return True
        return False
