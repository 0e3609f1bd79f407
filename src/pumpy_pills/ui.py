"""
ui.py: HUD text, start/game-over overlays and the debug FPS readout.
"""

from typing import Optional

import pygame

from .characters import CharacterManager
from .constants import (
    COLOR_BG, COLOR_MINT, COLOR_GREEN, COLOR_GRAY, COLOR_WHITE, COLOR_DANGER,
    COLOR_WARN, COLOR_SELECT
)
from .data_models import HudSnapshot
from .game_state import GameState
from .patterns import Pattern

TITLE = "PUMPY PILLS"

PATTERN_COLORS = {
    Pattern.STAIRCASE: (52, 211, 153),
    Pattern.WAVE: (110, 231, 183),
    Pattern.ZIGZAG: (167, 243, 208),
    Pattern.NARROW: (5, 150, 105),
}


class UIManager:
    def __init__(self, screen: pygame.Surface, game_state: GameState):
        pygame.font.init()
        self.screen = screen
        self.game_state = game_state
        self.fonts = {
            "title": pygame.font.Font(None, 64),
            "score": pygame.font.Font(None, 52),
            "large": pygame.font.Font(None, 44),
            "medium": pygame.font.Font(None, 26),
            "small": pygame.font.Font(None, 20),
            "mono": pygame.font.SysFont("monospace", 14),
        }

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    def _text(self, text: str, font: str, color, pos, align: str = "left"):
        surf = self.fonts[font].render(text, True, color)
        x, y = pos
        if align == "center":
            x -= surf.get_width() // 2
        self.screen.blit(surf, (int(x), int(y)))
        return surf

    def _overlay(self):
        shade = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        shade.fill((*COLOR_BG, 242))
        self.screen.blit(shade, (0, 0))

    def draw_loading_screen(self, progress: float):
        """progress is 0..100."""
        cx, cy = self.width // 2, self.height // 2
        self._text("Loading...", "large", COLOR_MINT, (cx, cy - 40), align="center")
        pygame.draw.rect(self.screen, (26, 31, 46), (cx - 100, cy, 200, 4))
        pygame.draw.rect(self.screen, COLOR_MINT, (cx - 100, cy, int(max(0, min(progress, 100)) * 2), 4))

    def draw_hud(self, hud: HudSnapshot):
        left = self.width * 0.02
        self._text(str(hud.score), "score", COLOR_MINT, (self.width / 2, self.height * 0.06), align="center")
        self._text("PUMPY/USD Live", "medium", COLOR_WHITE, (left, self.height * 0.02))

        gain = self.game_state.portfolio_gain_percent
        self._text(f"Portfolio: ${hud.portfolio_value:,.0f} ({gain:+.1f}%)", "small", COLOR_GREEN,
                   (left, self.height * 0.05))
        self._text(f"Level {hud.level} ({hud.obstacles_in_level}/{hud.obstacles_needed})", "small",
                   COLOR_MINT, (left, self.height * 0.08))
        self._text(f"Speed: {hud.speed:.1f}x | Gap: {round(hud.pipe_gap)}px", "small", COLOR_GRAY,
                   (left, self.height * 0.11))
        self._text(f"Pattern: {hud.current_pattern.label}", "small",
                   PATTERN_COLORS.get(hud.current_pattern, (134, 239, 172)), (left, self.height * 0.14))

    def draw_start_screen(self, characters: CharacterManager):
        self._overlay()
        cx, cy = self.width / 2, self.height / 2
        self._text(TITLE, "title", COLOR_MINT, (cx, cy - 120), align="center")
        self._text("Navigate the volatile crypto markets", "medium", COLOR_GRAY, (cx, cy - 66), align="center")
        self._text("Select your character:", "medium", COLOR_GRAY, (cx, cy - 36), align="center")
        self._text("SPACEBAR or CLICK to start trading", "medium", COLOR_MINT, (cx, cy + 40), align="center")
        self.draw_character_selection(characters)

    def draw_game_over_screen(self, hud: HudSnapshot, characters: CharacterManager):
        self._overlay()
        cx, cy = self.width / 2, self.height / 2
        self._text("POSITION LIQUIDATED", "large", COLOR_GREEN, (cx, cy - 100), align="center")
        self._text(f"Final Score: {hud.score}", "medium", COLOR_WHITE, (cx, cy - 44), align="center")
        self._text(f"Reached Level: {hud.level}", "medium", COLOR_WHITE, (cx, cy - 14), align="center")
        self._text(f"Portfolio: ${hud.portfolio_value:,.0f}", "medium", COLOR_MINT, (cx, cy + 16), align="center")
        self._text("SPACEBAR or CLICK to restart trading", "medium", COLOR_MINT, (cx, cy + 60), align="center")
        self.draw_character_selection(characters)

    def draw_character_selection(self, characters: CharacterManager):
        selected = characters.selected
        rects = characters.tile_rects()
        for character, rect in zip(characters.characters, rects):
            is_selected = character is selected
            tile = pygame.Surface(rect.size, pygame.SRCALPHA)
            tile.fill((0, 212, 255, 51) if is_selected else (30, 35, 41, 128))
            self.screen.blit(tile, rect.topleft)

            if character.loaded:
                self.screen.blit(character.image, character.image.get_rect(center=rect.center))
            else:
                inner = rect.inflate(-20, -20)
                pygame.draw.rect(self.screen, character.color, inner)
                pygame.draw.rect(self.screen, COLOR_WHITE, inner, width=2)

            if is_selected:
                pygame.draw.rect(self.screen, COLOR_SELECT, rect, width=2)

        if selected is not None and rects:
            self._text(f"Selected: {selected.name}", "small", (38, 166, 154),
                       (self.width / 2, rects[0].bottom + 30), align="center")

    def draw_debug_info(self, fps: int, frame_time: Optional[float] = None,
                        variance: Optional[float] = None):
        if fps <= 0:
            return
        x, y = self.width * 0.78, 10
        self._text(f"FPS: {fps}", "mono", (102, 102, 102), (x, y))
        if frame_time is not None:
            self._text(f"Frame: {frame_time:.1f}ms", "mono", (102, 102, 102), (x, y + 15))
        if variance is not None:
            color = (102, 102, 102)
            if variance > 5:
                color = COLOR_DANGER
            elif variance > 2:
                color = COLOR_WARN
            self._text(f"Jitter: {variance:.1f}ms", "mono", color, (x, y + 30))
