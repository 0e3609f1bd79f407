"""
renderer.py: Draws the world (rugs, chart trail, particles, player) with pygame.
"""

import colorsys
import math
from typing import Optional, Tuple

import pygame

from .constants import (
    COLOR_BG, COLOR_WHITE, COLOR_MINT, COLOR_CANDLE_UP, COLOR_CANDLE_DOWN, PLAYER_RADIUS,
    PARTICLE_RADIUS
)
from .data_models import Character, Obstacle
from .engine import GameEngine
from .patterns import Pattern

# Hue shift per pattern so each rug style reads differently
PATTERN_HUE = {
    Pattern.STANDARD: 0,
    Pattern.STAIRCASE: 30,
    Pattern.RHYTHM: 120,
    Pattern.ZIGZAG: 90,
    Pattern.WAVE: 180,
    Pattern.NARROW: 270,
}


def hsl(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return int(r * 255), int(g * 255), int(b * 255)


FRINGE_COUNT = 10
FRINGE_HEIGHT = 3
MOTIF_SIZE = 15


def _diamond(surface, color, cx: float, cy: float, half: float):
    pygame.draw.polygon(surface, color, [
        (cx, cy - half), (cx + half, cy), (cx, cy + half), (cx - half, cy)])


def _tribal(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    color = hsl(hue + 30, 0.50, 0.40)
    for y in range(rect.top, rect.bottom, MOTIF_SIZE * 2):
        for x in range(rect.left, rect.right, MOTIF_SIZE * 2):
            _diamond(surface, color, x + MOTIF_SIZE / 2, y + MOTIF_SIZE / 2, MOTIF_SIZE / 2)


def _oriental(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    color = hsl(hue + 60, 0.45, 0.40)
    for y in range(rect.top + MOTIF_SIZE, rect.bottom, MOTIF_SIZE * 3):
        pygame.draw.circle(surface, color, (rect.centerx, y), MOTIF_SIZE // 2 + 2, 2)
        pygame.draw.circle(surface, color, (rect.centerx, y), 2)


def _chevron(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    color = hsl(hue + 90, 0.50, 0.45)
    for y in range(rect.top, rect.bottom, MOTIF_SIZE):
        points = []
        for i, x in enumerate(range(rect.left, rect.right + MOTIF_SIZE, MOTIF_SIZE)):
            points.append((x, y + (MOTIF_SIZE // 2 if i % 2 else 0)))
        pygame.draw.lines(surface, color, False, points, 2)


def _persian(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    color = hsl(hue + 180, 0.40, 0.40)
    inner = rect.inflate(-10, -10)
    if inner.width > 0 and inner.height > 0:
        pygame.draw.rect(surface, color, inner, width=1)
    _diamond(surface, color, rect.centerx, rect.centery, min(rect.width, rect.height) / 3)


def _kilim(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    for i, y in enumerate(range(rect.top, rect.bottom, MOTIF_SIZE // 2)):
        color = hsl(hue + (120 if i % 2 else 30), 0.45, 0.30 if i % 2 else 0.40)
        pygame.draw.rect(surface, color, (rect.left, y, rect.width, MOTIF_SIZE // 4))


def _simple_diamond(surface: pygame.Surface, rect: pygame.Rect, hue: float):
    color = hsl(hue, 0.50, 0.45)
    for y in range(rect.top + MOTIF_SIZE, rect.bottom, MOTIF_SIZE * 2):
        _diamond(surface, color, rect.centerx, y, MOTIF_SIZE / 3)


# One woven motif per pattern so each run of rugs reads differently
RUG_MOTIFS = {
    Pattern.STANDARD: _simple_diamond,
    Pattern.STAIRCASE: _tribal,
    Pattern.WAVE: _oriental,
    Pattern.ZIGZAG: _chevron,
    Pattern.NARROW: _persian,
    Pattern.RHYTHM: _kilim,
}


class Renderer:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen

    def draw_world(self, engine: GameEngine, character: Optional[Character]):
        self.screen.fill(COLOR_BG)
        self.draw_chart(engine)
        self.draw_obstacles(engine)
        self.draw_particles(engine)
        self.draw_player(engine, character)

    def draw_obstacles(self, engine: GameEngine):
        width = engine.obstacles.obstacle_width
        height = engine.screen_height
        base_hue = (engine.difficulty.level * 30) % 360

        for obstacle in engine.obstacles.obstacles:
            if obstacle.x > engine.screen_width or obstacle.x + width < 0:
                continue
            hue = base_hue + PATTERN_HUE[obstacle.type]
            self._draw_rug(obstacle, width, height, hue)

    def _draw_rug(self, obstacle: Obstacle, width: float, height: float, hue: float):
        fill_color = hsl(hue, 0.40, 0.20)
        stroke_color = hsl(hue, 0.45, 0.30)
        fringe_color = hsl(hue, 0.30, 0.40)
        motif = RUG_MOTIFS[obstacle.type]

        # Jitter only stretches the drawing, the hit box stays at top/bottom
        top_rect = pygame.Rect(int(obstacle.x), 0, int(width),
                               int(obstacle.top + obstacle.top_jitter))
        bottom_y = int(obstacle.bottom - obstacle.bottom_jitter)
        bottom_rect = pygame.Rect(int(obstacle.x), bottom_y, int(width), int(height) - bottom_y)

        for rect, fringe_y, direction in ((top_rect, top_rect.bottom, 1),
                                          (bottom_rect, bottom_rect.top, -1)):
            if rect.height <= 0:
                continue
            pygame.draw.rect(self.screen, fill_color, rect)
            previous_clip = self.screen.get_clip()
            self.screen.set_clip(rect.clip(previous_clip))
            motif(self.screen, rect, hue)
            self.screen.set_clip(previous_clip)
            pygame.draw.rect(self.screen, stroke_color, rect, width=2)
            self._draw_fringe(rect.left, fringe_y, rect.width, direction, fringe_color)

    def _draw_fringe(self, x: int, y: int, width: int, direction: int, color):
        """Row of small tassels pointing away from the rug (down for top rugs, up for bottom)."""
        step = width / FRINGE_COUNT
        for i in range(FRINGE_COUNT):
            left = x + i * step
            points = [(left, y), (left + step / 2, y + direction * FRINGE_HEIGHT), (left + step, y)]
            pygame.draw.lines(self.screen, color, False, points, 1)

    def draw_chart(self, engine: GameEngine):
        chart = engine.chart
        world_x = engine.state.world_x
        for candle in chart.candles:
            x = chart.screen_x(candle, world_x, engine.player.x)
            if x + chart.candle_width < 0 or x > engine.screen_width:
                continue
            mid = int(x + chart.candle_width / 2)
            pygame.draw.line(self.screen, COLOR_WHITE, (mid, int(candle.high)), (mid, int(candle.low)), 1)

            color = COLOR_CANDLE_UP if candle.bullish else COLOR_CANDLE_DOWN
            body_top = min(candle.open, candle.close)
            body_h = max(1, abs(candle.open - candle.close))
            pygame.draw.rect(self.screen, color,
                             pygame.Rect(int(x), int(body_top), int(chart.candle_width), int(body_h)))

    def draw_particles(self, engine: GameEngine):
        for particle in engine.particles.particles:
            # No per-pixel alpha on the main surface; fade by darkening instead
            color = tuple(int(c * particle.alpha) for c in particle.color)
            pygame.draw.circle(self.screen, color, (int(particle.x), int(particle.y)), PARTICLE_RADIUS)

    def draw_player(self, engine: GameEngine, character: Optional[Character]):
        player = engine.player
        if character is not None and character.loaded:
            sprite = pygame.transform.rotate(character.image, -math.degrees(player.rotation))
            rect = sprite.get_rect(center=(int(player.x), int(player.y)))
            self.screen.blit(sprite, rect)
            return

        size = PLAYER_RADIUS * 2
        square = pygame.Surface((size, size), pygame.SRCALPHA)
        square.fill(character.color if character is not None else COLOR_MINT)
        pygame.draw.rect(square, COLOR_WHITE, square.get_rect(), width=2)
        square = pygame.transform.rotate(square, -math.degrees(player.rotation))
        self.screen.blit(square, square.get_rect(center=(int(player.x), int(player.y))))
