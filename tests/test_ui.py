import pygame
import pytest

from pumpy_pills.characters import CharacterManager
from pumpy_pills.constants import COLOR_MINT
from pumpy_pills.data_models import Obstacle
from pumpy_pills.engine import GameEngine
from pumpy_pills.patterns import Pattern
from pumpy_pills.renderer import RUG_MOTIFS, Renderer, hsl
from pumpy_pills.ui import UIManager


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((480, 800))
    yield surface
    pygame.quit()


@pytest.fixture
def engine():
    e = GameEngine(seed=3)
    e.finish_loading()
    return e


def test_hsl():
    assert hsl(0, 1.0, 0.5) == (255, 0, 0)
    assert hsl(480, 1.0, 0.5) == hsl(120, 1.0, 0.5)


def test_world_draws_every_pattern(screen, engine):
    characters = CharacterManager(game_state=engine.state)
    engine.request_jump()
    engine.tick()
    engine.obstacles.obstacles = [
        Obstacle(x=40 + i * 70, top=200, bottom=400, type=pattern, top_jitter=5, bottom_jitter=3)
        for i, pattern in enumerate(Pattern)
    ]
    for x in range(0, 120, 12):
        engine.chart.update(x, 400 - x)
    engine.particles.burst(100, 100)

    Renderer(screen).draw_world(engine, characters.selected)
    # The rug's fill replaces the background where the first obstacle sits
    assert screen.get_at((60, 100))[:3] != (13, 20, 33)


def test_screens_render(screen, engine):
    characters = CharacterManager(game_state=engine.state)
    ui = UIManager(screen, engine.state)

    ui.draw_loading_screen(50)
    ui.draw_start_screen(characters)

    engine.request_jump()
    engine.tick()
    ui.draw_hud(engine.hud_snapshot())

    engine.state.end_game()
    ui.draw_game_over_screen(engine.hud_snapshot(), characters)
    ui.draw_debug_info(60, 16.6, 6.0)
    ui.draw_debug_info(0)


def test_every_pattern_has_its_own_motif():
    assert set(RUG_MOTIFS) == set(Pattern)
    assert len(set(RUG_MOTIFS.values())) == len(Pattern)


def test_motifs_draw_differently(screen):
    rect = pygame.Rect(0, 0, 70, 200)
    drawn = set()
    for motif in RUG_MOTIFS.values():
        surface = pygame.Surface(rect.size)
        surface.fill((0, 0, 0))
        motif(surface, rect, 30)
        drawn.add(pygame.image.tostring(surface, "RGB"))
    assert len(drawn) == len(RUG_MOTIFS)


def test_rug_gets_fringe(screen, engine):
    screen.fill((13, 20, 33))
    obstacle = Obstacle(x=100, top=300, bottom=500)
    Renderer(screen)._draw_rug(obstacle, 70, 800, 0)
    # Tassels hang just below the top rug
    below = [screen.get_at((x, 301))[:3] for x in range(100, 170)]
    assert any(color != (13, 20, 33) for color in below)


def test_player_without_character(screen, engine):
    renderer = Renderer(screen)
    screen.fill((13, 20, 33))
    renderer.draw_player(engine, None)
    x, y = int(engine.player.x), int(engine.player.y)
    assert screen.get_at((x, y))[:3] == COLOR_MINT
    renderer.draw_world(engine, CharacterManager([]).selected)
