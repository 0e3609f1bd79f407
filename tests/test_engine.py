import pytest

from pumpy_pills.data_models import Obstacle
from pumpy_pills.engine import GameEngine
from pumpy_pills.errors import ConfigError
from pumpy_pills.game_state import GameStatus


@pytest.fixture
def engine():
    e = GameEngine(seed=42)
    e.finish_loading()
    return e


def start(engine):
    engine.request_jump()
    assert engine.tick() is GameStatus.PLAYING


def hold_still(engine):
    engine.player.y = engine.screen_height / 2
    engine.player.vy = 0.0


def test_loading_ignores_input():
    e = GameEngine(seed=1)
    e.request_jump()
    assert e.tick() is GameStatus.LOADING
    assert not e.jump_requested
    e.finish_loading()
    assert e.state.is_start_screen


def test_jump_starts_the_game(engine):
    start(engine)
    assert engine.player.vy < 0
    assert engine.difficulty.level == 1
    assert engine.state.score == 0


def test_start_screen_waits_without_input(engine):
    for _ in range(10):
        assert engine.tick() is GameStatus.START
    assert engine.obstacles.obstacles == []


def test_player_falls_to_game_over(engine):
    start(engine)
    for _ in range(600):
        if engine.tick() is GameStatus.GAME_OVER:
            break
    assert engine.state.is_game_over
    assert engine.state.score == 0


def test_collision_ends_game(engine):
    start(engine)
    hold_still(engine)
    engine.obstacles.obstacles = [Obstacle(x=90, top=600, bottom=790)]
    assert engine.tick() is GameStatus.GAME_OVER


def test_passing_an_obstacle_scores(engine):
    start(engine)
    hold_still(engine)
    passed = Obstacle(x=-10, top=0, bottom=800)
    engine.obstacles.obstacles = [passed]

    engine.tick()
    assert passed.scored
    assert engine.state.score == 2
    assert engine.state.portfolio_value == 51000

    # Scored once only
    hold_still(engine)
    engine.tick()
    assert engine.state.score == 2


def test_level_up_retunes_future_obstacles(engine):
    start(engine)
    hold_still(engine)
    engine.difficulty.obstacles_in_level = engine.difficulty.obstacles_needed - 1
    engine.obstacles.obstacles = [Obstacle(x=-10, top=0, bottom=800)]

    engine.tick()
    assert engine.difficulty.level == 2
    assert engine.obstacles.pipe_gap == 210
    assert engine.obstacles.pipe_spacing == 300
    assert engine.hud_snapshot().level == 2


def test_restart_after_game_over(engine):
    start(engine)
    engine.obstacles.obstacles = [Obstacle(x=90, top=600, bottom=790)]
    hold_still(engine)
    engine.difficulty.level = 3
    engine.state.score = 9
    engine.tick()
    assert engine.state.is_game_over

    engine.request_jump()
    assert engine.tick() is GameStatus.PLAYING
    assert engine.state.score == 0
    assert engine.difficulty.level == 1
    assert engine.obstacles.obstacles == []


def _play(seed):
    e = GameEngine(seed=seed)
    e.finish_loading()
    for i in range(900):
        if i % 18 == 0:
            e.request_jump()
        e.tick()
    return [(o.x, o.top, o.bottom, o.type) for o in e.obstacles.obstacles], e.obstacles.pattern_history


def test_same_seed_same_run():
    assert _play(7) == _play(7)


def test_hud_snapshot(engine):
    start(engine)
    hud = engine.hud_snapshot()
    assert hud.score == 0
    assert hud.level == 1
    assert hud.obstacles_needed == 3
    assert hud.pipe_gap == 220
    assert hud.speed == pytest.approx(1.48)


def test_disposed_engine_refuses_ticks(engine):
    engine.dispose()
    with pytest.raises(RuntimeError):
        engine.tick()


@pytest.mark.parametrize("size", [
    {"screen_height": 100},
    {"screen_width": 0},
    {"screen_width": -480},
])
def test_bad_screen_fails_fast(size):
    with pytest.raises(ConfigError):
        GameEngine(seed=1, **size)
