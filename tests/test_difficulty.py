import pytest

from pumpy_pills.constants import MIN_GAP, MIN_SPACING, SPEED_CAP
from pumpy_pills.difficulty import DifficultyManager
from pumpy_pills.errors import ConfigError


def test_reset_starts_at_level_one():
    dm = DifficultyManager()
    dm.level = 7
    dm.obstacles_in_level = 2
    dm.reset()

    assert dm.level == 1
    assert dm.obstacles_in_level == 0
    assert dm.obstacles_needed == 3
    assert dm.speed == pytest.approx(1.48)
    assert dm.pipe_gap == 220
    assert dm.pipe_spacing == 315


def test_curve_is_clamped_and_monotonic():
    dm = DifficultyManager()
    previous = None
    for level in range(1, 200):
        dm.level = level
        dm.update_difficulty()
        assert dm.pipe_gap >= MIN_GAP
        assert dm.pipe_spacing >= MIN_SPACING
        assert dm.speed <= SPEED_CAP
        if previous is not None:
            speed, gap, spacing = previous
            assert dm.speed >= speed
            assert dm.pipe_gap <= gap
            assert dm.pipe_spacing <= spacing
        previous = (dm.speed, dm.pipe_gap, dm.pipe_spacing)

    assert dm.speed == SPEED_CAP
    assert dm.pipe_gap == MIN_GAP
    assert dm.pipe_spacing == MIN_SPACING


def test_level_up_needs_all_obstacles():
    dm = DifficultyManager()
    gap, speed = dm.pipe_gap, dm.speed

    for _ in range(dm.obstacles_needed - 1):
        assert dm.level_up() is False
    assert dm.level == 1
    assert dm.pipe_gap == gap

    assert dm.level_up() is True
    assert dm.level == 2
    assert dm.obstacles_in_level == 0
    assert dm.obstacles_needed == 6
    assert dm.pipe_gap < gap
    assert dm.speed > speed


def test_exactly_one_level_per_threshold():
    dm = DifficultyManager()
    needed = dm.obstacles_needed
    results = [dm.level_up() for _ in range(needed)]
    assert results.count(True) == 1
    assert results[-1] is True
    assert dm.obstacles_in_level == 0


def test_obstacles_needed_is_capped():
    dm = DifficultyManager()
    dm.level = 40
    dm.obstacles_in_level = dm.obstacles_needed - 1
    assert dm.level_up()
    assert dm.level == 41
    assert dm.obstacles_needed == 50


@pytest.mark.parametrize("kwargs", [
    {"min_gap": 0},
    {"min_spacing": -5},
    {"speed_cap": 1.0, "base_speed": 2.0},
    {"gap_slope": -1},
])
def test_malformed_config_fails_fast(kwargs):
    with pytest.raises(ConfigError):
        DifficultyManager(**kwargs)
