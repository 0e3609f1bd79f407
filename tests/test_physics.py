import pytest

from pumpy_pills.constants import GRAVITY, MAX_FALL, JUMP_STRENGTH, ROTATION_LERP
from pumpy_pills.data_models import Obstacle
from pumpy_pills.physics_core import Player, check_collision, out_of_bounds


def test_gravity_is_softened():
    player = Player(x=100, y=400)
    player.update(GRAVITY, MAX_FALL)
    assert player.vy == pytest.approx(0.3325)
    assert player.y == pytest.approx(400.3325)


def test_fall_speed_is_capped():
    player = Player(x=100, y=0, vy=20.0)
    player.update(GRAVITY, MAX_FALL)
    assert player.vy == pytest.approx(8.4)


def test_jump_moves_up():
    player = Player()
    velocity = player.jump(JUMP_STRENGTH)
    assert velocity == pytest.approx(-6.825)
    assert player.vy == velocity
    assert player.jump_count == 1


def test_double_jump_is_stronger():
    player = Player()
    first = player.jump(JUMP_STRENGTH)
    second = player.jump(JUMP_STRENGTH)
    assert second == pytest.approx(-7.425)
    assert second < first

    # Third tap in the chain is back to normal
    assert player.jump(JUMP_STRENGTH) == pytest.approx(first)


def test_falling_resets_jump_chain():
    player = Player()
    player.jump(JUMP_STRENGTH)
    while player.vy <= 0.5:
        player.update(GRAVITY, MAX_FALL)
    assert player.jump_count == 0
    assert player.jump(JUMP_STRENGTH) == pytest.approx(-6.825)


def test_rotation_eases_back_after_jump():
    player = Player()
    player.jump(JUMP_STRENGTH)
    assert player.rotation_lerp == 0.3
    for _ in range(20):
        player.update(GRAVITY, MAX_FALL)
    assert player.rotation_lerp == ROTATION_LERP


def test_rotation_follows_velocity():
    player = Player(vy=-6.0)
    player.update(GRAVITY, MAX_FALL)
    assert player.target_rotation < 0
    assert player.rotation < 0


def test_reset():
    player = Player(x=5, y=5, vy=3, jump_count=2, rotation=1.0)
    player.reset(100, 400)
    assert (player.x, player.y, player.vy, player.jump_count, player.rotation) == (100, 400, 0.0, 0, 0.0)


@pytest.mark.parametrize("y,expected", [
    (400, False),
    (19, False),
    (18, True),
    (-5, True),
    (781, False),
    (782, True),
])
def test_out_of_bounds(y, expected):
    assert out_of_bounds(y, 18, 800) is expected


def test_check_collision_returns_the_obstacle_hit():
    clear = Obstacle(x=300, top=100, bottom=300)
    blocking = Obstacle(x=90, top=500, bottom=700)
    assert check_collision(100, 400, 10, [clear, blocking], 70) is blocking
    assert check_collision(100, 600, 10, [clear, blocking], 70) is None


def test_touching_edges_do_not_overlap():
    obstacle = Obstacle(x=110, top=500, bottom=700)
    # Right edge of the box exactly at the obstacle's left edge
    assert check_collision(100, 100, 10, [obstacle], 70) is None
