"""
physics_core.py: Player kinematics and the bounding-box collision test.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import (
    PLAYER_X, SPAWN_Y, GRAVITY_SCALE, MAX_FALL_SCALE, JUMP_SCALE, JUMP_BOOST,
    FALLING_THRESHOLD, ROTATION_MIN, ROTATION_MAX, ROTATION_PER_VY,
    ROTATION_LERP, ROTATION_JUMP_LERP, ROTATION_LERP_DECAY
)
from .data_models import Obstacle


@dataclass
class Player:
    """
    The player's body. y grows downwards, so a jump is a negative velocity.
    rotation and target_rotation are visual only.
    """
    x: float = PLAYER_X
    y: float = SPAWN_Y
    vy: float = 0.0
    jump_count: int = 0
    rotation: float = 0.0
    target_rotation: float = 0.0
    rotation_lerp: float = ROTATION_LERP
    jump_boost: float = JUMP_BOOST

    def reset(self, x: float = PLAYER_X, y: float = SPAWN_Y):
        self.x = x
        self.y = y
        self.vy = 0.0
        self.jump_count = 0
        self.rotation = 0.0
        self.target_rotation = 0.0
        self.rotation_lerp = ROTATION_LERP

    def update(self, gravity: float, max_fall: float):
        """Advance one tick under gravity."""
        self.vy += gravity * GRAVITY_SCALE
        self.vy = min(self.vy, max_fall * MAX_FALL_SCALE)
        self.y += self.vy

        # Clearly falling: the next jump starts a new chain
        if self.vy > FALLING_THRESHOLD:
            self.jump_count = 0

        self.target_rotation = min(ROTATION_MAX, max(ROTATION_MIN, self.vy * ROTATION_PER_VY))
        self.rotation += (self.target_rotation - self.rotation) * self.rotation_lerp
        if self.rotation_lerp > ROTATION_LERP:
            self.rotation_lerp = max(ROTATION_LERP, self.rotation_lerp - ROTATION_LERP_DECAY)

    def jump(self, jump_strength: float) -> float:
        """Apply a jump impulse and return the resulting velocity."""
        self.jump_count += 1
        velocity = jump_strength * JUMP_SCALE

        # Quick double tap gets a little extra lift
        if self.jump_count == 2:
            velocity -= self.jump_boost

        self.vy = velocity
        self.rotation_lerp = ROTATION_JUMP_LERP
        return velocity


def check_collision(x: float, y: float, radius: float,
                    obstacles: Iterable[Obstacle], obstacle_width: float) -> Optional[Obstacle]:
    """
    Returns the first obstacle whose barriers the box around (x, y) touches.
    Only top/bottom are consulted; decorative jitter is ignored.
    """
    left = x - radius
    right = x + radius
    top = y - radius
    bottom = y + radius

    for obstacle in obstacles:
        if right <= obstacle.x or left >= obstacle.x + obstacle_width:
            continue
        if top < obstacle.top or bottom > obstacle.bottom:
            return obstacle
    return None


def out_of_bounds(y: float, radius: float, screen_height: float) -> bool:
    """Floor or ceiling hit."""
    return y - radius <= 0 or y + radius >= screen_height
