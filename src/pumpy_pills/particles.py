"""
particles.py: Small pooled particle effects for jumps, scores and crashes.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import MAX_PARTICLES, PARTICLE_LIFE, PARTICLE_SPREAD, COLOR_WHITE


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    life: int = 0
    color: Tuple[int, int, int] = COLOR_WHITE

    @property
    def alpha(self) -> float:
        return max(0.0, min(1.0, self.life / PARTICLE_LIFE))


class Particles:
    """
    At most max_particles alive; dead and evicted particles go back to a pool
    so steady-state play allocates nothing.
    """

    def __init__(self, max_particles: int = MAX_PARTICLES,
                 rng: Optional[random.Random] = None):
        self.max_particles = max_particles
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.pool: List[Particle] = []

    def reset(self):
        self.particles = []
        self.pool = []

    def add(self, x: float, y: float, color: Tuple[int, int, int] = COLOR_WHITE) -> Particle:
        if len(self.particles) >= self.max_particles:
            self.pool.append(self.particles.pop(0))

        particle = self.pool.pop() if self.pool else Particle()
        particle.x = x
        particle.y = y
        particle.color = color
        particle.life = PARTICLE_LIFE
        particle.vx = (self.rng.random() - 0.5) * PARTICLE_SPREAD
        particle.vy = (self.rng.random() - 0.5) * PARTICLE_SPREAD
        self.particles.append(particle)
        return particle

    def burst(self, x: float, y: float, color: Tuple[int, int, int] = COLOR_WHITE, count: int = 4):
        for _ in range(count):
            self.add(x, y, color)

    def update(self):
        alive = []
        for particle in self.particles:
            particle.x += particle.vx
            particle.y += particle.vy
            particle.life -= 1
            if particle.life > 0:
                alive.append(particle)
            else:
                self.pool.append(particle)
        self.particles = alive
