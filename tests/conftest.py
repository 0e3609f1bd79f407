import os
import random

import pytest

# Headless pygame for anything that touches surfaces or fonts
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class FixedRandom(random.Random):
    """Random whose choice() always takes the first element and random() a fixed value."""

    def __init__(self, value: float = 0.99):
        super().__init__(0)
        self.value = value

    def choice(self, seq):
        return seq[0]

    def random(self):
        return self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom
