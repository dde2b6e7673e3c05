"""
Shared fixtures.

FixedRandom pins random() to a constant, which makes every uniform(a, b)
draw land on the same point of its range. With 0.5 this means no jitter,
no velocity nudges and no spontaneous connection searches.
"""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from world.world import World


class FixedRandom(random.Random):
    def __init__(self, value: float = 0.5):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)


@pytest.fixture
def quiet_world(fixed_rng):
    """Large world, mouse parked far outside every influence radius."""
    world = World.create(2000, 2000, rng=fixed_rng)
    world.on_pointer_move(-5000.0, -5000.0)
    return world


@pytest.fixture
def world_factory():
    """Seeded worlds with real jitter, mouse parked far away."""
    def make(seed: int = 0, w: int = 2000, h: int = 2000) -> World:
        world = World.create(w, h, seed=seed)
        world.on_pointer_move(-5000.0, -5000.0)
        return world
    return make
