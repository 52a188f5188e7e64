"""Pytest configuration and shared fixtures."""

import os
import random

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pytest

from blob_platformer.config import GameConfig
from blob_platformer.level_io import load_level_pack


class SequenceRandom:
    """Random source that replays fixed values for random().

    uniform() returns the lower bound and randint() the lower bound, so
    placement is predictable too.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value

    def uniform(self, a, b):
        return a

    def randint(self, a, b):
        return a


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def bundled_levels():
    """Level pack shipped with the package."""
    return load_level_pack()


@pytest.fixture
def ground_level():
    """Single level: a full-width ground strip and one floating ledge."""
    return {
        "name": "Test Ground",
        "gravity": 0.65,
        "jumpV": -11.0,
        "start": {"x": 80, "y": 180, "r": 26},
        "platforms": [
            {"x": 0, "y": 324, "w": 640, "h": 36},
            {"x": 400, "y": 200, "w": 100, "h": 12},
        ],
    }


@pytest.fixture
def sequence_rng():
    """Factory for a random source that replays the given values."""
    return SequenceRandom
