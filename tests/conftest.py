import os
import random
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake import Grid, GameState, MemoryHighScoreStore, RoundState, Snake  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def make_state():
    """Build a running GameState around a hand-placed snake."""
    def _make(body, direction, food=(0, 0), score=0, high_score=0, tile_count=25):
        return GameState(
            grid=Grid(tile_count=tile_count),
            snake=Snake(body, direction),
            food=food,
            score=score,
            high_score=high_score,
            round_state=RoundState.RUNNING,
        )
    return _make
