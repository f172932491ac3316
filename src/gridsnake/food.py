from __future__ import annotations

import logging
import random
from typing import Iterable

from .grid import Grid, Position

logger = logging.getLogger(__name__)

MAX_SAMPLES = 10000


class BoardFull(RuntimeError):
    """Raised when the snake covers every cell and food has nowhere to go."""


def place_food(snake_body: Iterable[Position], grid: Grid, rng=random) -> Position:
    """Return a uniformly random cell that is not part of ``snake_body``."""
    occupied = set(snake_body)
    n = grid.tile_count
    for _ in range(MAX_SAMPLES):
        c = (rng.randrange(n), rng.randrange(n))
        if c not in occupied:
            return c

    # Nearly full board: pick among what is left
    logger.debug(f"Rejection sampling gave up after {MAX_SAMPLES} tries, scanning free cells")
    free = [(x, y) for y in range(n) for x in range(n) if (x, y) not in occupied]
    if not free:
        raise BoardFull(f"no free cell on a {n}x{n} grid")
    return rng.choice(free)
