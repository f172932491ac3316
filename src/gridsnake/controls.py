from __future__ import annotations

from typing import Optional, Union

import pygame

from .grid import Direction

# Arrows and WASD. pygame reports the same key code for 'w' and 'W'.
KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

# Names as returned by pygame.key.name(), matched case-insensitively
NAME_TO_DIRECTION = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def on_direction_key(key: Union[int, str]) -> Optional[Direction]:
    """Map a pygame key code or key name to a direction, None if unbound."""
    if isinstance(key, str):
        return NAME_TO_DIRECTION.get(key.lower())
    return KEY_TO_DIRECTION.get(key)
