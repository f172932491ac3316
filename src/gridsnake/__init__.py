"""
Single-player grid snake.

The rules (grid, food, snake, collisions, fixed-step loop) have no pygame
dependency; ``gridsnake.app`` wraps them in a pygame window.
"""

from .food import BoardFull, place_food
from .grid import Direction, Grid, Position
from .highscore import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from .loop import GameLoop
from .rules import TickOutcome, step
from .snake import Snake
from .state import GameState, RoundState, Snapshot

__all__ = [
    'BoardFull', 'place_food',
    'Direction', 'Grid', 'Position',
    'HighScoreStore', 'JsonHighScoreStore', 'MemoryHighScoreStore',
    'GameLoop',
    'TickOutcome', 'step',
    'Snake',
    'GameState', 'RoundState', 'Snapshot',
]
