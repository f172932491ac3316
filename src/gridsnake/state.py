from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .grid import Grid, Position
from .snake import Snake


class RoundState(Enum):
    NOT_STARTED = "NOT_STARTED"
    RUNNING = "RUNNING"
    OVER = "OVER"


@dataclass
class GameState:
    """Everything one round mutates. Owned by the game loop."""

    grid: Grid = field(default_factory=Grid)
    snake: Snake = field(default_factory=Snake.spawn)
    food: Position = (0, 0)
    score: int = 0
    high_score: int = 0
    round_state: RoundState = RoundState.NOT_STARTED
    death_reason: Optional[str] = None  # "wall" | "self"

    def snapshot(self) -> "Snapshot":
        return Snapshot(
            grid=self.grid,
            body=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            round_state=self.round_state,
            death_reason=self.death_reason,
        )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer and the HUD."""

    grid: Grid
    body: Tuple[Position, ...]
    food: Position
    score: int
    high_score: int
    round_state: RoundState
    death_reason: Optional[str] = None
