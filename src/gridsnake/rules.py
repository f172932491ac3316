from __future__ import annotations

import logging
import random
from enum import Enum

from .config import FOOD_REWARD
from .food import place_food
from .highscore import HighScoreStore
from .state import GameState, RoundState

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    CONTINUE = "CONTINUE"
    ATE = "ATE"
    GAME_OVER = "GAME_OVER"


def _end_round(state: GameState, reason: str) -> TickOutcome:
    state.round_state = RoundState.OVER
    state.death_reason = reason
    logger.info(f"Game over ({reason}) with score {state.score}")
    return TickOutcome.GAME_OVER


def step(state: GameState, store: HighScoreStore, rng=random) -> TickOutcome:
    """
    Advance the round by one tick.

    Order matters: walls, then the body as it was before this move (the tail
    cell still counts even though it would be vacated), then grow or shift.
    """
    snake = state.snake
    new_head = snake.advance()

    if not state.grid.in_bounds(new_head):
        return _end_round(state, "wall")

    if snake.occupies(new_head):
        return _end_round(state, "self")

    ate = new_head == state.food
    snake.move_to(new_head, grow=ate)
    if not ate:
        return TickOutcome.CONTINUE

    state.score += FOOD_REWARD
    if state.score > state.high_score:
        state.high_score = state.score
        store.save(state.high_score)
        logger.debug(f"New high score {state.high_score}")
    state.food = place_food(snake.body, state.grid, rng)
    return TickOutcome.ATE
