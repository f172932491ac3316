from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .config import TICK_SECONDS
from .food import place_food
from .grid import Direction, Grid
from .highscore import HighScoreStore, MemoryHighScoreStore
from .rules import TickOutcome, step
from .snake import Snake
from .state import GameState, RoundState, Snapshot

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Fixed-step driver: NOT_STARTED -> RUNNING -> OVER -> (restart) RUNNING.

    The host calls ``tick`` once per frame with the seconds elapsed since the
    previous frame. The snake steps at most once per call no matter how long
    the frame was; leftover time is dropped rather than replayed.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        interval: float = TICK_SECONDS,
        on_game_started: Optional[Callable[[], None]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.interval = interval
        self.on_game_started = on_game_started
        self.on_game_over = on_game_over

        self.state = GameState(grid=grid or Grid(), high_score=self.store.load())
        self.step_timer = 0.0  # time accumulator

    # ---------------------------- state transitions ---------------------------
    def start(self) -> None:
        s = self.state
        s.snake = Snake.spawn()
        s.score = 0
        s.death_reason = None
        s.food = place_food(s.snake.body, s.grid, self.rng)
        s.round_state = RoundState.RUNNING
        self.step_timer = 0.0
        logger.info(f"Round started, best so far {s.high_score}")
        if self.on_game_started:
            self.on_game_started()

    restart = start

    def set_direction(self, d: Direction) -> None:
        if self.state.round_state != RoundState.RUNNING:
            return
        self.state.snake.set_dir(d)

    # ---------------------------- per-frame -----------------------------------
    def tick(self, elapsed: float) -> Optional[TickOutcome]:
        if self.state.round_state != RoundState.RUNNING:
            return None

        self.step_timer += elapsed
        if self.step_timer < self.interval:
            return None
        self.step_timer = 0.0

        outcome = step(self.state, self.store, self.rng)
        if outcome is TickOutcome.GAME_OVER and self.on_game_over:
            self.on_game_over(self.state.score)
        return outcome

    @property
    def round_state(self) -> RoundState:
        return self.state.round_state

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()
