from __future__ import annotations

from typing import Iterable, List

from .config import START_BODY, START_DIR
from .grid import Direction, Position


class Snake:
    """
    Head-first list of cells plus a two-phase heading.

    ``direction`` is what the snake moved with on the last step, ``next_dir``
    is the buffered input that becomes ``direction`` on the next step.
    """

    def __init__(self, body: Iterable[Position], direction: Direction = Direction.RIGHT) -> None:
        self.body: List[Position] = list(body)
        if not self.body:
            raise ValueError("snake body must have at least one segment")
        self.dir = direction
        self.next_dir = direction  # buffered direction

    @classmethod
    def spawn(cls) -> "Snake":
        return cls(START_BODY, Direction(START_DIR))

    @property
    def head(self) -> Position:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def occupies(self, pos: Position) -> bool:
        return pos in self.body

    def set_dir(self, d: Direction) -> bool:
        # Checked against the applied heading, not the buffered one
        if d.is_opposite(self.dir):
            return False
        self.next_dir = d
        return True

    def advance(self) -> Position:
        """Commit the buffered heading and return where the head would go."""
        self.dir = self.next_dir
        return self.dir.apply(self.head)

    def move_to(self, new_head: Position, grow: bool) -> None:
        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()
