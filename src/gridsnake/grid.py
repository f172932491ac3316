from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import CELL, TILE_COUNT

Position = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: "Direction") -> bool:
        return self.dx == -other.dx and self.dy == -other.dy

    def apply(self, pos: Position) -> Position:
        x, y = pos
        return x + self.dx, y + self.dy


@dataclass(frozen=True)
class Grid:
    """Square board of ``tile_count`` x ``tile_count`` cells."""

    tile_count: int = TILE_COUNT
    cell: int = CELL

    @property
    def canvas_size(self) -> int:
        return self.tile_count * self.cell

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.tile_count and 0 <= y < self.tile_count

    def to_px(self, pos: Position) -> Tuple[int, int]:
        x, y = pos
        return x * self.cell, y * self.cell
