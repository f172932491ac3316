from __future__ import annotations

import pygame

from .config import BG, FOOD_PURPLE, SNAKE_GREEN, WHITE
from .state import Snapshot


class BoardRenderer:
    """Draws a snapshot of the board. Holds no game state of its own."""

    def draw(self, surf: pygame.Surface, snap: Snapshot) -> None:
        surf.fill(BG)
        self._draw_food(surf, snap)
        self._draw_snake(surf, snap)

    def _draw_food(self, surf: pygame.Surface, snap: Snapshot) -> None:
        cell = snap.grid.cell
        x, y = snap.grid.to_px(snap.food)
        center = (x + cell // 2, y + cell // 2)
        pygame.draw.circle(surf, FOOD_PURPLE, center, cell // 2 - 2)

    def _draw_snake(self, surf: pygame.Surface, snap: Snapshot) -> None:
        cell = snap.grid.cell
        # Tail first so the head ends up on top
        for i in range(len(snap.body) - 1, -1, -1):
            x, y = snap.grid.to_px(snap.body[i])
            color = WHITE if i == 0 else SNAKE_GREEN
            pygame.draw.rect(surf, color, (x + 1, y + 1, cell - 2, cell - 2))
