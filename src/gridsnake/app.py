"""
pygame shell around the game loop.

Owns the window, the event pump, the HUD (score / best) and the two overlays
(start screen, game over). All game rules live in ``GameLoop``; this module
only forwards keys and draws what the snapshot says.
"""

from __future__ import annotations

import sys
from typing import Dict, Optional, Tuple

import pygame

from .config import BG, FPS, GREY, RED, WHITE
from .controls import on_direction_key
from .grid import Grid
from .highscore import HighScoreStore, JsonHighScoreStore
from .loop import GameLoop
from .render import BoardRenderer
from .state import RoundState

HUD_H = 40
FONT_NAMES = "consolas,menlo,monospace,arial"


class Game:
    def __init__(self, store: Optional[HighScoreStore] = None, grid: Optional[Grid] = None) -> None:
        self.loop = GameLoop(
            grid=grid,
            store=store if store is not None else JsonHighScoreStore(),
            on_game_started=self._on_game_started,
            on_game_over=self._on_game_over,
        )
        # Board size comes from the loop's grid only
        self.size = self.loop.state.grid.canvas_size

        pygame.init()
        self.screen = pygame.display.set_mode((self.size, self.size + HUD_H))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.board = self.screen.subsurface(pygame.Rect(0, HUD_H, self.size, self.size))
        self.renderer = BoardRenderer()
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}

        # Overlays
        self.show_start = True
        self.show_over = False
        self.final_score = 0

    # ---------------------------- overlay events ------------------------------
    def _on_game_started(self) -> None:
        self.show_start = False
        self.show_over = False

    def _on_game_over(self, final_score: int) -> None:
        self.final_score = final_score
        self.show_over = True

    # ---------------------------- main loop pieces ----------------------------
    def quit(self) -> None:
        pygame.quit()
        sys.exit()

    def handle_events(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.quit()
            if e.type != pygame.KEYDOWN:
                continue

            if e.key == pygame.K_ESCAPE:
                self.quit()

            if self.loop.round_state == RoundState.RUNNING:
                d = on_direction_key(e.key)
                if d is not None:
                    self.loop.set_direction(d)
            elif e.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.loop.start()
            elif e.key == pygame.K_r and self.loop.round_state == RoundState.OVER:
                self.loop.restart()

    def update(self, dt: float) -> None:
        self.loop.tick(dt)

    # ---------------------------- rendering -----------------------------------
    def _text(self, surf: pygame.Surface, text: str, size: int, color: Tuple[int, int, int],
              bold: bool = False, **anchor: Tuple[int, int]) -> pygame.Rect:
        """Blit ``text`` placed by one rect keyword, e.g. ``center=(x, y)``."""
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(FONT_NAMES, size, bold=bold)
        img = self._fonts[key].render(text, True, color)
        rect = img.get_rect(**anchor)
        surf.blit(img, rect)
        return rect

    def _draw_hud(self, score: int, best: int) -> None:
        pygame.draw.rect(self.screen, BG, (0, 0, self.size, HUD_H))
        self._text(self.screen, f"Score: {score}", 22, WHITE, topleft=(10, 8))
        self._text(self.screen, f"Best: {best}", 22, GREY, topleft=(self.size // 2 + 10, 8))

    def _dim_board(self) -> None:
        surf = pygame.Surface(self.board.get_size(), pygame.SRCALPHA)
        surf.fill((0, 0, 0, 170))
        self.board.blit(surf, (0, 0))

    def draw_start(self) -> None:
        self._dim_board()
        mid = self.size // 2
        self._text(self.board, "SNAKE", 64, WHITE, bold=True, center=(mid, mid - 60))
        self._text(self.board, "Press ENTER / SPACE to start", 22, GREY, center=(mid, mid + 10))
        self._text(self.board, "Arrows / WASD to steer", 18, GREY, center=(mid, mid + 44))

    def draw_over(self) -> None:
        self._dim_board()
        mid = self.size // 2
        self._text(self.board, "GAME OVER", 56, RED, bold=True, center=(mid, mid - 60))
        self._text(self.board, f"Score: {self.final_score}", 26, WHITE, center=(mid, mid))
        self._text(self.board, "Press R / ENTER to restart", 20, GREY, center=(mid, mid + 44))

    def render(self) -> None:
        snap = self.loop.snapshot()
        self._draw_hud(snap.score, snap.high_score)
        self.renderer.draw(self.board, snap)
        if self.show_start:
            self.draw_start()
        elif self.show_over:
            self.draw_over()
        pygame.display.flip()

    # ---------------------------- loop ----------------------------------------
    def run(self) -> None:
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render()
