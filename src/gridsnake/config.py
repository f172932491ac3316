"""Game constants and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# -----------------------------------------------------------------------------
# Board
# -----------------------------------------------------------------------------
CELL = 20          # pixels per tile
TILE_COUNT = 25    # 25x25 grid

# -----------------------------------------------------------------------------
# Pacing / scoring
# -----------------------------------------------------------------------------
TICK_SECONDS = 0.1  # one snake step every 100ms
FPS = 60
FOOD_REWARD = 10

# Head-first, moving right
START_BODY = ((10, 10), (9, 10), (8, 10))
START_DIR = (1, 0)

# -----------------------------------------------------------------------------
# Colors
# -----------------------------------------------------------------------------
BG = (10, 10, 15)
WHITE = (255, 255, 255)
GREY = (180, 188, 196)
SNAKE_GREEN = (0, 255, 136)
FOOD_PURPLE = (189, 0, 255)
RED = (235, 80, 80)

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
HIGHSCORE_FILE = Path(os.getenv("GRIDSNAKE_HIGHSCORE_FILE", "snake_highscore.json"))
LOG_LEVEL = os.getenv("GRIDSNAKE_LOG_LEVEL", "WARNING").upper()
