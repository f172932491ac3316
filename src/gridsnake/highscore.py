"""
High score persistence.

Only one integer is kept. A missing or unreadable file counts as 0 and a
failed write is logged, never raised: losing a best score must not end a game.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...


class JsonHighScoreStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else HIGHSCORE_FILE

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            value = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score from {self.path}: {e}")
            return 0
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning(f"Ignoring malformed high score in {self.path}: {value!r}")
            return 0
        return value

    def save(self, value: int) -> None:
        try:
            self.path.write_text(json.dumps(int(value)), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not save high score to {self.path}: {e}")


class MemoryHighScoreStore:
    """Keeps the value for the lifetime of the process."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1
