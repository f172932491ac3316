import logging

from .app import Game
from .config import LOG_LEVEL


def resolve_level(name: str) -> int:
    """Numeric level for a name like ``INFO``; WARNING for anything unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    logging.basicConfig(
        level=resolve_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()


if __name__ == "__main__":
    main()
