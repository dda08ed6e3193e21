"""Entry point for the Sathi Snake game."""

from __future__ import annotations

import logging

from sathi_snake.config import LOG_LEVEL
from sathi_snake.game import SathiSnake


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = SathiSnake()
    game.start()


if __name__ == "__main__":
    main()
