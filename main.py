from __future__ import annotations

import sys

import ui
from game_engine import GameEngine
from game_logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    setup_logging()
    game = GameEngine()
    try:
        game.start_game()
    except (EOFError, KeyboardInterrupt) as e:
        logger.warning("Game interrupted: %s", type(e).__name__)
        ui.show("")
        ui.show("Input closed. The monsters win by default.")
        sys.exit(1)


if __name__ == "__main__":
    main()
