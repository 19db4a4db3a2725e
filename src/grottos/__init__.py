"""Grottos: a terminal cave-exploration roguelike."""

import sys

from .app import create_game, run
from .config import Config
from .logging import configure_logging, get_logger
from .terminal import CursesTerminal, TerminalError

__all__ = ["main", "create_game", "run", "Config"]


def main() -> None:
    """Entry point for the grottos command."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        log_level=config.log_level,
        seed=config.seed,
    )

    game = create_game(config)
    try:
        run(game, CursesTerminal())
    except TerminalError:
        logger.exception("terminal_unavailable")
        sys.exit(1)
