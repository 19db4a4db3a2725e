"""Game factory and main loop for Grottos."""

import random

from .config import Config
from .engine.commands import handle_input
from .engine.screens import main_menu_screen
from .engine.state import Game
from .logging import get_logger
from .render import render
from .terminal import Terminal

logger = get_logger(__name__)


def create_game(config: Config | None = None) -> Game:
    """Create a game showing the main menu."""
    config = config or Config.from_env()
    game = Game(
        screen=main_menu_screen(),
        width=config.display_width,
        height=config.display_height,
        rng=random.Random(config.seed),
    )
    logger.info(
        "game_created",
        width=game.width,
        height=game.height,
        seeded=config.seed is not None,
    )
    return game


def run_loop(game: Game, terminal: Terminal) -> None:
    """Render, read one key, dispatch; until the quit flag is set."""
    while not game.quit:
        render(game, terminal)
        code = terminal.read_key()
        handle_input(game, code)


def run(game: Game, terminal: Terminal) -> None:
    """Run the game on a terminal, restoring the terminal on the way out."""
    terminal.init()
    try:
        run_loop(game, terminal)
    finally:
        terminal.shutdown()
    logger.info("game_finished")
