"""Command dispatch and handler functions.

handle_input(game, code) is the main entry point. It resolves the key code
through the active screen's bindings and runs the matching handler. Handlers
mutate the game in place; screen transitions replace ``game.screen``.
"""

from collections.abc import Callable

from ..logging import get_logger
from .bindings import Command
from .grid import FLOOR, WALL, Point
from .screens import (
    LOSE_MESSAGE,
    MAP_SCALE,
    WIN_MESSAGE,
    end_screen,
    main_menu_screen,
    play_screen,
)
from .state import Game, MenuScreen, PlayScreen

logger = get_logger(__name__)

MOVES: dict[Command, tuple[int, int]] = {
    Command.MOVE_NORTH: (0, -1),
    Command.MOVE_SOUTH: (0, 1),
    Command.MOVE_EAST: (1, 0),
    Command.MOVE_WEST: (-1, 0),
    Command.MOVE_NORTH_EAST: (1, -1),
    Command.MOVE_NORTH_WEST: (-1, -1),
    Command.MOVE_SOUTH_EAST: (1, 1),
    Command.MOVE_SOUTH_WEST: (-1, 1),
}


# --- Transitions ---


def main_menu(game: Game) -> None:
    game.screen = main_menu_screen()
    logger.info("screen_changed", screen=game.screen)


def new_game(game: Game) -> None:
    width, height = MAP_SCALE * game.width, MAP_SCALE * game.height
    game.screen = play_screen(width, height, game.rng)
    logger.info(
        "screen_changed",
        screen=game.screen,
        width=width,
        height=height,
        walls=game.screen.grid.count(WALL),
    )


def win_game(game: Game) -> None:
    game.screen = end_screen(WIN_MESSAGE)
    logger.info("screen_changed", screen=game.screen, result="win")


def lose_game(game: Game) -> None:
    game.screen = end_screen(LOSE_MESSAGE)
    logger.info("screen_changed", screen=game.screen, result="lose")


def quit_game(game: Game) -> None:
    """Set the quit flag; the active screen stays as it is."""
    game.quit = True
    logger.info("game_quit")


# --- Menu ---


def _menu(game: Game) -> MenuScreen:
    if not isinstance(game.screen, MenuScreen):
        raise TypeError(f"menu command on {type(game.screen).__name__}")
    return game.screen


def _prev_item(game: Game) -> None:
    _menu(game).prev_item()


def _next_item(game: Game) -> None:
    _menu(game).next_item()


def _execute_item(game: Game) -> None:
    run_command(game, _menu(game).current_item.command)


# --- Play ---


def _play(game: Game) -> PlayScreen:
    if not isinstance(game.screen, PlayScreen):
        raise TypeError(f"play command on {type(game.screen).__name__}")
    return game.screen


def _move(dx: int, dy: int) -> Callable[[Game], None]:
    def handler(game: Game) -> None:
        player = _play(game).player
        player.position = Point(player.x + dx, player.y + dy)

    return handler


def _randomize(game: Game) -> None:
    _play(game).grid.randomize(game.rng)
    logger.debug("map_generated", method="randomize")


def _smooth(game: Game) -> None:
    _play(game).grid.smooth()
    logger.debug("map_generated", method="smooth")


def _carve_caves(game: Game) -> None:
    _play(game).grid.carve_caves(game.rng)
    logger.debug("map_generated", method="carve_caves")


def _grasslands(game: Game) -> None:
    _play(game).grid.grasslands(game.rng)
    logger.debug("map_generated", method="grasslands")


def _trees(game: Game) -> None:
    grid = _play(game).grid
    grid.scatter_trees(game.rng)
    grid.scatter_rabbits(game.rng)
    logger.debug("map_generated", method="trees")


def _noop(game: Game) -> None:
    pass


HANDLERS: dict[Command, Callable[[Game], None]] = {
    Command.NOOP: _noop,
    Command.NEW_GAME: new_game,
    Command.QUIT: quit_game,
    Command.PREV_ITEM: _prev_item,
    Command.NEXT_ITEM: _next_item,
    Command.EXECUTE_ITEM: _execute_item,
    Command.MAIN_MENU: main_menu,
    Command.WIN: win_game,
    Command.LOSE: lose_game,
    Command.RANDOMIZE: _randomize,
    Command.SMOOTH: _smooth,
    Command.CARVE_CAVES: _carve_caves,
    Command.GRASSLANDS: _grasslands,
    Command.TREES: _trees,
    **{command: _move(dx, dy) for command, (dx, dy) in MOVES.items()},
}


def run_command(game: Game, command: Command) -> None:
    HANDLERS[command](game)


def resolve_movement(screen: PlayScreen, before: Point) -> None:
    """Keep the player on the map and stop it at walls.

    Stepping into a wall digs it out to floor but leaves the player where
    it was; the next step in that direction enters the dug cell.
    """
    grid, player = screen.grid, screen.player
    x = min(max(player.x, 0), grid.width - 1)
    y = min(max(player.y, 0), grid.height - 1)
    player.position = Point(x, y)

    if player.position != before and grid.get_tile(x, y) == WALL:
        grid.set_tile(x, y, FLOOR)
        player.position = before
        logger.debug("wall_dug", x=x, y=y)


def handle_input(game: Game, code: int) -> None:
    """Dispatch one key code through the active screen's bindings."""
    screen = game.screen
    command = screen.bindings.lookup(code)
    if command is Command.NOOP:
        logger.debug("key_unbound", code=code, screen=screen)
        return

    logger.debug("command", code=code, command=command.value, screen=screen)
    if isinstance(screen, PlayScreen):
        before = screen.player.position
        run_command(game, command)
        if game.screen is screen:
            resolve_movement(screen, before)
    else:
        run_command(game, command)
