"""Screen factories with their literal key binding tables."""

import random

from .bindings import KEY_ENTER, KEY_ESCAPE, BindingTable, Command, key
from .grid import TileGrid
from .state import EndScreen, MenuItem, MenuScreen, PlayScreen

TITLE = "Grottos"
WIN_MESSAGE = "You win!!!"
LOSE_MESSAGE = "You lose!!!"

# Play maps are this many display screens wide and tall
MAP_SCALE = 2

MENU_BINDINGS = [
    (key("n"), Command.NEW_GAME),
    (key("q"), Command.QUIT),
    (key("k"), Command.PREV_ITEM),
    (key("j"), Command.NEXT_ITEM),
    (KEY_ENTER, Command.EXECUTE_ITEM),
]

PLAY_BINDINGS = [
    (key("y"), Command.MOVE_NORTH_WEST),
    (key("u"), Command.MOVE_NORTH_EAST),
    (key("h"), Command.MOVE_WEST),
    (key("j"), Command.MOVE_SOUTH),
    (key("k"), Command.MOVE_NORTH),
    (key("l"), Command.MOVE_EAST),
    (key("b"), Command.MOVE_SOUTH_WEST),
    (key("n"), Command.MOVE_SOUTH_EAST),
    (key("r"), Command.RANDOMIZE),
    (key("s"), Command.SMOOTH),
    (key("c"), Command.CARVE_CAVES),
    (key("g"), Command.GRASSLANDS),
    (key("t"), Command.TREES),
    (key("q"), Command.MAIN_MENU),
    (KEY_ENTER, Command.WIN),
    (KEY_ESCAPE, Command.LOSE),
]

END_BINDINGS = [
    (KEY_ENTER, Command.MAIN_MENU),
]


def main_menu_screen() -> MenuScreen:
    return MenuScreen(
        title=TITLE,
        items=[
            MenuItem("New Game", Command.NEW_GAME),
            MenuItem("Quit", Command.QUIT),
        ],
        bindings=BindingTable.from_pairs(MENU_BINDINGS),
    )


def play_screen(width: int, height: int, rng: random.Random) -> PlayScreen:
    """A fresh cave map of the given size with the player at the origin."""
    grid = TileGrid(width, height)
    grid.carve_caves(rng)
    return PlayScreen(grid=grid, bindings=BindingTable.from_pairs(PLAY_BINDINGS))


def end_screen(message: str) -> EndScreen:
    return EndScreen(message=message, bindings=BindingTable.from_pairs(END_BINDINGS))
