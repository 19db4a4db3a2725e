"""Commands and per-screen key binding tables.

Keys map to ``Command`` values rather than closures; the dispatcher in
``commands.py`` interprets them against the game state.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Command(Enum):
    NOOP = "noop"

    # Menu
    NEW_GAME = "new_game"
    QUIT = "quit"
    PREV_ITEM = "prev_item"
    NEXT_ITEM = "next_item"
    EXECUTE_ITEM = "execute_item"

    # Screen transitions
    MAIN_MENU = "main_menu"
    WIN = "win"
    LOSE = "lose"

    # Movement
    MOVE_NORTH = "move_north"
    MOVE_SOUTH = "move_south"
    MOVE_EAST = "move_east"
    MOVE_WEST = "move_west"
    MOVE_NORTH_EAST = "move_north_east"
    MOVE_NORTH_WEST = "move_north_west"
    MOVE_SOUTH_EAST = "move_south_east"
    MOVE_SOUTH_WEST = "move_south_west"

    # Map generation
    RANDOMIZE = "randomize"
    SMOOTH = "smooth"
    CARVE_CAVES = "carve_caves"
    GRASSLANDS = "grasslands"
    TREES = "trees"


# Key codes as returned by the terminal
KEY_ENTER = 10
KEY_ESCAPE = 27


def key(char: str) -> int:
    """Key code for a printable character."""
    return ord(char)


@dataclass
class BindingTable:
    """Total mapping from key code to command; unbound keys give NOOP."""

    bindings: dict[int, Command] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, Command]]) -> "BindingTable":
        table = cls()
        for code, command in pairs:
            table.bind(code, command)
        return table

    def lookup(self, code: int) -> Command:
        return self.bindings.get(code, Command.NOOP)

    def bind(self, code: int, command: Command) -> None:
        self.bindings[code] = command

    def unbind(self, code: int) -> None:
        self.bindings.pop(code, None)

    def __len__(self) -> int:
        """Number of bound keys; lets tests check a table's size."""
        return len(self.bindings)
