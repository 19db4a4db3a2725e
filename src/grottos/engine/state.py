"""Mutable game state: the player, the three screen kinds and the game.

Exactly one screen is active at a time. Transitions replace
``Game.screen`` outright; there is no screen history.
"""

import random
from dataclasses import dataclass, field

from .bindings import BindingTable, Command
from .camera import Viewport
from .grid import Point, TileGrid

# Fixed display size in terminal cells
DISPLAY_WIDTH = 80
DISPLAY_HEIGHT = 24

# Map area of the Play screen; the rows below it hold the status line
VIEWPORT_WIDTH = 60
VIEWPORT_HEIGHT = 20


@dataclass
class Player:
    position: Point = Point(0, 0)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y


@dataclass(frozen=True)
class MenuItem:
    label: str
    command: Command


@dataclass
class MenuScreen:
    """A titled list of items with a wrapping selection cursor."""

    title: str
    items: list[MenuItem]
    bindings: BindingTable
    selected: int = 0

    def __post_init__(self):
        if not self.items:
            raise ValueError("a menu needs at least one item")

    def prev_item(self) -> None:
        self.select_item(self.selected - 1)

    def next_item(self) -> None:
        self.select_item(self.selected + 1)

    def select_item(self, index: int) -> None:
        last = len(self.items) - 1
        if index > last:
            index = 0
        elif index < 0:
            index = last
        self.selected = index

    @property
    def current_item(self) -> MenuItem:
        return self.items[self.selected]


@dataclass
class PlayScreen:
    grid: TileGrid
    bindings: BindingTable
    player: Player = field(default_factory=Player)
    viewport: Viewport = Viewport(VIEWPORT_WIDTH, VIEWPORT_HEIGHT)


@dataclass
class EndScreen:
    message: str
    bindings: BindingTable


Screen = MenuScreen | PlayScreen | EndScreen


@dataclass
class Game:
    """Process-wide state owned by the main loop."""

    screen: Screen
    width: int = DISPLAY_WIDTH
    height: int = DISPLAY_HEIGHT
    quit: bool = False
    rng: random.Random = field(default_factory=random.Random)
