"""Shared test fixtures for Grottos."""

import random

import pytest

from grottos.app import create_game
from grottos.config import Config
from grottos.engine.bindings import BindingTable
from grottos.engine.grid import TileGrid
from grottos.engine.screens import PLAY_BINDINGS
from grottos.engine.state import Game, PlayScreen


class FakeTerminal:
    """Records what is drawn and replays a scripted list of key codes."""

    def __init__(self, keys: list[int] | None = None):
        self.keys = list(keys or [])
        self.cells: dict[tuple[int, int], str] = {}
        self.bold = False
        self.bold_writes: list[str] = []
        self.frames = 0
        self.initialized = False
        self.shut_down = False

    def init(self) -> None:
        self.initialized = True

    def shutdown(self) -> None:
        self.shut_down = True

    def clear(self) -> None:
        self.cells.clear()
        self.frames += 1

    def write_char(self, row: int, col: int, ch: str) -> None:
        self.cells[(row, col)] = ch

    def write_string(self, row: int, col: int, s: str) -> None:
        if self.bold:
            self.bold_writes.append(s)
        for i, ch in enumerate(s):
            self.cells[(row, col + i)] = ch

    def set_bold(self, on: bool) -> None:
        self.bold = on

    def read_key(self) -> int:
        if not self.keys:
            raise AssertionError("game asked for more input than was scripted")
        return self.keys.pop(0)

    def line(self, row: int, width: int = 80) -> str:
        return "".join(self.cells.get((row, col), " ") for col in range(width)).rstrip()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def config() -> Config:
    return Config(log_file=None, seed=1234)


@pytest.fixture
def game(config: Config) -> Game:
    return create_game(config)


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def make_terminal():
    """Build a fake terminal that will feed the given key codes."""
    return FakeTerminal


@pytest.fixture
def open_field() -> TileGrid:
    return TileGrid(10, 10)


@pytest.fixture
def play_game(game: Game, open_field: TileGrid) -> Game:
    """A game on the Play screen over an all-floor 10x10 map."""
    game.screen = PlayScreen(
        grid=open_field, bindings=BindingTable.from_pairs(PLAY_BINDINGS)
    )
    return game
