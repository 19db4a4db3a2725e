"""Tests for key binding tables."""

import copy

from grottos.engine.bindings import KEY_ENTER, BindingTable, Command, key
from grottos.engine.commands import HANDLERS, run_command
from grottos.engine.screens import END_BINDINGS, MENU_BINDINGS, PLAY_BINDINGS


def test_lookup_bound_code():
    table = BindingTable.from_pairs([(key("q"), Command.QUIT)])
    assert table.lookup(ord("q")) is Command.QUIT


def test_lookup_is_total():
    table = BindingTable.from_pairs(MENU_BINDINGS)
    for code in [-1, 0, 1, 255, 410, 2**31]:
        assert table.lookup(code) is Command.NOOP


def test_bind_overwrites():
    table = BindingTable.from_pairs([(KEY_ENTER, Command.WIN)])
    table.bind(KEY_ENTER, Command.LOSE)
    assert table.lookup(KEY_ENTER) is Command.LOSE
    assert len(table) == 1


def test_unbind_yields_noop():
    table = BindingTable.from_pairs([(key("x"), Command.QUIT)])
    table.unbind(key("x"))
    assert table.lookup(key("x")) is Command.NOOP
    # unbinding twice is harmless
    table.unbind(key("x"))


def test_later_pairs_win():
    table = BindingTable.from_pairs([(key("a"), Command.WIN), (key("a"), Command.LOSE)])
    assert table.lookup(key("a")) is Command.LOSE


def test_noop_changes_nothing(play_game):
    before = copy.deepcopy(play_game)
    run_command(play_game, Command.NOOP)
    assert play_game.screen == before.screen
    assert play_game.quit == before.quit


def test_every_bound_command_has_handler():
    for pairs in (MENU_BINDINGS, PLAY_BINDINGS, END_BINDINGS):
        for _, command in pairs:
            assert command in HANDLERS
    assert set(HANDLERS) == set(Command)


def test_vi_movement_keys():
    table = BindingTable.from_pairs(PLAY_BINDINGS)
    assert [table.lookup(key(c)) for c in "yuhjklbn"] == [
        Command.MOVE_NORTH_WEST,
        Command.MOVE_NORTH_EAST,
        Command.MOVE_WEST,
        Command.MOVE_SOUTH,
        Command.MOVE_NORTH,
        Command.MOVE_EAST,
        Command.MOVE_SOUTH_WEST,
        Command.MOVE_SOUTH_EAST,
    ]
