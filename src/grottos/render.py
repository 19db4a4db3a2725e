"""Drawing of each screen kind onto a terminal.

Every call repaints the whole screen; nothing is carried over between
frames.
"""

from .engine.state import EndScreen, Game, MenuScreen, PlayScreen
from .terminal import Terminal

PLAYER_GLYPH = "@"
MENU_OFFSET = 2


def render(game: Game, terminal: Terminal) -> None:
    """Draw the active screen."""
    terminal.clear()
    match game.screen:
        case MenuScreen() as screen:
            _render_menu(screen, terminal)
        case PlayScreen() as screen:
            _render_play(screen, terminal)
        case EndScreen() as screen:
            terminal.write_string(0, 0, screen.message)


def _render_menu(screen: MenuScreen, terminal: Terminal) -> None:
    terminal.set_bold(True)
    terminal.write_string(0, 0, screen.title)
    terminal.set_bold(False)

    for i, item in enumerate(screen.items):
        indicator = "> " if i == screen.selected else "  "
        terminal.write_string(i + MENU_OFFSET, 0, indicator + item.label)


def _render_play(screen: PlayScreen, terminal: Terminal) -> None:
    grid, player, viewport = screen.grid, screen.player, screen.viewport
    origin = viewport.origin(grid.width, grid.height, player.position)

    for vx, vy, tile in viewport.cells(grid, origin):
        terminal.write_char(vy, vx, tile)

    marker = viewport.to_screen(origin, player.position)
    terminal.write_char(marker.y, marker.x, PLAYER_GLYPH)
    terminal.write_string(viewport.height + 1, 0, f"[{player.x}, {player.y}]")
