"""Terminal access for the game loop, backed by curses."""

import contextlib
import curses
from typing import Protocol

from .logging import get_logger

logger = get_logger(__name__)


class TerminalError(Exception):
    """The terminal could not be put into the mode the game needs."""


class Terminal(Protocol):
    """The display and keyboard operations the game uses."""

    def init(self) -> None: ...

    def shutdown(self) -> None: ...

    def clear(self) -> None: ...

    def write_char(self, row: int, col: int, ch: str) -> None: ...

    def write_string(self, row: int, col: int, s: str) -> None: ...

    def set_bold(self, on: bool) -> None: ...

    def read_key(self) -> int: ...


class CursesTerminal:
    """Raw-mode curses screen: cbreak, no echo, hidden cursor, keypad keys."""

    def __init__(self):
        self.window: "curses.window | None" = None

    def init(self) -> None:
        logger.debug("terminal_init")
        try:
            self.window = curses.initscr()
            curses.cbreak()
            curses.noecho()
            self.window.keypad(True)
            self.window.clear()
        except curses.error as exc:
            with contextlib.suppress(curses.error):
                self.shutdown()
            raise TerminalError(f"could not initialize terminal: {exc}") from exc

        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor; the game still works.
            logger.warning("cursor_hide_unsupported")

    def shutdown(self) -> None:
        if self.window is None:
            return
        logger.debug("terminal_shutdown")
        try:
            self.window.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            self.window = None
            curses.endwin()

    def clear(self) -> None:
        self._window().erase()

    def write_char(self, row: int, col: int, ch: str) -> None:
        try:
            self._window().addch(row, col, ch)
        except curses.error:
            # Writing the bottom-right cell, or off-window, is not an error here.
            pass

    def write_string(self, row: int, col: int, s: str) -> None:
        try:
            self._window().addstr(row, col, s)
        except curses.error:
            pass

    def set_bold(self, on: bool) -> None:
        if on:
            self._window().attron(curses.A_BOLD)
        else:
            self._window().attroff(curses.A_BOLD)

    def read_key(self) -> int:
        """Block until a key is pressed and return its code."""
        return self._window().getch()

    def _window(self) -> "curses.window":
        if self.window is None:
            raise TerminalError("terminal is not initialized")
        return self.window
