"""
Keyboard-driven terminal front end for Minesweeper.

Reads raw key presses, turns them into cursor moves, flags and opens
against a :class:`~minesweeper.board.Board`, and redraws the board after
every command.
"""
import logging
import os
import select
import sys
import termios
import tty
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, TextIO, Tuple

from rich.console import Console
from rich.live import Live
from rich.prompt import IntPrompt
from rich.text import Text

from .board import Board
from .render import mines_counter, render_board
from .state import GameState

logger = logging.getLogger(__name__)


# ============================================================================
# Key Decoding
# ============================================================================

class Action(Enum):
    """Commands the player can issue from the keyboard."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    OPEN = auto()
    FLAG = auto()
    QUIT = auto()


ESCAPE = "\x1b"
# How long to wait for the rest of an arrow-key escape sequence.
ESCAPE_TIMEOUT = 0.05

KEY_BINDINGS = {
    "w": Action.UP,
    "a": Action.LEFT,
    "s": Action.DOWN,
    "d": Action.RIGHT,
    "\x1b[A": Action.UP,
    "\x1b[B": Action.DOWN,
    "\x1b[C": Action.RIGHT,
    "\x1b[D": Action.LEFT,
    "\x1bOA": Action.UP,
    "\x1bOB": Action.DOWN,
    "\x1bOC": Action.RIGHT,
    "\x1bOD": Action.LEFT,
    " ": Action.OPEN,
    "\r": Action.OPEN,
    "\n": Action.OPEN,
    "f": Action.FLAG,
    "q": Action.QUIT,
    ESCAPE: Action.QUIT,
    "\x03": Action.QUIT,  # Ctrl-C in raw mode
}

MOVES = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


def decode_key(key: str) -> Optional[Action]:
    """Map a raw key sequence to an action, or None if unbound."""
    return KEY_BINDINGS.get(key)


def read_key(stream: Optional[TextIO] = None) -> str:
    """
    Block until a key is pressed and return its raw sequence.

    The terminal is switched to raw mode for the read and always
    restored afterwards. Arrow keys arrive as three-character escape
    sequences; a lone escape is returned as is.
    """
    fd = (stream or sys.stdin).fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = os.read(fd, 1).decode(errors="ignore")
        if key == ESCAPE:
            while len(key) < 3 and select.select([fd], [], [], ESCAPE_TIMEOUT)[0]:
                key += os.read(fd, 1).decode(errors="ignore")
        return key
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def prompt_int(
    message: str,
    minimum: int = 0,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Ask for an integer until one of at least ``minimum`` is entered."""
    console = console or Console()
    while True:
        value = IntPrompt.ask(message, console=console, stream=stream)
        if value >= minimum:
            return value
        console.print(
            f"[prompt.invalid]Please enter a number of at least {minimum}"
        )


# ============================================================================
# Cursor
# ============================================================================

@dataclass
class Cursor:
    """Highlighted cell, kept on the board."""

    row: int = 0
    col: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def move(self, action: Action, size: int) -> None:
        """Step one cell in the action's direction, stopping at the edges."""
        delta_row, delta_col = MOVES[action]
        self.row = min(max(self.row + delta_row, 0), size - 1)
        self.col = min(max(self.col + delta_col, 0), size - 1)


# ============================================================================
# Game Loop
# ============================================================================

class TerminalGame:
    """
    Interactive game session on one board.

    Args:
        board: Board to play on.
        console: Rich console to draw to.
        key_reader: Callable returning the next raw key; defaults to
            reading the controlling terminal.
    """

    def __init__(
        self,
        board: Board,
        console: Optional[Console] = None,
        key_reader: Callable[[], str] = read_key,
    ) -> None:
        self.board = board
        self.console = console or Console()
        self.cursor = Cursor()
        self._read_key = key_reader

    def handle(self, action: Optional[Action]) -> bool:
        """
        Apply one action to the board or cursor.

        Returns:
            False when the session should end (quit, win or loss).
        """
        if action is None:
            return True
        if action == Action.QUIT:
            return False
        if action in MOVES:
            self.cursor.move(action, self.board.size)
        elif action == Action.FLAG:
            self.board.toggle_flag(*self.cursor.position)
        elif action == Action.OPEN:
            self.board.open(*self.cursor.position)
        return not self.board.state.is_over

    def view(self, show_cursor: bool = True) -> Text:
        """Board followed by the remaining-mines counter."""
        cursor = self.cursor.position if show_cursor else None
        text = render_board(self.board, cursor)
        text.append("\n")
        text.append(mines_counter(self.board))
        return text

    def play(self) -> GameState:
        """
        Run the input loop until the player quits or the game ends.

        Returns:
            The board state when the loop stopped.
        """
        with Live(
            self.view(),
            console=self.console,
            auto_refresh=False,
            transient=True,
        ) as live:
            while self.handle(decode_key(self._read_key())):
                live.update(self.view(), refresh=True)

        self.console.print(self.view(show_cursor=False))
        if self.board.is_won:
            self.console.print("[bold green]You win!")
        elif self.board.is_lost:
            self.console.print("[bold red]Game over!")
        logger.debug("Session ended in state %s", self.board.state.name)
        return self.board.state
