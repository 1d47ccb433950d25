"""
Terminal rendering for Minesweeper boards.

Maps cell and game state to colored glyphs. The board engine knows
nothing about presentation; everything visual lives here.
"""
from typing import Optional, Tuple

from rich.text import Text

from .board import Board
from .cell import Cell, CellState
from .state import GameState

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

CLOSED_GLYPH = "-"
MINE_GLYPH = "*"
FLAG_GLYPH = "F"
CURSOR_STYLE = "on bright_blue"

NUMBER_STYLES = {
    1: "blue",
    2: "green",
    3: "red",
    4: "purple",
    5: "rgb(128,0,0)",
    6: "rgb(64,224,208)",
    7: "black",
    8: "bright_black",
}


# ============================================================================
# Glyphs
# ============================================================================

def cell_glyph(cell: Cell, state: GameState, exploded: bool = False) -> Text:
    """
    Pick the glyph for one cell.

    Args:
        cell: Cell to draw.
        state: Current game state. Hidden mines are shown once it is over.
        exploded: Whether this is the mine that lost the game.

    Returns:
        A one-character styled Text.
    """
    if exploded:
        return Text(MINE_GLYPH, style="black on red")

    if cell.state == CellState.CLOSED:
        if cell.is_mine and state == GameState.LOST:
            return Text(MINE_GLYPH, style="red")
        if cell.is_mine and state == GameState.WON:
            return Text(MINE_GLYPH, style="red on white")
        return Text(CLOSED_GLYPH)

    if cell.state == CellState.FLAGGED:
        if state.is_over and not cell.is_mine:
            # Wrong flag.
            return Text(FLAG_GLYPH, style="red")
        return Text(FLAG_GLYPH, style="on red")

    if cell.neighbor_mine_count == 0:
        return Text(" ")
    return Text(
        str(cell.neighbor_mine_count),
        style=f"bold {NUMBER_STYLES[cell.neighbor_mine_count]}",
    )


def render_board(board: Board, cursor: Optional[Position] = None) -> Text:
    """
    Draw the whole board, one row per line.

    Args:
        board: Board to draw.
        cursor: (row, col) to highlight, or None.

    Returns:
        Styled text with cells separated by single spaces.
    """
    text = Text()
    for row in range(board.size):
        if row:
            text.append("\n")
        for col in range(board.size):
            if col:
                text.append(" ")
            glyph = cell_glyph(
                board.cell_at(row, col),
                board.state,
                exploded=board.exploded == (row, col),
            )
            if cursor == (row, col):
                glyph.stylize(CURSOR_STYLE)
            text.append_text(glyph)
    return text


def mines_counter(board: Board) -> str:
    """Remaining mines, zero-padded to the width of the mine count."""
    width = len(str(board.mine_count))
    return f"{board.mines_remaining:0{width}d}"
