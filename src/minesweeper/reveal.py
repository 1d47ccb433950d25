"""
Opening and flagging rules for Minesweeper.

Opening a cell with no adjacent mines floods outward through the empty
region up to its numbered border. Opening an already open number again
"chords": once enough neighbors are flagged, every other closed
neighbor is opened. The flood runs on an explicit worklist, so large
boards never hit the recursion limit.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Deque, List, Set, Tuple

from .cell import Cell
from .state import GameState

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Result Type
# ============================================================================

@dataclass
class OutcomeDelta:
    """
    Result of an open command.

    Attributes:
        changed: Positions whose visibility changed, in reveal order.
        state: Board state after the command.
    """

    changed: List[Position] = field(default_factory=list)
    state: GameState = GameState.INIT


# ============================================================================
# Neighbor Queries (Low-level)
# ============================================================================

def count_adjacent_flags(board: "Board", row: int, col: int) -> int:
    """Count flagged cells adjacent to a position."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.cell_at(neighbor_row, neighbor_col).is_flagged:
            count += 1
    return count


def _should_cascade(
    board: "Board", row: int, col: int, cell: Cell, by_user: bool, is_new: bool
) -> bool:
    if cell.neighbor_mine_count == 0:
        return True
    # Chording: the player's flags are trusted to cover the number.
    if by_user and not is_new:
        flags = count_adjacent_flags(board, row, col)
        return flags >= cell.neighbor_mine_count
    return False


def _all_safe_cells_open(board: "Board") -> bool:
    return not any(
        cell.is_closed and not cell.is_mine for cell in board.cells
    )


# ============================================================================
# Commands
# ============================================================================

def open_cell(
    board: "Board", position: Position, by_user: bool = True
) -> OutcomeDelta:
    """
    Open a cell and everything it cascades into.

    Flagged cells are skipped. Opening a mine loses the game at once and
    stops the cascade. The win check runs after the cascade settles.
    Boards that are not in play are left untouched.

    Args:
        board: Board with its mines placed.
        position: (row, col) on the board.
        by_user: Whether the player issued the command. Only player opens
            of an already open cell can chord.

    Returns:
        The cells that were opened and the resulting board state.
    """
    delta = OutcomeDelta(state=board.state)
    if board.state != GameState.PLAYING:
        return delta

    queue: Deque[Tuple[Position, bool]] = deque([(position, by_user)])
    queued: Set[Position] = {position}

    while queue:
        (row, col), from_user = queue.popleft()
        cell = board.cell_at(row, col)

        if cell.is_flagged:
            continue

        if cell.is_mine:
            board.state = GameState.LOST
            board.exploded = (row, col)
            logger.info("Mine opened at %s, game lost", (row, col))
            delta.state = board.state
            return delta

        is_new = cell.open()
        if is_new:
            delta.changed.append((row, col))

        if not _should_cascade(board, row, col, cell, from_user, is_new):
            continue

        for neighbor in board.neighbors(row, col):
            if neighbor in queued or not board.cell_at(*neighbor).is_closed:
                continue
            queued.add(neighbor)
            queue.append((neighbor, False))

    if _all_safe_cells_open(board):
        board.state = GameState.WON
        logger.info("All safe cells open, game won")

    delta.state = board.state
    return delta


def toggle_flag(board: "Board", position: Position) -> bool:
    """
    Flag a closed cell or unflag a flagged one.

    Rejected while the game is not in play, on open cells, and when every
    mine already has a flag.

    Returns:
        True if the flag was toggled, False otherwise.
    """
    if board.state != GameState.PLAYING:
        return False

    cell = board.cell_at(*position)
    if cell.is_open:
        return False
    if cell.is_closed and board.flags_placed >= board.mine_count:
        return False

    cell.toggle_flag()
    board.flags_placed += 1 if cell.is_flagged else -1
    return True
