"""
Cell module for Minesweeper.

Represents individual cells on the board: whether they hold a mine,
how many mines surround them, and what the player currently sees
(closed/open/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Visibility of a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Set during generation only.
        neighbor_mine_count: Mines among the up-to-8 adjacent cells (0-8).
        state: Current visibility (closed, open or flagged).
    """

    is_mine: bool = False
    neighbor_mine_count: int = 0
    state: CellState = CellState.CLOSED

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell went from closed to open, False if it was
            already open or is flagged.
        """
        if self.state != CellState.CLOSED:
            return False
        self.state = CellState.OPEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is open.
        """
        if self.state == CellState.OPEN:
            return False
        if self.state == CellState.CLOSED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.CLOSED
        return True

    @property
    def is_closed(self) -> bool:
        return self.state == CellState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state == CellState.OPEN

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to a compact integer for board snapshots.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Open cell with its neighbor mine count
        """
        if self.state == CellState.CLOSED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.neighbor_mine_count
