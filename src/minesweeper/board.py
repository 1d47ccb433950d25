"""
Board module for Minesweeper.

Owns the square grid of cells, the game-level counters and the game
state. Mine placement lives in :mod:`.generator` and the opening and
flagging rules live in :mod:`.reveal`; the board exposes them as
position-indexed commands.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from . import generator, reveal
from .cell import Cell
from .state import GameState

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns of the square grid.
        num_mines: Mines requested. Clamped when mines are placed if the
            board cannot hold that many outside the first move's safety zone.
    """

    size: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")


# Preset difficulty levels
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)
EXPERT = BoardConfig(24, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are stored in one flat list addressed by ``row * size + col``.
    A new board starts in ``GameState.INIT`` without mines; they are laid
    on the first ``open`` so the opened cell and its neighbors are safe.

    Attributes:
        config: Requested size and mine count.
        rng: Seed or numpy ``Generator`` used for mine placement.
        cells: The grid, row-major.
        state: Current game state.
        mine_count: Mines on the board (the request until generation, the
            clamped number after it).
        flags_placed: Number of flagged cells.
        exploded: Position of the mine that lost the game, if any.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: generator.RandomSource = field(default=None, repr=False)
    cells: List[Cell] = field(init=False, repr=False)
    state: GameState = field(init=False)
    mine_count: int = field(init=False)
    flags_placed: int = field(init=False)
    exploded: Optional[Position] = field(init=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self.reset()

    # ========================================================================
    # Grid Addressing (Low-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    def index(self, row: int, col: int) -> int:
        """Flat index of a position."""
        return row * self.size + col

    def position(self, index: int) -> Position:
        """(row, col) of a flat index."""
        return divmod(index, self.size)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the grid-adjacent positions of a cell.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Up to 8 (row, col) tuples, clipped at the board edges.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def cell_at(self, row: int, col: int) -> Cell:
        """Cell at a position the caller knows to be on the board."""
        return self.cells[self.index(row, col)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, row: int, col: int, by_user: bool = True) -> reveal.OutcomeDelta:
        """
        Open the cell at the given position.

        The first open of a game lays the mines around this position
        before revealing anything. Positions off the board are ignored.

        Args:
            row: Row index to open.
            col: Column index to open.
            by_user: False for engine-initiated opens, which never chord.

        Returns:
            The cells whose visibility changed and the resulting state.
        """
        if not self.is_valid_position(row, col):
            return reveal.OutcomeDelta(state=self.state)

        if self.state == GameState.INIT:
            generator.generate(self, (row, col), rng=self.rng)

        return reveal.open_cell(self, (row, col), by_user=by_user)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a cell.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if not self.is_valid_position(row, col):
            return False
        return reveal.toggle_flag(self, (row, col))

    def reset(self) -> None:
        """Reset board to a fresh, unmined game."""
        self.cells = [Cell() for _ in range(self.size * self.size)]
        self.state = GameState.INIT
        self.mine_count = self.config.num_mines
        self.flags_placed = 0
        self.exploded = None

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.state == GameState.LOST

    @property
    def mines_remaining(self) -> int:
        """Mines not yet accounted for by a flag."""
        return self.mine_count - self.flags_placed

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.cell_at(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array of shape (size, size) where:
                -1 = closed
                -2 = flagged
                0-8 = open with neighbor mine count
                9 = the mine that was opened
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self.cells),
            dtype=np.int8,
            count=len(self.cells),
        ).reshape(self.size, self.size)
        if self.exploded is not None:
            obs[self.exploded] = 9
        return obs


def new_board(
    size: int, mine_count: int, rng: generator.RandomSource = None
) -> Board:
    """Create a board in the INIT state."""
    return Board(BoardConfig(size, mine_count), rng=rng)
