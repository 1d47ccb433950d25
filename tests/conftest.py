"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, plant


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with its only mine in the bottom-right corner."""
    board = Board(BoardConfig(5, 1))
    plant(board, [(4, 4)])
    return board


@pytest.fixture
def two_mine_board() -> Board:
    """
    5x5 board with mines at (0, 0) and (0, 2).

    Counts: (0,1)=2, (1,1)=2, (1,0)=1, (1,2)=1, (1,3)=1, (0,3)=1,
    everything else 0.
    """
    board = Board(BoardConfig(5, 2))
    plant(board, [(0, 0), (0, 2)])
    return board


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full row of mines across row 2."""
    board = Board(BoardConfig(5, 5))
    plant(board, [(2, col) for col in range(5)])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)
