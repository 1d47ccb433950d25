"""
Unit tests for Cell class.

Tests cell state management, open/flag behavior, and observation conversion.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_closed(self) -> None:
        """New cell should be closed by default."""
        cell = Cell()
        assert cell.state == CellState.CLOSED
        assert cell.is_closed is True

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        """New cell should have 0 neighbor mines by default."""
        cell = Cell()
        assert cell.neighbor_mine_count == 0


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_closed_cell(self, closed_cell: Cell) -> None:
        """Opening a closed cell succeeds and changes its state."""
        assert closed_cell.open() is True
        assert closed_cell.state == CellState.OPEN
        assert closed_cell.is_open is True

    def test_open_already_open_returns_false(self, closed_cell: Cell) -> None:
        """Opening an open cell is not a new reveal."""
        closed_cell.open()
        assert closed_cell.open() is False

    def test_open_flagged_cell_returns_false(self, closed_cell: Cell) -> None:
        """A flagged cell stays flagged when opened."""
        closed_cell.toggle_flag()
        assert closed_cell.open() is False
        assert closed_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_closed_cell(self, closed_cell: Cell) -> None:
        """Flagging a closed cell should succeed."""
        assert closed_cell.toggle_flag() is True
        assert closed_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_closed(self, closed_cell: Cell) -> None:
        """Unflagging a cell should return it to closed."""
        closed_cell.toggle_flag()
        closed_cell.toggle_flag()
        assert closed_cell.is_closed is True

    def test_flag_open_cell_returns_false(self, closed_cell: Cell) -> None:
        """Cannot flag an open cell."""
        closed_cell.open()
        assert closed_cell.toggle_flag() is False
        assert closed_cell.is_open is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test compact cell values."""

    def test_closed_cell_observation(self, closed_cell: Cell) -> None:
        assert closed_cell.to_observation() == -1

    def test_flagged_cell_observation(self, closed_cell: Cell) -> None:
        closed_cell.toggle_flag()
        assert closed_cell.to_observation() == -2

    def test_closed_mine_looks_closed(self, mine_cell: Cell) -> None:
        """A mine is indistinguishable from any other closed cell."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(0, 9))
    def test_open_cell_observation_matches_count(self, count: int) -> None:
        """Open cell returns its neighbor mine count."""
        cell = Cell(neighbor_mine_count=count)
        cell.open()
        assert cell.to_observation() == count
