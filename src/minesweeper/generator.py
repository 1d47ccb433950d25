"""
Mine placement for Minesweeper.

Mines are laid lazily, once per game, when the player first opens a
cell. The opened cell and its 3x3 neighborhood are kept mine-free, then
every cell gets its neighbor mine count.
"""
import logging
from typing import TYPE_CHECKING, Iterable, Set, Tuple, Union

import numpy as np

from .state import GameState

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
RandomSource = Union[None, int, np.random.Generator]


# ============================================================================
# Helpers
# ============================================================================

def safety_zone(size: int, position: Position) -> Set[int]:
    """
    Flat indices of the 3x3 block centered on a position.

    Args:
        size: Board side length.
        position: (row, col) center, usually the first opened cell.

    Returns:
        Indices of the block, clipped at the board edges.
    """
    row, col = position
    return {
        r * size + c
        for r in range(max(0, row - 1), min(size, row + 2))
        for c in range(max(0, col - 1), min(size, col + 2))
    }


def count_neighbor_mines(size: int, mines: np.ndarray) -> np.ndarray:
    """
    Count mines around every cell.

    Args:
        size: Board side length.
        mines: Boolean (or 0/1) mine mask, flat or (size, size).

    Returns:
        (size, size) int8 array of counts over the 8 neighbors of each
        cell. The cell itself is never counted.
    """
    grid = np.asarray(mines, dtype=np.int8).reshape(size, size)

    # Zero border so edge cells sum over their clipped neighborhood.
    pad = np.pad(grid, 1, mode="constant")

    return (
        pad[:-2, :-2] + pad[:-2, 1:-1] + pad[:-2, 2:] +
        pad[1:-1, :-2]                 + pad[1:-1, 2:] +
        pad[2:, :-2]  + pad[2:, 1:-1]  + pad[2:, 2:]
    )


def _require_init(board: "Board") -> None:
    if board.state != GameState.INIT:
        raise RuntimeError(
            f"Mines are already placed (board is {board.state.name})"
        )


def _lay_mines(board: "Board", indices: Iterable[int]) -> None:
    """Mark mines, derive every neighbor count and start the game."""
    for index in indices:
        board.cells[index].is_mine = True

    mask = np.fromiter(
        (cell.is_mine for cell in board.cells),
        dtype=np.int8,
        count=len(board.cells),
    )
    counts = count_neighbor_mines(board.size, mask)
    for cell, count in zip(board.cells, counts.ravel()):
        cell.neighbor_mine_count = int(count)

    board.state = GameState.PLAYING


# ============================================================================
# Generation
# ============================================================================

def generate(
    board: "Board", safe_position: Position, rng: RandomSource = None
) -> None:
    """
    Lay mines on a fresh board, keeping the first move safe.

    The requested mine count is reduced to the number of cells outside
    the safety zone when it does not fit.

    Args:
        board: Board in the INIT state.
        safe_position: (row, col) of the first opened cell.
        rng: Seed or numpy Generator; None draws fresh entropy.

    Raises:
        RuntimeError: If the board already has its mines.
    """
    _require_init(board)

    size = board.size
    excluded = safety_zone(size, safe_position)
    eligible = np.array(
        [index for index in range(size * size) if index not in excluded],
        dtype=np.intp,
    )

    if board.mine_count > len(eligible):
        logger.debug(
            "Clamping mine count from %d to %d",
            board.mine_count, len(eligible),
        )
        board.mine_count = len(eligible)

    chosen = np.random.default_rng(rng).choice(
        eligible, size=board.mine_count, replace=False
    )
    _lay_mines(board, chosen.tolist())
    logger.debug(
        "Placed %d mines on a %dx%d board around %s",
        board.mine_count, size, size, safe_position,
    )


def plant(board: "Board", mine_positions: Iterable[Position]) -> None:
    """
    Lay mines at fixed positions instead of random ones.

    Sets the board's mine count to the number of distinct positions.
    Used to set up known layouts.

    Args:
        board: Board in the INIT state.
        mine_positions: (row, col) of every mine.

    Raises:
        RuntimeError: If the board already has its mines.
        ValueError: If a position is off the board.
    """
    _require_init(board)

    indices = set()
    for row, col in mine_positions:
        if not board.is_valid_position(row, col):
            raise ValueError(f"Mine position {(row, col)} is off the board")
        indices.add(board.index(row, col))

    board.mine_count = len(indices)
    _lay_mines(board, sorted(indices))
