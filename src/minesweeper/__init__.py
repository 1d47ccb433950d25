"""
Minesweeper package.

Provides the board engine (cells, mine generation, opening and flagging
rules) and a terminal front end built on top of it.
"""
from .cell import Cell, CellState
from .state import GameState
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    new_board,
)
from .generator import generate, plant, safety_zone, count_neighbor_mines
from .reveal import OutcomeDelta, open_cell, toggle_flag

__all__ = [
    "Cell",
    "CellState",
    "GameState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "new_board",
    "generate",
    "plant",
    "safety_zone",
    "count_neighbor_mines",
    "OutcomeDelta",
    "open_cell",
    "toggle_flag",
]
