"""
Minesweeper game engine.

Provides board state, mine placement, flood reveal, flags and
win/loss detection for a single-player game.
"""
from .cell import Cell
from .board import (
    Board,
    BoardConfig,
    DEFAULT_COLS,
    DEFAULT_MINES,
    DEFAULT_ROWS,
    MIN_DIMENSION,
)
from .errors import InvalidConfiguration, MinesweeperError, OutOfBounds
from .session import GameSession, GameState, create

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "DEFAULT_COLS",
    "DEFAULT_MINES",
    "DEFAULT_ROWS",
    "MIN_DIMENSION",
    "InvalidConfiguration",
    "MinesweeperError",
    "OutOfBounds",
    "GameSession",
    "GameState",
    "create",
]
