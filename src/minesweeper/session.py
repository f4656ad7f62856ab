"""
Game session module for Minesweeper.

Wraps a board with the transient status of one game and enforces
the rules: safe first click, flood reveal, flags, win and loss.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    One game of Minesweeper.

    All mutation goes through :meth:`reveal` and :meth:`toggle_flag`.
    Once ``over`` is set, both become no-ops.

    Attributes:
        board: The grid owned by this session.
        started: True after the first reveal placed the mines.
        over: True once the game was won or lost.
        won: True if every safe cell was revealed.
        rng: Random source used for mine placement.
    """

    board: Board = field(default_factory=Board)
    started: bool = False
    over: bool = False
    won: bool = False
    rng: Optional[random.Random] = field(default=None, repr=False)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On first reveal, places mines avoiding this cell. A zero cell
        floods outward through its connected zero region; a mine ends
        the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any cell changed, False for a no-op.

        Raises:
            OutOfBounds: If the position is off the board.
        """
        cell = self.board.get_cell(row, col)
        if self.over or cell.is_revealed or cell.is_flagged:
            return False

        if not self.started:
            if not self.board.mines_placed:
                self.board.place_mines(row, col, self.rng)
            self.started = True

        if cell.is_mine:
            cell.is_revealed = True
            self.board.reveal_mines()
            self._end(won=False)
            return True

        self._flood_reveal(row, col)
        self._check_win_condition()
        return True

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal the connected zero region around a cell and its border."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self.board.get_cell(current_row, current_col)
            if not cell.reveal():
                continue
            if cell.adjacent_mines > 0:
                continue
            for neighbor in self.board.neighbors(current_row, current_col):
                neighbor_cell = self.board.get_cell(*neighbor)
                if neighbor_cell.is_hidden:
                    stack.append(neighbor)

    def _check_win_condition(self) -> None:
        """Win once only mines remain covered."""
        if self.board.unrevealed_count() == self.board.num_mines:
            self._end(won=True)

    def _end(self, won: bool) -> None:
        self.over = True
        self.won = won
        logger.info("Game %s", "won" if won else "lost")

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfBounds: If the position is off the board.
        """
        cell = self.board.get_cell(row, col)
        if self.over:
            return False
        return cell.toggle_flag()

    def restart(self) -> None:
        """Start a new game with the same configuration."""
        self.board.reset()
        self.started = False
        self.over = False
        self.won = False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self.over:
            return GameState.WON if self.won else GameState.LOST
        if self.started:
            return GameState.PLAYING
        return GameState.READY

    @property
    def is_playing(self) -> bool:
        """Check if game still accepts moves."""
        return not self.over

    @property
    def is_won(self) -> bool:
        return self.over and self.won

    @property
    def is_lost(self) -> bool:
        return self.over and not self.won

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.board.num_mines - self.board.flag_count()


def create(
    rows: int,
    cols: int,
    requested_mines: int,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Create a fresh game session.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        requested_mines: Desired mine count, clamped to [1, rows * cols - 1].
        rng: Optional random source for reproducible games.

    Returns:
        A session with an empty grid that has not started yet.

    Raises:
        InvalidConfiguration: If the dimensions cannot form a board.
    """
    config = BoardConfig(rows, cols, requested_mines)
    return GameSession(board=Board(config), rng=rng)
