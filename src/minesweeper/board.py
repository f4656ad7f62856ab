"""
Board module for Minesweeper game.

Implements the grid of cells with mine placement, adjacency counts
and the read-only snapshot handed to the presentation layer.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_ROWS = 9
DEFAULT_COLS = 9
DEFAULT_MINES = 10

# Smallest grid side accepted by the command line front end
MIN_DIMENSION = 5

# Rejected placement attempts allowed per cell before falling back
PLACEMENT_RETRY_FACTOR = 10

Position = Tuple[int, int]


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    The mine count is clamped rather than rejected, so any positive
    request yields a playable board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place, clamped to [1, rows * cols - 1].
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    num_mines: int = DEFAULT_MINES

    def __post_init__(self) -> None:
        """Validate dimensions and clamp the mine count."""
        self._validate()
        self.num_mines = max(1, min(self.num_mines, self.cell_count - 1))

    def _validate(self) -> None:
        """Ensure the grid can hold at least one mine and one safe cell."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.rows * self.cols < 2:
            raise InvalidConfiguration("Board needs at least two cells")

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells live in one flat row-major list indexed by ``row * cols + col``.
    Game rules (first click, flood reveal, win/loss) belong to
    :class:`~minesweeper.session.GameSession`; the board only knows
    about layout.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._cells = [Cell() for _ in range(self.config.cell_count)]
        self._mines_placed = False

    def _index(self, row: int, col: int) -> int:
        return row * self.config.cols + col

    def _position(self, index: int) -> Position:
        return divmod(index, self.config.cols)

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def check_position(self, row: int, col: int) -> None:
        """Raise OutOfBounds unless the position is on the board."""
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.cols)

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        The returned cell belongs to the board; callers must treat it as
        read-only and go through the session to change it.

        Raises:
            OutOfBounds: If the position is off the board.
        """
        self.check_position(row, col)
        return self._cells[self._index(row, col)]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 in-bounds neighbors.
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

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    @property
    def mines_placed(self) -> bool:
        """Whether the mine layout has been fixed for this game."""
        return self._mines_placed

    def place_mines(
        self,
        safe_row: int,
        safe_col: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Place mines randomly, keeping one cell mine-free.

        Picks uniformly random cells and rejects the safe cell and
        existing mines. Once the rejections exceed a multiple of the cell
        count, the remaining mines are drawn directly from the cells still
        available, so dense boards always terminate.

        Args:
            safe_row: Row of the cell that must not hold a mine.
            safe_col: Column of the cell that must not hold a mine.
            rng: Random source, defaults to the ``random`` module.

        Raises:
            InvalidConfiguration: If mines were already placed.
            OutOfBounds: If the safe cell is off the board.
        """
        self.check_position(safe_row, safe_col)
        if self._mines_placed:
            raise InvalidConfiguration("Mines are already placed")
        rng = rng or random

        safe_index = self._index(safe_row, safe_col)
        cell_count = self.config.cell_count
        max_rejections = PLACEMENT_RETRY_FACTOR * cell_count
        placed = 0
        rejections = 0

        while placed < self.config.num_mines and rejections < max_rejections:
            index = rng.randrange(cell_count)
            if index == safe_index or self._cells[index].is_mine:
                rejections += 1
                continue
            self._cells[index].is_mine = True
            placed += 1

        remaining = self.config.num_mines - placed
        if remaining:
            logger.debug(
                "Placement fell back after %d rejections, %d mines left",
                rejections, remaining,
            )
            candidates = [
                index for index, cell in enumerate(self._cells)
                if index != safe_index and not cell.is_mine
            ]
            for index in rng.sample(candidates, remaining):
                self._cells[index].is_mine = True

        self._mines_placed = True
        self.compute_adjacents()
        logger.debug(
            "Placed %d mines on %dx%d board, safe cell (%d, %d)",
            self.config.num_mines, self.config.rows, self.config.cols,
            safe_row, safe_col,
        )

    def set_mines(self, positions: Iterable[Position]) -> None:
        """
        Place an explicit mine layout.

        Args:
            positions: Exactly ``num_mines`` distinct (row, col) pairs.

        Raises:
            InvalidConfiguration: If mines were already placed or the
                layout does not match the configured mine count.
            OutOfBounds: If a position is off the board.
        """
        if self._mines_placed:
            raise InvalidConfiguration("Mines are already placed")
        indices = set()
        for row, col in positions:
            self.check_position(row, col)
            indices.add(self._index(row, col))
        if len(indices) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} distinct mines, "
                f"got {len(indices)}"
            )
        for index in indices:
            self._cells[index].is_mine = True
        self._mines_placed = True
        self.compute_adjacents()

    def compute_adjacents(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for index, cell in enumerate(self._cells):
            if cell.is_mine:
                continue
            row, col = self._position(index)
            cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._cells[self._index(neighbor_row, neighbor_col)].is_mine:
                count += 1
        return count

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def reveal_mines(self) -> None:
        """Uncover every mine for the end-of-game display, keeping flags."""
        for cell in self._cells:
            if cell.is_mine:
                cell.is_revealed = True

    def unrevealed_count(self) -> int:
        """Count cells that are still covered, flagged or not."""
        return sum(1 for cell in self._cells if not cell.is_revealed)

    def flag_count(self) -> int:
        """Count flagged cells."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    def mine_positions(self) -> List[Position]:
        """Positions of all mines in row-major order."""
        return [
            self._position(index)
            for index, cell in enumerate(self._cells)
            if cell.is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get a snapshot of the board for rendering.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(
            self.config.rows, self.config.cols
        )

    def reset(self) -> None:
        """Reset board to an empty grid with no mines."""
        self._init_grid()
