"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession, create


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def default_session(rng: random.Random) -> GameSession:
    """Create a default 9x9 session with 10 mines."""
    return create(9, 9, 10, rng=rng)


@pytest.fixture
def small_session(rng: random.Random) -> GameSession:
    """Create a 5x5 session with a single mine."""
    return create(5, 5, 1, rng=rng)


@pytest.fixture
def corner_session() -> GameSession:
    """5x5 session with mines fixed at (0, 0), (0, 1) and (1, 0)."""
    session = create(5, 5, 3)
    session.board.set_mines([(0, 0), (0, 1), (1, 0)])
    return session


@pytest.fixture
def walled_session() -> GameSession:
    """
    9x9 session with a square wall of 24 mines on rows/cols 1 and 7.

    Inside the wall sits a 3x3 zero region (rows/cols 3-5) bordered by
    numbered cells; the outer ring beyond the wall is unreachable.
    """
    mines = []
    for index in range(1, 8):
        mines.append((1, index))
        mines.append((7, index))
    for index in range(2, 7):
        mines.append((index, 1))
        mines.append((index, 7))
    session = create(9, 9, len(mines))
    session.board.set_mines(mines)
    return session


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def fresh_board() -> Board:
    """Create a 5x5 board with one mine and no layout yet."""
    return Board(BoardConfig(5, 5, 1))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell
