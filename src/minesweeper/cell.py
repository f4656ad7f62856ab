"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/revealed/flagged) and content (mine/number).
"""
from dataclasses import dataclass


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN = -1
FLAGGED = -2
MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Flags and reveal are tracked separately: after a loss every mine is
    revealed for display while keeping whatever flag the player set.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether this cell has been uncovered.
        is_flagged: Whether the player has marked this cell.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    def to_observation(self) -> int:
        """
        Convert cell to the value shown by the presentation layer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_revealed:
            return MINE if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            return FLAGGED
        return HIDDEN
