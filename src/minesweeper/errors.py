"""
Exceptions raised by the Minesweeper engine.

Normal play never raises; these signal contract violations by the caller.
"""


class MinesweeperError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board parameters or mine layout violate engine invariants."""


class OutOfBounds(MinesweeperError, IndexError):
    """A coordinate outside the grid was passed to the engine."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col
