"""
Text rendering of board snapshots for the terminal front end.
"""
import numpy as np

from .cell import FLAGGED, HIDDEN, MINE
from .session import GameSession, GameState


SYMBOLS = {
    HIDDEN: ".",
    FLAGGED: "F",
    MINE: "*",
    0: " ",
}

WIN_MESSAGE = "You win!"
LOSS_MESSAGE = "Game over."


def render_board(observation: np.ndarray) -> str:
    """
    Render a snapshot as text with row and column indices.

    Args:
        observation: Array from ``Board.get_observation``.

    Returns:
        Multi-line string, one line per row.
    """
    rows, cols = observation.shape
    width = len(str(max(rows, cols) - 1))

    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(cols)
    )
    lines = [header]
    for row in range(rows):
        symbols = [
            SYMBOLS.get(int(value), str(value)).rjust(width)
            for value in observation[row]
        ]
        lines.append(str(row).rjust(width) + " " + " ".join(symbols))

    return "\n".join(lines)


def render_status(session: GameSession) -> str:
    """One-line summary of the session, with the end-of-game message."""
    if session.state == GameState.WON:
        return WIN_MESSAGE
    if session.state == GameState.LOST:
        return LOSS_MESSAGE
    return f"Mines left: {session.mines_remaining}"
