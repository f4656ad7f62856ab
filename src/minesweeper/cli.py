"""
Command line front end for Minesweeper.

Usage:
    python main.py [ROWS COLS MINES] [--seed N] [--log-level LEVEL]

Commands while playing:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           start a new game
    q           quit
"""
import argparse
import logging
import random
import sys
from typing import Iterable, List, Optional, Tuple

from .board import DEFAULT_COLS, DEFAULT_MINES, DEFAULT_ROWS, MIN_DIMENSION
from .render import render_board, render_status
from .session import GameSession, create

HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "size",
        nargs="*",
        type=int,
        metavar="N",
        help=(
            f"ROWS COLS MINES (default: {DEFAULT_ROWS} {DEFAULT_COLS} "
            f"{DEFAULT_MINES})"
        ),
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    return parser


def resolve_size(values: List[int]) -> Tuple[int, int, int]:
    """
    Apply defaults and floors to the positional size arguments.

    Fewer than three values keep the defaults; rows and columns are raised
    to at least MIN_DIMENSION and mines to at least one.
    """
    if len(values) < 3:
        return DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_MINES
    rows, cols, mines = values[:3]
    return max(MIN_DIMENSION, rows), max(MIN_DIMENSION, cols), max(1, mines)


def parse_command(
    line: str, session: GameSession
) -> Optional[Tuple[str, int, int]]:
    """
    Parse a move like ``r 3 4`` into (action, row, col).

    Returns:
        The parsed move, or None if the line is malformed or the
        position is off the board.
    """
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f"):
        return None
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        return None
    if not session.board.is_valid_position(row, col):
        return None
    return parts[0], row, col


def show(session: GameSession) -> None:
    print(render_board(session.board.get_observation()))
    print(render_status(session))


def play(session: GameSession, lines: Iterable[str]) -> None:
    """
    Run the interactive loop over an iterable of input lines.

    Args:
        session: Session to play.
        lines: Source of commands, typically ``sys.stdin``.
    """
    show(session)
    print(HELP_TEXT)
    for line in lines:
        command = line.strip().lower()
        if command == "q":
            break
        if command == "n":
            session.restart()
            show(session)
            continue
        if session.over:
            print("Game finished. Type n for a new game or q to quit.")
            continue

        move = parse_command(command, session)
        if move is None:
            print(HELP_TEXT)
            continue
        action, row, col = move
        if action == "r":
            session.reveal(row, col)
        else:
            session.toggle_flag(row, col)
        show(session)


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and start a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    rows, cols, mines = resolve_size(args.size)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = create(rows, cols, mines, rng=rng)

    print(f"Board: {rows}x{cols} with {session.board.num_mines} mines")
    play(session, sys.stdin)


if __name__ == "__main__":
    main()
