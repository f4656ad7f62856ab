#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [ROWS COLS MINES] [--seed N] [--log-level LEVEL]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
