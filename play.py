#!/usr/bin/env python3
"""
Play N x N TicTacToe in the terminal.

Usage:
    python play.py                 # choose the board size every round
    python play.py --size 4        # 4x4 board every round
"""

import sys
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import main


if __name__ == "__main__":
    raise SystemExit(main())
