"""
N x N TicTacToe - two players, one terminal.

The board side N is chosen per round (3 to 30). A move wins when it fills a
row, a column, the main diagonal or the anti-diagonal with the mover's mark;
a full board without a winner is a draw.
"""

from .board import Board, EMPTY, X, O, SYMBOLS, opponent
from .config import GameConfig, parse_board_size, parse_int, MIN_SIZE, MAX_SIZE, DEFAULT_SIZE
from .errors import TicTacToeError, OutOfBounds, InvalidMove, InputExhausted
from .geometry import (
    row,
    col,
    index_of,
    row_range,
    column_set,
    main_diagonal,
    anti_diagonal,
    on_main_diagonal,
    on_anti_diagonal,
)
from .rules import Line, winning_line, check_win, check_draw
from .game import GameRound, Move, Outcome
from .render import render_board, line_division, game_division
from .cli import ConsoleGame, State, main

__version__ = "0.1.0"
__all__ = [
    "Board",
    "EMPTY",
    "X",
    "O",
    "SYMBOLS",
    "opponent",
    "GameConfig",
    "parse_board_size",
    "parse_int",
    "MIN_SIZE",
    "MAX_SIZE",
    "DEFAULT_SIZE",
    "TicTacToeError",
    "OutOfBounds",
    "InvalidMove",
    "InputExhausted",
    "row",
    "col",
    "index_of",
    "row_range",
    "column_set",
    "main_diagonal",
    "anti_diagonal",
    "on_main_diagonal",
    "on_anti_diagonal",
    "Line",
    "winning_line",
    "check_win",
    "check_draw",
    "GameRound",
    "Move",
    "Outcome",
    "render_board",
    "line_division",
    "game_division",
    "ConsoleGame",
    "State",
    "main",
]
