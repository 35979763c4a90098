"""
Text rendering of the board.

Cells are padded with one space on each side and joined by '|'; rows are
separated by a line of dashes as wide as a row:

     1 | 2 | 3
    -----------
     4 | X | 6
    -----------
     O | 8 | 9
"""

from .board import Board
from .geometry import index_of


def row_width(board: Board) -> int:
    """Characters in one rendered row."""
    return board.size * (board.pad + 2) + board.size - 1


def line_division(board: Board) -> str:
    """Separator printed between rows."""
    return "-" * row_width(board)


def game_division(board: Board) -> str:
    """Banner printed between turns, twice as wide as a row."""
    return "=" * (2 * row_width(board))


def render_row(board: Board, r: int) -> str:
    """Cells of row r joined by '|'."""
    first = index_of(board.size, r, 1)
    return "|".join(f" {board.render(i)} " for i in range(first, first + board.size))


def render_board(board: Board) -> str:
    """Render the whole board; the same board always renders the same text."""
    sep = line_division(board)
    rows = [render_row(board, r) for r in range(1, board.size + 1)]
    return f"\n{sep}\n".join(rows)
