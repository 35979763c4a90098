"""
Win and draw detection for the N x N board.

A move wins when, after it is applied, one of these lines is fully held by
the mover, checked in this order:

  1. the column through the last cell
  2. the row through the last cell
  3. the main diagonal (always scanned)
  4. the anti-diagonal (always scanned)
"""

from enum import Enum
from typing import Optional

from .board import Board, check_mark
from .geometry import (
    anti_diagonal,
    column_set,
    main_diagonal,
    on_anti_diagonal,
    on_main_diagonal,
    row_range,
)


class Line(str, Enum):
    COLUMN = "column"
    ROW = "row"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti-diagonal"

    @property
    def label(self) -> str:
        """Name shown when the line completes a win; a row is a "Line"."""
        if self is Line.ROW:
            return "Line"
        return self.value.capitalize()


def winning_line(
    board: Board,
    last_cell: int,
    mark: int,
    relevant_only: bool = False,
) -> Optional[Line]:
    """
    Find the first line completed by mark, or None.

    Args:
        board: Board with the last move already applied
        last_cell: Cell index of the last move
        mark: Mark of the player who made it
        relevant_only: Only scan a diagonal when last_cell lies on it. Gives
            the same result as the full scan on boards reached by legal play.

    Raises:
        OutOfBounds: last_cell is not on the board
        ValueError: mark is not X or O
    """
    check_mark(mark)
    n = board.size

    if board.all_marked(column_set(n, last_cell), mark):
        return Line.COLUMN
    if board.all_marked(row_range(n, last_cell), mark):
        return Line.ROW
    if (not relevant_only or on_main_diagonal(n, last_cell)) and \
            board.all_marked(main_diagonal(n), mark):
        return Line.DIAGONAL
    if (not relevant_only or on_anti_diagonal(n, last_cell)) and \
            board.all_marked(anti_diagonal(n), mark):
        return Line.ANTI_DIAGONAL
    return None


def check_win(board: Board, last_cell: int, mark: int, relevant_only: bool = False) -> bool:
    """True if the move at last_cell completed a line for mark."""
    return winning_line(board, last_cell, mark, relevant_only) is not None


def check_draw(moves_played: int, cell_count: int) -> bool:
    """True once every cell has been played. Only meaningful after a win check."""
    return moves_played == cell_count
