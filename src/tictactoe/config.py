"""
Game configuration: board-size bounds and the board-size prompt parser.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

MIN_SIZE = 3
MAX_SIZE = 30
DEFAULT_SIZE = 3

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class GameConfig:
    """Console game configuration."""

    # Board size bounds, within [MIN_SIZE, MAX_SIZE]
    min_size: int = MIN_SIZE
    max_size: int = MAX_SIZE

    # Used when the board-size answer is unusable
    default_size: int = DEFAULT_SIZE

    # Skip the size prompt and play every round on this size
    fixed_size: Optional[int] = None

    # Scan diagonals only when the last move lies on them
    relevant_diagonals: bool = False

    def __post_init__(self):
        if not MIN_SIZE <= self.min_size <= self.default_size <= self.max_size <= MAX_SIZE:
            raise ValueError(
                f"size bounds must satisfy {MIN_SIZE} <= min_size <= default_size <= max_size "
                f"<= {MAX_SIZE}, got min_size={self.min_size}, default_size={self.default_size}, "
                f"max_size={self.max_size}"
            )

    def is_valid_size(self, size: int) -> bool:
        """True if size lies within [min_size, max_size]."""
        return self.min_size <= size <= self.max_size


def parse_int(text: str) -> Optional[int]:
    """Plain decimal integer with an optional sign, or None."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def parse_board_size(text: str, config: GameConfig) -> Tuple[int, bool]:
    """
    Interpret an answer to the board-size prompt.

    Returns:
        (size, accepted) where accepted is False when the answer was not an
        integer in [min_size, max_size] and size fell back to the default.
    """
    size = parse_int(text)
    if size is None or not config.is_valid_size(size):
        return config.default_size, False
    return size, True
