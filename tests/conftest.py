"""Shared fixtures for the TicTacToe test suite."""

import pytest


class ScriptedConsole:
    """Feeds prepared input lines and records everything written."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []

    def read(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str = ""):
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console():
    """Factory: console("3", "1", "4", ...) -> ScriptedConsole."""
    def make(*lines):
        return ScriptedConsole(lines)
    return make


@pytest.fixture
def fill():
    """fill(board, cells, mark): put mark on each cell, bypassing turn order."""
    def _fill(board, cells, mark):
        for c in cells:
            board.apply_move(c, mark)
        return board
    return _fill
