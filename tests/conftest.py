"""
Shared test fixtures.

No window is ever opened: games draw on a recording fake context and
console games read from scripted input.
"""

from typing import Iterable, List

import pytest

from minigames.board import Board, CellIndex, Player
from minigames.geometry import cell_center


class FakeContext:
    """Records draw calls along with the style active when they were made."""

    def __init__(self, mouse=(10.0, 10.0)):
        self.stroke = (0.0, 0.0, 0.0, 1.0)
        self.fill = (1.0, 1.0, 1.0, 1.0)
        self.stroke_weight = 0.01
        self.mouse_position = mouse
        self.calls: List[tuple] = []
        self.stopped = False

    def _record(self, name, *args):
        self.calls.append((name, args, self.stroke, self.fill, self.stroke_weight))

    def background(self, color):
        self._record("background", color)

    def square(self, bottom_left, radius):
        self._record("square", bottom_left, radius)

    def circle(self, center, radius):
        self._record("circle", center, radius)

    def rectangle(self, center, radii, rotation=0.0):
        self._record("rectangle", center, radii, rotation)

    def mouse(self):
        return self.mouse_position

    def stop(self):
        self.stopped = True

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class ScriptedInput:
    """Stands in for `input`: returns the given lines, then raises EOFError."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def ctx() -> FakeContext:
    return FakeContext()


@pytest.fixture
def output() -> List[str]:
    return []


@pytest.fixture
def board() -> Board:
    return Board(3)


def center_of(x: int, y: int, size: int = 3):
    return cell_center(CellIndex(x, y), size)


def fill_board(board: Board, rows: List[str]):
    """Fills from a top-to-bottom picture, e.g. ["XO.", "...", "X.."]."""
    marks = {"X": Player.CROSSES, "O": Player.NOUGHTS, ".": None}
    for row_from_top, row in enumerate(rows):
        y = board.rows - 1 - row_from_top
        for x, mark in enumerate(row):
            board[CellIndex(x, y)] = marks[mark]
    return board
