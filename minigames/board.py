from enum import Enum
from typing import Iterator, List, NamedTuple, Optional


# ====== Players ======
class Player(Enum):
    NOUGHTS = "O"
    CROSSES = "X"

    def other(self) -> "Player":
        return Player.CROSSES if self is Player.NOUGHTS else Player.NOUGHTS


class CellIndex(NamedTuple):
    x: int
    y: int


# ====== Board ======
class Board:
    """
    Grid of optional player marks stored in a flat list.
    Cell (x, y) lives at x + y * size. `rows` defaults to `size` (square board).
    """

    def __init__(self, size: int, rows: Optional[int] = None):
        rows = size if rows is None else rows
        if size <= 0 or rows <= 0:
            raise ValueError(f"Board dimensions must be positive, got {size}x{rows}")
        self.size = size
        self.rows = rows
        self._cells: List[Optional[Player]] = [None] * (size * rows)

    def _offset(self, index: CellIndex) -> int:
        x, y = index
        if not (0 <= x < self.size and 0 <= y < self.rows):
            raise IndexError(f"Cell {tuple(index)} is outside a {self.size}x{self.rows} board")
        return x + y * self.size

    def __getitem__(self, index: CellIndex) -> Optional[Player]:
        return self._cells[self._offset(index)]

    def __setitem__(self, index: CellIndex, player: Optional[Player]):
        self._cells[self._offset(index)] = player

    def get(self, index: CellIndex) -> Optional[Player]:
        return self[index]

    def set(self, index: CellIndex, player: Optional[Player]):
        self[index] = player

    def is_empty(self, index: CellIndex) -> bool:
        return self[index] is None

    def __iter__(self) -> Iterator[Optional[Player]]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def indices(self) -> Iterator[CellIndex]:
        for y in range(self.rows):
            for x in range(self.size):
                yield CellIndex(x, y)

    def __repr__(self):
        rows = []
        for y in reversed(range(self.rows)):
            row = self._cells[y * self.size:(y + 1) * self.size]
            rows.append("".join(p.value if p else "." for p in row))
        return f"Board({'/'.join(rows)})"
