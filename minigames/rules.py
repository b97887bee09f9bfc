from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .board import Board, CellIndex, Player

IndexGenerator = Callable[[int], CellIndex]

# right, up, up-right, up-left
RUN_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (-1, 1))


@dataclass(frozen=True)
class Outcome:
    # None means a draw
    winner: Optional[Player]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def board_is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def check_for_winner_on_line(board: Board, index_generator: IndexGenerator) -> Optional[Player]:
    for position in range(board.size - 1):
        if board[index_generator(position)] != board[index_generator(position + 1)]:
            return None
    return board[index_generator(0)]


def check_for_winner(board: Board) -> Optional[Player]:
    """First complete line in scan order: columns, rows, diagonal, anti-diagonal."""
    size = board.size
    lines = [lambda p, x=x: CellIndex(x, p) for x in range(size)]
    lines += [lambda p, y=y: CellIndex(p, y) for y in range(size)]
    lines.append(lambda p: CellIndex(p, p))
    lines.append(lambda p: CellIndex(p, size - p - 1))
    for line in lines:
        winner = check_for_winner_on_line(board, line)
        if winner is not None:
            return winner
    return None


def find_run(board: Board, length: int) -> Optional[Player]:
    """First player owning `length` consecutive cells in any direction."""
    for start in board.indices():
        player = board[start]
        if player is None:
            continue
        for dx, dy in RUN_DIRECTIONS:
            end_x = start.x + dx * (length - 1)
            end_y = start.y + dy * (length - 1)
            if not (0 <= end_x < board.size and 0 <= end_y < board.rows):
                continue
            if all(board[CellIndex(start.x + dx * i, start.y + dy * i)] is player
                   for i in range(1, length)):
                return player
    return None


def game_outcome(board: Board, winner_of: Callable[[Board], Optional[Player]] = check_for_winner
                 ) -> Optional[Outcome]:
    """Outcome of a finished game, or None while the game continues."""
    winner = winner_of(board)
    if winner is not None:
        return Outcome(winner)
    if board_is_full(board):
        return Outcome(None)
    return None


def result_message(outcome: Outcome) -> str:
    if outcome.winner is Player.NOUGHTS:
        return "Noughts have won!"
    if outcome.winner is Player.CROSSES:
        return "Crosses have won!"
    return "This is a draw!"
