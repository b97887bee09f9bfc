"""
Connect 4: discs fall to the lowest empty cell of the pressed column.

The board is laid out on a square grid as wide as the board; the row above
the board is the lane where the next disc hovers before being dropped.
"""

import logging
from typing import Optional

from .board import Board, CellIndex, Player
from .config import (BACKGROUND, CONNECT_4_COLUMNS, CONNECT_4_ROWS, CONNECT_4_RUN, GRID_STROKE,
                     GRID_STROKE_WEIGHT, TRANSPARENT, WINDOW_SIZE)
from .context import Context, EventHandler
from .geometry import Point, cell_hovered_by
from .render import draw_board, draw_disc, draw_discs
from .rules import Outcome, find_run, game_outcome

logger = logging.getLogger(__name__)

PLAYER_NAMES = {Player.CROSSES: "Red", Player.NOUGHTS: "Yellow"}


def result_message(outcome: Outcome) -> str:
    if outcome.winner is None:
        return "This is a draw!"
    return f"{PLAYER_NAMES[outcome.winner]} has won!"


class Connect4(EventHandler):
    def __init__(self, columns: int = CONNECT_4_COLUMNS, rows: int = CONNECT_4_ROWS,
                 run_length: int = CONNECT_4_RUN, announce=print):
        if rows >= columns:
            raise ValueError("Connect 4 needs more columns than rows to fit the drop lane")
        self.board = Board(columns, rows)
        self.run_length = run_length
        self.current_player = Player.CROSSES
        self.outcome: Optional[Outcome] = None
        self.announce = announce

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def column_at(self, point: Point) -> Optional[int]:
        index = cell_hovered_by(point, self.board.size)
        return None if index is None else index.x

    def landing_cell(self, column: int) -> Optional[CellIndex]:
        for y in range(self.board.rows):
            index = CellIndex(column, y)
            if self.board.is_empty(index):
                return index
        return None

    def drop(self, column: int) -> bool:
        index = self.landing_cell(column)
        if index is None:
            return False
        self.board[index] = self.current_player
        logger.debug("%s dropped in column %d", PLAYER_NAMES[self.current_player], column)
        self.current_player = self.current_player.other()
        return True

    def on_pointer_press(self, point: Point) -> bool:
        if self.finished:
            return False
        column = self.column_at(point)
        if column is None:
            return False
        return self.drop(column)

    def winner(self, board: Board) -> Optional[Player]:
        return find_run(board, self.run_length)

    def draw(self, ctx):
        ctx.background(BACKGROUND)
        ctx.stroke_weight = GRID_STROKE_WEIGHT
        ctx.stroke = GRID_STROKE
        ctx.fill = TRANSPARENT
        draw_board(self.board.size, ctx, rows=self.board.rows)
        draw_discs(self.board, ctx)
        column = self.column_at(ctx.mouse())
        if column is not None and self.landing_cell(column) is not None:
            lane = CellIndex(column, self.board.rows)
            draw_disc(self.current_player, lane, self.board.size, ctx)

    def on_tick(self, ctx):
        self.draw(ctx)
        if self.finished:
            return
        outcome = game_outcome(self.board, self.winner)
        if outcome is not None:
            self.outcome = outcome
            message = result_message(outcome)
            logger.info(message)
            self.announce(message)
            ctx.stop()


def play_connect_4():
    logger.info("Starting Connect 4")
    ctx = Context(WINDOW_SIZE, WINDOW_SIZE, "Connect 4")
    ctx.start(Connect4())
