import logging
from enum import Enum
from typing import Optional

from .board import Board, Player
from .config import (BACKGROUND, GRID_STROKE, GRID_STROKE_WEIGHT, NOUGHTS_AND_CROSSES_SIZE,
                     TRANSPARENT, WINDOW_SIZE)
from .context import Context, EventHandler
from .geometry import Point, cell_hovered_by
from .render import draw_board, draw_noughts_and_crosses, try_draw_player_on_hovered_cell
from .rules import Outcome, game_outcome, result_message

logger = logging.getLogger(__name__)


class State(Enum):
    AWAITING_INPUT = "awaiting_input"
    FINISHED = "finished"


class NoughtsAndCrosses(EventHandler):
    def __init__(self, board_size: int = NOUGHTS_AND_CROSSES_SIZE,
                 starting_player: Player = Player.CROSSES, announce=print):
        self.board = Board(board_size)
        self.current_player = starting_player
        self.state = State.AWAITING_INPUT
        self.outcome: Optional[Outcome] = None
        self.announce = announce

    @property
    def finished(self) -> bool:
        return self.state is State.FINISHED

    def try_to_play(self, point: Point) -> bool:
        """Places the current mark on the cell under `point` if it is empty."""
        index = cell_hovered_by(point, self.board.size)
        if index is None or not self.board.is_empty(index):
            return False
        self.board[index] = self.current_player
        logger.debug("%s played %s", self.current_player.name, tuple(index))
        self.current_player = self.current_player.other()
        return True

    def on_pointer_press(self, point: Point) -> bool:
        if self.finished:
            return False
        return self.try_to_play(point)

    def check_finished(self) -> bool:
        outcome = game_outcome(self.board)
        if outcome is None:
            return False
        self.outcome = outcome
        self.state = State.FINISHED
        message = result_message(outcome)
        logger.info(message)
        self.announce(message)
        return True

    def draw(self, ctx):
        ctx.background(BACKGROUND)
        ctx.stroke_weight = GRID_STROKE_WEIGHT
        ctx.stroke = GRID_STROKE
        ctx.fill = TRANSPARENT
        draw_board(self.board.size, ctx)
        draw_noughts_and_crosses(self.board, ctx)
        try_draw_player_on_hovered_cell(self.current_player, self.board, ctx)

    def on_tick(self, ctx):
        self.draw(ctx)
        if not self.finished and self.check_finished():
            ctx.stop()


def play_noughts_and_crosses():
    logger.info("Starting Noughts and Crosses")
    ctx = Context(WINDOW_SIZE, WINDOW_SIZE, "Noughts and Crosses")
    ctx.start(NoughtsAndCrosses())
