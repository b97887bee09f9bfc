"""
Board drawing helpers.

Every function issues calls against a drawing context (see
`minigames.context.Context`): `square`, `circle`, `rectangle` with the
context's current `stroke`, `fill` and `stroke_weight`. All lengths are in
normalized units.
"""

from typing import Optional

from .board import Board, CellIndex, Player
from .config import MARK_STROKE, RED, TRANSPARENT, YELLOW
from .geometry import cell_bottom_left_corner, cell_center, cell_hovered_by, cell_radius

CROSS_ROTATION = 0.125  # turns


def draw_cell(index: CellIndex, board_size: int, ctx):
    """Draws the cell at `index` with the context's current style."""
    ctx.square(cell_bottom_left_corner(index, board_size), cell_radius(board_size))


def draw_board(board_size: int, ctx, rows: Optional[int] = None):
    rows = board_size if rows is None else rows
    for x in range(board_size):
        for y in range(rows):
            draw_cell(CellIndex(x, y), board_size, ctx)


def _mark_style(board_size: int, ctx):
    ctx.stroke = MARK_STROKE
    ctx.fill = TRANSPARENT
    ctx.stroke_weight = 0.4 * cell_radius(board_size)


def draw_nought(index: CellIndex, board_size: int, ctx):
    _mark_style(board_size, ctx)
    ctx.circle(cell_center(index, board_size), 0.9 * cell_radius(board_size))


def draw_cross(index: CellIndex, board_size: int, ctx):
    _mark_style(board_size, ctx)
    center = cell_center(index, board_size)
    r = cell_radius(board_size)
    radii = (1.0 * r, 0.2 * r)
    ctx.rectangle(center, radii, CROSS_ROTATION)
    ctx.rectangle(center, radii, -CROSS_ROTATION)


def draw_player(player: Player, index: CellIndex, board_size: int, ctx):
    if player is Player.NOUGHTS:
        draw_nought(index, board_size, ctx)
    else:
        draw_cross(index, board_size, ctx)


def draw_noughts_and_crosses(board: Board, ctx):
    for index in board.indices():
        cell = board[index]
        if cell is not None:
            draw_player(cell, index, board.size, ctx)


def try_draw_player_on_hovered_cell(player: Player, board: Board, ctx):
    hovered = cell_hovered_by(ctx.mouse(), board.size)
    if hovered is not None and board.is_empty(hovered):
        draw_player(player, hovered, board.size, ctx)


# ====== Connect 4 discs ======
def disc_color(player: Player):
    return RED if player is Player.CROSSES else YELLOW


def draw_disc(player: Player, index: CellIndex, board_size: int, ctx):
    ctx.stroke = TRANSPARENT
    ctx.fill = disc_color(player)
    ctx.circle(cell_center(index, board_size), 0.8 * cell_radius(board_size))


def draw_discs(board: Board, ctx):
    # geometry is laid out on a square grid as wide as the board
    for index in board.indices():
        cell = board[index]
        if cell is not None:
            draw_disc(cell, index, board.size, ctx)
