"""Tests for the drawing helpers against a recording context."""

import pytest

from conftest import FakeContext, center_of

from minigames.board import Board, CellIndex, Player
from minigames.config import MARK_STROKE, RED, TRANSPARENT, YELLOW
from minigames.render import (CROSS_ROTATION, draw_board, draw_cell, draw_cross, draw_disc,
                              draw_noughts_and_crosses, draw_nought, draw_player,
                              try_draw_player_on_hovered_cell)


def test_draw_cell_uses_bottom_left_corner_and_radius(ctx):
    draw_cell(CellIndex(1, 2), 3, ctx)
    name, (corner, radius), *_ = ctx.calls[0]
    assert name == "square"
    assert corner == pytest.approx((-1 / 3, 1 / 3))
    assert radius == pytest.approx(1 / 3)


def test_draw_board_draws_every_cell(ctx):
    draw_board(3, ctx)
    assert len(ctx.named("square")) == 9
    ctx.calls.clear()
    draw_board(7, ctx, rows=6)
    assert len(ctx.named("square")) == 42


def test_nought_style_and_shape(ctx):
    draw_nought(CellIndex(1, 1), 3, ctx)
    name, (center, radius), stroke, fill, weight = ctx.calls[0]
    assert name == "circle"
    assert center == pytest.approx((0.0, 0.0))
    assert radius == pytest.approx(0.9 / 3)
    assert stroke == MARK_STROKE
    assert fill == TRANSPARENT
    assert weight == pytest.approx(0.4 / 3)


def test_cross_is_two_rotated_rectangles(ctx):
    draw_cross(CellIndex(0, 0), 3, ctx)
    rectangles = ctx.named("rectangle")
    assert len(rectangles) == 2
    rotations = [call[1][2] for call in rectangles]
    assert rotations == [CROSS_ROTATION, -CROSS_ROTATION]
    assert rectangles[0][1][1] == pytest.approx((1 / 3, 0.2 / 3))


def test_draw_player_dispatches(ctx):
    draw_player(Player.NOUGHTS, CellIndex(0, 0), 3, ctx)
    draw_player(Player.CROSSES, CellIndex(0, 0), 3, ctx)
    assert [c[0] for c in ctx.calls] == ["circle", "rectangle", "rectangle"]


def test_only_occupied_cells_are_drawn(ctx):
    board = Board(3)
    board[CellIndex(0, 0)] = Player.NOUGHTS
    board[CellIndex(2, 2)] = Player.CROSSES
    draw_noughts_and_crosses(board, ctx)
    assert len(ctx.named("circle")) == 1
    assert len(ctx.named("rectangle")) == 2


def test_hover_preview_skips_occupied_and_outside_cells():
    board = Board(3)
    board[CellIndex(1, 1)] = Player.CROSSES

    occupied = FakeContext(mouse=center_of(1, 1))
    try_draw_player_on_hovered_cell(Player.NOUGHTS, board, occupied)
    assert occupied.calls == []

    outside = FakeContext(mouse=(3.0, 0.0))
    try_draw_player_on_hovered_cell(Player.NOUGHTS, board, outside)
    assert outside.calls == []

    empty = FakeContext(mouse=center_of(2, 0))
    try_draw_player_on_hovered_cell(Player.NOUGHTS, board, empty)
    assert [c[0] for c in empty.calls] == ["circle"]


def test_disc_colors(ctx):
    draw_disc(Player.CROSSES, CellIndex(0, 0), 7, ctx)
    draw_disc(Player.NOUGHTS, CellIndex(0, 0), 7, ctx)
    assert [c[3] for c in ctx.calls] == [RED, YELLOW]
