"""Unit tests for the board grid."""

import pytest

from minigames.board import Board, CellIndex, Player


def test_new_board_is_empty():
    board = Board(3)
    assert len(board) == 9
    assert all(cell is None for cell in board)


def test_set_then_get_returns_mark():
    board = Board(3)
    board.set(CellIndex(2, 1), Player.NOUGHTS)
    assert board.get(CellIndex(2, 1)) is Player.NOUGHTS
    assert board[CellIndex(1, 2)] is None


def test_storage_order_is_row_major():
    board = Board(3)
    board[CellIndex(1, 0)] = Player.CROSSES
    board[CellIndex(0, 1)] = Player.NOUGHTS
    cells = list(board)
    assert cells[1] is Player.CROSSES
    assert cells[3] is Player.NOUGHTS
    assert list(board.indices())[:4] == [(0, 0), (1, 0), (2, 0), (0, 1)]


@pytest.mark.parametrize("index", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_range_index_raises(index):
    board = Board(3)
    with pytest.raises(IndexError):
        board[CellIndex(*index)]
    with pytest.raises(IndexError):
        board[CellIndex(*index)] = Player.CROSSES


def test_rectangular_board_bounds():
    board = Board(7, 6)
    board[CellIndex(6, 5)] = Player.CROSSES
    assert board[CellIndex(6, 5)] is Player.CROSSES
    with pytest.raises(IndexError):
        board[CellIndex(0, 6)]


def test_non_positive_size_is_rejected():
    with pytest.raises(ValueError):
        Board(0)


def test_other_player_alternates():
    assert Player.CROSSES.other() is Player.NOUGHTS
    assert Player.NOUGHTS.other() is Player.CROSSES
