"""Tests for Board collision, merge, sweep and reset."""

from __future__ import annotations

import numpy as np
import pytest

from neontris.game.board import Board
from neontris.game.pieces import create_piece

O = np.array([[2, 2], [2, 2]], dtype=np.int8)


def test_new_board_is_empty_12_by_20(board):
    assert board.grid.shape == (20, 12)
    assert board.grid.dtype == np.int8
    assert not board.grid.any()


@pytest.mark.parametrize("width,height", [(0, 20), (12, 0), (-1, 5)])
def test_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        Board(width, height)


@pytest.mark.parametrize("x,y,expected", [
    (0, 0, False),
    (10, 18, False),
    (-1, 0, True),    # left of column 0
    (11, 0, True),    # right column spills past width
    (0, 19, True),    # bottom row spills past height
    (5, -1, False),   # above the top is allowed
    (5, -5, False),
])
def test_collides_against_bounds(board, x, y, expected):
    assert board.collides(O, x, y) is expected


def test_empty_matrix_columns_may_leave_the_board(board):
    i_piece = create_piece("I")  # occupied cells only in row 1
    assert not board.collides(i_piece, 8, 0)
    assert not board.collides(i_piece, 0, -1)
    assert board.collides(i_piece, 9, 0)

    t_piece = create_piece("T")
    assert not board.collides(t_piece, 9, 0)
    assert board.collides(t_piece, 10, 0)
    assert board.collides(t_piece, -1, 0)


def test_collides_with_locked_cell(board):
    board.grid[10, 4] = 7
    assert board.collides(O, 3, 9)
    assert board.collides(O, 4, 10)
    assert not board.collides(O, 5, 9)
    assert not board.collides(O, 3, 7)


def test_merge_writes_piece_id(board):
    board.merge(O, 5, 18)
    assert board.grid[18:20, 5:7].tolist() == [[2, 2], [2, 2]]
    assert int(np.count_nonzero(board.grid)) == 4


def test_merge_skips_cells_above_the_top(board):
    board.merge(O, 0, -1)
    assert board.grid[0, 0] == 2
    assert board.grid[0, 1] == 2
    assert int(np.count_nonzero(board.grid)) == 2


def test_sweep_single_full_row(board):
    board.grid[15, :] = 1
    board.grid[14, 0] = 3
    board.grid[16, 0] = 5

    assert board.sweep() == 1

    assert not board.grid[0].any()
    assert board.grid[15, 0] == 3   # row above moved down
    assert board.grid[16, 0] == 5   # row below untouched
    assert int(np.count_nonzero(board.grid)) == 2


def test_sweep_adjacent_full_rows(board):
    board.grid[18:20, :] = 4
    board.grid[17, 3] = 6

    assert board.sweep() == 2

    assert board.grid[19, 3] == 6
    assert int(np.count_nonzero(board.grid)) == 1


def test_sweep_separated_full_rows(board):
    board.grid[10, :] = 1
    board.grid[19, :] = 1
    board.grid[9, 2] = 5
    board.grid[12, 7] = 6

    assert board.sweep() == 2

    assert board.grid[13, 7] == 6   # below row 10, above row 19: moved once
    assert board.grid[11, 2] == 5   # above both: moved twice
    assert int(np.count_nonzero(board.grid)) == 2


def test_sweep_four_rows(board):
    board.grid[16:20, :] = 1
    assert board.sweep() == 4
    assert not board.grid.any()


def test_sweep_ignores_rows_with_a_gap(board):
    board.grid[19, :] = 1
    board.grid[19, 6] = 0
    assert board.sweep() == 0
    assert int(np.count_nonzero(board.grid)) == 11


def test_sweep_completely_full_board_terminates():
    small = Board(3, 4)
    small.grid[:] = 2
    assert small.sweep() == 4
    assert not small.grid.any()


def test_reset_and_get_grid(board):
    board.grid[3, 3] = 1
    copy = board.get_grid()
    board.reset()
    assert copy[3, 3] == 1
    assert not board.grid.any()
    assert board.grid.shape == (20, 12)
