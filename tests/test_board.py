import numpy as np
import pytest

from blockfall.game.board import COLS, ROWS, Board
from blockfall.game.pieces import I_SHAPE, O_SHAPE, SHAPES


def test_board_dimensions():
    board = Board()
    assert board.grid.shape == (ROWS, COLS) == (20, 12)
    assert board.filled_count() == 0


@pytest.mark.parametrize("filled", [False, True])
def test_can_place_rejects_out_of_bounds(filled):
    board = Board()
    if filled:
        board.grid[:] = True
    assert not board.can_place(O_SHAPE, -1, 5)
    assert not board.can_place(O_SHAPE, COLS - 1, 5)
    assert not board.can_place(O_SHAPE, 3, ROWS - 1)
    assert not board.can_place(O_SHAPE, 3, ROWS)


def test_can_place_accepts_edges():
    board = Board()
    assert board.can_place(O_SHAPE, 0, 0)
    assert board.can_place(O_SHAPE, COLS - 2, ROWS - 2)
    # Empty padding rows may hang below the floor
    assert board.can_place(I_SHAPE, 0, ROWS - 2)
    assert board.can_place(I_SHAPE, 3, -1)


def test_can_place_detects_collision():
    board = Board()
    board.grid[10, 4] = True
    assert not board.can_place(O_SHAPE, 3, 9)
    assert board.can_place(O_SHAPE, 5, 9)


def test_negative_rows_never_collide():
    board = Board()
    board.grid[ROWS - 1, :] = True
    # Row -1 must not be read as the bottom row
    assert board.can_place(O_SHAPE, 0, -1)
    assert board.can_place(O_SHAPE, 0, -2)


def test_lock_writes_cells_and_drops_buffer_rows():
    board = Board()
    board.lock(O_SHAPE, 3, -1)
    assert board.filled_count() == 2
    assert board.grid[0, 3] and board.grid[0, 4]


def test_clear_lines_without_full_rows_is_identity():
    board = Board()
    board.grid[ROWS - 1, :COLS - 1] = True
    board.grid[5, 2] = True
    before = board.get_grid()
    assert board.clear_lines() == 0
    assert np.array_equal(board.grid, before)
    assert board.grid.tobytes() == before.tobytes()


def test_clear_two_bottom_rows():
    board = Board()
    board.grid[ROWS - 2:, :] = True
    board.grid[ROWS - 3, 0] = True
    board.grid[ROWS - 4, 7] = True
    above = board.grid[:ROWS - 2].copy()

    assert board.clear_lines() == 2
    assert not board.grid[:2].any()
    assert np.array_equal(board.grid[2:], above)
    assert board.grid[ROWS - 1, 0]
    assert board.grid[ROWS - 2, 7]


def test_clear_non_adjacent_rows():
    board = Board()
    board.grid[ROWS - 1, :] = True
    board.grid[ROWS - 3, :] = True
    board.grid[ROWS - 2, 5] = True

    assert board.clear_lines() == 2
    assert board.filled_count() == 1
    assert board.grid[ROWS - 1, 5]


def test_clear_counts_each_row_once():
    board = Board()
    board.grid[ROWS - 4:, :] = True
    assert board.clear_lines() == 4
    assert board.filled_count() == 0


def test_top_row_occupied_and_reset():
    board = Board()
    assert not board.top_row_occupied()
    board.grid[0, COLS - 1] = True
    assert board.top_row_occupied()
    board.reset()
    assert board.filled_count() == 0


def test_get_grid_is_a_copy():
    board = Board()
    grid = board.get_grid()
    grid[0, 0] = True
    assert not board.grid[0, 0]


@pytest.mark.parametrize("shape", SHAPES)
def test_can_place_is_pure(shape):
    board = Board()
    board.grid[ROWS - 1, ::2] = True
    before = board.get_grid()
    board.can_place(shape, 4, ROWS - 3)
    assert np.array_equal(board.grid, before)


def test_lock_drops_cells_past_side_walls():
    board = Board()
    board.lock(I_SHAPE, -2, 0)
    assert board.filled_count() == 2
    assert board.grid[1, :2].all()
    assert not board.grid[1, -2:].any()

    board.reset()
    board.lock(I_SHAPE, COLS - 2, 0)
    assert board.filled_count() == 2
    assert board.grid[1, COLS - 2:].all()


def test_lock_drops_cells_below_floor():
    board = Board()
    board.lock(O_SHAPE, 0, ROWS - 1)
    assert board.filled_count() == 2
    assert board.grid[ROWS - 1, :2].all()
