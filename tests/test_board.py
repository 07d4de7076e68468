import numpy as np
import pytest

from connect4_arcade.game.board import Board
from connect4_arcade.utils import COLS, ROWS, Player
from tests.positions import NO_WIN_FULL_GRID


def test_new_board_is_empty(board):
    assert board.grid.shape == (ROWS, COLS)
    assert not board.grid.any()
    assert board.last_move is None
    assert board.move_count == 0


@pytest.mark.parametrize("column", range(COLS))
def test_landing_row_of_empty_column_is_bottom_row(board, column):
    assert board.find_landing_row(column) == ROWS - 1


def test_landing_row_has_no_side_effects(board):
    board.place(ROWS - 1, 2, Player.ONE)
    before = board.get_state()

    assert board.find_landing_row(2) == ROWS - 2
    assert board.find_landing_row(2) == ROWS - 2
    assert np.array_equal(board.grid, before)


def test_stacking_fills_column_bottom_up_without_gaps(board):
    player = Player.ONE
    for expected_row in range(ROWS - 1, -1, -1):
        row = board.find_landing_row(4)
        assert row == expected_row
        board.place(row, 4, player)
        assert board.is_gap_free()
        player = player.other()

    assert board.find_landing_row(4) is None
    assert not board.is_valid_move(4)
    assert 4 not in board.get_valid_moves()


def test_place_records_last_move_and_count(board):
    board.place(ROWS - 1, 0, Player.TWO)
    assert board.grid[ROWS - 1, 0] == Player.TWO.value
    assert board.last_move == (ROWS - 1, 0)
    assert board.move_count == 1
    assert board.count(Player.TWO) == 1


def test_place_into_occupied_cell_is_rejected(board):
    board.place(ROWS - 1, 3, Player.ONE)
    with pytest.raises(ValueError):
        board.place(ROWS - 1, 3, Player.TWO)
    assert board.grid[ROWS - 1, 3] == Player.ONE.value


def test_place_above_empty_cell_is_rejected(board):
    with pytest.raises(ValueError):
        board.place(0, 3, Player.ONE)
    assert board.is_gap_free()


@pytest.mark.parametrize("row,column", [(-1, 0), (ROWS, 0), (0, -1), (0, COLS)])
def test_place_off_board_is_rejected(board, row, column):
    with pytest.raises(IndexError):
        board.place(row, column, Player.ONE)


def test_place_empty_player_is_rejected(board):
    with pytest.raises(ValueError):
        board.place(ROWS - 1, 0, Player.EMPTY)


@pytest.mark.parametrize("column", [-1, COLS])
def test_landing_row_out_of_range_column(board, column):
    with pytest.raises(IndexError):
        board.find_landing_row(column)
    assert not board.is_valid_move(column)


def test_is_full_only_when_every_top_cell_is_taken(no_win_full_board):
    assert no_win_full_board.is_full()
    assert no_win_full_board.get_valid_moves() == []

    grid = NO_WIN_FULL_GRID.copy()
    grid[0, 5] = 0
    assert not Board.from_position(grid).is_full()


def test_empty_and_partial_boards_are_not_full(board):
    assert not board.is_full()
    board.place(ROWS - 1, 0, Player.ONE)
    assert not board.is_full()


def test_reset_clears_everything(no_win_full_board):
    no_win_full_board.reset()
    assert not no_win_full_board.grid.any()
    assert no_win_full_board.move_count == 0
    assert no_win_full_board.last_move is None
    assert no_win_full_board.get_valid_moves() == list(range(COLS))


def test_from_position_accepts_flat_values():
    values = [0] * (ROWS * COLS)
    values[-1] = Player.ONE.value
    board = Board.from_position(values)
    assert board.grid[ROWS - 1, COLS - 1] == Player.ONE.value
    assert board.move_count == 1


@pytest.mark.parametrize("values", [
    [0] * (ROWS * COLS - 1),
    [3] + [0] * (ROWS * COLS - 1),
    [1] + [0] * (ROWS * COLS - 1),  # piece floating in the top-left corner
])
def test_from_position_rejects_malformed_positions(values):
    with pytest.raises(ValueError):
        Board.from_position(values)


def test_get_state_and_copy_are_independent(board):
    board.place(ROWS - 1, 1, Player.ONE)
    state = board.get_state()
    clone = board.copy()

    state[ROWS - 1, 2] = Player.TWO.value
    clone.place(ROWS - 2, 1, Player.TWO)

    assert board.grid[ROWS - 1, 2] == Player.EMPTY.value
    assert board.grid[ROWS - 2, 1] == Player.EMPTY.value
    assert clone.last_move == (ROWS - 2, 1)
    assert board.last_move == (ROWS - 1, 1)


def test_cells_lists_occupied_cells(board):
    board.place(ROWS - 1, 0, Player.ONE)
    board.place(ROWS - 1, 6, Player.TWO)
    assert sorted(board.cells()) == sorted([(ROWS - 1, 0, Player.ONE), (ROWS - 1, 6, Player.TWO)])


def test_render_marks_pieces(board):
    board.place(ROWS - 1, 0, Player.ONE)
    board.place(ROWS - 1, 1, Player.TWO)
    lines = board.render().splitlines()

    assert len(lines) == ROWS + 3
    assert lines[ROWS] == "|X O          |"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
