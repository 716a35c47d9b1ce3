import numpy as np
import pytest

from bentfour.game.board import Board
from bentfour.game.errors import (ColumnFullError, InvalidConfigurationError,
                                  InvalidPositionError, InvalidSymbolError)
from bentfour.utils import Symbol

from helpers import A, B, play


@pytest.mark.parametrize("rows,columns", [(3, 3), (9, 10), (3, 12), (20, 3)])
def test_construct_valid_sizes(rows, columns):
    board = Board(rows, columns)
    assert board.rows == rows
    assert board.columns == columns
    assert all(board.cell_at(r, c) == Symbol.EMPTY
               for r in range(rows) for c in range(columns))


@pytest.mark.parametrize("rows,columns", [(2, 3), (3, 2), (0, 10), (9, -1)])
def test_construct_too_small(rows, columns):
    with pytest.raises(InvalidConfigurationError):
        Board(rows, columns)


def test_default_size_is_nine_by_ten():
    board = Board()
    assert (board.rows, board.columns) == (9, 10)


@pytest.mark.parametrize("row,column", [(-1, 0), (0, -1), (6, 0), (0, 7)])
def test_cell_at_out_of_range(board, row, column):
    with pytest.raises(InvalidPositionError):
        board.cell_at(row, column)


def test_insert_falls_to_lowest_empty_cell(board):
    assert board.insert(3, A) == 5
    assert board.insert(3, B) == 4
    assert board.cell_at(5, 3) == A
    assert board.cell_at(4, 3) == B
    assert board.cell_at(3, 3) == Symbol.EMPTY


def test_insert_changes_exactly_one_cell(board):
    before = board.get_state()
    board.insert(2, B)
    assert np.count_nonzero(board.get_state() != before) == 1


@pytest.mark.parametrize("column", [-1, 7, 100, "3", 1.0, None])
def test_insert_invalid_column(board, column):
    with pytest.raises(InvalidPositionError):
        board.insert(column, A)


@pytest.mark.parametrize("symbol", [Symbol.EMPTY, "X", 1, None])
def test_insert_invalid_symbol(board, symbol):
    with pytest.raises(InvalidSymbolError):
        board.insert(0, symbol)
    assert board.cell_at(5, 0) == Symbol.EMPTY


def test_insert_accepts_numpy_integers(board):
    assert board.insert(np.int64(4), A) == 5


def test_three_by_three_column_fills_after_three_inserts():
    board = Board(3, 3)
    for expected_row in (2, 1, 0):
        assert board.insert(0, A) == expected_row
    before = board.get_state()

    with pytest.raises(ColumnFullError):
        board.insert(0, A)

    assert np.array_equal(board.get_state(), before)
    assert board.is_column_full(0)
    assert board.get_valid_moves() == [1, 2]


def test_try_insert_reports_full_column_without_raising():
    board = Board(3, 3)
    play(board, [(1, A), (1, B), (1, A)])
    assert board.try_insert(1, B) is None
    assert board.try_insert(2, B) == 2


def test_clone_is_independent(board):
    play(board, [(0, A), (1, B)])
    copy = board.clone()
    assert copy.to_display_text() == board.to_display_text()

    copy.insert(0, B)
    assert board.cell_at(4, 0) == Symbol.EMPTY

    board.insert(6, A)
    assert copy.cell_at(5, 6) == Symbol.EMPTY
    assert (copy.rows, copy.columns) == (board.rows, board.columns)


def test_is_full_only_when_every_top_cell_is_taken():
    board = Board(3, 3)
    moves = [(0, A), (0, B), (0, A), (1, B), (1, A), (1, B), (2, A), (2, B)]
    play(board, moves)
    assert not board.is_full()
    board.insert(2, A)
    assert board.is_full()
    assert board.winner() is None


def test_empty_board_has_no_winner(board):
    assert board.winner() is None
    assert board.get_winning_shape() == []


# Each sequence completes one of the four shapes for A with its last move.
SHAPE_GAMES = {
    # _ X X
    # X X B
    "s_horizontal": ([(0, A), (1, A), (2, B), (1, A)], (2, A),
                     [(4, 1), (4, 2), (5, 0), (5, 1)]),
    # X X _
    # B X X
    "z_horizontal": ([(1, A), (2, A), (0, B), (0, A)], (1, A),
                     [(4, 0), (4, 1), (5, 1), (5, 2)]),
    # X _
    # X X
    # B X
    "s_vertical": ([(1, A), (1, A), (0, B), (0, A)], (0, A),
                   [(3, 0), (4, 0), (4, 1), (5, 1)]),
    # _ X
    # X X
    # X B
    "z_vertical": ([(0, A), (0, A), (1, B), (1, A)], (1, A),
                   [(3, 1), (4, 0), (4, 1), (5, 0)]),
}


@pytest.mark.parametrize("name", sorted(SHAPE_GAMES))
def test_each_shape_wins(board, name):
    moves, last, cells = SHAPE_GAMES[name]
    play(board, moves)
    assert board.winner() is None

    board.insert(*last)
    assert board.winner() == A
    assert sorted(board.get_winning_shape()) == cells


def test_shape_detected_for_second_player_away_from_origin():
    board = Board(9, 10)
    # O O in row 7 over O O in row 8 shifted right by one, against the right edge
    play(board, [(8, B), (9, B), (7, A), (7, B), (8, B)])
    assert board.winner() == B
    assert sorted(board.get_winning_shape()) == [(7, 7), (7, 8), (8, 8), (8, 9)]


@pytest.mark.parametrize("moves", [
    [(0, A), (1, A), (2, A), (3, A)],          # horizontal line
    [(0, A), (0, A), (0, A), (0, A)],          # vertical line
    [(0, A), (1, A), (0, A), (1, A)],          # square
    [(0, A), (1, A), (2, A), (1, A)],          # T
])
def test_straight_and_other_formations_do_not_win(board, moves):
    play(board, moves)
    assert board.winner() is None


def test_full_board_with_shape_reports_winner():
    board = Board(3, 3)
    # bottom: X X O, middle: O X X, top filled
    play(board, [(0, A), (1, A), (2, B), (0, B), (1, A), (2, A),
                 (0, B), (1, B), (2, B)])
    assert board.is_full()
    assert board.winner() == A


def test_display_text_is_row_major(board):
    play(board, [(0, A), (6, B)])
    lines = board.to_display_text().split("\n")
    assert len(lines) == 6
    assert lines[0] == "- - - - - - -"
    assert lines[-1] == "X - - - - - O"
    assert str(board) == board.to_display_text()
