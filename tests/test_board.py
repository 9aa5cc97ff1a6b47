import numpy as np
import pytest

from connect4_core.game.board import Board, Disc
from connect4_core.utils import Cell, MoveError, Player


def test_new_board_is_empty():
    board = Board()

    assert board.cols == 7 and board.rows == 6
    assert board.disc_count == 0
    assert not board.is_full()
    assert np.count_nonzero(board.get_state()) == 0
    assert board.valid_moves() == list(range(7))


@pytest.mark.parametrize("drops", range(1, 7))
def test_drops_fill_column_from_the_bottom(drops):
    board = Board()

    landings = [board.drop(2) for _ in range(drops)]

    assert landings == [Cell(2, 5 - i) for i in range(drops)]
    occupied = [row for row in range(board.rows) if board.occupant_at(Cell(2, row))]
    assert occupied == list(range(6 - drops, 6))
    assert board.column_height(2) == drops


def test_full_column_is_rejected_without_mutation():
    board = Board()
    for _ in range(board.rows):
        board.drop(4)
    before = board.get_state()

    result = board.drop(4)

    assert result is MoveError.COLUMN_FULL
    assert np.array_equal(board.get_state(), before)
    assert board.disc_count == 6
    assert 4 not in board.valid_moves()


@pytest.mark.parametrize("column", [-1, 7, 100, True, 1.5, "3", None])
def test_out_of_range_column_is_rejected(column):
    board = Board()

    assert board.drop(column) is MoveError.INVALID_COLUMN
    assert board.disc_count == 0


def test_numpy_integer_column_is_accepted():
    board = Board()

    assert board.drop(np.int64(3)) == Cell(3, 5)


def test_default_owner_alternates_by_parity():
    board = Board()

    board.drop(0)
    board.drop(0)
    board.drop(1)

    assert board.occupant_at(Cell(0, 5)) == Disc(Player.RED)
    assert board.occupant_at(Cell(0, 4)) == Disc(Player.YELLOW)
    assert board.occupant_at(Cell(1, 5)) == Disc(Player.RED)
    assert board.next_owner is Player.YELLOW


def test_explicit_owner_bypasses_turn_order():
    board = Board()

    for _ in range(3):
        board.drop(0, Player.YELLOW)

    assert all(board.occupant_at(Cell(0, r)).owner is Player.YELLOW for r in (3, 4, 5))


def test_occupant_at_is_permissive_off_board():
    board = Board()
    board.drop(0)

    for cell in [Cell(-1, 5), Cell(7, 5), Cell(0, 6), Cell(0, -1), Cell(-3, -3)]:
        assert board.occupant_at(cell) is None


def test_occupant_at_is_idempotent():
    board = Board()
    board.drop(3)

    first = board.occupant_at(Cell(3, 5))
    second = board.occupant_at(Cell(3, 5))

    assert first == second == Disc(Player.RED)
    assert board.occupant_at(Cell(3, 4)) is None
    assert board.occupant_at(Cell(3, 4)) is None


def test_disc_is_immutable():
    disc = Disc(Player.RED)

    with pytest.raises(AttributeError):
        disc.owner = Player.YELLOW


def test_is_full_after_every_cell_is_taken():
    board = Board(cols=3, rows=2)
    for col in range(3):
        board.drop(col)
        assert not board.is_full()
        board.drop(col)

    assert board.is_full()
    assert board.valid_moves() == []


def test_get_state_uses_player_values():
    board = Board()
    board.drop(0)
    board.drop(6)

    state = board.get_state()

    assert state.dtype == np.int8
    assert state.shape == (6, 7)
    assert state[5, 0] == Player.RED.value
    assert state[5, 6] == Player.YELLOW.value


def test_copy_is_independent():
    board = Board()
    board.drop(1)

    clone = board.copy()
    clone.drop(1)

    assert board.disc_count == 1
    assert clone.disc_count == 2
    assert board.occupant_at(Cell(1, 4)) is None


def test_reset_clears_discs():
    board = Board()
    board.drop(1)
    board.reset()

    assert board.disc_count == 0
    assert board.occupant_at(Cell(1, 5)) is None


@pytest.mark.parametrize("cols,rows", [(0, 6), (7, 0), (-1, -1)])
def test_invalid_dimensions_raise(cols, rows):
    with pytest.raises(ValueError):
        Board(cols, rows)


def test_render_shows_discs_and_column_numbers():
    board = Board()
    board.drop(0)
    board.drop(1)

    lines = board.render().splitlines()

    assert lines[-1] == "|0 1 2 3 4 5 6|"
    assert lines[-3] == "|R Y          |"
    assert str(board) == board.render()


def test_column_height_off_board_is_zero():
    board = Board()
    board.drop(6)
    board.drop(0)

    assert board.column_height(6) == 1
    assert board.column_height(-1) == 0
    assert board.column_height(7) == 0


def test_drop_rejects_non_player_owner():
    board = Board()

    with pytest.raises(TypeError):
        board.drop(0, 1)

    assert board.disc_count == 0
    assert board.occupant_at(Cell(0, 5)) is None
