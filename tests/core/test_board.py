import random

import pytest

from blackbox.core.board import Board, create_empty_board, place_atoms
from blackbox.core.exceptions import BoardError
from blackbox.core.geometry import Position


def _padded(size, atoms=()):
    rows = [[0] * (size + 2) for _ in range(size + 2)]
    for x, y in atoms:
        rows[y][x] = 1
    return rows


class TestBoardConstruction:
    def test_empty_board_defaults(self):
        board = create_empty_board()

        assert board.size == 8
        assert board.padded_size == 10
        assert board.atom_count == 0
        assert board.atoms == ()

    def test_from_atoms(self):
        board = Board.from_atoms([(3, 2), (1, 1)])

        assert board.has_atom(Position(3, 2))
        assert board.has_atom((1, 1))
        assert not board.has_atom((2, 3))
        assert board.atoms == ((1, 1), (3, 2))

    def test_duplicate_atoms_collapse(self):
        board = Board.from_atoms([(2, 2), (2, 2)])
        assert board.atom_count == 1

    @pytest.mark.parametrize("atom", [(0, 3), (9, 3), (3, 0), (3, 9), (-1, 4), (12, 12)])
    def test_atom_outside_interior_rejected(self, atom):
        with pytest.raises(BoardError) as exc_info:
            Board.from_atoms([atom])

        assert exc_info.value.position == atom
        assert exc_info.value.details["position"] == atom

    def test_non_positive_size_rejected(self):
        with pytest.raises(BoardError):
            Board(size=0)

    def test_from_rows_round_trip(self):
        rows = _padded(8, [(1, 1), (8, 8), (4, 6)])
        board = Board.from_rows(rows)

        assert board.size == 8
        assert board.atoms == ((1, 1), (4, 6), (8, 8))
        assert board.to_rows() == [[bool(cell) for cell in row] for row in rows]

    def test_from_rows_rejects_border_atom(self):
        rows = _padded(8)
        rows[0][4] = 1

        with pytest.raises(BoardError) as exc_info:
            Board.from_rows(rows)

        assert exc_info.value.position == (4, 0)

    def test_from_rows_rejects_ragged_grid(self):
        rows = _padded(8)
        rows[3] = rows[3][:-1]

        with pytest.raises(BoardError) as exc_info:
            Board.from_rows(rows)

        assert exc_info.value.details["row"] == 3

    def test_from_rows_rejects_tiny_grid(self):
        with pytest.raises(BoardError):
            Board.from_rows([[0, 0], [0, 0]])


class TestBoardReads:
    @pytest.mark.parametrize("position", [(-1, 0), (0, -1), (10, 5), (5, 10), (-3, 200)])
    def test_reads_outside_grid_are_empty(self, sample_board, position):
        assert sample_board.has_atom(Position(*position)) is False

    def test_border_and_interior(self, empty_board):
        assert empty_board.is_border(Position(0, 4))
        assert empty_board.is_border(Position(9, 9))
        assert not empty_board.is_border(Position(4, 4))
        assert empty_board.is_interior(Position(1, 8))
        assert not empty_board.is_interior(Position(0, 8))


class TestBoardImmutability:
    def test_with_atom_returns_new_board(self, empty_board):
        board = empty_board.with_atom((4, 4))

        assert board.has_atom((4, 4))
        assert not empty_board.has_atom((4, 4))
        assert board is not empty_board

    def test_to_rows_is_a_copy(self, sample_board):
        rows = sample_board.to_rows()
        rows[1][1] = True

        assert not sample_board.has_atom((1, 1))

    def test_equality_and_hash(self):
        a = Board.from_atoms([(1, 2), (3, 4)])
        b = Board.from_atoms([(3, 4), (1, 2)])

        assert a == b
        assert hash(a) == hash(b)
        assert a != Board.from_atoms([(1, 2)])
        assert a != Board.from_atoms([(1, 2), (3, 4)], size=6)


class TestPlaceAtoms:
    def test_places_requested_count_inside_interior(self):
        board = place_atoms(6, rng=random.Random(3))

        assert board.atom_count == 6
        assert all(board.is_interior(atom) for atom in board.atoms)

    def test_seeded_placement_is_repeatable(self):
        assert place_atoms(4, rng=random.Random(99)) == place_atoms(4, rng=random.Random(99))

    def test_fills_whole_interior(self):
        board = place_atoms(9, size=3, rng=random.Random(0))
        assert board.atom_count == 9

    def test_zero_atoms(self):
        assert place_atoms(0).atom_count == 0

    @pytest.mark.parametrize("count", [-1, 65])
    def test_impossible_count_rejected(self, count):
        with pytest.raises(BoardError) as exc_info:
            place_atoms(count)

        assert exc_info.value.details["cells"] == 64
