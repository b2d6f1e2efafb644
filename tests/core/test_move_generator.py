"""Tests for geometric move shapes."""

import pytest

from rookery.core.enums import Color, PieceType
from rookery.core.move_generator import MoveGenerator, MoveShape
from rookery.core.piece import make_piece
from rookery.core.types import file_of, is_valid_square, row_of


def _shape(
    piece_type: PieceType, square: int, color: Color = Color.WHITE
) -> MoveShape:
    return MoveGenerator.generate(make_piece(piece_type, color, square))


def _ray_lengths(square: int) -> tuple[int, int, int, int]:
    """Distances to the top, bottom, left and right edges."""
    row, file = row_of(square), file_of(square)
    return row - 1, 8 - row, file - 1, 8 - file


class TestSliders:
    def test_rook_in_corner(self) -> None:
        shape = _shape(PieceType.ROOK, 11)
        assert len(shape.squares()) == 14

    @pytest.mark.parametrize("square", [11, 23, 44, 45, 58, 67, 88])
    def test_rook_matches_ray_lengths(self, square: int) -> None:
        assert len(_shape(PieceType.ROOK, square).squares()) == 14
        assert sorted(len(g) for g in _shape(PieceType.ROOK, square).groups) == sorted(
            _ray_lengths(square)
        )

    @pytest.mark.parametrize("square,expected", [(11, 7), (44, 13), (45, 13), (12, 7)])
    def test_bishop_counts(self, square: int, expected: int) -> None:
        assert len(_shape(PieceType.BISHOP, square).squares()) == expected

    def test_queen_is_union(self) -> None:
        queen = _shape(PieceType.QUEEN, 44).squares()
        rook = _shape(PieceType.ROOK, 44).squares()
        bishop = _shape(PieceType.BISHOP, 44).squares()
        assert queen == rook | bishop
        assert len(queen) == 27

    def test_one_group_per_direction(self) -> None:
        assert len(_shape(PieceType.ROOK, 44).groups) == 4
        assert len(_shape(PieceType.BISHOP, 44).groups) == 4
        assert len(_shape(PieceType.QUEEN, 44).groups) == 8

    def test_rays_are_innermost_first(self) -> None:
        groups = _shape(PieceType.ROOK, 44).groups
        assert (34, 24, 14) in groups
        assert (45, 46, 47, 48) in groups

    def test_no_wrap_across_rows(self) -> None:
        squares = _shape(PieceType.ROOK, 18).squares()
        assert 21 not in squares
        assert all(row_of(sq) == 1 or file_of(sq) == 8 for sq in squares)

    def test_diagonal_stops_at_edge(self) -> None:
        squares = _shape(PieceType.BISHOP, 28).squares()
        assert squares == {17, 37, 46, 55, 64, 73, 82}


class TestJumpers:
    def test_knight_center(self) -> None:
        assert _shape(PieceType.KNIGHT, 44).squares() == {
            23, 25, 32, 36, 52, 56, 63, 65,
        }

    def test_knight_corner(self) -> None:
        assert _shape(PieceType.KNIGHT, 11).squares() == {23, 32}
        assert _shape(PieceType.KNIGHT, 88).squares() == {67, 76}

    def test_knight_edge_never_wraps(self) -> None:
        for sq in (18, 28, 81, 71):
            for target in _shape(PieceType.KNIGHT, sq).squares():
                assert is_valid_square(target)
                assert abs(file_of(target) - file_of(sq)) in (1, 2)

    def test_king_center(self) -> None:
        shape = _shape(PieceType.KING, 44)
        assert shape.squares() == {33, 34, 35, 43, 45, 53, 54, 55}
        assert all(len(group) == 1 for group in shape.groups)

    def test_king_corner(self) -> None:
        assert _shape(PieceType.KING, 81).squares() == {71, 72, 82}


class TestPawn:
    def test_white_home_row(self) -> None:
        shape = _shape(PieceType.PAWN, 72, Color.WHITE)
        assert shape.advances == (62, 52)
        assert set(shape.attacks) == {61, 63}
        assert shape.groups == ()

    def test_black_home_row(self) -> None:
        shape = _shape(PieceType.PAWN, 22, Color.BLACK)
        assert shape.advances == (32, 42)
        assert set(shape.attacks) == {31, 33}

    def test_single_step_off_home_row(self) -> None:
        assert _shape(PieceType.PAWN, 62, Color.WHITE).advances == (52,)
        assert _shape(PieceType.PAWN, 32, Color.BLACK).advances == (42,)

    def test_edge_file_attack_does_not_wrap(self) -> None:
        assert _shape(PieceType.PAWN, 71, Color.WHITE).attacks == (62,)
        assert _shape(PieceType.PAWN, 78, Color.WHITE).attacks == (67,)
        assert _shape(PieceType.PAWN, 28, Color.BLACK).attacks == (37,)
