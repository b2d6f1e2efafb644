"""Pseudo-legal move shapes: purely geometric, no board occupancy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rookery.core.enums import PieceType
from rookery.core.piece import Piece
from rookery.core.types import ALL_SQUARES, Square, is_valid_square, on_board, row_of

ROOK_DIRS: tuple[int, ...] = (-10, 10, 1, -1)
BISHOP_DIRS: tuple[int, ...] = (-9, -11, 11, 9)
QUEEN_DIRS: tuple[int, ...] = ROOK_DIRS + BISHOP_DIRS

KNIGHT_OFFSETS: tuple[int, ...] = (21, -21, 19, -19, 12, -12, 8, -8)
KING_OFFSETS: tuple[int, ...] = (1, -1, 10, -10, 11, -11, 9, -9)

Group = tuple[Square, ...]


@dataclass(frozen=True, slots=True)
class MoveShape:
    """Candidate destinations before blocking and legality are applied.

    ``groups`` holds one ordered ray per direction (innermost square first);
    jumping pieces get one single-square group per offset. Pawns leave
    ``groups`` empty and fill ``attacks`` / ``advances`` instead.
    """

    groups: tuple[Group, ...] = ()
    attacks: Group = ()
    advances: Group = ()

    def squares(self) -> set[Square]:
        """Every square mentioned by the shape."""
        out: set[Square] = set(self.attacks) | set(self.advances)
        for group in self.groups:
            out.update(group)
        return out


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays(directions: tuple[int, ...]) -> dict[Square, tuple[Group, ...]]:
    rays_per_square: dict[Square, tuple[Group, ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[Group] = []
        for step in directions:
            ray: list[Square] = []
            to_sq = sq + step
            while is_valid_square(to_sq):
                ray.append(to_sq)
                to_sq += step
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


def _build_targets(offsets: tuple[int, ...]) -> dict[Square, tuple[Group, ...]]:
    return {
        sq: tuple((to_sq,) for to_sq in on_board(sq + off for off in offsets))
        for sq in ALL_SQUARES
    }


_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)


# -- Per-rank shape functions ----------------------------------------------


def _lookup(table: dict[Square, tuple[Group, ...]]) -> Callable[[Piece], MoveShape]:
    def shape(piece: Piece) -> MoveShape:
        return MoveShape(groups=table[piece.square])

    return shape


def _pawn_shape(piece: Piece) -> MoveShape:
    sq = piece.square
    forward = piece.color.forward
    advances = [sq + forward]
    if row_of(sq) == piece.color.pawn_row:
        advances.append(sq + 2 * forward)
    attacks = (sq + forward - 1, sq + forward + 1)
    return MoveShape(attacks=on_board(attacks), advances=on_board(advances))


_SHAPES: dict[PieceType, Callable[[Piece], MoveShape]] = {
    PieceType.PAWN: _pawn_shape,
    PieceType.KNIGHT: _lookup(_KNIGHT_TARGETS),
    PieceType.BISHOP: _lookup(_BISHOP_RAYS),
    PieceType.ROOK: _lookup(_ROOK_RAYS),
    PieceType.QUEEN: _lookup(_QUEEN_RAYS),
    PieceType.KING: _lookup(_KING_TARGETS),
}


class MoveGenerator:
    """Maps a piece to its pseudo-legal :class:`MoveShape`."""

    __slots__ = ()

    @staticmethod
    def generate(piece: Piece) -> MoveShape:
        return _SHAPES[piece.piece_type](piece)
