"""Piece entities: one dataclass per rank, tagged with its PieceType."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass
from typing import ClassVar

from rookery.core.enums import Color, PieceType
from rookery.core.types import Square, is_valid_square

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class PieceInfo:
    """Read-only snapshot of a piece handed to rendering code."""

    name: str
    piece_type: PieceType
    color: Color
    square: Square
    able_to_castle: bool = False
    is_checked: bool = False
    en_passant_ready: bool = False

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


@dataclass(eq=False, slots=True)
class Piece:
    """A live piece on the board.

    Pieces are entities: two pieces compare equal only if they are the same
    object. ``square`` is owned by :class:`~rookery.core.board.Board`; move a
    piece through ``Board.relocate`` so the square index stays consistent.
    """

    piece_type: ClassVar[PieceType]

    color: Color
    square: Square
    name: str

    def __post_init__(self) -> None:
        if type(self) is Piece:
            raise TypeError("Piece is abstract; use make_piece() or a rank class")
        if not isinstance(self.color, Color):
            raise ValueError(f"{self.color!r} is not a piece color")
        if not is_valid_square(self.square):
            raise ValueError(f"Invalid square: {self.square!r}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str, square: Square) -> Piece:
        """Create a piece from its identifier, e.g. ``'wr1'`` → white rook."""
        if len(name) < 2:
            raise ValueError(f"Invalid piece name: {name!r}")
        color = Color.from_code(name[0])
        piece_type = PieceType.from_code(name[1])
        return make_piece(piece_type, color, square, name)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        return _UNICODE[(self.color, self.piece_type)]

    def info(self) -> PieceInfo:
        return PieceInfo(
            name=self.name,
            piece_type=self.piece_type,
            color=self.color,
            square=self.square,
            able_to_castle=getattr(self, "able_to_castle", False),
            is_checked=getattr(self, "is_checked", False),
            en_passant_ready=getattr(self, "en_passant_ready", False),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.square})"


@dataclass(eq=False, slots=True, repr=False)
class Pawn(Piece):
    piece_type: ClassVar[PieceType] = PieceType.PAWN

    en_passant_ready: bool = False


@dataclass(eq=False, slots=True, repr=False)
class Knight(Piece):
    piece_type: ClassVar[PieceType] = PieceType.KNIGHT


@dataclass(eq=False, slots=True, repr=False)
class Bishop(Piece):
    piece_type: ClassVar[PieceType] = PieceType.BISHOP


@dataclass(eq=False, slots=True, repr=False)
class Rook(Piece):
    piece_type: ClassVar[PieceType] = PieceType.ROOK

    able_to_castle: bool = True


@dataclass(eq=False, slots=True, repr=False)
class Queen(Piece):
    piece_type: ClassVar[PieceType] = PieceType.QUEEN


@dataclass(eq=False, slots=True, repr=False)
class King(Piece):
    piece_type: ClassVar[PieceType] = PieceType.KING

    able_to_castle: bool = True
    is_checked: bool = False


_VARIANTS: dict[PieceType, type[Piece]] = {
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.BISHOP: Bishop,
    PieceType.ROOK: Rook,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
}


def make_piece(
    piece_type: PieceType,
    color: Color,
    square: Square,
    name: str | None = None,
) -> Piece:
    """Build the rank class for *piece_type*.

    Raises:
        ValueError: *piece_type* or *color* is outside the known enumerations,
            or *square* is not on the board.
    """
    if not isinstance(piece_type, PieceType):
        raise ValueError(f"{piece_type!r} is not a piece type")
    cls = _VARIANTS[piece_type]
    if not isinstance(color, Color):
        raise ValueError(f"{color!r} is not a piece color")
    if name is None:
        name = f"{color.code}{piece_type.code}"
    return cls(color, square, name)


def promoted_name(pawn_name: str, taken: Container[str] = ()) -> str:
    """Name for the queen replacing a promoted pawn: ``'wp3'`` → ``'wq3'``.

    A name already in *taken* gets a ``#2``, ``#3``, ... suffix.
    """
    if pawn_name[1:2] == PieceType.PAWN.code:
        base = pawn_name[0] + PieceType.QUEEN.code + pawn_name[2:]
    else:
        base = pawn_name + "=" + PieceType.QUEEN.code
    name = base
    n = 2
    while name in taken:
        name = f"{base}#{n}"
        n += 1
    return name
