"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def code(self) -> str:
        """Single-letter code used in piece names ('w' / 'b')."""
        return "w" if self is Color.WHITE else "b"

    @classmethod
    def from_code(cls, code: str) -> Color:
        try:
            return _COLOR_CODES[code]
        except KeyError:
            raise ValueError(f"{code!r} is not a piece color") from None

    # ── Board geometry ───────────────────────────────────────────────────

    @property
    def forward(self) -> int:
        """Square offset of a single pawn advance."""
        return -10 if self is Color.WHITE else 10

    @property
    def back_row(self) -> int:
        return 8 if self is Color.WHITE else 1

    @property
    def pawn_row(self) -> int:
        """Row from which a pawn may advance two squares."""
        return 7 if self is Color.WHITE else 2

    @property
    def promotion_row(self) -> int:
        return 1 if self is Color.WHITE else 8

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def code(self) -> str:
        """Single-letter code used in piece names."""
        return _TYPE_TO_CODE[self]

    @classmethod
    def from_code(cls, code: str) -> PieceType:
        try:
            return _CODE_TO_TYPE[code]
        except KeyError:
            raise ValueError(f"{code!r} is not a piece type") from None

    def __str__(self) -> str:
        return self.name.lower()


class OutcomeKind(IntEnum):
    """State of the game after the last accepted move."""

    NONE = 0
    CHECK = 1
    CHECKMATE = 2
    DRAW = 3


_COLOR_CODES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

_TYPE_TO_CODE: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_CODE_TO_TYPE: dict[str, PieceType] = {v: k for k, v in _TYPE_TO_CODE.items()}
