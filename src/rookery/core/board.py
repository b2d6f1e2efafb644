"""Board - the set of live pieces, indexed by square and by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rookery.core.enums import Color, PieceType
from rookery.core.piece import King, Piece, make_piece
from rookery.core.types import Square, make_square

_BACK_ROW: tuple[tuple[PieceType, str], ...] = (
    (PieceType.ROOK, "r1"),
    (PieceType.KNIGHT, "n1"),
    (PieceType.BISHOP, "b1"),
    (PieceType.QUEEN, "q"),
    (PieceType.KING, "k"),
    (PieceType.BISHOP, "b2"),
    (PieceType.KNIGHT, "n2"),
    (PieceType.ROOK, "r2"),
)


class Board:
    """Mutable collection of pieces with square and name indexes."""

    __slots__ = ("_by_square", "_by_name")

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._by_square: dict[Square, Piece] = {}
        self._by_name: dict[str, Piece] = {}
        for piece in pieces:
            self.place(piece)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._by_square.get(sq)

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._by_name.values()))

    def __len__(self) -> int:
        return len(self._by_name)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._by_square

    def get(self, name: str) -> Piece | None:
        """Piece called *name*, or None if it is not on the board."""
        return self._by_name.get(name)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Piece]:
        """Pieces of *color*, optionally restricted to *piece_type*."""
        return [
            p
            for p in self._by_name.values()
            if p.color == color and (piece_type is None or p.piece_type == piece_type)
        ]

    def king(self, color: Color) -> King:
        """Return the single king of *color*."""
        for piece in self._by_name.values():
            if isinstance(piece, King) and piece.color == color:
                return piece
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on its square."""
        if piece.square in self._by_square:
            raise ValueError(f"Square {piece.square} is already occupied")
        if piece.name in self._by_name:
            raise ValueError(f"Duplicate piece name: {piece.name!r}")
        self._by_square[piece.square] = piece
        self._by_name[piece.name] = piece

    def remove(self, piece: Piece) -> None:
        """Take *piece* off the board."""
        if self._by_name.get(piece.name) is not piece:
            raise ValueError(f"{piece!r} is not on the board")
        del self._by_square[piece.square]
        del self._by_name[piece.name]

    def relocate(self, piece: Piece, sq: Square) -> None:
        """Move *piece* to the empty square *sq*. Flags are left untouched."""
        assert self._by_square.get(piece.square) is piece, f"{piece!r} not on board"
        assert sq == piece.square or sq not in self._by_square, f"{sq} is occupied"
        del self._by_square[piece.square]
        piece.square = sq
        self._by_square[sq] = piece

    def replace(self, old: Piece, new: Piece) -> None:
        """Swap *old* for *new* (used by promotion).

        Both checks run before anything is removed, so a rejected swap leaves
        the board as it was.
        """
        if self._by_name.get(old.name) is not old:
            raise ValueError(f"{old!r} is not on the board")
        holder = self._by_square.get(new.square)
        if holder is not None and holder is not old:
            raise ValueError(f"Square {new.square} is already occupied")
        named = self._by_name.get(new.name)
        if named is not None and named is not old:
            raise ValueError(f"Duplicate piece name: {new.name!r}")
        self.remove(old)
        self.place(new)

    # -- Invariants ---------------------------------------------------------

    def assert_invariants(self) -> None:
        """One piece per square, one king per color, indexes in sync."""
        assert len(self._by_square) == len(self._by_name), "index size mismatch"
        for sq, piece in self._by_square.items():
            assert piece.square == sq, f"{piece!r} indexed at {sq}"
            assert self._by_name.get(piece.name) is piece, f"{piece!r} not named"
        for color in Color:
            kings = self.pieces(color, PieceType.KING)
            assert len(kings) == 1, f"{color.name} has {len(kings)} kings"

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (White at the bottom, rows 7–8)."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for file, (pt, suffix) in enumerate(_BACK_ROW, start=1):
                sq = make_square(color.back_row, file)
                b.place(make_piece(pt, color, sq, color.code + suffix))
            for file in range(1, 9):
                sq = make_square(color.pawn_row, file)
                b.place(make_piece(PieceType.PAWN, color, sq, f"{color.code}p{file}"))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(1, 9):
            cells = []
            for file in range(1, 9):
                p = self[make_square(row, file)]
                if p is None:
                    cells.append(".")
                else:
                    code = p.piece_type.code
                    cells.append(code.upper() if p.color == Color.WHITE else code)
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  1 2 3 4 5 6 7 8")
        return "\n".join(rows)
