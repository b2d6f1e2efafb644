"""Legal move filtering and check detection.

The two classes here are mutually recursive: legality asks whether a simulated
move leaves the king attacked, and attack detection asks for each enemy
piece's reach. The recursion is cut by the explicit ``checking`` flag, which
is always ``False`` on the attack-detection side.
"""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color
from rookery.core.move_generator import MoveGenerator, MoveShape
from rookery.core.piece import King, Pawn, Piece, Rook
from rookery.core.types import Square, file_of, is_valid_square

# Minimum file distance between a castling king and its rook: the king's
# destination (two files over) must lie strictly between them.
_CASTLING_MIN_DISTANCE = 3


class CheckDetector:
    """Answers whether a king's square is within enemy reach."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king = self._board.king(color)
        return self.is_square_attacked(king.square, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* within the board-aware reach of any *by_color* piece?

        Pawns only reach diagonally onto occupied squares, so this is only
        meaningful for squares holding a piece of the other side.
        """
        reach = LegalityFilter(self._board)
        for enemy in self._board.pieces(by_color):
            shape = MoveGenerator.generate(enemy)
            if sq in reach.unblocked_positions(shape, enemy, checking=False):
                return True
        return False


class LegalityFilter:
    """Walks move shapes against board occupancy and removes self-checks.

    Self-check tests temporarily mutate the board but always restore it
    before returning.
    """

    __slots__ = ("_board", "_detector")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._detector = CheckDetector(board)

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, piece: Piece) -> set[Square]:
        """Every square *piece* may legally move to, castling included."""
        moves = self.unblocked_positions(MoveGenerator.generate(piece), piece)
        if isinstance(piece, King):
            moves |= self.castling_squares(piece)
        return moves

    def unblocked_positions(
        self,
        shape: MoveShape,
        piece: Piece,
        *,
        checking: bool = True,
    ) -> set[Square]:
        """Destinations of *shape* reachable on the current board.

        With ``checking=False`` the self-check simulation is skipped and the
        result is the piece's raw attack reach.
        """
        if isinstance(piece, Pawn):
            return self._pawn_positions(shape, piece, checking)

        board = self._board
        positions: set[Square] = set()
        for group in shape.groups:
            for sq in group:
                target = board[sq]
                if target is not None and target.color == piece.color:
                    break
                if not (checking and self.leaves_king_in_check(piece, sq)):
                    positions.add(sq)
                if target is not None:
                    break
        return positions

    def leaves_king_in_check(self, piece: Piece, target: Square) -> bool:
        """Would moving *piece* to *target* leave its own king attacked?

        Moving onto a king's square always counts as exposing: kings are
        never captured.
        """
        board = self._board
        captured = board[target]
        if captured is None and isinstance(piece, Pawn):
            captured = self.en_passant_victim(piece, target)
        if isinstance(captured, King):
            return True

        origin = piece.square
        if captured is not None:
            board.remove(captured)
        board.relocate(piece, target)
        try:
            return self._detector.is_in_check(piece.color)
        finally:
            board.relocate(piece, origin)
            if captured is not None:
                board.place(captured)

    def en_passant_victim(self, pawn: Pawn, target: Square) -> Pawn | None:
        """Enemy pawn capturable by *pawn* moving diagonally onto *target*."""
        if file_of(target) == file_of(pawn.square) or not self._board.is_empty(target):
            return None
        victim = self._board[target - pawn.color.forward]
        if (
            isinstance(victim, Pawn)
            and victim.color != pawn.color
            and victim.en_passant_ready
        ):
            return victim
        return None

    # -- Castling -----------------------------------------------------------

    def castling_partner(self, king: King, direction: int) -> Rook | None:
        """Rook *king* may castle with towards *direction* (+1 or -1).

        The first piece met along the row must be an unmoved friendly rook,
        far enough away for the king to land strictly between them.
        """
        sq = king.square + direction
        while is_valid_square(sq):
            piece = self._board[sq]
            if piece is None:
                sq += direction
                continue
            if (
                isinstance(piece, Rook)
                and piece.color == king.color
                and piece.able_to_castle
                and abs(sq - king.square) >= _CASTLING_MIN_DISTANCE
            ):
                return piece
            return None
        return None

    def castling_squares(self, king: King) -> set[Square]:
        """Destinations of the castling moves currently open to *king*."""
        if not king.able_to_castle or self._detector.is_in_check(king.color):
            return set()

        squares: set[Square] = set()
        for direction in (1, -1):
            if self.castling_partner(king, direction) is None:
                continue
            transit = king.square + direction
            destination = king.square + 2 * direction
            if self.leaves_king_in_check(king, transit):
                continue
            if self.leaves_king_in_check(king, destination):
                continue
            squares.add(destination)
        return squares

    # -- Internal -----------------------------------------------------------

    def _pawn_positions(
        self, shape: MoveShape, pawn: Pawn, checking: bool
    ) -> set[Square]:
        board = self._board
        positions: set[Square] = set()

        for sq in shape.attacks:
            target = board[sq]
            if target is None:
                if self.en_passant_victim(pawn, sq) is None:
                    continue
            elif target.color == pawn.color:
                continue
            if checking and self.leaves_king_in_check(pawn, sq):
                continue
            positions.add(sq)

        for sq in shape.advances:
            if not board.is_empty(sq):
                break
            if checking and self.leaves_king_in_check(pawn, sq):
                continue
            positions.add(sq)

        return positions
