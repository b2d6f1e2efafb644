"""High-level chess rules: check, checkmate, stalemate and the draw detector."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.board import Board
from rookery.core.enums import Color, OutcomeKind, PieceType
from rookery.core.legality import CheckDetector, LegalityFilter


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game status after the last accepted move.

    ``color`` is the side in check for :attr:`OutcomeKind.CHECK` and the
    winner for :attr:`OutcomeKind.CHECKMATE`; it is ``None`` otherwise.
    """

    kind: OutcomeKind = OutcomeKind.NONE
    color: Color | None = None

    @classmethod
    def none(cls) -> Outcome:
        return cls()

    @classmethod
    def check(cls, color: Color) -> Outcome:
        return cls(OutcomeKind.CHECK, color)

    @classmethod
    def checkmate(cls, winner: Color) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, winner)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(OutcomeKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (OutcomeKind.CHECKMATE, OutcomeKind.DRAW)

    @property
    def winner(self) -> Color | None:
        return self.color if self.kind == OutcomeKind.CHECKMATE else None

    def __str__(self) -> str:
        name = self.kind.name.lower()
        return f"{name}({self.color})" if self.color is not None else name


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Only two draws exist: bare kings and stalemate. No repetition or
    # move-count rules.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return CheckDetector(board).is_in_check(color)

    @staticmethod
    def has_mobility(board: Board, color: Color) -> bool:
        """Does any piece of *color* have at least one legal move?"""
        legality = LegalityFilter(board)
        return any(legality.legal_moves(piece) for piece in board.pieces(color))

    @staticmethod
    def is_bare_kings(board: Board) -> bool:
        """Only the two kings are left."""
        return len(board) == 2 and all(
            piece.piece_type == PieceType.KING for piece in board
        )

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.is_in_check(board, color) and not Rules.has_mobility(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_mobility(board, color)

    @staticmethod
    def outcome(board: Board, side_to_move: Color) -> Outcome:
        """Classify the position for *side_to_move*, who is about to play."""
        if Rules.is_checkmate(board, side_to_move):
            return Outcome.checkmate(side_to_move.opposite)
        if Rules.is_in_check(board, side_to_move):
            return Outcome.check(side_to_move)
        if Rules.is_bare_kings(board) or Rules.is_stalemate(board, side_to_move):
            return Outcome.draw()
        return Outcome.none()
