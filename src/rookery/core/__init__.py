"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import Board, Color, LegalityFilter, Rules

    board = Board.initial()
    knight = board.get("wn1")
    print(LegalityFilter(board).legal_moves(knight))
    print(Rules.outcome(board, Color.WHITE))
"""

from rookery.core.board import Board
from rookery.core.enums import Color, OutcomeKind, PieceType
from rookery.core.legality import CheckDetector, LegalityFilter
from rookery.core.move_generator import MoveGenerator, MoveShape
from rookery.core.piece import (
    Bishop,
    King,
    Knight,
    Pawn,
    Piece,
    PieceInfo,
    Queen,
    Rook,
    make_piece,
)
from rookery.core.rules import Outcome, Rules
from rookery.core.types import (
    ALL_SQUARES,
    Square,
    file_of,
    is_valid_square,
    make_square,
    row_of,
)

__all__ = [
    # Enums
    "Color",
    "OutcomeKind",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "row_of",
    # Pieces
    "Bishop",
    "King",
    "Knight",
    "Pawn",
    "Piece",
    "PieceInfo",
    "Queen",
    "Rook",
    "make_piece",
    # Domain objects
    "Board",
    "CheckDetector",
    "LegalityFilter",
    "MoveGenerator",
    "MoveShape",
    "Outcome",
    "Rules",
]
