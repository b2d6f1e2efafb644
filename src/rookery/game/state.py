"""Game state — one explicit value holding everything a game mutates."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookery.core.board import Board
from rookery.core.enums import Color
from rookery.core.piece import Piece
from rookery.core.rules import Outcome
from rookery.core.types import Square
from rookery.game.interfaces import GamePhase


@dataclass
class GameState:
    """Board, turn, selection cache and outcome.

    This is a pure data class — no rules, no UI. Tests may build one around
    any board and hand it to :class:`~rookery.game.state_machine.GameStateMachine`.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    selection: Piece | None = None
    legal_moves: frozenset[Square] = frozenset()
    outcome: Outcome = field(default_factory=Outcome.none)
    ply_count: int = 0

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Back to the standard start; every piece is rebuilt with fresh flags."""
        self.board = Board.initial()
        self.turn = Color.WHITE
        self.outcome = Outcome.none()
        self.ply_count = 0
        self.clear_selection()

    def select(self, piece: Piece, moves: frozenset[Square]) -> None:
        self.selection = piece
        self.legal_moves = moves

    def clear_selection(self) -> None:
        self.selection = None
        self.legal_moves = frozenset()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def phase(self) -> GamePhase:
        if self.is_game_over:
            return GamePhase.GAME_OVER
        if self.selection is not None:
            return GamePhase.SELECTED
        return GamePhase.IDLE
