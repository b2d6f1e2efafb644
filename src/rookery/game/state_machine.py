"""GameStateMachine — the single writer of board and game state.

Drives the turn cycle: Idle → Selected → move applied → outcome check → Idle
(or game over). Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookery.core.enums import Color, OutcomeKind
from rookery.core.legality import LegalityFilter
from rookery.core.piece import King, Pawn, Piece, PieceInfo, Queen, Rook, promoted_name
from rookery.core.rules import Outcome, Rules
from rookery.core.types import Square, row_of
from rookery.game.interfaces import GamePhase, IGameController
from rookery.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, Square, Square], None]  # piece name, from, to
GameOverCallback = Callable[[Outcome], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── State machine ────────────────────────────────────────────────────────────


class GameStateMachine(IGameController):
    """Owns the :class:`GameState`; validates and applies intents.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Every call runs to completion.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── Intents ──────────────────────────────────────────────────────────

    def select_square(self, square: Square) -> bool:
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Ignoring selection of %s: game is over", square)
            return False

        piece = state.board[square]
        if piece is None or piece.color != state.turn:
            _LOGGER.debug("No %s piece on %s", state.turn, square)
            state.clear_selection()
            return False

        moves = LegalityFilter(state.board).legal_moves(piece)
        if not moves:
            _LOGGER.debug("%r has no legal moves", piece)
            state.clear_selection()
            return False

        state.select(piece, frozenset(moves))
        return True

    def attempt_move(self, square: Square) -> bool:
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Ignoring move to %s: game is over", square)
            return False

        piece = state.selection
        if piece is None:
            _LOGGER.debug("Ignoring move to %s: nothing selected", square)
            return False
        if square not in state.legal_moves:
            _LOGGER.debug("Ignoring move %r -> %s: not a legal move", piece, square)
            return False

        origin = piece.square
        self._apply(piece, square)
        self._emit_move(piece.name, origin, square)

        if state.is_game_over:
            _LOGGER.info("Game over after %d plies: %s", state.ply_count, state.outcome)
            self._emit_game_over(state.outcome)
        return True

    def request_reset(self) -> None:
        self._state.reset()
        _LOGGER.info("New game started")
        for cb in self.events.on_reset:
            cb()

    # ── Read-only queries ────────────────────────────────────────────────

    def list_pieces(self) -> list[PieceInfo]:
        return sorted(
            (piece.info() for piece in self._state.board), key=lambda p: p.square
        )

    def legal_moves_for_selection(self) -> frozenset[Square]:
        return self._state.legal_moves

    def current_outcome(self) -> Outcome:
        return self._state.outcome

    def current_turn(self) -> Color:
        return self._state.turn

    def selected_piece(self) -> PieceInfo | None:
        selection = self._state.selection
        return selection.info() if selection is not None else None

    # ── Move application ─────────────────────────────────────────────────

    def _apply(self, piece: Piece, target: Square) -> None:
        """Apply an already validated move and hand the turn over."""
        state = self._state
        board = state.board
        mover = piece.color
        origin = piece.square
        legality = LegalityFilter(board)

        # Castling partner must be found before the king leaves its square.
        castling_rook: Rook | None = None
        direction = 1 if target > origin else -1
        if isinstance(piece, King) and abs(target - origin) == 2:
            castling_rook = legality.castling_partner(piece, direction)

        captured = board[target]
        if captured is None and isinstance(piece, Pawn):
            captured = legality.en_passant_victim(piece, target)
        if captured is not None:
            board.remove(captured)

        board.relocate(piece, target)

        if castling_rook is not None:
            board.relocate(castling_rook, target - direction)
            castling_rook.able_to_castle = False
        if isinstance(piece, (King, Rook)):
            piece.able_to_castle = False
        # The opponent's en-passant window was this move; it is now closed.
        for pawn in board.pieces(mover.opposite):
            if isinstance(pawn, Pawn):
                pawn.en_passant_ready = False

        if isinstance(piece, Pawn):
            if abs(target - origin) == 2 * abs(mover.forward):
                piece.en_passant_ready = True
            if row_of(target) == mover.promotion_row:
                taken = {p.name for p in board}
                queen = Queen(mover, target, promoted_name(piece.name, taken))
                board.replace(piece, queen)

        board.king(mover).is_checked = False
        state.turn = mover.opposite
        state.ply_count += 1
        state.clear_selection()

        state.outcome = Rules.outcome(board, state.turn)
        if state.outcome.kind in (OutcomeKind.CHECK, OutcomeKind.CHECKMATE):
            board.king(state.turn).is_checked = True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, name: str, origin: Square, target: Square) -> None:
        for cb in self.events.on_move:
            cb(name, origin, target)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
