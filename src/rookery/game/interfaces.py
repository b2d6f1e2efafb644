"""Abstract interfaces for the game layer.

Rendering and input code depends on :class:`IGameController`, never on the
board itself: it submits intents and reads snapshots.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookery.core.enums import Color
    from rookery.core.piece import PieceInfo
    from rookery.core.rules import Outcome
    from rookery.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    IDLE = auto()  # side to move has nothing selected
    SELECTED = auto()  # a piece is chosen and its legal moves are cached
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    # Intents

    @abstractmethod
    def select_square(self, square: Square) -> bool:
        """Select the piece on *square*. Returns True if a selection was made."""

    @abstractmethod
    def attempt_move(self, square: Square) -> bool:
        """Move the selected piece to *square*. Returns True if applied."""

    @abstractmethod
    def request_reset(self) -> None:
        """Start a new game from the standard position."""

    # Read-only queries

    @abstractmethod
    def list_pieces(self) -> list[PieceInfo]:
        """Snapshots of every live piece."""

    @abstractmethod
    def legal_moves_for_selection(self) -> frozenset[Square]:
        """Cached legal destinations of the selected piece."""

    @abstractmethod
    def current_outcome(self) -> Outcome:
        """Status after the last accepted move."""

    @abstractmethod
    def current_turn(self) -> Color:
        """Side to move."""

    @abstractmethod
    def selected_piece(self) -> PieceInfo | None:
        """Snapshot of the selected piece, if any."""
