"""Tests for GameState."""

from rookery.core.board import Board
from rookery.core.enums import Color
from rookery.core.rules import Outcome
from rookery.game.interfaces import GamePhase
from rookery.game.state import GameState


class TestGameStateDefaults:
    def test_fresh_state(self) -> None:
        gs = GameState()
        assert len(gs.board) == 32
        assert gs.turn == Color.WHITE
        assert gs.selection is None
        assert gs.legal_moves == frozenset()
        assert gs.outcome == Outcome.none()
        assert gs.ply_count == 0
        assert gs.phase == GamePhase.IDLE

    def test_states_do_not_share_boards(self) -> None:
        assert GameState().board is not GameState().board

    def test_custom_board(self) -> None:
        board = Board.initial()
        gs = GameState(board=board, turn=Color.BLACK)
        assert gs.board is board
        assert gs.turn == Color.BLACK


class TestGameStatePhase:
    def test_selected(self) -> None:
        gs = GameState()
        knight = gs.board.get("wn1")
        gs.select(knight, frozenset({61, 63}))
        assert gs.phase == GamePhase.SELECTED
        assert gs.selection is knight
        assert gs.legal_moves == {61, 63}

    def test_clear_selection(self) -> None:
        gs = GameState()
        gs.select(gs.board.get("wn1"), frozenset({61, 63}))
        gs.clear_selection()
        assert gs.phase == GamePhase.IDLE
        assert gs.legal_moves == frozenset()

    def test_game_over_wins_over_selection(self) -> None:
        gs = GameState()
        gs.select(gs.board.get("wn1"), frozenset({61}))
        gs.outcome = Outcome.checkmate(Color.BLACK)
        assert gs.is_game_over
        assert gs.phase == GamePhase.GAME_OVER

    def test_check_is_not_game_over(self) -> None:
        gs = GameState(outcome=Outcome.check(Color.WHITE))
        assert not gs.is_game_over
        assert gs.phase == GamePhase.IDLE


class TestGameStateReset:
    def test_reset_restores_start(self) -> None:
        gs = GameState()
        gs.board.remove(gs.board.get("wq"))
        gs.board.get("wk").able_to_castle = False
        gs.turn = Color.BLACK
        gs.ply_count = 7
        gs.outcome = Outcome.draw()
        gs.select(gs.board.get("wn1"), frozenset({61}))

        gs.reset()

        assert len(gs.board) == 32
        assert gs.board.get("wk").able_to_castle
        assert gs.turn == Color.WHITE
        assert gs.ply_count == 0
        assert gs.outcome == Outcome.none()
        assert gs.phase == GamePhase.IDLE
