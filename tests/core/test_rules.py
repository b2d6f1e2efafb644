"""Tests for Rules: check, checkmate, stalemate and the bare-kings draw."""

from rookery.core.board import Board
from rookery.core.enums import Color, OutcomeKind
from rookery.core.piece import Piece
from rookery.core.rules import Outcome, Rules


def _board(*specs: tuple[str, int]) -> Board:
    return Board(Piece.from_name(name, sq) for name, sq in specs)


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_rook_on_open_file(self) -> None:
        board = _board(("wk", 85), ("br1", 15), ("bk", 11))
        assert Rules.is_in_check(board, Color.WHITE)
        assert Rules.outcome(board, Color.WHITE) == Outcome.check(Color.WHITE)

    def test_check_that_can_be_answered_by_capture(self) -> None:
        # Black rook on 48 takes the checking rook along file 8.
        board = _board(("bk", 11), ("wr1", 18), ("wk", 31), ("br1", 48))
        assert Rules.outcome(board, Color.BLACK) == Outcome.check(Color.BLACK)


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        # Rook on row 1 checks the king; the white king covers 21 and 22.
        board = _board(("bk", 11), ("wr1", 18), ("wk", 31))
        assert Rules.is_checkmate(board, Color.BLACK)
        outcome = Rules.outcome(board, Color.BLACK)
        assert outcome == Outcome.checkmate(Color.WHITE)
        assert outcome.winner == Color.WHITE
        assert outcome.is_terminal

    def test_not_checkmate_when_king_can_escape(self) -> None:
        board = _board(("bk", 11), ("wr1", 18), ("wk", 88))
        assert not Rules.is_checkmate(board, Color.BLACK)


class TestStalemate:
    def test_king_trapped(self) -> None:
        board = _board(("bk", 11), ("wq", 32), ("wk", 88))
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.outcome(board, Color.BLACK) == Outcome.draw()

    def test_only_the_side_to_move_counts(self) -> None:
        board = _board(("bk", 11), ("wq", 32), ("wk", 88))
        assert not Rules.is_stalemate(board, Color.WHITE)
        assert Rules.outcome(board, Color.WHITE) == Outcome.none()


class TestDraw:
    def test_bare_kings(self) -> None:
        board = _board(("wk", 85), ("bk", 15))
        assert Rules.is_bare_kings(board)
        assert Rules.outcome(board, Color.WHITE) == Outcome.draw()

    def test_minor_piece_is_not_a_draw(self) -> None:
        board = _board(("wk", 85), ("wb1", 83), ("bk", 15))
        assert not Rules.is_bare_kings(board)
        assert Rules.outcome(board, Color.BLACK).kind == OutcomeKind.NONE


class TestOutcome:
    def test_in_progress_at_start(self) -> None:
        outcome = Rules.outcome(Board.initial(), Color.WHITE)
        assert outcome == Outcome.none()
        assert not outcome.is_terminal
        assert outcome.winner is None

    def test_check_is_not_terminal(self) -> None:
        outcome = Outcome.check(Color.BLACK)
        assert not outcome.is_terminal
        assert outcome.winner is None

    def test_str(self) -> None:
        assert str(Outcome.none()) == "none"
        assert str(Outcome.draw()) == "draw"
        assert str(Outcome.checkmate(Color.BLACK)) == "checkmate(black)"
        assert str(Outcome.check(Color.WHITE)) == "check(white)"
