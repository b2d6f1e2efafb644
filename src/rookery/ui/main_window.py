"""MainWindow — board view, status line and game menu."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QWidget

from rookery.core.enums import OutcomeKind
from rookery.game.state_machine import GameStateMachine
from rookery.ui.board_scene import BoardScene
from rookery.ui.board_view import BoardView
from rookery.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Top-level window hosting one game."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        game: GameStateMachine | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._game = game if game is not None else GameStateMachine()

        self.setWindowTitle("Rookery")
        self._scene = BoardScene(self._game, self._settings, self)
        self._board_view = BoardView(self._scene, self)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        self.statusBar().addWidget(self._status_label)

        self._setup_menu()
        self._scene.state_changed.connect(self._update_status)
        self._update_status()

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def status_text(self) -> str:
        return self._status_label.text()

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_menu(self) -> None:
        game_menu = self.menuBar().addMenu("&Game")

        new_game = QAction("&New Game", self)
        new_game.setShortcut(QKeySequence.StandardKey.New)
        new_game.triggered.connect(self._on_new_game)
        game_menu.addAction(new_game)

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

        help_menu = self.menuBar().addMenu("&Help")
        self._help_action = QAction("Show &Help", self)
        self._help_action.setCheckable(True)
        self._help_action.setShortcut(QKeySequence("H"))
        self._help_action.toggled.connect(self._scene.set_help_visible)
        help_menu.addAction(self._help_action)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._game.request_reset()
        self._scene.set_interactive(True)
        self._scene.refresh()
        self._update_status()

    def _update_status(self) -> None:
        outcome = self._game.current_outcome()
        turn = self._game.current_turn()
        if outcome.kind == OutcomeKind.CHECKMATE:
            text = f"Checkmate — {outcome.winner} wins"
        elif outcome.kind == OutcomeKind.DRAW:
            text = "Draw"
        elif outcome.kind == OutcomeKind.CHECK:
            text = f"{turn} to move — check"
        else:
            text = f"{turn} to move"
        self._scene.set_interactive(not outcome.is_terminal)
        self._status_label.setText(text.capitalize())
