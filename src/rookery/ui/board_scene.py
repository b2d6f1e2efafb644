"""BoardScene — QGraphicsScene that paints game state and forwards clicks."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from rookery.core.enums import Color, PieceType
from rookery.core.types import ALL_SQUARES, Square, file_of, make_square, row_of
from rookery.game.interfaces import IGameController
from rookery.ui.settings import AppSettings

HELP_TEXT = (
    "Click one of your pieces, then a marked square to move.\n"
    "Castle by moving the king two squares.\n"
    "Pawns reaching the last row become queens.\n"
    "Ctrl+N starts a new game. H toggles this help."
)


class BoardScene(QGraphicsScene):
    """Renders squares, highlights and pieces; turns clicks into intents.

    The scene never touches the board directly: it reads snapshots from the
    controller and submits ``select_square`` / ``attempt_move``.

    Signals:
        state_changed(): Emitted after a click that may have changed state.
    """

    state_changed = pyqtSignal()

    def __init__(
        self,
        controller: IGameController,
        settings: AppSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._settings = settings if settings is not None else AppSettings()
        self._theme = self._settings.theme()
        self._tile = self._settings.tile_size
        self._interactive = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._overlay_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._help_items: list[QGraphicsItem] = []

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def is_help_visible(self) -> bool:
        return bool(self._help_items)

    def set_help_visible(self, visible: bool) -> None:
        """Show or hide the help panel drawn over the board."""
        if visible == self.is_help_visible():
            return
        if not visible:
            for item in self._help_items:
                self.removeItem(item)
            self._help_items.clear()
            return

        size = 8 * self._tile
        veil = QGraphicsRectItem(0, 0, size, size)
        veil.setBrush(QBrush(self._theme.help_veil))
        veil.setPen(QPen(Qt.PenStyle.NoPen))
        veil.setZValue(2)
        self.addItem(veil)

        text = QGraphicsSimpleTextItem(HELP_TEXT)
        font = QFont()
        font.setPixelSize(max(12, self._tile // 4))
        text.setFont(font)
        bounds = text.boundingRect()
        text.setPos((size - bounds.width()) / 2, (size - bounds.height()) / 2)
        text.setZValue(3)
        self.addItem(text)
        self._help_items = [veil, text]

    def toggle_help(self) -> None:
        self.set_help_visible(not self.is_help_visible())

    def handle_click(self, sq: Square) -> bool:
        """Move to *sq* if it is a legal target, otherwise (re)select.

        Returns True when a move was applied.
        """
        moved = False
        if sq in self._controller.legal_moves_for_selection():
            moved = self._controller.attempt_move(sq)
        else:
            self._controller.select_square(sq)
        self.refresh()
        self.state_changed.emit()
        return moved

    def refresh(self) -> None:
        """Redraw highlights and pieces from the controller's current state."""
        self._clear_overlays()
        self._sync_pieces()
        self._draw_overlays()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw the 64 squares."""
        t = self._tile
        for sq in ALL_SQUARES:
            x, y = self._square_origin(sq)
            is_light = (row_of(sq) + file_of(sq)) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect
        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _draw_overlays(self) -> None:
        t = self._tile
        selected = self._controller.selected_piece()

        for piece in self._controller.list_pieces():
            if piece.piece_type == PieceType.KING and piece.is_checked:
                self._add_rect(piece.square, self._theme.highlight_check, 0.4)

        if selected is not None:
            self._add_rect(selected.square, self._theme.highlight_selected, 0.5)

        if not self._settings.show_legal_moves:
            return
        for sq in self._controller.legal_moves_for_selection():
            if sq in self._piece_items:
                self._add_rect(sq, self._theme.legal_capture, 0.6)
                continue
            x, y = self._square_origin(sq)
            r = t / 8
            dot = QGraphicsEllipseItem(x + t / 2 - r, y + t / 2 - r, 2 * r, 2 * r)
            dot.setBrush(QBrush(self._theme.legal_dot))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
            dot.setZValue(0.6)
            self.addItem(dot)
            self._overlay_items.append(dot)

    def _add_rect(self, sq: Square, color: QColor, z: float) -> QGraphicsRectItem:
        x, y = self._square_origin(sq)
        rect = QGraphicsRectItem(x, y, self._tile, self._tile)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        self._overlay_items.append(rect)
        return rect

    def _clear_overlays(self) -> None:
        for item in self._overlay_items:
            self.removeItem(item)
        self._overlay_items.clear()

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the controller's snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self._tile
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for piece in self._controller.list_pieces():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            if piece.color == Color.WHITE:
                fill, outline = self._theme.white_piece, self._theme.black_piece
            else:
                fill, outline = self._theme.black_piece, self._theme.white_piece
            item.setBrush(QBrush(fill))
            item.setPen(QPen(outline))
            bounds = item.boundingRect()
            x, y = self._square_origin(piece.square)
            item.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[piece.square] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            return super().mousePressEvent(event)
        self.handle_click(sq)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _square_origin(self, sq: Square) -> tuple[float, float]:
        """Top-left scene point of *sq*; row 1 is drawn at the top."""
        t = self._tile
        return (file_of(sq) - 1) * t, (row_of(sq) - 1) * t

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return make_square(row + 1, col + 1)
