"""QGraphicsScene that draws the chessboard and turns mouse input into events."""

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

from voidchess.core.phase import Won
from voidchess.core.rules import Rules
from voidchess.core.types import BOARD_SIZE, Position
from voidchess.game.interaction import (
    InteractionEvent,
    PickingPromotion,
    PlacedPiece,
    StartMovingPiece,
)
from voidchess.game.state import GameState
from voidchess.ui.board.piece_item import PieceItem
from voidchess.ui.styles.theme import BoardTheme


def _landing_square(state: GameState) -> Position | None:
    """Square the piece of the last move ended on."""
    if state.last_move is None or state.last_mover is None:
        return None
    _, move = state.last_move
    return move.destination(state.last_mover)


class BoardScene(QGraphicsScene):
    """Renders a :class:`GameState` and reports clicks as interaction events.

    The scene never decides legality itself; it only translates presses and
    releases into :class:`StartMovingPiece` / :class:`PlacedPiece` and leaves
    the rest to whoever owns the game.

    Signals:
        interaction_requested(object): an ``InteractionEvent`` to feed the game.
    """

    interaction_requested = pyqtSignal(object)

    TILE = 80  # default px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._tile = self.TILE
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Square a drag started from, while the mouse button is held.
        self._drag_origin: Position | None = None

        # Visual layers
        self._square_items: list[QGraphicsRectItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsItem] = []
        self._piece_items: dict[Position, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState | None:
        return self._state

    def set_state(self, state: GameState) -> None:
        """Show *state*: pieces, selection, last move and check."""
        self._state = state
        self._sync_pieces()
        self._refresh_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_tile_size(self, size: int) -> None:
        self._tile = max(size, 16)
        self._redraw()

    def tile_size(self) -> int:
        return self._tile

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dots for the selected piece."""
        self._show_legal_moves = visible
        self._refresh_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        self._drag_origin = None

    def square_center(self, position: Position) -> QPointF:
        """Scene coordinates of the centre of *position*."""
        col, row = self._visual_coords(position.file, position.rank)
        t = self._tile
        return QPointF(col * t + t / 2, row * t + t / 2)

    def piece_item_at(self, position: Position) -> PieceItem | None:
        return self._piece_items.get(position)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._refresh_highlights()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        self._clear_items(self._square_items)
        self._clear_items(self._coord_items)

        t = self._tile
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                col, row = self._visual_coords(file, rank)
                is_dark = (file + rank) % 2 == 0
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items.append(rect)

                ink = self._theme.coord_dark if is_dark else self._theme.coord_light
                # Rank numbers on the left edge, file letters on the bottom edge.
                if col == 0:
                    self._add_coord(str(rank + 1), font, ink, col * t + 2, row * t + 1)
                if row == BOARD_SIZE - 1:
                    self._add_coord(
                        chr(ord("a") + file),
                        font,
                        ink,
                        col * t + t - font.pixelSize(),
                        row * t + t - font.pixelSize() - 4,
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        for position, piece in self._state.board.occupied():
            item = PieceItem(piece, position, self._tile)
            item.place_at(*self._visual_coords(position.file, position.rank))
            self.addItem(item)
            self._piece_items[position] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _refresh_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        state = self._state
        if state is None:
            return

        dst = _landing_square(state)
        if state.last_move is not None and dst is not None:
            self._add_highlight(state.last_move[0], self._theme.last_move, 0.5)
            self._add_highlight(dst, self._theme.last_move, 0.5)

        checked = state.side_to_move
        if isinstance(state.phase, Won):
            checked = state.phase.color.opponent
        if checked is not None and Rules.is_in_check(state, checked):
            king = state.king_position(checked)
            self._add_highlight(king, self._theme.highlight_check, 0.6)

        interaction = state.interaction
        if isinstance(interaction, StartMovingPiece):
            origin = interaction.position
            self._add_highlight(origin, self._theme.highlight_from, 0.8)
            if self._show_legal_moves and state.side_to_move is not None:
                color = state.side_to_move
                targets = {m.destination(color) for m in state.moves_from(origin)}
                for target in targets:
                    self._add_dot(target)
        elif isinstance(interaction, PickingPromotion):
            self._add_highlight(interaction.origin, self._theme.highlight_from, 0.8)
            self._add_highlight(interaction.target, self._theme.highlight_from, 0.8)

    def _add_highlight(self, position: Position, color: QColor, z: float) -> None:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        col, row = self._visual_coords(position.file, position.rank)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        self._highlight_items.append(rect)

    def _add_dot(self, position: Position) -> None:
        t = self._tile
        d = t * 0.3
        col, row = self._visual_coords(position.file, position.rank)
        dot = QGraphicsEllipseItem(col * t + (t - d) / 2, row * t + (t - d) / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.9)
        self.addItem(dot)
        self._highlight_items.append(dot)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._state is None or event is None:
            return super().mousePressEvent(event)

        position = self._pos_to_position(event.scenePos())
        if position is None:
            return super().mousePressEvent(event)

        request = self._event_for_press(position)
        if isinstance(request, StartMovingPiece):
            self._drag_origin = position
        self.interaction_requested.emit(request)
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._drag_origin is None or event is None:
            return super().mouseMoveEvent(event)
        item = self._piece_items.get(self._drag_origin)
        if item is not None:
            rect = item.boundingRect()
            pos = event.scenePos()
            item.setZValue(2)
            item.setPos(pos.x() - rect.width() / 2, pos.y() - rect.height() / 2)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        origin, self._drag_origin = self._drag_origin, None
        if origin is None or self._state is None or event is None:
            return super().mouseReleaseEvent(event)

        position = self._pos_to_position(event.scenePos())
        request = self._event_for_release(origin, position)
        if request is not None:
            self.interaction_requested.emit(request)
        else:
            # Dropped back on its own square or off the board: snap back.
            self._sync_pieces()

    def _event_for_press(self, position: Position) -> InteractionEvent:
        """Event for a button press on *position*.

        With a piece already selected, a press on any square other than one of
        the mover's pieces places the selected piece there; a press on a piece
        of the mover (re)selects it.
        """
        state = self._state
        if state is None:
            return StartMovingPiece(position)
        selected = state.interaction
        if isinstance(selected, StartMovingPiece):
            piece = state.piece_at(position)
            own = piece is not None and piece.color == state.side_to_move
            if position == selected.position or not own:
                return PlacedPiece(position)
        return StartMovingPiece(position)

    def _event_for_release(
        self, origin: Position, position: Position | None
    ) -> InteractionEvent | None:
        """Event for a button release after a drag that started at *origin*."""
        if self._state is None or position is None or position == origin:
            return None
        selected = self._state.interaction
        if not isinstance(selected, StartMovingPiece) or selected.position != origin:
            return None
        return PlacedPiece(position)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_position(self, pos: QPointF) -> Position | None:
        """Scene position → board square."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Position(7 - col, row)
        return Position(col, 7 - row)
