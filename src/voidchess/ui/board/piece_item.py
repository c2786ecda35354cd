"""Chess piece drawn as a Unicode glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from voidchess.core.enums import Color
from voidchess.core.piece import Piece
from voidchess.core.types import Position

# Filled glyphs read better at small sizes; white pieces get a light fill.
_FILLED_GLYPH_OF = {
    "♔": "♚",
    "♕": "♛",
    "♖": "♜",
    "♗": "♝",
    "♘": "♞",
    "♙": "♟",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *position* so the scene can re-place it on resize or
    orientation changes.
    """

    _GLYPH_RATIO = 0.72

    def __init__(self, piece: Piece, position: Position, tile_size: int) -> None:
        glyph = _FILLED_GLYPH_OF.get(piece.symbol, piece.symbol)
        super().__init__(glyph)
        self.piece = piece
        self.position = position
        self._tile_size = tile_size

        if piece.color == Color.WHITE:
            self.setBrush(QBrush(QColor(250, 250, 250)))
            self.setPen(QPen(QColor(20, 20, 20), 1.2))
        else:
            self.setBrush(QBrush(QColor(20, 20, 20)))
        self.setZValue(1)
        self.set_tile_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        """Scale the glyph to fit a *size* px square."""
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(int(size * self._GLYPH_RATIO), 1))
        self.setFont(font)

    def place_at(self, col: int, row: int) -> None:
        """Centre the glyph on the visual square (*col*, *row*)."""
        t = self._tile_size
        rect = self.boundingRect()
        self.setPos(
            col * t + (t - rect.width()) / 2,
            row * t + (t - rect.height()) / 2,
        )
