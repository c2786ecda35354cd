"""Promotion dialog: lets the user pick the promotion piece."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from voidchess.core.piece import Piece


class PromotionDialog(QDialog):
    """Modal dialog offering one button per promotion candidate."""

    def __init__(
        self, candidates: Sequence[Piece], parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promote pawn")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._candidates = tuple(candidates)
        self._selected: Piece | None = None

        layout = QVBoxLayout(self)
        label = QLabel("Choose a piece:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        glyph_font = QFont()
        glyph_font.setPixelSize(40)
        self._buttons: list[QPushButton] = []
        for piece in self._candidates:
            btn = QPushButton(piece.symbol)
            btn.setFont(glyph_font)
            btn.setFixedSize(68, 68)
            btn.setToolTip(piece.kind.name.capitalize())
            btn.clicked.connect(lambda checked, p=piece: self._choose(p))
            btn_row.addWidget(btn)
            self._buttons.append(btn)

        layout.addLayout(btn_row)

    def _choose(self, piece: Piece) -> None:
        self._selected = piece
        self.accept()

    @property
    def candidates(self) -> tuple[Piece, ...]:
        return self._candidates

    @property
    def selected(self) -> Piece | None:
        return self._selected

    @staticmethod
    def ask(candidates: Sequence[Piece], parent: QWidget | None = None) -> Piece | None:
        """Show the dialog and return the chosen piece, or ``None`` on cancel."""
        dlg = PromotionDialog(candidates, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
