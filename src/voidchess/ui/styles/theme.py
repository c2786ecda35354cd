"""Board palettes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays shared by every palette; only the squares change between themes.
_SELECTED = QColor(246, 246, 105, 120)
_TARGET_DOT = QColor(20, 20, 20, 50)
_CHECK = QColor(214, 40, 40, 140)
_LAST_MOVE = QColor(120, 170, 230, 90)


@dataclass(frozen=True)
class BoardTheme:
    """Square colours and overlays used by the board scene."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece
    highlight_to: QColor  # legal move dots
    highlight_check: QColor
    last_move: QColor

    @property
    def coord_light(self) -> QColor:
        """Label ink on light squares: the dark square colour."""
        return self.dark_square

    @property
    def coord_dark(self) -> QColor:
        return self.light_square

    @classmethod
    def from_hex(cls, light: str, dark: str) -> BoardTheme:
        return cls(
            light_square=QColor(light),
            dark_square=QColor(dark),
            highlight_from=_SELECTED,
            highlight_to=_TARGET_DOT,
            highlight_check=_CHECK,
            last_move=_LAST_MOVE,
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return _THEMES["Classic"]

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names give the default."""
        return _THEMES.get(name, cls.default())


_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.from_hex("#eed8b5", "#a97a56"),
    "Ice": BoardTheme.from_hex("#e4ebf0", "#7b93a8"),
    "Moss": BoardTheme.from_hex("#e8ead2", "#6d8a5c"),
}


APP_STYLE = """
QMainWindow, QDialog {
    background: #1d1f26;
}
QStatusBar QLabel {
    color: #c9ced8;
    padding: 2px 4px;
}
QMenuBar, QMenu {
    background: #1d1f26;
    color: #c9ced8;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #34506e;
}
QPushButton {
    background: #2a2e38;
    color: #eef0f4;
    border: 1px solid #3f4553;
    border-radius: 3px;
    padding: 4px;
}
QPushButton:hover {
    border-color: #6c8fb5;
}
"""
