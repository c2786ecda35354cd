"""User-configurable UI settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 80  # px per square
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False
