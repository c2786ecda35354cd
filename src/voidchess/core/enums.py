"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction of this side's pawn pushes."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    LONG = 0  # rook on file 0
    SHORT = 1  # rook on file 7


class MoveKind(IntEnum):
    """Move classification."""

    MOVE = 0
    TAKE = 1
    PROMOTE = 2
    CASTLE = 3


class DrawReason(IntEnum):
    """Why a game ended drawn."""

    FIFTY = 0
    REPEAT = 1
    STALEMATE = 2


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_SHORT = auto()
    WHITE_LONG = auto()
    BLACK_SHORT = auto()
    BLACK_LONG = auto()

    WHITE_BOTH = WHITE_SHORT | WHITE_LONG
    BLACK_BOTH = BLACK_SHORT | BLACK_LONG
    ALL = WHITE_BOTH | BLACK_BOTH


_CASTLING_FLAGS: dict[tuple[Color, CastleSide], CastlingRights] = {
    (Color.WHITE, CastleSide.SHORT): CastlingRights.WHITE_SHORT,
    (Color.WHITE, CastleSide.LONG): CastlingRights.WHITE_LONG,
    (Color.BLACK, CastleSide.SHORT): CastlingRights.BLACK_SHORT,
    (Color.BLACK, CastleSide.LONG): CastlingRights.BLACK_LONG,
}


def castling_flag(color: Color, side: CastleSide) -> CastlingRights:
    """The single castling bit for *color* on *side*."""
    return _CASTLING_FLAGS[(color, side)]


def castling_flags(color: Color) -> CastlingRights:
    """Both castling bits for *color*."""
    if color == Color.WHITE:
        return CastlingRights.WHITE_BOTH
    return CastlingRights.BLACK_BOTH
