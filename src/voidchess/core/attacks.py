"""Raw attack squares per piece kind, ignoring whose king would be exposed."""

from __future__ import annotations

from voidchess.core.board import Board
from voidchess.core.enums import Color, PieceKind
from voidchess.core.piece import Piece
from voidchess.core.types import Position

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (-2, -1),
    (-2, 1),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)

BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Offsets = ROOK_DIRS + BISHOP_DIRS

_SLIDING_DIRS: dict[PieceKind, Offsets] = {
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}


def _pawn_offsets(color: Color) -> Offsets:
    return ((-1, color.forward), (1, color.forward))


def _single_step(start: Position, offsets: Offsets) -> list[Position]:
    targets: list[Position] = []
    for df, dr in offsets:
        pos = start.offset(df, dr)
        if pos.is_on_board():
            targets.append(pos)
    return targets


def _sliding(start: Position, dirs: Offsets, board: Board) -> list[Position]:
    targets: list[Position] = []
    for df, dr in dirs:
        pos = start.offset(df, dr)
        while pos.is_on_board():
            targets.append(pos)
            # The blocker is attacked too, whatever its color.
            if not board.is_empty(pos):
                break
            pos = pos.offset(df, dr)
    return targets


def attacks(piece: Piece, position: Position, board: Board) -> list[Position]:
    """Squares *piece* standing on *position* attacks.

    Pawns attack their two forward diagonals only. Sliding rays stop on the
    first occupied square, which is included.
    """
    kind = piece.kind
    if kind == PieceKind.PAWN:
        return _single_step(position, _pawn_offsets(piece.color))
    if kind == PieceKind.KNIGHT:
        return _single_step(position, KNIGHT_OFFSETS)
    if kind == PieceKind.KING:
        return _single_step(position, KING_OFFSETS)
    return _sliding(position, _SLIDING_DIRS[kind], board)


def is_attacked_by(position: Position, color: Color, board: Board) -> bool:
    """Is *position* attacked by any piece of *color* on *board*?"""
    for pos, piece in board.occupied():
        if piece.color == color and position in attacks(piece, pos, board):
            return True
    return False
