"""Move value object and castling geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from voidchess.core.enums import CastleSide, Color, MoveKind
from voidchess.core.piece import Piece
from voidchess.core.types import Position


class CastleSquares(NamedTuple):
    """Start and end squares of king and rook for one castling move."""

    rook_start: Position
    king_start: Position
    rook_end: Position
    king_end: Position


def castle_squares(side: CastleSide, color: Color) -> CastleSquares:
    rank = color.home_rank
    if side == CastleSide.LONG:
        return CastleSquares(
            rook_start=Position(0, rank),
            king_start=Position(4, rank),
            rook_end=Position(3, rank),
            king_end=Position(2, rank),
        )
    return CastleSquares(
        rook_start=Position(7, rank),
        king_start=Position(4, rank),
        rook_end=Position(5, rank),
        king_end=Position(6, rank),
    )


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object for one move of the piece being moved.

    The origin square is not part of the move; callers pair a move with the
    position it is played from.

    * ``MOVE``    -- relocate to ``to``.
    * ``TAKE``    -- remove the piece on ``captured_at`` and relocate to ``to``.
      The two differ only for en passant.
    * ``PROMOTE`` -- replace the pawn with ``promotion`` on ``to``.
    * ``CASTLE``  -- king and rook jump to their ``castle`` side squares.
    """

    kind: MoveKind
    to: Position | None = None
    captured_at: Position | None = None
    promotion: Piece | None = None
    castle: CastleSide | None = None

    def __post_init__(self) -> None:
        if self.kind == MoveKind.CASTLE:
            if self.castle is None:
                raise ValueError("A castling move needs a side")
        elif self.to is None:
            raise ValueError(f"A {self.kind.name} move needs a target square")
        if self.kind == MoveKind.PROMOTE and self.promotion is None:
            raise ValueError("A promotion needs a piece")

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def step(cls, to: Position) -> Move:
        return cls(MoveKind.MOVE, to=to)

    @classmethod
    def take(cls, to: Position, captured_at: Position | None = None) -> Move:
        return cls(
            MoveKind.TAKE,
            to=to,
            captured_at=to if captured_at is None else captured_at,
        )

    @classmethod
    def promote(cls, to: Position, piece: Piece) -> Move:
        return cls(MoveKind.PROMOTE, to=to, promotion=piece)

    @classmethod
    def castling(cls, side: CastleSide) -> Move:
        return cls(MoveKind.CASTLE, castle=side)

    # ── Queries ──────────────────────────────────────────────────────────

    def destination(self, color: Color) -> Position:
        """Square the moving piece lands on (the king's, for castling)."""
        if self.castle is not None:
            return castle_squares(self.castle, color).king_end
        if self.to is None:
            raise ValueError(f"{self.kind.name} move without a target square")
        return self.to

    @property
    def is_en_passant(self) -> bool:
        return self.kind == MoveKind.TAKE and self.captured_at != self.to

    def __str__(self) -> str:
        if self.kind == MoveKind.CASTLE:
            return "O-O-O" if self.castle == CastleSide.LONG else "O-O"
        if self.kind == MoveKind.TAKE:
            if self.is_en_passant:
                return f"x{self.to} e.p."
            return f"x{self.to}"
        if self.kind == MoveKind.PROMOTE:
            return f"{self.to}={str(self.promotion).upper()}"
        return str(self.to)
