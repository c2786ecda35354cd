"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from voidchess.core.enums import Color, PieceKind
from voidchess.core.piece import Piece
from voidchess.core.types import ALL_POSITIONS, BOARD_SIZE, Position

BoardKey = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-slot board with a cached king position per color.

    Game snapshots treat their board as read-only; anything that needs to
    change squares works on a :meth:`copy`.
    """

    __slots__ = ("_squares", "_king_positions")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> king position cache (None if king missing).
        self._king_positions: list[Position | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[pos.idx]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        idx = pos.idx
        old_piece = self._squares[idx]
        if (
            old_piece is not None
            and old_piece.kind == PieceKind.KING
            and self._king_positions[old_piece.color] == pos
        ):
            self._king_positions[old_piece.color] = None

        self._squares[idx] = piece

        if piece is not None and piece.kind == PieceKind.KING:
            self._king_positions[piece.color] = pos

    def is_empty(self, pos: Position) -> bool:
        return self._squares[pos.idx] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """Every (position, piece) pair, in board-index order."""
        squares = self._squares
        for pos in ALL_POSITIONS:
            piece = squares[pos.idx]
            if piece is not None:
                yield pos, piece

    def pieces(self, color: Color) -> list[Position]:
        """All positions occupied by *color*."""
        return [pos for pos, piece in self.occupied() if piece.color == color]

    def king_position(self, color: Color) -> Position:
        """Return the cached king position for *color*."""
        pos = self._king_positions[color]
        if pos is None:
            raise ValueError(f"No {color.name} king on board")
        return pos

    def key(self) -> BoardKey:
        """Exact board contents, used as the repetition-table key."""
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_positions = self._king_positions.copy()
        return b

    def move_piece(self, src: Position, dst: Position) -> None:
        """Clear *src* and put its occupant on *dst*."""
        piece = self[src]
        self[src] = None
        self[dst] = piece

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._king_positions = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[Position(f, Color.WHITE.pawn_rank)] = Piece(Color.WHITE, PieceKind.PAWN)
            b[Position(f, Color.BLACK.pawn_rank)] = Piece(Color.BLACK, PieceKind.PAWN)

        for f, kind in enumerate(_BACK_RANK):
            b[Position(f, Color.WHITE.home_rank)] = Piece(Color.WHITE, kind)
            b[Position(f, Color.BLACK.home_rank)] = Piece(Color.BLACK, kind)
        return b

    @classmethod
    def from_placement(cls, placement: Mapping[str, str]) -> Board:
        """Build a board from square names to piece letters, e.g. ``{"e1": "K"}``."""
        b = cls()
        for name, char in placement.items():
            b[Position.parse(name)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self[Position(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
