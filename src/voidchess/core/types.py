"""Board coordinates.

Board layout (file + rank * 8):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

White starts on rank 0, black on rank 7.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """A (file, rank) pair; may point off the board until validated."""

    file: int
    rank: int

    def is_on_board(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    @property
    def idx(self) -> int:
        """Linear board index ``file + rank * 8``."""
        if not self.is_on_board():
            raise ValueError(f"Position off the board: ({self.file}, {self.rank})")
        return self.file + self.rank * BOARD_SIZE

    def offset(self, df: int, dr: int) -> Position:
        return Position(self.file + df, self.rank + dr)

    @classmethod
    def from_idx(cls, idx: int) -> Position:
        if not 0 <= idx < BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Invalid board index: {idx}")
        return cls(idx % BOARD_SIZE, idx // BOARD_SIZE)

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse a square name, e.g. 'e4' -> Position(4, 3)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'a1'."""
        if not self.is_on_board():
            return f"({self.file},{self.rank})"
        return _FILES[self.file] + _RANKS[self.rank]

    def __str__(self) -> str:
        return self.name


def is_on_board(pos: Position) -> bool:
    return pos.is_on_board()


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position.from_idx(idx) for idx in range(BOARD_SIZE * BOARD_SIZE)
)
