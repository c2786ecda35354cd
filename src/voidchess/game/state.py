"""One immutable snapshot of a chess game.

Every accepted action returns a fresh snapshot; the previous one is never
touched. Each snapshot owns its board and repetition table outright.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from voidchess.core.board import Board, BoardKey
from voidchess.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    MoveKind,
    PieceKind,
    castling_flag,
    castling_flags,
)
from voidchess.core.move import Move
from voidchess.core.move_generator import MoveGenerator, board_after
from voidchess.core.phase import GamePhase, Turn, is_terminal
from voidchess.core.piece import Piece
from voidchess.core.rules import Rules
from voidchess.core.types import Position
from voidchess.game.interaction import Interaction, resolve


@dataclass(frozen=True)
class GameState:
    """Board, rights, clocks and phase of a game at one moment."""

    board: Board
    phase: GamePhase = Turn(Color.WHITE)
    castling: CastlingRights = CastlingRights.ALL
    # Square a pawn just skipped over with its double step.
    en_passant: Position | None = None
    # Half-moves since the last pawn move, capture or promotion.
    halfmove_clock: int = 0
    repetitions: Mapping[BoardKey, int] = field(default_factory=dict)
    interaction: Interaction | None = None
    last_move: tuple[Position, Move] | None = None
    # Color that played ``last_move``.
    last_mover: Color | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls(board=Board.initial())

    @classmethod
    def custom(
        cls,
        placement: Mapping[str, str],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: str | None = None,
        halfmove_clock: int = 0,
    ) -> GameState:
        """Set up an arbitrary position from square names to piece letters.

        Raises :class:`ValueError` unless each side has exactly one king and
        the side that just moved is out of check.

        Example: ``GameState.custom({"e1": "K", "e8": "k", "a7": "P"})``.
        """
        board = Board.from_placement(placement)
        for color in Color:
            king = Piece(color, PieceKind.KING)
            count = sum(1 for _, piece in board.occupied() if piece == king)
            if count != 1:
                raise ValueError(
                    f"Expected exactly one {color.name} king, found {count}"
                )

        state = cls(
            board=board,
            phase=Turn(side_to_move),
            castling=castling,
            en_passant=Position.parse(en_passant) if en_passant else None,
            halfmove_clock=halfmove_clock,
        )
        if Rules.is_in_check(state, side_to_move.opponent):
            raise ValueError(
                f"{side_to_move.opponent.name} is in check but it is not their move"
            )
        return replace(
            state, phase=Rules.phase_after_move(state, side_to_move.opponent)
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color | None:
        """Color on turn, or ``None`` once the game is over."""
        if isinstance(self.phase, Turn):
            return self.phase.color
        return None

    @property
    def is_game_over(self) -> bool:
        return is_terminal(self.phase)

    def piece_at(self, position: Position) -> Piece | None:
        if not position.is_on_board():
            return None
        return self.board[position]

    def king_position(self, color: Color) -> Position:
        return self.board.king_position(color)

    def repetition_count(self) -> int:
        """How many times the current board has been reached by a move."""
        return self.repetitions.get(self.board.key(), 0)

    def moves_from(self, position: Position) -> list[Move]:
        """Legal moves of the piece on *position* (empty if none)."""
        if not position.is_on_board():
            return []
        return MoveGenerator(self).moves(position)

    def legal_moves(self) -> list[tuple[Position, Move]]:
        """Every legal (origin, move) pair for the side to move."""
        color = self.side_to_move
        if color is None:
            return []
        return MoveGenerator(self).legal_moves(color)

    # ── Transitions ──────────────────────────────────────────────────────

    def interact(self, event: Interaction) -> GameState:
        """Feed one UI event; see :mod:`voidchess.game.interaction`."""
        return resolve(self, event)

    def apply(self, src: Position, move: Move) -> GameState:
        """Play *move* for the piece on *src* and return the next snapshot.

        The caller is responsible for legality. Returns ``self`` when the game
        is over or *src* is empty.
        """
        player = self.side_to_move
        if player is None:
            return self
        piece = self.piece_at(src)
        if piece is None:
            return self

        castling = self.castling
        if piece.kind == PieceKind.KING:
            castling &= ~castling_flags(piece.color)
        elif piece.kind == PieceKind.ROOK:
            # Any rook leaving a corner file gives up that side, whatever its rank.
            if src.file == 0:
                castling &= ~castling_flag(piece.color, CastleSide.LONG)
            elif src.file == 7:
                castling &= ~castling_flag(piece.color, CastleSide.SHORT)

        en_passant: Position | None = None
        halfmove_clock = self.halfmove_clock + 1
        if piece.kind == PieceKind.PAWN or move.kind in (
            MoveKind.TAKE,
            MoveKind.PROMOTE,
        ):
            halfmove_clock = 0
        if (
            move.kind == MoveKind.MOVE
            and piece.kind == PieceKind.PAWN
            and move.to is not None
            and abs(move.to.rank - src.rank) == 2
        ):
            en_passant = Position(src.file, (src.rank + move.to.rank) // 2)

        board = board_after(self.board, src, move, piece.color)

        key = board.key()
        repetitions = dict(self.repetitions)
        repetitions[key] = repetitions.get(key, 0) + 1

        nxt = GameState(
            board=board,
            phase=Turn(player.opponent),
            castling=castling,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            repetitions=MappingProxyType(repetitions),
            interaction=None,
            last_move=(src, move),
            last_mover=player,
        )
        return replace(nxt, phase=Rules.phase_after_move(nxt, player))
