"""Legal move generation.

Every candidate except castling is checked by simulation: the move is played
on a scratch copy of the board and the mover's king square is tested for
attacks. That simulation is the only pin / check-exposure mechanism.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from voidchess.core.attacks import attacks, is_attacked_by
from voidchess.core.board import Board
from voidchess.core.enums import CastleSide, Color, PieceKind, castling_flag
from voidchess.core.move import Move, castle_squares
from voidchess.core.piece import Piece
from voidchess.core.types import Position

if TYPE_CHECKING:
    from voidchess.game.state import GameState


PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
)


class MoveGenerator:
    """Generates legal moves for pieces of a :class:`GameState`.

    The state is never modified; simulations run on board copies.
    """

    __slots__ = ("_state", "_board")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board

    # -- Public API ---------------------------------------------------------

    def moves(self, position: Position) -> list[Move]:
        """Legal moves for whatever piece stands on *position*."""
        piece = self._board[position]
        if piece is None:
            return []
        if piece.kind == PieceKind.PAWN:
            return self._gen_pawn(piece, position)
        if piece.kind == PieceKind.KING:
            return self._gen_king(piece, position)
        return self._gen_piece(piece, position)

    def legal_moves(self, color: Color) -> list[tuple[Position, Move]]:
        """Every legal (origin, move) pair for *color*."""
        result: list[tuple[Position, Move]] = []
        for pos in self._board.pieces(color):
            result.extend((pos, move) for move in self.moves(pos))
        return result

    def has_legal_move(self, color: Color) -> bool:
        return any(self.moves(pos) for pos in self._board.pieces(color))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_pos = self._board.king_position(color)
        return is_attacked_by(king_pos, color.opponent, self._board)

    def is_square_attacked(self, pos: Position, by_color: Color) -> bool:
        return is_attacked_by(pos, by_color, self._board)

    # -- Check-safety filter -----------------------------------------------

    def _is_safe(
        self,
        piece: Piece,
        src: Position,
        dst: Position,
        captured_at: Position | None = None,
    ) -> bool:
        """Would playing src→dst leave *piece*'s own king unattacked?"""
        scratch = self._board.copy()
        if captured_at is not None:
            scratch[captured_at] = None
        scratch[src] = None
        scratch[dst] = piece
        king_pos = scratch.king_position(piece.color)
        return not is_attacked_by(king_pos, piece.color.opponent, scratch)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, pos: Position) -> list[Move]:
        board = self._board
        color = piece.color
        opponent = color.opponent
        moves: list[Move] = []

        forward = pos.offset(0, color.forward)
        if forward.is_on_board() and board.is_empty(forward):
            if self._is_safe(piece, pos, forward):
                self._add_pawn_arrival(moves, color, forward, Move.step(forward))

            double = forward.offset(0, color.forward)
            if (
                pos.rank == color.pawn_rank
                and double.is_on_board()
                and board.is_empty(double)
                and self._is_safe(piece, pos, double)
            ):
                moves.append(Move.step(double))

        for target in attacks(piece, pos, board):
            occupant = board[target]
            if occupant is not None:
                if occupant.color == opponent and self._is_safe(piece, pos, target):
                    self._add_pawn_arrival(moves, color, target, Move.take(target))
            elif target == self._state.en_passant:
                # The pawn that just double-stepped sits behind the target.
                victim_pos = target.offset(0, -color.forward)
                victim = board[victim_pos]
                if (
                    victim == Piece(opponent, PieceKind.PAWN)
                    and self._is_safe(piece, pos, target, victim_pos)
                ):
                    moves.append(Move.take(target, victim_pos))
        return moves

    @staticmethod
    def _add_pawn_arrival(
        moves: list[Move], color: Color, to: Position, plain: Move
    ) -> None:
        if to.rank == color.promotion_rank:
            for kind in PROMOTION_KINDS:
                moves.append(Move.promote(to, Piece(color, kind)))
        else:
            moves.append(plain)

    def _gen_piece(self, piece: Piece, pos: Position) -> list[Move]:
        """Rook, bishop, queen and knight: every safe attacked square."""
        board = self._board
        moves: list[Move] = []
        for target in attacks(piece, pos, board):
            occupant = board[target]
            if occupant is not None and occupant.color == piece.color:
                continue
            if not self._is_safe(piece, pos, target):
                continue
            if occupant is None:
                moves.append(Move.step(target))
            else:
                moves.append(Move.take(target))
        return moves

    def _gen_king(self, piece: Piece, pos: Position) -> list[Move]:
        board = self._board
        opponent = piece.color.opponent
        moves: list[Move] = []

        # Lift the king so squares behind it on a checking ray count as attacked.
        without_king = board.copy()
        without_king[pos] = None

        for target in attacks(piece, pos, board):
            if is_attacked_by(target, opponent, without_king):
                continue
            occupant = board[target]
            if occupant is None:
                moves.append(Move.step(target))
            elif occupant.color == opponent:
                moves.append(Move.take(target))

        for side in (CastleSide.SHORT, CastleSide.LONG):
            if self._can_castle(piece, pos, side):
                moves.append(Move.castling(side))
        return moves

    def _can_castle(self, king: Piece, pos: Position, side: CastleSide) -> bool:
        color = king.color
        if not self._state.castling & castling_flag(color, side):
            return False

        squares = castle_squares(side, color)
        board = self._board
        if pos != squares.king_start:
            return False
        if board[squares.rook_start] != Piece(color, PieceKind.ROOK):
            return False

        rank = squares.king_start.rank
        lo = min(squares.rook_start.file, squares.king_start.file)
        hi = max(squares.rook_start.file, squares.king_start.file)
        for file in range(lo + 1, hi):
            if not board.is_empty(Position(file, rank)):
                return False
        return not any(
            is_attacked_by(Position(file, rank), color.opponent, board)
            for file in range(lo, hi + 1)
        )


def board_after(board: Board, src: Position, move: Move, color: Color) -> Board:
    """A copy of *board* with *move* from *src* played on it."""
    result = board.copy()
    if move.captured_at is not None:
        result[move.captured_at] = None
    if move.castle is not None:
        squares = castle_squares(move.castle, color)
        result.move_piece(squares.rook_start, squares.rook_end)
        result.move_piece(src, squares.king_end)
        return result
    target = move.destination(color)
    if move.promotion is not None:
        result[src] = None
        result[target] = move.promotion
    else:
        result.move_piece(src, target)
    return result
