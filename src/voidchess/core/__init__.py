"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from voidchess.core import MoveGenerator, Position
    from voidchess.game import GameState

    state = GameState.initial()
    for move in MoveGenerator(state).moves(Position.parse("g1")):
        print(move)
"""

from voidchess.core.attacks import attacks, is_attacked_by
from voidchess.core.board import Board
from voidchess.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    DrawReason,
    MoveKind,
    PieceKind,
)
from voidchess.core.move import CastleSquares, Move, castle_squares
from voidchess.core.move_generator import MoveGenerator
from voidchess.core.phase import Draw, GamePhase, Turn, Won, describe_phase
from voidchess.core.piece import Piece
from voidchess.core.rules import Rules
from voidchess.core.types import Position, is_on_board

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "DrawReason",
    "MoveKind",
    "PieceKind",
    # Types / helpers
    "Position",
    "is_on_board",
    "castle_squares",
    "describe_phase",
    # Domain objects
    "Board",
    "CastleSquares",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Phases
    "Draw",
    "GamePhase",
    "Turn",
    "Won",
    # Attacks
    "attacks",
    "is_attacked_by",
]
