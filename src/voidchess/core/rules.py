"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from voidchess.core.enums import Color, DrawReason
from voidchess.core.move_generator import MoveGenerator
from voidchess.core.phase import Draw, GamePhase, Turn, Won

if TYPE_CHECKING:
    from voidchess.game.state import GameState


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Half-moves without a pawn move, capture or promotion.
    FIFTY_MOVE_LIMIT = 50
    REPETITION_LIMIT = 3

    @staticmethod
    def is_in_check(state: GameState, color: Color) -> bool:
        return MoveGenerator(state).is_in_check(color)

    @staticmethod
    def is_checkmate(state: GameState, color: Color) -> bool:
        gen = MoveGenerator(state)
        return gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(state: GameState, color: Color) -> bool:
        gen = MoveGenerator(state)
        return not gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.halfmove_clock >= Rules.FIFTY_MOVE_LIMIT

    @staticmethod
    def is_threefold_repetition(state: GameState) -> bool:
        """Has the current board just been reached for the third time?"""
        return state.repetition_count() == Rules.REPETITION_LIMIT

    @staticmethod
    def phase_after_move(state: GameState, mover: Color) -> GamePhase:
        """Phase of *state*, reached by *mover*'s move.

        Checkmate / stalemate first; then a repetition draw overrides it and
        a fifty-move draw overrides both.
        """
        to_move = mover.opponent
        gen = MoveGenerator(state)

        phase: GamePhase = Turn(to_move)
        if not gen.has_legal_move(to_move):
            if gen.is_in_check(to_move):
                phase = Won(mover)
            else:
                phase = Draw(DrawReason.STALEMATE)

        if Rules.is_threefold_repetition(state):
            phase = Draw(DrawReason.REPEAT)
        if Rules.is_fifty_move_rule(state):
            phase = Draw(DrawReason.FIFTY)
        return phase
