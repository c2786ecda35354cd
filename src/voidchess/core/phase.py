"""Game phase values: whose turn it is, or how the game ended."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from voidchess.core.enums import Color, DrawReason


@dataclass(frozen=True, slots=True)
class Turn:
    """Game in progress, *color* to move."""

    color: Color


@dataclass(frozen=True, slots=True)
class Won:
    """*color* delivered checkmate."""

    color: Color


@dataclass(frozen=True, slots=True)
class Draw:
    reason: DrawReason


GamePhase: TypeAlias = Turn | Won | Draw

_DRAW_TEXT: dict[DrawReason, str] = {
    DrawReason.FIFTY: "Draw by fifty-move rule",
    DrawReason.REPEAT: "Draw by repetition",
    DrawReason.STALEMATE: "Draw by stalemate",
}


def is_terminal(phase: GamePhase) -> bool:
    return not isinstance(phase, Turn)


def describe_phase(phase: GamePhase) -> str:
    """Short status line, e.g. 'White to move'."""
    if isinstance(phase, Turn):
        return f"{phase.color.name.capitalize()} to move"
    if isinstance(phase, Won):
        return f"{phase.color.name.capitalize()} wins"
    return _DRAW_TEXT[phase.reason]
