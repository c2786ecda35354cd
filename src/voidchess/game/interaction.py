"""Select-then-place input protocol with a promotion-choice sub-dialog.

The UI feeds three events into :meth:`GameState.interact`:

* :class:`StartMovingPiece` -- pick up a piece of the player on turn.
* :class:`PlacedPiece` -- drop the selected piece on a square.
* :class:`PickedPromotion` -- answer the promotion question.

Between events the snapshot remembers the pending sub-state: the selected
piece (a :class:`StartMovingPiece`) or the open promotion question
(:class:`PickingPromotion`). Anything that does not fit the current sub-state
is absorbed and the snapshot is returned unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, TypeAlias

from voidchess.core.move import Move
from voidchess.core.piece import Piece
from voidchess.core.types import Position

if TYPE_CHECKING:
    from voidchess.game.state import GameState


@dataclass(frozen=True, slots=True)
class StartMovingPiece:
    position: Position


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    position: Position


@dataclass(frozen=True, slots=True)
class PickingPromotion:
    """A pawn move from *origin* to *target* awaits a promotion choice."""

    origin: Position
    target: Position
    candidates: tuple[Piece, ...]


@dataclass(frozen=True, slots=True)
class PickedPromotion:
    piece: Piece


Interaction: TypeAlias = (
    StartMovingPiece | PlacedPiece | PickingPromotion | PickedPromotion
)
InteractionEvent: TypeAlias = StartMovingPiece | PlacedPiece | PickedPromotion


def _with_interaction(state: GameState, interaction: Interaction | None) -> GameState:
    if state.interaction == interaction:
        return state
    return replace(state, interaction=interaction)


def resolve(state: GameState, event: Interaction) -> GameState:
    """Feed *event* to the interaction state machine of *state*."""
    player = state.side_to_move
    if player is None:
        return state

    current = state.interaction

    if isinstance(event, StartMovingPiece):
        piece = state.piece_at(event.position)
        if piece is None or piece.color != player:
            return state
        return _with_interaction(state, event)

    if isinstance(event, PlacedPiece):
        if not isinstance(current, StartMovingPiece):
            return _with_interaction(state, None)
        origin, onto = current.position, event.position
        if origin == onto:
            return _with_interaction(state, None)

        matches = [
            move
            for move in state.moves_from(origin)
            if move.destination(player) == onto
        ]
        if not matches:
            return _with_interaction(state, None)
        if len(matches) == 1:
            return state.apply(origin, matches[0])

        candidates = tuple(m.promotion for m in matches if m.promotion is not None)
        return _with_interaction(state, PickingPromotion(origin, onto, candidates))

    if isinstance(event, PickedPromotion):
        if not isinstance(current, PickingPromotion):
            return state
        if event.piece not in current.candidates:
            return state
        return state.apply(current.origin, Move.promote(current.target, event.piece))

    return state
