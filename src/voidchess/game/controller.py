"""Owns the current snapshot and notifies listeners.

The rules layer is purely functional; the controller is the one place that
holds "the game" between UI events. Listeners subscribe through simple
callback lists so the UI / tests can observe moves and outcomes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from voidchess.core.move import Move
from voidchess.core.phase import GamePhase, describe_phase, is_terminal
from voidchess.core.types import Position
from voidchess.game.interaction import Interaction
from voidchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Position, Move, GameState], None]  # from, move, state
GameOverCallback = Callable[[GamePhase], None]
InteractionCallback = Callable[[Interaction | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_interaction_changed: list[InteractionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Holds the current :class:`GameState` and swaps it on every action.

    Thread-safety: meant to be driven from a single (UI) thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState.initial()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self, state: GameState | None = None) -> GameState:
        """Start over from the standard position (or *state*)."""
        self._state = state if state is not None else GameState.initial()
        _LOGGER.info("New game: %s", describe_phase(self._state.phase))
        return self._state

    def interact(self, event: Interaction) -> GameState:
        """Feed a UI event and return the resulting snapshot."""
        self._replace_state(self._state.interact(event))
        return self._state

    def submit_move(self, src: Position, move: Move) -> bool:
        """Play *move* from *src* if it is legal for the side to move."""
        state = self._state
        if state.is_game_over:
            return False
        if (src, move) not in state.legal_moves():
            _LOGGER.debug("Rejected illegal move %s from %s", move, src)
            return False
        self._replace_state(state.apply(src, move))
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _replace_state(self, new: GameState) -> None:
        old = self._state
        if new is old:
            return
        self._state = new

        if new.board is not old.board and new.last_move is not None:
            src, move = new.last_move
            _LOGGER.debug(
                "Applied %s from %s -> %s", move, src, describe_phase(new.phase)
            )
            for on_move in self.events.on_move:
                on_move(src, move, new)

        if new.interaction != old.interaction:
            for on_interaction in self.events.on_interaction_changed:
                on_interaction(new.interaction)

        if is_terminal(new.phase) and not is_terminal(old.phase):
            _LOGGER.info("Game over: %s", describe_phase(new.phase))
            for on_game_over in self.events.on_game_over:
                on_game_over(new.phase)
