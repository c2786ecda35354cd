"""Game layer: immutable snapshots, interaction protocol, controller.

Quick start::

    from voidchess.core import Position
    from voidchess.game import GameController, PlacedPiece, StartMovingPiece

    ctrl = GameController()
    ctrl.interact(StartMovingPiece(Position.parse("e2")))
    ctrl.interact(PlacedPiece(Position.parse("e4")))
"""

from voidchess.game.controller import GameController, GameEvents
from voidchess.game.interaction import (
    Interaction,
    InteractionEvent,
    PickedPromotion,
    PickingPromotion,
    PlacedPiece,
    StartMovingPiece,
)
from voidchess.game.state import GameState

__all__ = [
    # Interaction
    "Interaction",
    "InteractionEvent",
    "PickedPromotion",
    "PickingPromotion",
    "PlacedPiece",
    "StartMovingPiece",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
