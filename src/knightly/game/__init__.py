"""Game management layer — state machine and controller.

Quick start::

    from knightly.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.move_piece("E2", "E4")
    print(ctrl.dump())
"""

from knightly.game.controller import GameController, GameEvents
from knightly.game.interfaces import GamePhase, IGameController, Outcome
from knightly.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "Outcome",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
