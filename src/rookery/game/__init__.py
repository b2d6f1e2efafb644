"""Game management layer — state value and the turn/selection state machine.

Quick start::

    from rookery.game import GameStateMachine

    game = GameStateMachine()
    game.select_square(75)   # white pawn in front of the king
    game.attempt_move(55)
"""

from rookery.game.interfaces import GamePhase, IGameController
from rookery.game.state import GameState
from rookery.game.state_machine import GameEvents, GameStateMachine

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameEvents",
    "GameState",
    "GameStateMachine",
]
