"""Game management layer — session state, controller, save files.

Quick start::

    from chessgame.game import GameController

    ctrl = GameController()
    result = ctrl.propose_move((1, 4), (3, 4))
    assert result.accepted
"""

from chessgame.game.controller import GameController, GameEvents
from chessgame.game.interfaces import (
    GamePhase,
    IGameController,
    MoveResult,
    MoveStatus,
    SideEffects,
)
from chessgame.game.persistence import load_game, save_game
from chessgame.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveResult",
    "MoveStatus",
    "SideEffects",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    # Persistence
    "load_game",
    "save_game",
]
