"""Game management layer — turn controller, state machine, configuration.

Quick start::

    from checkie.game import TurnController

    ctrl = TurnController()
    ctrl.start_game()
    ctrl.select_tile(42)
    ctrl.choose_destination(35)
"""

from checkie.game.config import GameConfig
from checkie.game.controller import GameEvents, TurnController
from checkie.game.interfaces import (
    GamePhase,
    IGameController,
    MoveKind,
    MoveResult,
    SelectionResult,
)
from checkie.game.snapshot import BoardSnapshot, PieceView
from checkie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveKind",
    "MoveResult",
    "SelectionResult",
    # Concrete
    "BoardSnapshot",
    "GameConfig",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "PieceView",
    "TurnController",
]
