"""
Ludo table engine: four-player rules, turn flow, computer opponents and
render coordinates.
"""

from .ai import AIPlayer, ScoredMove
from .board import HOME_ENTRANCES, SAFE_ZONES, START_POSITIONS, TURN_ORDER
from .config import AIWeights, Config, ai_weights, config
from .engine import GameEngine
from .layout import Coordinate, coordinates_for, piece_coordinates
from .scheduler import TurnScheduler
from .store import GameStore
from .turn import TurnController
from .types import (
    GameState,
    GameStatus,
    MoveEvents,
    MoveResult,
    Piece,
    Player,
    PlayerColor,
    TurnPhase,
)

__all__ = [
    "AIPlayer",
    "AIWeights",
    "Config",
    "Coordinate",
    "GameEngine",
    "GameState",
    "GameStatus",
    "GameStore",
    "HOME_ENTRANCES",
    "MoveEvents",
    "MoveResult",
    "Piece",
    "Player",
    "PlayerColor",
    "SAFE_ZONES",
    "START_POSITIONS",
    "ScoredMove",
    "TURN_ORDER",
    "TurnController",
    "TurnPhase",
    "TurnScheduler",
    "ai_weights",
    "config",
    "coordinates_for",
    "piece_coordinates",
]
