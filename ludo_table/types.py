from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional

from .config import config


class PlayerColor(IntEnum):
    """Seat colors; the value is the seat index in turn order."""

    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class GameStatus(Enum):
    LOBBY = "lobby"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class TurnPhase(Enum):
    LOBBY = "lobby"
    AWAITING_ROLL = "awaiting_roll"
    ROLLING = "rolling"
    AWAITING_MOVE = "awaiting_move"
    PASSING = "passing"  # turn is over, waiting for the pass delay
    GAME_OVER = "game_over"


@dataclass(slots=True)
class Piece:
    """Piece state only; legality lives in the rules module.

    Position domain: -1 base, 0..51 shared ring, 52..57 own home stretch,
    58 finished.
    """

    piece_id: int  # 0..15, id // 4 is the owner's seat index
    color: PlayerColor
    position: int = config.BASE_POSITION

    def is_in_base(self) -> bool:
        return self.position == config.BASE_POSITION

    def is_finished(self) -> bool:
        return self.position == config.FINISHED_POSITION


@dataclass(slots=True)
class Player:
    color: PlayerColor
    is_ai: bool
    pieces: List[Piece] = field(default_factory=list)

    def finished_count(self) -> int:
        return sum(1 for p in self.pieces if p.is_finished())


@dataclass(slots=True)
class GameState:
    status: GameStatus = GameStatus.LOBBY
    is_rolling: bool = False
    message: str = ""


@dataclass(slots=True)
class MoveEvents:
    exited_base: bool = False
    finished: bool = False
    knocked_out: Optional[int] = None  # piece id sent back to base
    formed_blockade: bool = False
    broke_blockade: bool = False


@dataclass(slots=True)
class MoveResult:
    piece_id: int
    color: PlayerColor
    dice_roll: int
    old_position: int
    new_position: int
    events: MoveEvents
    extra_roll: bool
