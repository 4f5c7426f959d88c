import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TRACK_LENGTH: int = 52  # shared ring 0..51
    HOME_STRETCH_START: int = 52  # 52..57 per-color home stretch
    HOME_STRETCH_LENGTH: int = 6
    FINISHED_POSITION: int = 58
    BASE_POSITION: int = -1
    NUM_PLAYERS: int = 4
    PIECES_PER_PLAYER: int = 4
    EXIT_BASE_ROLL: int = 6
    MAX_SIX_STREAK: int = 3

    # Absolute squares on the 52-square ring, in turn order Red, Green, Yellow, Blue
    PLAYER_START_SQUARES: list[int] = field(default_factory=lambda: [0, 13, 26, 39])
    SAFE_SQUARES_ABS: list[int] = field(
        default_factory=lambda: [0, 8, 13, 21, 26, 34, 39, 47]
    )
    # Squares between the home entrance and the color's own start square
    ENTRANCE_OFFSET: int = 2

    # Pacing (seconds of virtual time)
    ROLL_DELAY: float = float(os.getenv("LUDO_ROLL_DELAY", 0.5))
    AI_TURN_DELAY: float = float(os.getenv("LUDO_AI_TURN_DELAY", 1.0))
    AI_MOVE_DELAY: float = float(os.getenv("LUDO_AI_MOVE_DELAY", 0.8))
    TURN_PASS_DELAY: float = float(os.getenv("LUDO_TURN_PASS_DELAY", 1.5))

    SEED: Optional[int] = field(default_factory=lambda: _optional_int("LUDO_SEED"))

    # Derived (populated in __post_init__ due to slots)
    HOME_ENTRANCES: list[int] = field(default_factory=list)

    def __post_init__(self):
        self.HOME_ENTRANCES = [
            (start - self.ENTRANCE_OFFSET) % self.TRACK_LENGTH
            for start in self.PLAYER_START_SQUARES
        ]

        if len(self.PLAYER_START_SQUARES) != self.NUM_PLAYERS:
            raise ValueError("PLAYER_START_SQUARES needs one entry per player")
        if self.FINISHED_POSITION != self.HOME_STRETCH_START + self.HOME_STRETCH_LENGTH:
            raise ValueError("FINISHED_POSITION must follow the last home stretch square")
        for name in ("ROLL_DELAY", "AI_TURN_DELAY", "AI_MOVE_DELAY", "TURN_PASS_DELAY"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass(slots=True)
class AIWeights:
    """Move scoring table for computer players.

    Only the relative order matters for behaviour:
    finish > knockout > safe zone > exit base > blockade > progress.
    """

    finish: float = 100.0
    knockout: float = 75.0
    safe_zone: float = 50.0
    exit_base: float = 40.0
    form_blockade: float = 35.0
    progress: float = float(os.getenv("LUDO_AI_PROGRESS_WEIGHT", 0.5))
    leave_safe_zone: float = -20.0
    break_blockade: float = -30.0


config = Config()
ai_weights = AIWeights()
