from __future__ import annotations

import random
from typing import List, Optional

from .ai import AIPlayer
from .config import Config, config
from .layout import Coordinate, piece_coordinates
from .scheduler import TurnScheduler
from .store import HUMAN_COLOR, GameStore
from .turn import TurnController
from .types import GameState, MoveResult, Piece, Player, PlayerColor, TurnPhase


class GameEngine:
    """One Ludo table: the surface a renderer or driver talks to.

    ``roll_dice`` and ``move_piece`` act for the human seat and return
    whether the request was accepted. Computer seats act on their own
    through the scheduler; call ``advance`` (or drive ``scheduler``) to
    let time pass.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        ai: Optional[AIPlayer] = None,
        settings: Optional[Config] = None,
    ):
        self.settings = settings or config
        if rng is None:
            rng = random.Random(self.settings.SEED)
        self.store = GameStore()
        self.scheduler = TurnScheduler()
        self.controller = TurnController(
            store=self.store,
            scheduler=self.scheduler,
            ai=ai or AIPlayer(),
            rng=rng,
            settings=self.settings,
        )

    # --- Commands ---
    def start_game(self) -> None:
        self.store.start_game()
        self.controller.reset()

    def roll_dice(self) -> bool:
        return self.controller.request_roll(HUMAN_COLOR)

    def move_piece(self, piece_id: int) -> bool:
        return self.controller.request_move(HUMAN_COLOR, piece_id)

    # --- Time ---
    def advance(self, seconds: float) -> int:
        return self.scheduler.advance(seconds)

    def run_until_idle(self, limit: int = 10_000) -> int:
        return self.scheduler.run_until_idle(limit)

    # --- Reads ---
    @property
    def game_state(self) -> GameState:
        return self.store.state

    @property
    def players(self) -> List[Player]:
        return self.store.players

    @property
    def active_player(self) -> Optional[Player]:
        return self.store.active_player

    @property
    def dice_value(self) -> int:
        return self.store.dice_value

    @property
    def winner(self) -> Optional[PlayerColor]:
        return self.store.winner

    @property
    def movable_pieces(self) -> List[int]:
        return self.controller.movable_pieces()

    @property
    def phase(self) -> TurnPhase:
        return self.controller.phase

    @property
    def six_streak(self) -> int:
        return self.controller.six_streak

    @property
    def last_move(self) -> Optional[MoveResult]:
        return self.controller.last_move

    def is_human_turn(self) -> bool:
        player = self.active_player
        return player is not None and not player.is_ai

    def get_piece_position(self, piece: Piece) -> Coordinate:
        return piece_coordinates(piece)
