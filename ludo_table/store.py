from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .board import TURN_ORDER
from .config import config
from .types import GameState, GameStatus, Piece, Player, PlayerColor

HUMAN_COLOR = PlayerColor.RED


@dataclass(slots=True)
class GameStore:
    """Owns every player and piece of the current game.

    Pieces live in a flat arena indexed by piece id; each player keeps
    references to its four arena entries. All mutations go through here.
    """

    players: List[Player] = field(default_factory=list)
    pieces: List[Piece] = field(default_factory=list)
    state: GameState = field(default_factory=GameState)
    active_color: Optional[PlayerColor] = None
    dice_value: int = 1
    winner: Optional[PlayerColor] = None

    def start_game(self) -> None:
        self.pieces = []
        self.players = []
        for color in TURN_ORDER:
            base_id = int(color) * config.PIECES_PER_PLAYER
            owned = [
                Piece(piece_id=base_id + slot, color=color)
                for slot in range(config.PIECES_PER_PLAYER)
            ]
            self.pieces.extend(owned)
            self.players.append(
                Player(color=color, is_ai=color != HUMAN_COLOR, pieces=owned)
            )
        self.active_color = PlayerColor.RED
        self.dice_value = 1
        self.winner = None
        self.state = GameState(status=GameStatus.IN_PROGRESS)
        logger.info("New game started; Red (human) to roll")

    # --- Accessors ---
    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def is_rolling(self) -> bool:
        return self.state.is_rolling

    @property
    def message(self) -> str:
        return self.state.message

    @property
    def active_player(self) -> Optional[Player]:
        if self.active_color is None:
            return None
        return self.player(self.active_color)

    def player(self, color: PlayerColor) -> Player:
        for pl in self.players:
            if pl.color == color:
                return pl
        raise IndexError(f"Player color {color!r} not in game")

    def piece(self, piece_id: int) -> Piece:
        if not 0 <= piece_id < len(self.pieces):
            raise IndexError(f"Unknown piece id {piece_id}")
        return self.pieces[piece_id]

    # --- Mutators ---
    def update_piece_position(self, piece_id: int, new_position: int) -> None:
        """Set one piece's position. Legality is checked by the caller."""
        if not config.BASE_POSITION <= new_position <= config.FINISHED_POSITION:
            raise ValueError(
                f"Position {new_position} outside [{config.BASE_POSITION}, {config.FINISHED_POSITION}]"
            )
        self.piece(piece_id).position = new_position

    def set_active_color(self, color: PlayerColor) -> None:
        self.active_color = color

    def set_dice(self, value: int) -> None:
        if not 1 <= value <= 6:
            raise ValueError(f"Dice value {value} outside 1..6")
        self.dice_value = value

    def set_rolling(self, rolling: bool) -> None:
        self.state.is_rolling = rolling

    def set_message(self, message: str) -> None:
        self.state.message = message

    def declare_winner(self, color: PlayerColor) -> None:
        self.winner = color
        self.state.status = GameStatus.GAME_OVER
        self.state.is_rolling = False
        self.state.message = ""
