"""
Turn sequencing: roll -> move -> bonus roll / forfeit / pass.

Every delayed step (roll reveal, turn pass, AI pacing) is queued on the
TurnScheduler, so no transition ever re-enters another one.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .ai import AIPlayer
from .board import next_color
from .config import Config, config
from .rules import has_won, movable_piece_ids, plan_move
from .scheduler import ScheduledTask, TurnScheduler
from .store import GameStore
from .types import GameStatus, MoveResult, PlayerColor, TurnPhase

MSG_ROLL_AGAIN = "Rolled a 6! Roll again."
MSG_FORFEIT = "Three 6s! Turn forfeited."
MSG_NO_MOVES = "No valid moves."


@dataclass(slots=True)
class TurnController:
    store: GameStore
    scheduler: TurnScheduler
    ai: AIPlayer = field(default_factory=AIPlayer)
    rng: random.Random = field(default_factory=random.Random)
    settings: Config = field(default_factory=lambda: config)
    phase: TurnPhase = TurnPhase.LOBBY
    six_streak: int = 0
    last_move: Optional[MoveResult] = None
    _ai_task: Optional[ScheduledTask] = field(default=None, repr=False)

    def reset(self) -> None:
        self.scheduler.invalidate()
        self._ai_task = None
        self.phase = TurnPhase.AWAITING_ROLL
        self.six_streak = 0
        self.last_move = None
        self._schedule_ai()

    # --- Queries ---
    def movable_pieces(self) -> List[int]:
        if self.phase != TurnPhase.AWAITING_MOVE or self.store.is_rolling:
            return []
        if self.store.active_color is None:
            return []
        return movable_piece_ids(
            self.store.players, self.store.active_color, self.store.dice_value
        )

    def has_pending_move(self) -> bool:
        """A move from a non-six roll must be played before rolling again."""
        return (
            self.phase == TurnPhase.AWAITING_MOVE
            and self.store.dice_value != 6
            and bool(self.movable_pieces())
        )

    # --- Roll ---
    def request_roll(self, color: PlayerColor) -> bool:
        reason = self._roll_rejection(color)
        if reason:
            logger.debug(f"Roll by {color.display_name} ignored: {reason}")
            return False

        value = self.rng.randint(1, 6)
        self.phase = TurnPhase.ROLLING
        self.store.set_rolling(True)
        self.store.set_message("")
        self.scheduler.call_later(
            self.settings.ROLL_DELAY, self._resolve_roll, color, value, label="roll"
        )
        return True

    def _roll_rejection(self, color: PlayerColor) -> str:
        if self.store.status != GameStatus.IN_PROGRESS:
            return "game not in progress"
        if self.store.is_rolling:
            return "already rolling"
        if color != self.store.active_color:
            return "not this player's turn"
        if self.phase == TurnPhase.AWAITING_MOVE:
            if self.has_pending_move():
                return "a move is pending"
            return ""
        if self.phase != TurnPhase.AWAITING_ROLL:
            return f"phase is {self.phase.value}"
        return ""

    def _resolve_roll(self, color: PlayerColor, value: int) -> None:
        if self.phase != TurnPhase.ROLLING or color != self.store.active_color:
            return
        self.store.set_dice(value)
        self.store.set_rolling(False)

        if value == 6:
            self.six_streak += 1
        else:
            self.six_streak = 0
        logger.debug(f"{color.display_name} rolled {value} (six streak {self.six_streak})")

        movable = movable_piece_ids(self.store.players, color, value)
        if self.six_streak >= self.settings.MAX_SIX_STREAK:
            logger.info(f"{color.display_name} rolled three 6s, turn forfeited")
            self._end_turn(MSG_FORFEIT)
        elif not movable:
            if value == 6:
                self.phase = TurnPhase.AWAITING_ROLL
                self.store.set_message(MSG_ROLL_AGAIN)
            else:
                self._end_turn(MSG_NO_MOVES)
        else:
            self.phase = TurnPhase.AWAITING_MOVE
        self._schedule_ai()

    # --- Move ---
    def request_move(self, color: PlayerColor, piece_id: int) -> bool:
        if self.store.status != GameStatus.IN_PROGRESS:
            logger.debug(f"Move of piece {piece_id} ignored: game not in progress")
            return False
        if color != self.store.active_color or self.phase != TurnPhase.AWAITING_MOVE:
            logger.debug(f"Move of piece {piece_id} by {color.display_name} ignored: not awaiting its move")
            return False
        if piece_id not in self.movable_pieces():
            logger.debug(f"Move of piece {piece_id} ignored: not movable")
            return False

        dice = self.store.dice_value
        plan = plan_move(self.store.players, self.store.piece(piece_id), dice)
        if plan is None:  # pragma: no cover - movable_pieces already checked
            return False

        if plan.events.knocked_out is not None:
            logger.debug(f"{color.display_name} knocks out piece {plan.events.knocked_out} at {plan.new_position}")
            self.store.update_piece_position(plan.events.knocked_out, self.settings.BASE_POSITION)
        self.store.update_piece_position(piece_id, plan.new_position)
        self.last_move = plan
        logger.debug(f"{color.display_name} moved piece {piece_id}: {plan.old_position} -> {plan.new_position}")

        if has_won(self.store.player(color)):
            self.store.declare_winner(color)
            self.phase = TurnPhase.GAME_OVER
            self.scheduler.invalidate()
            self._ai_task = None
            logger.info(f"{color.display_name} wins")
            return True

        if dice == 6:
            self.phase = TurnPhase.AWAITING_ROLL
            self.store.set_message(MSG_ROLL_AGAIN)
        else:
            self._advance_turn()
        self._schedule_ai()
        return True

    # --- Turn hand-over ---
    def _end_turn(self, message: str) -> None:
        self.phase = TurnPhase.PASSING
        self.store.set_message(message)
        self.scheduler.call_later(
            self.settings.TURN_PASS_DELAY, self._finish_pass, self.store.active_color, label="pass"
        )

    def _finish_pass(self, color: PlayerColor) -> None:
        if self.phase != TurnPhase.PASSING or color != self.store.active_color:
            return
        self._advance_turn()
        self._schedule_ai()

    def _advance_turn(self) -> None:
        self.store.set_active_color(next_color(self.store.active_color))
        self.six_streak = 0
        self.phase = TurnPhase.AWAITING_ROLL
        self.store.set_message("")

    # --- Computer players ---
    def _schedule_ai(self) -> None:
        player = self.store.active_player
        if (
            player is None
            or not player.is_ai
            or self.store.status != GameStatus.IN_PROGRESS
            or self.phase not in (TurnPhase.AWAITING_ROLL, TurnPhase.AWAITING_MOVE)
        ):
            return
        self.scheduler.cancel(self._ai_task)
        delay = (
            self.settings.AI_MOVE_DELAY
            if self.phase == TurnPhase.AWAITING_MOVE
            else self.settings.AI_TURN_DELAY
        )
        self._ai_task = self.scheduler.call_later(delay, self._ai_step, player.color, label="ai")

    def _ai_step(self, color: PlayerColor) -> None:
        self._ai_task = None
        player = self.store.active_player
        if player is None or player.color != color or not player.is_ai:
            return
        if self.phase == TurnPhase.AWAITING_MOVE:
            choice = self.ai.choose_move(
                self.store.players, color, self.store.dice_value, self.movable_pieces()
            )
            if choice is not None:
                self.request_move(color, choice.piece_id)
                return
        self.request_roll(color)
