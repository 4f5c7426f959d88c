from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from .board import (
    BASE_POSITION,
    HOME_STRETCH_START,
    START_POSITIONS,
    TOTAL_TRACK_SQUARES,
    is_safe_square,
    is_track_square,
)
from .config import AIWeights, ai_weights
from .rules import plan_move
from .types import MoveResult, Player, PlayerColor


@dataclass(slots=True)
class ScoredMove:
    piece_id: int
    new_position: int
    score: float
    plan: MoveResult = field(repr=False)


def squares_travelled(position: int, color: PlayerColor) -> int:
    """Distance covered from the color's start square (home stretch included)."""
    if position == BASE_POSITION:
        return 0
    if position >= HOME_STRETCH_START:
        # entrance sits at 50 squares from start; home stretch 52 is one step further
        return position - 1
    return (position - START_POSITIONS[color]) % TOTAL_TRACK_SQUARES


@dataclass(slots=True)
class AIPlayer:
    """Greedy move picker for computer-controlled colors."""

    weights: AIWeights = field(default_factory=lambda: ai_weights)

    def score(self, plan: MoveResult) -> float:
        w = self.weights
        events = plan.events
        score = 0.0

        if events.finished:
            score += w.finish
        if events.knocked_out is not None:
            score += w.knockout
        if is_safe_square(plan.new_position):
            score += w.safe_zone
        if events.exited_base:
            score += w.exit_base
        if events.formed_blockade:
            score += w.form_blockade

        score += squares_travelled(plan.new_position, plan.color) * w.progress

        if (
            is_track_square(plan.old_position)
            and is_safe_square(plan.old_position)
            and not is_safe_square(plan.new_position)
        ):
            score += w.leave_safe_zone
        if events.broke_blockade:
            score += w.break_blockade
        return score

    def score_moves(
        self, players: Sequence[Player], color: PlayerColor, dice: int, piece_ids: Iterable[int]
    ) -> List[ScoredMove]:
        owner = next(pl for pl in players if pl.color == color)
        by_id = {pc.piece_id: pc for pc in owner.pieces}
        scored: List[ScoredMove] = []
        for piece_id in piece_ids:
            piece = by_id.get(piece_id)
            if piece is None:
                continue
            plan = plan_move(players, piece, dice)
            if plan is None:
                continue
            scored.append(
                ScoredMove(
                    piece_id=piece_id,
                    new_position=plan.new_position,
                    score=self.score(plan),
                    plan=plan,
                )
            )
        return scored

    def choose_move(
        self, players: Sequence[Player], color: PlayerColor, dice: int, piece_ids: Iterable[int]
    ) -> Optional[ScoredMove]:
        scored = self.score_moves(players, color, dice, piece_ids)
        if not scored:
            return None
        # max() keeps the first of equal scores
        best = max(scored, key=lambda m: m.score)
        logger.debug(
            f"{color.display_name} AI picks piece {best.piece_id} -> {best.new_position} "
            f"(score {best.score:.1f} of {len(scored)} option(s))"
        )
        return best
