"""
Movement rules: destinations, legality, blockades, knockouts and wins.
Pure functions over the store's players; nothing here mutates state.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .board import (
    BASE_POSITION,
    FINISHED_POSITION,
    HOME_ENTRANCES,
    HOME_STRETCH_START,
    START_POSITIONS,
    TOTAL_TRACK_SQUARES,
    blockade_owners,
    is_safe_square,
    is_track_square,
    occupancy,
    pieces_at,
)
from .config import config
from .types import MoveEvents, MoveResult, Piece, Player, PlayerColor


def destination(position: int, dice: int, color: PlayerColor) -> int:
    """Raw destination for a roll; may exceed the finish (overshoot).

    Returns BASE_POSITION for a base piece without a six.
    """
    if position == BASE_POSITION:
        return START_POSITIONS[color] if dice == config.EXIT_BASE_ROLL else BASE_POSITION

    if position >= HOME_STRETCH_START:
        return position + dice

    entrance_distance = (HOME_ENTRANCES[color] - position) % TOTAL_TRACK_SQUARES
    if dice > entrance_distance:
        return HOME_STRETCH_START + (dice - entrance_distance) - 1
    return (position + dice) % TOTAL_TRACK_SQUARES


def passed_squares(position: int, dice: int) -> List[int]:
    """Ring squares checked for blockades: the ``dice - 1`` squares ahead.

    The walk stays on the ring even when the move turns into the home
    stretch, so squares past the entrance are still checked.
    """
    if not is_track_square(position):
        return []
    return [(position + i) % TOTAL_TRACK_SQUARES for i in range(1, dice)]


def _opponent_blockade_at(
    players: Sequence[Player], square: int, color: PlayerColor
) -> bool:
    counts = occupancy(players)
    for other in players:
        if other.color != color and counts[int(other.color), square] >= 2:
            return True
    return False


def can_move(players: Sequence[Player], piece: Piece, dice: int) -> bool:
    if piece.is_finished():
        return False

    if piece.is_in_base() and dice != config.EXIT_BASE_ROLL:
        return False

    target = destination(piece.position, dice, piece.color)
    if target > FINISHED_POSITION:
        return False

    owners = blockade_owners(players)
    for square in passed_squares(piece.position, dice):
        owner = owners.get(square)
        if owner is not None and owner != piece.color:
            return False

    if is_track_square(target) and _opponent_blockade_at(players, target, piece.color):
        return False

    return True


def movable_piece_ids(
    players: Sequence[Player], color: PlayerColor, dice: int
) -> List[int]:
    for player in players:
        if player.color == color:
            return [pc.piece_id for pc in player.pieces if can_move(players, pc, dice)]
    return []


def knockout_victim(
    players: Sequence[Player], color: PlayerColor, target: int
) -> Optional[Piece]:
    """The lone opponent piece sent home by landing on ``target``, if any."""
    if not is_track_square(target) or is_safe_square(target):
        return None
    occupants = pieces_at(players, target)
    opponents = [pc for pc in occupants if pc.color != color]
    if len(occupants) == 1 and len(opponents) == 1:
        return opponents[0]
    return None


def own_count_at(players: Sequence[Player], color: PlayerColor, square: int) -> int:
    if not is_track_square(square):
        return 0
    return int(occupancy(players)[int(color), square])


def plan_move(
    players: Sequence[Player], piece: Piece, dice: int
) -> Optional[MoveResult]:
    """Describe what moving ``piece`` would do, or None if it is illegal."""
    if not can_move(players, piece, dice):
        return None

    target = destination(piece.position, dice, piece.color)
    victim = knockout_victim(players, piece.color, target)
    events = MoveEvents(
        exited_base=piece.is_in_base(),
        finished=target == FINISHED_POSITION,
        knocked_out=victim.piece_id if victim is not None else None,
        formed_blockade=own_count_at(players, piece.color, target) == 1,
        broke_blockade=own_count_at(players, piece.color, piece.position) >= 2,
    )
    return MoveResult(
        piece_id=piece.piece_id,
        color=piece.color,
        dice_roll=dice,
        old_position=piece.position,
        new_position=target,
        events=events,
        extra_roll=dice == 6,
    )


def has_won(player: Player) -> bool:
    return len(player.pieces) == config.PIECES_PER_PLAYER and all(
        pc.is_finished() for pc in player.pieces
    )
