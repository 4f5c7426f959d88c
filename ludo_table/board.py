"""
Board geometry for the four-player Ludo table.
Color-keyed track tables plus occupancy helpers; no rule logic.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

import numpy as np

from .config import config
from .types import Piece, Player, PlayerColor

TOTAL_TRACK_SQUARES = config.TRACK_LENGTH
HOME_STRETCH_START = config.HOME_STRETCH_START
FINISHED_POSITION = config.FINISHED_POSITION
BASE_POSITION = config.BASE_POSITION

TURN_ORDER: tuple[PlayerColor, ...] = (
    PlayerColor.RED,
    PlayerColor.GREEN,
    PlayerColor.YELLOW,
    PlayerColor.BLUE,
)

START_POSITIONS: Mapping[PlayerColor, int] = MappingProxyType(
    {color: config.PLAYER_START_SQUARES[int(color)] for color in TURN_ORDER}
)

# Last ring square before the color turns into its own home stretch
HOME_ENTRANCES: Mapping[PlayerColor, int] = MappingProxyType(
    {color: config.HOME_ENTRANCES[int(color)] for color in TURN_ORDER}
)

SAFE_ZONES: frozenset[int] = frozenset(config.SAFE_SQUARES_ABS)


def next_color(color: PlayerColor) -> PlayerColor:
    idx = TURN_ORDER.index(color)
    return TURN_ORDER[(idx + 1) % len(TURN_ORDER)]


def is_track_square(position: int) -> bool:
    return 0 <= position < TOTAL_TRACK_SQUARES


def is_safe_square(position: int) -> bool:
    return position in SAFE_ZONES


def color_for_piece_id(piece_id: int) -> PlayerColor:
    if not 0 <= piece_id < config.NUM_PLAYERS * config.PIECES_PER_PLAYER:
        raise IndexError(f"Unknown piece id {piece_id}")
    return PlayerColor(piece_id // config.PIECES_PER_PLAYER)


def occupancy(players: Sequence[Player]) -> np.ndarray:
    """Return a (4, 52) matrix counting each color's pieces per ring square."""
    counts = np.zeros((config.NUM_PLAYERS, TOTAL_TRACK_SQUARES), dtype=np.int8)
    for player in players:
        row = counts[int(player.color)]
        for piece in player.pieces:
            if is_track_square(piece.position):
                row[piece.position] += 1
    return counts


def pieces_at(players: Sequence[Player], square: int) -> List[Piece]:
    """All pieces on a ring square; home stretch squares are per-color and never shared."""
    if not is_track_square(square):
        return []
    return [pc for pl in players for pc in pl.pieces if pc.position == square]


def blockade_owners(players: Sequence[Player]) -> Dict[int, PlayerColor]:
    """Map ring square -> color holding two or more pieces there."""
    counts = occupancy(players)
    owners: Dict[int, PlayerColor] = {}
    for color_idx, square in np.argwhere(counts >= 2):
        owners[int(square)] = PlayerColor(int(color_idx))
    return owners
