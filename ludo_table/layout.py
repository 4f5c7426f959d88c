"""
Piece placement for renderers.

Maps a logical position to percentage coordinates (0-100 on both axes) on
a 15x15 grid. Coordinates are cell centres unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .board import BASE_POSITION, FINISHED_POSITION, HOME_STRETCH_START
from .config import config
from .types import Piece, PlayerColor

GRID = 15
CELL_PERCENT = 100 / GRID


@dataclass(frozen=True, slots=True)
class Coordinate:
    x: float
    y: float


def _cell_centre(col: float, row: float) -> Coordinate:
    return Coordinate(x=(col + 0.5) * CELL_PERCENT, y=(row + 0.5) * CELL_PERCENT)


# Base quadrant centres (cell units, not centred)
BASE_CENTRES: Mapping[PlayerColor, Tuple[float, float]] = MappingProxyType(
    {
        PlayerColor.RED: (3, 3),
        PlayerColor.GREEN: (12, 3),
        PlayerColor.BLUE: (3, 12),
        PlayerColor.YELLOW: (12, 12),
    }
)

# Per-slot displacement inside a base, in cells
PIECE_OFFSETS: Tuple[Tuple[float, float], ...] = (
    (-0.75, -0.75),
    (0.75, -0.75),
    (-0.75, 0.75),
    (0.75, 0.75),
)

# Ring index -> (col, row), tracing the cross-shaped perimeter clockwise
PATH_CELLS: Tuple[Tuple[int, int], ...] = (
    (1, 6), (2, 6), (3, 6), (4, 6), (5, 6),
    (6, 5), (6, 4), (6, 3), (6, 2), (6, 1), (6, 0),
    (7, 0), (8, 0),
    (8, 1), (8, 2), (8, 3), (8, 4), (8, 5),
    (9, 6), (10, 6), (11, 6), (12, 6), (13, 6), (14, 6),
    (14, 7), (14, 8),
    (13, 8), (12, 8), (11, 8), (10, 8), (9, 8),
    (8, 9), (8, 10), (8, 11), (8, 12), (8, 13), (8, 14),
    (7, 14), (6, 14),
    (6, 13), (6, 12), (6, 11), (6, 10), (6, 9),
    (5, 8), (4, 8), (3, 8), (2, 8), (1, 8), (0, 8),
    (0, 7), (0, 6),
)

HOME_STRETCH_CELLS: Mapping[PlayerColor, Tuple[Tuple[int, int], ...]] = MappingProxyType(
    {
        PlayerColor.RED: tuple((i + 1, 7) for i in range(config.HOME_STRETCH_LENGTH)),
        PlayerColor.GREEN: tuple((7, i + 1) for i in range(config.HOME_STRETCH_LENGTH)),
        PlayerColor.YELLOW: tuple((13 - i, 7) for i in range(config.HOME_STRETCH_LENGTH)),
        PlayerColor.BLUE: tuple((7, 13 - i) for i in range(config.HOME_STRETCH_LENGTH)),
    }
)

# Finish points around the centre square, in cells (already centred)
FINISH_POINTS: Mapping[PlayerColor, Tuple[float, float]] = MappingProxyType(
    {
        PlayerColor.RED: (7.5, 6.5),
        PlayerColor.GREEN: (8.5, 7.5),
        PlayerColor.YELLOW: (7.5, 8.5),
        PlayerColor.BLUE: (6.5, 7.5),
    }
)

PATH_COORDS: Tuple[Coordinate, ...] = tuple(_cell_centre(c, r) for c, r in PATH_CELLS)
HOME_STRETCH_COORDS: Dict[PlayerColor, List[Coordinate]] = {
    color: [_cell_centre(c, r) for c, r in cells]
    for color, cells in HOME_STRETCH_CELLS.items()
}


def coordinates_for(position: int, color: PlayerColor, piece_id: int) -> Coordinate:
    """Render coordinate of a piece; total over positions -1..58."""
    if position == BASE_POSITION:
        cx, cy = BASE_CENTRES[color]
        dx, dy = PIECE_OFFSETS[piece_id % len(PIECE_OFFSETS)]
        return Coordinate(x=(cx + dx) * CELL_PERCENT, y=(cy + dy) * CELL_PERCENT)

    if position == FINISHED_POSITION:
        fx, fy = FINISH_POINTS[color]
        return Coordinate(x=fx * CELL_PERCENT, y=fy * CELL_PERCENT)

    if HOME_STRETCH_START <= position < FINISHED_POSITION:
        return HOME_STRETCH_COORDS[color][position - HOME_STRETCH_START]

    if 0 <= position < len(PATH_COORDS):
        return PATH_COORDS[position]

    raise ValueError(f"Position {position} is outside the board")


def piece_coordinates(piece: Piece) -> Coordinate:
    return coordinates_for(piece.position, piece.color, piece.piece_id)
