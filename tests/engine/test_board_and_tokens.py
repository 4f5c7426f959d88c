import unittest

import numpy as np

from ludo_table.board import (
    FINISHED_POSITION,
    HOME_ENTRANCES,
    HOME_STRETCH_START,
    SAFE_ZONES,
    START_POSITIONS,
    TOTAL_TRACK_SQUARES,
    TURN_ORDER,
    blockade_owners,
    color_for_piece_id,
    next_color,
    occupancy,
    pieces_at,
)
from ludo_table.types import PlayerColor

from .support import new_store, place


class TestBoardConstants(unittest.TestCase):
    def test_track_layout(self):
        self.assertEqual(TOTAL_TRACK_SQUARES, 52)
        self.assertEqual(HOME_STRETCH_START, 52)
        self.assertEqual(FINISHED_POSITION, 58)

    def test_start_positions(self):
        self.assertEqual(START_POSITIONS[PlayerColor.RED], 0)
        self.assertEqual(START_POSITIONS[PlayerColor.GREEN], 13)
        self.assertEqual(START_POSITIONS[PlayerColor.YELLOW], 26)
        self.assertEqual(START_POSITIONS[PlayerColor.BLUE], 39)

    def test_home_entrances_two_squares_behind_start(self):
        self.assertEqual(HOME_ENTRANCES[PlayerColor.RED], 50)
        self.assertEqual(HOME_ENTRANCES[PlayerColor.GREEN], 11)
        self.assertEqual(HOME_ENTRANCES[PlayerColor.YELLOW], 24)
        self.assertEqual(HOME_ENTRANCES[PlayerColor.BLUE], 37)

    def test_quarter_turn_symmetry(self):
        for color in TURN_ORDER:
            nxt = next_color(color)
            self.assertEqual((START_POSITIONS[nxt] - START_POSITIONS[color]) % 52, 13)
            self.assertEqual((HOME_ENTRANCES[nxt] - HOME_ENTRANCES[color]) % 52, 13)

    def test_safe_zones(self):
        self.assertEqual(SAFE_ZONES, frozenset({0, 8, 13, 21, 26, 34, 39, 47}))
        for start in START_POSITIONS.values():
            self.assertIn(start, SAFE_ZONES)
            self.assertIn(start + 8, SAFE_ZONES)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            START_POSITIONS[PlayerColor.RED] = 5  # type: ignore[index]

    def test_turn_order_wraps(self):
        self.assertEqual(
            [c for c in TURN_ORDER],
            [PlayerColor.RED, PlayerColor.GREEN, PlayerColor.YELLOW, PlayerColor.BLUE],
        )
        self.assertEqual(next_color(PlayerColor.BLUE), PlayerColor.RED)

    def test_piece_id_encodes_color(self):
        self.assertEqual(color_for_piece_id(0), PlayerColor.RED)
        self.assertEqual(color_for_piece_id(7), PlayerColor.GREEN)
        self.assertEqual(color_for_piece_id(11), PlayerColor.YELLOW)
        self.assertEqual(color_for_piece_id(15), PlayerColor.BLUE)
        with self.assertRaises(IndexError):
            color_for_piece_id(16)


class TestOccupancy(unittest.TestCase):
    def setUp(self):
        self.store = new_store()

    def test_occupancy_counts_track_only(self):
        place(self.store, p0=5, p1=5, p4=20, p2=53)
        counts = occupancy(self.store.players)
        self.assertEqual(counts.shape, (4, 52))
        self.assertEqual(counts[int(PlayerColor.RED), 5], 2)
        self.assertEqual(counts[int(PlayerColor.GREEN), 20], 1)
        self.assertEqual(int(np.sum(counts)), 3)

    def test_pieces_at_ignores_home_stretch(self):
        place(self.store, p0=53, p4=53)
        self.assertEqual(pieces_at(self.store.players, 53), [])

    def test_blockade_owner(self):
        place(self.store, p4=13, p5=13, p8=30)
        self.assertEqual(blockade_owners(self.store.players), {13: PlayerColor.GREEN})


if __name__ == "__main__":
    unittest.main()
