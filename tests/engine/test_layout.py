import unittest

from ludo_table.layout import PATH_COORDS, coordinates_for, piece_coordinates
from ludo_table.types import PlayerColor

from .support import new_store


class TestLayout(unittest.TestCase):
    def assertCoord(self, coord, x, y):
        self.assertAlmostEqual(coord.x, x, places=2)
        self.assertAlmostEqual(coord.y, y, places=2)

    def test_base_slot_offset(self):
        self.assertCoord(coordinates_for(-1, PlayerColor.RED, 0), 15.0, 15.0)
        self.assertCoord(coordinates_for(-1, PlayerColor.RED, 3), 25.0, 25.0)

    def test_track_square(self):
        self.assertCoord(coordinates_for(0, PlayerColor.RED, 0), 10.0, 43.33)

    def test_home_stretch_and_finish(self):
        self.assertCoord(coordinates_for(52, PlayerColor.RED, 0), 10.0, 50.0)
        self.assertCoord(coordinates_for(58, PlayerColor.RED, 0), 50.0, 43.33)

    def test_track_ignores_color(self):
        self.assertEqual(
            coordinates_for(20, PlayerColor.RED, 0),
            coordinates_for(20, PlayerColor.BLUE, 12),
        )

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            coordinates_for(59, PlayerColor.RED, 0)
        with self.assertRaises(ValueError):
            coordinates_for(-2, PlayerColor.RED, 0)

    def test_path_is_distinct_and_on_board(self):
        self.assertEqual(len(PATH_COORDS), 52)
        self.assertEqual(len(set(PATH_COORDS)), 52)
        for coord in PATH_COORDS:
            self.assertTrue(0 <= coord.x <= 100 and 0 <= coord.y <= 100)

    def test_pieces_in_one_base_do_not_overlap(self):
        store = new_store()
        for player in store.players:
            coords = {piece_coordinates(p) for p in player.pieces}
            self.assertEqual(len(coords), 4)


if __name__ == "__main__":
    unittest.main()
