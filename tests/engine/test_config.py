import unittest

from ludo_table.config import Config


class TestConfig(unittest.TestCase):
    def test_derived_fields(self):
        cfg = Config()
        self.assertEqual(cfg.HOME_ENTRANCES, [50, 11, 24, 37])

    def test_delays_are_overridable(self):
        cfg = Config(ROLL_DELAY=0.0, TURN_PASS_DELAY=0.1)
        self.assertEqual(cfg.ROLL_DELAY, 0.0)
        self.assertEqual(cfg.TURN_PASS_DELAY, 0.1)

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            Config(AI_MOVE_DELAY=-1.0)

    def test_start_squares_must_match_players(self):
        with self.assertRaises(ValueError):
            Config(PLAYER_START_SQUARES=[0, 13, 26])

    def test_finish_follows_home_stretch(self):
        with self.assertRaises(ValueError):
            Config(FINISHED_POSITION=60)


if __name__ == "__main__":
    unittest.main()
