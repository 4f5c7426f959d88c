import unittest

from ludo_table.rules import can_move, movable_piece_ids

from .support import new_store, place


class TestBlockades(unittest.TestCase):
    def setUp(self):
        self.store = new_store()
        self.players = self.store.players

    def test_green_stack_on_its_start_blocks_yellow_passage(self):
        place(self.store, p4=13, p5=13, p8=10)
        yellow = self.store.piece(8)
        self.assertFalse(can_move(self.players, yellow, 5))  # would cross 13
        self.assertFalse(can_move(self.players, yellow, 3))  # would land on 13
        self.assertTrue(can_move(self.players, yellow, 2))  # stops short on 12

    def test_own_blockade_does_not_block(self):
        place(self.store, p8=30, p9=30, p10=27)
        self.assertTrue(can_move(self.players, self.store.piece(10), 5))  # crosses 30
        self.assertTrue(can_move(self.players, self.store.piece(10), 3))  # joins 30

    def test_single_piece_does_not_block(self):
        place(self.store, p4=13, p8=10)
        self.assertTrue(can_move(self.players, self.store.piece(8), 5))
        self.assertTrue(can_move(self.players, self.store.piece(8), 3))

    def test_blockade_on_start_square_keeps_pieces_in_base(self):
        place(self.store, p4=0, p5=0)
        self.assertEqual(movable_piece_ids(self.players, self.store.piece(0).color, 6), [])

    def test_blockade_beyond_entrance_still_blocks(self):
        # Red turns off at 50, but the ring squares within the roll are checked
        place(self.store, p4=51, p5=51, p0=49)
        red = self.store.piece(0)
        self.assertFalse(can_move(self.players, red, 4))
        self.assertFalse(can_move(self.players, red, 3))
        self.assertTrue(can_move(self.players, red, 2))  # walks only 50
        self.assertTrue(can_move(self.players, red, 1))

    def test_blockade_across_wraparound(self):
        place(self.store, p12=1, p13=1, p4=50)  # Blue stack on 1, Green piece on 50
        self.assertFalse(can_move(self.players, self.store.piece(4), 4))
        self.assertTrue(can_move(self.players, self.store.piece(4), 2))

    def test_joining_own_stack_is_legal(self):
        place(self.store, p0=20, p1=20, p2=18)
        self.assertTrue(can_move(self.players, self.store.piece(2), 2))

    def test_no_opponent_can_reach_a_blockade(self):
        place(self.store, p4=30, p5=30)
        for piece_id in (0, 8, 12):
            for start in range(25, 30):
                place(self.store, **{f"p{piece_id}": start})
                dice = 30 - start
                self.assertFalse(
                    can_move(self.players, self.store.piece(piece_id), dice),
                    f"piece {piece_id} from {start} with {dice}",
                )
            place(self.store, **{f"p{piece_id}": -1})


if __name__ == "__main__":
    unittest.main()
