import unittest

from game import (
    Board,
    Pit,
    Store,
    PitNotFoundException,
    STORE_ONE,
    STORE_TWO,
)


class TestBoard(unittest.TestCase):
    def test_given_new_board_when_reading_pits_then_each_holds_default_seeds(self):
        board = Board()
        self.assertEqual(board.pit_counts(), (4,) * 12)
        self.assertEqual(board.get_store_total(1), 0)
        self.assertEqual(board.get_store_total(2), 0)
        self.assertEqual(board.total_stones(), 48)
        self.assertEqual(board.initial_total(), 48)

    def test_given_custom_seed_count_when_setting_up_then_totals_follow(self):
        board = Board(seeds_per_pit=3)
        self.assertEqual(board.get_stone_count(7), 3)
        self.assertEqual(board.initial_total(), 36)
        with self.assertRaises(ValueError):
            Board(seeds_per_pit=0)

    def test_given_out_of_range_pit_when_accessing_then_pit_not_found(self):
        board = Board()
        for bad in (0, 13, -1, 14):
            with self.assertRaises(PitNotFoundException):
                board.get_stone_count(bad)
            with self.assertRaises(PitNotFoundException):
                board.set_stone_count(bad, 1)
        # also an IndexError for callers that only know the builtin
        with self.assertRaises(IndexError):
            board.remove_stones(13)

    def test_given_pit_when_setting_and_removing_stones_then_counts_update(self):
        board = Board()
        board.set_stone_count(5, 9)
        self.assertEqual(board.get_stone_count(5), 9)
        board.add_stones(5, 2)
        self.assertEqual(board.remove_stones(5), 11)
        self.assertEqual(board.get_stone_count(5), 0)
        with self.assertRaises(ValueError):
            board.set_stone_count(5, -1)

    def test_given_stores_when_adding_and_emptying_then_totals_reset(self):
        board = Board()
        board.add_to_store(1, 3)
        board.add_to_store(2, 5)
        self.assertEqual(board.get_store_total(1), 3)
        self.assertEqual(board.get_store_total(2), 5)
        board.empty_stores()
        self.assertEqual((board.get_store_total(1), board.get_store_total(2)), (0, 0))
        with self.assertRaises(ValueError):
            board.get_store_total(3)

    def test_given_installed_store_when_adding_then_store_object_updated(self):
        board = Board()
        store = Store()
        board.set_store(store, 2)
        board.add_to_store(2, 4)
        self.assertIs(board.get_store(2), store)
        self.assertEqual(store.total_stones, 4)

    def test_given_board_geometry_when_querying_then_sides_and_opposites_match(self):
        self.assertEqual(Board.side_of(1), 1)
        self.assertEqual(Board.side_of(6), 1)
        self.assertEqual(Board.side_of(7), 2)
        self.assertEqual(list(Board.side_pits(2)), [7, 8, 9, 10, 11, 12])
        for pit in range(1, 13):
            self.assertEqual(Board.opposite(pit), 13 - pit)
        self.assertEqual(Board.store_position(1), STORE_ONE)
        self.assertEqual(Board.store_owner(STORE_TWO), 2)
        self.assertIsNone(Board.store_owner(12))

    def test_given_sowing_ring_when_stepping_then_stores_follow_each_side(self):
        self.assertEqual(Board.next_position(1), 2)
        self.assertEqual(Board.next_position(6), STORE_ONE)
        self.assertEqual(Board.next_position(STORE_ONE), 7)
        self.assertEqual(Board.next_position(12), STORE_TWO)
        self.assertEqual(Board.next_position(STORE_TWO), 1)

    def test_given_new_board_when_pretty_then_layout_matches_console_format(self):
        board = Board()
        expected = "\t4\t4\t4\t4\t4\t4\t\n0\t\t\t\t\t\t\t0\n\t4\t4\t4\t4\t4\t4\t"
        self.assertEqual(board.pretty(), expected)

    def test_given_changed_board_when_pretty_then_player_two_row_is_reversed(self):
        board = Board()
        board.set_stone_count(12, 9)
        board.set_stone_count(1, 7)
        board.add_to_store(2, 5)
        board.add_to_store(1, 2)
        top, middle, bottom = board.pretty().split("\n")
        self.assertEqual(top.split("\t")[1], "9")
        self.assertEqual(bottom.split("\t")[1], "7")
        self.assertTrue(middle.startswith("5"))
        self.assertTrue(middle.endswith("2"))

    def test_given_pit_and_store_values_when_mutating_then_behave_as_counters(self):
        pit = Pit(3)
        pit.add_stone()
        self.assertEqual(pit.remove_stones(), 4)
        self.assertEqual(pit.stone_count, 0)
        store = Store()
        self.assertEqual(store.add_stones(6), 6)
        self.assertEqual(store.empty_store(), 6)
        with self.assertRaises(ValueError):
            store.add_stones(-1)


if __name__ == '__main__':
    unittest.main()
