import contextlib
import io
import os
import unittest
from unittest.mock import patch

from game import KalahRules, Player
from mancala_core.cli import main, play


def near_end():
    rules = KalahRules()
    board = rules.data_structure
    for pit in range(1, 13):
        board.set_stone_count(pit, 0)
    board.set_stone_count(6, 1)
    board.set_stone_count(7, 3)
    board.add_to_store(1, 20)
    board.add_to_store(2, 24)
    return rules


class TestConsoleDriver(unittest.TestCase):
    def _run(self, fn, inputs):
        out = io.StringIO()
        with patch('builtins.input', side_effect=inputs), contextlib.redirect_stdout(out):
            result = fn()
        return result, out.getvalue()

    def test_given_bad_inputs_when_playing_then_reprompts_until_valid_move(self):
        rules = near_end()
        ann, bob = Player('Ann'), Player('Bob')
        winner, text = self._run(lambda: play(rules, ann, bob), ['x', '7', '13', '6'])
        self.assertIs(winner, bob)
        self.assertIn('Could not parse', text)
        self.assertIn("not on player 1's side", text)
        self.assertIn('Pit 13 not found', text)
        self.assertIn('Final score: Ann 21, Bob 27', text)
        self.assertIn('Bob wins!', text)

    def test_given_input_closed_when_playing_then_game_abandoned(self):
        rules = KalahRules()
        winner, text = self._run(lambda: play(rules, Player('A'), Player('B')), EOFError())
        self.assertIsNone(winner)
        self.assertIn('Game abandoned.', text)

    def test_given_capture_when_playing_then_capture_reported(self):
        rules = KalahRules()
        board = rules.data_structure
        for pit in range(1, 13):
            board.set_stone_count(pit, 0)
        for pit, count in {2: 1, 10: 5, 5: 3, 7: 2}.items():
            board.set_stone_count(pit, count)
        _, text = self._run(lambda: play(rules, Player('A'), Player('B')), ['2', EOFError()])
        self.assertIn('A captured 6 stones.', text)

    def test_given_cli_flags_when_main_runs_then_variant_and_seeds_applied(self):
        with patch.dict(os.environ, {}, clear=True):
            _, text = self._run(lambda: main(['--variant', 'ayo', '--seeds', '3']), EOFError())
        self.assertIn('Playing Ayo with 3 stones per pit.', text)
        self.assertIn('\t3\t3\t3\t3\t3\t3\t', text)

    def test_given_non_positive_seeds_when_main_runs_then_exits(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(['--seeds', '0'])


if __name__ == '__main__':
    unittest.main()
