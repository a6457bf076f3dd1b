import io
import logging
import unittest

from wordsearch import ConfigurationError, GenerationError, SourcingError, Wordsearch
from wordsearch.core.constants import CaseMode


CAT_CONFIG = {
    "size": 8,
    "wordsConfig": {"amount": 1, "dictionary": ["CAT"], "minLength": 2, "maxLength": 4},
    "allowedDirections": ["RIGHT"],
}


class GameScenarioTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = Wordsearch(seed=7)
        self.output = self.game.generate(CAT_CONFIG)
        self.cat = self.output.words[0]

    def test_generate_returns_fresh_state(self) -> None:
        self.assertEqual(self.output.error, "")
        self.assertEqual(self.output.current_word, "")
        self.assertFalse(self.output.end_game)
        self.assertEqual([placed.word for placed in self.output.words], ["CAT"])
        self.assertIs(self.game.get_output(), self.output)

    def test_selecting_cat_in_order_and_submitting_wins(self) -> None:
        for pos in self.cat.pos:
            self.assertTrue(self.game.select_cell(pos))
        self.assertEqual(self.output.current_word, "CAT")
        self.assertTrue(self.game.submit_current_word())
        self.assertTrue(self.output.end_game)
        self.assertTrue(self.cat.found)
        self.assertEqual(self.output.current_word, "")
        for pos in self.cat.pos:
            self.assertTrue(self.game.board.cell(pos).found)
            self.assertFalse(self.game.board.cell(pos).selected)

    def test_drag_from_first_to_last_letter(self) -> None:
        self.assertTrue(self.game.select_cell(self.cat.pos[0]))
        self.assertTrue(self.game.select_cell(self.cat.pos[-1]))
        self.assertEqual(self.output.current_word, "CAT")

    def test_wrong_submission_resets_selection(self) -> None:
        self.game.select_cell(self.cat.pos[1])
        self.assertFalse(self.game.submit_current_word())
        self.assertFalse(self.output.end_game)
        self.assertEqual(self.output.current_word, "")
        self.assertEqual(self.game.board.positions_where("selected"), [])

    def test_non_selectable_cell_is_rejected(self) -> None:
        anchor = self.cat.pos[0]
        self.game.select_cell(anchor)
        blocked = next(cell.pos for cell in self.game.board if not cell.selectable)
        before = (self.output.current_word, self.game.board.positions_where("selected"))
        self.assertFalse(self.game.select_cell(blocked))
        self.assertEqual((self.output.current_word, self.game.board.positions_where("selected")), before)

    def test_discover_word_is_case_insensitive(self) -> None:
        self.assertFalse(self.game.discover_word("dog"))
        self.assertTrue(self.game.discover_word("cat"))
        self.assertTrue(self.cat.shown)
        self.assertFalse(self.cat.found)
        self.assertTrue(self.output.end_game)

    def test_highlight_preview(self) -> None:
        self.assertFalse(self.game.highlight_cell(self.cat.pos[2]))
        self.game.select_cell(self.cat.pos[0])
        self.assertTrue(self.game.highlight_cell(self.cat.pos[2]))
        self.assertEqual(self.game.board.positions_where("highlighted"), self.cat.pos[1:])
        self.game.unhighlight_board()
        self.assertEqual(self.game.board.positions_where("highlighted"), [])

    def test_reset_selection_twice(self) -> None:
        self.game.select_cell(self.cat.pos[0])
        self.game.reset_current_selection()
        self.game.reset_current_selection()
        self.assertEqual(self.output.current_word, "")
        self.assertTrue(all(cell.selectable for cell in self.game.board))

    def test_case_change_recases_current_puzzle(self) -> None:
        self.game.select_cell(self.cat.pos[0])
        self.game.set_config({"wordsConfig": {"case": "lower"}})
        self.assertEqual(self.game.get_config().case, CaseMode.LOWER)
        self.assertEqual(self.cat.word, "cat")
        self.assertEqual(self.output.current_word, "c")
        self.assertTrue(all(cell.letter.islower() for cell in self.game.board))
        self.assertTrue(self.game.discover_word("CAT"))

    def test_debug_switch_drives_package_logger(self) -> None:
        package_logger = logging.getLogger("wordsearch")
        self.addCleanup(package_logger.setLevel, logging.NOTSET)
        self.game.set_config({"wordsConfig": {"debug": True}})
        self.assertEqual(package_logger.level, logging.DEBUG)
        with self.assertLogs("wordsearch.engine.selection", level="DEBUG"):
            self.game.select_cell(self.cat.pos[0])
        self.game.set_config({"wordsConfig": {"debug": False}})
        self.assertEqual(package_logger.level, logging.NOTSET)

    def test_console_print_board(self) -> None:
        stream = io.StringIO()
        self.game.console_print_board(stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(len(lines), 8)
        self.assertTrue(all(line.startswith("|") and line.endswith("|") for line in lines))
        self.assertEqual(lines[0].count("|"), 9)


class GameFailureTests(unittest.TestCase):
    def test_sourcing_failure_sets_error(self) -> None:
        game = Wordsearch(seed=1)
        with self.assertRaises(SourcingError):
            game.generate({"wordsConfig": {"amount": 1, "dictionary": ["A"], "minLength": 2}})
        self.assertEqual(game.get_output().error, "Not enough words in dictionary.")
        self.assertIsNone(game.board)

    def test_configuration_failure_sets_error(self) -> None:
        game = Wordsearch()
        with self.assertRaises(ConfigurationError):
            game.generate({"size": "5"})
        self.assertIn("Board size must be between 6 and 50", game.get_output().error)

    def test_rejected_configuration_is_not_kept(self) -> None:
        game = Wordsearch(seed=2)
        game.generate(CAT_CONFIG)
        with self.assertRaises(ConfigurationError):
            game.generate({"size": 5})
        self.assertEqual(game.get_config().size, 8)
        output = game.generate()
        self.assertEqual(output.error, "")
        self.assertEqual(output.board.size, 8)

    def test_malformed_configuration_sets_error(self) -> None:
        game = Wordsearch()
        with self.assertRaises(ConfigurationError):
            game.generate({"size": "huge"})
        self.assertTrue(game.get_output().error.startswith("Invalid configuration"))

    def test_failed_generation_keeps_previous_puzzle(self) -> None:
        game = Wordsearch(seed=5, max_attempts=2)
        game.generate(CAT_CONFIG)
        board = game.board
        with self.assertRaises(GenerationError) as ctx:
            game.generate(
                {
                    "size": 6,
                    "wordsConfig": {
                        "amount": 7,
                        "dictionary": ["ABCDEF", "GHIJKL", "MNOPQR", "STUVWX", "YZABCD", "EFGHIJ", "KLMNOP"],
                        "minLength": 6,
                        "maxLength": 6,
                        "random": False,
                    },
                    "allowWordOverlap": False,
                }
            )
        self.assertIn("max amount of iterations reached", ctx.exception.message)
        self.assertIs(game.board, board)
        self.assertIn("Could not fit word in board", game.get_output().error)

    def test_play_without_puzzle_is_rejected(self) -> None:
        game = Wordsearch()
        self.assertFalse(game.select_cell((0, 0)))
        self.assertFalse(game.submit_current_word())
        self.assertFalse(game.discover_word("ONE"))
        self.assertFalse(game.highlight_cell((0, 0)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
