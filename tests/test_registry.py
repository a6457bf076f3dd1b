import unittest

from wordsearch.core.constants import CaseMode, Direction
from wordsearch.core.models import Position, WordDrawInstruction
from wordsearch.engine.board import Board
from wordsearch.engine.placement import WordPlacer
from wordsearch.engine.registry import NOT_FOUND, WordRegistry


class WordRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.create_blank(6)
        self.registry = WordRegistry(self.board, CaseMode.UPPER)
        placer = WordPlacer(self.board, self.registry, [Direction.RIGHT, Direction.DOWN])
        placer.draw_word_in_board(WordDrawInstruction("CAT", Position(0, 0), Direction.RIGHT))
        placer.draw_word_in_board(WordDrawInstruction("COW", Position(0, 0), Direction.DOWN))

    def test_lookup_is_case_normalized(self) -> None:
        self.assertEqual(self.registry.lookup("CAT"), 0)
        self.assertEqual(self.registry.lookup("cow"), 1)
        self.assertEqual(self.registry.lookup("DOG"), NOT_FOUND)
        self.assertEqual(self.registry.lookup(""), NOT_FOUND)

    def test_discover_marks_shown_only(self) -> None:
        self.registry.discover(0)
        self.assertTrue(self.registry[0].shown)
        self.assertFalse(self.registry[0].found)
        for pos in self.registry[0].pos:
            self.assertTrue(self.board.cell(pos).shown)
            self.assertFalse(self.board.cell(pos).found)
        self.assertFalse(self.board.cell((1, 0)).shown)

    def test_mark_found_flags_word_and_cells(self) -> None:
        self.registry.mark_found(1)
        self.assertTrue(self.registry[1].found)
        self.assertEqual([self.board.cell(pos).found for pos in self.registry[1].pos], [True, True, True])

    def test_out_of_range_index_is_ignored(self) -> None:
        self.registry.discover(5)
        self.registry.mark_found(-1)
        self.assertFalse(any(placed.revealed for placed in self.registry))

    def test_show_word_and_completion(self) -> None:
        self.assertFalse(self.registry.show_word("DOG"))
        self.assertTrue(self.registry.show_word("cat", submit=True))
        self.assertFalse(self.registry.is_complete())
        self.assertEqual([placed.word for placed in self.registry.remaining()], ["COW"])
        self.assertTrue(self.registry.show_word("COW"))
        self.assertTrue(self.registry.is_complete())

    def test_recase(self) -> None:
        self.registry.recase(CaseMode.LOWER)
        self.assertEqual(self.registry.texts(), ["cat", "cow"])
        self.assertEqual(self.registry.lookup("CAT"), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
