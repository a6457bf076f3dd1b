import unittest

from wordsearch.core.models import Position
from wordsearch.engine.board import Board


class BoardTests(unittest.TestCase):
    def test_blank_board_defaults(self) -> None:
        board = Board.create_blank(6)
        cells = list(board)
        self.assertEqual(len(cells), 36)
        self.assertEqual(board.size, 6)
        for cell in cells:
            self.assertEqual(cell.letter, "")
            self.assertTrue(cell.selectable)
            self.assertFalse(cell.selected or cell.found or cell.shown or cell.highlighted)
        self.assertEqual(board.cell((2, 4)).pos, Position(2, 4))

    def test_set_field_with_value_and_transform(self) -> None:
        board = Board.create_blank(6)
        board.set_field_across_board("selected", True)
        self.assertTrue(all(cell.selected for cell in board))

        board.cell((0, 0)).letter = "a"
        board.set_field_across_board("letter", lambda letter: letter.upper())
        self.assertEqual(board.letter_at((0, 0)), "A")
        self.assertEqual(board.letter_at((0, 1)), "")

    def test_set_unknown_field_raises(self) -> None:
        board = Board.create_blank(6)
        with self.assertRaises(ValueError):
            board.set_field_across_board("pos", None)

    def test_fill_empty_cells_only_touches_empty(self) -> None:
        board = Board.create_blank(6)
        board.cell((1, 1)).letter = "Q"
        filled = board.fill_empty_cells(lambda: "Z")
        self.assertEqual(filled, 35)
        self.assertEqual(board.letter_at((1, 1)), "Q")
        self.assertEqual(board.letter_at((5, 5)), "Z")

    def test_read_and_jsonable(self) -> None:
        board = Board.create_blank(6)
        for y, letter in enumerate("DOG"):
            board.cell((3, y)).letter = letter
        self.assertEqual(board.read([Position(3, 0), Position(3, 1), Position(3, 2)]), "DOG")
        payload = board.to_jsonable()
        self.assertEqual(len(payload), 6)
        self.assertEqual(payload[3][1]["letter"], "O")
        self.assertEqual(payload[3][1]["pos"], {"x": 3, "y": 1})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
