import unittest

from wordsearch.core.constants import ALL_DIRECTIONS, Direction
from wordsearch.core.models import Position
from wordsearch.engine.geometry import (
    direction_between,
    in_bounds,
    inverse,
    move,
    path_for,
    ray_to,
    vector_for,
    walk,
)


class DirectionTests(unittest.TestCase):
    def test_vectors_use_row_then_column(self) -> None:
        self.assertEqual(vector_for(Direction.RIGHT), (0, 1))
        self.assertEqual(vector_for(Direction.UP), (-1, 0))
        self.assertEqual(vector_for(Direction.DOWN_LEFT), (1, -1))
        self.assertEqual(vector_for(Direction.NONE), (0, 0))

    def test_inverse_pairs(self) -> None:
        self.assertEqual(inverse(Direction.UP), Direction.DOWN)
        self.assertEqual(inverse(Direction.UP_RIGHT), Direction.DOWN_LEFT)
        self.assertEqual(inverse(Direction.NONE), Direction.NONE)
        for direction in ALL_DIRECTIONS:
            self.assertEqual(inverse(inverse(direction)), direction)
            dx, dy = vector_for(direction)
            self.assertEqual(vector_for(inverse(direction)), (-dx, -dy))


class MoveTests(unittest.TestCase):
    def test_in_bounds(self) -> None:
        self.assertTrue(in_bounds((0, 0), 6))
        self.assertTrue(in_bounds((5, 5), 6))
        self.assertFalse(in_bounds((6, 0), 6))
        self.assertFalse(in_bounds((0, -1), 6))

    def test_move_inside_and_outside(self) -> None:
        self.assertEqual(move((2, 2), Direction.DOWN_RIGHT, 6), Position(3, 3))
        self.assertIsNone(move((0, 0), Direction.UP, 6))
        self.assertIsNone(move((5, 5), Direction.RIGHT, 6))

    def test_walk_stops_at_edge(self) -> None:
        cells = list(walk((0, 0), Direction.RIGHT, 8))
        self.assertEqual(len(cells), 7)
        self.assertEqual(cells[-1], Position(0, 7))

    def test_walk_respects_step_limit(self) -> None:
        self.assertEqual(list(walk((0, 0), Direction.DOWN, 8, steps=2)), [Position(1, 0), Position(2, 0)])

    def test_walk_with_none_direction_is_empty(self) -> None:
        self.assertEqual(list(walk((3, 3), Direction.NONE, 8)), [])

    def test_path_for_fits_exactly_at_edge(self) -> None:
        self.assertEqual(
            path_for((0, 5), Direction.RIGHT, 3, 8),
            [Position(0, 5), Position(0, 6), Position(0, 7)],
        )
        self.assertIsNone(path_for((0, 6), Direction.RIGHT, 3, 8))
        self.assertEqual(path_for((4, 4), Direction.UP_LEFT, 1, 8), [Position(4, 4)])


class DirectionBetweenTests(unittest.TestCase):
    def test_aligned_cells(self) -> None:
        self.assertEqual(direction_between((0, 0), (3, 3), 8), Direction.DOWN_RIGHT)
        self.assertEqual(direction_between((2, 2), (0, 4), 8), Direction.UP_RIGHT)
        self.assertEqual(direction_between((7, 7), (7, 0), 8), Direction.LEFT)

    def test_unaligned_or_same_cell(self) -> None:
        self.assertEqual(direction_between((0, 0), (1, 2), 8), Direction.NONE)
        self.assertEqual(direction_between((4, 4), (4, 4), 8), Direction.NONE)

    def test_candidate_directions_can_be_restricted(self) -> None:
        self.assertEqual(
            direction_between((0, 0), (0, 3), 8, directions=[Direction.DOWN]),
            Direction.NONE,
        )

    def test_ray_to_includes_destination(self) -> None:
        self.assertEqual(ray_to((1, 1), (1, 3), 6), [Position(1, 2), Position(1, 3)])
        self.assertEqual(ray_to((1, 1), (2, 3), 6), [])

    def test_ray_to_with_resolved_direction(self) -> None:
        self.assertEqual(
            ray_to((4, 1), (2, 3), 6, Direction.UP_RIGHT),
            [Position(3, 2), Position(2, 3)],
        )
        self.assertEqual(ray_to((1, 1), (1, 3), 6, Direction.NONE), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
