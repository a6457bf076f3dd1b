"""Direction vectors and board-bounded ray walking."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.constants import ALL_DIRECTIONS, DIRECTION_VECTORS, INVERSE_DIRECTIONS, Direction
from ..core.models import Position


def vector_for(direction: Direction) -> Tuple[int, int]:
    return DIRECTION_VECTORS[direction]


def inverse(direction: Direction) -> Direction:
    return INVERSE_DIRECTIONS[direction]


def in_bounds(position: Tuple[int, int], size: int) -> bool:
    x, y = position
    return 0 <= x < size and 0 <= y < size


def move(position: Tuple[int, int], direction: Direction, size: int) -> Optional[Position]:
    """Step once from ``position``; ``None`` when the step leaves the board."""

    dx, dy = DIRECTION_VECTORS[direction]
    target = Position(position[0] + dx, position[1] + dy)
    if in_bounds(target, size):
        return target
    return None


def walk(
    start: Tuple[int, int],
    direction: Direction,
    size: int,
    steps: Optional[int] = None,
) -> Iterator[Position]:
    """Yield the cells after ``start`` along ``direction`` until the edge.

    ``steps`` caps the number of cells yielded. ``NONE`` never moves, so it
    yields nothing.
    """

    if direction == Direction.NONE:
        return
    limit = size if steps is None else min(steps, size)
    current: Optional[Position] = Position(*start)
    for _ in range(limit):
        current = move(current, direction, size)
        if current is None:
            return
        yield current


def path_for(start: Tuple[int, int], direction: Direction, length: int, size: int) -> Optional[List[Position]]:
    """Return the ``length`` cells of a run starting at ``start``, or ``None``
    if the run does not fit on the board."""

    if length < 1 or not in_bounds(start, size):
        return None
    cells = [Position(*start)]
    cells.extend(walk(start, direction, size, steps=length - 1))
    if len(cells) != length:
        return None
    return cells


def direction_between(
    start: Tuple[int, int],
    end: Tuple[int, int],
    size: int,
    directions: Iterable[Direction] = ALL_DIRECTIONS,
) -> Direction:
    """Find the direction whose ray from ``start`` lands on ``end``.

    Each candidate ray is walked for at most ``size`` steps. Returns
    ``Direction.NONE`` when ``end`` is not in line with ``start``.
    """

    target = Position(*end)
    for direction in directions:
        for position in walk(start, direction, size):
            if position == target:
                return direction
    return Direction.NONE


def ray_to(
    start: Tuple[int, int],
    end: Tuple[int, int],
    size: int,
    direction: Optional[Direction] = None,
) -> List[Position]:
    """Cells from ``start`` (exclusive) up to ``end`` (inclusive), empty when
    the two are not aligned.

    Pass ``direction`` when the caller already resolved it.
    """

    if direction is None:
        direction = direction_between(start, end, size)
    cells: List[Position] = []
    target = Position(*end)
    for position in walk(start, direction, size):
        cells.append(position)
        if position == target:
            break
    return cells
