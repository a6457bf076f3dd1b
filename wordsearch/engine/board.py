"""Board representation and bulk cell helpers."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Tuple, Union

from ..core.models import Cell, Position
from ..utils.logger import get_logger
from .geometry import in_bounds


LOGGER = get_logger(__name__)

CELL_FIELDS = ("letter", "shown", "found", "selected", "selectable", "highlighted")


class Board:
    """Square matrix of cells, indexed ``cells[x][y]``."""

    def __init__(self, cells: List[List[Cell]]) -> None:
        self.cells = cells
        self.size = len(cells)

    @classmethod
    def create_blank(cls, size: int) -> "Board":
        """Build an empty board where every cell is selectable."""

        LOGGER.debug("Creating blank %sx%s board", size, size)
        return cls([[Cell(pos=Position(x, y)) for y in range(size)] for x in range(size)])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, pos: Tuple[int, int]) -> bool:
        return in_bounds(pos, self.size)

    def cell(self, pos: Tuple[int, int]) -> Cell:
        x, y = pos
        return self.cells[x][y]

    def letter_at(self, pos: Tuple[int, int]) -> str:
        return self.cell(pos).letter

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def rows(self) -> List[List[Cell]]:
        return self.cells

    def read(self, positions: List[Position]) -> str:
        return "".join(self.cell(pos).letter for pos in positions)

    def positions_where(self, field: str) -> List[Position]:
        """Positions whose boolean ``field`` is set."""

        return [cell.pos for cell in self if getattr(cell, field)]

    # ------------------------------------------------------------------
    # Bulk updates
    # ------------------------------------------------------------------
    def set_field_across_board(self, field: str, value: Union[Any, Callable[[Any], Any]]) -> None:
        """Apply a uniform value, or a transform of the current value, to
        ``field`` on every cell."""

        if field not in CELL_FIELDS:
            raise ValueError(f"Unknown cell field: {field}")
        for cell in self:
            if callable(value):
                setattr(cell, field, value(getattr(cell, field)))
            else:
                setattr(cell, field, value)

    def fill_empty_cells(self, random_char: Callable[[], str]) -> int:
        """Give every still-empty cell a filler letter; returns how many."""

        filled = 0
        for cell in self:
            if cell.is_empty():
                cell.letter = random_char()
                filled += 1
        LOGGER.debug("Filled %s empty cells with random letters", filled)
        return filled

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [[cell.to_jsonable() for cell in row] for row in self.cells]
