"""Player selection state: anchoring, drag selection and highlighting.

A selection moves through three phases. ``IDLE`` has nothing selected and
every cell is selectable. ``ANCHORED`` has one cell selected; the second pick
must lie on a ray from it in one of the puzzle's allowed directions.
``DIRECTED`` has two or more cells selected, and only the next cell along
the established line may be picked. Picking a cell further along a ray
selects every cell in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALL_DIRECTIONS, Direction
from ..core.models import Position
from ..utils.logger import get_logger
from .board import Board
from .geometry import direction_between, inverse, move, ray_to, walk


LOGGER = get_logger(__name__)


class SelectionPhase(str, Enum):
    IDLE = "IDLE"
    ANCHORED = "ANCHORED"
    DIRECTED = "DIRECTED"


@dataclass
class SelectionContext:
    """In-progress selection owned by one puzzle."""

    selected_count: int = 0
    direction: Direction = Direction.NONE
    last_selected: Optional[Position] = None
    word: str = ""

    @property
    def phase(self) -> SelectionPhase:
        if self.selected_count == 0:
            return SelectionPhase.IDLE
        if self.selected_count == 1:
            return SelectionPhase.ANCHORED
        return SelectionPhase.DIRECTED

    def clear(self) -> None:
        self.selected_count = 0
        self.direction = Direction.NONE
        self.last_selected = None
        self.word = ""


class SelectionController:
    """Applies player input to a board's ``selected``/``selectable``/
    ``highlighted`` flags."""

    def __init__(self, board: Board, allowed_directions: Sequence[Direction]) -> None:
        self.board = board
        self.allowed_directions = list(allowed_directions)
        self.context = SelectionContext()

    @property
    def current_word(self) -> str:
        return self.context.word

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_cell(self, pos: Tuple[int, int]) -> bool:
        """Select ``pos`` (and any cells between it and the anchor).

        Returns ``False`` without touching any state when the position is off
        the board, not selectable, or not in line with the anchor.
        """

        if not self.board.contains(pos):
            return False
        target = Position(*pos)
        if not self.board.cell(target).selectable:
            return False

        anchor = self.context.last_selected
        if anchor is None:
            self._mark_selected(target)
        else:
            direction = direction_between(anchor, target, self.board.size)
            if direction == Direction.NONE:
                return False
            for step in ray_to(anchor, target, self.board.size, direction):
                self._mark_selected(step)
            self.context.direction = direction

        self.context.last_selected = target
        self.calculate_selectables(target)
        LOGGER.debug("Selected (%s,%s); word so far '%s'", target.x, target.y, self.context.word)
        return True

    def _mark_selected(self, pos: Position) -> None:
        cell = self.board.cell(pos)
        cell.selected = True
        self.context.word += cell.letter
        self.context.selected_count += 1

    def reset_current_selection(self) -> None:
        self.context.clear()
        self.board.set_field_across_board("selected", False)
        self.board.set_field_across_board("highlighted", False)
        self.calculate_selectables()

    # ------------------------------------------------------------------
    # Selectability
    # ------------------------------------------------------------------
    def calculate_selectables(self, last_selection: Optional[Position] = None) -> None:
        count = self.context.selected_count
        if count == 0 or last_selection is None:
            self.board.set_field_across_board("selectable", count == 0)
            return

        self.board.set_field_across_board("selectable", False)
        if count == 1:
            for direction in self.allowed_directions:
                for pos in walk(last_selection, direction, self.board.size):
                    self.board.cell(pos).selectable = True
            return

        previous = self.adjacent_selected_direction(last_selection)
        if previous == Direction.NONE:
            return
        following = move(last_selection, inverse(previous), self.board.size)
        if following is not None:
            self.board.cell(following).selectable = True

    def adjacent_selected_direction(self, pos: Position) -> Direction:
        """Direction from ``pos`` to a neighbouring selected cell, if any."""

        for direction in ALL_DIRECTIONS:
            neighbour = move(pos, direction, self.board.size)
            if neighbour is not None and self.board.cell(neighbour).selected:
                return direction
        return Direction.NONE

    def selectable_positions(self) -> List[Position]:
        return self.board.positions_where("selectable")

    # ------------------------------------------------------------------
    # Highlighting
    # ------------------------------------------------------------------
    def highlight_cell(self, pos: Tuple[int, int]) -> bool:
        """Preview the cells between the anchor and ``pos``.

        Nothing happens without an anchor. A ``pos`` that is off the board or
        out of line with the anchor just clears the preview.
        """

        anchor = self.context.last_selected
        if anchor is None:
            return False
        self.unhighlight_board()
        if not self.board.contains(pos):
            return True
        for step in ray_to(anchor, pos, self.board.size):
            self.board.cell(step).highlighted = True
        return True

    def unhighlight_board(self) -> None:
        self.board.set_field_across_board("highlighted", False)
