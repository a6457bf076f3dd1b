"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple

from .constants import Direction, ErrorKind


class Position(NamedTuple):
    """A board coordinate; ``x`` is the row and ``y`` the column."""

    x: int
    y: int


@dataclass
class Cell:
    """Represents a board cell with its play-state flags."""

    pos: Position
    letter: str = ""
    shown: bool = False
    found: bool = False
    selected: bool = False
    selectable: bool = True
    highlighted: bool = False

    def is_empty(self) -> bool:
        return not self.letter

    def to_jsonable(self) -> dict:
        return {
            "pos": {"x": self.pos.x, "y": self.pos.y},
            "letter": self.letter,
            "shown": self.shown,
            "found": self.found,
            "selected": self.selected,
            "selectable": self.selectable,
            "highlighted": self.highlighted,
        }


@dataclass
class PlacedWord:
    """A word written into the board along a straight run of cells."""

    word: str
    pos: List[Position]
    direction: Direction = Direction.NONE
    found: bool = False
    shown: bool = False

    def __len__(self) -> int:
        return len(self.pos)

    @property
    def revealed(self) -> bool:
        return self.found or self.shown

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "pos": [{"x": p.x, "y": p.y} for p in self.pos],
            "direction": self.direction.value,
            "found": self.found,
            "shown": self.shown,
        }


@dataclass(frozen=True)
class WordDrawInstruction:
    """Where and how a word should be drawn."""

    word: str
    start: Position
    direction: Direction


@dataclass(frozen=True)
class Failure:
    """Explicit failure value returned by generation steps."""

    kind: ErrorKind
    message: str

    @property
    def recoverable(self) -> bool:
        """Placement-level failures are retried with a fresh board."""

        return self.kind in {ErrorKind.PLACEMENT, ErrorKind.VALIDATION}


@dataclass
class SourcingResult:
    words: List[str] = field(default_factory=list)
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
