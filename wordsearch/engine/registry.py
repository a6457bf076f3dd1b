"""Placed-word bookkeeping: lookup, discovery, scoring and end of game."""

from __future__ import annotations

from typing import Iterator, List, Optional

from ..core.constants import CaseMode
from ..core.models import PlacedWord
from ..data.normalization import apply_case
from ..utils.logger import get_logger
from .board import Board


LOGGER = get_logger(__name__)

NOT_FOUND = -1


class WordRegistry:
    """Words hidden in a board, in placement order."""

    def __init__(self, board: Board, case: CaseMode = CaseMode.UPPER) -> None:
        self.board = board
        self.case = case
        self.words: List[PlacedWord] = []

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[PlacedWord]:
        return iter(self.words)

    def __getitem__(self, index: int) -> PlacedWord:
        return self.words[index]

    def add(self, placed: PlacedWord) -> None:
        self.words.append(placed)

    def texts(self) -> List[str]:
        return [placed.word for placed in self.words]

    def lookup(self, text: Optional[str]) -> int:
        """Index of the placed word equal to ``text`` (case-normalized), or -1."""

        if not text:
            return NOT_FOUND
        needle = apply_case(text, self.case)
        for index, placed in enumerate(self.words):
            if placed.word == needle:
                return index
        return NOT_FOUND

    def discover(self, index: int) -> None:
        """Reveal a word without scoring it."""

        if not 0 <= index < len(self.words):
            return
        placed = self.words[index]
        for pos in placed.pos:
            self.board.cell(pos).shown = True
        placed.shown = True
        LOGGER.debug("Discovered word '%s'", placed.word)

    def mark_found(self, index: int) -> None:
        """Score a word the player submitted."""

        if not 0 <= index < len(self.words):
            return
        placed = self.words[index]
        for pos in placed.pos:
            self.board.cell(pos).found = True
        placed.found = True
        LOGGER.debug("Word '%s' found", placed.word)

    def show_word(self, text: Optional[str], submit: bool = False) -> bool:
        """Discover, or when ``submit`` is set mark as found, the word matching
        ``text``. Returns whether such a word exists."""

        index = self.lookup(text)
        if index == NOT_FOUND:
            return False
        if submit:
            self.mark_found(index)
        else:
            self.discover(index)
        return True

    def is_complete(self) -> bool:
        return all(placed.revealed for placed in self.words)

    def remaining(self) -> List[PlacedWord]:
        return [placed for placed in self.words if not placed.revealed]

    def recase(self, case: CaseMode) -> None:
        self.case = case
        for placed in self.words:
            placed.word = apply_case(placed.word, case)

    def to_jsonable(self) -> List[dict]:
        return [placed.to_jsonable() for placed in self.words]
