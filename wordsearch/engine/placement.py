"""Random placement of words into a board."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import Direction, ErrorKind
from ..core.models import Failure, PlacedWord, Position, WordDrawInstruction
from ..utils.logger import get_logger
from .board import Board
from .geometry import path_for
from .registry import WordRegistry


LOGGER = get_logger(__name__)


class WordPlacer:
    """Fits words into one board/registry pair.

    A placer belongs to a single generation attempt; a failed attempt throws
    away the placer together with its board and registry.
    """

    def __init__(
        self,
        board: Board,
        registry: WordRegistry,
        allowed_directions: Sequence[Direction],
        allow_overlap: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.board = board
        self.registry = registry
        self.allowed_directions = list(allowed_directions)
        self.allow_overlap = allow_overlap
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def does_word_fit(self, word: str, start: Position, direction: Direction) -> bool:
        """The whole word stays on the board when started at ``start``."""

        return path_for(start, direction, len(word), self.board.size) is not None

    def is_char_collision(self, char: str, pos: Position) -> bool:
        existing = self.board.letter_at(pos)
        if not existing:
            return False
        if self.allow_overlap and existing == char:
            return False
        return True

    def does_word_collide(self, word: str, start: Position, direction: Direction) -> bool:
        path = path_for(start, direction, len(word), self.board.size)
        if path is None:
            return True
        return any(self.is_char_collision(char, pos) for char, pos in zip(word, path))

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def fit_word_in_random_pos(self, word: str) -> Optional[WordDrawInstruction]:
        """Find a random start and direction for ``word``.

        Directions and cells are shuffled independently and the full cross
        product is searched, so ``None`` means the word cannot go anywhere.
        """

        directions = list(self.allowed_directions)
        self.rng.shuffle(directions)
        candidates = [cell.pos for cell in self.board]
        self.rng.shuffle(candidates)

        for start in candidates:
            for direction in directions:
                if not self.does_word_fit(word, start, direction):
                    continue
                if self.does_word_collide(word, start, direction):
                    continue
                return WordDrawInstruction(word=word, start=start, direction=direction)
        return None

    def draw_word_in_board(self, instruction: WordDrawInstruction) -> PlacedWord:
        path = path_for(instruction.start, instruction.direction, len(instruction.word), self.board.size)
        if path is None:
            raise ValueError(f"Draw instruction leaves the board: {instruction}")
        for letter, pos in zip(instruction.word, path):
            self.board.cell(pos).letter = letter
        placed = PlacedWord(word=instruction.word, pos=path, direction=instruction.direction)
        self.registry.add(placed)
        LOGGER.debug(
            "Placed '%s' at (%s,%s) going %s",
            instruction.word,
            instruction.start.x,
            instruction.start.y,
            instruction.direction.value,
        )
        return placed

    def allocate_words(self, words: List[str]) -> Optional[Failure]:
        """Place ``words`` in order; stops at the first one that does not fit."""

        for word in words:
            instruction = self.fit_word_in_random_pos(word)
            if instruction is None:
                LOGGER.debug("No room left for '%s'", word)
                return Failure(ErrorKind.PLACEMENT, f"Could not fit word in board: {word}")
            self.draw_word_in_board(instruction)
        return None
