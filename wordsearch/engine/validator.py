"""Deterministic integrity checks for generated boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..core.constants import Direction
from ..core.exceptions import IntegrityError
from ..core.models import PlacedWord, Position
from ..utils.logger import get_logger
from .board import Board
from .geometry import move
from .registry import WordRegistry


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class PuzzleValidator:
    """Runs deterministic validation over a finished board."""

    def __init__(self, allowed_directions: Sequence[Direction], allow_overlap: bool) -> None:
        self.allowed_directions = set(allowed_directions)
        self.allow_overlap = allow_overlap

    def validate(self, board: Board, registry: WordRegistry, expected: Sequence[str]) -> ValidationResult:
        try:
            self._check_all_cells_filled(board)
            self._check_words_placed_once(registry, expected)
            for placed in registry:
                self._check_path(board, placed)
                self._check_reads_back(board, placed)
            self._check_overlaps(registry)
        except IntegrityError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    def _check_all_cells_filled(self, board: Board) -> None:
        for cell in board:
            if len(cell.letter) != 1:
                raise IntegrityError(f"Cell ({cell.pos.x},{cell.pos.y}) holds '{cell.letter}'")

    def _check_words_placed_once(self, registry: WordRegistry, expected: Sequence[str]) -> None:
        placed = registry.texts()
        if sorted(placed) != sorted(expected):
            raise IntegrityError(f"Placed words {placed} do not match requested {list(expected)}")
        if len(set(placed)) != len(placed):
            raise IntegrityError(f"Duplicate words placed: {placed}")

    def _check_path(self, board: Board, placed: PlacedWord) -> None:
        if len(placed.pos) != len(placed.word):
            raise IntegrityError(f"'{placed.word}' has {len(placed.pos)} positions")
        if placed.direction not in self.allowed_directions:
            raise IntegrityError(f"'{placed.word}' runs {placed.direction.value}, which is not allowed")
        for current, following in zip(placed.pos, placed.pos[1:]):
            if move(current, placed.direction, board.size) != following:
                raise IntegrityError(f"'{placed.word}' is not a straight run at {following}")

    def _check_reads_back(self, board: Board, placed: PlacedWord) -> None:
        text = board.read(placed.pos)
        if text != placed.word:
            raise IntegrityError(f"Board reads '{text}' where '{placed.word}' was placed")

    def _check_overlaps(self, registry: WordRegistry) -> None:
        owners: Dict[Position, List[str]] = {}
        for placed in registry:
            for pos in placed.pos:
                owners.setdefault(pos, []).append(placed.word)
        for pos, words in owners.items():
            if len(words) > 1 and not self.allow_overlap:
                raise IntegrityError(f"Words {words} share cell ({pos.x},{pos.y}) with overlap disabled")
