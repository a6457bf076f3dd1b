"""Whole-puzzle generation with a bounded retry loop.

Each attempt is independent: fresh word selection, fresh blank board and
registry, word placement, random filler, then validation. A word that cannot
be placed anywhere only costs the attempt; the loop gives up after
``max_attempts`` and reports the last reason.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.config import WordsearchConfig, validate_config
from ..core.constants import MAX_GENERATION_ATTEMPTS, ErrorKind
from ..core.models import Failure
from ..data.dictionary import select_words
from ..data.normalization import random_char
from ..utils.logger import get_logger
from .board import Board
from .placement import WordPlacer
from .registry import WordRegistry
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class AttemptResult:
    board: Board
    registry: WordRegistry
    words: List[str] = field(default_factory=list)
    failure: Optional[Failure] = None


@dataclass
class GenerationResult:
    board: Optional[Board] = None
    registry: Optional[WordRegistry] = None
    attempts: int = 0
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class WordsearchGenerator:
    """Builds complete boards for a configuration."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, config: WordsearchConfig) -> GenerationResult:
        invalid = validate_config(config)
        if invalid is not None:
            LOGGER.error("%s", invalid.message)
            return GenerationResult(failure=invalid)

        last_failure: Optional[Failure] = None
        for attempt in range(1, self.max_attempts + 1):
            LOGGER.info("Generation attempt %s/%s", attempt, self.max_attempts)
            result = self._attempt(config)
            if result.failure is None:
                LOGGER.info(
                    "Board %sx%s generated with %s words",
                    config.size,
                    config.size,
                    len(result.registry),
                )
                return GenerationResult(board=result.board, registry=result.registry, attempts=attempt)
            if not result.failure.recoverable:
                LOGGER.error("Generation aborted: %s", result.failure.message)
                return GenerationResult(attempts=attempt, failure=result.failure)
            LOGGER.warning("Generation attempt failed: %s", result.failure.message)
            last_failure = result.failure

        message = "Unable to generate game, max amount of iterations reached."
        if last_failure is not None:
            message = f"{message} {last_failure.message}"
        LOGGER.error(message)
        return GenerationResult(
            attempts=self.max_attempts,
            failure=Failure(ErrorKind.GENERATION, message),
        )

    # ------------------------------------------------------------------
    # Single attempt
    # ------------------------------------------------------------------
    def _attempt(self, config: WordsearchConfig) -> AttemptResult:
        board = Board.create_blank(config.size)
        registry = WordRegistry(board, config.case)
        sourced = select_words(config.words_config, self.rng)
        if not sourced.ok:
            return AttemptResult(board, registry, sourced.words, sourced.failure)

        placer = WordPlacer(
            board,
            registry,
            config.allowed_directions,
            allow_overlap=config.allow_word_overlap,
            rng=self.rng,
        )
        failure = placer.allocate_words(sourced.words)
        if failure is not None:
            return AttemptResult(board, registry, sourced.words, failure)

        board.fill_empty_cells(lambda: random_char(self.rng, config.case))

        validator = PuzzleValidator(config.allowed_directions, config.allow_word_overlap)
        validation = validator.validate(board, registry, sourced.words)
        if not validation.ok:
            return AttemptResult(
                board,
                registry,
                sourced.words,
                Failure(ErrorKind.VALIDATION, "; ".join(validation.messages)),
            )
        return AttemptResult(board, registry, sourced.words)
