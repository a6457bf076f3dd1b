"""Dictionary loading and hidden-word selection."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ..core.config import WordsConfig
from ..core.constants import MAX_RANDOM_DRAWS, ErrorKind
from ..core.exceptions import ConfigurationError
from ..core.models import Failure, SourcingResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

NOT_ENOUGH_RANDOM = "Not enough words in dictionary."
NOT_ENOUGH_SEQUENTIAL = "dictionary does not contain enough words to fulfill your request"


def load_word_list(path: Path | str) -> List[str]:
    """Read words from a file, one entry per line.

    Blank lines and ``#`` comments are skipped; surrounding whitespace is
    stripped. Case is left untouched, the puzzle configuration applies it.
    """

    source = Path(path)
    if not source.exists():
        raise ConfigurationError(f"Missing word list: {source}")
    entries: List[str] = []
    for line in source.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    LOGGER.info("Loaded %s words from %s", len(entries), source)
    return entries


def word_criteria(word: Any, chosen: Sequence[str], min_length: int, max_length: int) -> bool:
    """Whether ``word`` may join ``chosen``: a non-empty string not picked
    yet, with ``min_length <= len(word) <= max_length``."""

    return (
        isinstance(word, str)
        and len(word) > 0
        and word not in chosen
        and min_length <= len(word) <= max_length
    )


def random_selection(config: WordsConfig, rng: Optional[random.Random] = None) -> SourcingResult:
    """Draw uniformly random dictionary entries until ``amount`` qualify.

    The whole selection gets :data:`MAX_RANDOM_DRAWS` draws, accepted ones
    included.
    """

    rng = rng or random.Random()
    words: List[str] = []
    if not config.dictionary:
        return SourcingResult(words, Failure(ErrorKind.SOURCING, NOT_ENOUGH_RANDOM))

    draws = MAX_RANDOM_DRAWS
    while len(words) < config.amount:
        word = rng.choice(config.dictionary)
        if word_criteria(word, words, config.min_length, config.max_length):
            words.append(word)
        draws -= 1
        if len(words) < config.amount and not draws:
            LOGGER.error("Random sourcing gave up after %s draws (%s/%s words)",
                         MAX_RANDOM_DRAWS, len(words), config.amount)
            return SourcingResult(words, Failure(ErrorKind.SOURCING, NOT_ENOUGH_RANDOM))
    return SourcingResult(words)


def sequential_selection(config: WordsConfig) -> SourcingResult:
    """Take qualifying entries in dictionary order."""

    words: List[str] = []
    for word in config.dictionary:
        if len(words) == config.amount:
            break
        if word_criteria(word, words, config.min_length, config.max_length):
            words.append(word)
    if len(words) < config.amount:
        LOGGER.error("Sequential sourcing exhausted the dictionary (%s/%s words)",
                     len(words), config.amount)
        return SourcingResult(words, Failure(ErrorKind.SOURCING, NOT_ENOUGH_SEQUENTIAL))
    return SourcingResult(words)


def select_words(config: WordsConfig, rng: Optional[random.Random] = None) -> SourcingResult:
    if config.random:
        return random_selection(config, rng)
    return sequential_selection(config)


__all__ = [
    "load_word_list",
    "word_criteria",
    "random_selection",
    "sequential_selection",
    "select_words",
]
