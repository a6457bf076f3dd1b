"""Word search puzzle generator and play-state engine.

This package exposes the public API surface via:

- ``wordsearch.engine.game.Wordsearch``: owns one puzzle, generates boards and
  applies player selections.
- ``wordsearch.engine.generator.WordsearchGenerator``: bounded-retry board
  generation for a configuration.
- ``wordsearch.core.config``: pydantic configuration models and merging.
"""

from .core.config import WordsConfig, WordsearchConfig, load_config, merge_config, validate_config
from .core.constants import CaseMode, Direction, ErrorKind
from .core.exceptions import ConfigurationError, GenerationError, SourcingError, WordsearchError
from .core.models import Cell, PlacedWord, Position
from .engine.game import Wordsearch, WordsearchOutput
from .engine.generator import GenerationResult, WordsearchGenerator

__all__ = [
    "Wordsearch",
    "WordsearchOutput",
    "WordsearchGenerator",
    "GenerationResult",
    "WordsConfig",
    "WordsearchConfig",
    "load_config",
    "merge_config",
    "validate_config",
    "CaseMode",
    "Direction",
    "ErrorKind",
    "Cell",
    "PlacedWord",
    "Position",
    "WordsearchError",
    "ConfigurationError",
    "SourcingError",
    "GenerationError",
]

__version__ = "0.1.0"
