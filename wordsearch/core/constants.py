"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Compass directions a word can run in, plus the ``NONE`` sentinel."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP_RIGHT = "UP_RIGHT"
    UP_LEFT = "UP_LEFT"
    DOWN_RIGHT = "DOWN_RIGHT"
    DOWN_LEFT = "DOWN_LEFT"
    NONE = "NONE"


class CaseMode(str, Enum):
    """Letter case applied to dictionaries, placed words and filler letters."""

    UPPER = "UPPER"
    LOWER = "LOWER"


class ErrorKind(str, Enum):
    """Failure categories produced while generating a puzzle."""

    CONFIGURATION = "CONFIGURATION"
    SOURCING = "SOURCING"
    PLACEMENT = "PLACEMENT"
    VALIDATION = "VALIDATION"
    GENERATION = "GENERATION"


# (dx, dy) where x is the row and y the column.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP_RIGHT: (-1, 1),
    Direction.UP_LEFT: (-1, -1),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.NONE: (0, 0),
}

INVERSE_DIRECTIONS: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP_RIGHT: Direction.DOWN_LEFT,
    Direction.UP_LEFT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.UP_LEFT,
    Direction.DOWN_LEFT: Direction.UP_RIGHT,
    Direction.NONE: Direction.NONE,
}

# Scan order used when resolving a direction between two cells.
ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.DOWN,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
    Direction.UP,
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.LEFT,
    Direction.RIGHT,
)

# Natural reading directions; the rest are opt-in.
DEFAULT_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.DOWN,
    Direction.RIGHT,
    Direction.DOWN_RIGHT,
)

ALPHABET = string.ascii_lowercase

MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 50
MIN_WORD_AMOUNT = 1
MAX_WORD_AMOUNT = 50
MAX_GENERATION_ATTEMPTS = 50
MAX_RANDOM_DRAWS = 100
