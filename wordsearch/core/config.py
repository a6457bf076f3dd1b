"""Puzzle configuration models, merging and range validation.

Inputs usually arrive as loosely typed mappings (YAML files, CLI flags, web
forms), so the models coerce numeric text such as ``"15"`` into integers and
accept direction/case names in any letter case. Keys may be written either in
snake_case or in camelCase (``minLength``, ``allowedDirections``).
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .constants import (
    DEFAULT_DIRECTIONS,
    MAX_BOARD_SIZE,
    MAX_WORD_AMOUNT,
    MIN_BOARD_SIZE,
    MIN_WORD_AMOUNT,
    CaseMode,
    Direction,
    ErrorKind,
)
from .exceptions import ConfigurationError
from .models import Failure
from ..data.normalization import apply_case_all


COMMON_ENGLISH_WORDS = ["one", "two", "three", "four", "five", "six", "seven", "eight"]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WordsConfig(_ConfigModel):
    """How the hidden words are sourced from the dictionary."""

    amount: int = 8
    min_length: int = 2
    max_length: int = 8
    dictionary: List[str] = Field(default_factory=lambda: list(COMMON_ENGLISH_WORDS))
    case: CaseMode = CaseMode.UPPER
    random: bool = True
    debug: bool = False

    @field_validator("case", mode="before")
    @classmethod
    def _case_by_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def _dictionary_in_case(self) -> "WordsConfig":
        self.dictionary = apply_case_all(self.dictionary, self.case)
        return self


class WordsearchConfig(_ConfigModel):
    """Everything needed to generate a single puzzle."""

    size: int = 15
    words_config: WordsConfig = Field(default_factory=WordsConfig)
    allowed_directions: List[Direction] = Field(default_factory=lambda: list(DEFAULT_DIRECTIONS))
    allow_word_overlap: bool = True

    @field_validator("allowed_directions", mode="before")
    @classmethod
    def _directions_by_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple)):
            return [item.strip().upper() if isinstance(item, str) else item for item in value]
        return value

    @field_validator("allowed_directions")
    @classmethod
    def _no_sentinel(cls, value: List[Direction]) -> List[Direction]:
        if Direction.NONE in value:
            raise ValueError("NONE is not a placement direction")
        return value

    @property
    def case(self) -> CaseMode:
        return self.words_config.case


ConfigInput = Union[WordsearchConfig, Mapping[str, Any]]


def _snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively rewrite camelCase keys to the snake_case field names."""

    normalized: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = normalize_keys(value)
        normalized[_snake(str(key))] = value
    return normalized


def deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; lists are replaced whole."""

    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(data: Optional[ConfigInput] = None) -> WordsearchConfig:
    """Build a configuration from a mapping, raising :class:`ConfigurationError`."""

    return merge_config(WordsearchConfig(), data)


def merge_config(current: WordsearchConfig, partial: Optional[ConfigInput]) -> WordsearchConfig:
    """Overlay a (partial) configuration on ``current`` and re-validate it."""

    if partial is None:
        return current.model_copy(deep=True)
    if isinstance(partial, WordsearchConfig):
        partial = partial.model_dump(exclude_unset=True)
    if not isinstance(partial, Mapping):
        raise ConfigurationError(f"Invalid configuration: expected a mapping, got {type(partial).__name__}")

    merged = deep_merge(current.model_dump(), normalize_keys(partial))
    try:
        return WordsearchConfig.model_validate(merged)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from exc


def validate_config(config: WordsearchConfig) -> Optional[Failure]:
    """Range checks run before every generation; ``None`` when valid."""

    words = config.words_config
    message: Optional[str] = None
    if config.size < MIN_BOARD_SIZE or config.size > MAX_BOARD_SIZE:
        message = f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}"
    elif words.amount < MIN_WORD_AMOUNT or words.amount > MAX_WORD_AMOUNT:
        message = f"Amount of words must be between {MIN_WORD_AMOUNT} and {MAX_WORD_AMOUNT}."
    elif words.min_length > config.size:
        message = "Word min length must be less than board size."
    elif words.max_length > config.size:
        message = "Word max length should not be more than board size."
    elif len(words.dictionary) < words.amount:
        message = "Amount of words cannot be greater than available ones."
    elif not config.allowed_directions:
        message = "At least one direction must be specified"

    if message is None:
        return None
    return Failure(ErrorKind.CONFIGURATION, f"Invalid configuration: {message}")
