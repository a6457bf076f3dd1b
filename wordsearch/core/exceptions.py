"""Custom exception hierarchy for word search generation."""

from __future__ import annotations

from .constants import ErrorKind


class WordsearchError(Exception):
    """Base exception for fatal generator failures."""

    kind = ErrorKind.GENERATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(WordsearchError):
    """Raised when the puzzle configuration is malformed or out of range."""

    kind = ErrorKind.CONFIGURATION


class SourcingError(WordsearchError):
    """Raised when the dictionary cannot yield enough qualifying words."""

    kind = ErrorKind.SOURCING


class GenerationError(WordsearchError):
    """Raised when no board could be built within the attempt budget."""

    kind = ErrorKind.GENERATION


class IntegrityError(WordsearchError):
    """Raised by the validator when a generated board breaks an invariant."""

    kind = ErrorKind.VALIDATION


_ERRORS_BY_KIND = {
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.SOURCING: SourcingError,
    ErrorKind.GENERATION: GenerationError,
}


def error_for(kind: ErrorKind, message: str) -> WordsearchError:
    """Return the exception matching a fatal failure kind."""

    return _ERRORS_BY_KIND.get(kind, GenerationError)(message)
