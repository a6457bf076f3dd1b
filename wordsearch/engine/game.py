"""Puzzle facade: configuration, generation and play entry points."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from ..core.config import ConfigInput, WordsearchConfig, merge_config, validate_config
from ..core.constants import MAX_GENERATION_ATTEMPTS
from ..core.exceptions import ConfigurationError, WordsearchError, error_for
from ..core.models import PlacedWord
from ..data.normalization import apply_case
from ..utils.logger import get_logger, set_debug
from .board import Board
from .generator import WordsearchGenerator
from .registry import WordRegistry
from .selection import SelectionController


LOGGER = get_logger(__name__)


@dataclass
class WordsearchOutput:
    """Publicly visible puzzle state."""

    board: Optional[Board] = None
    registry: Optional[WordRegistry] = None
    current_word: str = ""
    end_game: bool = False
    error: str = ""
    attempts: int = 0

    @property
    def words(self) -> List[PlacedWord]:
        return list(self.registry) if self.registry is not None else []

    def to_jsonable(self) -> dict:
        return {
            "board": self.board.to_jsonable() if self.board is not None else [],
            "words": self.registry.to_jsonable() if self.registry is not None else [],
            "current_word": self.current_word,
            "end_game": self.end_game,
            "error": self.error,
        }


@dataclass
class _PuzzleState:
    board: Board
    registry: WordRegistry
    selection: SelectionController


class Wordsearch:
    """One puzzle and the selection of the player solving it.

    Every instance owns its board, word registry and selection context, so
    several puzzles can live side by side. Operations are synchronous and
    not thread-safe.
    """

    def __init__(
        self,
        config: Optional[ConfigInput] = None,
        seed: Optional[int] = None,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        self.rng = random.Random(seed)
        self.generator = WordsearchGenerator(rng=self.rng, max_attempts=max_attempts)
        self.config = WordsearchConfig()
        self.output = WordsearchOutput()
        self._state: Optional[_PuzzleState] = None
        if config is not None:
            self.set_config(config)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_config(self, config: Optional[ConfigInput] = None) -> bool:
        """Merge ``config`` over the current configuration.

        Re-cases the current board letters and word list when a puzzle is
        already loaded. Returns whether anything was merged.
        """

        self.config = merge_config(self.config, config)
        self._apply_config()
        return config is not None

    def get_config(self) -> WordsearchConfig:
        return self.config

    def _apply_config(self) -> None:
        set_debug(self.config.words_config.debug)
        self._apply_case()

    def _apply_case(self) -> None:
        if self._state is None:
            return
        case = self.config.case
        self._state.board.set_field_across_board("letter", lambda letter: apply_case(letter, case))
        self._state.registry.recase(case)
        selection = self._state.selection.context
        selection.word = apply_case(selection.word, case)
        self._sync_output()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, config: Optional[ConfigInput] = None) -> WordsearchOutput:
        """Build a new puzzle, replacing the current one only on success.

        Raises a :class:`WordsearchError` subclass for fatal failures after
        recording the message in ``output.error``. ``config`` is only merged
        into the current configuration when it passes validation.
        """

        try:
            candidate = merge_config(self.config, config)
        except WordsearchError as exc:
            self.output.error = exc.message
            raise
        invalid = validate_config(candidate)
        if invalid is not None:
            self.output.error = invalid.message
            raise ConfigurationError(invalid.message)
        self.config = candidate
        self._apply_config()

        result = self.generator.generate(self.config)
        if not result.ok:
            self.output.error = result.failure.message
            raise error_for(result.failure.kind, result.failure.message)

        selection = SelectionController(result.board, self.config.allowed_directions)
        self._state = _PuzzleState(board=result.board, registry=result.registry, selection=selection)
        self.output = WordsearchOutput(board=result.board, registry=result.registry, attempts=result.attempts)
        self.reset_current_selection()
        return self.output

    def get_output(self) -> WordsearchOutput:
        return self.output

    @property
    def board(self) -> Optional[Board]:
        return self._state.board if self._state else None

    @property
    def registry(self) -> Optional[WordRegistry]:
        return self._state.registry if self._state else None

    @property
    def selection(self) -> Optional[SelectionController]:
        return self._state.selection if self._state else None

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------
    def select_cell(self, pos: Tuple[int, int]) -> bool:
        if self._state is None:
            return False
        accepted = self._state.selection.select_cell(pos)
        self._sync_output()
        return accepted

    def highlight_cell(self, pos: Tuple[int, int]) -> bool:
        if self._state is None:
            return False
        return self._state.selection.highlight_cell(pos)

    def unhighlight_board(self) -> None:
        if self._state is not None:
            self._state.selection.unhighlight_board()

    def reset_current_selection(self) -> None:
        if self._state is None:
            return
        self._state.selection.reset_current_selection()
        self._sync_output()

    def show_word(self, word: str, submit: bool = False) -> bool:
        """Discover ``word`` or, with ``submit``, claim it as found."""

        if self._state is None:
            return False
        exists = self._state.registry.show_word(word, submit=submit)
        self.check_end()
        return exists

    def discover_word(self, word: str) -> bool:
        return self.show_word(word, submit=False)

    def submit_current_word(self) -> bool:
        """Score the current selection, then start a new one."""

        if self._state is None:
            return False
        won = self.show_word(self._state.selection.current_word, submit=True)
        if won:
            LOGGER.info("Word '%s' found", self._state.selection.current_word)
        self.reset_current_selection()
        return won

    def check_end(self) -> bool:
        if self._state is None:
            return False
        self.output.end_game = self._state.registry.is_complete()
        return self.output.end_game

    def _sync_output(self) -> None:
        if self._state is not None:
            self.output.current_word = self._state.selection.current_word

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def console_print_board(self, stream: Optional[TextIO] = None) -> None:
        """Print a plain ``|A|B|C|`` rendering of the board."""

        stream = stream or sys.stdout
        if self._state is None:
            return
        for row in self._state.board.rows():
            print("".join(f"|{cell.letter or ' '}" for cell in row) + "|", file=stream)
