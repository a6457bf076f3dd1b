"""Shared helpers for letter-case normalization."""

from __future__ import annotations

import random
from typing import Iterable, List

from ..core.constants import ALPHABET, CaseMode


def apply_case(text: str, case: CaseMode) -> str:
    """Return ``text`` in the configured case; empty input stays empty."""

    if not text:
        return ""
    if case == CaseMode.UPPER:
        return text.upper()
    return text.lower()


def apply_case_all(words: Iterable[str], case: CaseMode) -> List[str]:
    return [apply_case(word, case) if isinstance(word, str) else word for word in words]


def alphabet_for(case: CaseMode) -> str:
    return apply_case(ALPHABET, case)


def random_char(rng: random.Random, case: CaseMode) -> str:
    """Pick a uniformly random a-z letter in ``case``."""

    return rng.choice(alphabet_for(case))


__all__ = ["apply_case", "apply_case_all", "alphabet_for", "random_char"]
