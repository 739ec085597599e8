"""Canonicalisation of raw caller text into dictionary lookup keys."""

from __future__ import annotations

import string
from typing import Any, Optional

__all__ = ["normalize_word", "is_countable", "InvalidWordError"]


_PUNCTUATION = string.punctuation
_ASCII_LOWERCASE = frozenset(string.ascii_lowercase)
_ASCII_UPPER_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class InvalidWordError(ValueError):
    """Raised by strict lookups when the input is not a countable word."""

    def __init__(self, word: Any) -> None:
        super().__init__(f"Not a countable word: {word!r}")
        self.word = word


def normalize_word(raw: Any) -> Optional[str]:
    """Return the canonical lowercase form of ``raw`` or ``None`` if invalid.

    Leading and trailing ASCII punctuation is stripped, ASCII letters are
    lowercased, and the remainder must be a non-empty run of ``a``-``z``.
    Whitespace is not punctuation, so padded input is rejected.
    """

    if not isinstance(raw, str):
        return None

    # Only ASCII letters are folded; anything else survives and fails below.
    candidate = raw.strip(_PUNCTUATION).translate(_ASCII_UPPER_TO_LOWER)
    if not candidate:
        return None
    if any(char not in _ASCII_LOWERCASE for char in candidate):
        return None
    return candidate


def is_countable(raw: Any) -> bool:
    """Return ``True`` when ``raw`` normalises to a countable word."""

    return normalize_word(raw) is not None
