"""Dictionary-backed English syllable counting with a heuristic fallback."""

from .core import (
    DEFAULT_COUNTER,
    InvalidWordError,
    SyllableCounter,
    count_syllables,
    estimate_syllable_count,
    is_countable,
    load_dictionary,
    normalize_word,
    parse_dictionary,
)
from .utils import configure_logging

__version__ = "0.1.0"

__all__ = [
    "SyllableCounter",
    "DEFAULT_COUNTER",
    "count_syllables",
    "InvalidWordError",
    "normalize_word",
    "is_countable",
    "estimate_syllable_count",
    "load_dictionary",
    "parse_dictionary",
    "configure_logging",
]
