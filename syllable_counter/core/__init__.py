"""Core syllable counting components."""

from .counter import DEFAULT_COUNTER, SyllableCounter, count_syllables
from .dictionary import (
    DICTIONARY_PATH_ENV,
    clear_dictionary_cache,
    load_dictionary,
    parse_dictionary,
)
from .heuristic import VOWELS, estimate_syllable_count
from .normalization import InvalidWordError, is_countable, normalize_word

__all__ = [
    "SyllableCounter",
    "DEFAULT_COUNTER",
    "count_syllables",
    "InvalidWordError",
    "normalize_word",
    "is_countable",
    "estimate_syllable_count",
    "VOWELS",
    "load_dictionary",
    "parse_dictionary",
    "clear_dictionary_cache",
    "DICTIONARY_PATH_ENV",
]
