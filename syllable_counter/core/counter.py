"""Syllable counting engine combining dictionary, cache and heuristic tiers."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..utils.observability import create_counter, get_logger
from .dictionary import load_dictionary
from .heuristic import estimate_syllable_count
from .normalization import InvalidWordError, normalize_word

__all__ = [
    "SyllableCounter",
    "DEFAULT_COUNTER",
    "count_syllables",
]


INVALID_WORD_COUNT = 0

_LOG_PREVIEW_LENGTH = 64

_metric_lookups = create_counter(
    "syllable_counter_lookups_total",
    "Syllable count lookups grouped by the tier that answered them.",
    label_names=("tier",),
)


class SyllableCounter:
    """Counts syllables using a static dictionary with a heuristic fallback.

    Words are normalised first; the dictionary is consulted before the
    per-instance memoisation cache, and only a miss in both runs the
    heuristic, whose result is cached for later calls. The cache only ever
    grows. Instances are not safe for concurrent use; give each thread its
    own counter (see :meth:`copy`) over the same shared dictionary.
    """

    def __init__(self, dictionary: Optional[Mapping[str, int]] = None) -> None:
        self._dictionary: Mapping[str, int] = (
            dictionary if dictionary is not None else load_dictionary()
        )
        self._cache: Dict[str, int] = {}
        self._logger = get_logger(__name__).bind(component="syllable_counter")

    @property
    def cache_size(self) -> int:
        """Number of heuristic results memoised so far."""

        return len(self._cache)

    @property
    def dictionary_size(self) -> int:
        return len(self._dictionary)

    def count(self, word: Any) -> int:
        """Count the syllables in ``word``.

        Returns ``0`` when the input is not a countable word (empty, digits or
        non-ASCII letters after trimming punctuation). Every valid word counts
        at least one syllable, so ``0`` only ever means rejected input.
        """

        normalized = normalize_word(word)
        if normalized is None:
            self._record_invalid(word)
            return INVALID_WORD_COUNT
        return self._lookup(normalized)

    def count_strict(self, word: Any) -> int:
        """Like :meth:`count` but raise :class:`InvalidWordError` on bad input."""

        normalized = normalize_word(word)
        if normalized is None:
            self._record_invalid(word)
            raise InvalidWordError(word)
        return self._lookup(normalized)

    def copy(self) -> "SyllableCounter":
        """Return a counter sharing this dictionary with a copy of the cache."""

        duplicate = SyllableCounter(self._dictionary)
        duplicate._cache = dict(self._cache)
        return duplicate

    def _lookup(self, word: str) -> int:
        known = self._dictionary.get(word)
        if known is not None:
            _metric_lookups.labels(tier="dictionary").inc()
            return known

        cached = self._cache.get(word)
        if cached is not None:
            _metric_lookups.labels(tier="cache").inc()
            return cached

        estimated = estimate_syllable_count(word)
        self._cache[word] = estimated
        _metric_lookups.labels(tier="heuristic").inc()
        self._logger.debug(
            "Heuristic syllable estimate",
            context={"word": word, "syllables": estimated, "cache_size": len(self._cache)},
        )
        return estimated

    def _record_invalid(self, word: Any) -> None:
        _metric_lookups.labels(tier="invalid").inc()
        preview = repr(word)
        if len(preview) > _LOG_PREVIEW_LENGTH:
            preview = preview[:_LOG_PREVIEW_LENGTH] + "..."
        self._logger.debug("Rejected uncountable word", context={"word": preview})


DEFAULT_COUNTER = SyllableCounter()


def count_syllables(word: Any) -> int:
    """Count syllables in ``word`` with the shared :data:`DEFAULT_COUNTER`."""

    return DEFAULT_COUNTER.count(word)
