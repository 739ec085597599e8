"""Loading of the static word -> syllable-count dictionary."""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from ..utils.observability import get_logger

__all__ = [
    "DICTIONARY_PATH_ENV",
    "parse_dictionary",
    "load_dictionary",
    "clear_dictionary_cache",
]


DICTIONARY_PATH_ENV = "SYLLABLE_COUNTER_DICTIONARY"

_PACKAGED_SOURCE = "<packaged>"
_COMMENT_PREFIX = ";;;"

_logger = get_logger(__name__, component="syllable_dictionary")


def _is_ascii_word(word: str) -> bool:
    return word.isascii() and word.isalpha()


def parse_dictionary(lines: Iterable[str]) -> Dict[str, int]:
    """Parse ``word count`` lines into a dictionary.

    Blank lines and lines starting with ``;;;`` are ignored. Lines with the
    wrong number of fields, non-alphabetic words or non-positive counts are
    skipped. The first entry for a word wins.
    """

    entries: Dict[str, int] = {}
    skipped = 0

    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith(_COMMENT_PREFIX):
            continue

        parts = entry.split()
        if len(parts) != 2:
            skipped += 1
            continue

        raw_word, raw_count = parts
        word = raw_word.lower()
        if not _is_ascii_word(word):
            skipped += 1
            continue

        try:
            count = int(raw_count)
        except ValueError:
            skipped += 1
            continue
        if count <= 0:
            skipped += 1
            continue

        entries.setdefault(word, count)

    if skipped:
        _logger.debug(
            "Skipped malformed dictionary lines",
            context={"skipped": skipped, "entries": len(entries)},
        )
    return entries


def _read_lines(source: str) -> Optional[list[str]]:
    try:
        if source == _PACKAGED_SOURCE:
            data_path = (
                resources.files("syllable_counter")
                .joinpath("data")
                .joinpath("syllables.txt")
            )
            with data_path.open("r", encoding="utf-8") as handle:
                return handle.readlines()
        with open(source, "r", encoding="utf-8") as handle:
            return handle.readlines()
    except (OSError, UnicodeDecodeError) as error:
        _logger.warning(
            "Syllable dictionary unavailable; using heuristic only",
            context={"source": source, "error": str(error)},
        )
        return None


@lru_cache(maxsize=None)
def _load_source(source: str) -> Mapping[str, int]:
    lines = _read_lines(source)
    if lines is None:
        return MappingProxyType({})

    entries = parse_dictionary(lines)
    _logger.info(
        "Syllable dictionary loaded",
        context={"source": source, "entries": len(entries)},
    )
    return MappingProxyType(entries)


def _resolve_source(path: Optional[Path | str]) -> str:
    if path is not None:
        return str(Path(path))
    env_path = os.getenv(DICTIONARY_PATH_ENV)
    if env_path:
        return str(Path(env_path))
    return _PACKAGED_SOURCE


def load_dictionary(path: Optional[Path | str] = None) -> Mapping[str, int]:
    """Return the read-only syllable dictionary.

    ``path`` takes precedence, then the ``SYLLABLE_COUNTER_DICTIONARY``
    environment variable, then the data file shipped with the package. Each
    source is read once per process and the same mapping object is returned
    to every caller. An unreadable source yields an empty mapping.
    """

    return _load_source(_resolve_source(path))


def clear_dictionary_cache() -> None:
    """Forget previously loaded dictionaries so the next load rereads disk."""

    _load_source.cache_clear()
