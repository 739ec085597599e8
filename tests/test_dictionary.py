from __future__ import annotations

import logging
from pathlib import Path

import pytest

from syllable_counter.core import SyllableCounter
from syllable_counter.core.dictionary import (
    DICTIONARY_PATH_ENV,
    load_dictionary,
    parse_dictionary,
)


def test_parse_dictionary_skips_comments_and_malformed_lines():
    lines = [
        ";;; header comment",
        "",
        "Ohio 3",
        "table 2",
        "broken",
        "too many fields 2",
        "d0g 1",
        "zero 0",
        "negative -2",
        "notanumber two",
        "ohio 9",
    ]

    assert parse_dictionary(lines) == {"ohio": 3, "table": 2}


def test_packaged_dictionary_is_read_only(fresh_dictionary_cache, monkeypatch):
    monkeypatch.delenv(DICTIONARY_PATH_ENV, raising=False)

    dictionary = load_dictionary()

    assert dictionary["ohio"] == 3
    assert dictionary["because"] == 2
    assert all(count > 0 for count in dictionary.values())
    assert all(word.isascii() and word.isalpha() and word.islower() for word in dictionary)
    with pytest.raises(TypeError):
        dictionary["ohio"] = 2  # type: ignore[index]


def test_dictionary_is_shared_between_loads(fresh_dictionary_cache, monkeypatch):
    monkeypatch.delenv(DICTIONARY_PATH_ENV, raising=False)

    assert load_dictionary() is load_dictionary()
    assert SyllableCounter()._dictionary is SyllableCounter()._dictionary


def test_explicit_path_overrides_packaged_data(tmp_path: Path, fresh_dictionary_cache):
    data_path = tmp_path / "custom.txt"
    data_path.write_text(";;; custom\nzorblax 5\n", encoding="utf-8")

    dictionary = load_dictionary(data_path)
    counter = SyllableCounter(dictionary)

    assert dict(dictionary) == {"zorblax": 5}
    assert counter.count("Zorblax") == 5


def test_environment_variable_selects_dictionary(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fresh_dictionary_cache
) -> None:
    data_path = tmp_path / "env.txt"
    data_path.write_text("ohio 11\n", encoding="utf-8")
    monkeypatch.setenv(DICTIONARY_PATH_ENV, str(data_path))

    assert SyllableCounter().count("ohio") == 11


def test_missing_dictionary_falls_back_to_heuristic(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, fresh_dictionary_cache
) -> None:
    caplog.set_level(logging.WARNING, logger="syllable_counter.core.dictionary")

    dictionary = load_dictionary(tmp_path / "missing.txt")
    counter = SyllableCounter(dictionary)

    assert len(dictionary) == 0
    assert counter.count("ohio") == 2
    assert any(
        "Syllable dictionary unavailable" in record.getMessage() for record in caplog.records
    )
