import pytest

from syllable_counter.core.normalization import (
    InvalidWordError,
    is_countable,
    normalize_word,
)


def test_trailing_and_leading_punctuation_is_stripped():
    assert normalize_word("dog!!!!!") == "dog"
    assert normalize_word("\"dog,\"") == "dog"
    assert normalize_word("...(dog)?") == "dog"
    assert normalize_word("~`dog@#$%^&*_+=|\\{}[]<>/") == "dog"


def test_ascii_letters_are_lowercased():
    assert normalize_word("Norway") == "norway"
    assert normalize_word("OHIO") == "ohio"


@pytest.mark.parametrize(
    "raw",
    ["", " ", "!!!", "d0g", "4dog", "dog123", "don't", "well-known", " dog", "dog "],
)
def test_invalid_words_are_rejected(raw):
    assert normalize_word(raw) is None
    assert is_countable(raw) is False


def test_non_ascii_letters_are_rejected():
    assert normalize_word("café") is None
    assert normalize_word("ÉCOLE") is None
    assert normalize_word("straße") is None


def test_non_string_input_is_rejected():
    assert normalize_word(None) is None
    assert normalize_word(b"dog") is None
    assert normalize_word(42) is None


def test_normalization_is_idempotent():
    once = normalize_word("?!Ostentatious...")
    assert once == "ostentatious"
    assert normalize_word(once) == once


def test_invalid_word_error_keeps_input():
    error = InvalidWordError("d0g")
    assert isinstance(error, ValueError)
    assert error.word == "d0g"
    assert "d0g" in str(error)
