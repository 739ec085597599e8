"""Vowel-cluster syllable estimation for words missing from the dictionary."""

from __future__ import annotations

__all__ = ["VOWELS", "estimate_syllable_count"]


VOWELS = frozenset("aeiouy")


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in a normalised ``word``.

    Counts the starts of vowel clusters, drops one for a trailing silent
    ``e`` and restores it when the word ends in a consonant followed by
    ``le`` (``table``, ``little``). The result is never below one.
    """

    if not word:
        return 1

    syllable_count = 0

    if word[0] in VOWELS:
        syllable_count += 1

    for previous, current in zip(word, word[1:]):
        if current in VOWELS and previous not in VOWELS:
            syllable_count += 1

    if word.endswith("e"):
        syllable_count -= 1

    # word[-3] is the letter right before the "le" suffix.
    if word.endswith("le") and len(word) > 2 and word[-3] not in VOWELS:
        syllable_count += 1

    return max(1, syllable_count)
