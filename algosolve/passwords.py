"""Judging whether a lowercase password is pleasant to pronounce."""

from __future__ import annotations

from itertools import groupby

_VOWELS = frozenset("aeiou")
_DOUBLES_ALLOWED = frozenset("eo")


def has_vowel(word: str) -> bool:
    """Whether the word contains a vowel."""
    return any(c in _VOWELS for c in word)


def has_no_triple(word: str) -> bool:
    """Whether no three vowels or three consonants appear in a row."""
    return all(
        sum(1 for _ in run) < 3
        for _, run in groupby(word, key=lambda c: c in _VOWELS)
    )


def has_no_double(word: str) -> bool:
    """Whether no letter repeats back to back, except 'ee' and 'oo'."""
    return not any(a == b and a not in _DOUBLES_ALLOWED for a, b in zip(word, word[1:]))


def is_acceptable(word: str) -> bool:
    """Whether the word passes all three rules."""
    return has_vowel(word) and has_no_triple(word) and has_no_double(word)


def verdict(word: str) -> str:
    """The judgement line for the word."""
    if is_acceptable(word):
        return f"<{word}> is acceptable."
    return f"<{word}> is not acceptable."