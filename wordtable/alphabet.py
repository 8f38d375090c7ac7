"""Alphabets: ordered letter statistics used to pick tile letters."""

from __future__ import annotations

from dataclasses import dataclass

from wordtable.constants import (
    ENGLISH_LETTER_FREQUENCY,
    ENGLISH_VOWELS,
    PERSIAN_LETTERS,
    PERSIAN_VOWELS,
    UNIFORM_FREQUENCY,
)
from wordtable.errors import ConfigurationError


@dataclass(frozen=True)
class LetterStat:
    """One letter of an alphabet and how often it occurs."""
    letter: str
    frequency: float
    is_vowel: bool = False


@dataclass(frozen=True)
class Alphabet:
    code: str
    letters: tuple[LetterStat, ...]

    def __len__(self) -> int:
        return len(self.letters)

    def vowels(self) -> list[str]:
        return [stat.letter for stat in self.letters if stat.is_vowel]


def _english() -> Alphabet:
    letters = tuple(
        LetterStat(letter, frequency, letter in ENGLISH_VOWELS)
        for letter, frequency in ENGLISH_LETTER_FREQUENCY.items()
    )
    return Alphabet("en-US", letters)


def _persian() -> Alphabet:
    letters = tuple(
        LetterStat(letter, UNIFORM_FREQUENCY, letter in PERSIAN_VOWELS)
        for letter in PERSIAN_LETTERS
    )
    return Alphabet("fa-IR", letters)


ENGLISH = _english()
PERSIAN = _persian()

ALPHABETS: dict[str, Alphabet] = {
    ENGLISH.code: ENGLISH,
    PERSIAN.code: PERSIAN,
}


def get_alphabet(code: str) -> Alphabet:
    """Look up a registered alphabet by its code, e.g. ``"en-US"``."""
    try:
        return ALPHABETS[code]
    except KeyError:
        known = ", ".join(sorted(ALPHABETS))
        raise ConfigurationError(
            f"Unknown alphabet {code!r} (known: {known})"
        ) from None
