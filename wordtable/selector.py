"""Frequency-biased letter selection.

Letters are split around the alphabet's mean frequency. Each draw flips a
weighted coin to decide which half to pick from, then picks uniformly
inside that half.
"""

from __future__ import annotations

import secrets
from typing import Callable

from wordtable.alphabet import Alphabet
from wordtable.errors import ConfigurationError, EmptyPartitionError

RandomSource = Callable[[], float]

_system_random = secrets.SystemRandom()


def default_random_source() -> RandomSource:
    """Cryptographically strong floats in [0, 1)."""
    return _system_random.random


def tile_label(letter: str) -> str:
    """Uppercase a letter for display; Q always travels with its U."""
    label = letter.upper()
    return "Qu" if label == "Q" else label


def average_frequency(alphabet: Alphabet) -> float:
    if not alphabet.letters:
        raise ConfigurationError(f"Alphabet {alphabet.code!r} has no letters")
    return sum(stat.frequency for stat in alphabet.letters) / len(alphabet.letters)


def partition_letters(alphabet: Alphabet) -> tuple[list[str], list[str]]:
    """Split an alphabet into (below_average, above_average) tile labels.

    A letter exactly at the average counts as above average.
    """
    average = average_frequency(alphabet)
    below = [tile_label(s.letter) for s in alphabet.letters if s.frequency < average]
    above = [tile_label(s.letter) for s in alphabet.letters if s.frequency >= average]
    return below, above


def _pick(labels: list[str], random_source: RandomSource) -> str:
    index = int(random_source() * len(labels))
    return labels[min(index, len(labels) - 1)]


def select_letter(
    alphabet: Alphabet,
    frequent_word_likelihood: float,
    random_source: RandomSource | None = None,
) -> str:
    """Draw one tile label from *alphabet*.

    A random value above *frequent_word_likelihood* picks from the letters
    below the mean frequency; anything else picks from the letters at or
    above it. Raises EmptyPartitionError if the chosen half is empty.
    """
    if random_source is None:
        random_source = default_random_source()

    below, above = partition_letters(alphabet)

    if random_source() > frequent_word_likelihood:
        name, labels = "below_average", below
    else:
        name, labels = "above_average", above

    if not labels:
        raise EmptyPartitionError(name, alphabet.code)
    return _pick(labels, random_source)
