"""Exceptions raised while building or drawing a word table."""

from __future__ import annotations


class WordTableError(Exception):
    """Base class for word table failures."""


class ConfigurationError(WordTableError, ValueError):
    """Grid dimensions, likelihood or style values are unusable."""


class EmptyPartitionError(WordTableError):
    """The frequency partition chosen for a draw has no letters.

    Indicates a malformed alphabet, e.g. one where every letter shares
    the same frequency and nothing falls below the average.
    """

    def __init__(self, partition: str, alphabet_code: str) -> None:
        self.partition = partition
        self.alphabet_code = alphabet_code
        super().__init__(
            f"No letters in the {partition.replace('_', ' ')} partition "
            f"of alphabet {alphabet_code!r}"
        )
