"""Shared fixtures for word table tests."""

from __future__ import annotations

from itertools import cycle

import pytest

from wordtable.alphabet import Alphabet, LetterStat
from wordtable.config import TableConfig


class ScriptedSource:
    """Random source that replays a fixed sequence of values forever."""

    def __init__(self, *values: float) -> None:
        self._values = cycle(values)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return next(self._values)


class RecordingSurface:
    """Surface that records every drawing call and the style in effect."""

    def __init__(self) -> None:
        self.fill_style = "black"
        self.stroke_style = "black"
        self.line_width: float = 1
        self.font = "10px sans-serif"
        self.calls: list[tuple] = []

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("fill_rect", x, y, width, height, self.fill_style))

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("stroke_rect", x, y, width, height,
                           self.stroke_style, self.line_width))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self.calls.append(("fill_text", text, x, y, self.fill_style, self.font))

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def abc_alphabet() -> Alphabet:
    """a:1, b:3, c:5: average 3, so B sits exactly on the boundary."""
    return Alphabet("abc", (
        LetterStat("a", 1.0, True),
        LetterStat("b", 3.0),
        LetterStat("c", 5.0),
    ))


@pytest.fixture
def flat_alphabet() -> Alphabet:
    """Every letter shares the same frequency."""
    return Alphabet("flat", (
        LetterStat("x", 2.0),
        LetterStat("y", 2.0),
        LetterStat("z", 2.0),
    ))


@pytest.fixture
def q_alphabet() -> Alphabet:
    """Q is the only rare letter."""
    return Alphabet("q", (
        LetterStat("q", 0.5),
        LetterStat("e", 10.0, True),
        LetterStat("t", 9.0),
    ))


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def small_config(abc_alphabet: Alphabet) -> TableConfig:
    return TableConfig(alphabet=abc_alphabet, rows=3, columns=3)


@pytest.fixture
def scripted() -> type[ScriptedSource]:
    """Factory for deterministic random sources: ``scripted(0.9, 0.0)``."""
    return ScriptedSource
