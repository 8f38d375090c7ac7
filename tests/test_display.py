"""Tests for terminal rendering of a word table."""

from __future__ import annotations

from wordtable.display import print_grid, print_summary, render_grid_text


class TestRenderGridText:
    def test_empty(self) -> None:
        assert render_grid_text([]) == "(empty grid)"
        assert render_grid_text([[]]) == "(empty grid)"

    def test_single_letters(self) -> None:
        text = render_grid_text([["A", "B"], ["C", "D"]])
        assert text.splitlines() == [
            "+---+---+",
            "| A | B |",
            "+---+---+",
            "| C | D |",
            "+---+---+",
        ]

    def test_qu_widens_columns(self) -> None:
        text = render_grid_text([["Qu", "E"]])
        assert text.splitlines() == [
            "+----+----+",
            "| Qu | E  |",
            "+----+----+",
        ]


class TestPrinting:
    def test_print_grid(self, capsys) -> None:
        print_grid([["A"]])
        out = capsys.readouterr().out
        assert "| A |" in out

    def test_print_summary_counts_vowels(self, capsys) -> None:
        print_summary([["A", "Qu"], ["E", "T"]], list("aeiou"))
        assert "4 tiles, 2 vowels" in capsys.readouterr().out
