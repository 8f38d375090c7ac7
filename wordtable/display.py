"""Terminal rendering of a word table."""

from __future__ import annotations

from typing import Sequence


def render_grid_text(grid: Sequence[Sequence[str]]) -> str:
    """Render the grid as a string for terminal display."""
    if not grid or not any(grid):
        return "(empty grid)"

    columns = max(len(row) for row in grid)
    # Wide enough for "Qu"
    width = max(len(letter) for row in grid for letter in row)

    lines: list[str] = []
    border = "+" + "+".join("-" * (width + 2) for _ in range(columns)) + "+"
    lines.append(border)
    for row in grid:
        cells = [f" {letter:<{width}} " for letter in row]
        lines.append("|" + "|".join(cells) + "|")
        lines.append(border)

    return "\n".join(lines)


def print_grid(grid: Sequence[Sequence[str]]) -> None:
    """Print the grid to the terminal."""
    print("\n" + render_grid_text(grid))


def print_summary(grid: Sequence[Sequence[str]], vowels: Sequence[str]) -> None:
    """Print how many tiles carry a vowel."""
    tiles = [letter for row in grid for letter in row]
    vowel_set = {v.upper() for v in vowels}
    count = sum(1 for letter in tiles if letter[0].upper() in vowel_set)
    print(f"\n{len(tiles)} tiles, {count} vowels")
