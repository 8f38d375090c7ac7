"""Word table: a rows x columns grid of frequency-biased letters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wordtable.config import TableConfig, validate_dimensions
from wordtable.constants import DEFAULT_SURFACE_SIZE
from wordtable.renderer import render_grid
from wordtable.selector import RandomSource, default_random_source, select_letter

if TYPE_CHECKING:
    from wordtable.surface import Surface

logger = logging.getLogger(__name__)

Grid = list[list[str]]


def generate_row(config: TableConfig, random_source: RandomSource) -> list[str]:
    return [
        select_letter(config.alphabet, config.frequent_word_likelihood, random_source)
        for _ in range(config.columns)
    ]


def generate_grid(config: TableConfig, random_source: RandomSource | None = None) -> Grid:
    """Build a fresh grid, one independent draw per cell."""
    validate_dimensions(config.rows, config.columns)
    if random_source is None:
        random_source = default_random_source()
    grid = [generate_row(config, random_source) for _ in range(config.rows)]
    logger.debug("Generated %dx%d grid from alphabet %s",
                 config.rows, config.columns, config.alphabet.code)
    return grid


class WordTable:
    """Owns one table's config and its current grid of letters."""

    def __init__(self, config: TableConfig, random_source: RandomSource | None = None) -> None:
        self.config = config
        self.random_source = random_source
        self.rows: Grid = []

    def fill_with_letters(self) -> Grid:
        """Replace the current grid with a newly generated one."""
        self.rows = generate_grid(self.config, self.random_source)
        return self.rows

    def draw(self, surface: Surface,
             size: tuple[float, float] = DEFAULT_SURFACE_SIZE) -> None:
        render_grid(self.rows, self.config, surface, size)

    def letters(self) -> list[str]:
        """All letters of the current grid in row-major order."""
        return [letter for row in self.rows for letter in row]
