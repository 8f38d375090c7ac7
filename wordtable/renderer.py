"""Paint a letter grid onto a drawing surface as bordered tiles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from wordtable.errors import ConfigurationError

if TYPE_CHECKING:
    from wordtable.config import TableConfig, TileStyle
    from wordtable.surface import Surface

logger = logging.getLogger(__name__)


def cell_size(surface_size: tuple[float, float], rows: int, columns: int) -> tuple[float, float]:
    width, height = surface_size
    return width / columns, height / rows


def text_position(origin_x: float, origin_y: float, cell_width: float,
                  cell_height: float, font_size: float) -> tuple[float, float]:
    """Baseline position for a tile label.

    Approximates centering: half a font size left of the cell's center and
    half a font size below it.
    """
    return (
        origin_x + cell_width / 2 - font_size / 2,
        origin_y + cell_height / 2 + font_size / 2,
    )


def _check_shape(grid: Sequence[Sequence[str]], rows: int, columns: int,
                 surface_size: tuple[float, float]) -> None:
    if rows <= 0 or columns <= 0:
        raise ConfigurationError(f"Grid must have positive dimensions, got {rows}x{columns}")
    width, height = surface_size
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Surface must have positive size, got {width}x{height}")
    if len(grid) != rows or any(len(row) != columns for row in grid):
        raise ConfigurationError(
            f"Grid shape does not match config ({rows}x{columns}); "
            "fill the table before drawing it"
        )


def draw_tile(surface: Surface, style: TileStyle, letter: str,
              x: float, y: float, width: float, height: float) -> None:
    """Fill, label and outline one tile whose top-left corner is (x, y)."""
    surface.fill_style = style.background_color
    surface.fill_rect(x, y, width, height)

    surface.fill_style = style.foreground_color
    surface.font = style.font
    text_x, text_y = text_position(x, y, width, height, style.font_size)
    surface.fill_text(letter, text_x, text_y)

    surface.line_width = style.border_width
    surface.stroke_style = style.border_color
    surface.stroke_rect(x, y, width, height)


def render_grid(grid: Sequence[Sequence[str]], config: TableConfig,
                surface: Surface, surface_size: tuple[float, float]) -> None:
    """Draw every tile of *grid*, row by row.

    Neighbouring tiles share edges, so a later tile's border is painted
    over the earlier one's.
    """
    _check_shape(grid, config.rows, config.columns, surface_size)
    width, height = surface_size
    cell_width, cell_height = cell_size(surface_size, config.rows, config.columns)

    if config.background_color is not None:
        surface.fill_style = config.background_color
        surface.fill_rect(0, 0, width, height)
    if config.border_color is not None:
        surface.stroke_style = config.border_color
        surface.stroke_rect(0, 0, width, height)

    for y, row in enumerate(grid):
        for x, letter in enumerate(row):
            draw_tile(surface, config.letter, letter,
                      x * cell_width, y * cell_height, cell_width, cell_height)

    logger.debug("Rendered %d tiles on a %gx%g surface",
                 config.rows * config.columns, width, height)
