"""Table configuration: tile style, grid size and letter bias."""

from __future__ import annotations

import dataclasses
import json
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

from PIL import ImageColor

from wordtable.alphabet import ENGLISH, Alphabet, get_alphabet
from wordtable.constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_COLUMNS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_FOREGROUND_COLOR,
    DEFAULT_FREQUENT_WORD_LIKELIHOOD,
    DEFAULT_ROWS,
)
from wordtable.errors import ConfigurationError
from wordtable.selector import partition_letters


def format_px(size: float) -> str:
    """Fixed-point pixel size: ``32`` -> ``"32"``, ``1e-05`` -> ``"0.00001"``."""
    return format(Decimal(str(size)), "f")


@dataclass(frozen=True)
class TileStyle:
    """How every tile of a table is painted."""
    background_color: str = DEFAULT_BACKGROUND_COLOR
    border_color: str = DEFAULT_BORDER_COLOR
    border_width: float = DEFAULT_BORDER_WIDTH
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE
    foreground_color: str = DEFAULT_FOREGROUND_COLOR

    @property
    def font(self) -> str:
        """CSS-style font shorthand, e.g. ``"32px sans-serif"``."""
        return f"{format_px(self.font_size)}px {self.font_family}"


@dataclass(frozen=True)
class TableConfig:
    alphabet: Alphabet = ENGLISH
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    frequent_word_likelihood: float = DEFAULT_FREQUENT_WORD_LIKELIHOOD
    letter: TileStyle = field(default_factory=TileStyle)
    # Optional whole-surface fill and outline painted before the tiles
    background_color: str | None = None
    border_color: str | None = None

    def with_overrides(self, **changes: Any) -> TableConfig:
        """Copy with the given fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **changes)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_color(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a color string, got {value!r}")
    try:
        ImageColor.getrgb(value)
    except ValueError:
        raise ConfigurationError(f"{name} is not a valid color: {value!r}") from None


def validate_dimensions(rows: Any, columns: Any) -> None:
    for name, value in (("rows", rows), ("columns", columns)):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")


def validate_style(style: TileStyle) -> None:
    _check_color("letter.background_color", style.background_color)
    _check_color("letter.border_color", style.border_color)
    _check_color("letter.foreground_color", style.foreground_color)
    if not _is_number(style.border_width) or style.border_width < 0:
        raise ConfigurationError(
            f"letter.border_width must be a non-negative number, got {style.border_width!r}"
        )
    if not _is_number(style.font_size) or style.font_size <= 0:
        raise ConfigurationError(
            f"letter.font_size must be a positive number, got {style.font_size!r}"
        )
    if not isinstance(style.font_family, str) or not style.font_family.strip():
        raise ConfigurationError(
            f"letter.font_family must be a non-empty string, got {style.font_family!r}"
        )


def validate_config(config: TableConfig) -> None:
    """Raise ConfigurationError if *config* cannot produce a table."""
    validate_dimensions(config.rows, config.columns)
    likelihood = config.frequent_word_likelihood
    if not _is_number(likelihood) or not 0 <= likelihood <= 1:
        raise ConfigurationError(
            f"frequent_word_likelihood must be within [0, 1], got {likelihood!r}"
        )
    validate_style(config.letter)
    if config.background_color is not None:
        _check_color("background_color", config.background_color)
    if config.border_color is not None:
        _check_color("border_color", config.border_color)
    below, _ = partition_letters(config.alphabet)
    if not below and likelihood < 1:
        raise ConfigurationError(
            f"Alphabet {config.alphabet.code!r} has no letters below its average "
            f"frequency; set frequent_word_likelihood to 1 (got {likelihood!r})"
        )


# JSON keys as written in the original browser config, mapped to field names
_TABLE_KEYS = {
    "alphabet": "alphabet",
    "columns": "columns",
    "rows": "rows",
    "frequentWordLikelihood": "frequent_word_likelihood",
    "frequent_word_likelihood": "frequent_word_likelihood",
    "letter": "letter",
    "backgroundColor": "background_color",
    "background_color": "background_color",
    "borderColor": "border_color",
    "border_color": "border_color",
}

_STYLE_KEYS = {
    "backgroundColor": "background_color",
    "borderColor": "border_color",
    "borderWidth": "border_width",
    "fontFamily": "font_family",
    "fontSize": "font_size",
    "foregroundColor": "foreground_color",
}
_STYLE_KEYS.update({name: name for name in _STYLE_KEYS.values()})


def _rename(raw: dict[str, Any], keys: dict[str, str], where: str) -> dict[str, Any]:
    renamed: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in keys:
            raise ConfigurationError(f"Unknown {where} key: {key!r}")
        renamed[keys[key]] = value
    return renamed


def config_from_dict(raw: dict[str, Any]) -> TableConfig:
    """Build and validate a TableConfig from a parsed JSON document."""
    if not isinstance(raw, dict):
        raise ConfigurationError("Table config must be a JSON object")

    values = _rename(raw, _TABLE_KEYS, "table config")

    if "alphabet" in values:
        code = values["alphabet"]
        if not isinstance(code, str):
            raise ConfigurationError(f"alphabet must be an alphabet code, got {code!r}")
        values["alphabet"] = get_alphabet(code)

    if "letter" in values:
        style = values["letter"]
        if not isinstance(style, dict):
            raise ConfigurationError("letter must be a JSON object")
        values["letter"] = TileStyle(**_rename(style, _STYLE_KEYS, "letter style"))

    config = TableConfig(**values)
    validate_config(config)
    return config


def load_config(path: str | Path) -> TableConfig:
    """Load a table config from a JSON file."""
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    # Accept the original's {"wordTable": {...}} wrapper as well
    if isinstance(raw, dict) and set(raw) == {"wordTable"}:
        raw = raw["wordTable"]
    return config_from_dict(raw)
