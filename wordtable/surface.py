"""Drawing surfaces: the canvas-like interface the renderer paints on."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from wordtable.errors import ConfigurationError


class Surface(Protocol):
    """Minimal 2D canvas: style properties plus rect and text primitives."""

    fill_style: str
    stroke_style: str
    line_width: float
    font: str

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...


# Generic CSS families mapped to fonts that ship with most Linux systems
GENERIC_FONT_FILES: dict[str, str] = {
    "sans-serif": "DejaVuSans.ttf",
    "serif": "DejaVuSerif.ttf",
    "monospace": "DejaVuSansMono.ttf",
}

_FONT_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)px\s+(.+?)\s*$")


def parse_font(font: str) -> tuple[float, list[str]]:
    """Split ``"32px Arial, sans-serif"`` into (32.0, ["Arial", "sans-serif"])."""
    match = _FONT_RE.match(font)
    if match is None:
        raise ConfigurationError(f"Font must look like '<size>px <family>', got {font!r}")
    families = [name.strip().strip("'\"") for name in match.group(2).split(",")]
    return float(match.group(1)), [name for name in families if name]


@lru_cache(maxsize=32)
def load_font(size: float, families: tuple[str, ...]) -> ImageFont.FreeTypeFont:
    """First installed font among *families*, else Pillow's default font."""
    pixels = max(1, round(size))
    for family in families:
        candidates = [GENERIC_FONT_FILES.get(family.lower(), family)]
        if not candidates[0].lower().endswith((".ttf", ".otf")):
            candidates.append(f"{candidates[0]}.ttf")
        for candidate in candidates:
            try:
                return ImageFont.truetype(candidate, pixels)
            except OSError:
                continue
    return ImageFont.load_default(size=pixels)


class ImageSurface:
    """Pillow-backed surface that paints into an RGB image."""

    def __init__(self, width: int, height: int, background: str = "white") -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Surface must have positive size, got {width}x{height}")
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)
        self.fill_style = "black"
        self.stroke_style = "black"
        self.line_width: float = 1
        self._font_spec = ""
        self._font: ImageFont.FreeTypeFont | None = None
        self.font = "10px sans-serif"

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def font(self) -> str:
        return self._font_spec

    @font.setter
    def font(self, value: str) -> None:
        size, families = parse_font(value)
        self._font = load_font(size, tuple(families))
        self._font_spec = value

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = (round(x), round(y), round(x + width) - 1, round(y + height) - 1)
        if box[2] < box[0] or box[3] < box[1]:
            return
        self._draw.rectangle(box, fill=self.fill_style)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        # Canvas strokes straddle the edge; Pillow outlines grow inwards
        if self.line_width <= 0:
            return
        half = self.line_width / 2
        box = (round(x - half), round(y - half),
               round(x + width + half) - 1, round(y + height + half) - 1)
        self._draw.rectangle(box, outline=self.stroke_style,
                             width=max(1, round(self.line_width)))

    def fill_text(self, text: str, x: float, y: float) -> None:
        # (x, y) is the left end of the baseline, as with canvas fillText
        self._draw.text((x, y), text, fill=self.fill_style, font=self._font, anchor="ls")

    def save(self, path: str | Path) -> None:
        self.image.save(path, format="PNG")
