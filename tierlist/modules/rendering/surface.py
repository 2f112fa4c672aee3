# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Drawing Surface
The renderer draws through the small Surface protocol below. The
production backend is Pillow: an RGB canvas, ImageDraw primitives and
a single configured TrueType family loaded through FontBook.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Literal, Optional, Protocol

from PIL import Image, ImageDraw, ImageFont

from tierlist.models.layout import FontSpec
from tierlist.utils.logger import get_logger

log = get_logger(__name__)

Align = Literal["left", "center"]

# Pillow text anchors: horizontal (l/m) + vertical middle
_ANCHORS: dict[str, str] = {"left": "lm", "center": "mm"}


class Surface(Protocol):
    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None: ...

    def stroke_rect(self, x: int, y: int, w: int, h: int, color: str) -> None: ...

    def measure_text(self, text: str, font: FontSpec) -> float: ...

    def draw_text(
        self, text: str, x: float, y: float, font: FontSpec, color: str,
        align: Align = "center",
    ) -> None: ...

    def draw_image(self, image: Image.Image, x: int, y: int, w: int, h: int) -> None: ...

    def encode(self, fmt: str = "PNG") -> bytes: ...


SurfaceFactory = Callable[[int, int], Surface]


class FontBook:
    """
    Loads one font family at any pixel size. Explicit paths win over the
    family name; if neither can be opened, Pillow's bundled default font
    is used at the requested size.
    """

    def __init__(
        self,
        family: str = "DejaVuSans",
        regular_path: Optional[Path] = None,
        bold_path: Optional[Path] = None,
    ) -> None:
        self._family = family
        self._regular_path = regular_path
        self._bold_path = bold_path
        self._fonts: dict[FontSpec, ImageFont.FreeTypeFont] = {}

    def _source(self, bold: bool) -> str:
        path = self._bold_path if bold else self._regular_path
        if path is not None:
            return str(path)
        return f"{self._family}-Bold.ttf" if bold else f"{self._family}.ttf"

    def get(self, font: FontSpec) -> ImageFont.FreeTypeFont:
        loaded = self._fonts.get(font)
        if loaded is None:
            source = self._source(font.bold)
            try:
                loaded = ImageFont.truetype(source, font.size)
            except OSError:
                log.debug("font_fallback_default", source=source, size=font.size)
                loaded = ImageFont.load_default(size=font.size)
            self._fonts[font] = loaded
        return loaded


class PillowSurface:
    """RGB Pillow canvas implementing the Surface protocol."""

    def __init__(self, width: int, height: int, font_book: FontBook) -> None:
        self.image = Image.new("RGB", (width, height))
        self._draw = ImageDraw.Draw(self.image)
        self._fonts = font_book

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        self._draw.rectangle((x, y, x + w - 1, y + h - 1), fill=color)

    def stroke_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        self._draw.rectangle((x, y, x + w - 1, y + h - 1), outline=color, width=1)

    def measure_text(self, text: str, font: FontSpec) -> float:
        return self._draw.textlength(text, font=self._fonts.get(font))

    def draw_text(
        self, text: str, x: float, y: float, font: FontSpec, color: str,
        align: Align = "center",
    ) -> None:
        self._draw.text(
            (x, y), text,
            fill=color,
            font=self._fonts.get(font),
            anchor=_ANCHORS[align],
        )

    def draw_image(self, image: Image.Image, x: int, y: int, w: int, h: int) -> None:
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGBA" if "A" in image.getbands() else "RGB")
        thumb = image.resize((w, h), Image.Resampling.LANCZOS)
        # Alpha composites over whatever is already drawn at (x, y)
        self.image.paste(thumb, (x, y), thumb if thumb.mode == "RGBA" else None)

    def encode(self, fmt: str = "PNG") -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format=fmt)
        return buf.getvalue()


def create_pillow_surface(width: int, height: int, font_book: FontBook) -> PillowSurface:
    log.debug("surface_allocated", width=width, height=height)
    return PillowSurface(width, height, font_book)
