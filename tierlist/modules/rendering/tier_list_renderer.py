# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Tier List Renderer
Walks a computed CanvasLayout and issues draw calls:

  background → title (optional) → for each tier: label box, content
  area, then its items left-to-right, top-to-bottom → PNG bytes

Item images are validated, fetched and decoded strictly one at a time.
An UnsafeResourceError aborts the whole render; any other image failure
only downgrades that item to a text cell.
"""

from __future__ import annotations

from typing import Callable, Optional

from PIL import Image

from tierlist.api.middleware.error_handler import TransientResourceError
from tierlist.models.layout import CanvasLayout, FontSpec, ItemCell, LayoutSettings, RowLayout
from tierlist.models.tier_list import TierListConfig
from tierlist.modules.layout.layout_engine import compute_layout
from tierlist.modules.rendering.surface import Surface, SurfaceFactory
from tierlist.modules.safety.url_validator import UrlValidator
from tierlist.modules.text.text_fitter import TextFitter, block_height
from tierlist.utils.image_utils import decode_image
from tierlist.utils.logger import get_logger

log = get_logger(__name__)

ImageFetch = Callable[[str], bytes]
ImageDecode = Callable[[bytes], Image.Image]

# Colors
_DEFAULT_BG = "#1e1e1e"
_TITLE_COL = "#ffffff"
_LABEL_TEXT_COL = "#000000"
_BORDER_COL = "#000000"
_CONTENT_BG = "#2d2d2d"
_CELL_BG = "#444444"
_CELL_BORDER = "#ffffff"
_CELL_TEXT_COL = "#ffffff"

# Fitter start sizes
_TITLE_START_SIZE = 30
_CELL_START_SIZE = 16

# Inner margin kept clear around fitted text
_TEXT_MARGIN = 4

_IMAGE_FALLBACK_TEXT = "?"
_TEXT_FALLBACK_TEXT = "Item"


class TierListRenderer:
    """
    One renderer per call. Collaborators are injected so tests can swap
    the surface, the network and DNS without touching the render path.
    """

    def __init__(
        self,
        layout_settings: LayoutSettings,
        surface_factory: SurfaceFactory,
        fetch_image: ImageFetch,
        validator: UrlValidator,
        decode: ImageDecode = decode_image,
        default_background: str = _DEFAULT_BG,
    ) -> None:
        self._settings = layout_settings
        self._surface_factory = surface_factory
        self._fetch_image = fetch_image
        self._validator = validator
        self._decode = decode
        self._default_background = default_background

    def render(self, config: TierListConfig) -> bytes:
        """
        Render `config` to PNG bytes.
        Raises ClientSafetyError subclasses before any surface exists
        (item count, height) or mid-render (unsafe image URL).
        """
        layout = compute_layout(config, self._settings)

        surface = self._surface_factory(layout.width, layout.height)
        fitter = TextFitter(surface)

        surface.fill_rect(
            0, 0, layout.width, layout.height,
            config.background_color or self._default_background,
        )
        if config.title:
            self._draw_title(surface, fitter, config.title, layout)

        for row in layout.rows:
            self._draw_row(surface, fitter, row, layout.width)
            for cell in row.cells:
                self._draw_item(surface, fitter, cell)

        return surface.encode("PNG")

    # ── Text ─────────────────────────────────────────────────────────────────

    def _draw_fitted(
        self,
        surface: Surface,
        fitter: TextFitter,
        text: str,
        box: tuple[int, int, int, int],
        color: str,
        bold: bool,
        start_size: Optional[int] = None,
    ) -> None:
        """Fit text into box (x, y, w, h) and draw it centered."""
        x, y, w, h = box
        fit = fitter.fit(
            text,
            max_width=w - 2 * _TEXT_MARGIN,
            max_height=h - 2 * _TEXT_MARGIN,
            bold=bold,
            start_size=start_size,
        )
        if not fit.lines:
            return

        font = FontSpec(size=fit.font_size, bold=bold)
        line_h = block_height(1, fit.font_size)
        top = y + (h - block_height(len(fit.lines), fit.font_size)) / 2
        for i, line in enumerate(fit.lines):
            surface.draw_text(line, x + w / 2, top + line_h * (i + 0.5), font, color)

    def _draw_title(
        self,
        surface: Surface,
        fitter: TextFitter,
        title: str,
        layout: CanvasLayout,
    ) -> None:
        self._draw_fitted(
            surface, fitter, title,
            (0, 0, layout.width, layout.header_height),
            _TITLE_COL, bold=True, start_size=_TITLE_START_SIZE,
        )

    # ── Rows ─────────────────────────────────────────────────────────────────

    def _draw_row(
        self,
        surface: Surface,
        fitter: TextFitter,
        row: RowLayout,
        width: int,
    ) -> None:
        label_w = self._settings.tier_label_width

        surface.fill_rect(0, row.y, label_w, row.height, row.tier.color)
        surface.stroke_rect(0, row.y, label_w, row.height, _BORDER_COL)
        self._draw_fitted(
            surface, fitter, row.tier.label,
            (0, row.y, label_w, row.height),
            _LABEL_TEXT_COL, bold=True,
        )

        surface.fill_rect(label_w, row.y, width - label_w, row.height, _CONTENT_BG)
        surface.stroke_rect(label_w, row.y, width - label_w, row.height, _BORDER_COL)

    # ── Items ────────────────────────────────────────────────────────────────

    def _draw_item(self, surface: Surface, fitter: TextFitter, cell: ItemCell) -> None:
        item = cell.item
        if not item.image_url:
            self._draw_text_cell(surface, fitter, cell, item.text or _TEXT_FALLBACK_TEXT)
            return

        image = self._load_image(item.image_url, item.id)
        if image is None:
            self._draw_text_cell(surface, fitter, cell, item.text or _IMAGE_FALLBACK_TEXT)
            return
        surface.fill_rect(cell.x, cell.y, cell.size, cell.size, _CELL_BG)
        surface.draw_image(image, cell.x, cell.y, cell.size, cell.size)

    def _load_image(self, url: str, item_id: str) -> Optional[Image.Image]:
        """
        Validate → fetch → decode. UnsafeResourceError propagates;
        transient failures are logged and return None.
        """
        try:
            safe_url = self._validator.validate(url)
            return self._decode(self._fetch_image(safe_url))
        except TransientResourceError as e:
            log.warning("item_image_failed", item_id=item_id, url=url, error=str(e))
            return None

    def _draw_text_cell(
        self,
        surface: Surface,
        fitter: TextFitter,
        cell: ItemCell,
        text: str,
    ) -> None:
        surface.fill_rect(cell.x, cell.y, cell.size, cell.size, _CELL_BG)
        surface.stroke_rect(cell.x, cell.y, cell.size, cell.size, _CELL_BORDER)
        self._draw_fitted(
            surface, fitter, text,
            (cell.x, cell.y, cell.size, cell.size),
            _CELL_TEXT_COL, bold=False, start_size=_CELL_START_SIZE,
        )
