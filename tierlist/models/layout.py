# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Layout and Rendering Models
Immutable structures derived fresh for every render: the limits the
layout engine and fetcher run under, fitted text, and the computed
canvas geometry. Nothing here outlives a single render call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tierlist.models.tier_list import Tier, TierItem


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class LayoutSettings(_Frozen):
    """Pixel geometry and ceilings consumed by the layout engine."""
    canvas_width: int = 800
    tier_label_width: int = 100
    item_size: int = 80
    item_padding: int = 5
    row_min_height: int = 100
    header_height: int = 60
    row_separator: int = 2
    max_items: int = 50
    max_canvas_height: int = 5000

    @property
    def content_width(self) -> int:
        return self.canvas_width - self.tier_label_width

    @property
    def item_pitch(self) -> int:
        return self.item_size + self.item_padding

    @property
    def items_per_row(self) -> int:
        # Row height and cell placement must both use this value
        return max(1, self.content_width // self.item_pitch)


class FetchLimits(_Frozen):
    """Bounds the image fetcher enforces on every request."""
    timeout_seconds: float = 5.0
    max_bytes: int = 5 * 1024 * 1024
    user_agent: str = "TierListRenderer/1.0 (non-commercial tool)"


class FontSpec(_Frozen):
    size: int = Field(..., gt=0)
    bold: bool = False


class FitResult(_Frozen):
    """
    Output of the adaptive text fitter.

    hard_break: at least one word was split at character level.
    fits:       the wrapped block lies entirely inside the box. Only the
                last-resort result at minimum size can have fits=False.
    """
    lines: tuple[str, ...]
    font_size: int
    hard_break: bool = False
    fits: bool = True


class ItemCell(_Frozen):
    """Top-left placement of one item's square cell on the canvas."""
    item: TierItem
    x: int
    y: int
    size: int


class RowLayout(_Frozen):
    tier: Tier
    y: int
    height: int
    items: tuple[TierItem, ...] = ()
    cells: tuple[ItemCell, ...] = ()


class CanvasLayout(_Frozen):
    width: int
    height: int
    header_height: int
    items_per_row: int
    rows: tuple[RowLayout, ...]
    # Items whose tier reference matched nothing; excluded from every row
    unresolved: tuple[TierItem, ...] = ()
