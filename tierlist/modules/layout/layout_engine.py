# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Layout Engine
Computes canvas size, per-tier row heights and every item cell position
from a TierListConfig. Pure geometry: no drawing surface is touched, so
both ceilings are enforced before any pixels are allocated.

  ┌───────┬──────────────────────────────────────┐  ← header (iff title)
  │ label │ [item][item][item] ...  items_per_row │
  │ col   │ [item] ...                           │  ← row height grows
  └───────┴──────────────────────────────────────┘
  row_separator px gap below every row
"""

from __future__ import annotations

import math

from tierlist.api.middleware.error_handler import CanvasTooTallError, TooManyItemsError
from tierlist.models.layout import CanvasLayout, ItemCell, LayoutSettings, RowLayout
from tierlist.models.tier_list import TierItem, TierListConfig
from tierlist.modules.layout.tier_resolver import bucket_items
from tierlist.utils.logger import get_logger

log = get_logger(__name__)


def row_height_for(item_count: int, settings: LayoutSettings) -> int:
    """
    Height of a tier row holding `item_count` items.
    Never below row_min_height, so empty tiers stay visible.
    """
    lines = max(1, math.ceil(item_count / settings.items_per_row))
    return max(
        settings.row_min_height,
        lines * settings.item_pitch + settings.item_padding,
    )


def place_items(
    items: tuple[TierItem, ...],
    row_y: int,
    settings: LayoutSettings,
) -> tuple[ItemCell, ...]:
    """Wrap items left-to-right, top-to-bottom inside the row's content area."""
    per_row = settings.items_per_row
    pitch = settings.item_pitch
    x0 = settings.tier_label_width + settings.item_padding
    y0 = row_y + settings.item_padding

    return tuple(
        ItemCell(
            item=item,
            x=x0 + (i % per_row) * pitch,
            y=y0 + (i // per_row) * pitch,
            size=settings.item_size,
        )
        for i, item in enumerate(items)
    )


def compute_layout(config: TierListConfig, settings: LayoutSettings) -> CanvasLayout:
    """
    Build the full canvas geometry for one render.

    Raises:
        TooManyItemsError:  more than settings.max_items items.
        CanvasTooTallError: total height above settings.max_canvas_height.
    """
    if len(config.items) > settings.max_items:
        raise TooManyItemsError(
            f"Too many items. Max allowed is {settings.max_items}."
        )

    tiers = config.resolved_tiers()
    buckets, unresolved = bucket_items(tiers, config.items)

    header_height = settings.header_height if config.title else 0
    y = header_height
    rows: list[RowLayout] = []

    for tier in tiers:
        tier_items = buckets[tier.id]
        height = row_height_for(len(tier_items), settings)
        rows.append(
            RowLayout(
                tier=tier,
                y=y,
                height=height,
                items=tier_items,
                cells=place_items(tier_items, y, settings),
            )
        )
        y += height + settings.row_separator

    total_height = y
    if total_height > settings.max_canvas_height:
        raise CanvasTooTallError(
            f"Generated image is too tall ({total_height}px). "
            f"Limit is {settings.max_canvas_height}px."
        )

    log.debug(
        "layout_computed",
        width=settings.canvas_width,
        height=total_height,
        rows=len(rows),
        unresolved=len(unresolved),
    )
    return CanvasLayout(
        width=settings.canvas_width,
        height=total_height,
        header_height=header_height,
        items_per_row=settings.items_per_row,
        rows=tuple(rows),
        unresolved=unresolved,
    )
