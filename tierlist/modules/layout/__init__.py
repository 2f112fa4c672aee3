# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Layout Module
Public API for tier resolution and canvas geometry.
"""

from tierlist.modules.layout.layout_engine import (
    compute_layout,
    place_items,
    row_height_for,
)
from tierlist.modules.layout.tier_resolver import bucket_items, resolve_tier

__all__ = [
    "resolve_tier",
    "bucket_items",
    "compute_layout",
    "place_items",
    "row_height_for",
]
