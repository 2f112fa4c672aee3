# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Rendering Module
Public API for the drawing surface and the tier list renderer.
"""

from tierlist.modules.rendering.surface import (
    FontBook,
    PillowSurface,
    Surface,
    SurfaceFactory,
    create_pillow_surface,
)
from tierlist.modules.rendering.tier_list_renderer import TierListRenderer

__all__ = [
    "FontBook",
    "PillowSurface",
    "Surface",
    "SurfaceFactory",
    "create_pillow_surface",
    "TierListRenderer",
]
