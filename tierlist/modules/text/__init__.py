# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Text Module
Public API for adaptive label fitting.
"""

from tierlist.modules.text.text_fitter import (
    LINE_HEIGHT,
    TextFitter,
    TextMeasurer,
    block_height,
    wrap_text,
)

__all__ = [
    "LINE_HEIGHT",
    "TextFitter",
    "TextMeasurer",
    "block_height",
    "wrap_text",
]
