# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Tier resolver and layout engine tests.
Pure geometry — no drawing surface, network or fonts.
"""

import pytest

from tierlist.models.layout import LayoutSettings
from tierlist.models.tier_list import Tier, TierItem, TierListConfig


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _items(n: int, tier: str = "S") -> list[TierItem]:
    return [TierItem(id=str(i), tier=tier, text=f"Item {i}") for i in range(n)]


LONG_TIERS = [
    Tier(id="S", label="God Tier (Unbeatable)", color="#ff7f7f"),
    Tier(id="A", label="A (Great & Delicious)", color="#ffbf7f"),
    Tier(id="B", label="B (Good Enough)", color="#ffff7f"),
]


# ─── Tier Resolver ───────────────────────────────────────────────────────────

def test_resolve_by_id():
    from tierlist.modules.layout.tier_resolver import resolve_tier

    item = TierItem(id="1", tier="S")
    assert resolve_tier(LONG_TIERS, item) == "S"


def test_resolve_by_label():
    from tierlist.modules.layout.tier_resolver import resolve_tier

    item = TierItem(id="1", tier="God Tier (Unbeatable)")
    assert resolve_tier(LONG_TIERS, item) == "S"


def test_resolve_id_wins_over_label():
    from tierlist.modules.layout.tier_resolver import resolve_tier

    tiers = [
        Tier(id="X", label="A", color="#000"),
        Tier(id="A", label="Top", color="#fff"),
    ]
    assert resolve_tier(tiers, TierItem(id="1", tier="A")) == "A"


def test_resolve_unknown_is_none():
    from tierlist.modules.layout.tier_resolver import resolve_tier

    assert resolve_tier(LONG_TIERS, TierItem(id="1", tier="Nonexistent")) is None


def test_resolve_is_case_sensitive():
    from tierlist.modules.layout.tier_resolver import resolve_tier

    assert resolve_tier(LONG_TIERS, TierItem(id="1", tier="s")) is None
    assert resolve_tier(LONG_TIERS, TierItem(id="1", tier="god tier (unbeatable)")) is None


def test_bucket_items_preserves_order_and_reports_unresolved():
    from tierlist.modules.layout.tier_resolver import bucket_items

    items = [
        TierItem(id="1", tier="S"),
        TierItem(id="2", tier="B (Good Enough)"),
        TierItem(id="3", tier="Nonexistent"),
        TierItem(id="4", tier="S"),
    ]
    buckets, unresolved = bucket_items(LONG_TIERS, items)

    assert [i.id for i in buckets["S"]] == ["1", "4"]
    assert [i.id for i in buckets["B"]] == ["2"]
    assert buckets["A"] == ()
    assert [i.id for i in unresolved] == ["3"]


# ─── Layout Engine ───────────────────────────────────────────────────────────

def test_default_items_per_row():
    assert LayoutSettings().items_per_row == 8


def test_row_height_minimum_for_empty_and_single_line():
    from tierlist.modules.layout.layout_engine import row_height_for

    s = LayoutSettings()
    assert row_height_for(0, s) == 100
    assert row_height_for(8, s) == 100


def test_row_height_grows_with_wrapped_lines():
    from tierlist.modules.layout.layout_engine import row_height_for

    s = LayoutSettings()
    assert row_height_for(9, s) == 2 * 85 + 5
    assert row_height_for(17, s) == 3 * 85 + 5


def test_layout_single_item_default_tiers():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=[TierItem(id="1", tier="S", text="Apple")])
    layout = compute_layout(config, LayoutSettings())

    assert layout.width == 800
    assert layout.height == 100 * 6 + 2 * 6
    assert layout.header_height == 0
    assert [r.tier.id for r in layout.rows] == ["S", "A", "B", "C", "D", "F"]
    assert layout.rows[0].cells[0].x == 105
    assert layout.rows[0].cells[0].y == 5


def test_layout_title_adds_header():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(title="Fruits", items=[])
    layout = compute_layout(config, LayoutSettings())

    assert layout.header_height == 60
    assert layout.height == 60 + 6 * 102
    assert layout.rows[0].y == 60
    assert all(r.height == 100 for r in layout.rows)


def test_layout_rows_stack_with_separator():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=_items(9, "A"))
    layout = compute_layout(config, LayoutSettings())

    ys = [r.y for r in layout.rows]
    assert ys[:3] == [0, 102, 102 + 175 + 2]


def test_layout_cells_wrap_using_items_per_row():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=_items(9))
    layout = compute_layout(config, LayoutSettings())
    cells = layout.rows[0].cells

    assert len(cells) == 9
    assert cells[7].x == 105 + 7 * 85
    assert cells[7].x + cells[7].size <= 800
    assert (cells[8].x, cells[8].y) == (105, 5 + 85)
    # Declared row height contains the last cell
    assert cells[8].y + cells[8].size <= layout.rows[0].y + layout.rows[0].height


def test_layout_excludes_unresolved_items():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=[
        TierItem(id="1", tier="S", text="Apple"),
        TierItem(id="6", tier="Nonexistent", text="Ghost"),
    ])
    layout = compute_layout(config, LayoutSettings())

    placed = [c.item.id for r in layout.rows for c in r.cells]
    assert placed == ["1"]
    assert [i.id for i in layout.unresolved] == ["6"]


def test_layout_custom_tier_order():
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(tiers=list(reversed(LONG_TIERS)), items=[])
    layout = compute_layout(config, LayoutSettings())
    assert [r.tier.id for r in layout.rows] == ["B", "A", "S"]


def test_layout_too_many_items():
    from tierlist.api.middleware.error_handler import TooManyItemsError
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=_items(51))
    with pytest.raises(TooManyItemsError, match="Too many items"):
        compute_layout(config, LayoutSettings())


def test_layout_exactly_max_items_allowed():
    from tierlist.modules.layout.layout_engine import compute_layout

    layout = compute_layout(TierListConfig(items=_items(50)), LayoutSettings())
    assert len(layout.rows[0].cells) == 50


def test_layout_alternate_limits():
    from tierlist.api.middleware.error_handler import TooManyItemsError
    from tierlist.modules.layout.layout_engine import compute_layout

    with pytest.raises(TooManyItemsError):
        compute_layout(TierListConfig(items=_items(3)), LayoutSettings(max_items=2))


def test_layout_canvas_too_tall():
    from tierlist.api.middleware.error_handler import CanvasTooTallError
    from tierlist.modules.layout.layout_engine import compute_layout

    config = TierListConfig(items=[])
    with pytest.raises(CanvasTooTallError, match="too tall"):
        compute_layout(config, LayoutSettings(max_canvas_height=600))


def test_layout_height_at_ceiling_allowed():
    from tierlist.modules.layout.layout_engine import compute_layout

    layout = compute_layout(TierListConfig(items=[]), LayoutSettings(max_canvas_height=612))
    assert layout.height == 612
