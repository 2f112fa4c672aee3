# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Tier Resolver
Maps each item's free-form `tier` reference to a canonical tier id.
Exact, case-sensitive match on id first, then on label. Items that
match neither are reported and left out of every row.
"""

from __future__ import annotations

from typing import Optional, Sequence

from tierlist.models.tier_list import Tier, TierItem
from tierlist.utils.logger import get_logger

log = get_logger(__name__)


def resolve_tier(tiers: Sequence[Tier], item: TierItem) -> Optional[str]:
    """Return the id of the tier `item` belongs to, or None if unresolved."""
    ref = item.tier
    for tier in tiers:
        if tier.id == ref:
            return tier.id
    for tier in tiers:
        if tier.label == ref:
            return tier.id
    return None


def bucket_items(
    tiers: Sequence[Tier],
    items: Sequence[TierItem],
) -> tuple[dict[str, tuple[TierItem, ...]], tuple[TierItem, ...]]:
    """
    Group items by resolved tier id, preserving input order in each bucket.

    Returns:
        (buckets, unresolved): buckets has one entry per tier id (empty
        tuples included); unresolved lists items that matched no tier.
    """
    grouped: dict[str, list[TierItem]] = {t.id: [] for t in tiers}
    unresolved: list[TierItem] = []

    for item in items:
        tier_id = resolve_tier(tiers, item)
        if tier_id is None:
            log.warning(
                "item_tier_unresolved",
                item_id=item.id,
                item=item.text or item.image_url,
                tier=item.tier,
            )
            unresolved.append(item)
            continue
        grouped[tier_id].append(item)

    buckets = {tier_id: tuple(group) for tier_id, group in grouped.items()}
    return buckets, tuple(unresolved)
