# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Request Models
Pydantic models for the tier list configuration a caller submits.
JSON field names are camelCase (imageUrl, backgroundColor); Python
attributes are snake_case and either spelling is accepted on input.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Tier(_CamelModel):
    """A labeled, colored ranking row. Identity is `id`."""
    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1, max_length=50)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)


class TierItem(_CamelModel):
    """
    One ranked entity. `tier` refers to a Tier by id or label and is
    resolved at layout time; unknown references are dropped, not rejected.
    """
    id: str
    tier: str = Field(..., description="ID or label of the tier to place this item in")
    image_url: Optional[str] = Field(None, description="URL of the item image")
    text: Optional[str] = Field(None, max_length=50, description="Text label if no image")


DEFAULT_TIERS: tuple[Tier, ...] = (
    Tier(id="S", label="S", color="#ff7f7f"),
    Tier(id="A", label="A", color="#ffbf7f"),
    Tier(id="B", label="B", color="#ffff7f"),
    Tier(id="C", label="C", color="#7fff7f"),
    Tier(id="D", label="D", color="#7f7fff"),
    Tier(id="F", label="F", color="#ff7fff"),
)


class TierListConfig(_CamelModel):
    """
    Complete input for one render. `items` is deliberately uncapped here:
    the item ceiling is a layout-time safety check (TooManyItemsError),
    not a schema rule.
    """
    title: Optional[str] = Field(None, max_length=100)
    background_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    tiers: Optional[list[Tier]] = Field(
        None, description="Custom tier definitions (optional, defaults to S-F)"
    )
    items: list[TierItem] = Field(..., description="Items to place on the tier list")

    @model_validator(mode="after")
    def check_tiers(self) -> "TierListConfig":
        if self.tiers is None:
            return self
        if not self.tiers:
            raise ValueError("tiers must not be empty when provided")
        seen: set[str] = set()
        for tier in self.tiers:
            if tier.id in seen:
                raise ValueError(f"duplicate tier id: {tier.id!r}")
            seen.add(tier.id)
        return self

    def resolved_tiers(self) -> tuple[Tier, ...]:
        """Configured tiers in row order, or DEFAULT_TIERS when omitted."""
        if self.tiers is None:
            return DEFAULT_TIERS
        return tuple(self.tiers)
