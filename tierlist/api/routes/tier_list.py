# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — /tier-list routes
POST renders a TierListConfig to PNG (raw or base64-wrapped);
GET exposes the default tiers and an example config template.
"""

from __future__ import annotations

import base64

from fastapi import APIRouter, Response
from pydantic import BaseModel

from tierlist.core.pipeline import generate_tier_list_image
from tierlist.dependencies import ResolverDep, SettingsDep, TransportDep
from tierlist.models.tier_list import DEFAULT_TIERS, Tier, TierListConfig
from tierlist.utils.logger import get_logger

router = APIRouter(prefix="/tier-list", tags=["tier-list"])
log = get_logger(__name__)

PNG_MEDIA_TYPE = "image/png"

EXAMPLE_CONFIG = {
    "title": "My Tier List",
    "items": [
        {"id": "1", "tier": "S", "text": "Item 1"},
        {"id": "2", "tier": "A", "text": "Item 2"},
    ],
}


class EncodedImage(BaseModel):
    mime_type: str = PNG_MEDIA_TYPE
    data: str


# Plain `def` handlers: FastAPI runs them on its threadpool, so the
# sequential, blocking render never stalls the event loop.

@router.post(
    "",
    response_class=Response,
    responses={200: {"content": {PNG_MEDIA_TYPE: {}}}},
    summary="Render a tier list",
    description=(
        "Render items bucketed into tiers as a single PNG image. "
        "Items reference a tier by id or label; unknown tiers are skipped."
    ),
)
def render_tier_list(
    config: TierListConfig,
    settings: SettingsDep,
    resolver: ResolverDep,
    transport: TransportDep,
) -> Response:
    png = generate_tier_list_image(config, settings, resolver=resolver, transport=transport)
    return Response(content=png, media_type=PNG_MEDIA_TYPE)


@router.post(
    "/base64",
    response_model=EncodedImage,
    summary="Render a tier list as base64",
)
def render_tier_list_base64(
    config: TierListConfig,
    settings: SettingsDep,
    resolver: ResolverDep,
    transport: TransportDep,
) -> EncodedImage:
    png = generate_tier_list_image(config, settings, resolver=resolver, transport=transport)
    return EncodedImage(data=base64.b64encode(png).decode("ascii"))


@router.get(
    "/defaults",
    response_model=list[Tier],
    summary="Default tiers used when a config omits `tiers`",
)
async def default_tiers() -> list[Tier]:
    return list(DEFAULT_TIERS)


@router.get("/example", summary="Example tier list config template")
async def example_config() -> dict:
    return EXAMPLE_CONFIG
