# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Render Pipeline
Wires the layout engine, URL validator, image fetcher and Pillow surface
into one renderer per call, binds the render's log context and applies
the error policy:

  ClientSafetyError  → logged at warning, re-raised unchanged
  anything else      → logged with full traceback, re-raised as
                       InternalRenderError carrying a generic message

A render either returns complete PNG bytes or raises; there is no
partial output.
"""

from __future__ import annotations

import traceback
from functools import partial
from typing import Optional

import httpx

from tierlist.api.middleware.error_handler import (
    GENERIC_INTERNAL_MESSAGE,
    ClientSafetyError,
    InternalRenderError,
)
from tierlist.config import Settings, get_settings
from tierlist.models.tier_list import TierListConfig
from tierlist.modules.rendering.surface import FontBook, create_pillow_surface
from tierlist.modules.rendering.tier_list_renderer import TierListRenderer
from tierlist.modules.safety.image_fetcher import ImageFetcher
from tierlist.modules.safety.url_validator import HostResolver, UrlValidator, resolve_hostname
from tierlist.utils.logger import get_logger, render_context

log = get_logger(__name__)


def generate_tier_list_image(
    config: TierListConfig,
    settings: Optional[Settings] = None,
    resolver: HostResolver = resolve_hostname,
    transport: Optional[httpx.BaseTransport] = None,
) -> bytes:
    """
    Render one tier list to PNG bytes.

    Args:
        config:    Validated TierListConfig.
        settings:  Settings to render under (defaults to get_settings()).
        resolver:  Hostname → IP literal, used by the URL validator.
        transport: Optional httpx transport for the image fetcher.

    Raises:
        ClientSafetyError:   caller-correctable; message is safe to return.
        InternalRenderError: anything else; message is generic.
    """
    settings = settings or get_settings()
    tier_count = len(config.tiers) if config.tiers is not None else "default"

    with render_context(item_count=len(config.items), tier_count=tier_count):
        log.info("render_start", title=config.title)
        try:
            font_book = FontBook(
                family=settings.font_family,
                regular_path=settings.font_path,
                bold_path=settings.font_bold_path,
            )
            with ImageFetcher(settings.fetch_limits, transport=transport) as fetcher:
                renderer = TierListRenderer(
                    layout_settings=settings.layout_settings,
                    surface_factory=partial(create_pillow_surface, font_book=font_book),
                    fetch_image=fetcher.fetch,
                    validator=UrlValidator(resolver),
                    default_background=settings.default_background,
                )
                png = renderer.render(config)
        except ClientSafetyError as exc:
            log.warning("client_safety_error", code=exc.code, error=str(exc))
            raise
        except Exception as exc:
            log.error(
                "render_internal_error",
                error=f"{type(exc).__name__}: {exc}",
                traceback=traceback.format_exc(),
            )
            raise InternalRenderError(GENERIC_INTERNAL_MESSAGE) from exc

        log.info("tier_list_rendered", size_bytes=len(png))
        return png
