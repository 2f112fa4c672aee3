# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — FastAPI Dependencies
Providers for the settings and the network collaborators a render
needs. Route handlers access them via Depends() injection; tests swap
them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated, Optional

import httpx
from fastapi import Depends

from tierlist.config import Settings, get_settings
from tierlist.modules.safety.url_validator import HostResolver, resolve_hostname


def get_render_settings() -> Settings:
    return get_settings()


def get_host_resolver() -> HostResolver:
    """System DNS resolver. Resolution is never cached between calls."""
    return resolve_hostname


def get_image_transport() -> Optional[httpx.BaseTransport]:
    """None means httpx's default network transport."""
    return None


# Annotated type aliases for clean route signatures
SettingsDep = Annotated[Settings, Depends(get_render_settings)]
ResolverDep = Annotated[HostResolver, Depends(get_host_resolver)]
TransportDep = Annotated[Optional[httpx.BaseTransport], Depends(get_image_transport)]
