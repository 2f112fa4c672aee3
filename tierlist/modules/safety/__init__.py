# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Resource Safety Module
URL validation, host resolution and bounded image fetching.
"""

from tierlist.modules.safety.image_fetcher import ImageFetcher
from tierlist.modules.safety.url_validator import (
    UrlValidator,
    is_private_address,
    resolve_hostname,
)

__all__ = [
    "ImageFetcher",
    "UrlValidator",
    "is_private_address",
    "resolve_hostname",
]
