# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Bounded Image Fetcher
Downloads item images with httpx under the limits in FetchLimits:
a hard timeout, a byte ceiling enforced both on Content-Length and
while streaming, and redirects refused outright (3xx fails closed).

Every failure surfaces as TransientResourceError so the renderer can
fall back to a text cell for that one item.
"""

from __future__ import annotations

from typing import Optional

import httpx

from tierlist.api.middleware.error_handler import TransientResourceError
from tierlist.models.layout import FetchLimits
from tierlist.utils.logger import get_logger

log = get_logger(__name__)


class ImageFetcher:
    """
    Sequential image downloader. One instance per render; close() it
    (or use it as a context manager) when the render is done.
    """

    def __init__(
        self,
        limits: FetchLimits,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._limits = limits
        self._client = httpx.Client(
            timeout=limits.timeout_seconds,
            follow_redirects=False,
            transport=transport,
            headers={
                "User-Agent": limits.user_agent,
                "Accept": "image/*",
            },
        )

    def __enter__(self) -> "ImageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> bytes:
        """
        Download `url` and return its body.
        Raises TransientResourceError on redirect, HTTP error status,
        transport failure, timeout or an oversized body.
        """
        max_bytes = self._limits.max_bytes
        try:
            with self._client.stream("GET", url) as response:
                if response.is_redirect:
                    raise TransientResourceError(
                        f"Refusing redirect ({response.status_code}) from {url}"
                    )
                response.raise_for_status()

                declared = response.headers.get("content-length")
                if declared is not None and declared.isdigit() and int(declared) > max_bytes:
                    raise TransientResourceError(
                        f"Image at {url} declares {declared} bytes, limit is {max_bytes}"
                    )

                chunks: list[bytes] = []
                received = 0
                for chunk in response.iter_bytes():
                    received += len(chunk)
                    if received > max_bytes:
                        raise TransientResourceError(
                            f"Image at {url} exceeds the {max_bytes} byte limit"
                        )
                    chunks.append(chunk)
        # InvalidURL is not an HTTPError; httpx raises it while building the request
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransientResourceError(f"Failed to fetch {url}: {e}") from e

        data = b"".join(chunks)
        log.debug("image_fetched", url=url, size_bytes=len(data))
        return data
