# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Image URL Validator
Checks every item image URL before a single byte is fetched:

  1. Scheme must be http or https        (InvalidUrlSchemeError)
  2. URL must parse and carry a hostname (TransientResourceError)
  3. Hostname resolved on every call      (TransientResourceError on failure)
  4. Resolved address must not be private (UnsafeResourceError)

Resolution is never cached. A DNS answer that changes between this check
and the fetch is an accepted residual risk; the fetcher refuses redirects
so there is no second, unchecked hop.
"""

from __future__ import annotations

import ipaddress
import socket
from typing import Callable
from urllib.parse import urlsplit

from tierlist.api.middleware.error_handler import (
    InvalidUrlSchemeError,
    TransientResourceError,
    UnsafeResourceError,
)
from tierlist.utils.logger import get_logger

log = get_logger(__name__)

HostResolver = Callable[[str], str]

_ALLOWED_SCHEMES = frozenset({"http", "https"})

# Best-effort list; see DESIGN.md for the ranges deliberately left out
_PRIVATE_V4_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
)
_PRIVATE_V6_PREFIXES = ("fc", "fe80")


def resolve_hostname(hostname: str) -> str:
    """Resolve hostname to the first IP literal the system resolver returns."""
    try:
        infos = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, UnicodeError) as e:
        raise TransientResourceError(f"Could not resolve host {hostname!r}: {e}") from e
    if not infos:
        raise TransientResourceError(f"Host {hostname!r} resolved to no addresses")
    address = infos[0][4][0]
    # Strip IPv6 zone index, e.g. fe80::1%eth0
    return address.split("%", 1)[0]


def is_private_address(address: str) -> bool:
    """
    Return True if the IP literal is loopback, private or link-local
    according to the classification list above. Unparseable input is
    treated as private.
    """
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return True

    if ip.version == 4:
        if str(ip) == "0.0.0.0":
            return True
        return any(ip in net for net in _PRIVATE_V4_NETWORKS)

    text = ip.compressed.lower()
    return text == "::1" or text.startswith(_PRIVATE_V6_PREFIXES)


class UrlValidator:
    """Validates item image URLs. The resolver is injectable for tests."""

    def __init__(self, resolver: HostResolver = resolve_hostname) -> None:
        self._resolver = resolver

    def validate(self, url: str) -> str:
        """
        Return `url` unchanged if it is safe to fetch.

        Raises:
            InvalidUrlSchemeError: scheme is not http/https (no DNS lookup made).
            UnsafeResourceError:   host resolves to a private address.
            TransientResourceError: malformed URL, missing host, or the host
                                    could not be resolved.
        """
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise TransientResourceError(f"Invalid image URL: {e}") from e

        if parts.scheme.lower() not in _ALLOWED_SCHEMES:
            raise InvalidUrlSchemeError("Invalid protocol: must be http or https")

        hostname = parts.hostname
        if not hostname:
            raise TransientResourceError("Invalid image URL: missing hostname")

        address = self._resolver(hostname)
        if is_private_address(address):
            log.warning("private_address_blocked", host=hostname, address=address)
            raise UnsafeResourceError(
                f"Access to private IP {address} is forbidden",
                address=address,
            )

        log.debug("image_url_validated", host=hostname, address=address)
        return url
