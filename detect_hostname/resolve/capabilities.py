# detect_hostname/resolve/capabilities.py
"""
Injected host capabilities.

The resolution algorithm never touches os.environ, the socket module or
DNS directly; it calls through a HostCapabilities bundle. Production code
gets one from system_capabilities(); tests build their own from fake
tables.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from detect_hostname.config import Settings

from . import dns_backend


@dataclass(frozen=True)
class HostCapabilities:
    get_env: Callable[[str], str | None]
    get_raw_hostname: Callable[[], str]
    resolve_forward: Callable[[str], list[str]]
    resolve_reverse: Callable[[str], list[str]]
    get_search_domains: Callable[[], list[str]]


def system_capabilities(settings: Settings) -> HostCapabilities:
    """
    Capabilities backed by the running host.

    settings.resolver picks the lookup path: "system" goes through libc
    (getaddrinfo / gethostbyaddr), "dns" queries DNS directly via
    dnspython. Search domains come from the resolver configuration either
    way.
    """
    if settings.resolver == "dns":
        forward = partial(dns_backend.dns_forward, timeout=settings.dns_timeout_seconds)
        reverse = partial(dns_backend.dns_reverse, timeout=settings.dns_timeout_seconds)
    else:
        forward = dns_backend.system_forward
        reverse = dns_backend.system_reverse

    return HostCapabilities(
        get_env=os.environ.get,
        get_raw_hostname=dns_backend.system_hostname,
        resolve_forward=forward,
        resolve_reverse=reverse,
        get_search_domains=dns_backend.search_domains,
    )


__all__ = ["HostCapabilities", "system_capabilities"]
