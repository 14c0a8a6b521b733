"""Detect the stable, fully-qualified hostname other nodes should use for this one."""

from __future__ import annotations

from .exceptions import AllCandidatesExhausted, CapabilityError, HostnameError
from .resolve import find_our_hostname, find_our_hostname_from

__version__ = "0.1.0"

__all__ = [
    "find_our_hostname",
    "find_our_hostname_from",
    "HostnameError",
    "CapabilityError",
    "AllCandidatesExhausted",
]
