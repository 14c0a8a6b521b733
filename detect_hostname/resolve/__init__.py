# detect_hostname/resolve/__init__.py
from __future__ import annotations

from .capabilities import HostCapabilities, system_capabilities
from .expander import expand
from .hostname import (
    SOURCE_NONE,
    SOURCE_OVERRIDE,
    SOURCE_VERIFIED,
    SOURCE_WEAK,
    Attempt,
    ResolutionOutcome,
    detect,
    find_our_hostname,
    find_our_hostname_from,
    resolve_from,
)
from .override import read_override
from .validator import Invalid, Reason, Valid, ValidationResult, normalize_candidate, validate

"""
Resolve package

  - `override`  reads the operator override from the environment.
  - `validator` checks a candidate with a forward/reverse DNS round-trip.
  - `expander`  turns a short hostname into search-domain candidates.
  - `hostname`  runs the whole decision procedure.
  - `capabilities` / `dns_backend` wire in the host's environment,
    hostname and resolvers.
"""

__all__ = [
    "HostCapabilities",
    "system_capabilities",
    "read_override",
    "Reason",
    "Valid",
    "Invalid",
    "ValidationResult",
    "normalize_candidate",
    "validate",
    "expand",
    "SOURCE_OVERRIDE",
    "SOURCE_VERIFIED",
    "SOURCE_WEAK",
    "SOURCE_NONE",
    "Attempt",
    "ResolutionOutcome",
    "resolve_from",
    "detect",
    "find_our_hostname",
    "find_our_hostname_from",
]
