# detect_hostname/resolve/validator.py
"""
Candidate validation.

A candidate is usable when it forward-resolves and at least one of its
addresses reverse-resolves to a name that forward-resolves back to one of
the same addresses (self-consistency). Names under an operator-trusted
suffix skip DNS altogether.

Every DNS failure (timeout, NXDOMAIN, unreachable resolver) is treated as
an empty answer; nothing raised by a lookup escapes validate().
"""

from __future__ import annotations

import ipaddress
import logging
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

import idna

from .capabilities import HostCapabilities

log = logging.getLogger(__name__)

# RFC 1035 presentation-format limit, without the root dot
_MAX_NAME_LENGTH = 253


class Reason:
    SELF_CONSISTENT = "self_consistent"
    TRUSTED_SUFFIX = "trusted_suffix"
    NO_FORWARD_RESOLUTION = "no_forward_resolution"
    NO_REVERSE_CONSISTENCY = "no_reverse_consistency"
    MALFORMED_CANDIDATE = "malformed_candidate"


@dataclass(frozen=True, slots=True)
class Valid:
    candidate: str
    hostname: str  # what the caller should use; qualified when DNS offered one
    reason: str = Reason.SELF_CONSISTENT


@dataclass(frozen=True, slots=True)
class Invalid:
    candidate: str
    reason: str
    addresses: tuple[str, ...] = ()
    detail: str | None = None

    @property
    def forward_resolves(self) -> bool:
        return self.reason == Reason.NO_REVERSE_CONSISTENCY


ValidationResult = Valid | Invalid


# -----------------------------
# Candidate hygiene
# -----------------------------


def _has_bad_chars(name: str) -> bool:
    for ch in name:
        if ch.isspace():
            return True
        if unicodedata.category(ch).startswith("C"):
            return True
    return False


def is_plausible(name: str) -> bool:
    """
    Non-empty, no whitespace or control characters, no empty labels and
    within the DNS length limit.
    """
    if not name or len(name) > _MAX_NAME_LENGTH:
        return False
    if _has_bad_chars(name):
        return False
    return all(label for label in name.split("."))


def normalize_candidate(name: str) -> str | None:
    """
    Drop a trailing root dot and IDNA-encode non-ASCII names.

    ASCII names pass through untouched (case included); strict IDNA would
    reject underscores that real hostnames carry. Returns None when the
    name cannot be made plausible.
    """
    s = str(name)
    if s.endswith("."):
        s = s[:-1]
    if not s.isascii():
        try:
            s = idna.encode(s, uts46=True).decode("ascii")
        except idna.IDNAError:
            return None
    return s if is_plausible(s) else None


# -----------------------------
# Lookups (capability errors become empty answers)
# -----------------------------


def _forward(caps: HostCapabilities, name: str) -> list[str]:
    try:
        return list(caps.resolve_forward(name) or [])
    except Exception as e:
        log.debug("forward lookup of %s failed: %s", name, e)
        return []


def _reverse(caps: HostCapabilities, address: str) -> list[str]:
    try:
        names = caps.resolve_reverse(address) or []
    except Exception as e:
        log.debug("reverse lookup of %s failed: %s", address, e)
        return []
    return [str(n).rstrip(".") for n in names if n and str(n).rstrip(".")]


def _addr_key(address: str) -> object:
    """
    Comparable form of an address, so equivalent spellings
    ("::1" / "0:0:0:0:0:0:0:1", "fe80::1%eth0") match.
    """
    raw = str(address).split("%", 1)[0].strip()
    try:
        return ipaddress.ip_address(raw)
    except ValueError:
        return raw.lower()


def _addr_keys(addresses: Iterable[str]) -> set[object]:
    return {_addr_key(a) for a in addresses}


def _is_trusted(candidate: str, trusted_suffixes: Iterable[str]) -> bool:
    name = candidate.lower()
    for suffix in trusted_suffixes:
        s = str(suffix).strip().strip(".").lower()
        if not s:
            continue
        if name == s or name.endswith("." + s):
            return True
    return False


# -----------------------------
# Public API
# -----------------------------


def validate(
    candidate: str,
    caps: HostCapabilities,
    trusted_suffixes: Iterable[str] = (),
) -> ValidationResult:
    if not is_plausible(candidate):
        return Invalid(candidate, Reason.MALFORMED_CANDIDATE, detail="not a plausible hostname")

    if "." in candidate and _is_trusted(candidate, trusted_suffixes):
        return Valid(candidate, candidate, Reason.TRUSTED_SUFFIX)

    addrs = _forward(caps, candidate)
    if not addrs:
        return Invalid(candidate, Reason.NO_FORWARD_RESOLUTION)

    wanted = _addr_keys(addrs)
    qualified = "." in candidate
    prefix = candidate.lower() + "."
    consistent = False

    for addr in addrs:
        for rname in _reverse(caps, addr):
            if not wanted & _addr_keys(_forward(caps, rname)):
                continue
            if qualified:
                return Valid(candidate, candidate)
            # Short name: keep looking for the qualified spelling of it
            if rname.lower().startswith(prefix):
                return Valid(candidate, rname)
            consistent = True

    if consistent:
        return Valid(candidate, candidate)

    return Invalid(
        candidate,
        Reason.NO_REVERSE_CONSISTENCY,
        addresses=tuple(addrs),
        detail=f"no reverse name maps back to {', '.join(addrs)}",
    )


__all__ = [
    "Reason",
    "Valid",
    "Invalid",
    "ValidationResult",
    "is_plausible",
    "normalize_candidate",
    "validate",
]
