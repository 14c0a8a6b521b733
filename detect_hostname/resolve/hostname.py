# detect_hostname/resolve/hostname.py
"""
Find the name this node should be addressed by.

Decision procedure, restarted from scratch on every call:

  1. Operator override (env key, VESPA_HOSTNAME by default): returned as-is.
  2. OS hostname, validated as-is.
  3. Search-domain expansions of a short OS hostname, validated in order.
  4. A candidate that forward-resolved but failed the reverse round-trip
     (weak fallback): the first qualified one, else the short name.
  5. Failure listing every candidate tried and why it was rejected.

Nothing is cached; concurrent callers share no state.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from itertools import islice
from typing import Any

from detect_hostname.config import Settings, load_settings
from detect_hostname.exceptions import AllCandidatesExhausted, CapabilityError

from .capabilities import HostCapabilities, system_capabilities
from .expander import expand
from .override import read_override
from .validator import Invalid, Reason, Valid, normalize_candidate, validate

log = logging.getLogger(__name__)

SOURCE_OVERRIDE = "override"
SOURCE_VERIFIED = "verified"
SOURCE_WEAK = "weak"
SOURCE_NONE = "none"


@dataclass(frozen=True, slots=True)
class Attempt:
    candidate: str
    reason: str
    detail: str | None = None


@dataclass
class ResolutionOutcome:
    """
    Result of one resolution call.

    `source` tells a verified answer from a weak fallback; the plain-string
    API (find_our_hostname*) deliberately does not.
    """

    start: str
    hostname: str | None = None
    source: str = SOURCE_NONE
    attempts: list[Attempt] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.hostname)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "hostname": self.hostname,
            "source": self.source,
            "attempts": [asdict(a) for a in self.attempts],
        }


def _wire(
    caps: HostCapabilities | None, settings: Settings | None
) -> tuple[HostCapabilities, Settings]:
    settings = settings or load_settings()
    return caps or system_capabilities(settings), settings


def _search_domains(caps: HostCapabilities, settings: Settings) -> list[str]:
    if settings.search_domains is not None:
        return list(settings.search_domains)
    try:
        return list(caps.get_search_domains() or [])
    except Exception as e:
        log.warning("could not read search domains, not expanding: %s", e)
        return []


def _record(attempts: list[Attempt], result: Valid | Invalid) -> None:
    detail = result.detail if isinstance(result, Invalid) else None
    attempts.append(Attempt(result.candidate, result.reason, detail))
    log.debug("candidate %s: %s", result.candidate, result.reason)


def resolve_from(
    candidate: str,
    caps: HostCapabilities | None = None,
    settings: Settings | None = None,
) -> ResolutionOutcome:
    """
    Run validation and expansion starting from `candidate`, skipping the
    override and the OS hostname read. Never raises for DNS trouble;
    check `outcome.ok`.
    """
    caps, settings = _wire(caps, settings)
    outcome = ResolutionOutcome(start=str(candidate))

    name = normalize_candidate(candidate)
    if name is None:
        outcome.attempts.append(
            Attempt(str(candidate), Reason.MALFORMED_CANDIDATE, "not a plausible hostname")
        )
        return outcome

    trusted = settings.trusted_suffixes
    weak: str | None = None

    result = validate(name, caps, trusted)
    _record(outcome.attempts, result)
    if isinstance(result, Valid):
        outcome.hostname, outcome.source = result.hostname, SOURCE_VERIFIED
        log.info("using hostname %s (%s)", result.hostname, result.reason)
        return outcome
    if result.forward_resolves:
        weak = name

    # A dotted name expands to itself only, so don't read the search list
    domains = [] if "." in name else _search_domains(caps, settings)
    for expanded in islice(expand(name, domains), 1, None):
        result = validate(expanded, caps, trusted)
        _record(outcome.attempts, result)
        if isinstance(result, Valid):
            outcome.hostname, outcome.source = result.hostname, SOURCE_VERIFIED
            log.info(
                "using hostname %s (%s, expanded from %s)", result.hostname, result.reason, name
            )
            return outcome
        # The first qualified weak name outranks a short one, so resolving
        # "bar" lands on the same answer as resolving "bar.foo.123"
        if result.forward_resolves and (weak is None or "." not in weak):
            weak = expanded

    if weak is not None:
        log.warning("no self-consistent hostname for %s; falling back to %s", name, weak)
        outcome.hostname, outcome.source = weak, SOURCE_WEAK
        return outcome

    log.warning("no candidate for %s resolves", name)
    return outcome


def detect(
    caps: HostCapabilities | None = None,
    settings: Settings | None = None,
) -> ResolutionOutcome:
    """
    Full procedure including the override and the OS hostname read.

    Raises CapabilityError when the environment or the OS hostname cannot
    be read; exhaustion is reported through the outcome.
    """
    caps, settings = _wire(caps, settings)

    key = settings.override_key
    try:
        override = read_override(caps.get_env, key)
    except Exception as e:
        raise CapabilityError(f"could not read environment variable {key}: {e}") from e
    if override is not None:
        log.info("using hostname %s from %s", override, key)
        return ResolutionOutcome(start=override, hostname=override, source=SOURCE_OVERRIDE)

    try:
        raw = caps.get_raw_hostname()
    except Exception as e:
        raise CapabilityError(f"could not read the OS hostname: {e}") from e
    if not raw:
        raise CapabilityError("the OS reported an empty hostname")

    return resolve_from(raw, caps, settings)


def find_our_hostname_from(
    candidate: str,
    caps: HostCapabilities | None = None,
    settings: Settings | None = None,
) -> str:
    outcome = resolve_from(candidate, caps, settings)
    if not outcome.ok:
        raise AllCandidatesExhausted(outcome.start, outcome.attempts)
    return outcome.hostname


def find_our_hostname(
    caps: HostCapabilities | None = None,
    settings: Settings | None = None,
) -> str:
    """
    The hostname other nodes and config files should use for this machine.

    Raises CapabilityError or AllCandidatesExhausted; both carry enough
    detail to diagnose DNS or search-domain misconfiguration.
    """
    outcome = detect(caps, settings)
    if not outcome.ok:
        raise AllCandidatesExhausted(outcome.start, outcome.attempts)
    return outcome.hostname


__all__ = [
    "SOURCE_OVERRIDE",
    "SOURCE_VERIFIED",
    "SOURCE_WEAK",
    "SOURCE_NONE",
    "Attempt",
    "ResolutionOutcome",
    "resolve_from",
    "detect",
    "find_our_hostname_from",
    "find_our_hostname",
]
