# detect_hostname/exceptions.py
"""
Shared exception classes used across the codebase.

Only two conditions are ever surfaced to callers: a failed read of the
host itself (no candidate to start from) and full exhaustion of every
candidate. Per-candidate DNS failures are recorded as attempts, not raised.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from detect_hostname.resolve.hostname import Attempt


class HostnameError(Exception):
    """Base class for hostname detection failures."""

    pass


class CapabilityError(HostnameError):
    """
    Raised when an injected host capability (OS hostname, environment)
    fails, so there is nothing to evaluate.
    """

    pass


class AllCandidatesExhausted(HostnameError):
    """
    Raised when neither the raw hostname nor any expansion of it resolves
    to an address.

    `attempts` holds one Attempt (candidate, reason, detail) per candidate,
    in the order they were tried.
    """

    def __init__(self, start: str, attempts: Iterable[Attempt]) -> None:
        self.start = start
        self.attempts: list[Attempt] = list(attempts)
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.attempts:
            return f"no usable hostname found starting from {self.start!r}"
        tried = "; ".join(f"{a.candidate}: {a.reason}" for a in self.attempts)
        return f"no usable hostname found starting from {self.start!r} (tried {tried})"


__all__ = [
    "HostnameError",
    "CapabilityError",
    "AllCandidatesExhausted",
]
