# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from detect_hostname.config import Settings
from detect_hostname.resolve import HostCapabilities

_ENV_KEYS = (
    "VESPA_HOSTNAME",
    "HOSTNAME_OVERRIDE_KEY",
    "HOSTNAME_SEARCH_DOMAINS",
    "HOSTNAME_TRUSTED_SUFFIXES",
    "HOSTNAME_RESOLVER",
    "HOSTNAME_DNS_TIMEOUT_SECONDS",
    "HOSTNAME_LOG_LEVEL",
)


class FakeHost:
    """
    In-memory stand-in for the environment, the OS hostname and DNS.

    forward: name -> addresses, reverse: address -> names. Names listed in
    `failing` raise OSError on any lookup, like a resolver timeout.
    """

    def __init__(
        self,
        *,
        forward: dict[str, list[str]] | None = None,
        reverse: dict[str, list[str]] | None = None,
        env: dict[str, str] | None = None,
        hostname: str = "node1",
        search: list[str] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.forward = dict(forward or {})
        self.reverse = dict(reverse or {})
        self.env = dict(env or {})
        self.hostname = hostname
        self.search = list(search or [])
        self.failing = set(failing or ())
        self.calls: dict[str, list[str]] = {"forward": [], "reverse": [], "search": []}

    def get_env(self, key: str) -> str | None:
        return self.env.get(key)

    def get_raw_hostname(self) -> str:
        return self.hostname

    def resolve_forward(self, name: str) -> list[str]:
        self.calls["forward"].append(name)
        if name in self.failing:
            raise OSError(f"timed out resolving {name}")
        return list(self.forward.get(name, []))

    def resolve_reverse(self, address: str) -> list[str]:
        self.calls["reverse"].append(address)
        if address in self.failing:
            raise OSError(f"timed out reversing {address}")
        return list(self.reverse.get(address, []))

    def get_search_domains(self) -> list[str]:
        self.calls["search"].append("")
        return list(self.search)

    def caps(self) -> HostCapabilities:
        return HostCapabilities(
            get_env=self.get_env,
            get_raw_hostname=self.get_raw_hostname,
            resolve_forward=self.resolve_forward,
            resolve_reverse=self.resolve_reverse,
            get_search_domains=self.get_search_domains,
        )


@pytest.fixture(autouse=True)
def _clean_hostname_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Autouse: no test sees an override or config from the real environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def fake_host():
    """Factory for FakeHost instances."""
    return FakeHost


@pytest.fixture()
def consistent_host() -> FakeHost:
    """
    A tidy network: node1.example.com <-> 10.0.0.5, search list
    example.com then internal.
    """
    return FakeHost(
        forward={"node1.example.com": ["10.0.0.5"]},
        reverse={"10.0.0.5": ["node1.example.com"]},
        hostname="node1",
        search=["example.com", "internal"],
    )
