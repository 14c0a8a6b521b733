from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

RESOLVER_BACKENDS = ("system", "dns")


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


def _getenv_float(name: str, default: float) -> float:
    v = os.getenv(name, str(default)).strip()
    try:
        return float(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be a number; got {v!r}") from err


def _getenv_list_str(name: str, default_csv: str) -> list[str]:
    raw = os.getenv(name, default_csv).strip()
    out: list[str] = []
    for tok in (t.strip() for t in raw.split(",")):
        if tok:
            out.append(tok)
    return out


def _getenv_optional_list_str(name: str) -> list[str] | None:
    """
    Like _getenv_list_str, but distinguishes "unset" (None) from "set to
    an empty list". An empty HOSTNAME_SEARCH_DOMAINS disables expansion.
    """
    if os.getenv(name) is None:
        return None
    return _getenv_list_str(name, "")


# Load .env from project root if present
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env", override=False)

# Env key operators set to force the answer, bypassing DNS entirely
DEFAULT_OVERRIDE_KEY = "VESPA_HOSTNAME"
DEFAULT_RESOLVER = "system"
DEFAULT_DNS_TIMEOUT_SECONDS = 2.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    override_key: str = DEFAULT_OVERRIDE_KEY
    # None means "ask the system resolver configuration"
    search_domains: list[str] | None = None
    trusted_suffixes: list[str] = field(default_factory=list)
    resolver: str = DEFAULT_RESOLVER
    dns_timeout_seconds: float = DEFAULT_DNS_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Read at call time rather than import time so a long-running process (or
    a test) sees changes to the environment.
    """
    resolver = _getenv_str("HOSTNAME_RESOLVER", DEFAULT_RESOLVER).lower()
    if resolver not in RESOLVER_BACKENDS:
        raise ValueError(
            f"Environment variable HOSTNAME_RESOLVER must be one of "
            f"{', '.join(RESOLVER_BACKENDS)}; got {resolver!r}"
        )

    timeout = _getenv_float("HOSTNAME_DNS_TIMEOUT_SECONDS", DEFAULT_DNS_TIMEOUT_SECONDS)
    if timeout <= 0:
        raise ValueError(
            f"Environment variable HOSTNAME_DNS_TIMEOUT_SECONDS must be positive; got {timeout!r}"
        )

    return Settings(
        override_key=_getenv_str("HOSTNAME_OVERRIDE_KEY", DEFAULT_OVERRIDE_KEY)
        or DEFAULT_OVERRIDE_KEY,
        search_domains=_getenv_optional_list_str("HOSTNAME_SEARCH_DOMAINS"),
        trusted_suffixes=_getenv_list_str("HOSTNAME_TRUSTED_SUFFIXES", ""),
        resolver=resolver,
        dns_timeout_seconds=timeout,
        log_level=_getenv_str("HOSTNAME_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        or DEFAULT_LOG_LEVEL,
    )


__all__ = [
    "RESOLVER_BACKENDS",
    "DEFAULT_OVERRIDE_KEY",
    "Settings",
    "load_settings",
]
