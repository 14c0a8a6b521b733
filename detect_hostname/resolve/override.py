# detect_hostname/resolve/override.py
from __future__ import annotations

from collections.abc import Callable


def read_override(get_env: Callable[[str], str | None], key: str) -> str | None:
    """
    Operator override: the raw value of `key` if set and non-empty, else None.

    The value is returned exactly as set (no strip, no validation). It is an
    escape hatch for hosts where DNS cannot be trusted, not a candidate.
    """
    value = get_env(key)
    if not value:
        return None
    return value
