# detect_hostname/resolve/expander.py
from __future__ import annotations

from collections.abc import Iterable, Iterator


def _norm_search_domain(domain: str) -> str:
    return str(domain).strip().strip(".")


def expand(candidate: str, search_domains: Iterable[str]) -> Iterator[str]:
    """
    Yield the names to try for `candidate`, in trial order.

    A dotted name is taken as already qualified and yielded alone. A short
    name is yielded first, then once per search domain
    (host, host.example.com, host.internal, ...). Blank domains and repeats
    are skipped, so nothing is yielded twice.
    """
    yield candidate
    if "." in candidate:
        return

    seen = {candidate}
    for domain in search_domains:
        suffix = _norm_search_domain(domain)
        if not suffix:
            continue
        name = f"{candidate}.{suffix}"
        if name in seen:
            continue
        seen.add(name)
        yield name
