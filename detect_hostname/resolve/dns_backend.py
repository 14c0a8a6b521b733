# detect_hostname/resolve/dns_backend.py
from __future__ import annotations

import logging
import socket

import dns.exception
import dns.resolver
import dns.reversename

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 2.0


def _unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            out.append(item)
    return out


# -----------------------------
# System (libc) lookups
# -----------------------------


def system_forward(name: str) -> list[str]:
    """
    Forward lookup via socket.getaddrinfo, so /etc/hosts and nsswitch are
    honoured. Addresses keep the order libc returned them in.
    """
    infos = socket.getaddrinfo(name, None, proto=socket.IPPROTO_TCP)
    addrs: list[str] = []
    for _family, _socktype, _proto, _canon, sockaddr in infos:
        raw = sockaddr[0]
        if isinstance(raw, str):
            addrs.append(raw)
    return _unique(addrs)


def system_reverse(address: str) -> list[str]:
    primary, aliases, _addrs = socket.gethostbyaddr(address)
    return _unique([h.rstrip(".") for h in [primary, *aliases]])


def system_hostname() -> str:
    return socket.gethostname()


# -----------------------------
# dnspython lookups
# -----------------------------


def _make_resolver(timeout: float) -> dns.resolver.Resolver:
    resolver = dns.resolver.Resolver(configure=True)
    resolver.lifetime = timeout
    resolver.timeout = timeout
    return resolver


def dns_forward(name: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> list[str]:
    """
    A then AAAA lookup. Relative names go through the resolver search list.
    Raises the last DNS error if neither record type produced an answer.
    """
    resolver = _make_resolver(timeout)
    addrs: list[str] = []
    last_err: dns.exception.DNSException | None = None
    for rtype in ("A", "AAAA"):
        try:
            answers = resolver.resolve(name, rtype, search=True)
        except dns.exception.DNSException as e:
            last_err = e
            continue
        addrs.extend(r.to_text() for r in answers)
    if not addrs and last_err is not None:
        raise last_err
    return _unique(addrs)


def dns_reverse(address: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> list[str]:
    resolver = _make_resolver(timeout)
    answers = resolver.resolve(dns.reversename.from_address(address), "PTR")
    return _unique([r.target.to_text(omit_final_dot=True) for r in answers])


def search_domains() -> list[str]:
    """
    Search list from the system resolver configuration (resolv.conf on
    POSIX). Returns [] when there is no usable configuration.
    """
    try:
        resolver = dns.resolver.Resolver(configure=True)
    except dns.resolver.NoResolverConfiguration:
        log.debug("no system resolver configuration; no search domains")
        return []
    return _unique([n.to_text(omit_final_dot=True) for n in resolver.search])


__all__ = [
    "system_forward",
    "system_reverse",
    "system_hostname",
    "dns_forward",
    "dns_reverse",
    "search_domains",
]
