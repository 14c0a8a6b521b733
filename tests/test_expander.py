# tests/test_expander.py
from __future__ import annotations

import pytest

from detect_hostname.resolve import expand


def test_short_name_expands_in_search_order():
    got = list(expand("host", ["example.com", "internal"]))
    assert got == ["host", "host.example.com", "host.internal"]


def test_dotted_name_is_not_expanded():
    got = list(expand("host.example.com", ["example.com", "internal"]))
    assert got == ["host.example.com"]


def test_no_search_domains_yields_candidate_only():
    assert list(expand("host", [])) == ["host"]


def test_search_domains_are_normalized_and_deduplicated():
    got = list(expand("host", [".example.com.", "", "example.com", "  ", "lab"]))
    assert got == ["host", "host.example.com", "host.lab"]


def test_bounded_by_domain_count_plus_one():
    domains = [f"d{i}.test" for i in range(7)]
    assert len(list(expand("host", domains))) <= len(domains) + 1


def test_restartable():
    domains = ["a.test", "b.test"]
    assert list(expand("host", domains)) == list(expand("host", domains))


def test_lazy_does_not_consume_domains_up_front():
    def domains():
        yield "example.com"
        raise AssertionError("second domain should not be read yet")

    it = expand("host", domains())
    assert next(it) == "host"
    assert next(it) == "host.example.com"
    with pytest.raises(AssertionError):
        next(it)
