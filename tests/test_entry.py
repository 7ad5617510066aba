import ipaddress

import pytest

from website_blocker.core.entry import ManagedEntry, parse_address, parse_entry
from website_blocker.core.errors import AddressParseError, MissingDomainError


def test_parse_entry_reads_address_and_domain():
    entry = parse_entry("127.0.0.1 localhost")
    assert entry.redirect_address == ipaddress.IPv4Address("127.0.0.1")
    assert entry.domain == "localhost"


def test_parse_entry_ignores_extra_tokens_and_whitespace_runs():
    entry = parse_entry("  0.0.0.0\t\tads.example.com   alias # comment")
    assert entry == ManagedEntry(ipaddress.IPv4Address("0.0.0.0"), "ads.example.com")


def test_parse_entry_keeps_domain_verbatim():
    assert parse_entry("1.2.3.4 Not_A.Valid..Host!").domain == "Not_A.Valid..Host!"


@pytest.mark.parametrize("line", [
    "8.8.8.8.9 dns",
    "256.0.0.1 example.com",
    "1.2.3 example.com",
    "::1 localhost",
    "example.com 1.2.3.4",
    "#!wb",
    "",
])
def test_parse_entry_rejects_bad_address(line):
    with pytest.raises(AddressParseError):
        parse_entry(line)


def test_parse_entry_requires_domain():
    with pytest.raises(MissingDomainError):
        parse_entry("10.0.0.1")


def test_entry_str_is_hosts_line():
    assert str(parse_entry("1.2.3.4   example.com")) == "1.2.3.4 example.com"


def test_parse_address_error_is_value_error():
    with pytest.raises(ValueError):
        parse_address("not-an-ip")
