#!/usr/bin/env python3
import dataclasses
import ipaddress

from website_blocker.core.errors import AddressParseError, MissingDomainError


def parse_address(text: str) -> ipaddress.IPv4Address:
    """Parse a dotted-quad IPv4 address, raising AddressParseError otherwise"""
    try:
        return ipaddress.IPv4Address(text)
    except ValueError as e:
        raise AddressParseError(f"Invalid IP address: {text!r}") from e


@dataclasses.dataclass(frozen=True)
class ManagedEntry:
    redirect_address: ipaddress.IPv4Address
    domain: str

    def __str__(self) -> str:
        return f"{self.redirect_address} {self.domain}"


def parse_entry(line: str) -> ManagedEntry:
    """Read a hosts line of the form ``<ipv4> <domain> [ignored ...]``.

    Tokens past the domain are ignored. The domain is taken verbatim.
    """
    parts = line.split()
    if not parts:
        raise AddressParseError("No redirect IP provided!")
    redirect_address = parse_address(parts[0])
    if len(parts) < 2:
        raise MissingDomainError("No domain name provided!")
    return ManagedEntry(redirect_address=redirect_address, domain=parts[1])
