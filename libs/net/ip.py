from __future__ import annotations

from collections.abc import Iterable

import netaddr

from libs.net.stack import IPFamily


def ip_family(address: str) -> IPFamily | None:
    """
    Classify an IP address literal by its family.

    IPv4-mapped IPv6 literals (e.g. ::ffff:10.0.0.1) are classified as IPv4.

    Args:
        address (str): IP address literal, without prefix length or zone.

    Returns:
        IPFamily | None: the address family, or None if the literal is not a valid address.
    """
    # netaddr refuses empty strings with AddrFormatError instead of reporting them invalid
    if not address or not isinstance(address, str):
        return None
    if netaddr.valid_ipv4(address, flags=netaddr.INET_PTON):
        return IPFamily.IPV4
    if netaddr.valid_ipv6(address):
        if netaddr.IPAddress(address, version=6).is_ipv4_mapped():
            return IPFamily.IPV4
        return IPFamily.IPV6
    return None


def filter_ips_by_family(ips: Iterable[str] | None) -> tuple[list[str], list[str]]:
    """
    Split addresses into IPv4 and IPv6 lists, keeping their relative order.

    Entries that are not valid IP literals are dropped.

    Args:
        ips (Iterable[str] | None): addresses to split.

    Returns:
        tuple[list[str], list[str]]: IPv4 addresses and IPv6 addresses.
    """
    ipv4s: list[str] = []
    ipv6s: list[str] = []
    for ip in ips or []:
        family = ip_family(address=ip)
        if family == IPFamily.IPV4:
            ipv4s.append(ip)
        elif family == IPFamily.IPV6:
            ipv6s.append(ip)
    return ipv4s, ipv6s
