"""IP address utilities for HTTP:BL queries."""

import ipaddress

from httpbl.exceptions import InvalidAddress


# Project Honey Pot DNS zone for HTTP:BL lookups
SEARCH_DOMAIN = "dnsbl.httpbl.org"


def is_valid_ipv4(ip: str) -> bool:
    """Validate if string is a valid IPv4 address.

    Args:
        ip: IP address string to validate.

    Returns:
        bool: True if valid IPv4, False otherwise.

    Examples:
        >>> is_valid_ipv4("203.0.113.45")
        True
        >>> is_valid_ipv4("256.0.0.1")
        False
        >>> is_valid_ipv4("::1")
        False
    """
    if not isinstance(ip, str):
        return False
    try:
        addr = ipaddress.ip_address(ip)
        return isinstance(addr, ipaddress.IPv4Address)
    except ValueError:
        return False


def normalize_ipv4(ip: str | ipaddress.IPv4Address) -> str:
    """Return the dotted-quad form of an IPv4 address.

    Args:
        ip: Address as a string or an ipaddress.IPv4Address.

    Returns:
        str: Dotted-quad IPv4 address.

    Raises:
        InvalidAddress: If ip is not a valid IPv4 address.
    """
    if isinstance(ip, ipaddress.IPv4Address):
        return str(ip)
    if not is_valid_ipv4(ip):
        raise InvalidAddress(ip)
    return str(ipaddress.IPv4Address(ip))


def reverse_ip(ip: str | ipaddress.IPv4Address) -> str:
    """Convert IPv4 address to reverse octet order for HTTP:BL queries.

    Args:
        ip: IPv4 address in dotted-quad format.

    Returns:
        str: Reversed IP address.

    Raises:
        InvalidAddress: If IP is not a valid IPv4 address.

    Examples:
        >>> reverse_ip("203.0.113.45")
        '45.113.0.203'
    """
    octets = normalize_ipv4(ip).split(".")
    return ".".join(reversed(octets))


def build_lookup_hostname(
    access_key: str, ip: str | ipaddress.IPv4Address, zone: str = SEARCH_DOMAIN
) -> str:
    """Build the HTTP:BL query hostname for DNS lookup.

    Args:
        access_key: Project Honey Pot access key (not validated).
        ip: IPv4 address to check.
        zone: HTTP:BL zone domain.

    Returns:
        str: Query hostname (e.g., "abcdefghijkl.45.113.0.203.dnsbl.httpbl.org").

    Raises:
        InvalidAddress: If IP is invalid.

    Examples:
        >>> build_lookup_hostname("abcdefghijkl", "203.0.113.45")
        'abcdefghijkl.45.113.0.203.dnsbl.httpbl.org'
    """
    return f"{access_key}.{reverse_ip(ip)}.{zone}"


def parse_octets(response: str) -> tuple[int, int, int, int] | None:
    """Split a dotted-quad resolver answer into four integer octets.

    Args:
        response: Resolver answer string.

    Returns:
        tuple | None: The four octets, or None if response is not dotted-quad IPv4.
    """
    if not is_valid_ipv4(response):
        return None
    first, second, third, fourth = (int(octet) for octet in response.split("."))
    return first, second, third, fourth
