"""Parsing of peer endpoint strings such as "100.200.50.50:32000"."""

from __future__ import annotations

import ipaddress
import logging
import re

log = logging.getLogger(__name__)

_MIN_SIZE = (1 + 1) * 4
_MAX_SIZE = 4 * 4 + 1 + 4
_PORT_MAX = 65535
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_port(port: str) -> int:
    """Read the leading integer of port, ignoring what follows it."""
    match = _LEADING_INT.match(port)
    if match is None:
        raise ValueError(f"Invalid port {port!r}")
    return int(match.group(1))


def _is_good_class(addr: ipaddress.IPv4Address) -> bool:
    first = addr.packed[0]
    is_class_abc = (first & 0x80) == 0 or (first & 0xC0) == 0x80 or (first & 0xE0) == 0xC0
    return is_class_abc or addr.is_loopback


def parse_ip_string(ip_string: str) -> tuple[str, int]:
    """Split "a.b.c.d:port" into the IPv4 text and the port number, validating both."""
    if len(ip_string) < _MIN_SIZE:
        raise ValueError(f"Invalid (too small) IP size {len(ip_string)}")
    if len(ip_string) > _MAX_SIZE:
        raise ValueError(f"Invalid (too big) IP size {len(ip_string)}")

    ip, sep, port = ip_string.partition(":")
    if not sep:
        raise ValueError(f"Invalid IP format (char ':') {ip_string}")
    if len(ip) < _MIN_SIZE:
        raise ValueError(f"Invalid (too small) IP size (ip part) {len(ip)}")

    log.debug("Parsing IP as strings: %s port string: %s", ip, port)
    port_int = _parse_port(port)
    if port_int <= 0 or port_int > _PORT_MAX:
        raise ValueError(f"Invalid port {port_int}")
    log.info("Parsing IP as strings: %s port int: %d", ip, port_int)

    try:
        addr = ipaddress.IPv4Address(ip)
    except ValueError as exc:
        raise ValueError(f"Invalid address {ip} ({exc})") from exc

    is_bad_class = addr.is_unspecified or addr.is_multicast
    if not (_is_good_class(addr) and not is_bad_class):
        raise ValueError(f"Invalid address (not a normal ip-class of address) {addr}")

    return ip, port_int