"""Hash-IP addresses: 128-bit virtual IPv6 addresses of the mesh."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import Iterator, Union

from hashmesh.strings_utils import to_debug_b, to_hex

log = logging.getLogger(__name__)

# IPv6 header layout (RFC 2460 section 3).
IPV6_LENGTH_OF_ADDR = 128 // 8
IPV6_HEADER_POSITION_OF_SRC = 8
IPV6_HEADER_LENGTH_OF_SRC = 128 // 8
IPV6_HEADER_POSITION_OF_DST = 24
IPV6_HEADER_LENGTH_OF_DST = 128 // 8

# Offset of the IPv6 packet in a TUN frame carrying packet information.
TUN_WITH_PI_HEADER_POSITION_OF_IPV6 = 4

HASHIP_ADDR_SIZE = 16
HASHIP_PUBKEY_SIZE = 32

_GALAXY_PREFIX = b"\xfd\x42"

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True, order=True)
class HashipAddr:
    """A 16-octet hash-IP address; the default is all zeros."""

    data: bytes = bytes(HASHIP_ADDR_SIZE)

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != HASHIP_ADDR_SIZE:
            raise ValueError(
                f"Hash-IP address must be {HASHIP_ADDR_SIZE} octets, got {len(raw)}"
            )
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_dot(cls, text: str) -> "HashipAddr":
        """Create the address from IPv6 colon notation, e.g. "fd42::1"."""
        log.debug("Parsing IP: addr_string %s", text)
        try:
            packed = ipaddress.IPv6Address(text).packed
        except ValueError as exc:
            raise ValueError(f"The IP address looks invalid [{text}]") from exc
        return cls(packed)

    @classmethod
    def from_bin(cls, data: BytesLike) -> "HashipAddr":
        """Create the address from its 16-octet binary form."""
        raw = bytes(data)
        if len(raw) != HASHIP_ADDR_SIZE:
            raise ValueError(
                f"Trying to set hip address from binary data {to_debug_b(raw)}"
            )
        return cls(raw)

    def get_hip_as_string(self, with_dots: bool) -> str:
        """Hex form of the address, optionally with ':' between groups of 4 digits."""
        digits = to_hex(self.data)
        if not with_dots:
            return digits
        return ":".join(digits[pos:pos + 4] for pos in range(0, len(digits), 4))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __str__(self) -> str:
        return "hip:" + to_hex(self.data)


def addr_is_galaxy(addr: HashipAddr) -> bool:
    """Tell whether the address is in the fd42::/16 galaxy range."""
    return bytes(addr)[:2] == _GALAXY_PREFIX