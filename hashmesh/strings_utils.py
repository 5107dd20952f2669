"""Hex conversion and human-readable debug dumps of binary strings."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str, int]


class DebugStyle(IntEnum):
    """How much of a binary string a debug dump shows."""

    OBJECT = 0
    SHORT_DEVEL = 1
    CRYPTO_DEVEL = 2
    BIG = 2


_SHORT_LIMITS = (8, 4)
_BIG_LIMITS = (8192, 128)


def int2hexchar(i: int) -> str:
    """Return the lower-case hex digit for a value 0..15."""
    if 0 <= i <= 9:
        return chr(ord("0") + i)
    if 10 <= i <= 15:
        return chr(ord("a") + i - 10)
    raise ValueError(f"Invalid hex value:{i}")


def hexchar2int(c: str) -> int:
    """Return the value of one lower-case hex digit."""
    if len(c) == 1:
        if "0" <= c <= "9":
            return ord(c) - ord("0")
        if "a" <= c <= "f":
            return ord(c) - ord("a") + 10
    raise ValueError(f"Invalid character ({c}) in parsing hex number")


def doublehexchar2int(s: str) -> int:
    """Return the byte value of a two-digit hex string, e.g. "fd" -> 253."""
    if len(s) != 2:
        raise ValueError(f"Invalid double-hex string: '{s}'")
    return hexchar2int(s[0]) * 16 + hexchar2int(s[1])


def to_hex(data: bytes) -> str:
    """Encode bytes as lower-case hex, two digits per byte."""
    return "".join(int2hexchar(b // 16) + int2hexchar(b % 16) for b in bytes(data))


def from_hex(text: str) -> bytes:
    """Decode lower-case hex; a lone trailing digit is read as one byte."""
    pairs = (text[pos:pos + 2] for pos in range(0, len(text), 2))
    try:
        return bytes(
            doublehexchar2int(pair if len(pair) == 2 else "0" + pair) for pair in pairs
        )
    except ValueError as exc:
        raise ValueError(f"Failed to parse string [{text}]: {exc}") from exc


def _byte_value(c: Union[int, str, bytes, bytearray]) -> int:
    if isinstance(c, int):
        value = c
    elif isinstance(c, (bytes, bytearray)) and len(c) == 1:
        value = c[0]
    elif isinstance(c, str) and len(c) == 1:
        value = ord(c)
    else:
        raise ValueError(f"Expected a single character, got {c!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"Character value out of range: {value}")
    return value


def chardbg(c: Union[int, str, bytes, bytearray]) -> str:
    """Show one character in debug form, e.g. 0x0, 0x1F=31 or the plain char."""
    uc = _byte_value(c)
    if uc <= 9:
        return f"0x{uc}"
    if uc < 32:
        return f"0x{uc:02X}={uc:02d}"
    if uc > 127:
        return f"0x{uc:02X}={uc:03d}"
    return chr(uc)


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        return bytes([_byte_value(data)])
    return bytes(data)


def to_debug(data: BytesLike | None, style: DebugStyle = DebugStyle.SHORT_DEVEL) -> str:
    """Dump data as "<size>:[c,c,...]", eliding the middle of long data."""
    if data is None:
        return "(null)"
    raw = _as_bytes(data)
    head, tail = _BIG_LIMITS if style == DebugStyle.BIG else _SHORT_LIMITS
    items = [chardbg(b) for b in raw]
    if len(items) <= head + tail:
        body = ",".join(items)
    else:
        body = ",".join(items[:head]) + " ... " + ",".join(items[-tail:])
    return f"{len(raw)}:[{body}]"


def to_debug_b(data: BytesLike | None) -> str:
    """Same as to_debug, with the big limits."""
    return to_debug(data, DebugStyle.BIG)