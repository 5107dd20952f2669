"""Reader of the compact binary serialization format."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar, Union

from hashmesh.errors import FormatErrorRead, FormatErrorReadBadFormat, FormatErrorReadDelimiter
from hashmesh.strings_utils import chardbg

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

SANE_MAX_SIZE_FOR_STRING = 50_000_000

_DEBUG_LOOKAHEAD = 8

log = logging.getLogger(__name__)


class Parser:
    """Reads serialized data front to back, raising FormatError on bad input."""

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of octets consumed so far."""
        return self._pos

    def _remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Size can not be negative: {size}")
        if size == 0:
            return b""
        if self._remaining() < size:
            raise FormatErrorRead()
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    # --- static interface ---

    def pop_byte_u(self) -> int:
        """Read one unsigned byte."""
        if self._remaining() < 1:
            raise FormatErrorRead()
        value = self._data[self._pos]
        self._pos += 1
        return value

    def pop_byte_s(self) -> int:
        """Read one signed byte."""
        value = self.pop_byte_u()
        return value - 0x100 if value >= 0x80 else value

    def pop_byte_skip(self, c: Union[int, str, bytes]) -> None:
        """Read one byte that must equal c (e.g. a delimiter)."""
        if isinstance(c, str):
            expected = ord(c)
        elif isinstance(c, (bytes, bytearray)):
            if len(c) != 1:
                raise ValueError(f"Expected a single byte, got {c!r}")
            expected = c[0]
        else:
            expected = c & 0xFF
        if self.pop_byte_u() != expected:
            raise FormatErrorReadDelimiter()

    def pop_integer_u(self, octets: int) -> int:
        """Read a big-endian unsigned integer that is the given number of octets wide."""
        if not 1 <= octets <= 8:
            raise ValueError(f"Number of octets must be in 1..8, got {octets}")
        return int.from_bytes(self._take(octets), "big")

    def pop_bytes_n(self, size: int) -> bytes:
        """Read exactly size octets; size may be 0."""
        return self._take(size)

    def skip_bytes_n(self, size: int) -> None:
        """Skip exactly size octets."""
        self._take(size)

    def pop_bytes_sizeoctets(self, octets: int) -> bytes:
        """Read data prefixed by its length written on the given number of octets."""
        size = self.pop_integer_u(octets)
        return self.pop_bytes_n(size)

    # --- dynamic interface ---

    def pop_integer_uvarint(self) -> int:
        """Read an unsigned integer written on 1, 3, 5 or 9 octets."""
        first = self.pop_byte_u()
        if first < 0xFD:
            return first
        if first == 0xFD:
            return self.pop_integer_u(2)
        if first == 0xFE:
            return self.pop_integer_u(4)
        return self.pop_integer_u(8)

    def _pop_varstring_size(self) -> int:
        size = self.pop_integer_uvarint()
        if size > SANE_MAX_SIZE_FOR_STRING:
            raise FormatErrorRead(
                f"String size {size} is over the sane maximum {SANE_MAX_SIZE_FOR_STRING}"
            )
        return size

    def pop_varstring(self) -> bytes:
        """Read data of any length saved with push_varstring."""
        return self.pop_bytes_n(self._pop_varstring_size())

    def skip_varstring(self) -> None:
        """Skip data saved with push_varstring."""
        self.skip_bytes_n(self._pop_varstring_size())

    # --- high level interface ---

    def pop_vector_string(self) -> list[bytes]:
        """Read a list saved with push_vector_string."""
        count = self.pop_integer_uvarint()
        return [self.pop_varstring() for _ in range(count)]

    def pop_object(self, deserialize: Callable[["Parser"], T]) -> T:
        """Read one object using the given deserialize(parser) function."""
        return deserialize(self)

    def pop_vector_object(self, deserialize: Callable[["Parser"], T]) -> list[T]:
        """Read a list saved with push_vector_object."""
        count = self.pop_integer_uvarint()
        return [self.pop_object(deserialize) for _ in range(count)]

    def pop_map_object(
        self,
        deserialize_key: Callable[["Parser"], K],
        deserialize_value: Callable[["Parser"], V],
    ) -> dict[K, V]:
        """Read a mapping saved with push_map_object; a repeated key is an error."""
        count = self.pop_integer_uvarint()
        result: dict[K, V] = {}
        for _ in range(count):
            key = self.pop_object(deserialize_key)
            value = self.pop_object(deserialize_value)
            if key in result:
                raise FormatErrorReadBadFormat()
            result[key] = value
        if len(result) != count:
            raise FormatErrorReadBadFormat()
        return result

    def is_end(self) -> bool:
        """Tell whether all data was consumed."""
        return self._pos >= len(self._data)

    def debug(self) -> str:
        """Describe the current position and the next few octets; also logs it."""
        shown: list[str] = []
        for offset in range(_DEBUG_LOOKAHEAD):
            index = self._pos + offset
            if index < len(self._data):
                shown.append(chardbg(self._data[index]))
            else:
                shown.append("(END)")
                break
        text = (
            f"is at POS octet number:{self._pos}. "
            f"range is [0..{len(self._data)}). "
            f"Next: {','.join(shown)}"
        )
        log.info("Parser %s", text)
        return text

    def __repr__(self) -> str:
        return f"Parser(position={self._pos}, size={len(self._data)})"


def _unused(*_: Any) -> None:  # pragma: no cover
    return None