"""Builder of the compact binary serialization format."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence, TypeVar, Union

from hashmesh.errors import FormatErrorWriteValueTooBig

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Data = Union[bytes, bytearray, memoryview, str]


def max_value_of_octets(octets: int) -> int:
    """Largest unsigned integer that fits in the given number of octets (1..8)."""
    if not 1 <= octets <= 8:
        raise ValueError(f"Number of octets must be in 1..8, got {octets}")
    shift = (octets - 1) * 8
    return (0xFF << shift) | ((1 << shift) - 1)


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Generator:
    """Accumulates serialized data; get the result with getvalue()."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return self.getvalue()

    # --- static interface ---

    def push_byte_u(self, c: int) -> None:
        """Append one unsigned byte (0..255)."""
        if not 0 <= c <= 0xFF:
            raise ValueError(f"Unsigned byte out of range: {c}")
        self._buf.append(c)

    def push_byte_s(self, c: int) -> None:
        """Append one signed byte (-128..127)."""
        if not -0x80 <= c <= 0x7F:
            raise ValueError(f"Signed byte out of range: {c}")
        self._buf.append(c & 0xFF)

    def push_integer_u(self, octets: int, value: int) -> None:
        """Append an unsigned integer as a big-endian field of the given width.

        The largest value of the field is refused, as is any value above it.
        """
        limit = max_value_of_octets(octets)
        if value < 0:
            raise ValueError(f"Unsigned integer can not be negative: {value}")
        if value >= limit:
            raise FormatErrorWriteValueTooBig()
        self._buf += value.to_bytes(octets, "big")

    def push_bytes_n(self, size: int, data: Data) -> None:
        """Append data of a size known to both writer and reader."""
        raw = _as_bytes(data)
        if size != len(raw):
            raise ValueError(f"Declared size {size} differs from data size {len(raw)}")
        self._buf += raw

    def push_bytes_sizeoctets(
        self, octets: int, data: Data, max_size: int | None = None
    ) -> None:
        """Append data prefixed by its length written on 1..4 octets."""
        if not 1 <= octets <= 4:
            raise ValueError(
                "Unsupported number of octets that will express actual size of the data; "
                "use 1, 2, 3 or 4"
            )
        raw = _as_bytes(data)
        if max_size is not None and len(raw) > max_size:
            raise ValueError(f"Data size {len(raw)} is over the maximum {max_size}")
        self.push_integer_u(octets, len(raw))
        self._buf += raw

    # --- dynamic interface ---

    def push_integer_uvarint(self, val: int) -> None:
        """Append an unsigned integer on 1, 3, 5 or 9 octets (CompactSize-like)."""
        if val < 0:
            raise ValueError(f"Unsigned integer can not be negative: {val}")
        if val < 0xFD:
            self.push_integer_u(1, val)
        elif val < 0xFFFF:
            self.push_byte_u(0xFD)
            self.push_integer_u(2, val)
        elif val < 0xFFFFFFFF:
            self.push_byte_u(0xFE)
            self.push_integer_u(4, val)
        else:
            self.push_byte_u(0xFF)
            self.push_integer_u(8, val)

    def push_varstring(self, data: Data) -> None:
        """Append data of any length, prefixed by its uvarint length."""
        raw = _as_bytes(data)
        self.push_integer_uvarint(len(raw))
        self.push_bytes_n(len(raw), raw)

    # --- high level interface ---

    def push_vector_string(self, data: Sequence[Data]) -> None:
        """Append a count followed by each item as a varstring."""
        self.push_integer_uvarint(len(data))
        for item in data:
            self.push_varstring(item)

    def push_object(self, data: T, serialize: Callable[[T, "Generator"], Any]) -> None:
        """Append one object using the given serialize(obj, generator) function."""
        serialize(data, self)

    def push_vector_object(
        self, data: Sequence[T], serialize: Callable[[T, "Generator"], Any]
    ) -> None:
        """Append a count followed by each object."""
        self.push_integer_uvarint(len(data))
        for item in data:
            self.push_object(item, serialize)

    def push_map_object(
        self,
        data: Mapping[K, V],
        serialize_key: Callable[[K, "Generator"], Any],
        serialize_value: Callable[[V, "Generator"], Any],
    ) -> None:
        """Append a count followed by key/value pairs in ascending key order."""
        items: Iterable[tuple[K, V]] = sorted(data.items(), key=lambda kv: kv[0])
        self.push_integer_uvarint(len(data))
        for key, value in items:
            self.push_object(key, serialize_key)
            self.push_object(value, serialize_value)

    # --- result ---

    def getvalue(self) -> bytes:
        """Return the data generated so far."""
        return bytes(self._buf)