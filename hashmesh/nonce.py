"""Short human-readable rendering of crypto nonces."""

from __future__ import annotations

import logging
from typing import Union

log = logging.getLogger(__name__)

_MAX_NONCE_SIZE = 1024
_INT_MAX = 2**31 - 1


def show_nice_nonce(nonce: Union[bytes, bytearray, memoryview]) -> str:
    """Render a nonce as "(0*N)...V": N leading zero octets, then the value V of the rest.

    Returns "(error)" when the remaining value is too large to show.
    """
    raw = bytes(nonce)
    if len(raw) >= _MAX_NONCE_SIZE:
        log.error("Strange size of (entire) nonce (size=%d)", len(raw))
        raise ValueError(f"Strange size of (entire) nonce (size={len(raw)})")

    num_zero = 0
    if len(raw) > 1:
        for octet in raw[:-1]:
            if octet != 0:
                break
            num_zero += 1

    value = 0
    for index in range(num_zero, len(raw)):
        if value >= _INT_MAX // 256:
            log.error("Strange large value of nonce, stopped at ev=%d at i=%d", value, index)
            return "(error)"
        value = (value << 8) + raw[index]

    prefix = f"(0*{num_zero})..." if num_zero > 0 else ""
    return f"{prefix}{value}"