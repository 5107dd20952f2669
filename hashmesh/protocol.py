"""Constants and commands of the peer-to-peer wire protocol."""

from __future__ import annotations

from enum import IntEnum

CURRENT_VERSION = 1

VERSION_SIZE = 1
CMD_SIZE = 1
TTL_SIZE = 1

# No TTL above this may ever appear; it would be a low-level error.
TTL_MAX_VALUE_EVER = 200
# Highest TTL requested by others that is normally accepted.
TTL_MAX_ACCEPTED = 5


class ProtoCmd(IntEnum):
    """Public command byte that follows the protocol version."""

    TEST0 = 0
    TEST1 = 1
    TUNNELED_DATA = 2
    PUBLIC_HI = 3
    PUBLIC_PING_REQUEST = 4
    PUBLIC_PING_REPLY = 5
    FINDHIP_QUERY = 10
    FINDHIP_REPLY = 11


_VALID_FROM_UNKNOWN = frozenset(
    {ProtoCmd.PUBLIC_HI, ProtoCmd.PUBLIC_PING_REQUEST, ProtoCmd.PUBLIC_PING_REPLY}
)


def command_is_valid_from_unknown_peer(cmd: int) -> bool:
    """Tell whether cmd may come from a peer without any HIP and CA."""
    return cmd in _VALID_FROM_UNKNOWN