"""Conversion of errno values to readable messages."""

from __future__ import annotations

import os


def errno_to_string(errno_copy: int) -> str:
    """Return the system message for an errno value."""
    try:
        return os.strerror(errno_copy)
    except (ValueError, OverflowError) as exc:
        return (
            f"(errno_copy={errno_copy}, can not convert this to error message "
            f"because result={exc})"
        )