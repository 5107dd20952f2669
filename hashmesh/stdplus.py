"""Small general-purpose helpers and exception types."""

from __future__ import annotations

from enum import Enum
from typing import Any, Type, TypeVar

E = TypeVar("E", bound=Enum)


class ExpectedError(Exception):
    """An error that is part of normal program flow."""

    def __str__(self) -> str:
        return "expected_exception"


class ExpectedNotFound(ExpectedError):
    """An expected error meaning that something was not found."""

    def __str__(self) -> str:
        return "expected_not_found"


def int_to_enum(enum_type: Type[E], value: int) -> E:
    """Convert an integer to a member of enum_type, refusing unknown values."""
    try:
        return enum_type(value)
    except ValueError as exc:
        raise ValueError(
            f"Can not convert integer {value} to enum of type {enum_type.__name__}"
        ) from exc


def ranges_overlap(start1: Any, end1: Any, start2: Any, end2: Any) -> bool:
    """Tell whether half-open ranges [start1,end1) and [start2,end2) intersect.

    Both ranges must be non-empty.
    """
    if not start1 < end1:
        raise ValueError("First range is empty or inverted")
    if not start2 < end2:
        raise ValueError("Second range is empty or inverted")
    return start1 < end2 and start2 < end1