"""Exceptions raised while writing or reading the serialized format."""

from __future__ import annotations


class FormatError(Exception):
    """Base error of the serialized format."""

    default_message = "format-error in trivialserialize"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class FormatErrorRead(FormatError):
    """The input data being read is invalid."""

    default_message = (
        "format-error in trivialserialize while reading, input data is invalid"
    )


class FormatErrorReadBadFormat(FormatError):
    """The data was read, but the format definition in the program looks wrong."""

    default_message = (
        "format-error in trivialserialize while reading, "
        "but it seems the format definition in the program is wrong"
    )


class FormatErrorReadDelimiter(FormatError):
    """An expected delimiter byte was not found."""

    default_message = (
        "format-error in trivialserialize while reading, "
        "input data is invalid, the delimiter was wrong."
    )


class FormatErrorWrite(FormatError):
    """The given data can not be serialized."""

    default_message = (
        "format-error in trivialserialize while writting, "
        "the given data can not be serialized"
    )


class FormatErrorWriteTooLong(FormatErrorWrite):
    """The given data is too long to be serialized."""

    default_message = (
        "format-error in trivialserialize while writting, "
        "the given data can not be serialized - "
        "because data is too long (e.g. binary string)"
    )


class FormatErrorWriteValueTooBig(FormatError):
    """A value is too big for the field it should be written into."""

    default_message = (
        "format-error in trivialserialize while writing - value was too big over limit"
    )


class FormatErrorReadInvalidVersion(FormatError):
    """A version or magic number read from input is not allowed."""

    default_message = (
        "format-error in trivialserialize while reading - "
        "the given version/magic number is not allowed"
    )