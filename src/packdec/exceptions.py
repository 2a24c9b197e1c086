"""Exception hierarchy for packdec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PackedDecimalError for easy catching of any
packdec-specific error. Every rejected argument raises a subclass of
InvalidArgument, which is also a ValueError.
"""

from __future__ import annotations


class PackedDecimalError(Exception):
    """Base exception for all packdec errors."""

    pass


class InvalidArgument(PackedDecimalError, ValueError):
    """Raised when an operation is given an argument it cannot accept.

    This is the single error kind raised by the codec. The subclasses below
    only narrow down which operation rejected the argument.
    """

    pass


class DecodeError(InvalidArgument):
    """Raised when unpacking a packed decimal buffer fails.

    Examples:
        - Negative start byte or non-positive byte count
        - Slice starts past the end of the buffer
        - Decoded result contains nibbles A-F
    """

    pass


class EncodeError(InvalidArgument):
    """Raised when packing a value fails.

    Examples:
        - Input contains a non-digit character (including a minus sign)
        - Empty input string
        - Input is neither a str nor an int
    """

    pass


class SignError(InvalidArgument):
    """Raised when a sign nibble cannot be classified.

    Examples:
        - Digit value 0-9 in the sign position
        - Reserved sign codes 0xA, 0xB, 0xE
        - Empty buffer
    """

    pass


class PrecisionError(InvalidArgument):
    """Raised when a digit string cannot be padded to a precision.

    Examples:
        - Precision of zero or less
        - Input is not a pure digit string
    """

    pass
