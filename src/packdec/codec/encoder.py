"""Packed decimal encoder.

This module provides the pack() function that converts a non-negative
integral value to packed decimal bytes terminated by a positive sign nibble.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import EncodeError
from .nibbles import DIGIT_NIBBLES, POSITIVE


def pack(value: Union[str, int]) -> bytes:
    """Encode a non-negative integral value as packed decimal.

    The output holds ``1 + len(digits) // 2`` bytes. The least significant
    digit shares the last byte with the sign nibble (always 0xC); the other
    digits are packed two per byte from right to left, zero-filling the high
    nibble of the first byte when needed.

    Args:
        value: Digit string, or a non-negative int of any size

    Returns:
        Packed decimal bytes

    Raises:
        EncodeError: If the value is empty, negative, or contains a character
            other than an ASCII digit

    Examples:
        ```python
        from packdec import pack

        pack("123")        # b'\\x12\\x3c'
        pack(12345678)     # b'\\x01\\x23\\x45\\x67\\x8c'
        pack(7)            # b'\\x7c'
        ```
    """
    digits = _to_digit_string(value)
    _check_numeric(digits)

    length = 1 + len(digits) // 2
    result = bytearray(length)

    # The last byte carries the least significant digit and the sign
    result[-1] = (DIGIT_NIBBLES[int(digits[-1])] << 4) | POSITIVE

    index = len(digits) - 2
    position = length - 2
    while index >= 0:
        low = DIGIT_NIBBLES[int(digits[index])]
        high = DIGIT_NIBBLES[int(digits[index - 1])] if index >= 1 else 0
        result[position] = (high << 4) | low
        index -= 2
        position -= 1

    return bytes(result)


def _to_digit_string(value: Union[str, int]) -> str:
    """Convert the input to the string form that gets packed."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise EncodeError(f"expected str or int, got {type(value).__name__}")


def _check_numeric(digits: str) -> None:
    """Reject anything that is not a non-empty ASCII digit string.

    Raises:
        EncodeError: Naming the first offending character
    """
    if not digits:
        raise EncodeError("cannot pack an empty digit string")
    for char in digits:
        if char not in "0123456789":
            raise EncodeError(f"bad numeric character: {char!r}")
