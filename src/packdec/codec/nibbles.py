"""Nibble-level constants and helpers shared by the packer and unpacker.

A packed decimal byte holds two 4-bit nibbles. All but the last nibble of a
buffer are decimal digits; the last one is the sign.
"""

from __future__ import annotations

import enum
import re
from typing import Union


class Sign(enum.IntEnum):
    """Sign nibble values accepted in the low nibble of the last byte."""

    POSITIVE = 0xC
    NEGATIVE = 0xD
    UNSIGNED = 0xF  # Treated as positive


POSITIVE = Sign.POSITIVE
NEGATIVE = Sign.NEGATIVE
UNSIGNED = Sign.UNSIGNED

PackedBuffer = Union[bytes, bytearray, memoryview]

NIBBLE_MASK = 0x0F
HIGH_NIBBLE_MASK = 0xF0

# Indexed by digit value: DIGIT_NIBBLES[7] == 0x7
DIGIT_NIBBLES: tuple[int, ...] = tuple(range(10))

_DIGIT_STRING = re.compile(r"[0-9]+")


def is_digit_string(text: str) -> bool:
    """Return True if text is a non-empty run of ASCII digits 0-9."""
    return _DIGIT_STRING.fullmatch(text) is not None


def hex_string_for_byte(value: int) -> str:
    """Render the low 8 bits of value as two lower-case hex characters.

    Args:
        value: Integer holding a byte value. Bits above the low byte are ignored.

    Returns:
        Two hexadecimal characters, zero-padded

    Example:
        >>> hex_string_for_byte(0x0F)
        '0f'
        >>> hex_string_for_byte(0xFFFFFFAB)
        'ab'
    """
    return format(value & 0xFF, "02x")
