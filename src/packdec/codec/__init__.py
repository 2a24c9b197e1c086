"""Packed decimal codec for packdec.

This module provides packing, unpacking, sign nibble handling and precision
adjustment for packed decimal (BCD) data.
"""

from __future__ import annotations

from .decoder import unpack
from .encoder import pack
from .nibbles import (
    DIGIT_NIBBLES,
    NEGATIVE,
    POSITIVE,
    UNSIGNED,
    PackedBuffer,
    Sign,
    hex_string_for_byte,
)
from .precision import precision_pad
from .sign import is_positive, set_sign

__all__ = [
    "pack",
    "unpack",
    "precision_pad",
    "is_positive",
    "set_sign",
    "hex_string_for_byte",
    "Sign",
    "POSITIVE",
    "NEGATIVE",
    "UNSIGNED",
    "DIGIT_NIBBLES",
    "PackedBuffer",
]
