"""packdec: Packed Decimal Codec

A Python library for packed decimal (binary-coded decimal) data as found in
mainframe and COBOL record layouts. Each decimal digit takes one nibble and
the last nibble of a value carries its sign.

Key Features:
- Pack digit strings and ints of any size
- Unpack whole buffers or slices, with optional precision adjustment
- Inspect and rewrite sign nibbles
- Pydantic slice descriptors for fields within larger records

Quick Start:
    >>> from packdec import pack, unpack, is_positive
    >>>
    >>> data = pack("123")
    >>> data.hex()
    '123c'
    >>> unpack(data)
    '123'
    >>> is_positive(data)
    True
"""

from __future__ import annotations

from .codec import (
    DIGIT_NIBBLES,
    NEGATIVE,
    POSITIVE,
    UNSIGNED,
    PackedBuffer,
    Sign,
    hex_string_for_byte,
    is_positive,
    pack,
    precision_pad,
    set_sign,
    unpack,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidArgument,
    PackedDecimalError,
    PrecisionError,
    SignError,
)
from .models import PackedSlice
from .utils import max_digits, packed_length

__version__ = "0.1.0"

__all__ = [
    # Core API
    "pack",
    "unpack",
    "precision_pad",
    "is_positive",
    "set_sign",
    "hex_string_for_byte",
    # Sign nibbles
    "Sign",
    "POSITIVE",
    "NEGATIVE",
    "UNSIGNED",
    "DIGIT_NIBBLES",
    "PackedBuffer",
    # Models
    "PackedSlice",
    # Exceptions
    "PackedDecimalError",
    "InvalidArgument",
    "DecodeError",
    "EncodeError",
    "SignError",
    "PrecisionError",
    # Sizing
    "packed_length",
    "max_digits",
    # Version
    "__version__",
]
