"""Packed decimal decoder.

This module provides the unpack() function that converts a packed decimal
buffer, or a slice of one, to a string of decimal digits.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import DecodeError
from .nibbles import PackedBuffer, hex_string_for_byte, is_digit_string
from .precision import precision_pad


def unpack(
    data: PackedBuffer,
    start: int = 0,
    num_bytes: Optional[int] = None,
    *,
    check_numeric: bool = True,
    precision: Optional[int] = None,
) -> str:
    """Decode a packed decimal buffer (or a slice of it) to a digit string.

    Each byte of the slice is rendered as two hex characters and the last
    character is dropped as the sign nibble. The sign itself is never
    inspected; use is_positive() for that. The last character is dropped
    even when the slice ends before the buffer's real sign byte.

    Args:
        data: Packed decimal buffer
        start: Offset of the first byte to decode (must be >= 0)
        num_bytes: Maximum number of bytes to decode (must be > 0). Values
            running past the end of the buffer are clamped to the buffer end.
            None decodes through to the end of the buffer.
        check_numeric: If True, reject results containing nibbles A-F. If
            False, such nibbles appear as the characters 'a'-'f'.
        precision: If given, pad or truncate the result to this many digits

    Returns:
        Decimal digit string (no sign)

    Raises:
        DecodeError: If the slice bounds are invalid, the slice is empty, or
            the result is not numeric and check_numeric is True
        PrecisionError: If precision is not positive or the result is not
            numeric when a precision is requested

    Examples:
        ```python
        from packdec import unpack

        unpack(b"\\x12\\x3c")                 # '123'
        unpack(b"\\x12\\x3c", 1, 1)           # '3'
        unpack(b"\\x12\\x3c", precision=5)    # '00123'
        unpack(b"\\x1a\\x3c", check_numeric=False, start=0, num_bytes=2)  # '1a3'
        ```
    """
    if num_bytes is None:
        num_bytes = len(data) - start

    result = _unpack_slice(data, start, num_bytes)

    if check_numeric and not is_digit_string(result):
        raise DecodeError(f"result not numeric, is: {result!r}")

    if precision is not None:
        return precision_pad(result, precision)
    return result


def _unpack_slice(data: PackedBuffer, start: int, num_bytes: int) -> str:
    """Render the slice as hex characters and chop the trailing sign nibble.

    Raises:
        DecodeError: If start is negative, num_bytes is not positive, or the
            slice holds no bytes
    """
    if start < 0 or num_bytes <= 0:
        raise DecodeError(f"bad value(s), start: {start}, num_bytes: {num_bytes}")

    # Silently clamp to the end of the buffer
    end = min(start + num_bytes, len(data))
    if start >= end:
        raise DecodeError(f"start {start} is past the end of a {len(data)} byte buffer")

    rendered = "".join(hex_string_for_byte(byte) for byte in data[start:end])
    return rendered[:-1]
