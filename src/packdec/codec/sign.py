"""Sign nibble inspection and mutation.

The sign of a packed decimal value lives in the low nibble of its last byte.
0xC and 0xF read as positive, 0xD as negative, and every other value is
rejected.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import SignError
from .nibbles import HIGH_NIBBLE_MASK, NIBBLE_MASK, NEGATIVE, POSITIVE, UNSIGNED, PackedBuffer

_RESERVED_SIGNS = frozenset({0xA, 0xB, 0xE})


def is_positive(value: Union[PackedBuffer, int]) -> bool:
    """Classify the sign nibble of a buffer or of a single byte value.

    Args:
        value: Packed decimal buffer (its last byte is checked), or an int
            whose low nibble is checked

    Returns:
        True for 0xC and 0xF, False for 0xD

    Raises:
        SignError: If the nibble is a digit 0-9, one of 0xA/0xB/0xE, or the
            buffer is empty

    Example:
        >>> is_positive(b"\\x12\\x3c")
        True
        >>> is_positive(0xFD)
        False
    """
    if isinstance(value, int):
        return _classify(value)

    if len(value) == 0:
        raise SignError("cannot read the sign of an empty buffer")
    return _classify(value[-1])


def _classify(sign_byte: int) -> bool:
    nibble = sign_byte & NIBBLE_MASK

    if nibble <= 9:
        raise SignError(f"invalid sign byte (digit in sign position): {sign_byte:#x}")
    if nibble in _RESERVED_SIGNS:
        raise SignError(f"invalid sign byte: {sign_byte:#x}")
    if nibble == NEGATIVE:
        return False
    # 0xC or 0xF
    return nibble in (POSITIVE, UNSIGNED)


def set_sign(data: Union[bytearray, memoryview], sign: int) -> None:
    """Overwrite the sign nibble of a buffer in place.

    The digit in the high nibble of the last byte is preserved. The sign is
    not validated, so any 4-bit value can be written.

    Args:
        data: Mutable packed decimal buffer
        sign: New sign value; only its low nibble is used

    Raises:
        TypeError: If data is immutable (e.g. bytes)
        SignError: If data is empty

    Example:
        >>> buf = bytearray(b"\\x12\\x3c")
        >>> set_sign(buf, NEGATIVE)
        >>> buf.hex()
        '123d'
    """
    if isinstance(data, bytes):
        raise TypeError("set_sign requires a mutable buffer such as bytearray, got bytes")
    if len(data) == 0:
        raise SignError("cannot set the sign of an empty buffer")

    data[-1] = (data[-1] & HIGH_NIBBLE_MASK) | (sign & NIBBLE_MASK)
