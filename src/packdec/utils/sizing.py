"""Packed decimal size calculation utilities.

This module relates digit counts to buffer lengths without encoding anything.
"""

from __future__ import annotations

from ..exceptions import InvalidArgument


def packed_length(num_digits: int) -> int:
    """Calculate the number of bytes pack() produces for a digit count.

    Args:
        num_digits: Number of decimal digits (must be >= 1)

    Returns:
        Size in bytes, ``1 + num_digits // 2``

    Raises:
        InvalidArgument: If num_digits is not positive

    Example:
        >>> packed_length(3)
        2
        >>> packed_length(8)
        5
    """
    if num_digits <= 0:
        raise InvalidArgument(f"num_digits must be > 0, got {num_digits}")
    return 1 + num_digits // 2


def max_digits(num_bytes: int) -> int:
    """Calculate how many digits a buffer of ``num_bytes`` can hold.

    One nibble of the buffer is taken by the sign.

    Args:
        num_bytes: Buffer length in bytes (must be >= 1)

    Returns:
        ``2 * num_bytes - 1``

    Raises:
        InvalidArgument: If num_bytes is not positive
    """
    if num_bytes <= 0:
        raise InvalidArgument(f"num_bytes must be > 0, got {num_bytes}")
    return 2 * num_bytes - 1
