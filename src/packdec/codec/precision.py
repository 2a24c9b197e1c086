"""Precision adjustment for decoded digit strings."""

from __future__ import annotations

from ..exceptions import PrecisionError
from .nibbles import is_digit_string


def precision_pad(digits: str, precision: int) -> str:
    """Right-align a digit string to exactly ``precision`` characters.

    High-order digits are dropped when the string is too long, and zeros are
    added on the left when it is too short. No rounding is performed.

    Args:
        digits: Non-empty string of ASCII digits
        precision: Number of digits to return (must be > 0)

    Returns:
        Digit string of length ``precision``

    Raises:
        PrecisionError: If precision is not positive or digits is not numeric

    Example:
        >>> precision_pad("21", 3)
        '021'
        >>> precision_pad("21", 1)
        '1'
    """
    if precision <= 0:
        raise PrecisionError(f"precision not positive, is: {precision}")

    if not is_digit_string(digits):
        raise PrecisionError(f"digit string not numeric, is: {digits!r}")

    if precision <= len(digits):
        return digits[len(digits) - precision :]
    return digits.rjust(precision, "0")
