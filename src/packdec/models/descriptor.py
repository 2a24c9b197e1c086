"""Slice descriptor model.

A PackedSlice names the region of a larger record that holds one packed
decimal field, together with how that field should be decoded.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..codec.decoder import unpack
from ..codec.nibbles import PackedBuffer
from ..utils.sizing import max_digits


class PackedSlice(BaseModel):
    """Location and decode options of a packed decimal field.

    Field constraints mirror the preconditions of unpack(), so an invalid
    descriptor is rejected by pydantic when it is built rather than when it
    is applied.

    Example:
        >>> field = PackedSlice(start=6, num_bytes=3)
        >>> field.unpack(bytes.fromhex("12345678901234567d"))
        '34567'

    Attributes:
        start: Offset of the first byte
        num_bytes: Number of bytes in the field (clamped to the buffer end)
        precision: Optional number of digits to pad or truncate to
        check_numeric: Reject nibbles A-F in the result
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: int = Field(default=0, ge=0)
    num_bytes: int = Field(gt=0)
    precision: Optional[int] = Field(default=None, gt=0)
    check_numeric: bool = True

    @property
    def end(self) -> int:
        """Offset one past the last byte of the field."""
        return self.start + self.num_bytes

    @property
    def max_digits(self) -> int:
        """Largest number of digits the field can hold."""
        return max_digits(self.num_bytes)

    def unpack(self, data: PackedBuffer) -> str:
        """Decode this field out of ``data``.

        Raises:
            DecodeError: If the field starts past the end of data or the result
                is not numeric
            PrecisionError: If a precision is set and the result is not numeric
        """
        return unpack(
            data,
            self.start,
            self.num_bytes,
            check_numeric=self.check_numeric,
            precision=self.precision,
        )
