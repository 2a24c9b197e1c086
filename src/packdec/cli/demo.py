"""Sample conversions CLI command."""

from __future__ import annotations

import sys
from typing import Any

from ..codec import is_positive, pack, unpack
from ..exceptions import InvalidArgument

# (label, hex buffer, unpack keyword arguments)
UNPACK_SAMPLES: list[tuple[str, str, dict[str, Any]]] = [
    ("full", "12345678901234567d", {}),
    ("zeros", "000000000000000020", {}),
    ("nines", "999999999999999991", {}),
    ("slice 6+3", "12345678901234567d", {"start": 6, "num_bytes": 3}),
    ("slice 7+5", "12345678901234567d", {"start": 7, "num_bytes": 5}),
    ("precision 7", "12345678901234567d", {"precision": 7}),
    ("precision 8", "12345678901234567d", {"precision": 8}),
    ("short p8", "12345f", {"precision": 8}),
    ("short p5", "12345f", {"precision": 5}),
    ("bad data", "12a45f", {}),
    ("bad, unchecked", "12a45f", {"check_numeric": False}),
]

PACK_SAMPLES: list[Any] = ["7", "123", "12345678", 9223372036854775807, 10**30]


def _sign_label(data: bytes) -> str:
    try:
        return "positive" if is_positive(data) else "negative"
    except InvalidArgument:
        return "invalid"


def run_demo() -> None:
    """Print a set of sample unpack and pack conversions.

    Conversions that are expected to fail are reported on stderr.
    """
    print("=" * 24, "packdec: Packed Decimal Codec", "=" * 24)
    print()

    print(f"{'-' * 28} Unpack {'-' * 28}")
    for label, hex_text, kwargs in UNPACK_SAMPLES:
        data = bytes.fromhex(hex_text)
        try:
            digits = unpack(data, **kwargs)
        except InvalidArgument as err:
            print(f"{label:<16}{hex_text:<22}error (expected): {err}", file=sys.stderr)
            continue
        print(f"{label:<16}{hex_text:<22}{digits:<20}{_sign_label(data)}")
    print()

    print(f"{'-' * 29} Pack {'-' * 29}")
    for value in PACK_SAMPLES:
        packed = pack(value)
        print(f"{str(value):<34}{packed.hex()}")
    print()
