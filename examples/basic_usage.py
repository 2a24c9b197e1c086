#!/usr/bin/env python3
"""Basic usage example for packdec.

This example demonstrates:
1. Packing digit strings and integers
2. Unpacking whole buffers and slices
3. Reading and rewriting the sign nibble
4. Describing fields of a fixed-width record
"""

from __future__ import annotations

from packdec import NEGATIVE, PackedSlice, is_positive, pack, set_sign, unpack


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("packdec Basic Usage Example")
    print("=" * 60)
    print()

    # Pack a few values
    print("1. Packing values...")
    for value in ("123", "12345678", 9223372036854775807):
        packed = pack(value)
        print(f"   {value!s:>20} -> {packed.hex()} ({len(packed)} bytes)")
    print()

    # Unpack them again
    print("2. Unpacking...")
    data = bytes.fromhex("12345678901234567d")
    print(f"   Buffer: {data.hex()}")
    print(f"   Whole buffer:      {unpack(data)}")
    print(f"   Bytes 6-8:         {unpack(data, 6, 3)}")
    print(f"   Precision 8:       {unpack(data, precision=8)}")
    print()

    # Sign handling
    print("3. Sign nibble...")
    buf = bytearray(pack("4200"))
    print(f"   {buf.hex()} positive? {is_positive(buf)}")
    set_sign(buf, NEGATIVE)
    print(f"   {buf.hex()} positive? {is_positive(buf)}")
    print()

    # Record layout
    print("4. Reading a record...")
    record = b"JOHN" + pack("0012345") + pack(987)
    balance = PackedSlice(start=4, num_bytes=4)
    count = PackedSlice(start=8, num_bytes=2, precision=5)
    print(f"   Record:  {record.hex()}")
    print(f"   Balance: {balance.unpack(record)} (max {balance.max_digits} digits)")
    print(f"   Count:   {count.unpack(record)}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
