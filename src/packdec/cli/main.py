"""Main CLI entry point for packdec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .. import __version__
from ..codec import is_positive, pack, set_sign, unpack
from ..exceptions import PackedDecimalError
from .demo import run_demo

logger = logging.getLogger(__name__)


def _nibble(text: str) -> int:
    """Parse a single hex digit such as 'C' or 'd'."""
    value = int(text, 16)
    if not 0 <= value <= 0xF:
        raise argparse.ArgumentTypeError(f"sign must be a single hex digit, got {text!r}")
    return value


def _parse_hex(text: str) -> bytearray:
    try:
        return bytearray.fromhex(text)
    except ValueError as err:
        raise ValueError(f"not a hex string: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the packdec command."""
    parser = argparse.ArgumentParser(
        prog="packdec",
        description="packdec: Packed Decimal Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  packdec pack 123                      Print packed bytes as hex (123c)
  packdec unpack 123c                   Print digits (123)
  packdec unpack 12345f --precision 8   Print zero-padded digits (00012345)
  packdec sign 123d                     Print the sign (negative)
  packdec sign 123c --set D             Rewrite the sign nibble (123d)
  packdec demo                          Show sample conversions
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"packdec {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    pack_parser = subparsers.add_parser("pack", help="Pack a non-negative integer")
    pack_parser.add_argument("value", help="Decimal digits to pack")

    unpack_parser = subparsers.add_parser("unpack", help="Unpack hex encoded packed decimal")
    unpack_parser.add_argument("hex", help="Packed decimal bytes as hex")
    unpack_parser.add_argument("--start", type=int, default=0, help="First byte to decode")
    unpack_parser.add_argument(
        "--num-bytes", type=int, default=None, help="Number of bytes to decode"
    )
    unpack_parser.add_argument(
        "--precision", type=int, default=None, help="Pad or truncate to this many digits"
    )
    unpack_parser.add_argument(
        "--no-check",
        dest="check_numeric",
        action="store_false",
        help="Allow nibbles A-F in the result",
    )

    sign_parser = subparsers.add_parser("sign", help="Inspect or set the sign nibble")
    sign_parser.add_argument("hex", help="Packed decimal bytes as hex")
    sign_parser.add_argument(
        "--set",
        dest="new_sign",
        metavar="NIBBLE",
        type=_nibble,
        default=None,
        help="Write this sign nibble (e.g. C, D or F) and print the result",
    )

    subparsers.add_parser("demo", help="Show sample conversions")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the packdec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "pack":
            logger.debug("packing %r", args.value)
            print(pack(args.value).hex())

        elif args.command == "unpack":
            data = _parse_hex(args.hex)
            logger.debug(
                "unpacking %d bytes, start=%d num_bytes=%s precision=%s check_numeric=%s",
                len(data),
                args.start,
                args.num_bytes,
                args.precision,
                args.check_numeric,
            )
            print(
                unpack(
                    data,
                    args.start,
                    args.num_bytes,
                    check_numeric=args.check_numeric,
                    precision=args.precision,
                )
            )

        elif args.command == "sign":
            data = _parse_hex(args.hex)
            if args.new_sign is not None:
                logger.debug("setting sign nibble to %#x", args.new_sign)
                set_sign(data, args.new_sign)
                print(data.hex())
            else:
                print("positive" if is_positive(data) else "negative")

        elif args.command == "demo":
            run_demo()

    except (PackedDecimalError, ValueError) as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
