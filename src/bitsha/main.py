"""
bitsha - Main Entry Point

Hashes a string or a file through the bit-level SHA-256 engine.

Usage:
    python -m bitsha.main "message"
    python -m bitsha.main -f path/to/file
    python -m bitsha.main --order msb "message"
    python -m bitsha.main --check
"""

import argparse
import sys
from typing import List, Optional

from .core_crypto.bit_order import BitOrder
from .core_crypto.errors import Sha256Error
from .core_crypto.reference import self_check
from .core_crypto.sha256 import sha256_bits
from .encoding.bits import bits_to_hex, bytes_to_bits


def hex_digest(data: bytes, order: BitOrder) -> str:
    """Hash `data` in the given bit order and render the digest as hex."""
    bits = bytes_to_bits(data, order)
    return bits_to_hex(sha256_bits(bits, order), order)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitsha",
        description="SHA-256 over explicit bit sequences",
    )
    parser.add_argument("message", nargs="?", help="UTF-8 text to hash")
    parser.add_argument("-f", "--file", help="hash the raw bytes of this file")
    parser.add_argument(
        "--order",
        choices=[o.value for o in BitOrder],
        default=BitOrder.LSB_FIRST.value,
        help="within-byte bit order used internally (default: lsb)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="run the reference self-check and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.check:
        passed = self_check()
        print("Self-check passed" if passed else "Self-check FAILED")
        return 0 if passed else 1

    if args.file is not None and args.message is not None:
        sys.stderr.write("Give either a message or -f, not both\n")
        return 1

    if args.file is not None:
        try:
            with open(args.file, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    elif args.message is not None:
        data = args.message.encode("utf-8")
    else:
        parser.print_usage(sys.stderr)
        return 1

    try:
        print(hex_digest(data, BitOrder(args.order)))
    except Sha256Error as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
