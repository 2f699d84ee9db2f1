#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                            BITSHA LIVE DEMO                                  ║
║                  SHA-256 over explicit bit sequences                         ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through:
- Bit order conventions (LSB-first vs MSB-first within each byte)
- Padding of a message to whole 512-bit blocks
- Hashing in both modes and checking against the cryptography library
- The avalanche effect
- Hash-chained audit logging

Pass --interactive to pause between sections.
"""

import sys

from bitsha import BitOrder, InvalidLength, reverse_bits_in_bytes, sha256, sha256_standard
from bitsha.analysis.avalanche import measure_avalanche
from bitsha.core_crypto.padding import pad_message
from bitsha.core_crypto.reference import NIST_VECTORS, digest_bytes, reference_digest
from bitsha.encoding.bits import bits_to_hex, bits_to_string, text_to_bits
from bitsha.integration.event_logger import EventLogger


INTERACTIVE = "--interactive" in sys.argv


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if INTERACTIVE:
        print(f"\n  [PAUSE] {message}")
        input()


def main():
    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + "BITSHA - SHA-256 OVER BIT SEQUENCES".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    # ------------------------------------------------------------------
    print_header("PART 1: BIT ORDER")

    print_step(1, "The letter 'a' (0x61) in both conventions")
    msb = text_to_bits("a", BitOrder.MSB_FIRST)
    lsb = text_to_bits("a", BitOrder.LSB_FIRST)
    print(f"      MSB-first: {bits_to_string(msb)}")
    print(f"      LSB-first: {bits_to_string(lsb)}")
    print(f"      Adapter(LSB) == MSB: {reverse_bits_in_bytes(lsb) == msb}")

    pause()

    # ------------------------------------------------------------------
    print_header("PART 2: PADDING")

    print_step(2, "Padding 'abc' (24 bits) to one 512-bit block")
    padded = pad_message(text_to_bits("abc"))
    print(f"      Padded length: {len(padded)} bits")
    print(f"      Marker bit at position 24: {int(padded[24])}")
    print(f"      Length field: {int(bits_to_string(padded[-64:]), 2)}")

    pause()

    # ------------------------------------------------------------------
    print_header("PART 3: HASHING IN BOTH MODES")

    print_step(3, "Known-answer vectors (standard mode)")
    for data, expected in NIST_VECTORS:
        ours = digest_bytes(data).hex()
        theirs = reference_digest(data).hex()
        status = "✓" if ours == expected == theirs else "✗"
        label = data[:24].decode() + ("..." if len(data) > 24 else "")
        print(f"      {status} {label!r:32} {ours[:32]}...")

    print_step(4, "'summon' in little-endian mode")
    bits = text_to_bits("summon", BitOrder.LSB_FIRST)
    digest = sha256(bits)
    print(f"      {bits_to_hex(digest, BitOrder.LSB_FIRST)}")

    print_step(5, "Same bytes in standard mode give the same digest bytes")
    std_digest = sha256_standard(text_to_bits("summon", BitOrder.MSB_FIRST))
    print(f"      {bits_to_hex(std_digest, BitOrder.MSB_FIRST)}")

    print_step(6, "Rejecting a 7-bit input")
    try:
        sha256([True] * 7)
    except InvalidLength as e:
        print(f"      InvalidLength: {e}")

    pause()

    # ------------------------------------------------------------------
    print_header("PART 4: AVALANCHE EFFECT")

    print_step(7, "Flipping single bits of a 64-byte message")
    report = measure_avalanche(text_to_bits("x" * 64), trials=32, seed=364)
    print(f"      {report}")

    pause()

    # ------------------------------------------------------------------
    print_header("PART 5: AUDIT LOG")

    event_logger = EventLogger()
    event_logger.hash_bits(text_to_bits("hello", BitOrder.LSB_FIRST))
    event_logger.hash_bits(text_to_bits("hello"), BitOrder.MSB_FIRST)
    try:
        event_logger.hash_bits([False] * 12)
    except InvalidLength:
        pass
    event_logger.run_self_check()

    event_logger.print_audit_log()
    print(f"\n  Chain valid: {event_logger.verify_integrity()}")

    print("\n  Demo complete.\n")


if __name__ == "__main__":
    main()
