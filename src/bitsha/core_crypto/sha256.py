"""
SHA-256 Hash Driver (bit level)

Computes SHA-256 over explicit bit sequences. Two calling conventions are
offered, differing only in how bits are ordered inside each byte:

- sha256(bits): LSB-first within each byte (little-endian mode)
- sha256_standard(bits): MSB-first within each byte (standard mode)

There isn't any way to make this not confusing. SHA-256 itself makes
big-endian assumptions, so little-endian mode reverses each input byte on
the way in and each digest byte on the way out. Byte order is the same in
both modes; byte 0 of the digest is always the same logical byte.

Pipeline per call:
    adapt -> pad -> init state -> compress each block in order -> adapt

Author: bitsha Project
"""

from typing import List, Sequence, Tuple

from .bit_order import BitOrder, check_byte_aligned, from_standard_order, to_standard_order
from .compression import compress, words_to_bits
from .padding import pad_message, split_into_blocks


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL: Tuple[int, ...] = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

DIGEST_SIZE_BITS = 256


def initial_state() -> List[bool]:
    """Return a fresh 256-bit state holding the SHA-256 IV."""
    return words_to_bits(H_INITIAL)


def sha256_bits(bits: Sequence[bool], order: BitOrder) -> List[bool]:
    """
    Compute the SHA-256 digest of a bit sequence.

    Args:
        bits: Input bits. Length must be a multiple of 8.
        order: Within-byte bit order of both the input and the digest

    Returns:
        The 256-bit digest as a list of bools, in `order`

    Raises:
        InvalidLength: If len(bits) is not a multiple of 8
        TypeError: If order is not a BitOrder
    """
    if not isinstance(order, BitOrder):
        raise TypeError(f"order must be a BitOrder, got {order!r}")
    check_byte_aligned(bits)

    standard_bits = to_standard_order(bits, order)

    padded = pad_message(standard_bits)

    state = initial_state()

    # Each block depends on the previous state, so this stays sequential
    for block in split_into_blocks(padded):
        state = compress(block, state)

    return from_standard_order(state, order)


def sha256(bits: Sequence[bool]) -> List[bool]:
    """
    Compute SHA-256 with LSB-first bits inside each byte.

    The input is expected with the least significant bit of every byte
    first, and the digest is returned the same way. The bytes are in
    standard order.

    Example:
        >>> from bitsha.encoding import text_to_bits, bits_to_hex
        >>> digest = sha256(text_to_bits("summon", BitOrder.LSB_FIRST))
        >>> bits_to_hex(digest, BitOrder.LSB_FIRST)
        '2815cb02b95b6d15383bf551f09b33e01806ad2f4221b035a592c1be146d6a99'
    """
    return sha256_bits(bits, BitOrder.LSB_FIRST)


def sha256_standard(bits: Sequence[bool]) -> List[bool]:
    """
    Compute SHA-256 with MSB-first bits inside each byte.

    This version is more internally consistent, since SHA-256 makes
    big-endian assumptions.
    """
    return sha256_bits(bits, BitOrder.MSB_FIRST)
