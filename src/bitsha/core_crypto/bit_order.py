"""
Bit Order Adapter

SHA-256 is defined over big-endian data: within every byte the most
significant bit comes first. Callers working in a little-endian bit model
list the least significant bit of each byte first instead.

This module is the single place where the two conventions are reconciled.
Only the bits *inside* each byte move; byte order is never touched.

    LSB-first byte 0x61 ('a'):  1 0 0 0 0 1 1 0
    MSB-first byte 0x61 ('a'):  0 1 1 0 0 0 0 1

Author: bitsha Project
"""

from enum import Enum
from typing import List, Sequence

from .errors import InvalidLength


BITS_PER_BYTE = 8


class BitOrder(Enum):
    """Within-byte bit order of a bit sequence."""

    LSB_FIRST = "lsb"  # little-endian mode
    MSB_FIRST = "msb"  # standard mode


def check_byte_aligned(bits: Sequence[bool]) -> None:
    """Raise InvalidLength unless len(bits) is a whole number of bytes."""
    if len(bits) % BITS_PER_BYTE != 0:
        raise InvalidLength(len(bits))


def reverse_bits_in_bytes(bits: Sequence[bool]) -> List[bool]:
    """
    Reverse the bits inside each 8-bit group.

    The group order is unchanged, so applying this twice gives back the
    original sequence.

    Args:
        bits: Bit sequence whose length is a multiple of 8

    Returns:
        New list of the same length with every byte bit-reversed

    Raises:
        InvalidLength: If the length is not a multiple of 8
    """
    check_byte_aligned(bits)

    result: List[bool] = []
    for i in range(0, len(bits), BITS_PER_BYTE):
        byte = [bool(b) for b in bits[i:i + BITS_PER_BYTE]]
        byte.reverse()
        result.extend(byte)
    return result


def to_standard_order(bits: Sequence[bool], order: BitOrder) -> List[bool]:
    """Return the MSB-first view of `bits`, given in `order`."""
    if order is BitOrder.LSB_FIRST:
        return reverse_bits_in_bytes(bits)
    check_byte_aligned(bits)
    return [bool(b) for b in bits]


def from_standard_order(bits: Sequence[bool], order: BitOrder) -> List[bool]:
    """Render MSB-first `bits` in `order`."""
    # Reversal is an involution, so both directions are the same operation
    return to_standard_order(bits, order)
