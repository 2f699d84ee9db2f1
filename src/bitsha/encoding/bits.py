"""
Bit Encoding Helpers

Conversions between byte-oriented values (bytes, text, hex) and the
explicit bit sequences consumed by the hash engine.

Every function takes a BitOrder saying how bits are listed inside each
byte. Byte order is always preserved.

Author: bitsha Project
"""

from typing import List, Sequence

from ..core_crypto.bit_order import BITS_PER_BYTE, BitOrder, check_byte_aligned


def bytes_to_bits(data: bytes, order: BitOrder = BitOrder.MSB_FIRST) -> List[bool]:
    """
    Expand bytes into a bit sequence.

    Args:
        data: Input bytes
        order: Whether the MSB or the LSB of each byte comes first

    Returns:
        List of len(data) * 8 bools
    """
    if order is BitOrder.MSB_FIRST:
        shifts = range(BITS_PER_BYTE - 1, -1, -1)
    else:
        shifts = range(BITS_PER_BYTE)

    bits: List[bool] = []
    for byte in data:
        for shift in shifts:
            bits.append(((byte >> shift) & 1) == 1)
    return bits


def bits_to_bytes(bits: Sequence[bool], order: BitOrder = BitOrder.MSB_FIRST) -> bytes:
    """
    Pack a bit sequence back into bytes.

    Raises:
        InvalidLength: If the length is not a multiple of 8
    """
    check_byte_aligned(bits)

    out = bytearray()
    for i in range(0, len(bits), BITS_PER_BYTE):
        byte = 0
        for j in range(BITS_PER_BYTE):
            if bits[i + j]:
                if order is BitOrder.MSB_FIRST:
                    byte |= 1 << (BITS_PER_BYTE - 1 - j)
                else:
                    byte |= 1 << j
        out.append(byte)
    return bytes(out)


def text_to_bits(
    text: str,
    order: BitOrder = BitOrder.MSB_FIRST,
    encoding: str = 'utf-8'
) -> List[bool]:
    """Encode a string and expand it into bits."""
    return bytes_to_bits(text.encode(encoding), order)


def bits_to_hex(bits: Sequence[bool], order: BitOrder = BitOrder.MSB_FIRST) -> str:
    """Render a bit sequence as a lowercase hex string."""
    return bits_to_bytes(bits, order).hex()


def hex_to_bits(hex_string: str, order: BitOrder = BitOrder.MSB_FIRST) -> List[bool]:
    """
    Parse a hex string into a bit sequence.

    Raises:
        ValueError: If the string is not valid hex
    """
    return bytes_to_bits(bytes.fromhex(hex_string), order)


def bits_to_string(bits: Sequence[bool]) -> str:
    """Render bits as '0'/'1' characters (debugging aid)."""
    return ''.join('1' if b else '0' for b in bits)
