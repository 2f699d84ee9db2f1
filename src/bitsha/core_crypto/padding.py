"""
SHA-256 Message Padding (bit level)

Padding rules (FIPS 180-4, section 5.1.1):
1. Append a single '1' bit
2. Append '0' bits until length ≡ 448 (mod 512)
3. Append the original length in bits as a 64-bit big-endian integer

Unlike byte-oriented implementations, the message here may be any number
of bits long, so the '1' marker is a single bit rather than a 0x80 byte.

Author: bitsha Project
"""

from typing import Iterator, List, Sequence

from .errors import ContractViolation


# ============================================================================
# Constants
# ============================================================================

BLOCK_SIZE_BITS = 512
LENGTH_FIELD_BITS = 64
# Length (mod 512) where the 64-bit length field starts
PAD_TARGET_BITS = BLOCK_SIZE_BITS - LENGTH_FIELD_BITS  # 448
MAX_MESSAGE_BITS = 2 ** LENGTH_FIELD_BITS - 1


def padded_length(bit_length: int) -> int:
    """
    Length in bits that pad_message will produce for a message.

    Args:
        bit_length: Original message length in bits

    Returns:
        Smallest multiple of 512 that fits the message, the marker bit and
        the 64-bit length field
    """
    # +1 for the marker bit
    used = bit_length + 1 + LENGTH_FIELD_BITS
    return -(-used // BLOCK_SIZE_BITS) * BLOCK_SIZE_BITS


def _length_field(bit_length: int) -> List[bool]:
    """Encode bit_length as 64 big-endian bits."""
    if bit_length > MAX_MESSAGE_BITS:
        raise ContractViolation(
            f"Message of {bit_length} bits does not fit the 64-bit length field"
        )
    return [
        ((bit_length >> shift) & 1) == 1
        for shift in range(LENGTH_FIELD_BITS - 1, -1, -1)
    ]


def pad_message(bits: Sequence[bool]) -> List[bool]:
    """
    Pad a standard-order (MSB-first) bit sequence to a multiple of 512 bits.

    Args:
        bits: The original message bits, any length

    Returns:
        New list: message || 1 || 0...0 || 64-bit length
    """
    original_length = len(bits)

    padded = [bool(b) for b in bits]
    padded.append(True)

    zeros = (PAD_TARGET_BITS - len(padded)) % BLOCK_SIZE_BITS
    padded.extend([False] * zeros)

    padded.extend(_length_field(original_length))

    return padded


def split_into_blocks(padded: Sequence[bool]) -> Iterator[List[bool]]:
    """
    Yield consecutive 512-bit blocks of a padded message, in order.

    Raises:
        ContractViolation: If the message was not padded to a block multiple
    """
    if len(padded) % BLOCK_SIZE_BITS != 0:
        raise ContractViolation(
            f"Padded message must be a multiple of {BLOCK_SIZE_BITS} bits, "
            f"got {len(padded)}"
        )
    for i in range(0, len(padded), BLOCK_SIZE_BITS):
        yield list(padded[i:i + BLOCK_SIZE_BITS])
