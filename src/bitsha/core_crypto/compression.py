"""
SHA-256 Compression Function (bit level interface)

Implements the per-block SHA-256 transformation defined in FIPS 180-4:

- Message Schedule: expands the block's 16 words to 64 words
- Compression: 64 rounds over the working variables a..h
- Finalization: adds the working variables back into the state

The public interface takes and returns explicit bits (a 512-bit block and
a 256-bit state, MSB-first per word). Internally each 32-bit word is held
in a Python int and every result is masked with MASK_32, so modular
wraparound is always explicit.

    compress(block_bits, state_bits) -> new_state_bits

Author: bitsha Project
"""

from typing import List, Sequence, Tuple

from .errors import ContractViolation
from .padding import BLOCK_SIZE_BITS


# ============================================================================
# Constants
# ============================================================================

WORD_SIZE_BITS = 32
STATE_WORDS = 8
BLOCK_WORDS = BLOCK_SIZE_BITS // WORD_SIZE_BITS  # 16
STATE_SIZE_BITS = STATE_WORDS * WORD_SIZE_BITS  # 256
SCHEDULE_WORDS = 64

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


# ============================================================================
# Word <-> Bits
# ============================================================================

def bits_to_word(bits: Sequence[bool]) -> int:
    """Pack 32 MSB-first bits into an unsigned 32-bit integer."""
    if len(bits) != WORD_SIZE_BITS:
        raise ContractViolation(f"Word must be 32 bits, got {len(bits)}")
    word = 0
    for bit in bits:
        word = (word << 1) | (1 if bit else 0)
    return word


def word_to_bits(word: int) -> List[bool]:
    """Unpack an unsigned 32-bit integer into 32 MSB-first bits."""
    word &= MASK_32
    return [((word >> shift) & 1) == 1 for shift in range(WORD_SIZE_BITS - 1, -1, -1)]


def bits_to_words(bits: Sequence[bool]) -> List[int]:
    """Split a bit sequence (multiple of 32) into big-endian words."""
    if len(bits) % WORD_SIZE_BITS != 0:
        raise ContractViolation(
            f"Bit count must be a multiple of 32, got {len(bits)}"
        )
    return [
        bits_to_word(bits[i:i + WORD_SIZE_BITS])
        for i in range(0, len(bits), WORD_SIZE_BITS)
    ]


def words_to_bits(words: Sequence[int]) -> List[bool]:
    """Concatenate the MSB-first bits of each word."""
    out: List[bool] = []
    for word in words:
        out.extend(word_to_bits(word))
    return out


# ============================================================================
# Word Functions
# ============================================================================

def add32(*words: int) -> int:
    """Add any number of words modulo 2^32."""
    return sum(words) & MASK_32


def right_rotate(value: int, amount: int) -> int:
    """ROTR: rotate a 32-bit word right by `amount` bits."""
    value &= MASK_32
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Ch(x, y, z): each bit of x picks the matching bit of y (1) or z (0)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Maj(x, y, z): each result bit is the value held by at least two inputs."""
    return (x & y) ^ (x & z) ^ (y & z)


def small_sigma0(x: int) -> int:
    """σ0(x) = ROTR^7 ^ ROTR^18 ^ SHR^3, mixes W[i-15] into the schedule."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    """σ1(x) = ROTR^17 ^ ROTR^19 ^ SHR^10, mixes W[i-2] into the schedule."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def big_sigma0(x: int) -> int:
    """Σ0(a) = ROTR^2 ^ ROTR^13 ^ ROTR^22, applied to working variable a."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def big_sigma1(x: int) -> int:
    """Σ1(e) = ROTR^6 ^ ROTR^11 ^ ROTR^25, applied to working variable e."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


# ============================================================================
# Schedule and Rounds
# ============================================================================

def create_message_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    if len(words) != BLOCK_WORDS:
        raise ContractViolation(
            f"Message schedule needs {BLOCK_WORDS} words, got {len(words)}"
        )
    w = [word & MASK_32 for word in words]
    for i in range(BLOCK_WORDS, SCHEDULE_WORDS):
        w.append(add32(small_sigma1(w[i - 2]), w[i - 7], small_sigma0(w[i - 15]), w[i - 16]))
    return w


def compress_words(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression and fold the result into the state.

    Args:
        state: Current hash state (8 32-bit words)
        w: Message schedule (64 32-bit words)

    Returns:
        Updated hash state (new list)
    """
    if len(state) != STATE_WORDS:
        raise ContractViolation(f"State must be {STATE_WORDS} words, got {len(state)}")
    if len(w) != SCHEDULE_WORDS:
        raise ContractViolation(
            f"Schedule must be {SCHEDULE_WORDS} words, got {len(w)}"
        )

    a, b, c, d, e, f, g, h = state

    for i in range(SCHEDULE_WORDS):
        t1 = add32(h, big_sigma1(e), ch(e, f, g), K[i], w[i])
        t2 = add32(big_sigma0(a), maj(a, b, c))

        h = g
        g = f
        f = e
        e = add32(d, t1)
        d = c
        c = b
        b = a
        a = add32(t1, t2)

    return [add32(s, v) for s, v in zip(state, (a, b, c, d, e, f, g, h))]


def compress(block: Sequence[bool], state: Sequence[bool]) -> List[bool]:
    """
    Apply the SHA-256 compression function to one block.

    Args:
        block: 512 bits, MSB-first within every word
        state: 256 bits (8 words), MSB-first within every word

    Returns:
        The next 256-bit state

    Raises:
        ContractViolation: If block or state has the wrong width
    """
    if len(block) != BLOCK_SIZE_BITS:
        raise ContractViolation(
            f"Block must be {BLOCK_SIZE_BITS} bits, got {len(block)}"
        )
    if len(state) != STATE_SIZE_BITS:
        raise ContractViolation(
            f"State must be {STATE_SIZE_BITS} bits, got {len(state)}"
        )

    schedule = create_message_schedule(bits_to_words(block))
    new_state = compress_words(bits_to_words(state), schedule)
    return words_to_bits(new_state)
