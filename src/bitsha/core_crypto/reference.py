"""
Reference Cross-Check

Compares the bit-level engine with an independent, byte-oriented SHA-256
from the `cryptography` library. Used by the self-check command, the
live demo and the test suite.

Author: bitsha Project
"""

from typing import Iterable, List, Tuple

from cryptography.hazmat.primitives import hashes

from ..encoding.bits import bits_to_bytes, bytes_to_bits
from .bit_order import BitOrder
from .sha256 import sha256_standard


# Test vectors from NIST (FIPS 180-4 examples) and common references
NIST_VECTORS: Tuple[Tuple[bytes, str], ...] = (
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
)

# Byte lengths around the one- and two-block padding boundaries
BOUNDARY_BYTE_LENGTHS = (0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128)


def reference_digest(data: bytes) -> bytes:
    """SHA-256 of `data` computed by the cryptography library."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def digest_bytes(data: bytes) -> bytes:
    """SHA-256 of `data` computed by the bit engine (standard mode)."""
    bits = bytes_to_bits(data, BitOrder.MSB_FIRST)
    return bits_to_bytes(sha256_standard(bits), BitOrder.MSB_FIRST)


def compare(samples: Iterable[bytes]) -> List[Tuple[bytes, bytes, bytes]]:
    """
    Hash every sample with both implementations.

    Returns:
        List of (sample, engine_digest, reference_digest) that disagree
    """
    mismatches = []
    for sample in samples:
        ours = digest_bytes(sample)
        theirs = reference_digest(sample)
        if ours != theirs:
            mismatches.append((sample, ours, theirs))
    return mismatches


def self_check() -> bool:
    """
    Verify the engine against known-answer vectors and the reference.

    Returns:
        True if every vector and every boundary-length sample agrees
    """
    for data, expected in NIST_VECTORS:
        if digest_bytes(data).hex() != expected:
            return False
        if reference_digest(data).hex() != expected:
            return False

    samples = [boundary_sample(n) for n in BOUNDARY_BYTE_LENGTHS]
    return not compare(samples)


def boundary_sample(length: int) -> bytes:
    """Deterministic, non-repeating-looking sample of `length` bytes."""
    return bytes(i % 251 for i in range(length))
