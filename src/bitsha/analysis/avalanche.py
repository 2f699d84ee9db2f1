"""
Avalanche Effect Analysis

Flips one input bit at a time and counts how many digest bits change.
For a good hash roughly half of the 256 output bits flip on average.

Author: bitsha Project
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core_crypto.bit_order import BitOrder
from ..core_crypto.sha256 import DIGEST_SIZE_BITS, sha256_bits


DEFAULT_TRIALS = 64


@dataclass(frozen=True)
class AvalancheReport:
    """Summary of an avalanche measurement."""
    trials: int
    mean_flipped: float
    min_flipped: int
    max_flipped: int

    @property
    def mean_ratio(self) -> float:
        """Average fraction of digest bits that changed."""
        return self.mean_flipped / DIGEST_SIZE_BITS

    def __str__(self) -> str:
        return (
            f"Avalanche over {self.trials} trials: "
            f"mean {self.mean_flipped:.1f}/{DIGEST_SIZE_BITS} bits "
            f"({self.mean_ratio * 100:.2f}%), "
            f"min {self.min_flipped}, max {self.max_flipped}"
        )


def flip_bit(bits: Sequence[bool], index: int) -> List[bool]:
    """Return a copy of `bits` with the bit at `index` inverted."""
    flipped = [bool(b) for b in bits]
    flipped[index] = not flipped[index]
    return flipped


def bit_difference(a: Sequence[bool], b: Sequence[bool]) -> int:
    """Count positions where two equal-length bit sequences differ."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return sum(1 for x, y in zip(a, b) if bool(x) != bool(y))


def measure_avalanche(
    bits: Sequence[bool],
    trials: int = DEFAULT_TRIALS,
    order: BitOrder = BitOrder.MSB_FIRST,
    seed: Optional[int] = None
) -> AvalancheReport:
    """
    Measure how many digest bits change when a random input bit flips.

    Args:
        bits: Base message (non-empty, length a multiple of 8)
        trials: Number of random single-bit flips
        order: Bit order used for hashing
        seed: Seed for a private RNG, for reproducible runs

    Returns:
        AvalancheReport with mean/min/max flipped output bits
    """
    if not bits:
        raise ValueError("Cannot flip bits of an empty message")
    if trials < 1:
        raise ValueError("At least one trial required")

    rng = random.Random(seed)
    base_digest = sha256_bits(bits, order)

    counts = []
    for _ in range(trials):
        index = rng.randrange(len(bits))
        digest = sha256_bits(flip_bit(bits, index), order)
        counts.append(bit_difference(base_digest, digest))

    return AvalancheReport(
        trials=trials,
        mean_flipped=sum(counts) / trials,
        min_flipped=min(counts),
        max_flipped=max(counts),
    )
