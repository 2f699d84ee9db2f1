"""
bitsha - SHA-256 over explicit bit sequences.

Two entry points, identical except for the bit order inside each byte:

- sha256(bits): LSB-first (little-endian mode)
- sha256_standard(bits): MSB-first (standard mode)
"""

from .core_crypto.bit_order import BitOrder, reverse_bits_in_bytes
from .core_crypto.errors import ContractViolation, InvalidLength, Sha256Error
from .core_crypto.sha256 import sha256, sha256_bits, sha256_standard

__all__ = [
    'BitOrder',
    'ContractViolation',
    'InvalidLength',
    'Sha256Error',
    'reverse_bits_in_bytes',
    'sha256',
    'sha256_bits',
    'sha256_standard',
]
