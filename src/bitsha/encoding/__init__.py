# Encoding Module
"""
Conversions between bytes, text, hex and explicit bit sequences.
"""

from .bits import (
    bytes_to_bits,
    bits_to_bytes,
    text_to_bits,
    bits_to_hex,
    hex_to_bits,
    bits_to_string,
)

__all__ = [
    'bytes_to_bits',
    'bits_to_bytes',
    'text_to_bits',
    'bits_to_hex',
    'hex_to_bits',
    'bits_to_string',
]
