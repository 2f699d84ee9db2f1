# Core Cryptography Module
"""
Bit-level SHA-256 engine:
- Bit order adaptation (LSB-first <-> MSB-first within bytes)
- Message padding
- Compression function and message schedule
- Hash driver (the public entry points)
- Reference cross-check against the cryptography library
"""
