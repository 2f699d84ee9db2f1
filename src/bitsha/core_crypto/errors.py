"""
Exceptions raised by the bit-level SHA-256 engine.

Only InvalidLength is meant to be caught by callers. ContractViolation
signals a bug in the caller or in the engine wiring (wrong block or state
width) and should never be recovered from.

Author: bitsha Project
"""


class Sha256Error(Exception):
    """Base class for all bitsha errors."""
    pass


class InvalidLength(Sha256Error, ValueError):
    """Raised when a bit sequence length is not a multiple of 8."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Input length must be a multiple of 8, got {length}")


class ContractViolation(Sha256Error, AssertionError):
    """Raised when an internal block, state or schedule has the wrong size."""
    pass
