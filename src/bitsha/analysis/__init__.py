# Analysis Module
"""
Statistical checks on the bit-level hash:
- Avalanche effect (single input bit flips vs. output bit changes)
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import avalanche
    return getattr(avalanche, name)

__all__ = [
    'AvalancheReport',
    'measure_avalanche',
    'flip_bit',
    'bit_difference',
    'DEFAULT_TRIALS',
]
