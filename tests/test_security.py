"""
Security tests for bitsha.

Tests specifically for:
- Invalid input lengths at every public boundary
- Internal contract violations (wrong block/state widths)
- Avalanche sensitivity
"""

import pytest

from bitsha import (
    BitOrder, ContractViolation, InvalidLength, Sha256Error,
    reverse_bits_in_bytes, sha256, sha256_bits, sha256_standard
)
from bitsha.analysis.avalanche import (
    AvalancheReport, bit_difference, flip_bit, measure_avalanche
)
from bitsha.core_crypto.compression import (
    bits_to_word, bits_to_words, compress, compress_words, create_message_schedule
)
from bitsha.core_crypto.padding import _length_field, split_into_blocks
from bitsha.core_crypto.sha256 import H_INITIAL, initial_state
from bitsha.encoding.bits import bits_to_bytes, bytes_to_bits, text_to_bits


class TestInvalidLength:
    """Inputs that are not whole bytes must never produce a digest."""

    @pytest.mark.parametrize("length", [1, 7, 9, 15, 447, 511, 513])
    def test_sha256_rejects(self, length):
        """Little-endian mode rejects partial bytes."""
        with pytest.raises(InvalidLength):
            sha256([False] * length)

    @pytest.mark.parametrize("length", [1, 7, 9, 15, 447, 511, 513])
    def test_sha256_standard_rejects(self, length):
        """Standard mode rejects partial bytes."""
        with pytest.raises(InvalidLength):
            sha256_standard([True] * length)

    def test_adapter_rejects(self):
        """The bit order adapter rejects partial bytes."""
        with pytest.raises(InvalidLength):
            reverse_bits_in_bytes([True] * 12)

    def test_error_carries_length(self):
        """The offending length is reported."""
        with pytest.raises(InvalidLength) as exc_info:
            sha256([True] * 13)
        assert exc_info.value.length == 13
        assert "13" in str(exc_info.value)

    def test_is_value_error(self):
        """InvalidLength can be caught as ValueError or Sha256Error."""
        with pytest.raises(ValueError):
            sha256_standard([True] * 3)
        with pytest.raises(Sha256Error):
            sha256_standard([True] * 3)

    def test_bits_to_bytes_rejects(self):
        """Packing partial bytes fails the same way."""
        with pytest.raises(InvalidLength):
            bits_to_bytes([True] * 10)

    def test_bad_order_rejected(self):
        """Only BitOrder members select a mode."""
        with pytest.raises(TypeError):
            sha256_bits(bytes_to_bits(b"abc"), "lsb")


class TestContractViolations:
    """Wrong internal sizes fail fast instead of being padded or truncated."""

    def test_short_block(self):
        """A 511-bit block is rejected."""
        with pytest.raises(ContractViolation):
            compress([False] * 511, initial_state())

    def test_long_block(self):
        """A 513-bit block is rejected."""
        with pytest.raises(ContractViolation):
            compress([False] * 513, initial_state())

    def test_short_state(self):
        """A 255-bit state is rejected."""
        with pytest.raises(ContractViolation):
            compress([False] * 512, initial_state()[:-1])

    def test_state_word_count(self):
        """compress_words needs 8 state words."""
        w = create_message_schedule([0] * 16)
        with pytest.raises(ContractViolation):
            compress_words(list(H_INITIAL)[:7], w)

    def test_schedule_word_count(self):
        """The schedule needs exactly 16 input words."""
        with pytest.raises(ContractViolation):
            create_message_schedule([0] * 15)

    def test_word_width(self):
        """Words are exactly 32 bits."""
        with pytest.raises(ContractViolation):
            bits_to_word([True] * 31)
        with pytest.raises(ContractViolation):
            bits_to_words([True] * 40)

    def test_unpadded_split(self):
        """Splitting an unpadded message is a contract violation."""
        with pytest.raises(ContractViolation):
            list(split_into_blocks([False] * 100))

    def test_length_field_overflow(self):
        """Lengths beyond 64 bits cannot be encoded."""
        with pytest.raises(ContractViolation):
            _length_field(2 ** 64)
        assert len(_length_field(2 ** 64 - 1)) == 64

    def test_not_a_value_error(self):
        """Contract violations are not the user-facing error."""
        with pytest.raises(ContractViolation) as exc_info:
            compress([False] * 8, initial_state())
        assert not isinstance(exc_info.value, ValueError)


class TestAvalanche:
    """A single flipped input bit changes about half the output."""

    def test_flip_bit(self):
        """flip_bit changes exactly one position."""
        bits = [False] * 16
        flipped = flip_bit(bits, 3)
        assert bit_difference(bits, flipped) == 1
        assert bits == [False] * 16

    def test_bit_difference_length_mismatch(self):
        """Sequences of different length cannot be compared."""
        with pytest.raises(ValueError):
            bit_difference([True], [True, False])

    def test_single_flip_changes_digest(self):
        """Every single-bit flip of 'abc' changes the digest."""
        bits = text_to_bits("abc")
        base = sha256_standard(bits)
        for i in range(len(bits)):
            assert sha256_standard(flip_bit(bits, i)) != base

    def test_average_near_half(self):
        """Mean flipped fraction is close to 50%."""
        report = measure_avalanche(text_to_bits("x" * 64), trials=32, seed=7)
        assert isinstance(report, AvalancheReport)
        assert report.trials == 32
        assert 0.4 < report.mean_ratio < 0.6
        assert report.min_flipped <= report.mean_flipped <= report.max_flipped

    def test_little_endian_mode(self):
        """Avalanche holds in little-endian mode too."""
        bits = text_to_bits("summon", BitOrder.LSB_FIRST)
        report = measure_avalanche(bits, trials=16, order=BitOrder.LSB_FIRST, seed=1)
        assert 0.35 < report.mean_ratio < 0.65

    def test_seed_reproducible(self):
        """Same seed, same report."""
        bits = text_to_bits("seed")
        assert measure_avalanche(bits, trials=8, seed=3) == measure_avalanche(bits, trials=8, seed=3)

    def test_rejects_empty_message(self):
        """An empty message has no bit to flip."""
        with pytest.raises(ValueError):
            measure_avalanche([])

    def test_rejects_zero_trials(self):
        """At least one trial is required."""
        with pytest.raises(ValueError):
            measure_avalanche(text_to_bits("a"), trials=0)
