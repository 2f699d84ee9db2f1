"""
Unit tests for the bit encoding helpers.
"""

import pytest

from bitsha import BitOrder, InvalidLength
from bitsha.encoding import (
    bytes_to_bits, bits_to_bytes, text_to_bits, bits_to_hex, hex_to_bits,
    bits_to_string
)


class TestBytesToBits:
    """Byte <-> bit conversion in both orders."""

    def test_msb_first(self):
        """0x01 lists its set bit last in MSB-first order."""
        assert bytes_to_bits(b"\x01") == [False] * 7 + [True]

    def test_lsb_first(self):
        """0x01 lists its set bit first in LSB-first order."""
        assert bytes_to_bits(b"\x01", BitOrder.LSB_FIRST) == [True] + [False] * 7

    def test_empty(self):
        """No bytes, no bits."""
        assert bytes_to_bits(b"") == []
        assert bits_to_bytes([]) == b""

    @pytest.mark.parametrize("order", list(BitOrder))
    def test_roundtrip(self, order):
        """Bytes survive conversion in either order."""
        data = bytes(range(256))
        assert bits_to_bytes(bytes_to_bits(data, order), order) == data

    def test_byte_order_preserved(self):
        """The first byte's bits come first in both orders."""
        msb = bytes_to_bits(b"\xff\x00")
        lsb = bytes_to_bits(b"\xff\x00", BitOrder.LSB_FIRST)
        assert msb[:8] == lsb[:8] == [True] * 8

    def test_rejects_partial_byte(self):
        """Packing needs whole bytes."""
        with pytest.raises(InvalidLength):
            bits_to_bytes([True] * 5)


class TestTextAndHex:
    """Text and hex helpers."""

    def test_text_to_bits(self):
        """'a' is 0x61."""
        assert bits_to_string(text_to_bits("a")) == "01100001"
        assert bits_to_string(text_to_bits("a", BitOrder.LSB_FIRST)) == "10000110"

    def test_text_utf8(self):
        """Non-ASCII text is UTF-8 encoded."""
        assert len(text_to_bits("é")) == 16

    def test_hex_roundtrip(self):
        """Hex survives conversion in either order."""
        for order in BitOrder:
            assert bits_to_hex(hex_to_bits("deadbeef", order), order) == "deadbeef"

    def test_hex_order_mismatch(self):
        """Reading bits in the wrong order reverses each byte."""
        bits = hex_to_bits("01", BitOrder.LSB_FIRST)
        assert bits_to_hex(bits, BitOrder.MSB_FIRST) == "80"

    def test_invalid_hex(self):
        """Malformed hex raises ValueError."""
        with pytest.raises(ValueError):
            hex_to_bits("abc")
