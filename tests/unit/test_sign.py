"""Unit tests for sign nibble handling."""

from __future__ import annotations

import pytest

from packdec import NEGATIVE, POSITIVE, UNSIGNED, Sign, SignError, is_positive, set_sign

VALID_SIGNS = {0xC: True, 0xD: False, 0xF: True}
INVALID_SIGNS = [n for n in range(16) if n not in VALID_SIGNS]


class TestIsPositiveBuffer:
    """Test classification of a buffer's last byte."""

    @pytest.mark.parametrize("last", [0x0C, 0x0F, 0xFC, 0xFF])
    def test_positive(self, last: int) -> None:
        """Test 0xC and 0xF read as positive."""
        assert is_positive(bytes([0x00, last])) is True

    @pytest.mark.parametrize("last", [0x0D, 0xFD])
    def test_negative(self, last: int) -> None:
        """Test 0xD reads as negative."""
        assert is_positive(bytes([0x00, last])) is False

    @pytest.mark.parametrize("nibble", INVALID_SIGNS)
    def test_invalid(self, nibble: int) -> None:
        """Test every other nibble is rejected."""
        with pytest.raises(SignError):
            is_positive(bytes([0x00, nibble]))

    def test_only_last_byte_checked(self) -> None:
        """Test nibbles before the last byte are ignored."""
        assert is_positive(b"\xdd\x1c") is True

    def test_empty_buffer(self) -> None:
        """Test an empty buffer has no sign."""
        with pytest.raises(SignError, match="empty"):
            is_positive(b"")

    def test_bytearray(self) -> None:
        """Test mutable buffers are accepted."""
        assert is_positive(bytearray(b"\x12\x3d")) is False


class TestIsPositiveByte:
    """Test classification of a single byte value."""

    @pytest.mark.parametrize("nibble", range(16))
    def test_all_nibbles(self, nibble: int) -> None:
        """Test the full sixteen-entry table."""
        if nibble in VALID_SIGNS:
            assert is_positive(nibble) is VALID_SIGNS[nibble]
        else:
            with pytest.raises(SignError):
                is_positive(nibble)

    def test_high_bits_masked(self) -> None:
        """Test only the low nibble matters."""
        assert is_positive(0xFC) is True
        assert is_positive(0xFF) is True
        assert is_positive(0xFD) is False
        assert is_positive(0x12345C) is True

    def test_digit_message(self) -> None:
        """Test digits in sign position are reported as such."""
        with pytest.raises(SignError, match="digit in sign position"):
            is_positive(0x05)

    @pytest.mark.parametrize("nibble", [0xA, 0xB, 0xE])
    def test_reserved_message(self, nibble: int) -> None:
        """Test the reserved codes use the plain message."""
        with pytest.raises(SignError, match="invalid sign byte: "):
            is_positive(nibble)


class TestSetSign:
    """Test rewriting the sign nibble."""

    @pytest.mark.parametrize("sign", [POSITIVE, UNSIGNED, NEGATIVE])
    def test_set_then_classify(self, sign: int) -> None:
        """Test is_positive agrees with the written sign."""
        buf = bytearray(b"\x12\x30")
        set_sign(buf, sign)
        assert is_positive(buf) is (sign != NEGATIVE)

    def test_high_nibble_preserved(self) -> None:
        """Test the digit sharing the sign byte is kept."""
        buf = bytearray(b"\x12\x3c")
        set_sign(buf, 0xD)
        assert buf == bytearray(b"\x12\x3d")

    def test_sign_masked_to_nibble(self) -> None:
        """Test bits above the low nibble of sign are ignored."""
        buf = bytearray(b"\x12\x3c")
        set_sign(buf, 0xAF)
        assert buf == bytearray(b"\x12\x3f")

    def test_invalid_sign_written(self) -> None:
        """Test no validation is done on write."""
        buf = bytearray(b"\x12\x3c")
        set_sign(buf, 0x5)
        assert buf[-1] == 0x35
        with pytest.raises(SignError):
            is_positive(buf)

    def test_memoryview_slice(self) -> None:
        """Test writing through a view into a larger record."""
        record = bytearray(b"\x00\x12\x3c\xff")
        set_sign(memoryview(record)[1:3], NEGATIVE)
        assert record == bytearray(b"\x00\x12\x3d\xff")

    def test_bytes_rejected(self) -> None:
        """Test immutable bytes cannot be rewritten."""
        with pytest.raises(TypeError):
            set_sign(b"\x12\x3c", NEGATIVE)  # type: ignore[arg-type]

    def test_empty_buffer(self) -> None:
        """Test an empty buffer has no sign byte."""
        with pytest.raises(SignError):
            set_sign(bytearray(), POSITIVE)


class TestSignEnum:
    """Test the sign constants."""

    def test_values(self) -> None:
        """Test the nibble values."""
        assert Sign.POSITIVE == 0xC
        assert Sign.NEGATIVE == 0xD
        assert Sign.UNSIGNED == 0xF

    def test_module_constants(self) -> None:
        """Test the module level aliases."""
        assert POSITIVE is Sign.POSITIVE
        assert NEGATIVE is Sign.NEGATIVE
        assert UNSIGNED is Sign.UNSIGNED
