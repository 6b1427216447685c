"""Unit tests for the bootstring primitives.

Tests cover:
- Digit <-> code point mapping in both directions
- Rejection of out of range digits and uppercase digit characters
- Digit threshold clamping
- Bias adaptation (RFC 3492 section 6.1)
"""

import pytest

from idn_mcp_server.exceptions import BadInput, Overflow, PunycodeError, handle_codec_error
from idn_mcp_server.punycode.bootstring import (
    TMAX,
    TMIN,
    adapt,
    code_point_to_digit,
    digit_to_code_point,
    is_basic,
    threshold,
)


class TestDigitMapping:
    """Test suite for digit/code point conversion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "digit,char",
        [(0, "a"), (25, "z"), (26, "0"), (35, "9")],
    )
    def test_digit_to_code_point(self, digit, char):
        """Test boundary digits map to the expected characters."""
        assert digit_to_code_point(digit) == ord(char)

    @pytest.mark.unit
    @pytest.mark.parametrize("digit", [-1, 36, 100])
    def test_digit_to_code_point_out_of_range(self, digit):
        """Test out of range digits are rejected."""
        with pytest.raises(BadInput):
            digit_to_code_point(digit)

    @pytest.mark.unit
    def test_code_point_to_digit_inverts_digit_to_code_point(self):
        """Test every digit value survives a trip through its character."""
        for digit in range(36):
            assert code_point_to_digit(digit_to_code_point(digit)) == digit

    @pytest.mark.unit
    @pytest.mark.parametrize("char", ["A", "Z", "-", ".", " ", "é"])
    def test_code_point_to_digit_rejects_non_digits(self, char):
        """Test uppercase letters and punctuation are not digits."""
        with pytest.raises(BadInput):
            code_point_to_digit(ord(char))

    @pytest.mark.unit
    def test_is_basic(self):
        """Test the ASCII boundary."""
        assert is_basic(0x00)
        assert is_basic(0x7F)
        assert not is_basic(0x80)
        assert not is_basic(0x4E2D)


class TestThreshold:
    """Test suite for the digit threshold."""

    @pytest.mark.unit
    def test_threshold_clamps_to_tmin(self):
        """Test positions at or below the bias use TMIN."""
        assert threshold(36, 72) == TMIN
        assert threshold(72, 72) == TMIN

    @pytest.mark.unit
    def test_threshold_clamps_to_tmax(self):
        """Test positions at or beyond bias + TMAX use TMAX."""
        assert threshold(108, 72) == TMAX
        assert threshold(36, 0) == TMAX

    @pytest.mark.unit
    def test_threshold_between_bounds(self):
        """Test positions between the bounds use k - bias."""
        assert threshold(80, 72) == 8


class TestAdapt:
    """Test suite for bias adaptation."""

    @pytest.mark.unit
    def test_adapt_zero_delta(self):
        """Test a zero delta yields a zero bias."""
        assert adapt(0, 1, True) == 0

    @pytest.mark.unit
    def test_adapt_first_time_damps(self):
        """Test the first adaptation divides by DAMP."""
        assert adapt(700, 1, True) == 1
        assert adapt(100000, 1, True) == 31

    @pytest.mark.unit
    def test_adapt_later_halves(self):
        """Test later adaptations divide by two and loop over large deltas."""
        assert adapt(1000000, 2, False) == 119

    @pytest.mark.unit
    def test_adapt_first_time_differs_from_later(self):
        """Test the damping factor depends on first_time."""
        assert adapt(10000, 1, True) != adapt(10000, 1, False)


class TestExceptions:
    """Test suite for codec exceptions."""

    @pytest.mark.unit
    def test_default_messages(self):
        """Test exceptions raised without arguments carry their docstring."""
        assert str(Overflow()) == "Overflow."
        assert str(BadInput()) == "Bad input."

    @pytest.mark.unit
    def test_exception_hierarchy(self):
        """Test codec errors are both PunycodeErrors and built-in errors."""
        assert isinstance(Overflow(), PunycodeError)
        assert isinstance(Overflow(), OverflowError)
        assert isinstance(BadInput(), PunycodeError)
        assert isinstance(BadInput(), ValueError)

    @pytest.mark.unit
    def test_handle_codec_error(self):
        """Test error messages for each exception kind."""
        assert handle_codec_error(Overflow("too big")).startswith("Punycode arithmetic overflow")
        assert handle_codec_error(BadInput("bad digit")) == "Invalid Punycode input: bad digit"
        assert handle_codec_error(PunycodeError("x")) == "Punycode error: x"
        assert handle_codec_error(RuntimeError("boom")) == "Unexpected error: boom"
