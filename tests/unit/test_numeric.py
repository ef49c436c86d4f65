"""Unit tests for numeric conversions."""

import pytest

from glyphdraw.core.numeric import (
    alpha_fraction,
    color_to_channels,
    funits_to_pixels,
    glyph_point_to_pixel,
    trunc_div,
    trunc_mod,
)
from glyphdraw.domain import BLACK, WHITE, Color, OutlinePoint


class TestTruncatingDivision:
    """Tests for trunc_div and trunc_mod."""

    @pytest.mark.parametrize(
        "a,b,quotient,remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (0, 5, 0, 0),
        ],
    )
    def test_truncates_toward_zero(self, a: int, b: int, quotient: int, remainder: int) -> None:
        """Test quotients round toward zero and remainders follow the dividend."""
        assert trunc_div(a, b) == quotient
        assert trunc_mod(a, b) == remainder
        assert b * trunc_div(a, b) + trunc_mod(a, b) == a


class TestFunitsToPixels:
    """Tests for funits_to_pixels."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0.0),
            (64, 1.0),
            (640, 10.0),
            (32, 0.5),
            (1, 0.015625),
            (-96, -1.5),
            (-1, -0.015625),
        ],
    )
    def test_conversion(self, value: int, expected: float) -> None:
        """Test whole and fractional values of both signs."""
        assert funits_to_pixels(value) == expected

    def test_negative_is_symmetric(self) -> None:
        """Test that negating the input negates the output."""
        for value in (3, 65, 200, 1000):
            assert funits_to_pixels(-value) == -funits_to_pixels(value)

    def test_glyph_point_flips_y(self) -> None:
        """Test that outline Y is negated for document space."""
        assert glyph_point_to_pixel(OutlinePoint(64, 128)) == (1.0, -2.0)


class TestColorConversion:
    """Tests for color helpers."""

    def test_channels(self) -> None:
        """Test 16-bit to 8-bit channel conversion."""
        assert color_to_channels(WHITE) == (255, 255, 255)
        assert color_to_channels(BLACK) == (0, 0, 0)
        assert color_to_channels(Color.from_rgba8(10, 20, 30)) == (10, 20, 30)

    def test_alpha_fraction(self) -> None:
        """Test alpha as a fraction of full opacity."""
        assert alpha_fraction(BLACK) == 1.0
        assert alpha_fraction(Color(0, 0, 0, 0)) == 0.0
        assert alpha_fraction(Color.from_rgba8(0, 0, 0, 128)) == pytest.approx(128 / 255)
