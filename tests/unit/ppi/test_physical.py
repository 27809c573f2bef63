"""Tests for pixel and physical length conversions."""

import pytest

from deviceppi.ppi.physical import (
    MM_PER_INCH,
    diagonal_ppi,
    inches_to_pixels,
    millimetres_to_pixels,
    pixels_to_inches,
    pixels_to_millimetres,
    pixels_to_points,
    points_to_pixels,
)


class TestLengthConversions:
    """Tests for pixel <-> inch/millimetre conversions."""

    def test_pixels_to_inches(self):
        assert pixels_to_inches(460, 460) == 1.0

    def test_pixels_to_millimetres(self):
        assert pixels_to_millimetres(326, 326) == pytest.approx(MM_PER_INCH)

    def test_inches_to_pixels(self):
        assert inches_to_pixels(2, 264) == 528

    def test_millimetres_to_pixels(self):
        """Test a credit card width at iPhone 13 density."""
        assert millimetres_to_pixels(85.6, 460) == pytest.approx(1550.24, abs=0.01)

    @pytest.mark.parametrize(
        "func", [pixels_to_inches, pixels_to_millimetres, inches_to_pixels, millimetres_to_pixels]
    )
    def test_non_positive_ppi_rejected(self, func):
        with pytest.raises(ValueError):
            func(10, 0)


class TestPointConversions:
    """Tests for point <-> pixel conversions."""

    def test_points_to_pixels(self):
        assert points_to_pixels(390, 3) == 1170

    def test_pixels_to_points(self):
        assert pixels_to_points(1170, 3) == 390

    def test_non_positive_scale_rejected(self):
        with pytest.raises(ValueError):
            points_to_pixels(10, -2)


class TestDiagonalPpi:
    """Tests for diagonal_ppi()."""

    def test_iphone_13(self):
        """Test 1170x2532 at 6.06 inches is about 460 ppi."""
        assert diagonal_ppi(1170, 2532, 6.06) == pytest.approx(460, abs=1)

    def test_zero_diagonal_rejected(self):
        with pytest.raises(ValueError):
            diagonal_ppi(100, 100, 0)
