"""
Conversions between pixels, points and physical lengths.

    ppi = resolve_ppi().ppi
    width_px = millimetres_to_pixels(85.6, ppi)   # a credit card, true size
"""

import math

MM_PER_INCH = 25.4


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value!r}")


def pixels_to_inches(pixels: float, ppi: float) -> float:
    _require_positive("ppi", ppi)
    return pixels / ppi


def pixels_to_millimetres(pixels: float, ppi: float) -> float:
    return pixels_to_inches(pixels, ppi) * MM_PER_INCH


def inches_to_pixels(inches: float, ppi: float) -> float:
    _require_positive("ppi", ppi)
    return inches * ppi


def millimetres_to_pixels(millimetres: float, ppi: float) -> float:
    return inches_to_pixels(millimetres / MM_PER_INCH, ppi)


def points_to_pixels(points: float, scale: float) -> float:
    """Logical points to device pixels at the given logical scale."""
    _require_positive("scale", scale)
    return points * scale


def pixels_to_points(pixels: float, scale: float) -> float:
    _require_positive("scale", scale)
    return pixels / scale


def diagonal_ppi(width_px: int, height_px: int, diagonal_inches: float) -> float:
    """PPI of a panel from its resolution and diagonal size."""
    _require_positive("diagonal_inches", diagonal_inches)
    return math.hypot(width_px, height_px) / diagonal_inches
