"""Numeric conversions between font, color and document units.

All functions are pure. Integer division here truncates toward zero and
remainders take the sign of the dividend, unlike Python's ``//`` and ``%``;
glyph coordinates depend on this for negative values.
"""

from glyphdraw.domain.outline import OutlinePoint
from glyphdraw.domain.state import CHANNEL_MAX, Color


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder of ``trunc_div``; its sign follows the dividend.

    Examples:
        >>> trunc_mod(-7, 2)
        -1
    """
    return a - b * trunc_div(a, b)


def funits_to_pixels(x: int) -> float:
    """Convert a scaled design-unit coordinate to floating point pixels.

    The value is shifted left by two bits and split into an integer and a
    fractional part of 1/256.

    Args:
        x: Coordinate as returned by the font backend for the active scale

    Returns:
        Coordinate in pixels

    Examples:
        >>> funits_to_pixels(64)
        1.0
        >>> funits_to_pixels(-96)
        -1.5
    """
    scaled = x * 4
    return float(trunc_div(scaled, 256)) + trunc_mod(scaled, 256) / 256.0


def glyph_point_to_pixel(point: OutlinePoint) -> tuple[float, float]:
    """Convert an outline point to document pixel space.

    Font Y grows upwards while document Y grows downwards, so Y is negated.
    """
    return funits_to_pixels(point.x), -funits_to_pixels(point.y)


def color_to_channels(color: Color) -> tuple[int, int, int]:
    """Convert a color to the writer's three 0..255 channels.

    Channels are scaled by 255/65535 and truncated.
    """
    return (
        color.r * 255 // CHANNEL_MAX,
        color.g * 255 // CHANNEL_MAX,
        color.b * 255 // CHANNEL_MAX,
    )


def alpha_fraction(color: Color) -> float:
    """Return the color's alpha as a fraction of full opacity."""
    return color.a / float(CHANNEL_MAX)
