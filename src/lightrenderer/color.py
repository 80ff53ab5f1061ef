"""Color-space helpers: 8-bit clamping, light tinting, and HSV conversion."""

import colorsys
import math

from lightrenderer.models import Color


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def clamp_channel(value: float) -> int:
    return max(0, min(255, round_half_up(value)))


def make_color(r: float, g: float, b: float) -> Color:
    """Build a Color from arbitrary numbers, rounding and clamping each channel."""
    return Color(clamp_channel(r), clamp_channel(g), clamp_channel(b))


def tint(base: Color, light: Color) -> Color:
    """Filter a surface color through a light color (multiplicative, per channel)."""
    return make_color(
        base.r * light.r / 255,
        base.g * light.g / 255,
        base.b * light.b / 255,
    )


def scale(color: Color, factor: float) -> Color:
    return make_color(color.r * factor, color.g * factor, color.b * factor)


def rgb_to_hsv(color: Color) -> tuple[float, float, float]:
    """Convert to (hue in degrees 0..360, saturation 0..1, value 0..1)."""
    h, s, v = colorsys.rgb_to_hsv(color.r / 255, color.g / 255, color.b / 255)
    return (h * 360.0) % 360.0, s, v


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """Inverse of rgb_to_hsv. Hue wraps; saturation and value are clamped to 0..1."""
    saturation = max(0.0, min(1.0, saturation))
    value = max(0.0, min(1.0, value))
    r, g, b = colorsys.hsv_to_rgb((hue % 360.0) / 360.0, saturation, value)
    return make_color(r * 255, g * 255, b * 255)


def parse_rgb(text: str) -> Color:
    """Parse an ``"r,g,b"`` string. Channels outside 0..255 are clamped.

    Raises:
        ValueError: If the string does not hold exactly three numbers.
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise ValueError(f"Expected 'r,g,b', got {text!r}")
    r, g, b = (float(p) for p in parts)
    return make_color(r, g, b)
