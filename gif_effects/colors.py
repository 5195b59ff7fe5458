"""
Color helpers: hex/HSL parsing, blending and gradient generation.

Colors are plain ``(r, g, b)`` tuples with channels in [0, 255]. Every frame
of every effect is drawn from a single background/foreground pair, so the
only colors that ever appear are the two endpoints and blends between them.
"""

import string
from dataclasses import dataclass
from typing import List, Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class ColorPair:
    """Background and foreground color used to draw one frame."""

    background: Color
    foreground: Color


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def parse_hex(color_text: str) -> Color:
    """
    Parse ``#RGB`` or ``#RRGGBB`` (the ``#`` is optional) into an RGB tuple.

    Anything else, including non-hex digits, falls back to white rather than
    raising.
    """
    digits = (color_text or "").strip().lstrip("#")
    if not digits or not set(digits) <= _HEX_DIGITS:
        return WHITE

    if len(digits) == 6:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if len(digits) == 3:
        return tuple(int(nibble, 16) * 17 for nibble in digits)  # type: ignore[return-value]
    return WHITE


def to_hex(color: Color) -> str:
    """Render a color as ``#rrggbb``."""
    return "#{:02x}{:02x}{:02x}".format(*color)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """
    Convert HSL to RGB.

    Args:
        hue: Hue in degrees. Values outside [0, 360) are wrapped.
        saturation: Saturation in [0, 1].
        lightness: Lightness in [0, 1].

    Returns:
        RGB tuple with each channel rounded and clamped to [0, 255].
    """
    saturation = max(0.0, min(1.0, saturation))
    lightness = max(0.0, min(1.0, lightness))

    if saturation == 0:
        gray = _clamp_channel(lightness * 255)
        return (gray, gray, gray)

    if lightness < 0.5:
        q = lightness * (1 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2 * lightness - q

    h = (hue % 360) / 360
    red = _hue_to_channel(p, q, h + 1 / 3)
    green = _hue_to_channel(p, q, h)
    blue = _hue_to_channel(p, q, h - 1 / 3)
    return (_clamp_channel(red * 255), _clamp_channel(green * 255), _clamp_channel(blue * 255))


def blend_by_fraction(foreground: Color, background: Color, fraction: float) -> Color:
    """Interpolate from ``background`` (fraction 0) to ``foreground`` (fraction 1)."""
    t = max(0.0, min(1.0, fraction))
    return tuple(  # type: ignore[return-value]
        _clamp_channel(fg * t + bg * (1 - t)) for fg, bg in zip(foreground, background)
    )


def blend_by_alpha(foreground: Color, background: Color, alpha: int) -> Color:
    """Composite ``foreground`` at ``alpha`` (0-255) over an opaque ``background``."""
    return blend_by_fraction(foreground, background, max(0, min(255, alpha)) / 255)


def gradient(start: Color, end: Color, steps: int) -> List[Color]:
    """
    Linear gradient of ``steps`` colors from ``start`` to ``end`` inclusive.

    A single step yields just ``start``.
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [start]
    return [blend_by_fraction(end, start, index / (steps - 1)) for index in range(steps)]
