"""
GIF effect generator.
Renders countdown timers, LED banners and animated text effects as indexed-color
animated GIFs. Shared by the HTTP API and the command-line tool.
"""

from .colors import ColorPair, blend_by_alpha, blend_by_fraction, gradient, hsl_to_rgb, parse_hex
from .effects import EFFECTS, get_effect
from .encoder import Animation, Frame, encode_animation
from .errors import ConfigurationError, FontLoadError, GifEffectError
from .fonts import FontProvider
from .layout import autofit_font_size, autofit_single_line, split_words, wrap_lines
from .renderer import build_animation, render, render_base64

__version__ = "1.0.0"

__all__ = [
    "EFFECTS",
    "Animation",
    "ColorPair",
    "ConfigurationError",
    "FontLoadError",
    "FontProvider",
    "Frame",
    "GifEffectError",
    "autofit_font_size",
    "autofit_single_line",
    "blend_by_alpha",
    "blend_by_fraction",
    "build_animation",
    "encode_animation",
    "get_effect",
    "gradient",
    "hsl_to_rgb",
    "parse_hex",
    "render",
    "render_base64",
    "split_words",
    "wrap_lines",
]
