"""
Exceptions raised by the GIF effect pipeline.

Configuration errors abort a render before any frame is drawn. Asset errors
(missing or corrupt font files) abort it as well. Everything else that looks
like bad input (out-of-range numbers, malformed colors, unknown font names,
past countdown targets) is clamped or substituted silently instead.
"""


class GifEffectError(Exception):
    """Base class for every error raised while rendering an effect."""


class ConfigurationError(GifEffectError, ValueError):
    """An option could not be interpreted, e.g. an unparsable countdown date."""


class FontLoadError(GifEffectError):
    """Font bytes could not be read or parsed."""
