"""
Core rendering pipeline - turns effect options into an animated GIF.

    options -> effect (defaults, clamping, fonts, layout)
            -> per frame: state -> canvas -> palette quantization
            -> GIF bytes
"""

import base64
import logging
from typing import List, Optional

from .canvas import Canvas
from .encoder import Animation, Frame, delay_from_milliseconds, encode_animation
from .effects import get_effect
from .effects.base import Effect
from .fonts import FontProvider
from .options import Options
from .palette import build_palette, quantize

logger = logging.getLogger(__name__)


def render_frame(effect: Effect, index: int) -> Frame:
    """Draw frame ``index`` of ``effect`` onto a fresh canvas and index it."""
    state = effect.frame_state(index)
    colors = effect.colors(state)
    canvas = Canvas(effect.size, colors.background)
    effect.draw(canvas, state)
    image = quantize(canvas.image, build_palette(colors))
    return Frame(image=image, delay=delay_from_milliseconds(effect.delay))


def animate(effect: Effect) -> Animation:
    frames: List[Frame] = [render_frame(effect, index) for index in range(effect.frame_count)]
    return Animation(frames=tuple(frames))


def build_animation(
    effect_name: str,
    options: Optional[Options] = None,
    fonts: Optional[FontProvider] = None,
) -> Animation:
    """
    Build the frames of an effect without encoding them.

    Args:
        effect_name: Registered effect name (e.g. "countdown", "led-banner")
        options: Effect options; missing ones take the effect's defaults
        fonts: Font provider; a new one is created per call when omitted

    Returns:
        The animation with one indexed frame per effect frame
    """
    effect_class = get_effect(effect_name)
    effect = effect_class.from_options(options, fonts=fonts if fonts is not None else FontProvider())
    logger.debug(
        "Rendering %s: %d frame(s) at %dx%d", effect_class.name, effect.frame_count, *effect.size
    )
    return animate(effect)


def render(
    effect_name: str,
    options: Optional[Options] = None,
    fonts: Optional[FontProvider] = None,
) -> bytes:
    """Render an effect to GIF bytes."""
    return encode_animation(build_animation(effect_name, options, fonts))


def render_base64(
    effect_name: str,
    options: Optional[Options] = None,
    fonts: Optional[FontProvider] = None,
) -> str:
    """Render an effect and return the GIF base64-encoded, for text transports."""
    return base64.b64encode(render(effect_name, options, fonts)).decode("ascii")
