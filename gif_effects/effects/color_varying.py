"""
Color-varying text: static, autofitted text whose colors cycle through the hue
wheel once per loop.
"""

from dataclasses import dataclass
from typing import Optional

from ..canvas import ANCHOR_LEFT_BASELINE, Canvas
from ..colors import ColorPair, hsl_to_rgb
from ..fonts import FontProvider
from ..layout import Box, Layout, autofit_font_size
from ..options import Options, clamp_padding, get_int, get_str
from .base import Effect, EffectConfig, clamp_frames

SCHEME_COMPLEMENTARY = "complementary"
SCHEME_TRIADIC = "triadic"
SCHEME_MONOCHROMATIC = "monochromatic"
SCHEME_ANALOGOUS = "analogous"

# Hue shift of the text relative to the background.
HUE_SHIFTS = {
    SCHEME_COMPLEMENTARY: 180.0,
    SCHEME_TRIADIC: 120.0,
    SCHEME_ANALOGOUS: 30.0,
}


def color_pair_for_hue(hue: float, scheme: str) -> ColorPair:
    """Background/text colors for ``hue`` under a color scheme."""
    if scheme == SCHEME_MONOCHROMATIC:
        return ColorPair(
            background=hsl_to_rgb(hue, 0.8, 0.2),
            foreground=hsl_to_rgb(hue, 0.8, 0.8),
        )

    shift = HUE_SHIFTS.get(scheme, HUE_SHIFTS[SCHEME_ANALOGOUS])
    return ColorPair(
        background=hsl_to_rgb(hue, 1.0, 0.3),
        foreground=hsl_to_rgb((hue + shift) % 360, 1.0, 0.8),
    )


@dataclass(frozen=True)
class ColorVaryingTextConfig(EffectConfig):
    width: int = 600
    height: int = 400
    delay: float = 100
    frames: int = 30
    text: str = "SALE"
    color_scheme: str = SCHEME_COMPLEMENTARY
    padding: int = 40

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "ColorVaryingTextConfig":
        defaults = cls()
        common = cls.common_options(options)
        return cls(
            **common,
            frames=clamp_frames(get_int(options, "frames", defaults.frames)),
            text=get_str(options, "text", defaults.text).strip(),
            color_scheme=get_str(options, "colorScheme", defaults.color_scheme).strip().lower(),
            padding=clamp_padding(
                get_int(options, "padding", defaults.padding), common["width"], common["height"]
            ),
        )


@dataclass(frozen=True)
class ColorVaryingState:
    hue: float
    colors: ColorPair


class ColorVaryingTextEffect(Effect[ColorVaryingTextConfig, ColorVaryingState]):
    name = "color-varying-text"
    config_class = ColorVaryingTextConfig

    def __init__(self, config: ColorVaryingTextConfig, fonts: Optional[FontProvider] = None):
        super().__init__(config, fonts)
        self.layout: Layout = autofit_font_size(
            config.text,
            Box(config.width, config.height),
            config.padding,
            self.measure_at,
        )
        self.font_face = self.face(self.layout.font_size)

    @property
    def frame_count(self) -> int:
        return self.config.frames

    def frame_state(self, index: int) -> ColorVaryingState:
        hue = index * (360.0 / self.config.frames)
        return ColorVaryingState(hue=hue, colors=color_pair_for_hue(hue, self.config.color_scheme))

    def colors(self, state: ColorVaryingState) -> ColorPair:
        return state.colors

    def draw(self, canvas: Canvas, state: ColorVaryingState) -> None:
        padding = self.config.padding
        layout = self.layout
        inner_width = canvas.width - 2 * padding
        inner_height = canvas.height - 2 * padding
        baseline = padding + (inner_height - layout.total_height) / 2 + layout.font_size

        for index, line in enumerate(layout.lines):
            line_width, _ = self.font_face.measure(line)
            x = padding + (inner_width - line_width) / 2
            y = baseline + index * layout.line_height
            canvas.draw_text(line, (x, y), self.font_face, state.colors.foreground, ANCHOR_LEFT_BASELINE)
