"""
Flashing letters: each character blinks out independently at random.

The draw uses the module-level ``random`` generator and is not seeded, so
two renders of the same options are expected to differ.
"""

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..canvas import ANCHOR_LEFT_BASELINE, Canvas
from ..fonts import FontProvider
from ..options import Options, clamp, get_float, get_int, get_str
from .base import Effect, EffectConfig, clamp_frames

FONT_HEIGHT_RATIO = 0.6


@dataclass(frozen=True)
class FlashingLettersConfig(EffectConfig):
    width: int = 400
    height: int = 200
    delay: float = 100
    frames: int = 20
    text: str = "SALE"
    flash_probability: float = 0.3

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "FlashingLettersConfig":
        defaults = cls()
        return cls(
            **cls.common_options(options),
            frames=clamp_frames(get_int(options, "frames", defaults.frames)),
            text=get_str(options, "text", defaults.text),
            flash_probability=clamp(
                get_float(options, "flashProbability", defaults.flash_probability), 0.0, 1.0
            ),
        )


@dataclass(frozen=True)
class FlashingLettersState:
    visible: Tuple[bool, ...]


class FlashingLettersEffect(Effect[FlashingLettersConfig, FlashingLettersState]):
    name = "flashing-letters"
    config_class = FlashingLettersConfig

    def __init__(self, config: FlashingLettersConfig, fonts: Optional[FontProvider] = None):
        super().__init__(config, fonts)
        self.font_face = self.face(config.height * FONT_HEIGHT_RATIO)

        text_width, text_height = self.font_face.measure(config.text)
        self.origin = ((config.width - text_width) / 2, (config.height + text_height) / 2)
        self.advances = [self.font_face.measure(char)[0] for char in config.text]

    @property
    def frame_count(self) -> int:
        return self.config.frames

    def frame_state(self, index: int) -> FlashingLettersState:
        probability = self.config.flash_probability
        return FlashingLettersState(
            visible=tuple(random.random() >= probability for _ in self.config.text)
        )

    def draw(self, canvas: Canvas, state: FlashingLettersState) -> None:
        colors = self.config.colors
        x, y = self.origin

        for char, advance, visible in zip(self.config.text, self.advances, state.visible):
            fill = colors.foreground if visible else colors.background
            canvas.draw_text(char, (x, y), self.font_face, fill, anchor=ANCHOR_LEFT_BASELINE)
            x += advance
