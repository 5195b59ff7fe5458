"""
Typing text: the text appears one character per frame, then the cursor blinks.
"""

from dataclasses import dataclass
from typing import Optional

from ..canvas import ANCHOR_LEFT_BASELINE, Canvas
from ..fonts import FontProvider
from ..layout import Box, autofit_single_line
from ..options import Options, clamp_padding, get_int, get_str
from .base import MAX_FRAMES, Effect, EffectConfig

CURSOR = "|"
BLINK_FRAMES = 6
# One frame per character plus the empty and blinking frames must stay within
# the frame limit.
MAX_TEXT_LENGTH = MAX_FRAMES - 1 - BLINK_FRAMES


@dataclass(frozen=True)
class TypingTextConfig(EffectConfig):
    width: int = 800
    height: int = 200
    delay: float = 100
    text: str = "BLACK FRIDAY"
    padding: int = 40

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "TypingTextConfig":
        defaults = cls()
        common = cls.common_options(options)
        return cls(
            **common,
            text=get_str(options, "text", defaults.text).strip()[:MAX_TEXT_LENGTH],
            padding=clamp_padding(
                get_int(options, "padding", defaults.padding), common["width"], common["height"]
            ),
        )


@dataclass(frozen=True)
class TypingState:
    length: int
    cursor: bool


class TypingTextEffect(Effect[TypingTextConfig, TypingState]):
    name = "typing-text"
    config_class = TypingTextConfig

    def __init__(self, config: TypingTextConfig, fonts: Optional[FontProvider] = None):
        super().__init__(config, fonts)
        font_size = autofit_single_line(
            config.text,
            Box(config.width, config.height),
            config.padding,
            self.measure_at,
            suffix=CURSOR,
        )
        self.font_face = self.face(font_size)
        _, glyph_height = self.font_face.measure("M")
        self.baseline = (config.height + glyph_height) / 2

    @property
    def frame_count(self) -> int:
        return len(self.config.text) + 1 + BLINK_FRAMES

    def frame_state(self, index: int) -> TypingState:
        typed = len(self.config.text) + 1
        if index < typed:
            return TypingState(length=index, cursor=False)
        return TypingState(length=len(self.config.text), cursor=(index - typed) % 2 == 0)

    def draw(self, canvas: Canvas, state: TypingState) -> None:
        foreground = self.config.colors.foreground
        visible = self.config.text[: state.length]
        x = float(self.config.padding)

        canvas.draw_text(visible, (x, self.baseline), self.font_face, foreground, ANCHOR_LEFT_BASELINE)
        if state.cursor:
            if visible:
                x += self.font_face.measure(visible)[0]
            canvas.draw_text(CURSOR, (x, self.baseline), self.font_face, foreground, ANCHOR_LEFT_BASELINE)
