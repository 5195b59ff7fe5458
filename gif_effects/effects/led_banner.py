"""Scrolling LED banner: the text is tiled and shifted by one block per loop."""

import math
from dataclasses import dataclass
from typing import Optional

from ..canvas import ANCHOR_LEFT_MIDDLE, Canvas
from ..fonts import FontProvider
from ..options import Options, clamp, get_bool, get_int, get_str
from .base import Effect, EffectConfig, clamp_frames

MAX_BANNER_FRAMES = 30
FONT_HEIGHT_RATIO = 0.8
MAX_SPACE_SIZE = 100


@dataclass(frozen=True)
class LedBannerConfig(EffectConfig):
    width: int = 800
    height: int = 50
    delay: float = 50
    frames: int = 10
    forward: bool = True
    space_size: int = 4
    text: str = "Hello World!"

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "LedBannerConfig":
        defaults = cls()
        return cls(
            **cls.common_options(options),
            frames=clamp_frames(get_int(options, "frames", defaults.frames), MAX_BANNER_FRAMES),
            forward=get_bool(options, "forward", defaults.forward),
            space_size=clamp(get_int(options, "spaceSize", defaults.space_size), 0, MAX_SPACE_SIZE),
            text=get_str(options, "text", defaults.text),
        )


@dataclass(frozen=True)
class BannerState:
    offset: float
    x: float


class LedBannerEffect(Effect[LedBannerConfig, BannerState]):
    name = "led-banner"
    config_class = LedBannerConfig

    def __init__(self, config: LedBannerConfig, fonts: Optional[FontProvider] = None):
        super().__init__(config, fonts)
        self.font_face = self.face(config.height * FONT_HEIGHT_RATIO)

        block = config.text + " " * config.space_size
        block_width, _ = self.font_face.measure(block)
        # Guard against an empty block so the scroll math stays finite.
        self.block_width = max(block_width, 1.0)

        copies = math.ceil(config.width / self.block_width) + 2
        self.tiled_text = block * copies

    @property
    def frame_count(self) -> int:
        return self.config.frames

    def frame_state(self, index: int) -> BannerState:
        offset = index * self.block_width / self.config.frames
        x = -self.block_width + offset if self.config.forward else -offset
        return BannerState(offset=offset, x=x)

    def draw(self, canvas: Canvas, state: BannerState) -> None:
        canvas.draw_text(
            self.tiled_text,
            (state.x, canvas.height / 2),
            self.font_face,
            self.config.colors.foreground,
            anchor=ANCHOR_LEFT_MIDDLE,
        )
