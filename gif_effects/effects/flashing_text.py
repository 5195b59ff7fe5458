"""
Flashing text: the same word shown at one of N scattered positions per frame.

Positions come from a generator with a fixed seed so identical options always
produce an identical animation.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from ..canvas import ANCHOR_CENTER, Canvas
from ..fonts import FontProvider
from ..options import Options, clamp, get_int, get_str
from .base import Effect, EffectConfig, clamp_frames

POSITION_SEED = 42
MIN_WORDS = 1
MAX_WORDS = 20
PADDING_RATIO = 0.1
WORD_SIZE_RATIO = 0.15


@dataclass(frozen=True)
class FlashingTextConfig(EffectConfig):
    width: int = 600
    height: int = 400
    delay: float = 300
    frames: int = 30
    text: str = "SALE"
    words: int = 10

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "FlashingTextConfig":
        defaults = cls()
        return cls(
            **cls.common_options(options),
            frames=clamp_frames(get_int(options, "frames", defaults.frames)),
            text=get_str(options, "text", defaults.text),
            words=clamp(get_int(options, "words", defaults.words), MIN_WORDS, MAX_WORDS),
        )


@dataclass(frozen=True)
class WordPosition:
    x: float
    y: float
    size: float
    word: str


@dataclass(frozen=True)
class FlashingTextState:
    visible_index: int


def generate_word_positions(width: int, height: int, text: str, count: int) -> List[WordPosition]:
    """Scatter ``count`` copies of ``text`` inside a 10% padded frame, reproducibly."""
    rng = random.Random(POSITION_SEED)
    padding = height * PADDING_RATIO
    size = height * WORD_SIZE_RATIO
    positions: List[WordPosition] = []

    for _ in range(count):
        x = padding + rng.random() * (width - 2 * padding - size)
        y = padding + rng.random() * (height - 2 * padding - size)
        x = min(x, width - padding - size)
        y = min(y, height - padding - size)
        positions.append(WordPosition(x=x, y=y, size=size, word=text))

    return positions


class FlashingTextEffect(Effect[FlashingTextConfig, FlashingTextState]):
    name = "flashing-text"
    config_class = FlashingTextConfig

    def __init__(self, config: FlashingTextConfig, fonts: Optional[FontProvider] = None):
        super().__init__(config, fonts)
        self.positions = generate_word_positions(config.width, config.height, config.text, config.words)

    @property
    def frame_count(self) -> int:
        return self.config.frames

    def frame_state(self, index: int) -> FlashingTextState:
        return FlashingTextState(visible_index=index % len(self.positions))

    def draw(self, canvas: Canvas, state: FlashingTextState) -> None:
        position = self.positions[state.visible_index]
        canvas.draw_text(
            position.word,
            (position.x, position.y),
            self.face(position.size),
            self.config.colors.foreground,
            anchor=ANCHOR_CENTER,
        )
