"""
Common shape of an effect.

An effect is a frozen configuration record plus an :class:`Effect` object
built from it once per render. The effect precomputes everything that does
not change between frames (fonts, layout, tiled text, word positions) and
then answers three questions per frame index: what state to show, which
color pair to use and how to draw it.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, Tuple, Type, TypeVar

from ..canvas import Canvas
from ..colors import ColorPair, parse_hex
from ..fonts import FontFace, FontProvider
from ..options import Options, clamp, clamp_dimension, get_float, get_int, get_str

DEFAULT_BACKGROUND = "#000000"
DEFAULT_COLOR = "#ffffff"
MIN_FRAMES = 1
MAX_FRAMES = 60
# The GIF delay field is an unsigned 16-bit count of 1/100 s.
MAX_DELAY_MS = 655350.0
# Smallest face FreeType accepts; derived sizes on tiny canvases round up to it.
MIN_FACE_SIZE = 1.0

ConfigT = TypeVar("ConfigT", bound="EffectConfig")
StateT = TypeVar("StateT")


@dataclass(frozen=True)
class EffectConfig:
    """Options shared by every effect, already defaulted and clamped."""

    background: str = DEFAULT_BACKGROUND
    color: str = DEFAULT_COLOR
    width: int = 400
    height: int = 200
    delay: float = 100
    font: str = ""

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def colors(self) -> ColorPair:
        return ColorPair(background=parse_hex(self.background), foreground=parse_hex(self.color))

    @classmethod
    def common_options(cls, options: Optional[Options]) -> dict:
        """Read the options every effect understands, using this class's defaults."""
        defaults = cls()
        return {
            "background": get_str(options, "background", defaults.background),
            "color": get_str(options, "color", defaults.color),
            "width": clamp_dimension(get_int(options, "width", defaults.width)),
            "height": clamp_dimension(get_int(options, "height", defaults.height)),
            "delay": clamp(get_float(options, "delay", defaults.delay), 0.0, MAX_DELAY_MS),
            "font": get_str(options, "font", defaults.font),
        }

    @classmethod
    def from_options(cls: Type[ConfigT], options: Optional[Options] = None) -> ConfigT:
        return cls(**cls.common_options(options))


def clamp_frames(frames: int, maximum: int = MAX_FRAMES) -> int:
    """Clamp a requested frame count; anything below the minimum becomes one."""
    return clamp(frames, MIN_FRAMES, maximum)


class Effect(Generic[ConfigT, StateT]):
    """Base class for the per-render side of an effect."""

    name: ClassVar[str] = ""
    config_class: ClassVar[Type[EffectConfig]] = EffectConfig

    def __init__(self, config: ConfigT, fonts: Optional[FontProvider] = None):
        self.config = config
        self.fonts = fonts if fonts is not None else FontProvider()

    @classmethod
    def from_options(cls, options: Optional[Options] = None, fonts: Optional[FontProvider] = None):
        return cls(cls.config_class.from_options(options), fonts=fonts)

    def face(self, size: float) -> FontFace:
        return self.fonts.face(max(size, MIN_FACE_SIZE), self.config.font)

    def measure_at(self, text: str, size: float) -> Tuple[float, float]:
        return self.face(size).measure(text)

    @property
    def size(self) -> Tuple[int, int]:
        return self.config.size

    @property
    def frame_count(self) -> int:
        raise NotImplementedError

    @property
    def delay(self) -> float:
        """Delay between frames in milliseconds."""
        return self.config.delay

    def frame_state(self, index: int) -> StateT:
        raise NotImplementedError

    def colors(self, state: StateT) -> ColorPair:
        return self.config.colors

    def draw(self, canvas: Canvas, state: StateT) -> None:
        raise NotImplementedError
