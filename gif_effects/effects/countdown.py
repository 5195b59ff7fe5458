"""
Countdown timer: one frame per second until a target instant.

Kinds:
    basic           "1d 2h 3m 4s" centered (any unrecognized kind)
    rounded         progress ring per unit
    rounded-ticks   ring of radial ticks per unit
    rounded-dots    ring of dots per unit
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..canvas import Canvas, Point
from ..colors import blend_by_alpha
from ..errors import ConfigurationError
from ..fonts import FontProvider
from ..options import Options, clamp, get_float, get_int, get_str
from ..translations import translate
from .base import Effect, EffectConfig, clamp_frames

logger = logging.getLogger(__name__)

DATE_FORMATS = ("%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ")
DEFAULT_LEAD = timedelta(days=10)
# Real-world UTC offsets, in hours.
MIN_GMT = -12.0
MAX_GMT = 14.0
FRAME_INTERVAL = timedelta(seconds=1)

KIND_BASIC = "basic"
KIND_ROUNDED = "rounded"
KIND_TICKS = "rounded-ticks"
KIND_DOTS = "rounded-dots"
ROUNDED_KINDS = frozenset({KIND_ROUNDED, KIND_TICKS, KIND_DOTS})

DIM_ALPHA = 50
RING_RADIUS = 65.0
RING_SPACING = 160.0
RING_WIDTH = 10
TICK_WIDTH = 3
MARK_OFFSET = 5.0
DOT_RADIUS = 3.0
BASIC_FONT_SIZE = 60
VALUE_FONT_SIZE = 40
LABEL_FONT_SIZE = 16

# (label key, full-scale value) for each ring, left to right.
UNITS = (("days", 31), ("hours", 24), ("minutes", 60), ("seconds", 60))


def format_date(moment: datetime) -> str:
    """Format an instant the way ``parse_date`` expects it."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_date(text: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS.mmmZ`` into an aware UTC datetime."""
    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(text.strip(), date_format).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    raise ConfigurationError(
        f"Invalid date: {text}. Use YYYY-MM-DDTHH:MM:SS.mmmZ (e.g., 2030-01-01T00:00:00.000Z)."
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CountdownConfig(EffectConfig):
    width: int = 700
    height: int = 200
    delay: float = 1000
    frames: int = 10
    date: str = field(default_factory=lambda: format_date(_utcnow() + DEFAULT_LEAD))
    gmt: float = 0
    kind: str = KIND_ROUNDED
    lang: str = "en"

    @classmethod
    def from_options(cls, options: Optional[Options] = None) -> "CountdownConfig":
        defaults = cls()
        common = cls.common_options(options)
        # One frame per second of countdown; the delay is not configurable.
        common["delay"] = defaults.delay
        return cls(
            **common,
            frames=clamp_frames(get_int(options, "frames", defaults.frames)),
            date=get_str(options, "date", defaults.date),
            gmt=clamp(get_float(options, "gmt", defaults.gmt), MIN_GMT, MAX_GMT),
            kind=get_str(options, "kind", defaults.kind).strip().lower(),
            lang=get_str(options, "lang", defaults.lang).strip().lower(),
        )


@dataclass(frozen=True)
class CountdownState:
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_timedelta(cls, remaining: timedelta) -> "CountdownState":
        total = max(0, math.floor(remaining.total_seconds()))
        days, total = divmod(total, 86400)
        hours, total = divmod(total, 3600)
        minutes, seconds = divmod(total, 60)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @property
    def text(self) -> str:
        return f"{self.days}d {self.hours}h {self.minutes}m {self.seconds}s"

    def values(self):
        return (self.days, self.hours, self.minutes, self.seconds)


class CountdownEffect(Effect[CountdownConfig, CountdownState]):
    name = "countdown"
    config_class = CountdownConfig

    def __init__(
        self,
        config: CountdownConfig,
        fonts: Optional[FontProvider] = None,
        now: Optional[datetime] = None,
    ):
        super().__init__(config, fonts)
        self.now = now if now is not None else _utcnow()
        target = parse_date(config.date)
        # Remaining time runs to the date shifted by the GMT offset; whether
        # the date has passed is decided on the unshifted instant.
        self.target = target + timedelta(hours=config.gmt)
        self._frames = config.frames

        if target <= self.now:
            logger.info("Countdown target %s already passed, rendering a single frame", config.date)
            self.target = self.now
            self._frames = 1

    @property
    def frame_count(self) -> int:
        return self._frames

    def frame_state(self, index: int) -> CountdownState:
        instant = self.now + index * FRAME_INTERVAL
        return CountdownState.from_timedelta(self.target - instant)

    @property
    def dim_color(self):
        colors = self.config.colors
        return blend_by_alpha(colors.foreground, colors.background, DIM_ALPHA)

    def label(self, key: str) -> str:
        return translate(key, self.config.lang).upper()

    def draw(self, canvas: Canvas, state: CountdownState) -> None:
        if self.config.kind in ROUNDED_KINDS:
            self.draw_rounded(canvas, state)
        else:
            self.draw_basic(canvas, state)

    def draw_basic(self, canvas: Canvas, state: CountdownState) -> None:
        canvas.draw_text(
            state.text,
            (canvas.width / 2, canvas.height / 2),
            self.face(BASIC_FONT_SIZE),
            self.config.colors.foreground,
        )

    def draw_rounded(self, canvas: Canvas, state: CountdownState) -> None:
        start_x = canvas.width / 2 - 1.5 * RING_SPACING
        y = canvas.height / 2

        for position, ((key, maximum), value) in enumerate(zip(UNITS, state.values())):
            center = (start_x + position * RING_SPACING, y)
            if self.config.kind == KIND_ROUNDED:
                self.draw_ring(canvas, center, value, maximum)
            else:
                self.draw_marks(canvas, center, value, maximum)
            self.draw_unit_text(canvas, center, value, self.label(key))

    def draw_ring(self, canvas: Canvas, center: Point, value: int, maximum: int) -> None:
        canvas.draw_arc(center, RING_RADIUS, 0, 360, self.dim_color, RING_WIDTH)

        start = -90.0
        end = min(start + value / maximum * 360, 360.0)
        canvas.draw_arc(center, RING_RADIUS, start, end, self.config.colors.foreground, RING_WIDTH)

    def draw_marks(self, canvas: Canvas, center: Point, value: int, maximum: int) -> None:
        x, y = center
        foreground = self.config.colors.foreground
        dim = self.dim_color

        for index in range(maximum):
            angle = -math.pi / 2 + index * 2 * math.pi / maximum
            fill = foreground if index <= value else dim
            cos, sin = math.cos(angle), math.sin(angle)

            if self.config.kind == KIND_DOTS:
                outer = RING_RADIUS + MARK_OFFSET
                canvas.draw_dot((x + outer * cos, y + outer * sin), DOT_RADIUS, fill)
            else:
                inner = RING_RADIUS - MARK_OFFSET
                outer = RING_RADIUS + MARK_OFFSET
                canvas.draw_line(
                    (x + inner * cos, y + inner * sin),
                    (x + outer * cos, y + outer * sin),
                    fill,
                    TICK_WIDTH,
                )

    def draw_unit_text(self, canvas: Canvas, center: Point, value: int, label: str) -> None:
        x, y = center
        foreground = self.config.colors.foreground
        canvas.draw_text(str(value), (x, y - 10), self.face(VALUE_FONT_SIZE), foreground)
        canvas.draw_text(label, (x, y + 25), self.face(LABEL_FONT_SIZE), foreground)
