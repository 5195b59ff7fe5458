"""
Raster canvas used to draw a single frame.

A canvas is created per frame, pre-cleared to the background color, drawn on
with the frame's two colors (and blends between them) and then handed to the
quantizer. Angles are in degrees, clockwise from 3 o'clock, matching
``ImageDraw.arc``.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from .colors import Color
from .fonts import FontFace

Point = Tuple[float, float]

# Pillow text anchors used by the effects.
ANCHOR_CENTER = "mm"
ANCHOR_LEFT_BASELINE = "ls"
ANCHOR_LEFT_MIDDLE = "lm"


class Canvas:
    """Fixed-size RGB drawing surface for one frame."""

    def __init__(self, size: Tuple[int, int], background: Color):
        self.size = size
        self.background = background
        self.image = Image.new("RGB", size, color=background)
        self._draw = ImageDraw.Draw(self.image)

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def clear(self, color: Optional[Color] = None) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=color or self.background)

    def measure(self, text: str, face: FontFace) -> Tuple[float, float]:
        return face.measure(text)

    def draw_text(
        self,
        text: str,
        position: Point,
        face: FontFace,
        fill: Color,
        anchor: str = ANCHOR_CENTER,
    ) -> None:
        if not text:
            return
        self._draw.text(position, text, font=face.font, fill=fill, anchor=anchor)

    def draw_arc(
        self,
        center: Point,
        radius: float,
        start: float,
        end: float,
        fill: Color,
        width: int = 1,
    ) -> None:
        """
        Stroke an arc of ``width`` pixels centered on the circle of ``radius``.

        ``end - start >= 360`` draws the full ring; an empty sweep draws
        nothing.
        """
        if end <= start:
            return
        x, y = center
        outer = radius + width / 2
        bbox = (x - outer, y - outer, x + outer, y + outer)
        if end - start >= 360:
            self._draw.ellipse(bbox, outline=fill, width=width)
        else:
            self._draw.arc(bbox, start, end, fill=fill, width=width)

    def draw_line(self, start: Point, end: Point, fill: Color, width: int = 1) -> None:
        self._draw.line((start, end), fill=fill, width=width)

    def draw_dot(self, center: Point, radius: float, fill: Color) -> None:
        x, y = center
        self._draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)
