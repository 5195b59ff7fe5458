"""
Text layout: word splitting, greedy line wrapping and font-size autofit.

Measurement is injected as a callable so layout stays independent of the font
backend; the effects pass ``FontFace.measure`` bound to a provider.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

MIN_FONT_SIZE = 12.0
INITIAL_SIZE_RATIO = 0.5
SHRINK_FACTOR = 0.9
LINE_HEIGHT_RATIO = 1.2

MeasureWidth = Callable[[str], float]
MeasureAtSize = Callable[[str, float], Tuple[float, float]]


@dataclass(frozen=True)
class Box:
    width: float
    height: float


@dataclass(frozen=True)
class Layout:
    """Lines of text and the font size they were fitted at."""

    lines: Tuple[str, ...]
    font_size: float

    @property
    def line_height(self) -> float:
        return self.font_size * LINE_HEIGHT_RATIO

    @property
    def total_height(self) -> float:
        return self.line_height * len(self.lines)


def split_words(text: str) -> List[str]:
    """Split on any Unicode whitespace, dropping empty tokens."""
    return text.split()


def wrap_lines(words: Sequence[str], measure_width: MeasureWidth, max_width: float) -> List[str]:
    """
    Greedily fill lines with words.

    A word joins the current line while the joined line still measures at
    most ``max_width``. Otherwise the line is flushed and the word starts a
    new one, even when the word alone is wider than ``max_width``; words are
    never broken.
    """
    lines: List[str] = []
    current = ""

    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure_width(candidate) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = word

    if current:
        lines.append(current)
    return lines


def initial_font_size(box: Box) -> float:
    return max(box.height * INITIAL_SIZE_RATIO, MIN_FONT_SIZE)


def _shrink(font_size: float) -> float:
    return max(font_size * SHRINK_FACTOR, MIN_FONT_SIZE)


def autofit_font_size(
    text: str,
    box: Box,
    padding: float,
    measure: MeasureAtSize,
) -> Layout:
    """
    Find the largest font size at which the wrapped text fits inside the
    padded box.

    Starts at half the box height and shrinks by 10% per attempt. The size
    never drops below ``MIN_FONT_SIZE``; once it reaches the floor, that wrap
    is accepted even if it still overflows.
    """
    words = split_words(text)
    available_width = box.width - 2 * padding
    available_height = box.height - 2 * padding
    font_size = initial_font_size(box)

    while True:
        size = font_size
        lines = wrap_lines(words, lambda line: measure(line, size)[0], available_width)
        layout = Layout(lines=tuple(lines), font_size=size)
        if layout.total_height <= available_height or size <= MIN_FONT_SIZE:
            return layout
        font_size = _shrink(size)


def autofit_single_line(
    text: str,
    box: Box,
    padding: float,
    measure: MeasureAtSize,
    suffix: str = "|",
) -> float:
    """
    Same shrink loop as :func:`autofit_font_size` for one unwrapped line.

    ``text + suffix`` must fit the padded box in both directions; the suffix
    reserves room for the typing cursor.
    """
    candidate = text + suffix
    max_width = box.width - 2 * padding
    max_height = box.height - 2 * padding
    font_size = initial_font_size(box)

    while True:
        width, height = measure(candidate, font_size)
        if (width <= max_width and height <= max_height) or font_size <= MIN_FONT_SIZE:
            return font_size
        font_size = _shrink(font_size)
