"""
Two-color palettes and quantization of drawn frames onto them.

Palette layout (256 entries):
    0       background
    1       foreground
    2..255  254-step gradient from background to foreground, endpoints included

Antialiased text and the dimmed countdown elements are blends of the frame's
two colors, so every drawn pixel lands on (or within rounding of) one of the
gradient entries. Frames therefore never need error diffusion.
"""

from typing import List, Sequence

from PIL import Image

from .colors import Color, ColorPair, gradient

PALETTE_SIZE = 256
GRADIENT_STEPS = PALETTE_SIZE - 2


def build_palette(colors: ColorPair) -> List[Color]:
    palette = [colors.background, colors.foreground]
    palette.extend(gradient(colors.background, colors.foreground, GRADIENT_STEPS))
    return palette


def palette_image(palette: Sequence[Color]) -> Image.Image:
    """Wrap a palette in the 1x1 "P" image Pillow's ``quantize`` expects."""
    flat: List[int] = []
    for color in palette:
        flat.extend(color)
    flat.extend([0] * (PALETTE_SIZE * 3 - len(flat)))

    holder = Image.new("P", (1, 1))
    holder.putpalette(flat)
    return holder


def quantize(image: Image.Image, palette: Sequence[Color]) -> Image.Image:
    """Map an RGB frame onto ``palette`` without dithering."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return image.quantize(palette=palette_image(palette), dither=Image.Dither.NONE)
