"""
Font provider: resolves allowlisted font names to packaged TrueType files and
turns their bytes into sized Pillow font faces.
"""

import logging
import os
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from PIL import ImageFont

from .errors import FontLoadError

logger = logging.getLogger(__name__)

ASSET_DIR = Path(__file__).parent / "assets"
FONT_DIR_ENV = "GIF_EFFECTS_FONT_DIR"

DEFAULT_FONT = "lato"
ALLOWED_FONTS: Mapping[str, str] = MappingProxyType(
    {
        "lato": "Lato-Regular.ttf",
        "lato-light": "Lato-Light.ttf",
        "source-code-pro": "SourceCodePro-Bold.ttf",
    }
)


@dataclass(frozen=True)
class FontFace:
    """A font loaded at a fixed pixel size."""

    font: ImageFont.FreeTypeFont
    size: float

    def measure(self, text: str) -> Tuple[float, float]:
        """
        Measure ``text`` rendered with this face.

        Returns the advance width and the line height (ascent + descent), so
        the height does not depend on which glyphs the text contains.
        """
        ascent, descent = self.font.getmetrics()
        return float(self.font.getlength(text)), float(ascent + descent)


def load_glyph_face(font_bytes: bytes, size: float) -> FontFace:
    """Parse raw TrueType/OpenType bytes into a face of ``size`` pixels."""
    try:
        font = ImageFont.truetype(BytesIO(font_bytes), size)
    except (OSError, ValueError) as exc:
        raise FontLoadError(f"Failed to parse font: {exc}") from exc
    return FontFace(font=font, size=size)


def default_font_dir() -> Path:
    configured = os.environ.get(FONT_DIR_ENV)
    return Path(configured) if configured else ASSET_DIR


class FontProvider:
    """
    Loads font bytes by name, once per provider.

    A provider is meant to live for a single render. Faces of the same name
    and size are reused within that render.
    """

    def __init__(self, font_dir: Optional[Path] = None):
        self.font_dir = Path(font_dir) if font_dir is not None else default_font_dir()
        self._bytes: Dict[str, bytes] = {}
        self._faces: Dict[Tuple[str, float], FontFace] = {}

    @staticmethod
    def resolve(name: Optional[str]) -> str:
        """Map a requested font name onto the allowlist, substituting the default."""
        key = (name or "").strip().lower()
        if key in ALLOWED_FONTS:
            return key
        if key:
            logger.info("Font %r is not available, using %r", name, DEFAULT_FONT)
        return DEFAULT_FONT

    def load_bytes(self, name: Optional[str] = None) -> bytes:
        key = self.resolve(name)
        if key not in self._bytes:
            path = self.font_dir / ALLOWED_FONTS[key]
            try:
                self._bytes[key] = path.read_bytes()
            except OSError as exc:
                raise FontLoadError(f"Failed to read font file {path}: {exc}") from exc
        return self._bytes[key]

    def face(self, size: float, name: Optional[str] = None) -> FontFace:
        key = (self.resolve(name), float(size))
        if key not in self._faces:
            self._faces[key] = load_glyph_face(self.load_bytes(name), size)
        return self._faces[key]
