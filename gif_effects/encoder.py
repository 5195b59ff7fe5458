"""
Animated GIF assembly from indexed frames.

Delays are kept in GIF units (hundredths of a second) on each frame and only
converted to Pillow's milliseconds when the file is written.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import List, Sequence, Tuple

from PIL import Image

DEFAULT_LOOP = 0
# Largest value the 16-bit GIF delay field holds.
MAX_DELAY = 65535


@dataclass(frozen=True)
class Frame:
    """One indexed frame and how long it is displayed, in 1/100 s."""

    image: Image.Image
    delay: int


@dataclass(frozen=True)
class Animation:
    frames: Tuple[Frame, ...]
    loop: int = DEFAULT_LOOP

    @property
    def size(self) -> Tuple[int, int]:
        return self.frames[0].image.size

    @property
    def delays(self) -> List[int]:
        return [frame.delay for frame in self.frames]

    def __len__(self) -> int:
        return len(self.frames)


def delay_from_milliseconds(milliseconds: float) -> int:
    """Convert a delay in milliseconds to GIF hundredths of a second."""
    return min(max(0, int(milliseconds / 10)), MAX_DELAY)


def encode_frames(frames: Sequence[Frame], loop: int = DEFAULT_LOOP) -> bytes:
    """
    Write ``frames`` as an animated GIF.

    Args:
        frames: Indexed ("P") frames in playback order, all the same size
        loop: Number of loops, 0 = forever

    Returns:
        The GIF as bytes
    """
    if not frames:
        raise ValueError("At least one frame is required to build an animation.")

    output = BytesIO()
    first_frame, *additional_frames = frames
    first_frame.image.save(
        output,
        format="GIF",
        save_all=True,
        append_images=[frame.image for frame in additional_frames],
        duration=[frame.delay * 10 for frame in frames],
        loop=loop,
        disposal=2,
    )
    return output.getvalue()


def encode_animation(animation: Animation) -> bytes:
    return encode_frames(animation.frames, loop=animation.loop)
