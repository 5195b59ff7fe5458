"""
Effect registry.

``EFFECTS`` maps the canonical effect name to its :class:`Effect` subclass.
Lookups through :func:`get_effect` also accept underscore and camelCase
spellings (``led_banner``, ``ledBanner``).
"""

import re
from types import MappingProxyType
from typing import Mapping, Type

from ..errors import ConfigurationError
from .base import Effect, EffectConfig, clamp_frames
from .color_varying import ColorVaryingState, ColorVaryingTextConfig, ColorVaryingTextEffect
from .countdown import CountdownConfig, CountdownEffect, CountdownState
from .flashing_letters import FlashingLettersConfig, FlashingLettersEffect, FlashingLettersState
from .flashing_text import FlashingTextConfig, FlashingTextEffect, FlashingTextState
from .led_banner import BannerState, LedBannerConfig, LedBannerEffect
from .typing_text import TypingState, TypingTextConfig, TypingTextEffect

EFFECTS: Mapping[str, Type[Effect]] = MappingProxyType(
    {
        effect.name: effect
        for effect in (
            CountdownEffect,
            LedBannerEffect,
            FlashingLettersEffect,
            FlashingTextEffect,
            ColorVaryingTextEffect,
            TypingTextEffect,
        )
    }
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_effect_name(name: str) -> str:
    """``ledBanner`` / ``led_banner`` / ``LED-Banner`` -> ``led-banner``."""
    dashed = _CAMEL_BOUNDARY.sub("-", (name or "").strip())
    return dashed.replace("_", "-").replace(" ", "-").lower()


def get_effect(name: str) -> Type[Effect]:
    key = normalize_effect_name(name)
    try:
        return EFFECTS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown effect: {name}. Available effects: {', '.join(sorted(EFFECTS))}."
        ) from None


__all__ = [
    "EFFECTS",
    "BannerState",
    "ColorVaryingState",
    "ColorVaryingTextConfig",
    "ColorVaryingTextEffect",
    "CountdownConfig",
    "CountdownEffect",
    "CountdownState",
    "Effect",
    "EffectConfig",
    "FlashingLettersConfig",
    "FlashingLettersEffect",
    "FlashingLettersState",
    "FlashingTextConfig",
    "FlashingTextEffect",
    "FlashingTextState",
    "LedBannerConfig",
    "LedBannerEffect",
    "TypingState",
    "TypingTextConfig",
    "TypingTextEffect",
    "clamp_frames",
    "get_effect",
    "normalize_effect_name",
]
