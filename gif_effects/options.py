"""
Option parsing and defaulting shared by every effect.

Options arrive either as native Python values (library callers, JSON bodies)
or as strings (query strings, ``--set KEY=VALUE`` on the command line). Empty
or unparsable numbers fall back to the default instead of failing, and
numeric ranges are clamped by the effects, never rejected.
"""

import math
from typing import Any, Mapping, Optional

Options = Mapping[str, Any]

# Alternative spellings accepted for an option name.
ALIASES = {
    "background": ("bg",),
}

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"0", "false", "no", "off"})

MAX_DIMENSION = 2000


def _lookup(options: Optional[Options], key: str) -> Any:
    if not options:
        return None
    for name in (key, *ALIASES.get(key, ())):
        value = options.get(name)
        if value is not None and value != "":
            return value
    return None


def get_str(options: Optional[Options], key: str, default: str) -> str:
    value = _lookup(options, key)
    if value is None:
        return default
    return str(value)


def get_float(options: Optional[Options], key: str, default: float) -> float:
    value = _lookup(options, key)
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def get_int(options: Optional[Options], key: str, default: int) -> int:
    """Read an integer option; fractional values are truncated toward zero."""
    number = get_float(options, key, float(default))
    return int(number)


def get_bool(options: Optional[Options], key: str, default: bool) -> bool:
    value = _lookup(options, key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    return default


def clamp(value, minimum, maximum):
    """Clamp ``value`` to the inclusive range ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def clamp_dimension(value: int) -> int:
    return clamp(value, 1, MAX_DIMENSION)


def clamp_padding(padding: int, width: int, height: int) -> int:
    return clamp(padding, 0, min(width, height) // 2)
