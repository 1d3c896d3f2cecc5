from __future__ import annotations

import math
import re

DEFAULT_HEX_FALLBACK = "#3b82f6"

_HSL_TRIPLE_PATTERN = re.compile(r"^\d+\s+\d+%\s+\d+%$")
_HSL_SEARCH_PATTERN = re.compile(r"(\d+)\s+(\d+)%\s+(\d+)%")
_BARE_HEX_PATTERN = re.compile(r"^[0-9A-Fa-f]{6}$")
_HEX_PREFIX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def _parse_channel(value: str) -> float:
    match = _HEX_PREFIX_PATTERN.match(value)
    if match is None:
        return math.nan
    return int(match.group(0), 16) / 255


def _round_half_up(value: float) -> str:
    # Matches JavaScript Math.round so both apps emit identical tokens.
    if math.isnan(value):
        return "NaN"
    return str(math.floor(value + 0.5))


def hex_to_hsl(hex_color: str) -> str:
    """Convert ``#RRGGBB`` (or bare ``RRGGBB``) to an ``"H S% L%"`` triple.

    Malformed input is not rejected: channels that fail to parse become NaN
    and surface as ``NaN`` components in the returned string.
    """
    clean = hex_color[1:] if hex_color.startswith("#") else hex_color
    r = _parse_channel(clean[0:2])
    g = _parse_channel(clean[2:4])
    b = _parse_channel(clean[4:6])

    if any(math.isnan(channel) for channel in (r, g, b)):
        return f"0 {_round_half_up(math.nan)}% {_round_half_up(math.nan)}%"

    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return f"{_round_half_up(h * 360)} {_round_half_up(s * 100)}% {_round_half_up(lightness * 100)}%"


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(hsl: str) -> str:
    match = _HSL_SEARCH_PATTERN.search(hsl or "")
    if not match:
        return DEFAULT_HEX_FALLBACK

    h = int(match.group(1)) / 360
    s = int(match.group(2)) / 100
    lightness = int(match.group(3)) / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return "#" + "".join(f"{math.floor(channel * 255 + 0.5):02x}" for channel in (r, g, b))


def is_hsl_triple(color: str) -> bool:
    return _HSL_TRIPLE_PATTERN.fullmatch(color) is not None


def is_hex_color(color: str) -> bool:
    return color.startswith("#") or _BARE_HEX_PATTERN.fullmatch(color) is not None


def normalize_color_to_hsl(color: str) -> str:
    """Return ``color`` as an HSL triple when it is hex, otherwise unchanged."""
    if "%" in color or is_hsl_triple(color):
        return color
    if is_hex_color(color):
        return hex_to_hsl(color)
    return color


__all__ = [
    "DEFAULT_HEX_FALLBACK",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_hex_color",
    "is_hsl_triple",
    "normalize_color_to_hsl",
]
