from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional, Tuple

_HSL_PATTERN = re.compile(r"^(\d+)\s+(\d+)%\s+(\d+)%$")

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


@dataclass(frozen=True)
class ContrastReport:
    ratio: Optional[float]
    meets_aa: bool
    meets_aaa: bool
    warning: Optional[str] = None


def _parse_hsl(value: str) -> Optional[Tuple[int, int, int]]:
    match = _HSL_PATTERN.match(value or "")
    if not match:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def _hsl_to_rgb(h: int, s: int, lightness: int) -> Tuple[int, int, int]:
    s_norm = s / 100
    l_norm = lightness / 100

    c = (1 - abs(2 * l_norm - 1)) * s_norm
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l_norm - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    elif 300 <= h < 360:
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return (
        math.floor((r + m) * 255 + 0.5),
        math.floor((g + m) * 255 + 0.5),
        math.floor((b + m) * 255 + 0.5),
    )


def _linearize(channel: int) -> float:
    srgb = channel / 255
    if srgb <= 0.03928:
        return srgb / 12.92
    return ((srgb + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def get_contrast_ratio(color1: str, color2: str) -> Optional[float]:
    """WCAG contrast ratio between two integer HSL triples, or None if either fails to parse."""
    hsl1 = _parse_hsl(color1)
    hsl2 = _parse_hsl(color2)
    if hsl1 is None or hsl2 is None:
        return None

    lum1 = relative_luminance(*_hsl_to_rgb(*hsl1))
    lum2 = relative_luminance(*_hsl_to_rgb(*hsl2))
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag(ratio: float, level: Literal["AA", "AAA"] = "AA", large_text: bool = False) -> bool:
    if level == "AAA":
        return ratio >= (AAA_LARGE if large_text else AAA_NORMAL)
    return ratio >= (AA_LARGE if large_text else AA_NORMAL)


def check_contrast(foreground: str, background: str) -> ContrastReport:
    ratio = get_contrast_ratio(foreground, background)
    if ratio is None:
        return ContrastReport(
            ratio=None,
            meets_aa=False,
            meets_aaa=False,
            warning="Unable to calculate contrast ratio",
        )

    meets_aa = meets_wcag(ratio, "AA")
    meets_aaa = meets_wcag(ratio, "AAA")
    warning = None
    if not meets_aa:
        warning = f"Low contrast ({ratio:.2f}:1). WCAG AA requires at least 4.5:1 for normal text."
    elif not meets_aaa:
        warning = f"Contrast is {ratio:.2f}:1. Meets AA but not AAA standard."
    return ContrastReport(ratio=ratio, meets_aa=meets_aa, meets_aaa=meets_aaa, warning=warning)


def generate_dark_theme(light_colors: Mapping[str, str]) -> Dict[str, str]:
    """Derive dark-mode colors from light ones by inverting lightness.

    Keys are matched case-insensitively so both ``card_foreground`` and
    ``cardForeground`` style names work. Values that are not integer HSL
    triples are copied unchanged.
    """
    dark: Dict[str, str] = {}
    for key, value in light_colors.items():
        hsl = _parse_hsl(value)
        if hsl is None:
            dark[key] = value
            continue
        h, s, lightness = hsl
        name = key.lower()
        if "foreground" in name:
            dark[key] = f"{h} {min(40, s)}% {min(98, 100 - lightness + 90)}%"
        elif "background" in name or "card" in name or name == "popover":
            dark[key] = f"{h} {s}% {max(5, 100 - lightness)}%"
        elif name in {"primary", "accent"}:
            dark[key] = f"{h} {s}% {min(75, lightness + 15)}%"
        elif "muted" in name or name in {"border", "input"}:
            dark[key] = f"{h} {max(20, s - 10)}% 25%"
        else:
            dark[key] = value
    return dark


__all__ = [
    "ContrastReport",
    "check_contrast",
    "generate_dark_theme",
    "get_contrast_ratio",
    "meets_wcag",
    "relative_luminance",
]
