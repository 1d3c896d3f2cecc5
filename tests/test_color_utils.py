import re

import pytest

from quinielas_branding.utils.color import hex_to_hsl, hsl_to_hex, normalize_color_to_hsl

_HSL_RE = re.compile(r"^(\d+) (\d+)% (\d+)%$")


def test_hex_to_hsl_with_and_without_hash() -> None:
    assert hex_to_hsl("#0062FF") == "217 100% 50%"
    assert hex_to_hsl("0062FF") == "217 100% 50%"


@pytest.mark.parametrize(
    ("hex_value", "expected"),
    [
        ("#FF0000", "0 100% 50%"),
        ("#00FF00", "120 100% 50%"),
        ("#0000FF", "240 100% 50%"),
        ("#FFFFFF", "0 0% 100%"),
        ("#000000", "0 0% 0%"),
        ("#808080", "0 0% 50%"),
    ],
)
def test_hex_to_hsl_known_colors(hex_value: str, expected: str) -> None:
    assert hex_to_hsl(hex_value) == expected


def test_hex_to_hsl_malformed_input_carries_nan() -> None:
    assert hex_to_hsl("#zzzzzz") == "0 NaN% NaN%"
    assert hex_to_hsl("#abc") == "0 NaN% NaN%"


@pytest.mark.parametrize("hex_value", ["#1E3A8A", "#F97316", "#14B8A6", "ec4899", "#7C3AED", "#E7E5E4"])
def test_normalize_hex_produces_hsl_triple(hex_value: str) -> None:
    result = normalize_color_to_hsl(hex_value)
    match = _HSL_RE.match(result)
    assert match is not None
    h, s, lightness = (int(part) for part in match.groups())
    assert 0 <= h < 360
    assert 0 <= s <= 100
    assert 0 <= lightness <= 100


@pytest.mark.parametrize("value", ["199 84% 55%", "221.2 83.2% 53.3%", "0 0% 100%"])
def test_normalize_hsl_passthrough(value: str) -> None:
    assert normalize_color_to_hsl(value) == value


@pytest.mark.parametrize("value", ["red", "rgb(1, 2, 3)", "var(--brand)"])
def test_normalize_unknown_format_passthrough(value: str) -> None:
    assert normalize_color_to_hsl(value) == value


def test_hsl_to_hex() -> None:
    assert hsl_to_hex("0 100% 50%") == "#ff0000"
    assert hsl_to_hex("217 100% 50%") == "#0062ff"
    assert hsl_to_hex("0 0% 100%") == "#ffffff"


def test_hsl_to_hex_fallback_for_unparseable_input() -> None:
    assert hsl_to_hex("not a color") == "#3b82f6"


def test_hex_to_hsl_hue_rounds_up_to_360_near_red() -> None:
    # Half-up rounding of 359.76 degrees; matches the web apps' output.
    assert hex_to_hsl("#FF0001") == "360 100% 50%"
    assert normalize_color_to_hsl("FF0001") == "360 100% 50%"
