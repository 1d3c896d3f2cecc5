import pytest

from quinielas_branding.utils.contrast import (
    check_contrast,
    generate_dark_theme,
    get_contrast_ratio,
    meets_wcag,
)


def test_contrast_ratio_black_on_white() -> None:
    assert get_contrast_ratio("0 0% 0%", "0 0% 100%") == pytest.approx(21.0)
    assert get_contrast_ratio("0 0% 100%", "0 0% 0%") == pytest.approx(21.0)


def test_contrast_ratio_same_color() -> None:
    assert get_contrast_ratio("217 91% 60%", "217 91% 60%") == pytest.approx(1.0)


def test_contrast_ratio_requires_integer_hsl() -> None:
    assert get_contrast_ratio("222.2 84% 4.9%", "0 0% 100%") is None
    assert get_contrast_ratio("#000000", "0 0% 100%") is None


def test_meets_wcag_thresholds() -> None:
    assert meets_wcag(4.5)
    assert not meets_wcag(4.4)
    assert meets_wcag(3.0, large_text=True)
    assert meets_wcag(7.0, "AAA")
    assert not meets_wcag(6.9, "AAA")
    assert meets_wcag(4.5, "AAA", large_text=True)


def test_check_contrast_reports() -> None:
    strong = check_contrast("0 0% 0%", "0 0% 100%")
    assert strong.meets_aa and strong.meets_aaa
    assert strong.warning is None

    medium = check_contrast("0 0% 40%", "0 0% 100%")
    assert medium.meets_aa
    assert not medium.meets_aaa
    assert "Meets AA but not AAA" in medium.warning

    weak = check_contrast("0 0% 90%", "0 0% 100%")
    assert not weak.meets_aa
    assert weak.warning.startswith("Low contrast")

    unknown = check_contrast("red", "0 0% 100%")
    assert unknown.ratio is None
    assert unknown.warning == "Unable to calculate contrast ratio"


def test_generate_dark_theme() -> None:
    dark = generate_dark_theme(
        {
            "background": "0 0% 100%",
            "foreground": "222 84% 5%",
            "cardForeground": "222 84% 5%",
            "primary": "217 91% 60%",
            "border": "214 32% 91%",
            "destructive": "0 84% 60%",
            "ring": "221.2 83.2% 53.3%",
        }
    )
    assert dark["background"] == "0 0% 5%"
    assert dark["foreground"] == "222 40% 98%"
    assert dark["cardForeground"] == "222 40% 98%"
    assert dark["primary"] == "217 91% 75%"
    assert dark["border"] == "214 22% 25%"
    assert dark["destructive"] == "0 84% 60%"
    assert dark["ring"] == "221.2 83.2% 53.3%"


def test_generate_dark_theme_lightens_every_foreground_key() -> None:
    light = {
        "primaryForeground": "210 40% 98%",
        "popoverForeground": "222 84% 5%",
        "mutedForeground": "215 16% 47%",
        "card_foreground": "222 84% 5%",
        "card": "0 0% 100%",
    }
    dark = generate_dark_theme(light)
    assert dark["primaryForeground"] == "210 40% 92%"
    assert dark["popoverForeground"] == "222 40% 98%"
    assert dark["mutedForeground"] == "215 16% 98%"
    assert dark["card_foreground"] == "222 40% 98%"
    assert dark["card"] == "0 0% 5%"
