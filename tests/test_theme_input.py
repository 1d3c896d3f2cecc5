import logging

import pytest

from quinielas_branding.services.theme import (
    is_legacy_theme,
    parse_brand_theme,
    resolve_theme,
    upgrade_legacy_theme,
)


def _legacy_theme() -> dict:
    return {
        "colors": {
            "primary": "#FF0000",
            "secondary": "#00FF00",
            "background": "0 0% 100%",
            "foreground": "222 84% 5%",
        },
        "radius": "1rem",
        "logo": {"url": "https://cdn.example.com/logo.png", "alt": "Acme"},
    }


@pytest.mark.parametrize("raw", [None, {}, "theme", ["colors"]])
def test_parse_brand_theme_rejects_missing_blobs(raw) -> None:
    assert parse_brand_theme(raw) is None


def test_is_legacy_theme() -> None:
    assert is_legacy_theme({"colors": {"primary": "#000000"}})
    assert not is_legacy_theme({"colors": {"primary": "#000000"}, "tokens": {"radius": "1rem"}})
    assert not is_legacy_theme({"tokens": {"colors": {}}})


def test_upgrade_legacy_theme_builds_tokens_and_dark_set() -> None:
    upgraded = upgrade_legacy_theme(_legacy_theme())

    assert "colors" not in upgraded
    assert upgraded["logo"]["alt"] == "Acme"
    light = upgraded["tokens"]["colors"]
    assert light["primary"] == "#FF0000"
    assert light["accent"] == "#00FF00"
    assert light["primaryForeground"] == "0 0% 100%"
    assert upgraded["tokens"]["radius"] == "1rem"

    dark = upgraded["darkTokens"]["colors"]
    assert dark["primary"] == "0 100% 50%"
    assert dark["accent"] == "120 100% 50%"
    assert dark["background"] == "240 10% 3.9%"
    assert dark["foreground"] == "0 0% 98%"


def test_upgrade_legacy_theme_defaults_radius() -> None:
    upgraded = upgrade_legacy_theme({"colors": {"primary": "221 83% 53%"}})
    assert upgraded["tokens"]["radius"] == "0.5rem"
    assert upgraded["darkTokens"]["colors"]["primary"] == "221 83% 53%"
    assert "secondary" not in upgraded["tokens"]["colors"]


def test_parse_legacy_theme_resolves_through_current_shape() -> None:
    partial = parse_brand_theme(_legacy_theme())
    assert partial is not None
    assert partial.logo is not None
    assert partial.logo.url == "https://cdn.example.com/logo.png"

    resolved = resolve_theme(partial)
    assert resolved.tokens.colors.primary == "0 100% 50%"
    assert resolved.tokens.colors.accent == "120 100% 50%"
    assert resolved.tokens.radius == "1rem"
    assert resolved.dark_css_variables["--background"] == "240 10% 3.9%"


def test_parse_current_theme_keeps_hero_assets() -> None:
    partial = parse_brand_theme(
        {
            "name": "Acme",
            "tokens": {"colors": {"primary": "199 84% 55%"}},
            "heroAssets": {"kind": "video", "url": "https://cdn.example.com/hero.mp4"},
        }
    )
    assert partial is not None
    assert partial.hero_assets is not None
    assert partial.hero_assets.kind == "video"
    assert partial.hero_assets.loop is True

    resolved = resolve_theme(partial)
    assert resolved.hero_assets == partial.hero_assets


def test_parse_brand_theme_drops_invalid_payload(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert parse_brand_theme({"tokens": {"colors": "nope"}}) is None
    assert "Invalid brand theme payload" in caplog.text


def test_parse_brand_theme_rejects_unsafe_urls() -> None:
    raw = {"tokens": {"radius": "1rem"}, "heroAssets": {"kind": "image", "url": "javascript:alert(1)"}}
    assert parse_brand_theme(raw) is None
