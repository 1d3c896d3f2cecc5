import pytest

from quinielas_branding.config import refresh_settings
from quinielas_branding.services.theme import apply_brand_theme
from quinielas_branding.services.theme_session import ThemeSession, ThemeSessionClosed


def test_apply_without_theme_uses_defaults() -> None:
    session = ThemeSession("brand-theme-dynamic")
    resolved = session.apply(None)

    assert resolved.slug == "default"
    assert session.text == apply_brand_theme(None)
    assert session.render().startswith('<style id="brand-theme-dynamic">\nhtml:root {')
    assert session.render().endswith("</style>")


def test_last_applied_theme_wins() -> None:
    session = ThemeSession("brand-theme-dynamic")
    session.apply({"tokens": {"colors": {"primary": "#FF0000"}}})
    session.apply({"colors": {"primary": "#0000FF", "secondary": "#00FF00"}})

    assert "--primary: 240 100% 50%;" in session.text
    assert "--primary: 0 100% 50%;" not in session.text
    assert session.theme is not None
    assert session.theme.tokens.colors.primary == "240 100% 50%"


def test_close_tears_down_style() -> None:
    session = ThemeSession("brand-theme-dynamic")
    session.set_text("html:root { --radius: 1rem; }")
    session.close()

    assert session.closed
    assert session.render() == ""
    with pytest.raises(ThemeSessionClosed):
        session.set_text("html:root {}")


def test_context_manager_closes_session() -> None:
    with ThemeSession("brand-theme-dynamic") as session:
        session.apply(None)
        assert session.text
    assert session.closed
    assert session.text == ""


def test_style_id_defaults_to_settings(monkeypatch) -> None:
    monkeypatch.setenv("THEME_STYLE_ID", "brand-theme")
    refresh_settings()
    try:
        assert ThemeSession().style_id == "brand-theme"
    finally:
        monkeypatch.delenv("THEME_STYLE_ID")
        refresh_settings()


def test_render_keeps_markup_in_font_values_inside_the_style_element() -> None:
    session = ThemeSession("brand-theme-dynamic")
    session.apply({"typography": {"sans": "x</style><script>alert(1)</script>", "heading": "Inter"}})

    rendered = session.render()

    assert rendered.count("</style>") == 1
    assert rendered.endswith("</style>")
    assert "<script>" in rendered
    assert "</script>" not in rendered
