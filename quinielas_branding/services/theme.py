from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from ..schemas.theme import (
    BrandTheme,
    PartialBrandTheme,
    PartialThemeColors,
    PartialThemeTokens,
    ThemeColors,
    ThemeTokens,
    Typography,
)
from ..utils.color import hex_to_hsl, normalize_color_to_hsl

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "Default Theme"
DEFAULT_THEME_SLUG = "default"
DEFAULT_FONT = "Inter, system-ui, sans-serif"

DEFAULT_TOKENS = ThemeTokens(
    colors=ThemeColors(
        background="0 0% 100%",
        foreground="222.2 84% 4.9%",
        primary="221.2 83.2% 53.3%",
        primary_foreground="210 40% 98%",
        secondary="210 40% 96.1%",
        secondary_foreground="222.2 47.4% 11.2%",
        accent="210 40% 96.1%",
        accent_foreground="222.2 47.4% 11.2%",
        muted="210 40% 96.1%",
        muted_foreground="215.4 16.3% 46.9%",
        destructive="0 84.2% 60.2%",
        destructive_foreground="210 40% 98%",
        border="214.3 31.8% 91.4%",
        ring="221.2 83.2% 53.3%",
        input="214.3 31.8% 91.4%",
        card="0 0% 100%",
        card_foreground="222.2 84% 4.9%",
        popover="0 0% 100%",
        popover_foreground="222.2 84% 4.9%",
    ),
    radius="0.5rem",
)

DEFAULT_DARK_TOKENS = ThemeTokens(
    colors=ThemeColors(
        background="222.2 84% 4.9%",
        foreground="210 40% 98%",
        primary="217.2 91.2% 59.8%",
        primary_foreground="222.2 47.4% 11.2%",
        secondary="217.2 32.6% 17.5%",
        secondary_foreground="210 40% 98%",
        accent="217.2 32.6% 17.5%",
        accent_foreground="210 40% 98%",
        muted="217.2 32.6% 17.5%",
        muted_foreground="215 20.2% 65.1%",
        destructive="0 62.8% 30.6%",
        destructive_foreground="210 40% 98%",
        border="217.2 32.6% 17.5%",
        ring="224.3 76.3% 48%",
        input="217.2 32.6% 17.5%",
        card="222.2 84% 4.9%",
        card_foreground="210 40% 98%",
        popover="222.2 84% 4.9%",
        popover_foreground="210 40% 98%",
    ),
    radius="0.5rem",
)

DEFAULT_TYPOGRAPHY = Typography(sans=DEFAULT_FONT, heading=DEFAULT_FONT)

CSS_VARIABLE_NAMES: Dict[str, str] = {
    name: "--" + name.replace("_", "-") for name in ThemeColors.model_fields
}
RADIUS_VARIABLE = "--radius"

LIGHT_SELECTOR = "html:root"
DARK_SELECTOR = "html.dark"

# Values written into the synthesized dark set of a legacy theme blob.
LEGACY_FOREGROUND = "0 0% 100%"
LEGACY_DARK_BACKGROUND = "240 10% 3.9%"
LEGACY_DARK_FOREGROUND = "0 0% 98%"
LEGACY_RADIUS = "0.5rem"

PartialThemeInput = Union[PartialBrandTheme, Mapping[str, Any], None]


def _coerce_partial(partial: PartialThemeInput) -> PartialBrandTheme:
    if partial is None:
        return PartialBrandTheme()
    if isinstance(partial, PartialBrandTheme):
        return partial
    try:
        return PartialBrandTheme.model_validate(partial)
    except ValidationError as exc:
        logger.warning("Invalid brand theme input; resolving defaults. Error: %s", exc)
        return PartialBrandTheme()


def _normalize_colors(colors: Optional[PartialThemeColors]) -> Dict[str, str]:
    if colors is None:
        return {}
    return {name: normalize_color_to_hsl(value) for name, value in colors.supplied().items()}


def _merge_dark_colors(colors: Optional[PartialThemeColors]) -> ThemeColors:
    # Lowest to highest: light defaults, dark defaults, brand dark overrides.
    merged = {
        **DEFAULT_TOKENS.colors.model_dump(),
        **DEFAULT_DARK_TOKENS.colors.model_dump(),
        **_normalize_colors(colors),
    }
    return ThemeColors(**merged)


def _dark_tokens_for(dark: Optional[PartialThemeTokens], light_radius: str) -> ThemeTokens:
    colors = dark.colors if dark is not None else None
    radius = dark.radius if dark is not None and dark.radius is not None else light_radius
    return ThemeTokens(colors=_merge_dark_colors(colors), radius=radius)


def tokens_to_css_variables(tokens: ThemeTokens) -> Dict[str, str]:
    variables = {CSS_VARIABLE_NAMES[name]: value for name, value in tokens.colors.model_dump().items()}
    variables[RADIUS_VARIABLE] = tokens.radius
    return variables


def resolve_theme(partial: PartialThemeInput = None) -> BrandTheme:
    """Merge a partial brand theme over the built-in light and dark defaults.

    Colors merge per field (hex input is converted to HSL), radius falls back
    to the default, and the dark radius falls back to the resolved light
    radius. Typography is taken whole from the brand or not at all.
    """
    brand = _coerce_partial(partial)
    brand_tokens = brand.tokens or PartialThemeTokens()

    light_colors = ThemeColors(
        **{**DEFAULT_TOKENS.colors.model_dump(), **_normalize_colors(brand_tokens.colors)}
    )
    radius = brand_tokens.radius if brand_tokens.radius is not None else DEFAULT_TOKENS.radius
    tokens = ThemeTokens(colors=light_colors, radius=radius)

    dark_tokens = _dark_tokens_for(brand.dark_tokens, tokens.radius)

    resolved = BrandTheme(
        name=brand.name if brand.name is not None else DEFAULT_THEME_NAME,
        slug=brand.slug if brand.slug is not None else DEFAULT_THEME_SLUG,
        tokens=tokens,
        dark_tokens=PartialThemeTokens(
            colors=PartialThemeColors(**dark_tokens.colors.model_dump()),
            radius=dark_tokens.radius,
        ),
        typography=brand.typography if brand.typography is not None else DEFAULT_TYPOGRAPHY,
        css_variables=tokens_to_css_variables(tokens),
        dark_css_variables=tokens_to_css_variables(dark_tokens),
        hero_assets=brand.hero_assets,
    )
    logger.debug("Resolved theme %s", resolved.slug)
    return resolved


def _declarations(variables: Mapping[str, Optional[str]]) -> list[str]:
    return [f"  {name}: {value};" for name, value in variables.items() if value is not None]


def apply_brand_theme(theme: Optional[BrandTheme]) -> str:
    """Render a theme as ``html:root`` and ``html.dark`` CSS blocks.

    The dark block is merged again from the raw token sources so a theme
    built by hand with only a few dark overrides still yields every
    variable. Values are emitted verbatim.
    """
    tokens = theme.tokens if theme is not None else DEFAULT_TOKENS
    typography = theme.typography if theme is not None else DEFAULT_TYPOGRAPHY
    dark_tokens = _dark_tokens_for(theme.dark_tokens if theme is not None else None, tokens.radius)

    light_lines = _declarations(tokens_to_css_variables(tokens))
    light_lines += _declarations({"--font-sans": typography.sans, "--font-heading": typography.heading})
    dark_lines = _declarations(tokens_to_css_variables(dark_tokens))

    return (
        f"{LIGHT_SELECTOR} {{\n"
        + "\n".join(light_lines)
        + "\n}\n\n"
        + f"{DARK_SELECTOR} {{\n"
        + "\n".join(dark_lines)
        + "\n}\n"
    )


def is_legacy_theme(raw: Mapping[str, Any]) -> bool:
    return bool(raw.get("colors")) and not raw.get("tokens")


def _legacy_dark_color(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("#"):
        return hex_to_hsl(value)
    return value


def _drop_missing(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def upgrade_legacy_theme(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite a flat ``{"colors": ...}`` blob into the nested tokens shape.

    A dark token set is synthesized from the brand colors: hex values are
    converted, foregrounds are forced to white and the background goes dark.
    """
    colors = raw.get("colors")
    if not isinstance(colors, Mapping):
        colors = {}
    primary = colors.get("primary")
    secondary = colors.get("secondary")
    accent = colors.get("accent") or secondary

    light = _drop_missing(
        {
            "primary": primary,
            "primaryForeground": colors.get("primaryForeground") or LEGACY_FOREGROUND,
            "secondary": secondary,
            "secondaryForeground": colors.get("secondaryForeground") or LEGACY_FOREGROUND,
            "background": colors.get("background"),
            "foreground": colors.get("foreground"),
            "accent": accent,
            "accentForeground": colors.get("accentForeground") or LEGACY_FOREGROUND,
        }
    )
    dark = _drop_missing(
        {
            "primary": _legacy_dark_color(primary),
            "primaryForeground": LEGACY_FOREGROUND,
            "secondary": _legacy_dark_color(secondary),
            "secondaryForeground": LEGACY_FOREGROUND,
            "accent": _legacy_dark_color(accent),
            "accentForeground": LEGACY_FOREGROUND,
            "background": LEGACY_DARK_BACKGROUND,
            "foreground": LEGACY_DARK_FOREGROUND,
        }
    )

    upgraded = {key: value for key, value in raw.items() if key != "colors"}
    upgraded["tokens"] = {"colors": light, "radius": raw.get("radius") or LEGACY_RADIUS}
    upgraded["darkTokens"] = {"colors": dark}
    return upgraded


def parse_brand_theme(raw: Any) -> Optional[PartialBrandTheme]:
    """Load a persisted theme blob into the current schema.

    Returns None for a missing or unusable blob so callers render defaults.
    """
    if not isinstance(raw, Mapping) or not raw:
        return None
    payload: Mapping[str, Any] = raw
    if is_legacy_theme(payload):
        payload = upgrade_legacy_theme(payload)
    try:
        return PartialBrandTheme.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Invalid brand theme payload; falling back to defaults. Error: %s", exc)
        return None


__all__ = [
    "CSS_VARIABLE_NAMES",
    "DEFAULT_DARK_TOKENS",
    "DEFAULT_FONT",
    "DEFAULT_TOKENS",
    "DEFAULT_TYPOGRAPHY",
    "apply_brand_theme",
    "is_legacy_theme",
    "parse_brand_theme",
    "resolve_theme",
    "tokens_to_css_variables",
    "upgrade_legacy_theme",
]
