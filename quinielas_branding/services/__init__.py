from .brand import BrandService, merge_theme_patch
from .theme import (
    DEFAULT_DARK_TOKENS,
    DEFAULT_TOKENS,
    DEFAULT_TYPOGRAPHY,
    apply_brand_theme,
    parse_brand_theme,
    resolve_theme,
    tokens_to_css_variables,
)
from .theme_session import ThemeSession, ThemeSessionClosed

__all__ = [
    "BrandService",
    "merge_theme_patch",
    "DEFAULT_DARK_TOKENS",
    "DEFAULT_TOKENS",
    "DEFAULT_TYPOGRAPHY",
    "apply_brand_theme",
    "parse_brand_theme",
    "resolve_theme",
    "tokens_to_css_variables",
    "ThemeSession",
    "ThemeSessionClosed",
]
