from .branding import (
    BrandResponse,
    ContrastRequest,
    ContrastResponse,
    ThemeUpdate,
    ThemeUpdateRequest,
)
from .theme import (
    BrandTheme,
    DarkThemeTokens,
    HeroAssets,
    LogoAsset,
    PartialBrandTheme,
    ThemeColors,
    ThemeTokens,
    Typography,
)

__all__ = [
    "BrandResponse",
    "ContrastRequest",
    "ContrastResponse",
    "ThemeUpdate",
    "ThemeUpdateRequest",
    "BrandTheme",
    "DarkThemeTokens",
    "HeroAssets",
    "LogoAsset",
    "PartialBrandTheme",
    "ThemeColors",
    "ThemeTokens",
    "Typography",
]
