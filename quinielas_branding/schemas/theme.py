from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


def validate_safe_url(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return value
    lower = value.strip().lower()
    if not (lower.startswith("https://") or lower.startswith("http://")):
        raise ValueError("Only HTTP(S) URLs are allowed")
    return value.strip()


class ThemeModel(BaseModel):
    """Base for persisted theme blobs: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ThemeColors(ThemeModel):
    background: str
    foreground: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    accent: str
    accent_foreground: str
    muted: str
    muted_foreground: str
    destructive: str
    destructive_foreground: str
    border: str
    ring: str
    input: str
    card: str
    card_foreground: str
    popover: str
    popover_foreground: str

    model_config = ConfigDict(frozen=True)


class PartialThemeColors(ThemeModel):
    background: Optional[str] = None
    foreground: Optional[str] = None
    primary: Optional[str] = None
    primary_foreground: Optional[str] = None
    secondary: Optional[str] = None
    secondary_foreground: Optional[str] = None
    accent: Optional[str] = None
    accent_foreground: Optional[str] = None
    muted: Optional[str] = None
    muted_foreground: Optional[str] = None
    destructive: Optional[str] = None
    destructive_foreground: Optional[str] = None
    border: Optional[str] = None
    ring: Optional[str] = None
    input: Optional[str] = None
    card: Optional[str] = None
    card_foreground: Optional[str] = None
    popover: Optional[str] = None
    popover_foreground: Optional[str] = None

    def supplied(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class ThemeTokens(ThemeModel):
    colors: ThemeColors
    radius: str

    model_config = ConfigDict(frozen=True)


class PartialThemeTokens(ThemeModel):
    colors: Optional[PartialThemeColors] = None
    radius: Optional[str] = None


DarkThemeTokens = PartialThemeTokens


class Typography(ThemeModel):
    # Fields stay optional: a supplied typography object replaces the
    # default pair as a whole, so a missing family is emitted as absent.
    sans: Optional[str] = None
    heading: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_form_fields(cls, data: Any) -> Any:
        # The admin form stores fontFamily/headingsFamily.
        if isinstance(data, dict) and data.get("fontFamily"):
            family = data.get("fontFamily")
            return {"sans": family, "heading": data.get("headingsFamily") or family}
        return data


class LogoAsset(ThemeModel):
    url: str
    alt: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_safe_url(value)


class HeroAssets(ThemeModel):
    kind: Literal["image", "video", "none"] = "none"
    url: Optional[str] = None
    alt: Optional[str] = None
    poster: Optional[str] = None
    loop: bool = True
    muted: bool = True
    autoplay: bool = True
    overlay: bool = False

    @field_validator("url", "poster")
    @classmethod
    def _check_urls(cls, value: Optional[str]) -> Optional[str]:
        return validate_safe_url(value)


class MainCardAsset(HeroAssets):
    autoplay: bool = False


class PartialBrandTheme(ThemeModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    tokens: Optional[PartialThemeTokens] = None
    dark_tokens: Optional[DarkThemeTokens] = None
    typography: Optional[Typography] = None
    hero_assets: Optional[HeroAssets] = None
    main_card: Optional[MainCardAsset] = None
    logo: Optional[LogoAsset] = None


class BrandTheme(ThemeModel):
    name: str
    slug: str
    tokens: ThemeTokens
    dark_tokens: Optional[DarkThemeTokens] = None
    typography: Typography
    css_variables: Dict[str, str]
    dark_css_variables: Optional[Dict[str, str]] = None
    hero_assets: Optional[HeroAssets] = None

    model_config = ConfigDict(frozen=True)


__all__ = [
    "BrandTheme",
    "DarkThemeTokens",
    "HeroAssets",
    "LogoAsset",
    "MainCardAsset",
    "PartialBrandTheme",
    "PartialThemeColors",
    "PartialThemeTokens",
    "ThemeColors",
    "ThemeModel",
    "ThemeTokens",
    "Typography",
]
