from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .theme import ThemeColors, ThemeModel, validate_safe_url

_COLOR_PATTERN = re.compile(r"^(#?[0-9A-Fa-f]{6}|\d+\s+\d+%\s+\d+%)$")
COLOR_KEYS = frozenset(to_camel(name) for name in ThemeColors.model_fields)
_UNSAFE_CSS_VALUE = re.compile(r"[<>;{}]")


def _validate_color(value: str) -> str:
    resolved = str(value).strip()
    if _COLOR_PATTERN.fullmatch(resolved) is None:
        raise ValueError(f"Invalid color format: {value!r}")
    return resolved


class LogoUpdate(ThemeModel):
    url: Optional[str] = None
    alt: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_safe_url(value)


class MediaUpdate(ThemeModel):
    kind: Optional[Literal["image", "video", "none"]] = None
    url: Optional[str] = None
    alt: Optional[str] = None
    poster: Optional[str] = None
    loop: Optional[bool] = None
    muted: Optional[bool] = None
    autoplay: Optional[bool] = None
    overlay: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("url", "poster")
    @classmethod
    def _check_urls(cls, value: Optional[str]) -> Optional[str]:
        return validate_safe_url(value)


class TypographyUpdate(ThemeModel):
    font_family: Optional[str] = Field(default=None, min_length=1)
    headings_family: Optional[str] = None
    base_size: Optional[str] = None
    line_height: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("font_family", "headings_family", "base_size", "line_height")
    @classmethod
    def _check_css_value(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and _UNSAFE_CSS_VALUE.search(value):
            raise ValueError(f"Invalid characters in typography value: {value!r}")
        return value


class BrandTextUpdate(ThemeModel):
    title: Optional[str] = Field(default=None, max_length=30)
    description: Optional[str] = Field(default=None, max_length=255)
    link: Optional[str] = Field(default=None, max_length=50)
    slogan: Optional[str] = Field(default=None, max_length=75)
    paragraph: Optional[str] = Field(default=None, max_length=375)

    model_config = ConfigDict(extra="forbid")


class ThemeUpdate(ThemeModel):
    colors: Optional[Dict[str, str]] = None
    logo: Optional[LogoUpdate] = None
    logotype: Optional[LogoUpdate] = None
    hero_assets: Optional[MediaUpdate] = None
    main_card: Optional[MediaUpdate] = None
    typography: Optional[TypographyUpdate] = None
    text: Optional[BrandTextUpdate] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("colors")
    @classmethod
    def _check_colors(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if value is None:
            return value
        unknown = sorted(set(value) - COLOR_KEYS)
        if unknown:
            raise ValueError(f"Unknown color keys: {', '.join(unknown)}")
        return {key: _validate_color(color) for key, color in value.items()}

    @model_validator(mode="after")
    def _require_any_field(self) -> "ThemeUpdate":
        if not self.model_dump(exclude_none=True):
            raise ValueError("At least one field must be provided for update")
        return self

    def to_patch(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ThemeUpdateRequest(BaseModel):
    brand_id: Optional[str] = None
    theme: ThemeUpdate


class BrandResponse(BaseModel):
    id: str
    tenant_id: str
    name: str
    slug: str
    logo_url: Optional[str] = None
    theme: Optional[dict] = None
    domains: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ContrastRequest(BaseModel):
    foreground: str
    background: str


class ContrastResponse(BaseModel):
    foreground: str
    background: str
    ratio: Optional[float] = None
    meets_aa: bool
    meets_aaa: bool
    warning: Optional[str] = None


__all__ = [
    "BrandResponse",
    "BrandTextUpdate",
    "COLOR_KEYS",
    "ContrastRequest",
    "ContrastResponse",
    "LogoUpdate",
    "MediaUpdate",
    "ThemeUpdate",
    "ThemeUpdateRequest",
    "TypographyUpdate",
]
