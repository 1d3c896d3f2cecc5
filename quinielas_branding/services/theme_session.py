from __future__ import annotations

import html
import logging
from typing import Any, Optional

from ..config import get_settings
from ..schemas.theme import BrandTheme
from .theme import apply_brand_theme, parse_brand_theme, resolve_theme

logger = logging.getLogger(__name__)


class ThemeSessionClosed(RuntimeError):
    pass


class ThemeSession:
    """Owns the single brand ``<style>`` element of an application shell.

    Created once when the shell mounts; every theme change overwrites the
    stored CSS text and ``close`` tears it down.
    """

    def __init__(self, style_id: Optional[str] = None) -> None:
        self.style_id = style_id or get_settings().theme_style_id
        self._text = ""
        self._theme: Optional[BrandTheme] = None
        self._closed = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def theme(self) -> Optional[BrandTheme]:
        return self._theme

    @property
    def closed(self) -> bool:
        return self._closed

    def set_text(self, css: str) -> None:
        if self._closed:
            raise ThemeSessionClosed(f"Theme session {self.style_id} is closed")
        self._text = css

    def apply(self, raw_theme: Any) -> BrandTheme:
        partial = parse_brand_theme(raw_theme)
        if partial is None:
            logger.info("No brand theme provided; applying defaults to %s", self.style_id)
        resolved = resolve_theme(partial)
        self.set_text(apply_brand_theme(resolved))
        self._theme = resolved
        return resolved

    def render(self) -> str:
        if self._closed:
            return ""
        # CSS reads "\/" as "/", and the text can no longer close the element.
        css = self._text.replace("</", "<\\/")
        return f'<style id="{html.escape(self.style_id, quote=True)}">\n{css}</style>'

    def close(self) -> None:
        self._text = ""
        self._theme = None
        self._closed = True

    def __enter__(self) -> "ThemeSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["ThemeSession", "ThemeSessionClosed"]
