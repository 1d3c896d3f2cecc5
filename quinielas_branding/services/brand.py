from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session as DbSession

from ..db.models import Brand, Tenant
from ..exceptions import BrandNotFoundError
from ..schemas.branding import ThemeUpdate
from ..schemas.theme import BrandTheme
from ..utils.domain import matches_brand_domain, parse_domain
from .theme import apply_brand_theme, parse_brand_theme, resolve_theme

logger = logging.getLogger(__name__)


def merge_theme_patch(existing: Optional[dict], patch: dict) -> dict:
    """Deep-merge a theme update into a stored theme blob (one level down).

    Color updates land under ``tokens.colors`` when the stored blob already
    uses the nested shape, otherwise under the flat ``colors`` key.
    """
    current = dict(existing or {})
    merged = dict(current)
    for key, value in patch.items():
        if key == "colors" and not current.get("colors") and isinstance(current.get("tokens"), dict):
            tokens = dict(current["tokens"])
            tokens["colors"] = {**(tokens.get("colors") or {}), **value}
            merged["tokens"] = tokens
        elif isinstance(value, dict) and isinstance(current.get(key), dict):
            merged[key] = {**current[key], **value}
        else:
            merged[key] = value
    return merged


class BrandService:
    def __init__(self, db: DbSession) -> None:
        self.db = db

    def create_tenant(self, name: str, slug: str) -> Tenant:
        resolved_name = (name or "").strip()
        resolved_slug = (slug or "").strip().lower()
        if not resolved_name:
            raise ValueError("name is required")
        if not resolved_slug:
            raise ValueError("slug is required")
        record = Tenant(name=resolved_name, slug=resolved_slug)
        self.db.add(record)
        self.db.flush()
        return record

    def create_brand(
        self,
        tenant_id: str,
        name: str,
        slug: str,
        *,
        theme: Optional[dict] = None,
        domains: Optional[List[str]] = None,
        logo_url: Optional[str] = None,
    ) -> Brand:
        if self.db.get(Tenant, tenant_id) is None:
            raise ValueError("Tenant not found")
        resolved_slug = (slug or "").strip().lower()
        if not resolved_slug:
            raise ValueError("slug is required")
        record = Brand(
            tenant_id=tenant_id,
            name=(name or "").strip() or resolved_slug,
            slug=resolved_slug,
            theme=theme,
            domains=domains or [],
            logo_url=logo_url,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def get_by_id(self, brand_id: str) -> Optional[Brand]:
        return self.db.get(Brand, brand_id)

    def get_by_slug(self, slug: str) -> Optional[Brand]:
        return (
            self.db.query(Brand)
            .filter(Brand.slug == (slug or "").strip().lower())
            .order_by(Brand.created_at.asc())
            .first()
        )

    def get_current_brand(self, tenant_id: str) -> Optional[Brand]:
        return (
            self.db.query(Brand)
            .filter(Brand.tenant_id == tenant_id)
            .order_by(Brand.created_at.asc())
            .first()
        )

    def resolve_for_host(self, hostname: str) -> Optional[Brand]:
        """Find the brand serving ``hostname``: configured domains first, then subdomain slug."""
        if not hostname:
            return None
        for brand in self.db.query(Brand).order_by(Brand.created_at.asc()).all():
            if brand.domains and matches_brand_domain(hostname, brand.domains):
                return brand
        subdomain = parse_domain(hostname).subdomain
        if subdomain is None:
            return None
        return self.get_by_slug(subdomain)

    def update_theme(
        self,
        tenant_id: str,
        update: ThemeUpdate,
        brand_id: Optional[str] = None,
    ) -> Brand:
        if brand_id:
            brand = (
                self.db.query(Brand)
                .filter(Brand.id == brand_id)
                .filter(Brand.tenant_id == tenant_id)
                .first()
            )
        else:
            brand = self.get_current_brand(tenant_id)
        if brand is None:
            raise BrandNotFoundError()

        patch = update.to_patch()
        brand.theme = merge_theme_patch(brand.theme, patch)
        self.db.flush()
        logger.info("Updated theme for brand %s (%s)", brand.slug, ", ".join(sorted(patch)))
        return brand

    def resolved_theme(self, brand: Optional[Brand]) -> BrandTheme:
        partial = parse_brand_theme(brand.theme) if brand is not None else None
        if brand is not None and partial is not None:
            defaults: dict[str, Any] = {}
            if partial.name is None:
                defaults["name"] = brand.name
            if partial.slug is None:
                defaults["slug"] = brand.slug
            if defaults:
                partial = partial.model_copy(update=defaults)
        return resolve_theme(partial)

    def theme_css(self, brand: Optional[Brand]) -> str:
        return apply_brand_theme(self.resolved_theme(brand))


__all__ = ["BrandService", "merge_theme_patch"]
