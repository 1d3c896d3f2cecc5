from __future__ import annotations

from typing import Generator

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session as DbSession

from ..db.models import Brand
from ..db.utils import get_db
from ..exceptions import BrandNotFoundError
from ..schemas.branding import (
    BrandResponse,
    ContrastRequest,
    ContrastResponse,
    ThemeUpdateRequest,
)
from ..services.brand import BrandService
from ..utils.color import normalize_color_to_hsl
from ..utils.contrast import check_contrast

router = APIRouter(prefix="/api", tags=["branding"])

CSS_MEDIA_TYPE = "text/css"


def _get_db_session() -> Generator[DbSession, None, None]:
    with get_db() as session:
        yield session


def _brand_payload(record: Brand) -> BrandResponse:
    return BrandResponse(
        id=record.id,
        tenant_id=record.tenant_id,
        name=record.name,
        slug=record.slug,
        logo_url=record.logo_url,
        theme=record.theme,
        domains=list(record.domains or []),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _brand_or_404(service: BrandService, slug: str) -> Brand:
    brand = service.get_by_slug(slug)
    if brand is None:
        raise HTTPException(status_code=404, detail="Brand not found")
    return brand


@router.get("/brands/{slug}/theme")
def get_brand_theme(slug: str, db: DbSession = Depends(_get_db_session)) -> dict:
    service = BrandService(db)
    brand = _brand_or_404(service, slug)
    return service.resolved_theme(brand).model_dump(by_alias=True, exclude_none=True)


@router.get("/brands/{slug}/theme.css", response_class=Response)
def get_brand_theme_css(slug: str, db: DbSession = Depends(_get_db_session)) -> Response:
    service = BrandService(db)
    brand = _brand_or_404(service, slug)
    return Response(content=service.theme_css(brand), media_type=CSS_MEDIA_TYPE)


@router.get("/theme.css", response_class=Response)
def get_host_theme_css(request: Request, db: DbSession = Depends(_get_db_session)) -> Response:
    service = BrandService(db)
    hostname = request.headers.get("host", "")
    brand = service.resolve_for_host(hostname)
    headers = {"X-Brand-Theme": brand.slug if brand is not None else "default"}
    return Response(content=service.theme_css(brand), media_type=CSS_MEDIA_TYPE, headers=headers)


@router.get("/tenants/{tenant_id}/brand")
def get_current_brand(tenant_id: str, db: DbSession = Depends(_get_db_session)) -> BrandResponse:
    brand = BrandService(db).get_current_brand(tenant_id)
    if brand is None:
        raise HTTPException(status_code=404, detail="No brand found for this tenant")
    return _brand_payload(brand)


@router.put("/tenants/{tenant_id}/brand/theme")
def update_brand_theme(
    tenant_id: str,
    payload: ThemeUpdateRequest,
    db: DbSession = Depends(_get_db_session),
) -> BrandResponse:
    service = BrandService(db)
    try:
        brand = service.update_theme(tenant_id, payload.theme, brand_id=payload.brand_id)
    except BrandNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.with_trace()) from exc
    db.commit()
    db.refresh(brand)
    return _brand_payload(brand)


@router.post("/branding/contrast")
def check_color_contrast(payload: ContrastRequest) -> ContrastResponse:
    foreground = normalize_color_to_hsl(payload.foreground.strip())
    background = normalize_color_to_hsl(payload.background.strip())
    report = check_contrast(foreground, background)
    return ContrastResponse(
        foreground=foreground,
        background=background,
        ratio=report.ratio,
        meets_aa=report.meets_aa,
        meets_aaa=report.meets_aaa,
        warning=report.warning,
    )


__all__ = ["router"]
