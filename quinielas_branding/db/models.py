from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, JSON, String, UniqueConstraint
from sqlalchemy.orm import relationship, validates

from .base import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    brands = relationship("Brand", back_populates="tenant", cascade="all, delete-orphan")


class Brand(Base):
    __tablename__ = "brands"

    id = Column(String, primary_key=True, default=_new_id)
    tenant_id = Column(String, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False)
    logo_url = Column(String)
    theme = Column(JSON)
    domains = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tenant = relationship("Tenant", back_populates="brands")

    __table_args__ = (
        UniqueConstraint("tenant_id", "slug", name="uq_brands_tenant_slug"),
        Index("ix_brands_slug", "slug"),
    )

    @validates("domains")
    def _normalize_domains(self, _key, value):
        if not value:
            return []
        return [str(item).strip().lower() for item in value if str(item).strip()]


__all__ = ["Tenant", "Brand"]
