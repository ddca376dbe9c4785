"""Tenant model — top-level isolation boundary."""

from datetime import datetime
from enum import StrEnum

from pydantic import Field as PydField
from sqlmodel import Field, SQLModel

from notehub.models.base import TimestampMixin, WireModel, new_id


class TenantPlan(StrEnum):
    FREE = "free"
    PRO = "pro"


class Tenant(TimestampMixin, SQLModel, table=True):
    __tablename__ = "tenants"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=255, nullable=False)
    slug: str = Field(max_length=50, unique=True, nullable=False, index=True)
    plan: TenantPlan = Field(default=TenantPlan.FREE)


# ── Schemas ──────────────────────────────────────────────────

class TenantCreate(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=50)
    plan: TenantPlan = TenantPlan.FREE


class TenantSummary(WireModel):
    """Tenant as embedded in the user envelope."""

    id: str = PydField(alias="_id")
    name: str
    slug: str
    plan: TenantPlan

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantSummary":
        return cls(id=tenant.id, name=tenant.name, slug=tenant.slug, plan=tenant.plan)


class TenantRead(TenantSummary):
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantRead":
        return cls(
            id=tenant.id,
            name=tenant.name,
            slug=tenant.slug,
            plan=tenant.plan,
            created_at=tenant.created_at,
            updated_at=tenant.updated_at,
        )
