"""Tenant plan management."""

from fastapi import APIRouter

from notehub.api.deps import Admin, Store
from notehub.models.base import WireModel
from notehub.models.tenant import TenantRead
from notehub.services import accounts

router = APIRouter(prefix="/tenants", tags=["tenants"])


class UpgradeResponse(WireModel):
    message: str
    tenant: TenantRead


@router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(slug: str, admin: Admin, storage: Store) -> UpgradeResponse:
    """Upgrade the caller's own tenant to the pro plan (admins only)."""
    tenant = await accounts.upgrade_tenant(storage, admin, slug)
    return UpgradeResponse(
        message="Tenant upgraded to Pro plan successfully",
        tenant=TenantRead.from_tenant(tenant),
    )
