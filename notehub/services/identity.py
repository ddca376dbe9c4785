"""Resolve a bearer token to a tenant-scoped identity."""

from notehub.core.errors import Forbidden, InvalidToken, Unauthenticated
from notehub.core.security import decode_jwt
from notehub.models.tenant import TenantPlan, TenantSummary
from notehub.models.user import UserRole
from notehub.storage.base import Storage


class CurrentUser:
    """Identity snapshot for one request.

    Built from fresh user and tenant reads, not from token claims, and not
    linked to storage afterwards.
    """

    __slots__ = ("id", "email", "role", "tenant_id", "tenant")

    def __init__(
        self,
        id: str,
        email: str,
        role: UserRole,
        tenant_id: str,
        tenant: TenantSummary,
    ) -> None:
        self.id = id
        self.email = email
        self.role = role
        self.tenant_id = tenant_id
        self.tenant = tenant

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def plan(self) -> TenantPlan:
        return self.tenant.plan


async def resolve_identity(token: str | None, storage: Storage) -> CurrentUser:
    if not token:
        raise Unauthenticated("Access token required")

    try:
        claims = decode_jwt(token)
    except InvalidToken as exc:
        raise Unauthenticated("Invalid token") from exc

    user = await storage.get_user(claims.sub)
    if user is None:
        raise Unauthenticated("User not found")

    tenant = await storage.get_tenant(user.tenant_id)
    if tenant is None:
        raise Unauthenticated("Tenant not found")

    return CurrentUser(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant=TenantSummary.from_tenant(tenant),
    )


def require_admin(user: CurrentUser | None) -> CurrentUser:
    if user is None:
        raise Unauthenticated("Authentication required")
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user
