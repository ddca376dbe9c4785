"""Signup, login and plan upgrade rules."""

import logging
import re
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool

from notehub.core.errors import (
    DuplicateTenant,
    DuplicateUser,
    Forbidden,
    NotFound,
    Unauthenticated,
    ValidationFailed,
)
from notehub.core.security import create_jwt, hash_password, verify_password
from notehub.models.tenant import Tenant, TenantCreate, TenantPlan
from notehub.models.user import User, UserCreate, UserRole
from notehub.services.identity import CurrentUser
from notehub.storage.base import Storage

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 50

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """``"Acme Corp!"`` → ``"acme-corp"``."""
    slug = _NON_SLUG_CHARS.sub("", name.lower())
    slug = _WHITESPACE.sub("-", slug)
    return slug[:SLUG_MAX_LENGTH]


@dataclass
class AuthResult:
    """A freshly issued token with the records it was issued for."""

    token: str
    user: User
    tenant: Tenant


def issue_token(user: User) -> str:
    return create_jwt(subject=user.id, role=user.role, tenant_id=user.tenant_id)


async def signup(
    storage: Storage, *, email: str, password: str, organization_name: str
) -> AuthResult:
    if await storage.get_user_by_email(email) is not None:
        raise DuplicateUser()

    organization_name = organization_name.strip()
    slug = slugify(organization_name)
    if not slug.strip("-"):
        raise ValidationFailed("Organization name must contain letters or digits")
    if await storage.get_tenant_by_slug(slug) is not None:
        raise DuplicateTenant()

    tenant = await storage.create_tenant(
        TenantCreate(name=organization_name, slug=slug, plan=TenantPlan.FREE)
    )
    password_hash = await run_in_threadpool(hash_password, password)
    # First user of a new tenant is always its admin
    user = await storage.create_user(
        UserCreate(
            email=email,
            password_hash=password_hash,
            role=UserRole.ADMIN,
            tenant_id=tenant.id,
        )
    )
    logger.info("Tenant %s created with admin %s", tenant.slug, user.id)
    return AuthResult(token=issue_token(user), user=user, tenant=tenant)


async def login(storage: Storage, *, email: str, password: str) -> AuthResult:
    user = await storage.get_user_by_email(email)
    if user is None:
        raise Unauthenticated("Invalid credentials")

    if not await run_in_threadpool(verify_password, password, user.password_hash):
        raise Unauthenticated("Invalid credentials")

    tenant = await storage.get_tenant(user.tenant_id)
    if tenant is None:
        raise Unauthenticated("Tenant not found")

    return AuthResult(token=issue_token(user), user=user, tenant=tenant)


async def upgrade_tenant(storage: Storage, caller: CurrentUser, slug: str) -> Tenant:
    """Move the caller's own tenant to the pro plan. Idempotent."""
    if caller.tenant.slug != slug:
        raise Forbidden("Cannot upgrade other tenants")

    tenant = await storage.update_tenant_plan(caller.tenant_id, TenantPlan.PRO)
    if tenant is None:
        raise NotFound("Tenant not found")

    logger.info("Tenant %s upgraded to pro by %s", tenant.slug, caller.id)
    return tenant
