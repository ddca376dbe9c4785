"""Demo tenants and users for development.

Run standalone with ``python -m notehub.services.seed``.
"""

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool

from notehub.core.security import hash_password
from notehub.models.tenant import TenantCreate, TenantPlan
from notehub.models.user import UserCreate, UserRole
from notehub.storage.base import Storage

logger = logging.getLogger(__name__)

SEED_PASSWORD = "password"

SEED_TENANTS = [
    ("Acme Corporation", "acme"),
    ("Globex Corporation", "globex"),
]

# (email, role, tenant slug)
SEED_USERS = [
    ("admin@acme.test", UserRole.ADMIN, "acme"),
    ("user@acme.test", UserRole.MEMBER, "acme"),
    ("admin@globex.test", UserRole.ADMIN, "globex"),
    ("user@globex.test", UserRole.MEMBER, "globex"),
]


async def seed_demo_data(storage: Storage) -> bool:
    """Create the demo data. Returns False if it already exists."""
    if await storage.get_tenant_by_slug("acme") is not None:
        return False

    tenant_ids: dict[str, str] = {}
    for name, slug in SEED_TENANTS:
        tenant = await storage.create_tenant(
            TenantCreate(name=name, slug=slug, plan=TenantPlan.FREE)
        )
        tenant_ids[slug] = tenant.id

    password_hash = await run_in_threadpool(hash_password, SEED_PASSWORD)
    for email, role, slug in SEED_USERS:
        await storage.create_user(
            UserCreate(
                email=email,
                password_hash=password_hash,
                role=role,
                tenant_id=tenant_ids[slug],
            )
        )

    logger.info("Seeded %d tenants and %d users", len(SEED_TENANTS), len(SEED_USERS))
    return True


async def _main() -> None:
    from notehub.storage import get_storage, reset_storage

    storage = await get_storage()
    try:
        if await seed_demo_data(storage):
            logger.info("Seed data created")
        else:
            logger.info("Seed data already exists")
    finally:
        await reset_storage()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
