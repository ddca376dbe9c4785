"""Unexpected backend failures surface as a bare 500."""

from httpx import ASGITransport, AsyncClient

from notehub.core.security import create_jwt
from notehub.main import app
from notehub.models.tenant import TenantCreate
from notehub.models.user import UserCreate, UserRole
from notehub.storage import InMemoryStorage, get_storage


class BrokenNotesStorage(InMemoryStorage):
    async def get_notes_by_tenant(self, tenant_id: str):
        raise ConnectionError("database went away")


async def test_backend_failure_is_internal_error():
    storage = BrokenNotesStorage()
    tenant = await storage.create_tenant(TenantCreate(name="Err", slug="err"))
    user = await storage.create_user(UserCreate(
        email="e@example.com", password_hash="x", role=UserRole.ADMIN, tenant_id=tenant.id,
    ))
    headers = {"Authorization": f"Bearer {create_jwt(user.id, user.role, tenant.id)}"}

    app.dependency_overrides[get_storage] = lambda: storage
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/notes", headers=headers)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
