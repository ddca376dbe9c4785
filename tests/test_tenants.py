"""Plan upgrade endpoint."""

from httpx import AsyncClient

from tests.conftest import signup


async def _login(client: AsyncClient, email: str) -> dict:
    resp = await client.post("/api/auth/login", json={"email": email, "password": "password"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


async def test_admin_upgrades_own_tenant(client: AsyncClient):
    org = await signup(client, "Upgrade Co")

    resp = await client.post("/api/tenants/upgrade-co/upgrade", headers=org["headers"])
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Tenant upgraded to Pro plan successfully"
    assert data["tenant"]["plan"] == "pro"
    assert data["tenant"]["slug"] == "upgrade-co"
    assert data["tenant"]["_id"] == org["user"]["tenant"]["_id"]

    me = await client.get("/api/auth/me", headers=org["headers"])
    assert me.json()["tenant"]["plan"] == "pro"


async def test_upgrade_is_idempotent(client: AsyncClient):
    org = await signup(client, "Twice Co")
    for _ in range(2):
        resp = await client.post("/api/tenants/twice-co/upgrade", headers=org["headers"])
        assert resp.status_code == 200
        assert resp.json()["tenant"]["plan"] == "pro"


async def test_admin_cannot_upgrade_other_tenant(client: AsyncClient):
    await client.post("/api/auth/seed")
    headers = await _login(client, "admin@acme.test")

    resp = await client.post("/api/tenants/globex/upgrade", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Cannot upgrade other tenants"

    globex = await _login(client, "admin@globex.test")
    me = await client.get("/api/auth/me", headers=globex)
    assert me.json()["tenant"]["plan"] == "free"


async def test_member_cannot_upgrade(client: AsyncClient):
    await client.post("/api/auth/seed")
    headers = await _login(client, "user@acme.test")

    resp = await client.post("/api/tenants/acme/upgrade", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Admin access required"


async def test_upgrade_requires_token(client: AsyncClient):
    resp = await client.post("/api/tenants/acme/upgrade")
    assert resp.status_code == 401
