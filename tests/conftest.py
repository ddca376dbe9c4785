"""Shared test fixtures — storage backends, test client and auth helpers."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["DATABASE_URL"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from notehub.main import app  # noqa: E402
from notehub.storage import InMemoryStorage, SqlStorage, Storage, get_storage  # noqa: E402


@pytest.fixture(params=["memory", "sql"])
async def storage(request) -> AsyncGenerator[Storage, None]:
    """Each test using this fixture runs once per backend."""
    if request.param == "memory":
        backend: Storage = InMemoryStorage()
    else:
        backend = SqlStorage(engine=create_async_engine("sqlite+aiosqlite://", echo=False))
    await backend.connect()
    yield backend
    await backend.close()


@pytest.fixture
async def client(storage) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client with storage override."""

    async def _override_storage():
        return storage

    app.dependency_overrides[get_storage] = _override_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def signup(client: AsyncClient, org: str, email: str | None = None) -> dict:
    """Helper: sign up an organization, return the response body + headers."""
    slug = org.lower().replace(" ", "-")
    resp = await client.post("/api/auth/signup", json={
        "email": email or f"admin@{slug}.example.com",
        "password": "secret123",
        "organizationName": org,
    })
    assert resp.status_code == 201, resp.text
    data = resp.json()
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data
