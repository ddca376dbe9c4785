"""Backend selection: lazy, init-once, sticky fallback."""

import asyncio

import pytest

from notehub import storage as storage_module
from notehub.core.config import get_settings
from notehub.storage import InMemoryStorage, SqlStorage, get_storage, reset_storage


@pytest.fixture(autouse=True)
async def fresh_selection(monkeypatch):
    await reset_storage()
    yield monkeypatch
    await reset_storage()


async def test_no_database_url_selects_memory(monkeypatch):
    monkeypatch.setattr(get_settings(), "database_url", "")
    backend = await get_storage()
    assert isinstance(backend, InMemoryStorage)


async def test_reachable_database_selects_sql(monkeypatch, tmp_path):
    monkeypatch.setattr(
        get_settings(), "database_url", f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}"
    )
    backend = await get_storage()
    assert isinstance(backend, SqlStorage)
    assert await backend.get_tenant_by_slug("acme") is None


async def test_unreachable_database_falls_back(monkeypatch, tmp_path, caplog):
    missing_dir = tmp_path / "does-not-exist" / "nested"
    monkeypatch.setattr(
        get_settings(), "database_url", f"sqlite+aiosqlite:///{missing_dir / 'notes.db'}"
    )
    backend = await get_storage()
    assert isinstance(backend, InMemoryStorage)
    assert "falling back" in caplog.text


async def test_unknown_driver_falls_back(monkeypatch):
    monkeypatch.setattr(get_settings(), "database_url", "nosuchdb+nodriver://host/db")
    assert isinstance(await get_storage(), InMemoryStorage)


async def test_fallback_is_sticky(monkeypatch, tmp_path):
    monkeypatch.setattr(get_settings(), "database_url", "")
    first = await get_storage()

    # A working database appearing later is not picked up.
    monkeypatch.setattr(
        get_settings(), "database_url", f"sqlite+aiosqlite:///{tmp_path / 'late.db'}"
    )
    assert await get_storage() is first


async def test_concurrent_first_use_connects_once(monkeypatch):
    calls = 0

    async def _slow_select():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        return InMemoryStorage()

    monkeypatch.setattr(storage_module, "_select_backend", _slow_select)
    backends = await asyncio.gather(*(get_storage() for _ in range(5)))

    assert calls == 1
    assert all(b is backends[0] for b in backends)
