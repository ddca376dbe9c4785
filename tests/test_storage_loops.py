"""Backend selection from successive event loops."""

import asyncio

from notehub import storage as storage_module
from notehub.storage import InMemoryStorage, get_storage, reset_storage


def test_selection_lock_is_not_tied_to_first_loop(monkeypatch):
    async def _slow_select():
        await asyncio.sleep(0.01)
        return InMemoryStorage()

    monkeypatch.setattr(storage_module, "_select_backend", _slow_select)

    async def _contended():
        backends = await asyncio.gather(*(get_storage() for _ in range(3)))
        await reset_storage()
        return backends

    asyncio.run(reset_storage())
    for _ in range(2):
        backends = asyncio.run(_contended())
        assert all(b is backends[0] for b in backends)
