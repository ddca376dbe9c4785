"""Storage engine: one contract, a durable backend and an in-memory fallback.

The backend is chosen once, lazily, on the first ``get_storage()`` call.
If ``DATABASE_URL`` is unset or the database cannot be reached, the
in-memory backend is used for the rest of the process lifetime; the
primary is not retried.
"""

import asyncio
import logging

from notehub.core.config import get_settings
from notehub.storage.base import Storage
from notehub.storage.memory import InMemoryStorage
from notehub.storage.sql import SqlStorage

logger = logging.getLogger(__name__)

_storage: Storage | None = None
# Created on first use and dropped by reset_storage(); an asyncio.Lock
# belongs to the event loop that first waits on it.
_init_lock: asyncio.Lock | None = None


def _selection_lock() -> asyncio.Lock:
    global _init_lock
    if _init_lock is None:
        _init_lock = asyncio.Lock()
    return _init_lock


async def _select_backend() -> Storage:
    database_url = get_settings().database_url
    if not database_url:
        logger.warning("DATABASE_URL is not set, using in-memory storage")
        return InMemoryStorage()

    primary: SqlStorage | None = None
    try:
        primary = SqlStorage(database_url)
        await primary.connect()
    except Exception as exc:
        logger.warning("Database connection failed (%s), falling back to in-memory storage", exc)
        if primary is not None:
            await primary.close()
        return InMemoryStorage()

    logger.info("Connected to database storage")
    return primary


async def get_storage() -> Storage:
    """FastAPI dependency returning the process-wide storage backend."""
    global _storage
    if _storage is not None:
        return _storage
    async with _selection_lock():
        if _storage is None:
            _storage = await _select_backend()
    return _storage


async def reset_storage() -> None:
    """Dispose the selected backend and forget the choice."""
    global _storage, _init_lock
    async with _selection_lock():
        if _storage is not None:
            await _storage.close()
        _storage = None
    _init_lock = None


__all__ = [
    "InMemoryStorage",
    "SqlStorage",
    "Storage",
    "get_storage",
    "reset_storage",
]
