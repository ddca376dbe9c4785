"""Alembic environment: runs migrations over the async engine."""

import asyncio

from sqlalchemy.engine import Connection
from sqlmodel import SQLModel

# Import all models so SQLModel.metadata picks them up
import notehub.models  # noqa: F401
from alembic import context
from notehub.core.config import get_settings
from notehub.storage.sql import build_engine

target_metadata = SQLModel.metadata


def _run(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = build_engine(get_settings().database_url)
    async with engine.connect() as connection:
        await connection.run_sync(_run)
    await engine.dispose()


asyncio.run(run_migrations_online())
