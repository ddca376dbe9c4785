"""Durable backend: SQLModel over an async SQLAlchemy engine."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import func, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select

# Import all models so metadata is populated
import notehub.models  # noqa: F401
from notehub.models.base import timestamps, utcnow
from notehub.models.note import Note, NoteRecord, NoteUpdate
from notehub.models.tenant import Tenant, TenantCreate, TenantPlan
from notehub.models.user import User, UserCreate
from notehub.storage.base import Storage, update_fields


def build_engine(database_url: str) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=False)
    return create_async_engine(
        database_url,
        echo=False,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
    )


class SqlStorage(Storage):
    """Storage over PostgreSQL (asyncpg) or any async SQLAlchemy URL."""

    name = "sql"

    def __init__(self, database_url: str | None = None, engine: AsyncEngine | None = None) -> None:
        if engine is None:
            if not database_url:
                raise ValueError("database_url or engine is required")
            engine = build_engine(database_url)
        self.engine = engine
        self._session_factory = sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self) -> None:
        """Create tables and probe the connection. Use Alembic in production."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    # ── Tenants ──────────────────────────────────────────────

    async def get_tenant(self, tenant_id: str) -> Tenant | None:
        async with self._session() as session:
            return await session.get(Tenant, tenant_id)

    async def get_tenant_by_slug(self, slug: str) -> Tenant | None:
        async with self._session() as session:
            result = await session.execute(select(Tenant).where(Tenant.slug == slug))
            return result.scalar_one_or_none()

    async def create_tenant(self, data: TenantCreate) -> Tenant:
        tenant = Tenant(name=data.name, slug=data.slug, plan=data.plan, **timestamps())
        async with self._session() as session:
            session.add(tenant)
            await session.commit()
            await session.refresh(tenant)
        return tenant

    async def update_tenant_plan(self, tenant_id: str, plan: TenantPlan) -> Tenant | None:
        async with self._session() as session:
            tenant = await session.get(Tenant, tenant_id)
            if tenant is None:
                return None
            tenant.plan = plan
            tenant.updated_at = utcnow()
            session.add(tenant)
            await session.commit()
            await session.refresh(tenant)
            return tenant

    # ── Users ────────────────────────────────────────────────

    async def get_user(self, user_id: str) -> User | None:
        async with self._session() as session:
            return await session.get(User, user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        async with self._session() as session:
            result = await session.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def create_user(self, data: UserCreate) -> User:
        user = User(
            email=data.email,
            password_hash=data.password_hash,
            role=data.role,
            tenant_id=data.tenant_id,
            **timestamps(),
        )
        async with self._session() as session:
            session.add(user)
            await session.commit()
            await session.refresh(user)
        return user

    # ── Notes (tenant-scoped) ────────────────────────────────

    async def get_notes_by_tenant(self, tenant_id: str) -> list[Note]:
        stmt = (
            select(Note)
            .where(Note.tenant_id == tenant_id)
            .order_by(Note.created_at.asc())  # type: ignore[attr-defined]
        )
        async with self._session() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def _scoped_note(
        self, session: AsyncSession, note_id: str, tenant_id: str
    ) -> Note | None:
        stmt = select(Note).where(Note.id == note_id, Note.tenant_id == tenant_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_note(self, note_id: str, tenant_id: str) -> Note | None:
        async with self._session() as session:
            return await self._scoped_note(session, note_id, tenant_id)

    async def create_note(self, data: NoteRecord) -> Note:
        note = Note(
            title=data.title,
            body=data.body,
            tenant_id=data.tenant_id,
            author_id=data.author_id,
            **timestamps(),
        )
        async with self._session() as session:
            session.add(note)
            await session.commit()
            await session.refresh(note)
        return note

    async def update_note(
        self, note_id: str, tenant_id: str, updates: NoteUpdate
    ) -> Note | None:
        async with self._session() as session:
            note = await self._scoped_note(session, note_id, tenant_id)
            if note is None:
                return None
            for field, value in update_fields(updates).items():
                setattr(note, field, value)
            note.updated_at = utcnow()
            session.add(note)
            await session.commit()
            await session.refresh(note)
            return note

    async def delete_note(self, note_id: str, tenant_id: str) -> bool:
        async with self._session() as session:
            note = await self._scoped_note(session, note_id, tenant_id)
            if note is None:
                return False
            await session.delete(note)
            await session.commit()
            return True

    async def count_notes_by_tenant(self, tenant_id: str) -> int:
        stmt = select(func.count()).select_from(Note).where(Note.tenant_id == tenant_id)
        async with self._session() as session:
            result = await session.execute(stmt)
            return result.scalar_one()
