"""Volatile in-process backend, used when the database is unavailable."""

import asyncio
from typing import TypeVar

from sqlmodel import SQLModel

from notehub.models.base import timestamps, utcnow
from notehub.models.note import Note, NoteRecord, NoteUpdate
from notehub.models.tenant import Tenant, TenantCreate, TenantPlan
from notehub.models.user import User, UserCreate
from notehub.storage.base import Storage, update_fields

M = TypeVar("M", bound=SQLModel)


def _copy(record: M) -> M:
    return type(record)(**record.model_dump())


class InMemoryStorage(Storage):
    """Dict-backed storage. Mutations are serialized under one lock.

    Records handed out are copies, so callers cannot change stored state
    without going through the storage methods.
    """

    name = "memory"

    def __init__(self) -> None:
        self._tenants: dict[str, Tenant] = {}
        self._users: dict[str, User] = {}
        self._notes: dict[str, Note] = {}
        self._lock = asyncio.Lock()

    # ── Tenants ──────────────────────────────────────────────

    async def get_tenant(self, tenant_id: str) -> Tenant | None:
        tenant = self._tenants.get(tenant_id)
        return _copy(tenant) if tenant else None

    async def get_tenant_by_slug(self, slug: str) -> Tenant | None:
        for tenant in self._tenants.values():
            if tenant.slug == slug:
                return _copy(tenant)
        return None

    async def create_tenant(self, data: TenantCreate) -> Tenant:
        tenant = Tenant(name=data.name, slug=data.slug, plan=data.plan, **timestamps())
        async with self._lock:
            self._tenants[tenant.id] = tenant
        return _copy(tenant)

    async def update_tenant_plan(self, tenant_id: str, plan: TenantPlan) -> Tenant | None:
        async with self._lock:
            tenant = self._tenants.get(tenant_id)
            if tenant is None:
                return None
            tenant.plan = plan
            tenant.updated_at = utcnow()
            return _copy(tenant)

    # ── Users ────────────────────────────────────────────────

    async def get_user(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return _copy(user) if user else None

    async def get_user_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return _copy(user)
        return None

    async def create_user(self, data: UserCreate) -> User:
        user = User(
            email=data.email,
            password_hash=data.password_hash,
            role=data.role,
            tenant_id=data.tenant_id,
            **timestamps(),
        )
        async with self._lock:
            self._users[user.id] = user
        return _copy(user)

    # ── Notes ────────────────────────────────────────────────

    async def get_notes_by_tenant(self, tenant_id: str) -> list[Note]:
        return [_copy(n) for n in self._notes.values() if n.tenant_id == tenant_id]

    async def get_note(self, note_id: str, tenant_id: str) -> Note | None:
        note = self._notes.get(note_id)
        if note is None or note.tenant_id != tenant_id:
            return None
        return _copy(note)

    async def create_note(self, data: NoteRecord) -> Note:
        note = Note(
            title=data.title,
            body=data.body,
            tenant_id=data.tenant_id,
            author_id=data.author_id,
            **timestamps(),
        )
        async with self._lock:
            self._notes[note.id] = note
        return _copy(note)

    async def update_note(
        self, note_id: str, tenant_id: str, updates: NoteUpdate
    ) -> Note | None:
        async with self._lock:
            note = self._notes.get(note_id)
            if note is None or note.tenant_id != tenant_id:
                return None
            for field, value in update_fields(updates).items():
                setattr(note, field, value)
            note.updated_at = utcnow()
            return _copy(note)

    async def delete_note(self, note_id: str, tenant_id: str) -> bool:
        async with self._lock:
            note = self._notes.get(note_id)
            if note is None or note.tenant_id != tenant_id:
                return False
            del self._notes[note_id]
            return True

    async def count_notes_by_tenant(self, tenant_id: str) -> int:
        return sum(1 for n in self._notes.values() if n.tenant_id == tenant_id)
