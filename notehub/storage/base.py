"""Storage contract shared by every backend.

Every note accessor takes ``tenant_id`` explicitly and the backend applies
it inside its own lookup. Callers never fetch a note by id alone.
"""

from abc import ABC, abstractmethod

from notehub.models.note import Note, NoteRecord, NoteUpdate
from notehub.models.tenant import Tenant, TenantCreate, TenantPlan
from notehub.models.user import User, UserCreate


class Storage(ABC):
    """Persistence for tenants, users and notes."""

    name: str = "abstract"

    async def connect(self) -> None:
        """Prepare the backend. Raises if it is unreachable."""

    async def close(self) -> None:
        """Release backend resources."""

    # ── Tenants ──────────────────────────────────────────────

    @abstractmethod
    async def get_tenant(self, tenant_id: str) -> Tenant | None: ...

    @abstractmethod
    async def get_tenant_by_slug(self, slug: str) -> Tenant | None: ...

    @abstractmethod
    async def create_tenant(self, data: TenantCreate) -> Tenant:
        """Insert a tenant. Slug collisions are the caller's concern."""

    @abstractmethod
    async def update_tenant_plan(self, tenant_id: str, plan: TenantPlan) -> Tenant | None: ...

    # ── Users ────────────────────────────────────────────────

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Insert a user. Email collisions are the caller's concern."""

    # ── Notes (tenant-scoped) ────────────────────────────────

    @abstractmethod
    async def get_notes_by_tenant(self, tenant_id: str) -> list[Note]: ...

    @abstractmethod
    async def get_note(self, note_id: str, tenant_id: str) -> Note | None: ...

    @abstractmethod
    async def create_note(self, data: NoteRecord) -> Note: ...

    @abstractmethod
    async def update_note(
        self, note_id: str, tenant_id: str, updates: NoteUpdate
    ) -> Note | None:
        """Merge the fields set on ``updates``. None if (id, tenant) does not match."""

    @abstractmethod
    async def delete_note(self, note_id: str, tenant_id: str) -> bool: ...

    @abstractmethod
    async def count_notes_by_tenant(self, tenant_id: str) -> int: ...


def update_fields(updates: NoteUpdate) -> dict:
    """Fields the caller actually provided, ignoring explicit nulls."""
    return updates.model_dump(exclude_unset=True, exclude_none=True)
