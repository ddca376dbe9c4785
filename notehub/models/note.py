"""Note model — always scoped to a tenant."""

from datetime import datetime

from pydantic import Field as PydField
from sqlmodel import Field, SQLModel

from notehub.models.base import TimestampMixin, WireModel, new_id


class Note(TimestampMixin, SQLModel, table=True):
    __tablename__ = "notes"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    title: str = Field(nullable=False)
    body: str = Field(nullable=False)
    tenant_id: str = Field(foreign_key="tenants.id", nullable=False, index=True, max_length=36)
    author_id: str = Field(foreign_key="users.id", nullable=False, max_length=36)


# ── Schemas ──────────────────────────────────────────────────

class NoteCreate(SQLModel):
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)


class NoteUpdate(SQLModel):
    title: str | None = Field(default=None, min_length=1)
    body: str | None = Field(default=None, min_length=1)


class NoteRecord(SQLModel):
    """Storage-level input for a new note."""

    title: str
    body: str
    tenant_id: str
    author_id: str


class NoteRead(WireModel):
    id: str = PydField(alias="_id")
    title: str
    body: str
    tenant_id: str
    author_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_note(cls, note: Note) -> "NoteRead":
        return cls(
            id=note.id,
            title=note.title,
            body=note.body,
            tenant_id=note.tenant_id,
            author_id=note.author_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
