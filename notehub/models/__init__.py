"""Import all models so SQLModel.metadata picks them up."""

from notehub.models.note import Note, NoteCreate, NoteRead, NoteRecord, NoteUpdate
from notehub.models.tenant import Tenant, TenantCreate, TenantPlan, TenantRead, TenantSummary
from notehub.models.user import User, UserCreate, UserRole

__all__ = [
    "Note",
    "NoteCreate",
    "NoteRead",
    "NoteRecord",
    "NoteUpdate",
    "Tenant",
    "TenantCreate",
    "TenantPlan",
    "TenantRead",
    "TenantSummary",
    "User",
    "UserCreate",
    "UserRole",
]
