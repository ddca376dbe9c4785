"""User model — belongs to exactly one tenant."""

from enum import StrEnum

from sqlmodel import Field, SQLModel

from notehub.models.base import TimestampMixin, new_id


class UserRole(StrEnum):
    ADMIN = "Admin"
    MEMBER = "Member"


class User(TimestampMixin, SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    tenant_id: str = Field(foreign_key="tenants.id", nullable=False, index=True, max_length=36)
    email: str = Field(max_length=320, unique=True, nullable=False, index=True)
    password_hash: str = Field(nullable=False)
    role: UserRole = Field(default=UserRole.MEMBER)


class UserCreate(SQLModel):
    """Storage-level input: the password is already hashed."""

    email: str = Field(max_length=320)
    password_hash: str
    role: UserRole = UserRole.MEMBER
    tenant_id: str
