"""Authentication endpoints — signup, login, demo seed, current user."""

from typing import Annotated

from fastapi import APIRouter, Response, status
from pydantic import EmailStr, Field, StringConstraints

from notehub.api.deps import Auth, Store
from notehub.models.base import MessageResponse, WireModel
from notehub.models.tenant import TenantSummary
from notehub.models.user import UserRole
from notehub.services import accounts
from notehub.services.seed import seed_demo_data

router = APIRouter(prefix="/auth", tags=["auth"])


# ── Schemas ──────────────────────────────────────────────────

class SignupRequest(WireModel):
    email: EmailStr
    password: str = Field(min_length=6)
    organization_name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
    ]


class LoginRequest(WireModel):
    # Plain lookup key; format is enforced at signup.
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserEnvelope(WireModel):
    id: str = Field(alias="_id")
    email: str
    role: UserRole
    tenant: TenantSummary


class AuthResponse(WireModel):
    token: str
    user: UserEnvelope


def _auth_response(result: accounts.AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        user=UserEnvelope(
            id=result.user.id,
            email=result.user.email,
            role=result.user.role,
            tenant=TenantSummary.from_tenant(result.tenant),
        ),
    )


# ── Routes ───────────────────────────────────────────────────

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, storage: Store) -> AuthResponse:
    """Register an organization and its first (admin) user."""
    result = await accounts.signup(
        storage,
        email=body.email,
        password=body.password,
        organization_name=body.organization_name,
    )
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, storage: Store) -> AuthResponse:
    """Authenticate with email + password, receive a JWT."""
    result = await accounts.login(storage, email=body.email, password=body.password)
    return _auth_response(result)


@router.post("/seed", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def seed(storage: Store, response: Response) -> MessageResponse:
    """Create the demo tenants and users (development only)."""
    if not await seed_demo_data(storage):
        response.status_code = status.HTTP_200_OK
        return MessageResponse(message="Seed data already exists")
    return MessageResponse(message="Seed data created successfully")


@router.get("/me", response_model=UserEnvelope)
async def get_me(auth: Auth) -> UserEnvelope:
    """Return the caller as resolved from their token."""
    return UserEnvelope(
        id=auth.id,
        email=auth.email,
        role=auth.role,
        tenant=auth.tenant,
    )
