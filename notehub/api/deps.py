"""FastAPI dependencies for storage, authentication and authorization."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from notehub.services.identity import CurrentUser, require_admin, resolve_identity
from notehub.storage import Storage, get_storage

# auto_error=False so a missing header yields our own 401 body.
bearer_scheme = HTTPBearer(auto_error=False)

Store = Annotated[Storage, Depends(get_storage)]


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    storage: Store,
) -> CurrentUser:
    """Resolve ``Authorization: Bearer <token>`` to the caller's identity."""
    token = credentials.credentials if credentials else None
    return await resolve_identity(token, storage)


async def get_admin_user(
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    return require_admin(user)


# Typed shorthand for use in route signatures
Auth = Annotated[CurrentUser, Depends(get_current_user)]
Admin = Annotated[CurrentUser, Depends(get_admin_user)]
