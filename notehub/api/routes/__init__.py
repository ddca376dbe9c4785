"""API router aggregation."""

from fastapi import APIRouter

from notehub.api.routes.auth import router as auth_router
from notehub.api.routes.notes import router as notes_router
from notehub.api.routes.system import router as system_router
from notehub.api.routes.tenants import router as tenants_router

api_router = APIRouter(prefix="/api")
api_router.include_router(system_router)
api_router.include_router(auth_router)
api_router.include_router(notes_router)
api_router.include_router(tenants_router)
