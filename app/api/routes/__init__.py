"""API routes. Everything except login and health requires a bearer token."""

from fastapi import APIRouter, Depends

from app.api.routes import auth, categories, health, roles, tools
from app.api.routes.auth import get_current_user

protected = [Depends(get_current_user)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(
    categories.router, prefix="/categories", tags=["categories"], dependencies=protected
)
router.include_router(roles.router, prefix="/roles", tags=["roles"], dependencies=protected)
router.include_router(tools.router, prefix="/tools", tags=["tools"], dependencies=protected)
