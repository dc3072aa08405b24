"""API routers for the backend service."""

from fastapi import APIRouter

from .routes import health_router, status_router
from .v1 import extract

api_router = APIRouter()
api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(status_router, prefix="", tags=["health"])
api_router.include_router(extract.router, prefix="", tags=["extraction"])

__all__ = ["api_router"]
