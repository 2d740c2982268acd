# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .organization_requests import router as organization_requests_router
from .auto_reply import router as auto_reply_router
from .health import router as health_router


# Master router included by main.create_app()
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(organization_requests_router)
api_router.include_router(auto_reply_router)
api_router.include_router(health_router)

__all__ = ["api_router"]
