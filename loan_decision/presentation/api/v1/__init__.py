"""Version 1 of the HTTP API."""

from fastapi import APIRouter

from .decision import decision_router
from .health import health_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(health_router, tags=["Health"])
v1_router.include_router(decision_router, tags=["Decisions"])

__all__ = ["v1_router"]
