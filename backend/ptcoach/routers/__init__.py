"""Routers package."""

from ptcoach.routers.auth import router as auth_router
from ptcoach.routers.clients import router as clients_router
from ptcoach.routers.readiness import router as readiness_router

__all__ = [
    "auth_router",
    "clients_router",
    "readiness_router",
]
