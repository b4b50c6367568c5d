"""Services package."""

from ptcoach.services.auth_service import AuthService
from ptcoach.services.readiness_store import ReadinessStore
from ptcoach.services.readiness_service import ReadinessService

__all__ = [
    "AuthService",
    "ReadinessStore",
    "ReadinessService",
]
