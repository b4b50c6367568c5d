"""
Custom exceptions for the PT Coach backend.

Each exception carries a human-readable message, an error code for API
responses, the HTTP status it maps to and optional details. Routers and
services raise these; the handlers in ``exception_handlers`` turn them into
JSON error responses.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class PTCoachError(Exception):
    """
    Base exception for all PT Coach errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class InvalidInput(PTCoachError):
    """Raised when wellness inputs or query parameters fail validation."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = dict(details or {})
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            status_code=422,
            details=error_details,
        )


class NotFound(PTCoachError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = dict(details or {})
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=f"{resource_type} not found",
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=error_details,
        )


class ConflictError(PTCoachError):
    """Raised when there's a resource conflict."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFLICT,
            status_code=409,
            details=details,
        )


class AuthenticationError(PTCoachError):
    """Raised when a request carries no valid trainer credentials."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(
            message=message,
            code=ErrorCode.UNAUTHORIZED,
            status_code=401,
        )


class StorageFailure(PTCoachError):
    """Raised when the persistence layer fails to store or query records."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        operation: Optional[str] = None,
    ) -> None:
        details = {"operation": operation} if operation else None
        super().__init__(
            message=message,
            code=ErrorCode.STORAGE_FAILURE,
            status_code=500,
            details=details,
        )
