"""
Pet Store API Exceptions

Structured error handling for upstream and token operations, plus the
standardized JSON error body returned by every route.
"""

import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

SERVICE_NAME = "petstore-api"


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    UPSTREAM_AUTH_FAILED = "UPSTREAM_AUTH_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    SERVICE_UPSTREAM_ERROR = "SERVICE_UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIError(BaseModel):
    """Standardized API error response model.

    Attributes:
        error_code: Machine-readable error code from ErrorCode enum.
        message: Human-readable error description.
        details: Optional additional context (upstream status, ids, etc.).
        request_id: Unique identifier for request tracing.
        service: Name of service that generated the error.
    """

    error_code: str = Field(..., description="Machine-readable error code", examples=["RESOURCE_NOT_FOUND"])
    message: str = Field(..., description="Human-readable error message", examples=["Pet with ID '42' not found"])
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
    request_id: str = Field(
        default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}",
        description="Unique request identifier for tracing",
    )
    service: str = Field(default=SERVICE_NAME, description="Service that generated the error")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error_code": "RESOURCE_NOT_FOUND",
                "message": "Pet with ID '42' not found",
                "details": {"resource": "Pet", "resource_id": "42"},
                "request_id": "req_abc123def456",
                "service": SERVICE_NAME,
            }
        }
    }


class PetstoreError(Exception):
    """Base error with status code support."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_error(self) -> APIError:
        """Convert to the structured error body."""
        return APIError(
            error_code=self.error_code.value,
            message=self.message,
            details=self.details or None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return self.to_error().model_dump()


class AuthenticationError(PetstoreError):
    """Client-credentials token exchange failed."""

    error_code = ErrorCode.AUTHENTICATION_FAILED


class UpstreamAuthError(PetstoreError):
    """Upstream rejected the request twice, even after re-authenticating."""

    error_code = ErrorCode.UPSTREAM_AUTH_FAILED


class UpstreamError(PetstoreError):
    """Upstream returned a non-2xx status or could not be reached."""

    error_code = ErrorCode.SERVICE_UPSTREAM_ERROR

    def __init__(self, message: str, upstream_status: int | None = None, details: dict[str, Any] | None = None):
        super().__init__(message, details={"upstream_status": upstream_status, **(details or {})})
        self.upstream_status = upstream_status


class NotFoundError(PetstoreError):
    """Requested resource is absent upstream."""

    status_code = 404
    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            message=f"{resource} with ID '{resource_id}' not found",
            details={"resource": resource, "resource_id": str(resource_id)},
        )
        self.resource = resource
        self.resource_id = resource_id
