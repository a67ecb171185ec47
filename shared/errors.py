"""
Shared error handling for the Photo Gateway.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class GatewayException(Exception):
    """Base exception for the Photo Gateway."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class CacheBackendError(GatewayException):
    """Cache store errors (connection, timeout, malformed payload)."""

    def __init__(self, message: str = "Cache backend error", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_BACKEND_ERROR", message, details)


class UpstreamError(GatewayException):
    """Upstream API errors."""

    def __init__(self, service: str, message: str = "Upstream service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("UPSTREAM_ERROR", f"{service}: {message}", details)


class StartupError(GatewayException):
    """Fatal errors raised while the service is starting."""

    def __init__(self, message: str = "Service startup failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("STARTUP_ERROR", message, details)
