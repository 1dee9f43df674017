"""
Core Errors Module

Standardized error classes for the HTTP boundary of the match-proposal service.

The matching engine itself never raises: degenerate inputs map to defined
scores. These errors are raised by the API layer when a request cannot be
turned into well-formed engine input.

Usage:
    from playmatch.core.errors import ValidationError, error_payload

    raise ValidationError("limit must be positive", details={"field": "limit"})
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base application error class.

    Attributes:
        code: Error code (e.g., "validation_error", "internal_error")
        message: Human-readable error message
        details: Optional additional error context
        status_code: HTTP status code for this error type
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON responses.

        Args:
            trace_id: Optional request trace ID

        Returns:
            Error dict with code, message, details, trace_id
        """
        return error_payload(self.code, self.message, self.details, trace_id)


# ==================== Specific Error Classes ====================

class ValidationError(AppError):
    """Validation error (400 Bad Request)."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="validation_error",
            details=details,
            status_code=400
        )


class InternalError(AppError):
    """
    Internal server error (500 Internal Server Error).

    Raised for unexpected errors that don't fit other categories.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="internal_error",
            details=details,
            status_code=500
        )


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized error payload dict.

    Example:
        >>> payload = error_payload("bad_request", "Invalid input", trace_id="abc123")
        >>> payload["code"]
        'bad_request'
    """
    result = {
        "code": code,
        "message": message,
    }

    if details:
        result["details"] = details

    if trace_id:
        result["trace_id"] = trace_id

    return result


def to_http_exception(error: AppError):
    """
    Convert AppError to FastAPI HTTPException.

    Args:
        error: AppError to convert

    Returns:
        HTTPException instance carrying the error dict as detail
    """
    from fastapi import HTTPException
    from playmatch.core.logging import get_trace_id

    trace_id = get_trace_id()
    if trace_id == "-":
        trace_id = None

    if error.status_code >= 500:
        logger.error(f"{error.code}: {error.message}")

    return HTTPException(
        status_code=error.status_code,
        detail=error.to_dict(trace_id=trace_id)
    )
