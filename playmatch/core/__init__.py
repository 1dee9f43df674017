"""
Core Package

Centralized configuration, logging and error handling for the
match-proposal service.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Standardized error classes and HTTP conversion

Usage:
    from playmatch.core import settings, setup_logging, set_trace_id
    from playmatch.core import ValidationError
"""

# Configuration
from playmatch.core.config import settings, get_settings

# Logging
from playmatch.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id
)

# Errors
from playmatch.core.errors import (
    AppError,
    ValidationError,
    InternalError,
    error_payload,
    to_http_exception
)

__all__ = [
    # Config
    "settings",
    "get_settings",

    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",

    # Errors
    "AppError",
    "ValidationError",
    "InternalError",
    "error_payload",
    "to_http_exception",
]
