"""
Shared helpers for API routers.
"""

import uuid
from typing import Dict, Any, Optional

from fastapi import Request

from playmatch.core.logging import set_trace_id


def get_trace_id(request: Request) -> str:
    """Extract or generate trace ID from request and bind it to the logging context."""
    trace_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    set_trace_id(trace_id)
    return trace_id


def standard_response(
    message: str,
    data: Optional[Dict[str, Any]] = None,
    proofs: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """Build standard response format."""
    return {
        "message": message,
        "data": data or {},
        "proofs": proofs or {"trace_id": trace_id}
    }
