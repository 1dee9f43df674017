"""
Base Schemas

Response envelope shared by all endpoints: {message, data, proofs}.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class Proofs(BaseModel):
    """
    Tracing information included in every response.

    - trace_id: Request trace ID (from x-request-id or generated)
    - algorithm: Algorithm identifier (e.g., "jaccard_weighted_scoring")
    - latency_ms: Optional computation time
    """
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    algorithm: Optional[str] = Field(None, description="Algorithm identifier")
    latency_ms: Optional[float] = Field(None, description="Computation time in milliseconds")

    model_config = ConfigDict(extra="allow")


class ApiResponse(BaseModel):
    """Standard response structure."""
    message: str = Field(..., description="Human-readable summary")
    data: Optional[Dict[str, Any]] = Field(None, description="Response payload")
    proofs: Optional[Proofs] = Field(None, description="Tracing information")

    model_config = ConfigDict(extra="allow")
