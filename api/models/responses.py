"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""
    
    ok: bool = True
    service: str = "sslserver-api"
    version: str = "v1"


class ErrorDetail(BaseModel):
    """Error detail inside an error response."""
    
    code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error envelope returned by the exception handlers."""
    
    ok: bool = False
    error: ErrorDetail
