"""
Pydantic response schemas for API endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field


class RecordListResponse(BaseModel):
    """All records of one kind, in ascending key order."""

    entity_type: str
    total: int
    items: list[dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="healthy or unhealthy")
    version: str
    store_backend: str
    timestamp: str


class ErrorDetail(BaseModel):
    type: str
    message: str
    detail: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: ErrorDetail
