"""Standardized error response schema."""

from uuid import UUID

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error body for structured errors (4xx/5xx)."""

    name: str = Field(..., description="Error class name")
    message: str = Field(..., description="Human-readable error message")
    action: str = Field(..., description="What the client can do about it")
    status_code: int = Field(..., description="HTTP status code")
    request_id: UUID = Field(..., description="Correlation id of the request")
    error_id: UUID = Field(..., description="Correlation id of this error occurrence")
    error_location_code: str = Field(..., description="Machine-readable origin of the error")
    key: str | None = Field(default=None, description="Offending field, for validation errors")
