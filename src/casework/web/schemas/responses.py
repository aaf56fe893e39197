"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
