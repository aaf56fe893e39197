"""Pydantic schemas for the REST API."""

from casework.web.schemas.requests import (
    DrawingRequest,
    ExportRequest,
    RulesUpdateRequest,
    SvgRequest,
)
from casework.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

__all__ = [
    # Requests
    "DrawingRequest",
    "ExportRequest",
    "RulesUpdateRequest",
    "SvgRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
]
