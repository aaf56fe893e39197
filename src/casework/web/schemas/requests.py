"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DrawingRequest(BaseModel):
    """Request for generating the drawing model."""

    design: dict[str, Any] = Field(..., description="Design document JSON")
    include_manufacturing: bool = Field(
        default=True, description="Build the per-panel manufacturing layout"
    )
    include_installation: bool = Field(
        default=True, description="Build the wall installation layout"
    )


class SvgRequest(BaseModel):
    """Request for rendering drawing views to SVG."""

    design: dict[str, Any] = Field(..., description="Design document JSON")
    scale: float = Field(default=0.5, ge=0.1, le=2.0, description="Pixels per millimeter")
    views: list[str] | None = Field(
        default=None, description="Views to render; all views when omitted"
    )


class RulesUpdateRequest(BaseModel):
    """Partial rules tree to deep-merge into the current rules."""

    updates: dict[str, Any] = Field(..., description="Partial rules tree or section")
    section: str | None = Field(
        default=None, description="Top-level section the updates apply to"
    )


class ExportRequest(BaseModel):
    """Request for exporting a design to one file format."""

    design: dict[str, Any] = Field(..., description="Design document JSON")
    project_name: str = Field(
        default="casework", min_length=1, description="Base name of the file"
    )
    bom_format: str = Field(
        default="text", pattern="^(text|csv|json)$", description="Layout of the bom format"
    )
