"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from casework.application import GenerationOptions
from casework.infrastructure.exporters import ExporterRegistry
from casework.web.dependencies import GenerateCommandDep, parse_design
from casework.web.schemas.requests import ExportRequest
from casework.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "txt": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
    "svg": "image/svg+xml",
    "dxf": "application/dxf",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={400: {"model": ErrorResponseSchema}, 422: {"model": ErrorResponseSchema}},
)
async def export_format(
    format_name: str,
    request: ExportRequest,
    command: GenerateCommandDep,
) -> Response:
    """Export a design to one format and return the file content.

    Unknown formats are rejected before the design is processed.
    """
    exporter_class = ExporterRegistry.get(format_name)
    if format_name == "bom":
        exporter = exporter_class(output_format=request.bom_format)  # type: ignore[call-arg]
    else:
        exporter = exporter_class()

    output = command.execute(
        parse_design(request.design),
        GenerationOptions(render_svg=format_name == "svg"),
    )
    content = exporter.export_string(output)

    extension = exporter.file_extension
    filename = f"{request.project_name}_{format_name}.{extension}"
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(extension, "application/octet-stream"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
