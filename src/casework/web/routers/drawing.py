"""Drawing model and SVG rendering endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException

from casework.application import GenerationOptions
from casework.web.dependencies import GenerateCommandDep, parse_design
from casework.web.schemas.requests import DrawingRequest, SvgRequest
from casework.web.schemas.responses import ErrorResponseSchema

router = APIRouter(tags=["drawing"])


@router.post("/drawing", responses={422: {"model": ErrorResponseSchema}})
async def generate_drawing(
    request: DrawingRequest,
    command: GenerateCommandDep,
) -> dict[str, Any]:
    """Generate the 2D drawing model for a design."""
    output = command.execute(
        parse_design(request.design),
        GenerationOptions(
            include_manufacturing=request.include_manufacturing,
            include_installation=request.include_installation,
        ),
    )
    return output.drawing.to_dict()


@router.post("/svg", responses={422: {"model": ErrorResponseSchema}})
async def render_svg(
    request: SvgRequest,
    command: GenerateCommandDep,
) -> dict[str, str]:
    """Render the drawing views of a design; unrequested views are empty."""
    design = parse_design(request.design)
    options = GenerationOptions(
        render_svg=True,
        scale=request.scale,
        views=tuple(request.views) if request.views is not None else None,
    )
    try:
        output = command.execute(design, options)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_options"},
        ) from e
    return output.svgs
