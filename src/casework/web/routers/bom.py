"""Bill of materials endpoint."""

from typing import Any

from fastapi import APIRouter, Body

from casework.application import GenerationOptions
from casework.web.dependencies import GenerateCommandDep, parse_design
from casework.web.schemas.responses import ErrorResponseSchema

router = APIRouter(prefix="/bom", tags=["bom"])


@router.post("", responses={422: {"model": ErrorResponseSchema}})
async def generate_bom(
    command: GenerateCommandDep,
    design: dict[str, Any] = Body(..., description="Design document JSON"),
) -> dict[str, Any]:
    """Generate the bill of materials for a design document."""
    output = command.execute(
        parse_design(design),
        GenerationOptions(include_manufacturing=False, include_installation=False),
    )
    return output.bom.to_dict()
