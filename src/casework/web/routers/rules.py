"""Manufacturing rules endpoints."""

from typing import Any

from fastapi import APIRouter

from casework.web.dependencies import RuleStoreDep
from casework.web.schemas.requests import RulesUpdateRequest
from casework.web.schemas.responses import ErrorResponseSchema

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", responses={400: {"model": ErrorResponseSchema}})
async def get_rules(store: RuleStoreDep, section: str | None = None) -> dict[str, Any]:
    """Return the effective rules, or one top-level section."""
    if section is not None:
        return store.get_section(section)
    return store.get().to_dict()


@router.patch("", responses={400: {"model": ErrorResponseSchema}})
async def update_rules(request: RulesUpdateRequest, store: RuleStoreDep) -> dict[str, Any]:
    """Deep-merge a partial rules tree, validate, save and return the result."""
    return store.update(request.updates, section=request.section).to_dict()


@router.post("/reset")
async def reset_rules(store: RuleStoreDep) -> dict[str, Any]:
    """Restore and persist the built-in defaults."""
    return store.reset().to_dict()


@router.post("/reload")
async def reload_rules(store: RuleStoreDep) -> dict[str, Any]:
    """Re-read the rules document from disk."""
    return store.reload().to_dict()
