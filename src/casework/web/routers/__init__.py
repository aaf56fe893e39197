"""API routers for the REST API."""

from casework.web.routers.bom import router as bom_router
from casework.web.routers.drawing import router as drawing_router
from casework.web.routers.export import router as export_router
from casework.web.routers.rules import router as rules_router

__all__ = [
    "bom_router",
    "drawing_router",
    "export_router",
    "rules_router",
]
