"""Application layer - use cases, configuration and service wiring."""

from .commands import GenerateDrawingCommand
from .dtos import VIEW_NAMES, GenerationOptions, GenerationOutput, normalize_view_name
from .factory import ServiceFactory, get_factory

__all__ = [
    "GenerateDrawingCommand",
    "GenerationOptions",
    "GenerationOutput",
    "ServiceFactory",
    "VIEW_NAMES",
    "get_factory",
    "normalize_view_name",
]
