"""Domain services: BOM and drawing generation."""

from .bom_generator import BomGenerator, generate_bom
from .drawing_generator import DrawingGenerator, generate_drawing

__all__ = [
    "BomGenerator",
    "DrawingGenerator",
    "generate_bom",
    "generate_drawing",
]
