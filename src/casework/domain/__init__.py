"""Domain layer - core business logic."""

from .bom import BomItem, BomResult, BomSummary
from .drawing import DrawingData
from .entities import CabinetRows, CabinetUnit, StructuredDesignData
from .rules import DEFAULT_BOM_RULES, BomRules
from .services import BomGenerator, DrawingGenerator, generate_bom, generate_drawing
from .value_objects import (
    CabinetType,
    Category,
    DimensionLine,
    Line,
    PartCategory,
    Point,
    Rect,
    Tier,
    round_half_up,
)

__all__ = [
    "BomGenerator",
    "BomItem",
    "BomResult",
    "BomRules",
    "BomSummary",
    "CabinetRows",
    "CabinetType",
    "CabinetUnit",
    "Category",
    "DEFAULT_BOM_RULES",
    "DimensionLine",
    "DrawingData",
    "DrawingGenerator",
    "Line",
    "PartCategory",
    "Point",
    "Rect",
    "StructuredDesignData",
    "Tier",
    "generate_bom",
    "generate_drawing",
    "round_half_up",
]
