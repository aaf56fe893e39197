"""2D drawing coordinate model.

Every view is expressed in millimeters in the architectural frame. The
renderer is responsible for scaling and for flipping y where needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .value_objects import (
    CabinetType,
    DimensionLine,
    EquipmentKind,
    HardwareKind,
    Line,
    Point,
    Rect,
    UtilityKind,
)


def _rect_or_none(rect: Rect | None) -> dict[str, Any] | None:
    return rect.to_dict() if rect is not None else None


@dataclass(frozen=True)
class CabinetRect(Rect):
    """Outline of one cabinet on the front view."""

    ref: str
    type: CabinetType

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "ref": self.ref, "type": self.type.value}


@dataclass(frozen=True)
class DoorRect(Rect):
    """One door leaf or drawer front on the front view."""

    ref: str
    door_index: int
    is_drawer: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "ref": self.ref,
            "door_index": self.door_index,
            "is_drawer": self.is_drawer,
        }


@dataclass(frozen=True)
class HardwarePoint:
    x: float
    y: float
    type: HardwareKind
    ref: str

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "type": self.type.value, "ref": self.ref}


@dataclass(frozen=True)
class PanelRect(Rect):
    """A carcass board seen in cross-section."""

    name: str
    thickness: float
    material: str

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "name": self.name,
            "thickness": self.thickness,
            "material": self.material,
        }


@dataclass(frozen=True)
class FrontView:
    cabinets: tuple[CabinetRect, ...] = ()
    doors: tuple[DoorRect, ...] = ()
    hardware: tuple[HardwarePoint, ...] = ()
    countertop: Rect | None = None
    molding: Rect | None = None
    baseboard: Rect | None = None
    dimensions: tuple[DimensionLine, ...] = ()

    def rects(self) -> list[Rect]:
        """Every rectangle on the view, outlines first."""
        extras = [r for r in (self.countertop, self.molding, self.baseboard) if r is not None]
        return [*self.cabinets, *self.doors, *extras]

    def to_dict(self) -> dict[str, Any]:
        return {
            "cabinets": [c.to_dict() for c in self.cabinets],
            "doors": [d.to_dict() for d in self.doors],
            "hardware": [h.to_dict() for h in self.hardware],
            "countertop": _rect_or_none(self.countertop),
            "molding": _rect_or_none(self.molding),
            "baseboard": _rect_or_none(self.baseboard),
            "dimensions": [d.to_dict() for d in self.dimensions],
        }


@dataclass(frozen=True)
class SideView:
    outer: Rect
    panels: tuple[PanelRect, ...] = ()
    countertop: Rect | None = None
    dimensions: tuple[DimensionLine, ...] = ()

    def rects(self) -> list[Rect]:
        extras = [self.countertop] if self.countertop is not None else []
        return [self.outer, *self.panels, *extras]

    def to_dict(self) -> dict[str, Any]:
        return {
            "outer": self.outer.to_dict(),
            "panels": [p.to_dict() for p in self.panels],
            "countertop": _rect_or_none(self.countertop),
            "dimensions": [d.to_dict() for d in self.dimensions],
        }


@dataclass(frozen=True)
class PlanView:
    lower_cabinets: tuple[Rect, ...] = ()
    upper_cabinets: tuple[Rect, ...] = ()
    countertop: Rect | None = None
    dimensions: tuple[DimensionLine, ...] = ()

    def rects(self) -> list[Rect]:
        extras = [self.countertop] if self.countertop is not None else []
        return [*self.lower_cabinets, *self.upper_cabinets, *extras]

    def to_dict(self) -> dict[str, Any]:
        return {
            "lower_cabinets": [r.to_dict() for r in self.lower_cabinets],
            "upper_cabinets": [r.to_dict() for r in self.upper_cabinets],
            "countertop": _rect_or_none(self.countertop),
            "dimensions": [d.to_dict() for d in self.dimensions],
        }


@dataclass(frozen=True)
class CommonViews:
    front_view: FrontView
    side_view: SideView
    plan_view: PlanView

    def to_dict(self) -> dict[str, Any]:
        return {
            "front_view": self.front_view.to_dict(),
            "side_view": self.side_view.to_dict(),
            "plan_view": self.plan_view.to_dict(),
        }


@dataclass(frozen=True)
class PanelDetail:
    """Cut-sheet entry for one sheet part of the BOM.

    ``column`` and ``row`` give the cell of the presentation grid; ``rect``
    is the part itself at the origin of its cell.
    """

    bom_id: str
    name: str
    material: str
    rect: Rect
    dimensions: tuple[DimensionLine, ...]
    column: int
    row: int
    edge_banding: tuple[Line, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "bom_id": self.bom_id,
            "name": self.name,
            "material": self.material,
            "rect": self.rect.to_dict(),
            "dimensions": [d.to_dict() for d in self.dimensions],
            "column": self.column,
            "row": self.row,
            "edge_banding": [line.to_dict() for line in self.edge_banding],
        }


@dataclass(frozen=True)
class BomReference:
    rect_ref: str
    bom_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"rect_ref": self.rect_ref, "bom_id": self.bom_id}


@dataclass(frozen=True)
class ManufacturingLayout:
    panel_details: tuple[PanelDetail, ...] = ()
    bom_references: tuple[BomReference, ...] = ()
    columns: int = 3
    cell_width: float = 300.0
    cell_height: float = 250.0

    @property
    def rows(self) -> int:
        return -(-len(self.panel_details) // self.columns)

    @property
    def edge_banding_marks(self) -> list[Line]:
        return [line for detail in self.panel_details for line in detail.edge_banding]

    def to_dict(self) -> dict[str, Any]:
        return {
            "panel_details": [p.to_dict() for p in self.panel_details],
            "edge_banding_marks": [line.to_dict() for line in self.edge_banding_marks],
            "bom_references": [r.to_dict() for r in self.bom_references],
            "columns": self.columns,
            "cell_width": self.cell_width,
            "cell_height": self.cell_height,
        }


@dataclass(frozen=True)
class TileGrid:
    origin: Point
    tile_w: float
    tile_h: float
    cols: int
    rows: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin": self.origin.to_dict(),
            "tile_w": self.tile_w,
            "tile_h": self.tile_h,
            "cols": self.cols,
            "rows": self.rows,
        }


@dataclass(frozen=True)
class UtilityMark:
    x: float
    y: float
    type: UtilityKind
    label: str

    @property
    def glyph(self) -> str:
        return self.type.value[0].upper()

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "type": self.type.value, "label": self.label}


@dataclass(frozen=True)
class EquipmentZone(Rect):
    type: EquipmentKind
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "type": self.type.value, "label": self.label}


@dataclass(frozen=True)
class InstallationLayout:
    wall: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    tile_grid: TileGrid | None = None
    utilities: tuple[UtilityMark, ...] = ()
    equipment: tuple[EquipmentZone, ...] = ()
    clearance_zones: tuple[Rect, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "wall": self.wall.to_dict(),
            "utilities": [u.to_dict() for u in self.utilities],
            "equipment": [e.to_dict() for e in self.equipment],
            "clearance_zones": [z.to_dict() for z in self.clearance_zones],
        }
        if self.tile_grid is not None:
            data["tile_grid"] = self.tile_grid.to_dict()
        return data


@dataclass(frozen=True)
class DrawingMetadata:
    category: str
    style: str
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "style": self.style,
            "generated_at": self.generated_at,
        }


@dataclass(frozen=True)
class DrawingData:
    common: CommonViews
    manufacturing: ManufacturingLayout
    installation: InstallationLayout
    metadata: DrawingMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "common": self.common.to_dict(),
            "manufacturing": self.manufacturing.to_dict(),
            "installation": self.installation.to_dict(),
            "metadata": self.metadata.to_dict(),
        }
