"""DXF format exporter for cabinet drawings.

Writes every view of a DrawingData into one DXF R2010 document in
millimeters. Views sit side by side on the x axis, each on its own layer;
dimension lines go to a shared DIMENSIONS layer as plain lines and text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from casework.domain.drawing import DrawingData, ManufacturingLayout
from casework.domain.value_objects import DimensionLine, Rect
from casework.infrastructure.exporters.base import ExporterRegistry
from casework.infrastructure.svg_renderer import VIEW_TITLES, Bounds

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from casework.application.dtos import GenerationOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output (ACI colors)
LAYERS: dict[str, int] = {
    "FRONT": 7,  # White - front elevation
    "SIDE": 4,  # Cyan - section
    "PLAN": 3,  # Green - top view
    "MANUFACTURING": 5,  # Blue - cut sheets
    "INSTALLATION": 6,  # Magenta - wall layout
    "DIMENSIONS": 1,  # Red - dimension lines and text
}

VIEW_LAYERS: dict[str, str] = {
    "front_view": "FRONT",
    "side_view": "SIDE",
    "plan_view": "PLAN",
    "manufacturing": "MANUFACTURING",
    "installation": "INSTALLATION",
}

# $INSUNITS code for millimeters
INSUNITS_MM = 4

VIEW_SPACING = 500.0
PANEL_SPACING = 100.0
TEXT_HEIGHT = 25.0
DIM_TEXT_HEIGHT = 18.0
HARDWARE_RADIUS = 8.0
UTILITY_RADIUS = 40.0


@dataclass(frozen=True)
class _Placement:
    """Translation of one view into the shared modelspace."""

    msp: Modelspace
    layer: str
    dx: float
    dy: float

    def rect(self, rect: Rect) -> None:
        x, y = rect.x + self.dx, rect.y + self.dy
        points = [
            (x, y),
            (x + rect.width, y),
            (x + rect.width, y + rect.height),
            (x, y + rect.height),
            (x, y),  # Close the polyline
        ]
        self.msp.add_lwpolyline(points, dxfattribs={"layer": self.layer})

    def line(self, x1: float, y1: float, x2: float, y2: float, layer: str | None = None) -> None:
        self.msp.add_line(
            (x1 + self.dx, y1 + self.dy),
            (x2 + self.dx, y2 + self.dy),
            dxfattribs={"layer": layer or self.layer},
        )

    def circle(self, x: float, y: float, radius: float) -> None:
        self.msp.add_circle((x + self.dx, y + self.dy), radius, dxfattribs={"layer": self.layer})

    def text(self, content: str, x: float, y: float, height: float, layer: str | None = None) -> None:
        self.msp.add_text(
            content,
            dxfattribs={
                "layer": layer or self.layer,
                "height": height,
                "insert": (x + self.dx, y + self.dy),
            },
        )

    def dimension(self, dim: DimensionLine) -> None:
        self.line(dim.start.x, dim.start.y, dim.end.x, dim.end.y, layer="DIMENSIONS")
        mid_x = (dim.start.x + dim.end.x) / 2
        mid_y = (dim.start.y + dim.end.y) / 2
        label = f"{dim.value:g}{dim.unit}"
        if dim.label:
            label = f"{dim.label} {label}"
        self.text(label, mid_x, mid_y, DIM_TEXT_HEIGHT, layer="DIMENSIONS")


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports all drawing views to one DXF document.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, view_spacing: float = VIEW_SPACING) -> None:
        self.view_spacing = view_spacing

    def export(self, output: GenerationOutput, path: Path) -> None:
        doc = self.build_document(output.drawing)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, output: GenerationOutput) -> str:
        """Export the drawing as DXF text."""
        doc = self.build_document(output.drawing)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, drawing: DrawingData) -> Drawing:
        """Create the DXF document with every view drawn into modelspace."""
        doc = self._create_document()
        msp = doc.modelspace()

        cursor = 0.0
        for view, bounds in self._views(drawing):
            placement = _Placement(
                msp=msp,
                layer=VIEW_LAYERS[view],
                dx=cursor - bounds.min_x,
                dy=-bounds.min_y,
            )
            self._draw_view(view, drawing, placement)
            placement.text(
                VIEW_TITLES[view],
                bounds.min_x,
                bounds.max_y + TEXT_HEIGHT * 2,
                TEXT_HEIGHT,
            )
            cursor += (bounds.max_x - bounds.min_x) + self.view_spacing

        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.header["$INSUNITS"] = INSUNITS_MM
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)
        return doc

    def _views(self, drawing: DrawingData) -> Iterable[tuple[str, Bounds]]:
        common = drawing.common
        front, side, plan = common.front_view, common.side_view, common.plan_view
        yield "front_view", Bounds.of(front.rects(), front.dimensions)
        yield "side_view", Bounds.of(side.rects(), side.dimensions)
        yield "plan_view", Bounds.of(plan.rects(), plan.dimensions)

        if drawing.manufacturing.panel_details:
            cell_w, cell_h = self._cell_size(drawing.manufacturing)
            layout = drawing.manufacturing
            yield "manufacturing", Bounds(0.0, 0.0, layout.columns * cell_w, layout.rows * cell_h)

        installation = drawing.installation
        if installation.wall.width > 0:
            yield "installation", Bounds.of(
                [installation.wall, *installation.equipment, *installation.clearance_zones]
            )

    def _draw_view(self, view: str, drawing: DrawingData, p: _Placement) -> None:
        common = drawing.common
        if view == "front_view":
            for rect in common.front_view.rects():
                p.rect(rect)
            for point in common.front_view.hardware:
                p.circle(point.x, point.y, HARDWARE_RADIUS)
            for dim in common.front_view.dimensions:
                p.dimension(dim)
        elif view == "side_view":
            for rect in common.side_view.rects():
                p.rect(rect)
            for dim in common.side_view.dimensions:
                p.dimension(dim)
        elif view == "plan_view":
            for rect in common.plan_view.rects():
                p.rect(rect)
            for dim in common.plan_view.dimensions:
                p.dimension(dim)
        elif view == "manufacturing":
            self._draw_manufacturing(drawing.manufacturing, p)
        elif view == "installation":
            self._draw_installation(drawing, p)

    def _cell_size(self, layout: ManufacturingLayout) -> tuple[float, float]:
        """Grid cell large enough for the biggest part, in real millimeters."""
        width = max(d.rect.width for d in layout.panel_details) + PANEL_SPACING
        height = max(d.rect.height for d in layout.panel_details) + PANEL_SPACING * 2
        return width, height

    def _draw_manufacturing(self, layout: ManufacturingLayout, p: _Placement) -> None:
        cell_w, cell_h = self._cell_size(layout)
        rows = layout.rows
        for detail in layout.panel_details:
            # First row at the top, rows run downward.
            origin_x = detail.column * cell_w
            origin_y = (rows - 1 - detail.row) * cell_h + PANEL_SPACING
            cell = _Placement(p.msp, p.layer, p.dx + origin_x, p.dy + origin_y)
            cell.rect(detail.rect)
            for line in detail.edge_banding:
                cell.line(line.x1, line.y1, line.x2, line.y2)
            for dim in detail.dimensions:
                cell.dimension(dim)
            cell.text(
                f"{detail.name} [{detail.bom_id}]",
                0,
                detail.rect.height + TEXT_HEIGHT,
                DIM_TEXT_HEIGHT,
            )

    def _draw_installation(self, drawing: DrawingData, p: _Placement) -> None:
        layout = drawing.installation
        wall = layout.wall
        p.rect(wall)

        grid = layout.tile_grid
        if grid is not None:
            for c in range(grid.cols + 1):
                x = min(grid.origin.x + c * grid.tile_w, wall.right)
                p.line(x, wall.y, x, wall.top)
            for r in range(grid.rows + 1):
                y = min(grid.origin.y + r * grid.tile_h, wall.top)
                p.line(wall.x, y, wall.right, y)

        for zone in layout.clearance_zones:
            p.rect(zone)
        for zone in layout.equipment:
            p.rect(zone)
            p.text(zone.label, zone.x, zone.y + zone.height / 2, DIM_TEXT_HEIGHT)
        for mark in layout.utilities:
            p.circle(mark.x, mark.y, UTILITY_RADIUS)
            p.text(mark.label, mark.x - UTILITY_RADIUS, mark.y - UTILITY_RADIUS * 2, DIM_TEXT_HEIGHT)
