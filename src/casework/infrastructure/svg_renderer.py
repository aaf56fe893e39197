"""SVG rendering of drawing data.

Each view of a ``DrawingData`` becomes one self-contained SVG document.
Drawing coordinates are millimeters with y pointing up, so every view except
the plan view is flipped vertically on the way to screen coordinates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from xml.sax.saxutils import escape

from casework.application.dtos import VIEW_NAMES, normalize_view_name
from casework.domain.drawing import (
    DrawingData,
    FrontView,
    HardwarePoint,
    InstallationLayout,
    ManufacturingLayout,
    PanelDetail,
    PlanView,
    SideView,
    UtilityMark,
)
from casework.domain.value_objects import (
    DimensionLine,
    HardwareKind,
    Rect,
    horizontal_dimension,
    round_half_up,
    vertical_dimension,
)

logger = logging.getLogger(__name__)

PADDING = 120.0
DEFAULT_SCALE = 0.5
FONT_SIZE = 11
DIM_FONT_SIZE = 9
ARROW_SIZE = 6.0
TITLE_BAND = 30.0

COLORS: dict[str, str] = {
    "cabinet": "#E0E0E0",
    "cabinet_stroke": "#333",
    "door": "#F5F5F5",
    "door_stroke": "#666",
    "drawer": "#EFEFEF",
    "countertop": "#B0BEC5",
    "molding": "#8D6E63",
    "baseboard": "#9E9E9E",
    "hinge": "#FF5722",
    "handle": "#2196F3",
    "rail": "#4CAF50",
    "panel_pb": "#D7CCC8",
    "panel_mdf": "#BCAAA4",
    "dimension": "#E53935",
    "dim_text": "#B71C1C",
    "wall": "#FAFAFA",
    "wall_stroke": "#424242",
    "tile_grid": "#E0E0E0",
    "water": "#2196F3",
    "exhaust": "#78909C",
    "gas": "#FF9800",
    "equipment": "#CE93D8",
    "equipment_stroke": "#7B1FA2",
    "clearance": "#A5D6A7",
    "edge_band": "#F44336",
    "upper_dash": "#90CAF9",
    "title": "#212121",
}

VIEW_TITLES: dict[str, str] = {
    "front_view": "Front View",
    "side_view": "Side View",
    "plan_view": "Plan View",
    "manufacturing": "Manufacturing",
    "installation": "Installation",
}


def fmt(value: float) -> str:
    """Format a coordinate with at most one decimal.

    Examples:
        >>> fmt(12.0)
        '12'
        >>> fmt(12.25)
        '12.3'
    """
    rounded = round_half_up(value * 10) / 10
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def escape_text(text: str) -> str:
    """Escape ``& < > " '`` for use in text content and attributes."""
    return escape(text, {'"': "&quot;", "'": "&apos;"})


def dimension_text(dim: DimensionLine) -> str:
    value = fmt(dim.value)
    if dim.label:
        return f"{value}{dim.unit} ({dim.label})"
    return f"{value}{dim.unit}"


def wrap_svg(width: float, height: float, title: str, parts: Iterable[str]) -> str:
    """Wrap drawing elements in a complete SVG document."""
    w, h = fmt(width), fmt(height)
    return "\n".join(
        [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">',
            "<style>text { font-family: Arial, sans-serif; }</style>",
            '<rect width="100%" height="100%" fill="white"/>',
            f'<text x="{fmt(width / 2)}" y="20" font-size="{FONT_SIZE + 2}" '
            f'fill="{COLORS["title"]}" text-anchor="middle" font-weight="bold">'
            f"{escape_text(title)}</text>",
            *parts,
            "</svg>",
        ]
    )


def placeholder_svg(title: str, message: str) -> str:
    return wrap_svg(
        200,
        60,
        title,
        [
            f'<text x="100" y="40" font-size="12" text-anchor="middle" fill="#999">'
            f"{escape_text(message)}</text>"
        ],
    )


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def of(cls, rects: Iterable[Rect], dimensions: Iterable[DimensionLine] = ()) -> Bounds:
        """Bounding box of rectangles and dimension endpoints; 0..100 when empty."""
        xs: list[float] = []
        ys: list[float] = []
        for rect in rects:
            xs.extend((rect.x, rect.right))
            ys.extend((rect.y, rect.top))
        for dim in dimensions:
            xs.extend((dim.start.x, dim.end.x))
            ys.extend((dim.start.y, dim.end.y))
        if not xs:
            return cls(0.0, 0.0, 100.0, 100.0)
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Frame:
    """Maps drawing millimeters onto a padded SVG canvas.

    With ``flip`` set the drawing's y axis points up; the lowest point of the
    bounds lands ``PADDING`` above the bottom edge of the canvas.
    """

    bounds: Bounds
    scale: float
    flip: bool = True

    @property
    def width(self) -> float:
        return (self.bounds.max_x - self.bounds.min_x) * self.scale + PADDING * 2

    @property
    def height(self) -> float:
        return (self.bounds.max_y - self.bounds.min_y) * self.scale + PADDING * 2

    @property
    def offset_x(self) -> float:
        return PADDING - self.bounds.min_x * self.scale

    @property
    def offset_y(self) -> float:
        if self.flip:
            return self.bounds.min_y * self.scale - PADDING
        return PADDING - self.bounds.min_y * self.scale

    def x(self, x: float) -> float:
        return x * self.scale + self.offset_x

    def y(self, y: float) -> float:
        if self.flip:
            return self.height - y * self.scale + self.offset_y
        return y * self.scale + self.offset_y

    def rect(
        self,
        rect: Rect,
        fill: str,
        stroke: str,
        stroke_width: float,
        opacity: float | None = None,
        dash: str | None = None,
    ) -> str:
        top = rect.top if self.flip else rect.y
        attrs = [
            f'x="{fmt(self.x(rect.x))}" y="{fmt(self.y(top))}" '
            f'width="{fmt(rect.width * self.scale)}" height="{fmt(rect.height * self.scale)}"',
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"',
        ]
        if opacity is not None:
            attrs.append(f'opacity="{opacity}"')
        if dash:
            attrs.append(f'stroke-dasharray="{dash}"')
        return f"<rect {' '.join(attrs)}/>"

    def dimension(self, dim: DimensionLine) -> str:
        x1, y1 = self.x(dim.start.x), self.y(dim.start.y)
        x2, y2 = self.x(dim.end.x), self.y(dim.end.y)
        return dimension_svg(x1, y1, x2, y2, dimension_text(dim))


def _line(x1: float, y1: float, x2: float, y2: float, stroke: str, width: float, extra: str = "") -> str:
    suffix = f" {extra}" if extra else ""
    return (
        f'<line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
        f'stroke="{stroke}" stroke-width="{width}"{suffix}/>'
    )


def dimension_svg(x1: float, y1: float, x2: float, y2: float, text: str) -> str:
    """Dimension line in screen coordinates with end ticks and a caption."""
    color = COLORS["dimension"]
    parts = [_line(x1, y1, x2, y2, color, 0.8)]

    horizontal = abs(y2 - y1) < abs(x2 - x1)
    if horizontal:
        parts.append(_line(x1, y1 - ARROW_SIZE, x1, y1 + ARROW_SIZE, color, 0.8))
        parts.append(_line(x2, y2 - ARROW_SIZE, x2, y2 + ARROW_SIZE, color, 0.8))
    else:
        parts.append(_line(x1 - ARROW_SIZE, y1, x1 + ARROW_SIZE, y1, color, 0.8))
        parts.append(_line(x2 - ARROW_SIZE, y2, x2 + ARROW_SIZE, y2, color, 0.8))

    mx = (x1 + x2) / 2
    my = (y1 + y2) / 2
    text_x, text_y, anchor = (mx, my - 4, "middle") if horizontal else (mx - 4, my, "end")
    parts.append(
        f'<text x="{fmt(text_x)}" y="{fmt(text_y)}" font-size="{DIM_FONT_SIZE}" '
        f'fill="{COLORS["dim_text"]}" text-anchor="{anchor}">{escape_text(text)}</text>'
    )
    return "\n".join(parts)


def _panel_fill(material: str) -> str:
    return COLORS["panel_mdf"] if "MDF" in material.upper() else COLORS["panel_pb"]


class DrawingSvgRenderer:
    """Renders drawing views to SVG strings.

    Attributes:
        scale: Pixels per millimeter.
        views: Views to render; the others come back as empty strings.
    """

    def __init__(
        self,
        scale: float = DEFAULT_SCALE,
        views: Iterable[str] | None = None,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.views = (
            tuple(VIEW_NAMES)
            if views is None
            else tuple(normalize_view_name(view) for view in views)
        )

    def render(self, drawing: DrawingData) -> dict[str, str]:
        """Render the requested views of ``drawing``.

        Returns:
            Mapping of every view name to its SVG document, or to an empty
            string for views that were not requested.
        """
        renderers = {
            "front_view": lambda: self.render_front_view(drawing.common.front_view),
            "side_view": lambda: self.render_side_view(drawing.common.side_view),
            "plan_view": lambda: self.render_plan_view(drawing.common.plan_view),
            "manufacturing": lambda: self.render_manufacturing(drawing.manufacturing),
            "installation": lambda: self.render_installation(drawing.installation),
        }
        result = {
            name: render() if name in self.views else ""
            for name, render in renderers.items()
        }
        logger.info(
            f"Rendered {len(self.views)} SVG views for {drawing.metadata.category} "
            f"at scale {self.scale}"
        )
        return result

    def render_front_view(self, view: FrontView) -> str:
        frame = Frame(Bounds.of(view.rects(), view.dimensions), self.scale)
        parts: list[str] = []

        if view.baseboard is not None:
            parts.append(frame.rect(view.baseboard, COLORS["baseboard"], COLORS["cabinet_stroke"], 1))
        for cabinet in view.cabinets:
            parts.append(frame.rect(cabinet, COLORS["cabinet"], COLORS["cabinet_stroke"], 1.5))
        for door in view.doors:
            fill = COLORS["drawer"] if door.is_drawer else COLORS["door"]
            parts.append(frame.rect(door, fill, COLORS["door_stroke"], 1))
        if view.countertop is not None:
            parts.append(frame.rect(view.countertop, COLORS["countertop"], COLORS["cabinet_stroke"], 1.5))
        if view.molding is not None:
            parts.append(frame.rect(view.molding, COLORS["molding"], COLORS["cabinet_stroke"], 1))
        for point in view.hardware:
            parts.append(self._hardware(frame, point))
        for dim in view.dimensions:
            parts.append(frame.dimension(dim))

        return wrap_svg(frame.width, frame.height, VIEW_TITLES["front_view"], parts)

    def render_side_view(self, view: SideView) -> str:
        frame = Frame(Bounds.of(view.rects(), view.dimensions), self.scale)
        parts = [frame.rect(view.outer, "none", COLORS["cabinet_stroke"], 1.5)]

        for panel in view.panels:
            parts.append(frame.rect(panel, _panel_fill(panel.material), COLORS["cabinet_stroke"], 1))
            name = escape_text(panel.name)
            if panel.width * self.scale > 30 and panel.height * self.scale > 15:
                cx = frame.x(panel.x + panel.width / 2)
                cy = frame.y(panel.y + panel.height / 2)
                parts.append(
                    f'<text x="{fmt(cx)}" y="{fmt(cy)}" font-size="{DIM_FONT_SIZE}" '
                    f'fill="{COLORS["title"]}" text-anchor="middle" '
                    f'dominant-baseline="middle">{name}</text>'
                )
            else:
                # Thin boards are labelled beside the board.
                lx = frame.x(panel.right) + 4
                ly = frame.y(panel.y + panel.height / 2)
                parts.append(
                    f'<text x="{fmt(lx)}" y="{fmt(ly)}" font-size="{DIM_FONT_SIZE - 1}" '
                    f'fill="{COLORS["title"]}" dominant-baseline="middle" '
                    f'opacity="0.7">{name}</text>'
                )

        if view.countertop is not None:
            parts.append(frame.rect(view.countertop, COLORS["countertop"], COLORS["cabinet_stroke"], 1.5))
        for dim in view.dimensions:
            parts.append(frame.dimension(dim))

        return wrap_svg(frame.width, frame.height, VIEW_TITLES["side_view"], parts)

    def render_plan_view(self, view: PlanView) -> str:
        frame = Frame(Bounds.of(view.rects(), view.dimensions), self.scale, flip=False)
        parts: list[str] = []

        if view.countertop is not None:
            parts.append(
                frame.rect(view.countertop, COLORS["countertop"], COLORS["cabinet_stroke"], 1, 0.3)
            )
        for rect in view.lower_cabinets:
            parts.append(frame.rect(rect, COLORS["cabinet"], COLORS["cabinet_stroke"], 1.5))
        for rect in view.upper_cabinets:
            parts.append(
                frame.rect(rect, COLORS["upper_dash"], COLORS["door_stroke"], 1, 0.4, "6,3")
            )
        for dim in view.dimensions:
            parts.append(frame.dimension(dim))

        return wrap_svg(frame.width, frame.height, VIEW_TITLES["plan_view"], parts)

    def render_manufacturing(self, layout: ManufacturingLayout) -> str:
        title = VIEW_TITLES["manufacturing"]
        if not layout.panel_details:
            return placeholder_svg(title, "no parts")

        s = self.scale
        parts: list[str] = []
        for detail in layout.panel_details:
            gx = detail.column * layout.cell_width * s + PADDING
            gy = detail.row * layout.cell_height * s + PADDING + TITLE_BAND
            parts.append(self._panel_detail(detail, gx, gy))

        width = layout.columns * layout.cell_width * s + PADDING * 2
        height = layout.rows * layout.cell_height * s + PADDING * 2 + TITLE_BAND
        return wrap_svg(width, height, title, parts)

    def render_installation(self, layout: InstallationLayout) -> str:
        title = VIEW_TITLES["installation"]
        wall = layout.wall
        if wall.width == 0:
            return placeholder_svg(title, "no wall info")

        wall_dims = (
            horizontal_dimension(0, wall.width, -50, wall.width, "wall width"),
            vertical_dimension(wall.width + 50, 0, wall.height, wall.height, "wall height"),
        )
        rects = [wall, *layout.equipment, *layout.clearance_zones]
        frame = Frame(Bounds.of(rects, wall_dims), self.scale)
        parts = [frame.rect(wall, COLORS["wall"], COLORS["wall_stroke"], 2)]

        grid = layout.tile_grid
        if grid is not None:
            top, bottom = frame.y(wall.top), frame.y(wall.y)
            left, right = frame.x(wall.x), frame.x(wall.right)
            for c in range(grid.cols + 1):
                x = frame.x(min(grid.origin.x + c * grid.tile_w, wall.right))
                parts.append(_line(x, top, x, bottom, COLORS["tile_grid"], 0.5))
            for r in range(grid.rows + 1):
                y = frame.y(min(grid.origin.y + r * grid.tile_h, wall.top))
                parts.append(_line(left, y, right, y, COLORS["tile_grid"], 0.5))

        for zone in layout.clearance_zones:
            parts.append(frame.rect(zone, COLORS["clearance"], "#66BB6A", 1, 0.2, "4,4"))

        for zone in layout.equipment:
            parts.append(
                frame.rect(zone, COLORS["equipment"], COLORS["equipment_stroke"], 1.5, 0.5)
            )
            cx = frame.x(zone.x + zone.width / 2)
            cy = frame.y(zone.y + zone.height / 2)
            parts.append(
                f'<text x="{fmt(cx)}" y="{fmt(cy)}" font-size="{DIM_FONT_SIZE}" '
                f'fill="{COLORS["equipment_stroke"]}" text-anchor="middle" '
                f'dominant-baseline="middle" font-weight="bold">{escape_text(zone.label)}</text>'
            )

        for mark in layout.utilities:
            parts.append(self._utility(frame, mark))
        for dim in wall_dims:
            parts.append(frame.dimension(dim))

        return wrap_svg(frame.width, frame.height, title, parts)

    def _hardware(self, frame: Frame, point: HardwarePoint) -> str:
        x, y = frame.x(point.x), frame.y(point.y)
        if point.type == HardwareKind.HINGE:
            return (
                f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="3" fill="{COLORS["hinge"]}" '
                f'stroke="#D84315" stroke-width="0.5"/>'
            )
        if point.type == HardwareKind.HANDLE:
            return _line(x - 8, y, x + 8, y, COLORS["handle"], 2.5, 'stroke-linecap="round"')
        return _line(x - 10, y, x + 10, y, COLORS["rail"], 1.5, 'stroke-dasharray="2,2"')

    def _utility(self, frame: Frame, mark: UtilityMark) -> str:
        x, y = frame.x(mark.x), frame.y(mark.y)
        color = COLORS.get(mark.type.value, "#999")
        return "\n".join(
            [
                f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="8" fill="{color}" opacity="0.7" '
                f'stroke="#fff" stroke-width="1.5"/>',
                f'<text x="{fmt(x)}" y="{fmt(y + 20)}" font-size="{DIM_FONT_SIZE}" '
                f'fill="{color}" text-anchor="middle" font-weight="bold">'
                f"{escape_text(mark.label)}</text>",
                f'<text x="{fmt(x)}" y="{fmt(y)}" font-size="8" fill="white" '
                f'text-anchor="middle" dominant-baseline="central" font-weight="bold">'
                f"{mark.glyph}</text>",
            ]
        )

    def _panel_detail(self, detail: PanelDetail, gx: float, gy: float) -> str:
        rect = detail.rect
        panel_scale = min(
            200 * self.scale / max(rect.width, 1),
            150 * self.scale / max(rect.height, 1),
            self.scale,
        )
        w = rect.width * panel_scale
        h = rect.height * panel_scale
        title = COLORS["title"]
        dim_color = COLORS["dim_text"]

        parts = [
            f'<text x="{fmt(gx + w / 2)}" y="{fmt(gy - 5)}" font-size="{DIM_FONT_SIZE}" '
            f'fill="{title}" text-anchor="middle">'
            f"{escape_text(f'{detail.name} [{detail.bom_id}]')}</text>",
            f'<rect x="{fmt(gx)}" y="{fmt(gy)}" width="{fmt(w)}" height="{fmt(h)}" '
            f'fill="{_panel_fill(detail.material)}" stroke="{COLORS["cabinet_stroke"]}" '
            f'stroke-width="1"/>',
        ]
        # Edge-banding lines are in panel coordinates with y up.
        for line in detail.edge_banding:
            parts.append(
                _line(
                    gx + line.x1 * panel_scale,
                    gy + h - line.y1 * panel_scale,
                    gx + line.x2 * panel_scale,
                    gy + h - line.y2 * panel_scale,
                    COLORS["edge_band"],
                    1.5,
                )
            )
        parts.extend(
            [
                f'<text x="{fmt(gx + w / 2)}" y="{fmt(gy + h + 15)}" font-size="{DIM_FONT_SIZE}" '
                f'fill="{dim_color}" text-anchor="middle">{fmt(rect.width)}mm</text>',
                f'<text x="{fmt(gx - 5)}" y="{fmt(gy + h / 2)}" font-size="{DIM_FONT_SIZE}" '
                f'fill="{dim_color}" text-anchor="end" dominant-baseline="middle">'
                f"{fmt(rect.height)}mm</text>",
                f'<text x="{fmt(gx + w / 2)}" y="{fmt(gy + h / 2)}" font-size="{DIM_FONT_SIZE - 1}" '
                f'fill="{title}" text-anchor="middle" dominant-baseline="middle" opacity="0.6">'
                f"{escape_text(detail.material)}</text>",
            ]
        )
        return "\n".join(parts)


def render_drawing(
    drawing: DrawingData,
    scale: float = DEFAULT_SCALE,
    views: Iterable[str] | None = None,
) -> dict[str, str]:
    """Convenience wrapper around :class:`DrawingSvgRenderer`."""
    return DrawingSvgRenderer(scale=scale, views=views).render(drawing)
