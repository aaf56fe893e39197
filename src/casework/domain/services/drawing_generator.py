"""2D drawing coordinate synthesis.

Produces the common orthographic views plus the manufacturing and
installation sub-layouts. All coordinates are millimeters with the origin at
the bottom-left of the lower cabinet row and y pointing up.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

from casework.domain.bom import BomResult
from casework.domain.drawing import (
    BomReference,
    CabinetRect,
    CommonViews,
    DoorRect,
    DrawingData,
    DrawingMetadata,
    EquipmentZone,
    FrontView,
    HardwarePoint,
    InstallationLayout,
    ManufacturingLayout,
    PanelDetail,
    PanelRect,
    PlanView,
    SideView,
    TileGrid,
    UtilityMark,
)
from casework.domain.entities import CabinetUnit, StructuredDesignData
from casework.domain.rules import BomRules
from casework.domain.value_objects import (
    EquipmentKind,
    HardwareKind,
    Line,
    PartCategory,
    Point,
    Rect,
    Tier,
    UtilityKind,
    horizontal_dimension,
    round_half_up,
    vertical_dimension,
)

from .bom_generator import BomGenerator, door_width, drawer_pitch

logger = logging.getLogger(__name__)

UPPER_LOWER_GAP = 600.0
HINGE_OFFSET = 100.0

TILE_WIDTH = 300.0
TILE_HEIGHT = 600.0

WATER_SUPPLY_HEIGHT = 500.0
EXHAUST_CEILING_OFFSET = 200.0
GAS_PIPE_HEIGHT = 400.0

SINK_ZONE_HEIGHT = 200.0
COOKTOP_ZONE_HEIGHT = 60.0
HOOD_ZONE_HEIGHT = 300.0

GRID_COLUMNS = 3
GRID_CELL_WIDTH = 300.0
GRID_CELL_HEIGHT = 250.0


class DrawingGenerator:
    """Generates drawing coordinates for a design.

    When no BOM is supplied one is generated with the same rules, so the
    manufacturing layout always references real BOM ids.
    """

    def __init__(self, rules: BomRules) -> None:
        self.rules = rules

    def generate(
        self,
        design: StructuredDesignData,
        bom: BomResult | None = None,
        include_manufacturing: bool = True,
        include_installation: bool = True,
    ) -> DrawingData:
        """Build the complete drawing model for ``design``.

        Args:
            design: Design to draw.
            bom: Pre-computed BOM; generated from ``design`` when omitted.
            include_manufacturing: Build the per-panel cut-sheet layout.
            include_installation: Build the wall installation layout.

        Returns:
            DrawingData with an empty sub-layout for each excluded option.
        """
        if bom is None:
            bom = BomGenerator(self.rules).generate(design)

        front = self.build_front_view(design)
        common = CommonViews(
            front_view=front,
            side_view=self.build_side_view(design),
            plan_view=self.build_plan_view(design),
        )
        manufacturing = (
            self.build_manufacturing_layout(bom)
            if include_manufacturing
            else ManufacturingLayout()
        )
        installation = (
            self.build_installation_layout(design)
            if include_installation
            else InstallationLayout()
        )

        logger.info(
            f"Drawing generated for {design.category.value}: "
            f"{len(front.cabinets)} cabinets, {len(front.doors)} doors, "
            f"{len(manufacturing.panel_details)} panel details"
        )
        return DrawingData(
            common=common,
            manufacturing=manufacturing,
            installation=installation,
            metadata=DrawingMetadata(
                category=design.category.value,
                style=design.style,
                generated_at=datetime.now(timezone.utc).isoformat(),
            ),
        )

    # -- Front view --------------------------------------------------------

    def build_front_view(self, design: StructuredDesignData) -> FrontView:
        cabinets = design.cabinets
        total_width = design.layout.total_width_mm
        leg = cabinets.leg_height_mm
        lower_height = cabinets.lower_height_mm
        upper_y = lower_height + UPPER_LOWER_GAP

        cabinet_rects: list[CabinetRect] = []
        doors: list[DoorRect] = []
        hardware: list[HardwarePoint] = []

        tiers = (
            (Tier.LOWER, leg, cabinets.lower_body_height_mm),
            (Tier.UPPER, upper_y, cabinets.upper_height_mm),
        )
        for tier, cab_y, cab_height in tiers:
            for index, cabinet in enumerate(cabinets.tier(tier)):
                ref = f"{tier.value}_{index}"
                cabinet_rects.append(
                    CabinetRect(
                        x=cabinet.position_mm,
                        y=cab_y,
                        width=cabinet.width_mm,
                        height=cab_height,
                        ref=ref,
                        type=cabinet.type,
                    )
                )
                self._add_fronts(doors, hardware, cabinet, ref, cab_y, cab_height)

        countertop = None
        baseboard = None
        molding = None
        if cabinets.lower:
            countertop = Rect(
                0, lower_height, total_width, self.rules.materials.countertop.thickness
            )
            if leg > 0:
                baseboard = Rect(0, 0, total_width, leg)
        if cabinets.upper and cabinets.molding_height_mm > 0:
            molding = Rect(
                0, upper_y + cabinets.upper_height_mm, total_width, cabinets.molding_height_mm
            )

        dimensions = [horizontal_dimension(0, total_width, -50, total_width, "total width")]
        for cabinet in cabinets.lower:
            dimensions.append(
                horizontal_dimension(
                    cabinet.position_mm,
                    cabinet.position_mm + cabinet.width_mm,
                    leg - 30,
                    cabinet.width_mm,
                )
            )
        right_edge = total_width + 50
        if cabinets.lower:
            dimensions.append(
                vertical_dimension(right_edge, 0, lower_height, lower_height, "lower height")
            )
        if cabinets.upper:
            dimensions.append(
                vertical_dimension(
                    right_edge,
                    upper_y,
                    upper_y + cabinets.upper_height_mm,
                    cabinets.upper_height_mm,
                    "upper height",
                )
            )

        return FrontView(
            cabinets=tuple(cabinet_rects),
            doors=tuple(doors),
            hardware=tuple(hardware),
            countertop=countertop,
            molding=molding,
            baseboard=baseboard,
            dimensions=tuple(dimensions),
        )

    def _add_fronts(
        self,
        doors: list[DoorRect],
        hardware: list[HardwarePoint],
        cabinet: CabinetUnit,
        ref: str,
        cab_y: float,
        cab_height: float,
    ) -> None:
        """Door leaves or drawer fronts of one cabinet plus their hardware."""
        count = cabinet.door_count
        if count <= 0:
            return

        gap = self.rules.construction.door_gap
        cab_x = cabinet.position_mm

        if cabinet.is_drawer:
            pitch = drawer_pitch(cab_height, count)
            for d in range(count):
                drawer_y = cab_y + d * pitch
                doors.append(
                    DoorRect(
                        x=cab_x + gap / 2,
                        y=drawer_y + gap / 2,
                        width=max(0.0, cabinet.width_mm - gap),
                        height=max(0.0, pitch - gap),
                        ref=ref,
                        door_index=d,
                        is_drawer=True,
                    )
                )
                center_x = cab_x + cabinet.width_mm / 2
                center_y = drawer_y + pitch / 2
                hardware.append(HardwarePoint(center_x, center_y, HardwareKind.HANDLE, ref))
                hardware.append(HardwarePoint(center_x, center_y, HardwareKind.RAIL, ref))
            return

        leaf = door_width(cabinet.width_mm, count, gap)
        for d in range(count):
            door_x = cab_x + d * leaf + gap / 2
            doors.append(
                DoorRect(
                    x=door_x,
                    y=cab_y + gap / 2,
                    width=leaf,
                    height=max(0.0, cab_height - gap),
                    ref=ref,
                    door_index=d,
                    is_drawer=False,
                )
            )
            hardware.append(HardwarePoint(door_x, cab_y + HINGE_OFFSET, HardwareKind.HINGE, ref))
            hardware.append(
                HardwarePoint(door_x, cab_y + cab_height - HINGE_OFFSET, HardwareKind.HINGE, ref)
            )
            hardware.append(
                HardwarePoint(door_x + leaf / 2, cab_y + cab_height / 2, HardwareKind.HANDLE, ref)
            )

    # -- Side view ---------------------------------------------------------

    def build_side_view(self, design: StructuredDesignData) -> SideView:
        """Cross-section of one representative lower cabinet."""
        materials = self.rules.materials
        body_t = materials.body.thickness
        back_t = materials.back_panel.thickness
        body_type = materials.body.type
        depth = design.layout.depth_mm
        leg = design.cabinets.leg_height_mm
        lower_height = design.cabinets.lower_height_mm
        body_height = design.cabinets.lower_body_height_mm

        def panel(name, x, y, width, height, thickness, material) -> PanelRect:
            return PanelRect(
                x=x,
                y=y,
                width=max(0.0, width),
                height=max(0.0, height),
                name=name,
                thickness=thickness,
                material=material,
            )

        shelf_y = leg + round_half_up(body_height / 2)
        shelf_width = depth - body_t * 2 - self.rules.construction.shelf_depth_reduction
        panels = (
            panel("left side", 0, leg, body_t, body_height, body_t, body_type),
            panel("right side", depth - body_t, leg, body_t, body_height, body_t, body_type),
            panel("bottom", body_t, leg, depth - body_t * 2, body_t, body_t, body_type),
            panel(
                "back",
                depth - back_t,
                leg,
                back_t,
                body_height,
                back_t,
                materials.back_panel.type,
            ),
            panel("shelf", body_t, shelf_y, shelf_width, body_t, body_t, body_type),
        )

        countertop = None
        if design.cabinets.lower:
            countertop = Rect(0, lower_height, depth, materials.countertop.thickness)

        above = leg + body_height + 20
        dimensions = (
            horizontal_dimension(0, depth, leg - 30, depth, "depth"),
            vertical_dimension(-30, leg, lower_height, body_height, "body height"),
            horizontal_dimension(0, body_t, above, body_t, "side thickness"),
            horizontal_dimension(depth - back_t, depth, above, back_t, "back thickness"),
        )

        return SideView(
            outer=Rect(0, leg, depth, body_height),
            panels=panels,
            countertop=countertop,
            dimensions=dimensions,
        )

    # -- Plan view ---------------------------------------------------------

    def build_plan_view(self, design: StructuredDesignData) -> PlanView:
        cabinets = design.cabinets
        total_width = design.layout.total_width_mm
        depth = design.layout.depth_mm
        upper_depth = round_half_up(depth * self.rules.upper_cabinet.depth_ratio)

        lower = tuple(Rect(c.position_mm, 0, c.width_mm, depth) for c in cabinets.lower)
        upper = tuple(Rect(c.position_mm, 0, c.width_mm, upper_depth) for c in cabinets.upper)
        countertop = Rect(0, 0, total_width, depth) if cabinets.lower else None

        dimensions = [horizontal_dimension(0, total_width, -30, total_width, "total width")]
        if cabinets.lower:
            dimensions.append(vertical_dimension(-30, 0, depth, depth, "lower depth"))
        if cabinets.upper:
            dimensions.append(
                vertical_dimension(total_width + 30, 0, upper_depth, upper_depth, "upper depth")
            )

        return PlanView(
            lower_cabinets=lower,
            upper_cabinets=upper,
            countertop=countertop,
            dimensions=tuple(dimensions),
        )

    # -- Manufacturing -----------------------------------------------------

    def build_manufacturing_layout(self, bom: BomResult) -> ManufacturingLayout:
        """One cut-sheet cell per sheet part, in BOM order."""
        details: list[PanelDetail] = []
        references: list[BomReference] = []

        for item in bom.items:
            if item.cabinet_ref:
                references.append(BomReference(rect_ref=item.cabinet_ref, bom_id=item.id))
            if not item.is_sheet_part:
                continue

            w = item.width_mm
            h = item.height_mm
            edge_banding: tuple[Line, ...] = ()
            if item.part_category == PartCategory.PANEL:
                edge_banding = (
                    Line(0, h, w, h),
                    Line(0, 0, w, 0),
                    Line(0, 0, 0, h),
                    Line(w, 0, w, h),
                )

            index = len(details)
            details.append(
                PanelDetail(
                    bom_id=item.id,
                    name=item.name,
                    material=item.material,
                    rect=Rect(0, 0, w, h),
                    dimensions=(
                        horizontal_dimension(0, w, -20, w, "width"),
                        vertical_dimension(-20, 0, h, h, "height"),
                    ),
                    column=index % GRID_COLUMNS,
                    row=index // GRID_COLUMNS,
                    edge_banding=edge_banding,
                )
            )

        return ManufacturingLayout(
            panel_details=tuple(details),
            bom_references=tuple(references),
            columns=GRID_COLUMNS,
            cell_width=GRID_CELL_WIDTH,
            cell_height=GRID_CELL_HEIGHT,
        )

    # -- Installation ------------------------------------------------------

    def build_installation_layout(self, design: StructuredDesignData) -> InstallationLayout:
        wall = design.wall
        cabinets = design.cabinets
        utilities = design.utilities
        lower_height = cabinets.lower_height_mm

        tile_grid = None
        if wall.has_known_tile:
            tile_grid = TileGrid(
                origin=Point(0, 0),
                tile_w=TILE_WIDTH,
                tile_h=TILE_HEIGHT,
                cols=math.ceil(wall.width_mm / TILE_WIDTH),
                rows=math.ceil(wall.height_mm / TILE_HEIGHT),
            )

        marks: list[UtilityMark] = []
        if utilities.water_supply.detected:
            marks.append(
                UtilityMark(
                    utilities.water_supply.position_mm,
                    WATER_SUPPLY_HEIGHT,
                    UtilityKind.WATER,
                    "water supply",
                )
            )
        if utilities.exhaust_duct.detected:
            marks.append(
                UtilityMark(
                    utilities.exhaust_duct.position_mm,
                    wall.height_mm - EXHAUST_CEILING_OFFSET,
                    UtilityKind.EXHAUST,
                    "exhaust",
                )
            )
        if utilities.gas_pipe.detected:
            marks.append(
                UtilityMark(
                    utilities.gas_pipe.position_mm,
                    GAS_PIPE_HEIGHT,
                    UtilityKind.GAS,
                    "gas",
                )
            )

        zones: list[EquipmentZone] = []
        if design.sink is not None:
            zones.append(
                _centered_zone(
                    design.sink.position_mm,
                    design.sink.width_mm,
                    lower_height - SINK_ZONE_HEIGHT,
                    SINK_ZONE_HEIGHT,
                    EquipmentKind.SINK,
                    "sink bowl",
                )
            )
        if design.cooktop is not None:
            zones.append(
                _centered_zone(
                    design.cooktop.position_mm,
                    design.cooktop.width_mm,
                    lower_height,
                    COOKTOP_ZONE_HEIGHT,
                    EquipmentKind.COOKTOP,
                    "cooktop",
                )
            )
        if design.hood is not None:
            zones.append(
                _centered_zone(
                    design.hood.position_mm,
                    design.hood.width_mm,
                    lower_height + UPPER_LOWER_GAP - HOOD_ZONE_HEIGHT,
                    HOOD_ZONE_HEIGHT,
                    EquipmentKind.HOOD,
                    "range hood",
                )
            )

        clearance: tuple[Rect, ...] = ()
        if cabinets.lower:
            clearance = (
                Rect(0, cabinets.leg_height_mm, design.layout.total_width_mm, design.layout.depth_mm),
            )

        return InstallationLayout(
            wall=Rect(0, 0, wall.width_mm, wall.height_mm),
            tile_grid=tile_grid,
            utilities=tuple(marks),
            equipment=tuple(zones),
            clearance_zones=clearance,
        )


def _centered_zone(
    center: float,
    width: float,
    y: float,
    height: float,
    kind: EquipmentKind,
    label: str,
) -> EquipmentZone:
    width = max(0.0, width)
    return EquipmentZone(
        x=center - width / 2, y=y, width=width, height=height, type=kind, label=label
    )


def generate_drawing(
    design: StructuredDesignData,
    rules: BomRules,
    bom: BomResult | None = None,
    include_manufacturing: bool = True,
    include_installation: bool = True,
) -> DrawingData:
    """Convenience wrapper around :class:`DrawingGenerator`."""
    return DrawingGenerator(rules).generate(
        design,
        bom=bom,
        include_manufacturing=include_manufacturing,
        include_installation=include_installation,
    )
