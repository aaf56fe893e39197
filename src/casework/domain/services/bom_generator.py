"""Bill of materials synthesis.

Walks every cabinet unit of a design and decomposes it into door/drawer
panels, carcass boards and hardware according to the construction rules,
then adds the row-level parts (countertop, equipment, accessories, edge
banding) and a summary with a raw-sheet estimate.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

from casework.domain.bom import BomItem, BomResult, BomSummary
from casework.domain.entities import CabinetUnit, StructuredDesignData
from casework.domain.rules import BomRules
from casework.domain.value_objects import BomUnit, PartCategory, Tier, round_half_up

logger = logging.getLogger(__name__)

# Waste allowance applied to the summed sheet-part area.
SHEET_WASTE_FACTOR = 1.15

# Reference door height used for edge-banding length. Kept independent of the
# actual cabinet height for compatibility with existing quotes; candidate for
# becoming a rule.
EDGE_BAND_REFERENCE_HEIGHT = 720.0

# Nominal equipment envelopes (height, depth) in millimeters.
SINK_ENVELOPE = (200.0, 450.0)
COOKTOP_ENVELOPE = (60.0, 520.0)
HOOD_ENVELOPE = (300.0, 350.0)


def door_width(cabinet_width: float, door_count: int, door_gap: float) -> int:
    """Width of each door leaf when the opening is split evenly."""
    return max(0, round_half_up((cabinet_width - door_gap) / max(1, door_count)))


def drawer_pitch(body_height: float, door_count: int) -> int:
    """Vertical pitch of each drawer front before the gap is removed."""
    return max(0, round_half_up(body_height / max(1, door_count)))


def tier_body_height(design: StructuredDesignData, tier: Tier) -> float:
    cabinets = design.cabinets
    if tier == Tier.LOWER:
        return cabinets.lower_body_height_mm
    return cabinets.upper_height_mm


def tier_depth(design: StructuredDesignData, rules: BomRules, tier: Tier) -> float:
    depth = design.layout.depth_mm
    if tier == Tier.LOWER:
        return depth
    return round_half_up(depth * rules.upper_cabinet.depth_ratio)


@dataclass
class _ItemSequence:
    """Collects BOM items and hands out sequential ids."""

    items: list[BomItem] = field(default_factory=list)

    def add(
        self,
        category: PartCategory,
        name: str,
        material: str,
        width: float,
        height: float,
        depth: float,
        quantity: int,
        unit: BomUnit = BomUnit.EACH,
        cabinet_ref: str | None = None,
    ) -> BomItem:
        item = BomItem(
            id=f"BOM-{len(self.items) + 1:03d}",
            part_category=category,
            name=name,
            material=material,
            width_mm=max(0.0, width),
            height_mm=max(0.0, height),
            depth_mm=max(0.0, depth),
            quantity=quantity,
            unit=unit,
            cabinet_ref=cabinet_ref,
        )
        self.items.append(item)
        return item


class BomGenerator:
    """Generates a bill of materials from a design and a rules tree.

    The generator holds no state between calls; the same design and rules
    always yield the same items.

    Example:
        >>> generator = BomGenerator(DEFAULT_BOM_RULES)
        >>> bom = generator.generate(design)
        >>> bom.summary.sheet_estimate
        4
    """

    def __init__(self, rules: BomRules) -> None:
        self.rules = rules

    def generate(self, design: StructuredDesignData) -> BomResult:
        """Build the BOM for ``design``."""
        seq = _ItemSequence()
        materials = self.rules.materials
        door_material = (
            f"{design.materials.door_color} {design.materials.door_finish} "
            f"{materials.door.type}"
        ).strip()

        for tier in (Tier.LOWER, Tier.UPPER):
            for index, cabinet in enumerate(design.cabinets.tier(tier)):
                self._add_cabinet_parts(seq, design, cabinet, tier, index, door_material)

        if design.cabinets.lower:
            seq.add(
                PartCategory.COUNTERTOP,
                "Countertop",
                design.materials.countertop,
                design.layout.total_width_mm,
                materials.countertop.thickness,
                design.layout.depth_mm,
                1,
            )

        self._add_equipment(seq, design)
        self._add_accessories(seq, design)
        self._add_edge_banding(seq, design, door_material)

        items = tuple(seq.items)
        summary = self.summarize(items)
        logger.info(
            f"BOM generated for {design.category.value}: {summary.total_items} items, "
            f"{summary.total_panels} panels, {summary.sheet_estimate} sheets"
        )
        return BomResult(
            category=design.category.value,
            style=design.style,
            items=items,
            summary=summary,
            generated_at=datetime.now(timezone.utc).isoformat(),
        )

    def summarize(self, items: tuple[BomItem, ...] | list[BomItem]) -> BomSummary:
        """Count lines per category and estimate raw sheet usage."""
        categories = {category: 0 for category in PartCategory}
        for item in items:
            categories[item.part_category] += 1

        sheet_area = self.rules.materials.sheet_size.area
        total_area = sum(item.area for item in items if item.is_sheet_part)
        sheet_estimate = math.ceil(total_area * SHEET_WASTE_FACTOR / sheet_area) if sheet_area > 0 else 0

        return BomSummary(
            total_items=len(items),
            categories=categories,
            sheet_estimate=sheet_estimate,
        )

    def _add_cabinet_parts(
        self,
        seq: _ItemSequence,
        design: StructuredDesignData,
        cabinet: CabinetUnit,
        tier: Tier,
        index: int,
        door_material: str,
    ) -> None:
        rules = self.rules
        body = rules.materials.body
        back = rules.materials.back_panel
        construction = rules.construction
        gap = construction.door_gap

        ref = f"{tier.value}_{index}"
        prefix = f"{tier.value.capitalize()} {index}"
        height = tier_body_height(design, tier)
        depth = tier_depth(design, rules, tier)
        inner_width = cabinet.width_mm - body.thickness * 2
        doors = cabinet.door_count

        # Door leaves or drawer fronts
        if cabinet.is_drawer:
            pitch = drawer_pitch(height, doors)
            for d in range(doors):
                seq.add(
                    PartCategory.PANEL,
                    f"{prefix} Drawer Front {d + 1}",
                    door_material,
                    cabinet.width_mm - gap,
                    pitch - gap,
                    rules.materials.door.thickness,
                    1,
                    cabinet_ref=ref,
                )
        else:
            leaf = door_width(cabinet.width_mm, doors, gap)
            for d in range(doors):
                suffix = f" {d + 1}" if doors > 1 else ""
                seq.add(
                    PartCategory.PANEL,
                    f"{prefix} Door{suffix}",
                    door_material,
                    leaf,
                    height - gap,
                    rules.materials.door.thickness,
                    1,
                    cabinet_ref=ref,
                )

        seq.add(
            PartCategory.BOARD,
            f"{prefix} Side Panel",
            body.display_label,
            depth,
            height,
            body.thickness,
            construction.side_panel_qty,
            cabinet_ref=ref,
        )

        # The countertop closes lower cabinets, so they only get a bottom.
        if tier == Tier.LOWER:
            board_name, board_qty = "Bottom Board", construction.bottom_panel_qty
        elif rules.upper_cabinet.top_panel:
            board_name, board_qty = "Top/Bottom Board", 2
        else:
            board_name, board_qty = "Bottom Board", 1
        seq.add(
            PartCategory.BOARD,
            f"{prefix} {board_name}",
            body.display_label,
            inner_width,
            depth,
            body.thickness,
            board_qty,
            cabinet_ref=ref,
        )

        seq.add(
            PartCategory.BOARD,
            f"{prefix} Band",
            body.display_label,
            construction.band_width,
            inner_width,
            body.thickness,
            construction.band_qty,
            cabinet_ref=ref,
        )

        seq.add(
            PartCategory.BOARD,
            f"{prefix} Back Panel",
            back.display_label,
            cabinet.width_mm - construction.back_panel_clearance,
            height - construction.back_panel_clearance,
            back.thickness,
            construction.back_panel_qty,
            cabinet_ref=ref,
        )

        if cabinet.has_shelf:
            seq.add(
                PartCategory.BOARD,
                f"{prefix} Shelf",
                body.display_label,
                inner_width,
                depth - construction.shelf_depth_reduction,
                body.thickness,
                1,
                cabinet_ref=ref,
            )

        if cabinet.is_drawer:
            if doors > 0:
                seq.add(
                    PartCategory.HARDWARE,
                    f"{prefix} Drawer Rail",
                    rules.hardware.slide_type,
                    depth,
                    0,
                    0,
                    doors,
                    unit=BomUnit.SET,
                    cabinet_ref=ref,
                )
        elif doors > 0:
            seq.add(
                PartCategory.HARDWARE,
                f"{prefix} Hinge",
                rules.hardware.hinge_type,
                0,
                0,
                0,
                doors * rules.hardware.hinges_per_door,
                cabinet_ref=ref,
            )

        if doors > 0:
            seq.add(
                PartCategory.HARDWARE,
                f"{prefix} Handle",
                design.materials.handle_type,
                0,
                0,
                0,
                doors,
                cabinet_ref=ref,
            )

    def _add_equipment(self, seq: _ItemSequence, design: StructuredDesignData) -> None:
        if design.sink is not None:
            height, depth = SINK_ENVELOPE
            seq.add(
                PartCategory.EQUIPMENT,
                "Sink Bowl",
                design.sink.type,
                design.sink.width_mm,
                height,
                depth,
                1,
            )
        if design.faucet is not None:
            seq.add(PartCategory.EQUIPMENT, "Faucet", design.faucet.type, 0, 0, 0, 1)
        if design.cooktop is not None:
            height, depth = COOKTOP_ENVELOPE
            seq.add(
                PartCategory.EQUIPMENT,
                "Cooktop",
                design.cooktop.type,
                design.cooktop.width_mm,
                height,
                depth,
                1,
            )
        if design.hood is not None:
            height, depth = HOOD_ENVELOPE
            seq.add(
                PartCategory.EQUIPMENT,
                "Range Hood",
                design.hood.type,
                design.hood.width_mm,
                height,
                depth,
                1,
            )

    def _add_accessories(self, seq: _ItemSequence, design: StructuredDesignData) -> None:
        cabinets = design.cabinets
        total_width = design.layout.total_width_mm

        if cabinets.leg_height_mm > 0 and cabinets.lower:
            seq.add(
                PartCategory.ACCESSORY,
                "Baseboard",
                "PVC",
                total_width,
                cabinets.leg_height_mm,
                0,
                1,
            )
        if cabinets.molding_height_mm > 0 and cabinets.upper:
            seq.add(
                PartCategory.ACCESSORY,
                "Crown Molding",
                "crown molding",
                total_width,
                cabinets.molding_height_mm,
                0,
                1,
            )
        if cabinets.lower:
            seq.add(
                PartCategory.ACCESSORY,
                "Adjustable Leg",
                "plastic adjustable",
                0,
                cabinets.leg_height_mm,
                0,
                (len(cabinets.lower) + 1) * 2,
            )

    def _add_edge_banding(
        self, seq: _ItemSequence, design: StructuredDesignData, door_material: str
    ) -> None:
        total_length = sum(
            (cabinet.width_mm + EDGE_BAND_REFERENCE_HEIGHT) * 2 * cabinet.door_count
            for cabinet in design.cabinets.all_units()
        )
        if total_length > 0:
            seq.add(
                PartCategory.FINISH,
                "Edge Banding",
                door_material,
                total_length,
                self.rules.materials.edge_band.thickness,
                0,
                1,
                unit=BomUnit.MILLIMETER,
            )


def generate_bom(design: StructuredDesignData, rules: BomRules) -> BomResult:
    """Convenience wrapper around :class:`BomGenerator`."""
    return BomGenerator(rules).generate(design)
