"""Manufacturing rules that drive panel decomposition.

``BomRules`` is an immutable tree. The built-in values below are the
workshop defaults; a rules document can override any subset of them (see
``casework.application.config.rule_store``).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class SheetSize:
    """Raw sheet dimensions in millimeters."""

    width: float = 1220.0
    height: float = 2440.0

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class MaterialSpec:
    """A sheet material with its thickness and display label."""

    thickness: float
    type: str = ""
    label: str = ""

    @property
    def display_label(self) -> str:
        """Configured label, or ``"{thickness}T {type}"`` when none is set."""
        if self.label:
            return self.label
        thickness = (
            int(self.thickness) if float(self.thickness).is_integer() else self.thickness
        )
        return f"{thickness}T {self.type}".strip()


@dataclass(frozen=True)
class EdgeBandSpec:
    thickness: float = 1.0


@dataclass(frozen=True)
class CountertopSpec:
    thickness: float = 30.0


@dataclass(frozen=True)
class MaterialRules:
    sheet_size: SheetSize = field(default_factory=SheetSize)
    body: MaterialSpec = field(
        default_factory=lambda: MaterialSpec(thickness=18.0, type="PB", label="18T PB")
    )
    door: MaterialSpec = field(
        default_factory=lambda: MaterialSpec(thickness=18.0, type="MDF", label="18T MDF")
    )
    back_panel: MaterialSpec = field(
        default_factory=lambda: MaterialSpec(thickness=2.7, type="MDF", label="2.7T MDF")
    )
    edge_band: EdgeBandSpec = field(default_factory=EdgeBandSpec)
    countertop: CountertopSpec = field(default_factory=CountertopSpec)


@dataclass(frozen=True)
class CabinetDefaults:
    width: float = 600.0
    height: float = 800.0
    depth: float = 550.0


@dataclass(frozen=True)
class ConstructionRules:
    """Carcass construction constants.

    Attributes:
        side_panel_qty: Side panels per cabinet.
        bottom_panel_qty: Bottom boards per lower cabinet.
        band_qty: Horizontal stiffeners per cabinet.
        band_width: Width of one stiffener.
        back_panel_qty: Back panels per cabinet.
        back_panel_clearance: Subtracted from width and height of the back.
        door_gap: Subtracted from nominal door and drawer-front sizes.
        shelf_depth_reduction: Shelf setback from the carcass depth.
    """

    side_panel_qty: int = 2
    bottom_panel_qty: int = 1
    band_qty: int = 2
    band_width: float = 60.0
    back_panel_qty: int = 1
    back_panel_clearance: float = 1.0
    door_gap: float = 4.0
    shelf_depth_reduction: float = 20.0


@dataclass(frozen=True)
class UpperCabinetRules:
    depth_ratio: float = 0.55
    top_panel: bool = True


@dataclass(frozen=True)
class HardwareRules:
    hinges_per_door: int = 2
    hinge_type: str = "soft-close"
    slide_type: str = "soft-close"


@dataclass(frozen=True)
class MoldingClearance:
    width_min: float = 45.0
    width_max: float = 120.0
    height_min: float = 10.0
    height_max: float = 60.0
    depth: float = 20.0


@dataclass(frozen=True)
class WardrobeRules:
    unit_width_min: float = 750.0
    unit_width_max: float = 1050.0
    allow_half_units: bool = True
    shelf_per_section: int = 1


@dataclass(frozen=True)
class BomRules:
    """Complete rules tree used by the generators."""

    materials: MaterialRules = field(default_factory=MaterialRules)
    cabinet_defaults: CabinetDefaults = field(default_factory=CabinetDefaults)
    construction: ConstructionRules = field(default_factory=ConstructionRules)
    upper_cabinet: UpperCabinetRules = field(default_factory=UpperCabinetRules)
    hardware: HardwareRules = field(default_factory=HardwareRules)
    molding_clearance: MoldingClearance = field(default_factory=MoldingClearance)
    wardrobe: WardrobeRules = field(default_factory=WardrobeRules)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_BOM_RULES = BomRules()

RULE_SECTIONS: tuple[str, ...] = (
    "materials",
    "cabinet_defaults",
    "construction",
    "upper_cabinet",
    "hardware",
    "molding_clearance",
    "wardrobe",
)
