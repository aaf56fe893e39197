"""Design entities consumed by the BOM and drawing generators.

These are the canonical, already-normalized shapes. Loosely typed input is
validated and converted by ``casework.application.config`` before it reaches
the domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import CabinetType, Category, Confidence, EquipmentKind, Tier

# Equipment each category is allowed to carry, in BOM order.
CATEGORY_EQUIPMENT: dict[Category, tuple[EquipmentKind, ...]] = {
    Category.SINK: (
        EquipmentKind.SINK,
        EquipmentKind.FAUCET,
        EquipmentKind.COOKTOP,
        EquipmentKind.HOOD,
    ),
    Category.VANITY: (EquipmentKind.SINK, EquipmentKind.FAUCET),
}


@dataclass(frozen=True)
class CabinetUnit:
    """One segment of a cabinet row.

    Attributes:
        position_mm: Offset of the left edge from the row origin.
        width_mm: Outer width of the unit.
        type: Functional type of the unit.
        door_count: Number of doors, or drawer fronts when ``is_drawer``.
        is_drawer: True for a drawer bank.
        has_sink: The unit houses the sink bowl.
        has_cooktop: The unit houses the cooktop.
    """

    position_mm: float
    width_mm: float
    type: CabinetType = CabinetType.STANDARD
    door_count: int = 1
    is_drawer: bool = False
    has_sink: bool | None = None
    has_cooktop: bool | None = None

    def __post_init__(self) -> None:
        if self.width_mm < 0:
            raise ValueError("Cabinet width must be non-negative")
        if self.door_count < 0:
            raise ValueError("Door count must be non-negative")

    @property
    def has_shelf(self) -> bool:
        """Drawer banks and fridge bays carry no shelf."""
        return not self.is_drawer and self.type != CabinetType.FRIDGE


@dataclass(frozen=True)
class UtilityPosition:
    """A wall utility connection detected by wall analysis."""

    detected: bool = False
    position_mm: float = 0.0


@dataclass(frozen=True)
class Utilities:
    water_supply: UtilityPosition = field(default_factory=UtilityPosition)
    exhaust_duct: UtilityPosition = field(default_factory=UtilityPosition)
    gas_pipe: UtilityPosition = field(default_factory=UtilityPosition)


@dataclass(frozen=True)
class WallInfo:
    width_mm: float = 3000.0
    height_mm: float = 2400.0
    tile_type: str = "unknown"
    confidence: Confidence = Confidence.MEDIUM

    @property
    def has_known_tile(self) -> bool:
        return bool(self.tile_type) and self.tile_type != "unknown"


@dataclass(frozen=True)
class LayoutInfo:
    direction: str = "sink_left_cooktop_right"
    total_width_mm: float = 3000.0
    depth_mm: float = 600.0


@dataclass(frozen=True)
class CabinetRows:
    """Both cabinet tiers plus their shared heights."""

    lower: tuple[CabinetUnit, ...] = ()
    upper: tuple[CabinetUnit, ...] = ()
    lower_height_mm: float = 870.0
    upper_height_mm: float = 720.0
    leg_height_mm: float = 150.0
    molding_height_mm: float = 60.0

    @property
    def lower_body_height_mm(self) -> float:
        """Height of a lower carcass, excluding the legs."""
        return max(0.0, self.lower_height_mm - self.leg_height_mm)

    def tier(self, tier: Tier) -> tuple[CabinetUnit, ...]:
        return self.lower if tier == Tier.LOWER else self.upper

    def all_units(self) -> tuple[CabinetUnit, ...]:
        return self.lower + self.upper


@dataclass(frozen=True)
class SinkSpec:
    position_mm: float
    width_mm: float = 800.0
    type: str = "undermount"


@dataclass(frozen=True)
class CooktopSpec:
    position_mm: float
    width_mm: float = 600.0
    type: str = "3-burner"
    burner_count: int = 3


@dataclass(frozen=True)
class HoodSpec:
    position_mm: float
    width_mm: float = 600.0
    type: str = "slim"


@dataclass(frozen=True)
class FaucetSpec:
    type: str = "single_lever"


@dataclass(frozen=True)
class Equipment:
    sink: SinkSpec | None = None
    cooktop: CooktopSpec | None = None
    hood: HoodSpec | None = None
    faucet: FaucetSpec | None = None


@dataclass(frozen=True)
class MaterialChoice:
    door_color: str = "white"
    door_finish: str = "matte"
    countertop: str = "white_marble"
    handle_type: str = "line"
    material_codes: tuple[str, ...] = ()


@dataclass(frozen=True)
class StructuredDesignData:
    """Complete cabinet design handed over by the wall-analysis pipeline."""

    category: Category
    style: str = "modern"
    wall: WallInfo = field(default_factory=WallInfo)
    utilities: Utilities = field(default_factory=Utilities)
    layout: LayoutInfo = field(default_factory=LayoutInfo)
    cabinets: CabinetRows = field(default_factory=CabinetRows)
    equipment: Equipment = field(default_factory=Equipment)
    materials: MaterialChoice = field(default_factory=MaterialChoice)

    def allows(self, kind: EquipmentKind) -> bool:
        """Whether this design's category carries the given equipment."""
        return kind in CATEGORY_EQUIPMENT.get(self.category, ())

    @property
    def sink(self) -> SinkSpec | None:
        return self.equipment.sink if self.allows(EquipmentKind.SINK) else None

    @property
    def faucet(self) -> FaucetSpec | None:
        return self.equipment.faucet if self.allows(EquipmentKind.FAUCET) else None

    @property
    def cooktop(self) -> CooktopSpec | None:
        return self.equipment.cooktop if self.allows(EquipmentKind.COOKTOP) else None

    @property
    def hood(self) -> HoodSpec | None:
        return self.equipment.hood if self.allows(EquipmentKind.HOOD) else None
