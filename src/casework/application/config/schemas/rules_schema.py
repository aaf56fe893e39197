"""Rules document schema.

Mirrors ``casework.domain.rules.BomRules`` section by section. Every model
forbids unknown keys so that a misspelled rule name is reported instead of
silently ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class SheetSizeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=1220.0, gt=0)
    height: float = Field(default=2440.0, gt=0)


class MaterialSpecConfig(BaseModel):
    """A sheet material.

    Attributes:
        thickness: Board thickness in mm.
        type: Material type code such as "PB" or "MDF".
        label: Display label; derived from thickness and type when empty.
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(gt=0, le=100)
    type: str = ""
    label: str = ""


class EdgeBandConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=1.0, ge=0, le=10)


class CountertopConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=30.0, gt=0, le=200)


class MaterialRulesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sheet_size: SheetSizeConfig = Field(default_factory=SheetSizeConfig)
    body: MaterialSpecConfig = Field(
        default_factory=lambda: MaterialSpecConfig(thickness=18.0, type="PB", label="18T PB")
    )
    door: MaterialSpecConfig = Field(
        default_factory=lambda: MaterialSpecConfig(thickness=18.0, type="MDF", label="18T MDF")
    )
    back_panel: MaterialSpecConfig = Field(
        default_factory=lambda: MaterialSpecConfig(thickness=2.7, type="MDF", label="2.7T MDF")
    )
    edge_band: EdgeBandConfig = Field(default_factory=EdgeBandConfig)
    countertop: CountertopConfig = Field(default_factory=CountertopConfig)


class CabinetDefaultsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=600.0, gt=0)
    height: float = Field(default=800.0, gt=0)
    depth: float = Field(default=550.0, gt=0)


class ConstructionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    side_panel_qty: int = Field(default=2, ge=0)
    bottom_panel_qty: int = Field(default=1, ge=0)
    band_qty: int = Field(default=2, ge=0)
    band_width: float = Field(default=60.0, ge=0)
    back_panel_qty: int = Field(default=1, ge=0)
    back_panel_clearance: float = Field(default=1.0, ge=0)
    door_gap: float = Field(default=4.0, ge=0, le=50)
    shelf_depth_reduction: float = Field(default=20.0, ge=0)


class UpperCabinetConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    depth_ratio: float = Field(default=0.55, gt=0, le=1)
    top_panel: bool = True


class HardwareConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hinges_per_door: int = Field(default=2, ge=0, le=10)
    hinge_type: str = "soft-close"
    slide_type: str = "soft-close"


class MoldingClearanceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width_min: float = Field(default=45.0, ge=0)
    width_max: float = Field(default=120.0, ge=0)
    height_min: float = Field(default=10.0, ge=0)
    height_max: float = Field(default=60.0, ge=0)
    depth: float = Field(default=20.0, ge=0)


class WardrobeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    unit_width_min: float = Field(default=750.0, gt=0)
    unit_width_max: float = Field(default=1050.0, gt=0)
    allow_half_units: bool = True
    shelf_per_section: int = Field(default=1, ge=0)


class BomRulesConfig(BaseModel):
    """Root of a rules document."""

    model_config = ConfigDict(extra="forbid")

    materials: MaterialRulesConfig = Field(default_factory=MaterialRulesConfig)
    cabinet_defaults: CabinetDefaultsConfig = Field(default_factory=CabinetDefaultsConfig)
    construction: ConstructionConfig = Field(default_factory=ConstructionConfig)
    upper_cabinet: UpperCabinetConfig = Field(default_factory=UpperCabinetConfig)
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    molding_clearance: MoldingClearanceConfig = Field(default_factory=MoldingClearanceConfig)
    wardrobe: WardrobeConfig = Field(default_factory=WardrobeConfig)
