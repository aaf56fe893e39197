"""Design input schema.

Design documents come from the upstream wall-analysis pipeline and from
hand-written JSON files, so unknown keys are ignored rather than rejected.
Module entries accept the camelCase aliases produced by older clients.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from casework.domain.value_objects import CabinetType, Category, Confidence


class WallConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    width_mm: float = Field(default=3000.0, ge=0)
    height_mm: float = Field(default=2400.0, ge=0)
    tile_type: str = "unknown"
    confidence: Confidence = Confidence.MEDIUM


class UtilityPositionConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    detected: bool = False
    position_mm: float = 0.0


class UtilitiesConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    water_supply: UtilityPositionConfig = Field(default_factory=UtilityPositionConfig)
    exhaust_duct: UtilityPositionConfig = Field(default_factory=UtilityPositionConfig)
    gas_pipe: UtilityPositionConfig = Field(default_factory=UtilityPositionConfig)


class LayoutConfig(BaseModel):
    """Row layout. ``total_width_mm`` defaults to the wall width when omitted."""

    model_config = ConfigDict(extra="ignore")

    direction: str = "sink_left_cooktop_right"
    total_width_mm: float | None = Field(default=None, ge=0)
    depth_mm: float = Field(default=600.0, ge=0)


class CabinetUnitConfig(BaseModel):
    """One cabinet unit.

    ``position_mm`` may be omitted, in which case units are packed left to
    right in list order.
    """

    model_config = ConfigDict(extra="ignore")

    position_mm: float | None = Field(default=None, ge=0)
    width_mm: float = Field(ge=0)
    type: CabinetType = CabinetType.STANDARD
    door_count: int = Field(default=1, ge=0)
    is_drawer: bool = False
    has_sink: bool | None = None
    has_cooktop: bool | None = None


class CabinetsConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lower: list[CabinetUnitConfig] = Field(default_factory=list)
    upper: list[CabinetUnitConfig] = Field(default_factory=list)
    lower_height_mm: float = Field(default=870.0, ge=0)
    upper_height_mm: float = Field(default=720.0, ge=0)
    leg_height_mm: float = Field(default=150.0, ge=0)
    molding_height_mm: float = Field(default=60.0, ge=0)


class ModuleConfig(BaseModel):
    """Loosely typed module entry.

    Accepts ``w`` for ``width_mm``, ``doorCount`` for ``door_count`` and
    ``isDrawer`` for ``is_drawer``. Missing values are filled in when the
    module is converted to a cabinet unit.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    width_mm: float | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("width_mm", "w")
    )
    door_count: int | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("door_count", "doorCount")
    )
    is_drawer: bool | None = Field(
        default=None, validation_alias=AliasChoices("is_drawer", "isDrawer")
    )
    has_sink: bool | None = None
    has_cooktop: bool | None = None


class ModulesConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    upper: list[ModuleConfig] = Field(default_factory=list)
    lower: list[ModuleConfig] = Field(default_factory=list)


class SinkConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    position_mm: float = 0.0
    width_mm: float = Field(default=800.0, ge=0)
    type: str = "undermount"


class CooktopConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    position_mm: float = 0.0
    width_mm: float = Field(default=600.0, ge=0)
    type: str = "3-burner"
    burner_count: int = Field(default=3, ge=0)


class HoodConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    position_mm: float = 0.0
    width_mm: float = Field(default=600.0, ge=0)
    type: str = "slim"


class FaucetConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = "single_lever"


class EquipmentConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sink: SinkConfig | None = None
    cooktop: CooktopConfig | None = None
    hood: HoodConfig | None = None
    faucet: FaucetConfig | None = None


class MaterialsConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    door_color: str = "white"
    door_finish: str = "matte"
    countertop: str = "white_marble"
    handle_type: str = "line"
    material_codes: list[str] = Field(default_factory=list)


class DesignConfiguration(BaseModel):
    """Root of a design document.

    Example:
        >>> DesignConfiguration.model_validate(
        ...     {"category": "sink", "modules": {"lower": [{"w": 800, "doorCount": 2}]}}
        ... )
    """

    model_config = ConfigDict(extra="ignore")

    category: Category
    style: str = "modern"
    wall: WallConfig = Field(default_factory=WallConfig)
    utilities: UtilitiesConfig = Field(default_factory=UtilitiesConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    cabinets: CabinetsConfig = Field(default_factory=CabinetsConfig)
    modules: ModulesConfig | None = None
    equipment: EquipmentConfig = Field(default_factory=EquipmentConfig)
    materials: MaterialsConfig = Field(default_factory=MaterialsConfig)
