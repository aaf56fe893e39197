"""Pydantic schema models for design and rules documents."""

from casework.application.config.schemas.design_schema import (
    CabinetsConfig as CabinetsConfig,
    CabinetUnitConfig as CabinetUnitConfig,
    CooktopConfig as CooktopConfig,
    DesignConfiguration as DesignConfiguration,
    EquipmentConfig as EquipmentConfig,
    FaucetConfig as FaucetConfig,
    HoodConfig as HoodConfig,
    LayoutConfig as LayoutConfig,
    MaterialsConfig as MaterialsConfig,
    ModuleConfig as ModuleConfig,
    ModulesConfig as ModulesConfig,
    SinkConfig as SinkConfig,
    UtilitiesConfig as UtilitiesConfig,
    UtilityPositionConfig as UtilityPositionConfig,
    WallConfig as WallConfig,
)
from casework.application.config.schemas.rules_schema import (
    BomRulesConfig as BomRulesConfig,
    CabinetDefaultsConfig as CabinetDefaultsConfig,
    ConstructionConfig as ConstructionConfig,
    CountertopConfig as CountertopConfig,
    EdgeBandConfig as EdgeBandConfig,
    HardwareConfig as HardwareConfig,
    MaterialRulesConfig as MaterialRulesConfig,
    MaterialSpecConfig as MaterialSpecConfig,
    MoldingClearanceConfig as MoldingClearanceConfig,
    SheetSizeConfig as SheetSizeConfig,
    UpperCabinetConfig as UpperCabinetConfig,
    WardrobeConfig as WardrobeConfig,
)
