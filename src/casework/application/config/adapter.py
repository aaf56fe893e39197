"""Adapters between configuration schemas and domain objects.

Validated pydantic models are converted into the immutable dataclasses the
generators consume, and rules can be converted back for persistence.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from casework.application.config.schemas import (
    BomRulesConfig,
    CabinetUnitConfig,
    DesignConfiguration,
    MaterialSpecConfig,
    ModuleConfig,
)
from casework.domain.entities import (
    CabinetRows,
    CabinetUnit,
    CooktopSpec,
    Equipment,
    FaucetSpec,
    HoodSpec,
    LayoutInfo,
    MaterialChoice,
    SinkSpec,
    StructuredDesignData,
    Utilities,
    UtilityPosition,
    WallInfo,
)
from casework.domain.rules import (
    BomRules,
    CabinetDefaults,
    ConstructionRules,
    CountertopSpec,
    EdgeBandSpec,
    HardwareRules,
    MaterialRules,
    MaterialSpec,
    MoldingClearance,
    SheetSize,
    UpperCabinetRules,
    WardrobeRules,
)
from casework.domain.value_objects import CabinetType

DEFAULT_MODULE_WIDTH = 600.0
DEFAULT_MODULE_DOORS = 1


def modules_to_cabinet_units(
    modules: Iterable[ModuleConfig | Mapping[str, Any]] | None,
) -> tuple[CabinetUnit, ...]:
    """Normalize a loosely typed module list into cabinet units.

    Positions are accumulated left to right. The unit type is derived from
    the sink, cooktop and drawer flags in that order of precedence.

    Example:
        >>> units = modules_to_cabinet_units([{"w": 800, "doorCount": 2}, {"width_mm": 600}])
        >>> [(u.position_mm, u.width_mm, u.door_count) for u in units]
        [(0.0, 800.0, 2), (800.0, 600.0, 1)]
    """
    units: list[CabinetUnit] = []
    position = 0.0
    for raw in modules or ():
        module = raw if isinstance(raw, ModuleConfig) else ModuleConfig.model_validate(raw)
        width = module.width_mm if module.width_mm is not None else DEFAULT_MODULE_WIDTH
        door_count = module.door_count if module.door_count is not None else DEFAULT_MODULE_DOORS
        is_drawer = bool(module.is_drawer)

        if module.has_sink:
            cabinet_type = CabinetType.SINK
        elif module.has_cooktop:
            cabinet_type = CabinetType.COOKTOP
        elif is_drawer:
            cabinet_type = CabinetType.DRAWER
        else:
            cabinet_type = CabinetType.STANDARD

        units.append(
            CabinetUnit(
                position_mm=position,
                width_mm=float(width),
                type=cabinet_type,
                door_count=door_count,
                is_drawer=is_drawer,
                has_sink=module.has_sink,
                has_cooktop=module.has_cooktop,
            )
        )
        position += width
    return tuple(units)


def _cabinet_units(configs: list[CabinetUnitConfig]) -> tuple[CabinetUnit, ...]:
    units: list[CabinetUnit] = []
    position = 0.0
    for config in configs:
        if config.position_mm is not None:
            position = config.position_mm
        units.append(
            CabinetUnit(
                position_mm=position,
                width_mm=config.width_mm,
                type=config.type,
                door_count=config.door_count,
                is_drawer=config.is_drawer,
                has_sink=config.has_sink,
                has_cooktop=config.has_cooktop,
            )
        )
        position += config.width_mm
    return tuple(units)


def config_to_design(config: DesignConfiguration) -> StructuredDesignData:
    """Convert a validated design document into domain data.

    When ``modules`` carries any entries it takes precedence over the
    explicit ``cabinets`` lists.
    """
    wall = WallInfo(
        width_mm=config.wall.width_mm,
        height_mm=config.wall.height_mm,
        tile_type=config.wall.tile_type,
        confidence=config.wall.confidence,
    )
    total_width = (
        config.layout.total_width_mm
        if config.layout.total_width_mm is not None
        else config.wall.width_mm
    )

    if config.modules is not None and (config.modules.lower or config.modules.upper):
        lower = modules_to_cabinet_units(config.modules.lower)
        upper = modules_to_cabinet_units(config.modules.upper)
    else:
        lower = _cabinet_units(config.cabinets.lower)
        upper = _cabinet_units(config.cabinets.upper)

    cabinets = CabinetRows(
        lower=lower,
        upper=upper,
        lower_height_mm=config.cabinets.lower_height_mm,
        upper_height_mm=config.cabinets.upper_height_mm,
        leg_height_mm=config.cabinets.leg_height_mm,
        molding_height_mm=config.cabinets.molding_height_mm,
    )

    utilities = config.utilities
    equipment = config.equipment
    return StructuredDesignData(
        category=config.category,
        style=config.style,
        wall=wall,
        utilities=Utilities(
            water_supply=UtilityPosition(**utilities.water_supply.model_dump()),
            exhaust_duct=UtilityPosition(**utilities.exhaust_duct.model_dump()),
            gas_pipe=UtilityPosition(**utilities.gas_pipe.model_dump()),
        ),
        layout=LayoutInfo(
            direction=config.layout.direction,
            total_width_mm=total_width,
            depth_mm=config.layout.depth_mm,
        ),
        cabinets=cabinets,
        equipment=Equipment(
            sink=SinkSpec(**equipment.sink.model_dump()) if equipment.sink else None,
            cooktop=CooktopSpec(**equipment.cooktop.model_dump()) if equipment.cooktop else None,
            hood=HoodSpec(**equipment.hood.model_dump()) if equipment.hood else None,
            faucet=FaucetSpec(**equipment.faucet.model_dump()) if equipment.faucet else None,
        ),
        materials=MaterialChoice(
            door_color=config.materials.door_color,
            door_finish=config.materials.door_finish,
            countertop=config.materials.countertop,
            handle_type=config.materials.handle_type,
            material_codes=tuple(config.materials.material_codes),
        ),
    )


def _material_spec(config: MaterialSpecConfig) -> MaterialSpec:
    return MaterialSpec(thickness=config.thickness, type=config.type, label=config.label)


def config_to_rules(config: BomRulesConfig) -> BomRules:
    """Convert a validated rules document into a domain rules tree."""
    materials = config.materials
    return BomRules(
        materials=MaterialRules(
            sheet_size=SheetSize(**materials.sheet_size.model_dump()),
            body=_material_spec(materials.body),
            door=_material_spec(materials.door),
            back_panel=_material_spec(materials.back_panel),
            edge_band=EdgeBandSpec(**materials.edge_band.model_dump()),
            countertop=CountertopSpec(**materials.countertop.model_dump()),
        ),
        cabinet_defaults=CabinetDefaults(**config.cabinet_defaults.model_dump()),
        construction=ConstructionRules(**config.construction.model_dump()),
        upper_cabinet=UpperCabinetRules(**config.upper_cabinet.model_dump()),
        hardware=HardwareRules(**config.hardware.model_dump()),
        molding_clearance=MoldingClearance(**config.molding_clearance.model_dump()),
        wardrobe=WardrobeRules(**config.wardrobe.model_dump()),
    )


def rules_to_config(rules: BomRules) -> BomRulesConfig:
    """Convert a domain rules tree back into its document form."""
    return BomRulesConfig.model_validate(rules.to_dict())
