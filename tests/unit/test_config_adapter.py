"""Unit tests for converting design and rules documents to domain data."""

from typing import Any

import pytest

from casework.application.config import (
    BomRulesConfig,
    ModuleConfig,
    config_to_design,
    config_to_rules,
    load_design_from_dict,
    modules_to_cabinet_units,
    rules_to_config,
)
from casework.domain import DEFAULT_BOM_RULES, CabinetType, StructuredDesignData


class TestModulesToCabinetUnits:
    """Tests for modules_to_cabinet_units."""

    def test_aliases_are_accepted(self) -> None:
        units = modules_to_cabinet_units(
            [{"w": 800, "doorCount": 2}, {"width_mm": 600, "door_count": 3, "isDrawer": True}]
        )

        assert [(u.width_mm, u.door_count, u.is_drawer) for u in units] == [
            (800.0, 2, False),
            (600.0, 3, True),
        ]

    def test_positions_accumulate_left_to_right(self) -> None:
        units = modules_to_cabinet_units([{"w": 800}, {"w": 600}, {"w": 450}])
        assert [u.position_mm for u in units] == [0.0, 800.0, 1400.0]

    def test_defaults_for_missing_values(self) -> None:
        (unit,) = modules_to_cabinet_units([{}])

        assert unit.width_mm == 600.0
        assert unit.door_count == 1
        assert not unit.is_drawer
        assert unit.type == CabinetType.STANDARD

    def test_type_precedence(self) -> None:
        units = modules_to_cabinet_units(
            [
                {"has_sink": True, "has_cooktop": True, "isDrawer": True},
                {"has_cooktop": True, "isDrawer": True},
                {"isDrawer": True},
                {},
            ]
        )
        assert [u.type for u in units] == [
            CabinetType.SINK,
            CabinetType.COOKTOP,
            CabinetType.DRAWER,
            CabinetType.STANDARD,
        ]

    def test_accepts_validated_models(self) -> None:
        units = modules_to_cabinet_units([ModuleConfig(width_mm=700, door_count=2)])
        assert units[0].width_mm == 700.0

    def test_none_yields_no_units(self) -> None:
        assert modules_to_cabinet_units(None) == ()


class TestConfigToDesign:
    """Tests for config_to_design."""

    def _design(self, data: dict[str, Any]) -> StructuredDesignData:
        return config_to_design(load_design_from_dict(data))

    def test_total_width_defaults_to_wall_width(self) -> None:
        design = self._design({"category": "storage", "wall": {"width_mm": 2400}})
        assert design.layout.total_width_mm == 2400

    def test_explicit_total_width_kept(self) -> None:
        design = self._design(
            {"category": "storage", "wall": {"width_mm": 2400}, "layout": {"total_width_mm": 2000}}
        )
        assert design.layout.total_width_mm == 2000

    def test_missing_positions_are_packed(self) -> None:
        design = self._design(
            {
                "category": "storage",
                "cabinets": {"lower": [{"width_mm": 500}, {"width_mm": 700}, {"width_mm": 300}]},
            }
        )
        assert [c.position_mm for c in design.cabinets.lower] == [0.0, 500.0, 1200.0]

    def test_modules_take_precedence(self) -> None:
        design = self._design(
            {
                "category": "sink",
                "cabinets": {"lower": [{"width_mm": 500}]},
                "modules": {"lower": [{"w": 800, "doorCount": 2}], "upper": [{"w": 900}]},
            }
        )
        assert [c.width_mm for c in design.cabinets.lower] == [800.0]
        assert [c.width_mm for c in design.cabinets.upper] == [900.0]

    def test_empty_modules_fall_back_to_cabinets(self) -> None:
        design = self._design(
            {
                "category": "sink",
                "cabinets": {"lower": [{"width_mm": 500}]},
                "modules": {"lower": [], "upper": []},
            }
        )
        assert [c.width_mm for c in design.cabinets.lower] == [500.0]

    def test_equipment_converted(self, sink_design: StructuredDesignData) -> None:
        assert sink_design.equipment.sink is not None
        assert sink_design.equipment.sink.width_mm == 800
        assert sink_design.equipment.cooktop.type == "induction"
        assert sink_design.utilities.water_supply.detected


class TestEquipmentByCategory:
    """Equipment is only visible for categories that carry it."""

    def test_sink_category_keeps_all_equipment(self, sink_design: StructuredDesignData) -> None:
        assert sink_design.sink is not None
        assert sink_design.faucet is not None
        assert sink_design.cooktop is not None
        assert sink_design.hood is not None

    def test_vanity_keeps_sink_and_faucet(self, sink_document: dict[str, Any]) -> None:
        sink_document["category"] = "vanity"
        design = config_to_design(load_design_from_dict(sink_document))

        assert design.sink is not None
        assert design.faucet is not None
        assert design.cooktop is None
        assert design.hood is None

    def test_wardrobe_ignores_equipment(self, wardrobe_design: StructuredDesignData) -> None:
        assert wardrobe_design.equipment.sink is not None
        assert wardrobe_design.sink is None


class TestRulesConversion:
    """Tests for config_to_rules and rules_to_config."""

    def test_default_document_matches_default_rules(self) -> None:
        assert config_to_rules(BomRulesConfig()) == DEFAULT_BOM_RULES

    def test_round_trip(self) -> None:
        assert config_to_rules(rules_to_config(DEFAULT_BOM_RULES)) == DEFAULT_BOM_RULES

    def test_unknown_keys_forbidden(self) -> None:
        with pytest.raises(ValueError):
            BomRulesConfig.model_validate({"construction": {"door_gapp": 3}})
