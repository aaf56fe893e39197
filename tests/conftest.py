"""Pytest configuration and shared fixtures for casework tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from casework.application import GenerationOutput, ServiceFactory
from casework.application.config import RuleStore, config_to_design, load_design_from_dict
from casework.domain import DEFAULT_BOM_RULES, BomRules, StructuredDesignData


# =============================================================================
# Design documents
# =============================================================================


def sink_design_document() -> dict[str, Any]:
    """Kitchen run: sink, drawer bank and cooktop below, one double upper."""
    return {
        "category": "sink",
        "style": "modern",
        "wall": {"width_mm": 3600, "height_mm": 2400, "tile_type": "subway"},
        "utilities": {
            "water_supply": {"detected": True, "position_mm": 400},
            "exhaust_duct": {"detected": True, "position_mm": 2000},
            "gas_pipe": {"detected": False},
        },
        "layout": {"depth_mm": 600},
        "cabinets": {
            "lower": [
                {"position_mm": 0, "width_mm": 800, "type": "sink", "door_count": 2, "has_sink": True},
                {"position_mm": 800, "width_mm": 600, "type": "drawer", "door_count": 3, "is_drawer": True},
                {"position_mm": 1400, "width_mm": 800, "type": "cooktop", "door_count": 1, "has_cooktop": True},
            ],
            "upper": [
                {"position_mm": 0, "width_mm": 900, "door_count": 2},
            ],
            "lower_height_mm": 870,
            "upper_height_mm": 720,
            "leg_height_mm": 150,
            "molding_height_mm": 60,
        },
        "equipment": {
            "sink": {"position_mm": 400, "width_mm": 800, "type": "undermount"},
            "cooktop": {"position_mm": 1800, "width_mm": 600, "type": "induction"},
            "hood": {"position_mm": 1800, "width_mm": 600, "type": "slim"},
            "faucet": {"type": "single_lever"},
        },
        "materials": {
            "door_color": "white",
            "door_finish": "matte",
            "countertop": "white_marble",
            "handle_type": "line",
        },
    }


def wardrobe_design_document() -> dict[str, Any]:
    """Wardrobe with two hanger units and no uppers; equipment is ignored."""
    return {
        "category": "wardrobe",
        "wall": {"width_mm": 1800, "height_mm": 2400},
        "cabinets": {
            "lower": [
                {"width_mm": 900, "type": "hanger", "door_count": 2},
                {"width_mm": 900, "type": "shelf", "door_count": 2},
            ],
        },
        "equipment": {"sink": {"position_mm": 400, "width_mm": 800}},
    }


@pytest.fixture
def sink_document() -> dict[str, Any]:
    return sink_design_document()


@pytest.fixture
def sink_design() -> StructuredDesignData:
    """The kitchen run converted to domain data."""
    return config_to_design(load_design_from_dict(sink_design_document()))


@pytest.fixture
def wardrobe_design() -> StructuredDesignData:
    return config_to_design(load_design_from_dict(wardrobe_design_document()))


@pytest.fixture
def design_file(tmp_path: Path) -> Path:
    """The kitchen run written to a JSON file."""
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps(sink_design_document()), encoding="utf-8")
    return path


# =============================================================================
# Rules and services
# =============================================================================


@pytest.fixture
def rules() -> BomRules:
    return DEFAULT_BOM_RULES


@pytest.fixture
def rules_path(tmp_path: Path) -> Path:
    """Location of a rules document that does not exist yet."""
    return tmp_path / "config" / "bom-rules.json"


@pytest.fixture
def rule_store(rules_path: Path) -> RuleStore:
    return RuleStore(rules_path)


@pytest.fixture
def service_factory(rules_path: Path) -> ServiceFactory:
    return ServiceFactory(rules_path=rules_path)


@pytest.fixture
def generation_output(
    service_factory: ServiceFactory, sink_design: StructuredDesignData
) -> GenerationOutput:
    """Full pipeline output for the kitchen run with default rules."""
    return service_factory.create_generate_command().execute(sink_design)
