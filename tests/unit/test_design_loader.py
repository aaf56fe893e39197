"""Unit tests for design document loading and error reporting."""

import json
from pathlib import Path
from typing import Any

import pytest

from casework.application.config import ConfigError, load_design, load_design_from_dict
from casework.application.config.loader import format_json_path
from casework.domain import CabinetType, Category


class TestFormatJsonPath:
    """Tests for format_json_path."""

    def test_indexes_attach_to_previous_segment(self) -> None:
        assert format_json_path(("cabinets", "lower", 0, "width_mm")) == "cabinets.lower[0].width_mm"

    def test_leading_index(self) -> None:
        assert format_json_path((2, "w")) == "[2].w"


class TestLoadDesign:
    """Tests for load_design."""

    def test_loads_valid_file(self, design_file: Path) -> None:
        config = load_design(design_file)

        assert config.category == Category.SINK
        assert config.cabinets.lower[0].type == CabinetType.SINK
        assert config.cabinets.upper[0].width_mm == 900

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design(tmp_path / "nope.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json_reports_position(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{\n  "category": "sink",\n  oops\n}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_design(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3
        assert error.path == path

    def test_validation_error_carries_json_path(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps({"category": "sink", "cabinets": {"lower": [{"width_mm": -5}]}}),
            encoding="utf-8",
        )

        with pytest.raises(ConfigError) as exc_info:
            load_design(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "cabinets.lower[0].width_mm"
        assert "cabinets.lower[0].width_mm" in str(error)


class TestLoadDesignFromDict:
    """Tests for load_design_from_dict."""

    def test_minimal_document_gets_defaults(self) -> None:
        config = load_design_from_dict({"category": "storage"})

        assert config.style == "modern"
        assert config.wall.width_mm == 3000
        assert config.layout.total_width_mm is None
        assert config.cabinets.lower == []
        assert config.modules is None

    def test_unknown_keys_ignored(self, sink_document: dict[str, Any]) -> None:
        sink_document["analysis_id"] = "abc"
        sink_document["wall"]["source"] = "camera"

        config = load_design_from_dict(sink_document)

        assert config.wall.width_mm == 3600

    def test_missing_category_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"style": "modern"})
        assert exc_info.value.details[0]["path"] == "category"

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"category": "garage"})
        assert exc_info.value.error_type == "validation"

    def test_cabinet_width_required(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"category": "sink", "cabinets": {"upper": [{"door_count": 2}]}})
        assert exc_info.value.details[0]["path"] == "cabinets.upper[0].width_mm"
