"""Unit tests for the persistent rules store."""

import json
import logging
from pathlib import Path

import pytest

from casework.application.config import RuleStore, RulesError, validate_rules
from casework.domain import DEFAULT_BOM_RULES


class TestRuleStoreLoad:
    """Tests for loading and caching rules."""

    def test_missing_file_falls_back_to_defaults(
        self, rule_store: RuleStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A missing document yields the defaults and a warning."""
        with caplog.at_level(logging.WARNING):
            rules = rule_store.load()

        assert rules == DEFAULT_BOM_RULES
        assert "using defaults" in caplog.text

    def test_corrupt_json_falls_back_to_defaults(self, rules_path: Path) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text("{not json", encoding="utf-8")

        assert RuleStore(rules_path).load() == DEFAULT_BOM_RULES

    def test_non_object_document_falls_back_to_defaults(self, rules_path: Path) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text("[1, 2, 3]", encoding="utf-8")

        assert RuleStore(rules_path).load() == DEFAULT_BOM_RULES

    def test_invalid_value_is_dropped_alone(self, rules_path: Path) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps({"construction": {"door_gap": -5}}), encoding="utf-8"
        )

        assert RuleStore(rules_path).load() == DEFAULT_BOM_RULES

    def test_unknown_key_keeps_valid_overrides(
        self, rules_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps({"construction": {"door_gap": 3}, "version": 2}), encoding="utf-8"
        )

        with caplog.at_level(logging.WARNING):
            rules = RuleStore(rules_path).load()

        assert rules.construction.door_gap == 3
        assert "version" in caplog.text
        assert "using defaults" not in caplog.text

    def test_out_of_range_value_keeps_valid_overrides(self, rules_path: Path) -> None:
        """Only the offending key reverts to its default."""
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps(
                {
                    "construction": {"door_gap": 3, "band_qty": -1},
                    "materials": {"body": {"thickness": 150, "label": "15T PB"}},
                }
            ),
            encoding="utf-8",
        )

        rules = RuleStore(rules_path).load()

        assert rules.construction.door_gap == 3
        assert rules.construction.band_qty == DEFAULT_BOM_RULES.construction.band_qty
        assert rules.materials.body.thickness == DEFAULT_BOM_RULES.materials.body.thickness
        assert rules.materials.body.label == "15T PB"

    def test_wrongly_typed_section_is_dropped(self, rules_path: Path) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps({"hardware": "none", "wardrobe": {"shelf_per_section": 2}}),
            encoding="utf-8",
        )

        rules = RuleStore(rules_path).load()

        assert rules.hardware == DEFAULT_BOM_RULES.hardware
        assert rules.wardrobe.shelf_per_section == 2

    def test_partial_document_merges_over_defaults(self, rules_path: Path) -> None:
        """Keys missing from the document keep their default values."""
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps({"construction": {"door_gap": 3}, "materials": {"body": {"thickness": 15}}}),
            encoding="utf-8",
        )

        rules = RuleStore(rules_path).load()

        assert rules.construction.door_gap == 3
        assert rules.construction.band_qty == DEFAULT_BOM_RULES.construction.band_qty
        assert rules.materials.body.thickness == 15
        assert rules.materials.body.type == "PB"
        assert rules.materials.door == DEFAULT_BOM_RULES.materials.door

    def test_get_caches_until_reload(self, rules_path: Path) -> None:
        store = RuleStore(rules_path)
        assert store.get().construction.door_gap == 4.0

        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(json.dumps({"construction": {"door_gap": 2}}), encoding="utf-8")

        assert store.get().construction.door_gap == 4.0
        assert store.reload().construction.door_gap == 2
        assert store.get().construction.door_gap == 2

    def test_clear_cache_forces_reload(self, rules_path: Path) -> None:
        store = RuleStore(rules_path)
        store.get()
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(json.dumps({"hardware": {"hinges_per_door": 3}}), encoding="utf-8")

        store.clear_cache()

        assert store.get().hardware.hinges_per_door == 3

    def test_default_path(self) -> None:
        assert RuleStore().path == Path("config") / "bom-rules.json"


class TestRuleStoreWrite:
    """Tests for saving, resetting and updating rules."""

    def test_save_writes_full_tree(self, rule_store: RuleStore, rules_path: Path) -> None:
        rule_store.save(DEFAULT_BOM_RULES)

        data = json.loads(rules_path.read_text(encoding="utf-8"))
        assert data == DEFAULT_BOM_RULES.to_dict()
        assert rules_path.read_text(encoding="utf-8").endswith("\n")

    def test_update_section(self, rule_store: RuleStore, rules_path: Path) -> None:
        rules = rule_store.update({"door_gap": 3.0}, section="construction")

        assert rules.construction.door_gap == 3.0
        assert rule_store.get().construction.door_gap == 3.0
        saved = json.loads(rules_path.read_text(encoding="utf-8"))
        assert saved["construction"]["door_gap"] == 3.0
        assert saved["construction"]["band_qty"] == 2

    def test_update_nested_tree(self, rule_store: RuleStore) -> None:
        rules = rule_store.update({"materials": {"sheet_size": {"width": 1220, "height": 2800}}})

        assert rules.materials.sheet_size.height == 2800
        assert rules.materials.sheet_size.width == 1220

    def test_update_unknown_section_rejected(
        self, rule_store: RuleStore, rules_path: Path
    ) -> None:
        with pytest.raises(RulesError, match="Unknown rules section"):
            rule_store.update({"x": 1}, section="plumbing")
        assert not rules_path.exists()

    def test_update_unknown_top_level_key_rejected(self, rule_store: RuleStore) -> None:
        with pytest.raises(RulesError, match="plumbing"):
            rule_store.update({"plumbing": {"x": 1}})

    def test_update_invalid_value_writes_nothing(
        self, rule_store: RuleStore, rules_path: Path
    ) -> None:
        with pytest.raises(RulesError) as exc_info:
            rule_store.update({"depth_ratio": 1.5}, section="upper_cabinet")

        assert exc_info.value.details
        assert exc_info.value.details[0]["path"] == "upper_cabinet.depth_ratio"
        assert not rules_path.exists()
        assert rule_store.get() == DEFAULT_BOM_RULES

    def test_reset_restores_defaults(self, rule_store: RuleStore) -> None:
        rule_store.update({"door_gap": 1.0}, section="construction")

        assert rule_store.reset() == DEFAULT_BOM_RULES
        assert rule_store.reload() == DEFAULT_BOM_RULES

    def test_get_section(self, rule_store: RuleStore) -> None:
        assert rule_store.get_section("hardware")["hinges_per_door"] == 2

    def test_get_unknown_section(self, rule_store: RuleStore) -> None:
        with pytest.raises(RulesError):
            rule_store.get_section("plumbing")


class TestValidateRules:
    """Tests for validate_rules."""

    def test_unknown_key_rejected(self) -> None:
        data = DEFAULT_BOM_RULES.to_dict()
        data["construction"]["door_gapp"] = 3
        with pytest.raises(RulesError):
            validate_rules(data)

    def test_defaults_round_trip(self) -> None:
        assert validate_rules(DEFAULT_BOM_RULES.to_dict()) == DEFAULT_BOM_RULES
