"""End-to-end tests for the generation pipeline.

Design document on disk -> loader -> generators -> renderer -> exporters.
"""

import json
from pathlib import Path

import pytest

from casework.application import GenerationOptions, ServiceFactory, get_factory
from casework.application.config import config_to_design, load_design
from casework.domain import PartCategory
from casework.infrastructure.exporters import ExporterRegistry, ExportManager


class TestKitchenRun:
    """The sink kitchen run from design file to exported files."""

    @pytest.fixture
    def output(self, design_file: Path, service_factory: ServiceFactory):
        design = config_to_design(load_design(design_file))
        return service_factory.create_generate_command().execute(
            design, GenerationOptions(render_svg=True)
        )

    def test_bom_totals(self, output) -> None:
        bom = output.bom

        assert bom.summary.total_panels == 8
        (countertop,) = bom.items_in(PartCategory.COUNTERTOP)
        assert (countertop.width_mm, countertop.height_mm) == (3600, 30)
        assert bom.summary.sheet_estimate > 0

    def test_drawing_matches_bom(self, output) -> None:
        details = output.drawing.manufacturing.panel_details
        sheet_ids = [item.id for item in output.bom.items if item.is_sheet_part]
        assert [d.bom_id for d in details] == sheet_ids

    def test_every_view_rendered(self, output) -> None:
        assert all(svg.startswith("<svg") for svg in output.svgs.values())
        assert len(output.svgs) == 5

    def test_output_carries_rules(self, output) -> None:
        assert output.rules.construction.door_gap == 4.0

    def test_export_all_formats(self, output, tmp_path: Path) -> None:
        files = ExportManager(tmp_path).export_all(
            ExporterRegistry.available_formats(), output, "kitchen"
        )

        assert sorted(files) == ["bom", "dxf", "json", "svg"]
        data = json.loads(files["json"].read_text(encoding="utf-8"))
        assert data["bom"]["summary"]["total_panels"] == 8
        assert data["drawing"]["metadata"]["category"] == "sink"


class TestRulesFlow:
    """Rule changes reach the next generation run."""

    def test_updated_door_gap_changes_doors(
        self, design_file: Path, service_factory: ServiceFactory
    ) -> None:
        design = config_to_design(load_design(design_file))
        command = service_factory.create_generate_command()

        before = command.execute(design)
        service_factory.get_rule_store().update({"door_gap": 3}, section="construction")
        after = command.execute(design)

        def door(output):
            return next(i for i in output.bom.items if i.name == "Lower 0 Door 1")

        assert door(before).width_mm == 398
        assert door(after).width_mm == 399
        assert after.drawing.common.front_view.doors[1].x == 400.5

    def test_new_store_reads_saved_rules(
        self, rules_path: Path, service_factory: ServiceFactory
    ) -> None:
        service_factory.get_rule_store().update({"upper_cabinet": {"top_panel": False}})

        fresh = ServiceFactory(rules_path=rules_path)
        assert fresh.get_rule_store().get().upper_cabinet.top_panel is False

    def test_invalid_options_rejected(
        self, design_file: Path, service_factory: ServiceFactory
    ) -> None:
        design = config_to_design(load_design(design_file))
        command = service_factory.create_generate_command()

        with pytest.raises(ValueError, match="Scale must be positive"):
            command.execute(design, GenerationOptions(render_svg=True, scale=0))

    def test_hand_edited_rules_keep_valid_overrides(
        self, design_file: Path, rules_path: Path, service_factory: ServiceFactory
    ) -> None:
        rules_path.parent.mkdir(parents=True)
        rules_path.write_text(
            json.dumps({"construction": {"door_gap": 3}, "hardware": {"hinges_per_door": 99}}),
            encoding="utf-8",
        )
        design = config_to_design(load_design(design_file))

        output = service_factory.create_generate_command().execute(design)

        door = next(i for i in output.bom.items if i.name == "Lower 0 Door 1")
        hinges = next(i for i in output.bom.items if i.name == "Lower 0 Hinge")
        assert door.width_mm == 399
        assert hinges.quantity == 4


class TestDefaultFactory:
    def test_default_factory_is_shared(self) -> None:
        factory = get_factory()

        assert get_factory() is factory
        assert factory.get_rule_store() is factory.get_rule_store()
        assert factory.rules_path == Path("config") / "bom-rules.json"
