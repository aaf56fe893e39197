"""Integration tests for the casework CLI.

Every command is run end-to-end through the Typer CliRunner against a
design file and a rules document in a temporary directory.
"""

import csv
import io
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from casework.application.config import RuleStore
from casework.cli.main import app

runner = CliRunner()


@pytest.fixture
def saved_rules(rules_path: Path) -> Path:
    """A rules document holding the defaults."""
    RuleStore(rules_path).reset()
    return rules_path


class TestBomCommand:
    """Test suite for the 'bom' command."""

    def test_text_to_stdout(self, design_file: Path, saved_rules: Path) -> None:
        result = runner.invoke(app, ["bom", str(design_file), "--rules", str(saved_rules)])

        assert result.exit_code == 0
        assert "BILL OF MATERIALS" in result.output
        assert "Lower 0 Door 1" in result.output

    def test_csv_to_file(self, design_file: Path, saved_rules: Path, tmp_path: Path) -> None:
        out = tmp_path / "out" / "kitchen.csv"
        result = runner.invoke(
            app,
            ["bom", str(design_file), "-f", "csv", "-o", str(out), "-r", str(saved_rules)],
        )

        assert result.exit_code == 0
        assert f"Written: {out}" in result.output
        rows = list(csv.reader(io.StringIO(out.read_text(encoding="utf-8"))))
        assert rows[0][0] == "ID"

    def test_json_format(self, design_file: Path, saved_rules: Path) -> None:
        result = runner.invoke(
            app, ["bom", str(design_file), "--format", "json", "--rules", str(saved_rules)]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["summary"]["total_panels"] == 8

    def test_unknown_format(self, design_file: Path, saved_rules: Path) -> None:
        result = runner.invoke(
            app, ["bom", str(design_file), "--format", "xlsx", "--rules", str(saved_rules)]
        )

        assert result.exit_code == 1
        assert "Unknown format 'xlsx'" in result.output

    def test_missing_design_file(self, tmp_path: Path, saved_rules: Path) -> None:
        result = runner.invoke(
            app, ["bom", str(tmp_path / "missing.json"), "--rules", str(saved_rules)]
        )

        assert result.exit_code == 1
        assert "Design file not found" in result.output

    def test_invalid_design(self, tmp_path: Path, saved_rules: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"category": "garage"}), encoding="utf-8")

        result = runner.invoke(app, ["bom", str(path), "--rules", str(saved_rules)])

        assert result.exit_code == 1
        assert "Design validation failed" in result.output
        assert "category" in result.output

    def test_broken_json_reports_line(self, tmp_path: Path, saved_rules: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{\n  "category": \n}', encoding="utf-8")

        result = runner.invoke(app, ["bom", str(path), "--rules", str(saved_rules)])

        assert result.exit_code == 1
        assert "Line 3" in result.output


class TestDrawingCommand:
    def test_drawing_json(self, design_file: Path, saved_rules: Path) -> None:
        result = runner.invoke(app, ["drawing", str(design_file), "--rules", str(saved_rules)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["common"]["front_view"]["cabinets"]) == 4
        assert data["manufacturing"]["panel_details"]

    def test_skip_layouts(self, design_file: Path, saved_rules: Path) -> None:
        result = runner.invoke(
            app,
            [
                "drawing",
                str(design_file),
                "--no-manufacturing",
                "--no-installation",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["manufacturing"]["panel_details"] == []
        assert data["installation"]["utilities"] == []


class TestRenderCommand:
    def test_render_selected_views(
        self, design_file: Path, saved_rules: Path, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "svg"
        result = runner.invoke(
            app,
            [
                "render",
                str(design_file),
                "--output-dir",
                str(out_dir),
                "--views",
                "front,side",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 0
        assert "Rendered views:" in result.output
        assert sorted(p.name for p in out_dir.iterdir()) == ["front_view.svg", "side_view.svg"]

    def test_unknown_view(self, design_file: Path, saved_rules: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "render",
                str(design_file),
                "-d",
                str(tmp_path),
                "--views",
                "isometric",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 1
        assert "Unknown view" in result.output

    def test_invalid_scale(self, design_file: Path, saved_rules: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["render", str(design_file), "-d", str(tmp_path), "--scale", "0", "-r", str(saved_rules)],
        )

        assert result.exit_code == 1
        assert "Scale must be positive" in result.output


class TestExportCommand:
    def test_export_all(self, design_file: Path, saved_rules: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "export"
        result = runner.invoke(
            app,
            [
                "export",
                str(design_file),
                "--output-dir",
                str(out_dir),
                "--project-name",
                "kitchen",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        for name in ("kitchen_bom.txt", "kitchen_json.json", "kitchen_svg.svg", "kitchen_dxf.dxf"):
            assert (out_dir / name).exists()

    def test_export_subset(self, design_file: Path, saved_rules: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(design_file),
                "-d",
                str(tmp_path),
                "--formats",
                "bom,json",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 0
        assert "BOM:" in result.output
        assert "DXF:" not in result.output

    def test_unknown_export_format(
        self, design_file: Path, saved_rules: Path, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "export"
        result = runner.invoke(
            app,
            [
                "export",
                str(design_file),
                "-d",
                str(out_dir),
                "--formats",
                "bom,stl",
                "--rules",
                str(saved_rules),
            ],
        )

        assert result.exit_code == 1
        assert "Unknown formats: stl" in result.output
        assert not out_dir.exists()


class TestRulesCommands:
    """Test suite for the 'rules' command group."""

    def test_show_all(self, saved_rules: Path) -> None:
        result = runner.invoke(app, ["rules", "show", "--rules", str(saved_rules)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["construction"]["door_gap"] == 4.0

    def test_show_section(self, saved_rules: Path) -> None:
        result = runner.invoke(
            app, ["rules", "show", "--section", "hardware", "--rules", str(saved_rules)]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["hinges_per_door"] == 2

    def test_show_unknown_section(self, saved_rules: Path) -> None:
        result = runner.invoke(
            app, ["rules", "show", "-s", "paint", "--rules", str(saved_rules)]
        )

        assert result.exit_code == 1
        assert "Unknown rules section: paint" in result.output

    def test_update_section(self, saved_rules: Path, tmp_path: Path) -> None:
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"door_gap": 3}), encoding="utf-8")

        result = runner.invoke(
            app,
            ["rules", "update", str(patch), "--section", "construction", "--rules", str(saved_rules)],
        )

        assert result.exit_code == 0
        assert "Updated:" in result.output
        saved = json.loads(saved_rules.read_text(encoding="utf-8"))
        assert saved["construction"]["door_gap"] == 3.0

    def test_update_invalid_value(self, saved_rules: Path, tmp_path: Path) -> None:
        patch = tmp_path / "patch.json"
        patch.write_text(json.dumps({"upper_cabinet": {"depth_ratio": 2}}), encoding="utf-8")
        before = saved_rules.read_text(encoding="utf-8")

        result = runner.invoke(app, ["rules", "update", str(patch), "--rules", str(saved_rules)])

        assert result.exit_code == 1
        assert "upper_cabinet.depth_ratio" in result.output
        assert saved_rules.read_text(encoding="utf-8") == before

    def test_update_rejects_non_object(self, saved_rules: Path, tmp_path: Path) -> None:
        patch = tmp_path / "patch.json"
        patch.write_text("[1]", encoding="utf-8")

        result = runner.invoke(app, ["rules", "update", str(patch), "--rules", str(saved_rules)])

        assert result.exit_code == 1
        assert "must be a JSON object" in result.output

    def test_reset(self, saved_rules: Path) -> None:
        RuleStore(saved_rules).update({"door_gap": 2}, section="construction")

        result = runner.invoke(app, ["rules", "reset", "--rules", str(saved_rules)])

        assert result.exit_code == 0
        assert RuleStore(saved_rules).get().construction.door_gap == 4.0

    def test_reload_reports_settings(self, saved_rules: Path) -> None:
        result = runner.invoke(app, ["rules", "reload", "--rules", str(saved_rules)])

        assert result.exit_code == 0
        assert "Door gap: 4 mm" in result.output
        assert "Sheet size: 1220 x 2440 mm" in result.output

    def test_path(self, saved_rules: Path) -> None:
        result = runner.invoke(app, ["rules", "path", "--rules", str(saved_rules)])

        assert result.exit_code == 0
        assert str(saved_rules.resolve()) in result.output
