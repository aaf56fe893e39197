"""Unit tests for domain value objects and result types."""

import pytest

from casework.domain import BomItem, PartCategory, Rect, round_half_up
from casework.domain.bom import BomSummary
from casework.domain.drawing import ManufacturingLayout, PanelDetail
from casework.domain.rules import MaterialSpec
from casework.domain.value_objects import (
    BomUnit,
    horizontal_dimension,
    vertical_dimension,
)


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_halves_round_up(self) -> None:
        """Exact halves go up, unlike the built-in round."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(398.5) == 399

    def test_non_halves_round_to_nearest(self) -> None:
        assert round_half_up(2.4) == 2
        assert round_half_up(2.6) == 3
        assert round_half_up(398.0) == 398


class TestRect:
    """Tests for Rect."""

    def test_right_and_top(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert rect.right == 40
        assert rect.top == 60

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Rect(0, 0, -1, 10)

    def test_to_dict(self) -> None:
        assert Rect(1, 2, 3, 4).to_dict() == {"x": 1, "y": 2, "width": 3, "height": 4}


class TestDimensionLine:
    """Tests for the dimension line builders."""

    def test_horizontal_dimension(self) -> None:
        dim = horizontal_dimension(0, 800, -50, 800, "total width")
        assert dim.start.y == dim.end.y == -50
        assert dim.is_horizontal
        assert dim.to_dict()["label"] == "total width"

    def test_vertical_dimension_without_label(self) -> None:
        dim = vertical_dimension(850, 0, 870, 870)
        assert not dim.is_horizontal
        assert "label" not in dim.to_dict()
        assert dim.unit == "mm"


class TestMaterialSpec:
    """Tests for MaterialSpec.display_label."""

    def test_configured_label_wins(self) -> None:
        assert MaterialSpec(thickness=18, type="PB", label="18T PB").display_label == "18T PB"

    def test_label_built_from_thickness_and_type(self) -> None:
        assert MaterialSpec(thickness=18.0, type="PB").display_label == "18T PB"
        assert MaterialSpec(thickness=2.7, type="MDF").display_label == "2.7T MDF"


class TestBomItem:
    """Tests for BomItem."""

    def _item(self, **overrides) -> BomItem:
        values = dict(
            id="BOM-001",
            part_category=PartCategory.PANEL,
            name="Lower 0 Door",
            material="white matte MDF",
            width_mm=396,
            height_mm=716,
            depth_mm=18,
            quantity=1,
        )
        values.update(overrides)
        return BomItem(**values)

    def test_sheet_part_categories(self) -> None:
        assert self._item().is_sheet_part
        assert self._item(part_category=PartCategory.BOARD).is_sheet_part
        assert not self._item(part_category=PartCategory.HARDWARE).is_sheet_part

    def test_area_counts_quantity(self) -> None:
        assert self._item(quantity=2).area == 396 * 716 * 2

    def test_negative_dimension_rejected(self) -> None:
        with pytest.raises(ValueError):
            self._item(width_mm=-1)

    def test_to_dict_omits_missing_cabinet_ref(self) -> None:
        data = self._item().to_dict()
        assert "cabinet_ref" not in data
        assert data["unit"] == BomUnit.EACH.value
        assert data["part_category"] == "panel"


class TestBomSummary:
    """Tests for BomSummary derived counts."""

    def test_hardware_includes_accessories(self) -> None:
        categories = {category: 0 for category in PartCategory}
        categories[PartCategory.HARDWARE] = 3
        categories[PartCategory.ACCESSORY] = 2
        summary = BomSummary(total_items=5, categories=categories, sheet_estimate=0)
        assert summary.total_hardware == 5
        assert summary.to_dict()["categories"]["accessory"] == 2


class TestManufacturingLayout:
    """Tests for ManufacturingLayout grid properties."""

    def _detail(self, index: int) -> PanelDetail:
        return PanelDetail(
            bom_id=f"BOM-{index:03d}",
            name="Shelf",
            material="18T PB",
            rect=Rect(0, 0, 100, 50),
            dimensions=(),
            column=index % 3,
            row=index // 3,
        )

    def test_rows_round_up(self) -> None:
        layout = ManufacturingLayout(panel_details=tuple(self._detail(i) for i in range(4)))
        assert layout.rows == 2

    def test_empty_layout_has_no_rows(self) -> None:
        assert ManufacturingLayout().rows == 0
