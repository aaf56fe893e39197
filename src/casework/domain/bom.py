"""Bill of materials result types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .value_objects import BomUnit, PartCategory


@dataclass(frozen=True)
class BomItem:
    """One line of the bill of materials.

    Attributes:
        id: Sequential identifier, ``BOM-001`` onward.
        part_category: Category used for summaries and layout selection.
        name: Human readable part name.
        material: Material label or hardware type.
        width_mm: Width, or length for linear items.
        height_mm: Height, or thickness for linear items.
        depth_mm: Thickness for sheet parts, depth for equipment.
        quantity: Number of identical parts.
        unit: Counting unit.
        cabinet_ref: Owning cabinet (``lower_0``, ``upper_2``) if any.
    """

    id: str
    part_category: PartCategory
    name: str
    material: str
    width_mm: float
    height_mm: float
    depth_mm: float
    quantity: int
    unit: BomUnit = BomUnit.EACH
    cabinet_ref: str | None = None

    def __post_init__(self) -> None:
        if self.width_mm < 0 or self.height_mm < 0 or self.depth_mm < 0:
            raise ValueError(f"BOM item {self.id} has a negative dimension")
        if self.quantity < 0:
            raise ValueError(f"BOM item {self.id} has a negative quantity")

    @property
    def is_sheet_part(self) -> bool:
        """Door/drawer panels and carcass boards are cut from raw sheets."""
        return self.part_category in (PartCategory.PANEL, PartCategory.BOARD)

    @property
    def area(self) -> float:
        """Face area of all pieces of this line in square millimeters."""
        return self.width_mm * self.height_mm * self.quantity

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "part_category": self.part_category.value,
            "name": self.name,
            "material": self.material,
            "width_mm": self.width_mm,
            "height_mm": self.height_mm,
            "depth_mm": self.depth_mm,
            "quantity": self.quantity,
            "unit": self.unit.value,
        }
        if self.cabinet_ref is not None:
            data["cabinet_ref"] = self.cabinet_ref
        return data


@dataclass(frozen=True)
class BomSummary:
    """Aggregate counts over a bill of materials.

    ``categories`` counts BOM lines, not pieces; ``sheet_estimate`` is the
    number of raw sheets needed including the waste allowance.
    """

    total_items: int
    categories: dict[PartCategory, int]
    sheet_estimate: int

    @property
    def total_panels(self) -> int:
        return self.categories[PartCategory.PANEL]

    @property
    def total_hardware(self) -> int:
        return self.categories[PartCategory.HARDWARE] + self.categories[PartCategory.ACCESSORY]

    @property
    def total_equipment(self) -> int:
        return self.categories[PartCategory.EQUIPMENT]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_items": self.total_items,
            "total_panels": self.total_panels,
            "total_hardware": self.total_hardware,
            "total_equipment": self.total_equipment,
            "categories": {c.value: n for c, n in self.categories.items()},
            "sheet_estimate": self.sheet_estimate,
        }


@dataclass(frozen=True)
class BomResult:
    """Bill of materials for one design."""

    category: str
    style: str
    items: tuple[BomItem, ...]
    summary: BomSummary
    generated_at: str

    def items_in(self, category: PartCategory) -> list[BomItem]:
        return [item for item in self.items if item.part_category == category]

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "style": self.style,
            "items": [item.to_dict() for item in self.items],
            "summary": self.summary.to_dict(),
            "generated_at": self.generated_at,
        }
