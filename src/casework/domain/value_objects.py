"""Value objects for the casework domain.

All lengths are millimeters. Geometry uses the architectural frame: x grows
to the right from the left edge of the cabinet row and y grows upward from
the floor.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Furniture category of a design."""

    SINK = "sink"
    WARDROBE = "wardrobe"
    FRIDGE = "fridge"
    VANITY = "vanity"
    SHOE = "shoe"
    STORAGE = "storage"


class CabinetType(str, Enum):
    """Functional type of a single cabinet unit."""

    STANDARD = "standard"
    SINK = "sink"
    COOKTOP = "cooktop"
    DRAWER = "drawer"
    HANGER = "hanger"
    SHELF = "shelf"
    FRIDGE = "fridge"
    APPLIANCE = "appliance"
    CORNER = "corner"


class Tier(str, Enum):
    """Vertical tier a cabinet belongs to."""

    LOWER = "lower"
    UPPER = "upper"


class PartCategory(str, Enum):
    """Category of a bill-of-materials line."""

    PANEL = "panel"
    BOARD = "board"
    HARDWARE = "hardware"
    COUNTERTOP = "countertop"
    EQUIPMENT = "equipment"
    ACCESSORY = "accessory"
    FINISH = "finish"


class BomUnit(str, Enum):
    """Counting unit of a bill-of-materials line."""

    EACH = "ea"
    MILLIMETER = "mm"
    SET = "set"


class HardwareKind(str, Enum):
    """Hardware glyphs placed on the front view."""

    HINGE = "hinge"
    HANDLE = "handle"
    RAIL = "rail"


class UtilityKind(str, Enum):
    """Wall utility connections shown on the installation layout."""

    WATER = "water"
    EXHAUST = "exhaust"
    GAS = "gas"


class EquipmentKind(str, Enum):
    """Built-in equipment that may accompany a design."""

    SINK = "sink"
    FAUCET = "faucet"
    COOKTOP = "cooktop"
    HOOD = "hood"


class Confidence(str, Enum):
    """Confidence of the upstream wall measurement."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's ``round`` uses banker's rounding, which would make panel sizes
    differ from the workshop's arithmetic on exact halves.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(398.0)
        398
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Point:
    """2D point in millimeters."""

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its lower-left corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rect width and height must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Line:
    """Straight segment between two points."""

    x1: float
    y1: float
    x2: float
    y2: float

    def to_dict(self) -> dict[str, Any]:
        return {"x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}


@dataclass(frozen=True)
class DimensionLine:
    """Annotated measurement between two points.

    Attributes:
        start: First end of the measured span.
        end: Second end of the measured span.
        value: Measured value shown in the annotation.
        unit: Unit suffix shown after the value.
        label: Optional description shown in parentheses.
    """

    start: Point
    end: Point
    value: float
    unit: str = "mm"
    label: str | None = None

    @property
    def is_horizontal(self) -> bool:
        """True when the span runs mostly along the x axis."""
        return abs(self.end.y - self.start.y) < abs(self.end.x - self.start.x)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "value": self.value,
            "unit": self.unit,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


def horizontal_dimension(
    x1: float, x2: float, y: float, value: float, label: str | None = None
) -> DimensionLine:
    """Build a horizontal dimension line at height ``y``."""
    return DimensionLine(start=Point(x1, y), end=Point(x2, y), value=value, label=label)


def vertical_dimension(
    x: float, y1: float, y2: float, value: float, label: str | None = None
) -> DimensionLine:
    """Build a vertical dimension line at offset ``x``."""
    return DimensionLine(start=Point(x, y1), end=Point(x, y2), value=value, label=label)
