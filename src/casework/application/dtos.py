"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from casework.domain import BomResult, BomRules, DrawingData, StructuredDesignData

VIEW_NAMES: tuple[str, ...] = (
    "front_view",
    "side_view",
    "plan_view",
    "manufacturing",
    "installation",
)


def normalize_view_name(name: str) -> str:
    """Accept short view names (``front``) as well as full ones (``front_view``).

    Raises:
        ValueError: If the name matches no view.
    """
    name = name.strip()
    if name in VIEW_NAMES:
        return name
    if f"{name}_view" in VIEW_NAMES:
        return f"{name}_view"
    raise ValueError(f"Unknown view: {name} (expected one of: {', '.join(VIEW_NAMES)})")


@dataclass
class GenerationOptions:
    """Options for one generation run.

    Attributes:
        include_manufacturing: Build the per-panel cut-sheet layout.
        include_installation: Build the wall installation layout.
        render_svg: Render the drawing to SVG documents.
        scale: SVG scale factor in pixels per millimeter.
        views: Views to render; all views when None.
    """

    include_manufacturing: bool = True
    include_installation: bool = True
    render_svg: bool = False
    scale: float = 0.5
    views: tuple[str, ...] | None = None

    def validate(self) -> list[str]:
        """Validate options and return a list of error messages."""
        errors: list[str] = []
        if self.scale <= 0:
            errors.append("Scale must be positive")
        for view in self.views or ():
            try:
                normalize_view_name(view)
            except ValueError as e:
                errors.append(str(e))
        return errors


@dataclass
class GenerationOutput:
    """Everything produced for one design.

    ``svgs`` maps every view name to its document; views that were not
    rendered map to an empty string and the mapping is empty when SVG
    rendering was not requested.
    """

    design: StructuredDesignData
    rules: BomRules
    bom: BomResult
    drawing: DrawingData
    svgs: dict[str, str] = field(default_factory=dict)
