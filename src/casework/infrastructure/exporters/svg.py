"""SVG exporter for the drawing views.

Reuses the SVG documents already rendered into the GenerationOutput when
present; otherwise renders them with the default scale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from casework.application.dtos import VIEW_NAMES
from casework.infrastructure.exporters.base import ExporterRegistry
from casework.infrastructure.svg_renderer import DEFAULT_SCALE, DrawingSvgRenderer

if TYPE_CHECKING:
    from casework.application.dtos import GenerationOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """Writes one SVG file per rendered view.

    ``export(output, path)`` writes the front view to ``path`` itself and
    every other view to ``{stem}_{view}.svg`` beside it.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, scale: float = DEFAULT_SCALE) -> None:
        self.scale = scale

    def render(self, output: GenerationOutput) -> dict[str, str]:
        """Return the view -> SVG mapping, rendering it if needed."""
        if any(output.svgs.values()):
            return output.svgs
        return DrawingSvgRenderer(scale=self.scale).render(output.drawing)

    def export(self, output: GenerationOutput, path: Path) -> None:
        svgs = self.render(output)
        path.write_text(svgs.get("front_view", ""), encoding="utf-8")
        others = {view: content for view, content in svgs.items() if view != "front_view"}
        written = self.export_views(others, path)
        logger.info(f"Exported front view to {path} and {len(written)} more views beside it")

    def export_string(self, output: GenerationOutput) -> str:
        return self.render(output).get("front_view", "")

    def export_views(self, svgs: dict[str, str], base_path: Path) -> list[Path]:
        """Write each non-empty view to ``{stem}_{view}.svg``.

        Args:
            svgs: Mapping of view name to SVG document.
            base_path: Base path; its stem and directory name the files.

        Returns:
            Paths of the files written, in view order.
        """
        created: list[Path] = []
        for view in VIEW_NAMES:
            content = svgs.get(view, "")
            if not content:
                continue
            file_path = base_path.parent / f"{base_path.stem}_{view}.svg"
            file_path.write_text(content, encoding="utf-8")
            created.append(file_path)
        return created
