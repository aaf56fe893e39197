"""Application commands (use cases) for BOM and drawing generation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from casework.domain import BomGenerator, DrawingGenerator, StructuredDesignData

from .config import RuleStore
from .dtos import GenerationOptions, GenerationOutput

if TYPE_CHECKING:
    from casework.infrastructure.svg_renderer import DrawingSvgRenderer

logger = logging.getLogger(__name__)

RendererFactory = Callable[[float, "tuple[str, ...] | None"], "DrawingSvgRenderer"]


def _default_renderer(scale: float, views: tuple[str, ...] | None) -> DrawingSvgRenderer:
    from casework.infrastructure.svg_renderer import DrawingSvgRenderer

    return DrawingSvgRenderer(scale=scale, views=views)


class GenerateDrawingCommand:
    """Run the full pipeline for one design.

    Rules are read from the store on every call, so a rules update is picked
    up by the next execution without rebuilding the command.
    """

    def __init__(
        self,
        rule_store: RuleStore,
        renderer_factory: RendererFactory | None = None,
    ) -> None:
        self.rule_store = rule_store
        self.renderer_factory = renderer_factory or _default_renderer

    def execute(
        self,
        design: StructuredDesignData,
        options: GenerationOptions | None = None,
    ) -> GenerationOutput:
        """Generate the BOM, the drawing and optionally the SVG documents.

        Args:
            design: Normalized design data.
            options: Generation options; defaults when omitted.

        Returns:
            GenerationOutput carrying the rules that were used.

        Raises:
            ValueError: If the options are invalid.
        """
        options = options or GenerationOptions()
        errors = options.validate()
        if errors:
            raise ValueError("; ".join(errors))

        rules = self.rule_store.get()
        bom = BomGenerator(rules).generate(design)
        drawing = DrawingGenerator(rules).generate(
            design,
            bom=bom,
            include_manufacturing=options.include_manufacturing,
            include_installation=options.include_installation,
        )

        svgs: dict[str, str] = {}
        if options.render_svg:
            renderer = self.renderer_factory(options.scale, options.views)
            svgs = renderer.render(drawing)

        logger.debug(
            f"Generated {design.category.value} output: {len(bom.items)} BOM items, "
            f"{sum(1 for s in svgs.values() if s)} SVG views"
        )
        return GenerationOutput(
            design=design, rules=rules, bom=bom, drawing=drawing, svgs=svgs
        )
